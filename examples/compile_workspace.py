#!/usr/bin/env python3
"""
Example: Scaffolding a workspace and compiling its tokens.

This demonstrates the full loop: create a starter design system, check
component usage against a contract, and compile the same semantic
tokens for web and React Native.

Usage:
    python examples/compile_workspace.py
"""

import asyncio
import tempfile
from pathlib import Path

from chuk_mcp_design.compiler import export_tokens
from chuk_mcp_design.errors import Err
from chuk_mcp_design.validation import validate_usage
from chuk_mcp_design.workspace import init_workspace


async def main() -> None:
    """Demonstrate the workspace engine."""
    print("CHUK Design Workspace Demo")
    print("=" * 40)
    print()

    with tempfile.TemporaryDirectory() as tmp:
        result = await init_workspace(Path(tmp) / "acme")
        if isinstance(result, Err):
            print(f"Failed to initialize: {result.error.message}")
            return
        workspace = result.value

        validation = await workspace.validate()
        print(f"Workspace valid: {validation.valid}")
        print(f"Components: {', '.join(await workspace.list_contracts())}")
        print()

        # Check a few usages of Button
        button = (await workspace.read_contract("Button")).unwrap()
        print("Button usage checks:")
        for props in (
            {"label": "Save"},
            {"label": "Save", "size": "xl"},
            {"variant": "ghost", "color": "red"},
        ):
            usage = validate_usage(button, props)
            status = "ok" if usage.valid else ", ".join(e.code for e in usage.errors)
            print(f"  {props}: {status}")
        print()

        # Same semantic keys, different units per platform
        for platform, theme in (("web", "light"), ("rn", "dark")):
            tokens = (await workspace.compile_tokens(platform, theme)).unwrap()
            print(f"{platform}/{theme}:")
            for name in ("color.bg", "space.base", "font.size.body"):
                print(f"  {name} = {tokens[name]!r}")
            print()

        web = (await workspace.compile_tokens("web", "light")).unwrap()
        print("CSS export (web/light):")
        print(export_tokens(web, "css"))


if __name__ == "__main__":
    asyncio.run(main())
