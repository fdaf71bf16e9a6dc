#!/usr/bin/env python3
"""
designagent - command line interface for design-system workspaces.

Commands:
- init: Scaffold a starter workspace
- validate: Validate every document in a workspace
- tokens: Compile tokens for a platform and theme
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from chuk_mcp_design.compiler import export_tokens
from chuk_mcp_design.constants import (
    CONTRACTS_DIR,
    ExportFormat,
    Platform,
    Theme,
    contract_file,
)
from chuk_mcp_design.errors import Err, WorkspaceError
from chuk_mcp_design.workspace import SystemWorkspace, init_workspace


def _print_error(error: WorkspaceError) -> None:
    print(f"Error [{error.code.value}]: {error.message}", file=sys.stderr)
    if error.path:
        print(f"  at {error.path}", file=sys.stderr)


async def cmd_init(args: argparse.Namespace) -> int:
    target = Path(args.path).resolve()
    print(f"Initializing DesignAgent workspace at: {target}")

    result = await init_workspace(target, force=args.force)
    if isinstance(result, Err):
        _print_error(result.error)
        return 1

    workspace = result.value
    tree = await workspace.file_tree()
    print()
    print("Workspace initialized successfully!")
    print()
    print("Structure created:")
    for path in [*tree.tokens, *tree.contracts, tree.system]:
        print(f"  {path}")
    print()
    print("Next steps:")
    print("  1. Edit system.json with your design system name")
    print("  2. Add tokens in tokens/")
    print(f"  3. Define contracts in {CONTRACTS_DIR}/")
    print("  4. Run: designagent validate")
    return 0


async def cmd_validate(args: argparse.Namespace) -> int:
    workspace = SystemWorkspace(Path(args.workspace).resolve())
    print(f"Validating workspace: {workspace.root_path}")
    print()

    if not await workspace.exists():
        print("Error: Workspace not found.", file=sys.stderr)
        print('Run "designagent init" to create a workspace.', file=sys.stderr)
        return 1

    result = await workspace.validate()
    if not result.valid:
        print("Validation failed!", file=sys.stderr)
        print(file=sys.stderr)
        print(f"Found {len(result.errors)} error(s):", file=sys.stderr)
        print(file=sys.stderr)
        for error in result.errors:
            print(f"  [{error.code}] {error.path}", file=sys.stderr)
            print(f"    {error.message}", file=sys.stderr)
            print(file=sys.stderr)
        return 1

    print("Workspace is valid!")
    print()

    system = (await workspace.read_system()).unwrap()
    contracts = await workspace.list_contracts()
    token_files = await workspace.list_token_files()

    print(f"System: {system.name} v{system.version}")
    print(f"Contracts: {len(contracts)}")
    for name in contracts:
        print(f"  - {name} ({contract_file(name)})")
    print(f"Token files: {token_files.count()}")
    print(f"  Core: {len(token_files.core)}")
    themes = ", ".join(t.value for t in token_files.themes())
    print(f"  Semantic: {len(token_files.semantic)} ({themes})")
    platforms = ", ".join(p.value for p in token_files.platforms())
    print(f"  Platform: {len(token_files.platform)} ({platforms})")
    return 0


async def cmd_tokens(args: argparse.Namespace) -> int:
    workspace = SystemWorkspace(Path(args.workspace).resolve())

    result = await workspace.compile_tokens(args.platform, args.theme)
    if isinstance(result, Err):
        _print_error(result.error)
        return 1

    sys.stdout.write(export_tokens(result.value, args.format))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="designagent", description="Design-system workspace tooling"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    init = commands.add_parser("init", help="Scaffold a starter workspace")
    init.add_argument("path", nargs="?", default=".", help="Target directory (default: .)")
    init.add_argument("--force", action="store_true", help="Overwrite an existing workspace")
    init.set_defaults(func=cmd_init)

    validate = commands.add_parser("validate", help="Validate a workspace")
    validate.add_argument("-w", "--workspace", default=".", help="Workspace root (default: .)")
    validate.set_defaults(func=cmd_validate)

    tokens = commands.add_parser("tokens", help="Compile tokens for a platform and theme")
    tokens.add_argument("-w", "--workspace", default=".", help="Workspace root (default: .)")
    tokens.add_argument(
        "--platform",
        choices=[p.value for p in Platform],
        default=Platform.WEB.value,
        help="Target platform (default: web)",
    )
    tokens.add_argument(
        "--theme",
        choices=[t.value for t in Theme],
        default=Theme.LIGHT.value,
        help="Theme (default: light)",
    )
    tokens.add_argument(
        "--format",
        choices=[f.value for f in ExportFormat],
        default=ExportFormat.JSON.value,
        help="Output format (default: json)",
    )
    tokens.set_defaults(func=cmd_tokens)

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)

    code = asyncio.run(args.func(args))
    if code:
        sys.exit(code)


if __name__ == "__main__":
    main()
