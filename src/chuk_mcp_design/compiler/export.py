"""
Exporters - render a compiled token map for consumption by code.

Formats:
- json: The map as an indented JSON object
- css: Custom properties on :root (dots become dashes)
- ts: A typed, readonly TypeScript module
"""

from __future__ import annotations

import json

from chuk_mcp_design.compiler.tokens import format_number
from chuk_mcp_design.constants import JSON_INDENT, ExportFormat
from chuk_mcp_design.models.tokens import CompiledTokens


def css_variable_name(token_name: str) -> str:
    """'color.bg' -> '--color-bg'."""
    return "--" + token_name.replace(".", "-")


def to_json(tokens: CompiledTokens) -> str:
    return json.dumps(tokens, indent=JSON_INDENT) + "\n"


def to_css(tokens: CompiledTokens) -> str:
    lines = [":root {"]
    for name, value in tokens.items():
        rendered = value if isinstance(value, str) else format_number(value)
        lines.append(f"  {css_variable_name(name)}: {rendered};")
    lines.append("}")
    return "\n".join(lines) + "\n"


def to_ts(tokens: CompiledTokens) -> str:
    lines = ["export const tokens = {"]
    for name, value in tokens.items():
        lines.append(f"  {json.dumps(name)}: {json.dumps(value)},")
    lines.append("} as const;")
    lines.append("")
    lines.append("export type TokenName = keyof typeof tokens;")
    return "\n".join(lines) + "\n"


def export_tokens(tokens: CompiledTokens, fmt: ExportFormat | str = ExportFormat.JSON) -> str:
    """
    Render compiled tokens in the requested format.

    Args:
        tokens: Compiled token map
        fmt: 'json', 'css' or 'ts'

    Returns:
        The rendered text

    Raises:
        ValueError: If the format is unknown
    """
    fmt = ExportFormat(fmt)
    if fmt == ExportFormat.JSON:
        return to_json(tokens)
    if fmt == ExportFormat.CSS:
        return to_css(tokens)
    return to_ts(tokens)
