"""
Compilation pipeline - turns the three token layers into platform values.

The pipeline:
    SemanticTokens → CoreTokens → PlatformRules → CompiledTokens
    → json / css / ts export
"""

from chuk_mcp_design.compiler.export import css_variable_name, export_tokens
from chuk_mcp_design.compiler.tokens import TokenCompiler, compile_tokens, format_number

__all__ = [
    "TokenCompiler",
    "compile_tokens",
    "css_variable_name",
    "export_tokens",
    "format_number",
]
