"""
MCP tool implementations.

Tools are organized by domain:
- components - Contract discovery and usage validation
- tokens - Token compilation, token files, workspace validation
"""

from chuk_mcp_design.tools.components import register_component_tools
from chuk_mcp_design.tools.tokens import register_token_tools

__all__ = [
    "register_component_tools",
    "register_token_tools",
]
