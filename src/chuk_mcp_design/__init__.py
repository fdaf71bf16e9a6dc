"""
CHUK Design MCP - design-system workspaces for agents.

A workspace is a directory of JSON documents: core tokens, themed
semantic tokens, platform rules and component contracts. This package
validates them, compiles tokens per platform and theme, and checks
component usage against contracts.
"""

from chuk_mcp_design.errors import (
    Err,
    ErrorCode,
    Ok,
    Result,
    ValidationError,
    ValidationResult,
    WorkspaceError,
)
from chuk_mcp_design.workspace import SystemWorkspace, init_workspace

__version__ = "0.1.0"

__all__ = [
    "Err",
    "ErrorCode",
    "Ok",
    "Result",
    "SystemWorkspace",
    "ValidationError",
    "ValidationResult",
    "WorkspaceError",
    "__version__",
    "init_workspace",
]
