"""
Workspace management - the façade over a design-system directory.

This module provides:
- SystemWorkspace: Read/write/validate/compile over one workspace root
- WorkspaceTree: Grouped file listing for editors
- init_workspace: Scaffold a starter workspace
"""

from chuk_mcp_design.workspace.manager import SystemWorkspace, WorkspaceTree
from chuk_mcp_design.workspace.template import init_workspace

__all__ = [
    "SystemWorkspace",
    "WorkspaceTree",
    "init_workspace",
]
