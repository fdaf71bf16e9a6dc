#!/usr/bin/env python3
"""
Async Design MCP Server using chuk-mcp-server

This server exposes a design-system workspace to agents. The workspace
is a directory of JSON documents: core tokens, themed semantic tokens,
platform unit rules and component contracts.

The server provides tools for:
- Listing components and reading their contracts
- Validating component usage before rendering
- Compiling tokens for a platform and theme (json, css, ts)
- Listing token files and validating the whole workspace
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_design.constants import WORKSPACE_ENV_VAR
from chuk_mcp_design.tools import register_component_tools, register_token_tools
from chuk_mcp_design.workspace import SystemWorkspace

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-design")

# Workspace root - from the environment, else the current directory
WORKSPACE_ROOT = Path(os.environ.get(WORKSPACE_ENV_VAR) or Path.cwd()).resolve()

workspace = SystemWorkspace(WORKSPACE_ROOT)

# Register all tools
component_tools = register_component_tools(mcp, workspace)
token_tools = register_token_tools(mcp, workspace)

# Export tool functions for direct access
design_list_components = component_tools["design_list_components"]
design_get_component = component_tools["design_get_component"]
design_validate_usage = component_tools["design_validate_usage"]

design_get_tokens = token_tools["design_get_tokens"]
design_list_token_files = token_tools["design_list_token_files"]
design_validate_workspace = token_tools["design_validate_workspace"]

logger.info("CHUK Design MCP Server initialized")
logger.info(f"  Workspace: {WORKSPACE_ROOT}")
