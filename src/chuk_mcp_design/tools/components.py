"""
Component tools - MCP tools for component contract discovery and usage checks.

Tools for listing components, reading a contract, and validating a
prop bag against a contract before it is rendered.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_design.errors import Err
from chuk_mcp_design.tools.responses import failure, success, unexpected
from chuk_mcp_design.validation import validate_usage
from chuk_mcp_design.workspace import SystemWorkspace

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_component_tools(mcp: ChukMCPServer, workspace: SystemWorkspace) -> dict[str, Any]:
    """
    Register component contract tools with the MCP server.

    Args:
        mcp: The MCP server instance
        workspace: The design-system workspace

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def design_list_components() -> str:
        """
        List available components.

        Returns the name of every contract in the workspace's
        contracts/ directory, sorted.

        Returns:
            JSON string with component names

        Example:
            design_list_components()
        """
        try:
            names = await workspace.list_contracts()
            return success(components=names, count=len(names))
        except Exception as e:
            logger.exception("Failed to list components")
            return unexpected(e)

    tools["design_list_components"] = design_list_components

    @mcp.tool  # type: ignore[arg-type]
    async def design_get_component(name: str) -> str:
        """
        Get a component contract.

        Returns the full contract: props with their types, allowed enum
        values and defaults, variants, states, the code import and
        usage examples.

        Args:
            name: Component name (e.g. "Button")

        Returns:
            JSON string with the contract document

        Example:
            design_get_component(name="Button")
        """
        try:
            result = await workspace.read_contract(name)
            if isinstance(result, Err):
                return failure(result.error)

            return success(contract=result.value.to_document())
        except Exception as e:
            logger.exception(f"Failed to get component {name}")
            return unexpected(e)

    tools["design_get_component"] = design_get_component

    @mcp.tool  # type: ignore[arg-type]
    async def design_validate_usage(component: str, props: dict[str, Any]) -> str:
        """
        Validate props against a component contract.

        Reports every problem in one pass: missing required props,
        unknown props, wrong types and enum values outside the
        allowed set.

        Args:
            component: Component name
            props: Prop values to check

        Returns:
            JSON string with valid flag and errors

        Example:
            design_validate_usage(
                component="Button",
                props={"label": "Save", "size": "md"}
            )
        """
        try:
            result = await workspace.read_contract(component)
            if isinstance(result, Err):
                return failure(result.error)

            validation = validate_usage(result.value, props)
            return success(component=component, **validation.to_dict())
        except Exception as e:
            logger.exception(f"Failed to validate usage of {component}")
            return unexpected(e)

    tools["design_validate_usage"] = design_validate_usage

    return tools
