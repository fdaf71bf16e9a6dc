"""
Token tools - MCP tools for compiled tokens and workspace health.

Tools for compiling tokens for a platform/theme pair, listing the token
files present, and validating the whole workspace.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_design.compiler import export_tokens
from chuk_mcp_design.constants import ExportFormat, Platform, Theme
from chuk_mcp_design.errors import Err
from chuk_mcp_design.tools.responses import bad_argument, failure, success, unexpected
from chuk_mcp_design.workspace import SystemWorkspace

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _choices(enum_cls: type[Platform] | type[Theme] | type[ExportFormat]) -> str:
    return ", ".join(member.value for member in enum_cls)


def register_token_tools(mcp: ChukMCPServer, workspace: SystemWorkspace) -> dict[str, Any]:
    """
    Register token and workspace tools with the MCP server.

    Args:
        mcp: The MCP server instance
        workspace: The design-system workspace

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def design_get_tokens(platform: str, theme: str, format: str = "json") -> str:
        """
        Get compiled design tokens.

        Resolves the theme's semantic tokens against the core palette and
        applies the platform's unit rules.

        Args:
            platform: Target platform (web, rn)
            theme: Theme (light, dark)
            format: Output format (json, css, ts). json returns the token
                map; css and ts also return the rendered source.

        Returns:
            JSON string with compiled tokens

        Example:
            design_get_tokens(platform="web", theme="dark", format="css")
        """
        try:
            try:
                platform_enum = Platform(platform)
            except ValueError:
                return bad_argument(
                    f"Invalid platform: {platform}. Expected one of: {_choices(Platform)}"
                )
            try:
                theme_enum = Theme(theme)
            except ValueError:
                return bad_argument(f"Invalid theme: {theme}. Expected one of: {_choices(Theme)}")
            try:
                fmt = ExportFormat(format)
            except ValueError:
                return bad_argument(
                    f"Invalid format: {format}. Expected one of: {_choices(ExportFormat)}"
                )

            result = await workspace.compile_tokens(platform_enum, theme_enum)
            if isinstance(result, Err):
                return failure(result.error)

            payload: dict[str, Any] = {
                "platform": platform_enum.value,
                "theme": theme_enum.value,
                "format": fmt.value,
                "tokens": result.value,
            }
            if fmt != ExportFormat.JSON:
                payload["output"] = export_tokens(result.value, fmt)
            return success(**payload)
        except Exception as e:
            logger.exception(f"Failed to get tokens for {platform}/{theme}")
            return unexpected(e)

    tools["design_get_tokens"] = design_get_tokens

    @mcp.tool  # type: ignore[arg-type]
    async def design_list_token_files() -> str:
        """
        List token files in the workspace.

        Returns:
            JSON string with core, semantic and platform files

        Example:
            design_list_token_files()
        """
        try:
            manifest = await workspace.list_token_files()
            return success(files=manifest.model_dump(mode="json"), count=manifest.count())
        except Exception as e:
            logger.exception("Failed to list token files")
            return unexpected(e)

    tools["design_list_token_files"] = design_list_token_files

    @mcp.tool  # type: ignore[arg-type]
    async def design_validate_workspace() -> str:
        """
        Validate the entire workspace.

        Checks the system manifest, every contract, core tokens, and any
        semantic and platform files present.

        Returns:
            JSON string with valid flag and one error per failing file

        Example:
            design_validate_workspace()
        """
        try:
            result = await workspace.validate()
            return success(**result.to_dict())
        except Exception as e:
            logger.exception("Failed to validate workspace")
            return unexpected(e)

    tools["design_validate_workspace"] = design_validate_workspace

    return tools
