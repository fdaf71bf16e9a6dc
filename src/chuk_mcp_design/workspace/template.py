"""
Workspace template - scaffolds a starter design system.

The starter documents validate cleanly and compile for every
platform/theme pair, so a fresh workspace is immediately usable.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from chuk_mcp_design.constants import Platform, Theme
from chuk_mcp_design.errors import Err, ErrorCode, Ok, Result, err
from chuk_mcp_design.workspace.manager import SystemWorkspace

logger = logging.getLogger(__name__)

STARTER_SYSTEM: dict[str, Any] = {
    "name": "my-design-system",
    "version": "0.1.0",
    "description": "A DesignAgent-managed design system",
    "componentSource": {"type": "npm", "value": "@uistack/components"},
    "defaultPlatform": "web",
    "defaultTheme": "light",
}

STARTER_CORE_TOKENS: dict[str, Any] = {
    "$version": "1.0.0",
    "tokens": {
        "neutral.0": {"value": "#ffffff", "category": "color"},
        "neutral.200": {"value": "#e4e4e7", "category": "color"},
        "neutral.600": {"value": "#52525b", "category": "color"},
        "neutral.800": {"value": "#27272a", "category": "color"},
        "neutral.900": {"value": "#18181b", "category": "color"},
        "brand.400": {"value": "#60a5fa", "category": "color"},
        "brand.500": {"value": "#3b82f6", "category": "color"},
        "spacing.1": {"value": 4, "category": "spacing"},
        "spacing.2": {"value": 8, "category": "spacing"},
        "spacing.4": {"value": 16, "category": "spacing"},
        "radius.md": {"value": 10, "category": "borderRadius"},
        "border.thin": {"value": 1, "category": "borderWidth"},
        "fontSize.body": {"value": 16, "category": "fontSize"},
        "lineHeight.body": {"value": 24, "category": "lineHeight"},
        "fontWeight.medium": {"value": 500, "category": "fontWeight"},
        "font.family.inter": {"value": "Inter, system-ui, sans-serif", "category": "fontFamily"},
    },
}

_SHARED_SEMANTIC: dict[str, dict[str, str]] = {
    "space.sm": {"ref": "spacing.2"},
    "space.base": {"ref": "spacing.4"},
    "radius.default": {"ref": "radius.md"},
    "border.default": {"ref": "border.thin"},
    "font.size.body": {"ref": "fontSize.body"},
    "font.lineHeight.body": {"ref": "lineHeight.body"},
    "font.weight.label": {"ref": "fontWeight.medium"},
    "font.family.default": {"ref": "font.family.inter"},
}

STARTER_SEMANTIC_TOKENS: dict[Theme, dict[str, Any]] = {
    Theme.LIGHT: {
        "$version": "1.0.0",
        "$theme": "light",
        "tokens": {
            "color.bg": {"ref": "neutral.0", "description": "Background color"},
            "color.text": {"ref": "neutral.900", "description": "Primary text color"},
            "color.mutedText": {"ref": "neutral.600", "description": "Muted text color"},
            "color.border": {"ref": "neutral.200", "description": "Border color"},
            "color.primary": {"ref": "brand.500", "description": "Primary color"},
            **_SHARED_SEMANTIC,
        },
    },
    Theme.DARK: {
        "$version": "1.0.0",
        "$theme": "dark",
        "tokens": {
            "color.bg": {"ref": "neutral.900", "description": "Background color"},
            "color.text": {"ref": "neutral.0", "description": "Primary text color"},
            "color.mutedText": {"ref": "neutral.200", "description": "Muted text color"},
            "color.border": {"ref": "neutral.800", "description": "Border color"},
            "color.primary": {"ref": "brand.400", "description": "Primary color"},
            **_SHARED_SEMANTIC,
        },
    },
}

_NUMERIC_CATEGORIES = ("spacing", "borderRadius", "borderWidth", "lineHeight")

STARTER_PLATFORM_RULES: dict[Platform, dict[str, Any]] = {
    Platform.WEB: {
        "$version": "1.0.0",
        "$platform": "web",
        "rules": [
            *({"category": c, "transform": "px"} for c in _NUMERIC_CATEGORIES),
            {"category": "fontSize", "transform": "rem", "remBase": 16},
            {"category": "fontWeight", "transform": "number"},
            {"category": "color", "transform": "passthrough"},
        ],
    },
    Platform.RN: {
        "$version": "1.0.0",
        "$platform": "rn",
        "rules": [
            *({"category": c, "transform": "number"} for c in _NUMERIC_CATEGORIES),
            {"category": "fontSize", "transform": "number"},
            {"category": "fontWeight", "transform": "number"},
            {"category": "color", "transform": "passthrough"},
        ],
    },
}

STARTER_BUTTON_CONTRACT: dict[str, Any] = {
    "$version": "1.0.0",
    "name": "Button",
    "description": "Primary action trigger",
    "platformTargets": ["web", "rn"],
    "props": {
        "label": {"type": "string", "required": True, "description": "Button text"},
        "variant": {
            "type": "enum",
            "values": ["primary", "secondary", "ghost"],
            "default": "primary",
        },
        "size": {"type": "enum", "values": ["sm", "md", "lg"], "default": "md"},
        "disabled": {"type": "boolean", "default": False},
    },
    "variants": [
        {"name": "primary", "props": {"variant": "primary"}},
        {"name": "secondary", "props": {"variant": "secondary"}},
    ],
    "states": [{"name": "hover"}, {"name": "pressed"}, {"name": "disabled"}],
    "code": {"importPath": "@uistack/components", "exportName": "Button"},
    "examples": [
        {"name": "Default", "props": {"label": "Save"}},
        {"name": "Small ghost", "props": {"label": "Cancel", "variant": "ghost", "size": "sm"}},
        {"name": "Disabled", "props": {"label": "Submit", "disabled": True}},
    ],
}


async def init_workspace(root_path: Path | str, force: bool = False) -> Result[SystemWorkspace]:
    """
    Create a starter workspace.

    Args:
        root_path: Directory to initialize (created if missing)
        force: Overwrite an existing workspace

    Returns:
        Ok with the new workspace, or Err(WORKSPACE_INVALID_STRUCTURE) if a
        workspace already exists there and force is not set
    """
    workspace = SystemWorkspace(root_path)

    if workspace.system_path.exists() and not force:
        return err(
            ErrorCode.WORKSPACE_INVALID_STRUCTURE,
            "Workspace already exists. Use force to overwrite.",
            str(workspace.system_path),
        )
    if workspace.root_path.exists() and not workspace.root_path.is_dir():
        return err(
            ErrorCode.WORKSPACE_INVALID_STRUCTURE,
            f"Not a directory: {workspace.root_path}",
            str(workspace.root_path),
        )

    logger.info(f"Initializing workspace at {workspace.root_path}")

    writes = [
        await workspace.write_system(STARTER_SYSTEM),
        await workspace.write_core_tokens(STARTER_CORE_TOKENS),
        *[
            await workspace.write_semantic_tokens(theme, doc)
            for theme, doc in STARTER_SEMANTIC_TOKENS.items()
        ],
        *[
            await workspace.write_platform_rules(platform, doc)
            for platform, doc in STARTER_PLATFORM_RULES.items()
        ],
        await workspace.write_contract("Button", STARTER_BUTTON_CONTRACT),
    ]
    for outcome in writes:
        if isinstance(outcome, Err):
            return outcome

    return Ok(workspace)
