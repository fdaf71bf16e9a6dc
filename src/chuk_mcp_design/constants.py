"""
Constants and enums for the design-system workspace.

No magic strings - use enums for every closed set of wire values.
"""

from enum import Enum


class Platform(str, Enum):
    """Target platforms for token compilation and component contracts."""

    WEB = "web"
    RN = "rn"  # React Native


class Theme(str, Enum):
    """Themes for semantic token resolution."""

    LIGHT = "light"
    DARK = "dark"


class TokenCategory(str, Enum):
    """Closed set of core token categories."""

    COLOR = "color"
    SPACING = "spacing"
    FONT_SIZE = "fontSize"
    LINE_HEIGHT = "lineHeight"
    BORDER_RADIUS = "borderRadius"
    BORDER_WIDTH = "borderWidth"
    FONT_FAMILY = "fontFamily"
    FONT_WEIGHT = "fontWeight"


class TokenTransform(str, Enum):
    """Platform unit transforms for numeric token values."""

    PX = "px"  # 16 -> "16px"
    REM = "rem"  # 16 -> "1rem"
    NUMBER = "number"  # 16 -> 16
    PASSTHROUGH = "passthrough"


class PropType(str, Enum):
    """Component prop types."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ENUM = "enum"


class ComponentSourceType(str, Enum):
    """Where a design system's component implementations live."""

    NPM = "npm"
    PATH = "path"


class ExportFormat(str, Enum):
    """Output formats for compiled tokens."""

    JSON = "json"
    CSS = "css"
    TS = "ts"


# Workspace layout - fixed names relative to the workspace root
SYSTEM_FILE = "system.json"
TOKENS_DIR = "tokens"
CONTRACTS_DIR = "contracts"
CORE_TOKENS_FILE = "core.json"
CONTRACT_SUFFIX = ".contract.json"

# Base font size for rem transforms when a rule has no remBase
DEFAULT_REM_BASE = 16

# Indentation used for every document we write
JSON_INDENT = 2

# Environment variable naming the workspace root for the MCP server
WORKSPACE_ENV_VAR = "DESIGNAGENT_WORKSPACE"


def semantic_tokens_file(theme: Theme) -> str:
    """File name of the semantic token set for a theme."""
    return f"semantic.{theme.value}.json"


def platform_rules_file(platform: Platform) -> str:
    """File name of the platform rule set for a platform."""
    return f"platform.{platform.value}.json"


def contract_file(name: str) -> str:
    """File name of a component contract."""
    return f"{name}{CONTRACT_SUFFIX}"
