"""
Pydantic models for the design-system documents.

This module provides:
- CoreTokens / SemanticTokens / PlatformRules: The three token layers
- ComponentContract: Typed prop schema for a UI component
- SystemManifest: Workspace metadata
- TokenFileManifest: Token files present in a workspace
"""

from chuk_mcp_design.models.contract import (
    CodeReference,
    ComponentContract,
    ComponentExample,
    ComponentSource,
    PropDefinition,
    StateDefinition,
    SystemManifest,
    VariantDefinition,
)
from chuk_mcp_design.models.tokens import (
    CompiledTokens,
    CoreToken,
    CoreTokens,
    PlatformFileEntry,
    PlatformRule,
    PlatformRules,
    SemanticFileEntry,
    SemanticToken,
    SemanticTokens,
    TokenFileManifest,
)

__all__ = [
    "CodeReference",
    "CompiledTokens",
    "ComponentContract",
    "ComponentExample",
    "ComponentSource",
    "CoreToken",
    "CoreTokens",
    "PlatformFileEntry",
    "PlatformRule",
    "PlatformRules",
    "PropDefinition",
    "SemanticFileEntry",
    "SemanticToken",
    "SemanticTokens",
    "StateDefinition",
    "SystemManifest",
    "TokenFileManifest",
    "VariantDefinition",
]
