"""
Token models - the three token layers of a design system.

Core tokens hold raw, platform-neutral values. Semantic tokens are
theme-scoped aliases that point at exactly one core token. Platform
rules say how numeric values are rendered for a target platform.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from chuk_mcp_design.constants import Platform, Theme, TokenCategory, TokenTransform

# Flat semantic key -> rendered value, for one (platform, theme) pair
CompiledTokens = dict[str, str | int | float]


class CoreToken(BaseModel):
    """A raw primitive value with an optional category tag."""

    value: str | int | float = Field(..., description="Raw value (color, number, font stack)")
    category: TokenCategory | None = Field(None, description="Token category")
    description: str | None = Field(None, description="Human-readable description")

    model_config = {"frozen": True}


class CoreTokens(BaseModel):
    """Contents of tokens/core.json."""

    schema_uri: str | None = Field(None, alias="$schema")
    version: str | None = Field(None, alias="$version")
    tokens: dict[str, CoreToken] = Field(default_factory=dict)

    model_config = {"frozen": True, "populate_by_name": True}


class SemanticToken(BaseModel):
    """Intent-based alias referencing a core token key."""

    ref: str = Field(..., description="Core token key, e.g. 'neutral.500'")
    description: str | None = Field(None, description="Human-readable description")

    model_config = {"frozen": True}


class SemanticTokens(BaseModel):
    """Contents of tokens/semantic.<theme>.json."""

    schema_uri: str | None = Field(None, alias="$schema")
    version: str | None = Field(None, alias="$version")
    theme: Theme = Field(..., alias="$theme")
    tokens: dict[str, SemanticToken] = Field(default_factory=dict)

    model_config = {"frozen": True, "populate_by_name": True}


class PlatformRule(BaseModel):
    """How numeric tokens of one category render on a platform."""

    category: str = Field(..., description="Token category this rule applies to")
    transform: TokenTransform = Field(..., description="Transform to apply")
    rem_base: int | float | None = Field(None, alias="remBase", description="Base for rem")

    model_config = {"frozen": True, "populate_by_name": True}


class PlatformRules(BaseModel):
    """Contents of tokens/platform.<platform>.json."""

    schema_uri: str | None = Field(None, alias="$schema")
    version: str | None = Field(None, alias="$version")
    platform: Platform = Field(..., alias="$platform")
    rules: list[PlatformRule] = Field(default_factory=list)

    model_config = {"frozen": True, "populate_by_name": True}


class SemanticFileEntry(BaseModel):
    """A semantic token file and the theme it belongs to."""

    file: str
    theme: Theme


class PlatformFileEntry(BaseModel):
    """A platform rules file and the platform it belongs to."""

    file: str
    platform: Platform


class TokenFileManifest(BaseModel):
    """Token files present in a workspace, classified by layer."""

    core: list[str] = Field(default_factory=list)
    semantic: list[SemanticFileEntry] = Field(default_factory=list)
    platform: list[PlatformFileEntry] = Field(default_factory=list)

    def count(self) -> int:
        """Total number of recognized token files."""
        return len(self.core) + len(self.semantic) + len(self.platform)

    def themes(self) -> list[Theme]:
        return [entry.theme for entry in self.semantic]

    def platforms(self) -> list[Platform]:
        return [entry.platform for entry in self.platform]
