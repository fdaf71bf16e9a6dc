"""
Contract models - component contracts and the system manifest.

A contract is the canonical definition of a UI component: the props it
accepts, its variants and states, where its code lives, and worked
examples of its usage.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from chuk_mcp_design.constants import ComponentSourceType, Platform, PropType, Theme


class PropDefinition(BaseModel):
    """Type and constraints of a single component prop."""

    type: PropType = Field(..., description="Prop type")
    values: list[str] | None = Field(None, description="Allowed values (enum props)")
    default: Any = Field(None, description="Default value")
    required: bool | None = Field(None, description="Prop must be supplied")
    description: str | None = Field(None, description="Human-readable description")

    model_config = {"extra": "allow"}

    @property
    def is_required(self) -> bool:
        return bool(self.required)


class VariantDefinition(BaseModel):
    """A named preset of prop values."""

    name: str
    description: str | None = None
    props: dict[str, Any] = Field(default_factory=dict)

    model_config = {"extra": "allow"}


class StateDefinition(BaseModel):
    """An interactive state (hover, disabled, ...)."""

    name: str
    description: str | None = None

    model_config = {"extra": "allow"}


class CodeReference(BaseModel):
    """Where the component implementation is imported from."""

    import_path: str = Field(..., alias="importPath")
    export_name: str | None = Field(None, alias="exportName")

    model_config = {"extra": "allow", "populate_by_name": True}


class ComponentExample(BaseModel):
    """A worked usage example of a component."""

    name: str | None = None
    description: str | None = None
    props: dict[str, Any] = Field(default_factory=dict)

    model_config = {"extra": "allow"}


class ComponentContract(BaseModel):
    """Contents of contracts/<Name>.contract.json."""

    schema_uri: str | None = Field(None, alias="$schema")
    version: str | None = Field(None, alias="$version")
    name: str = Field(..., description="Component name (PascalCase)")
    description: str | None = Field(None, description="Human-readable description")
    platform_targets: list[Platform] = Field(..., alias="platformTargets")
    props: dict[str, PropDefinition] = Field(default_factory=dict)
    variants: list[VariantDefinition] | None = None
    states: list[StateDefinition] | None = None
    code: CodeReference | None = None
    examples: list[ComponentExample] | None = None

    model_config = {"populate_by_name": True}

    def get_prop(self, name: str) -> PropDefinition | None:
        return self.props.get(name)

    def required_props(self) -> list[str]:
        """Names of props that must be supplied."""
        return [name for name, prop in self.props.items() if prop.is_required]

    def to_document(self) -> dict[str, Any]:
        """Wire form, as written to disk."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ComponentSource(BaseModel):
    """Component package or path backing the design system."""

    type: ComponentSourceType
    value: str

    model_config = {"frozen": True}


class SystemManifest(BaseModel):
    """Contents of system.json - workspace metadata."""

    schema_uri: str | None = Field(None, alias="$schema")
    name: str = Field(..., description="Design system name")
    version: str = Field(..., description="Design system version")
    description: str | None = None
    component_source: ComponentSource | None = Field(None, alias="componentSource")
    default_platform: Platform | None = Field(None, alias="defaultPlatform")
    default_theme: Theme | None = Field(None, alias="defaultTheme")

    model_config = {"populate_by_name": True, "extra": "allow"}
