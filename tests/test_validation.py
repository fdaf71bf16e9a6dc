"""
Tests for the structural validators.

Tests core tokens, semantic tokens, platform rules, the system manifest
and component contracts, including contract semantics.
"""

import copy

import pytest
from pydantic import ValidationError as ModelValidationError

from chuk_mcp_design.models import ComponentContract, SystemManifest
from chuk_mcp_design.validation import (
    model_errors,
    validate_contract,
    validate_core_tokens,
    validate_platform_rules,
    validate_semantic_tokens,
    validate_system_manifest,
)
from chuk_mcp_design.workspace.template import (
    STARTER_BUTTON_CONTRACT,
    STARTER_CORE_TOKENS,
    STARTER_PLATFORM_RULES,
    STARTER_SEMANTIC_TOKENS,
    STARTER_SYSTEM,
)


def codes(result):
    return [e.code for e in result.errors]


class TestValidatorsAreTotal:
    """Every validator reports non-objects instead of raising."""

    def test_non_object_inputs(self):
        """Arrays, strings, numbers and null are all rejected at the root."""
        validators = [
            validate_core_tokens,
            validate_semantic_tokens,
            validate_platform_rules,
            validate_system_manifest,
            validate_contract,
        ]
        for validator in validators:
            for value in ([], "x", 3, None, True):
                result = validator(value)
                assert not result.valid
                assert result.errors[0].path == "/"
                assert result.errors[0].code == "type"


class TestCoreTokens:
    """Tests for core token validation."""

    def test_starter_is_valid(self):
        """Starter core tokens validate."""
        assert validate_core_tokens(STARTER_CORE_TOKENS).valid

    def test_missing_tokens(self):
        """tokens is required."""
        result = validate_core_tokens({"$version": "1"})
        assert codes(result) == ["required"]
        assert result.errors[0].path == "/tokens"

    def test_bad_value_type(self):
        """Values must be strings or numbers, not booleans."""
        result = validate_core_tokens({"tokens": {"a": {"value": True}}})
        assert result.errors[0].path == "/tokens/a/value"
        assert result.errors[0].code == "type"

    def test_unknown_category(self):
        """Categories come from a closed set."""
        result = validate_core_tokens({"tokens": {"a": {"value": 1, "category": "shadow"}}})
        assert codes(result) == ["enum"]
        assert result.errors[0].path == "/tokens/a/category"

    def test_additional_root_property(self):
        """Unknown top-level keys are rejected."""
        result = validate_core_tokens({"tokens": {}, "extra": 1})
        assert codes(result) == ["additionalProperties"]

    def test_non_finite_number(self):
        """NaN is not a JSON number."""
        result = validate_core_tokens({"tokens": {"a": {"value": float("nan")}}})
        assert not result.valid

    def test_reports_all_errors(self):
        """Every problem is reported in one pass."""
        result = validate_core_tokens(
            {"tokens": {"a": {}, "b": {"value": None}, "c": {"value": 1, "category": "x"}}}
        )
        assert len(result.errors) == 3

    def test_key_with_slash_is_escaped(self):
        """Pointer tokens escape '/' as '~1'."""
        result = validate_core_tokens({"tokens": {"a/b": {}}})
        assert result.errors[0].path == "/tokens/a~1b/value"


class TestSemanticTokens:
    """Tests for semantic token validation."""

    def test_starter_is_valid(self):
        """Both starter themes validate."""
        for doc in STARTER_SEMANTIC_TOKENS.values():
            assert validate_semantic_tokens(doc).valid

    def test_theme_required(self):
        """$theme is required."""
        result = validate_semantic_tokens({"tokens": {}})
        assert result.errors[0].path == "/$theme"
        assert result.errors[0].code == "required"

    def test_unknown_theme(self):
        """Themes are light or dark."""
        result = validate_semantic_tokens({"$theme": "sepia", "tokens": {}})
        assert codes(result) == ["enum"]

    def test_ref_must_be_string(self):
        """ref is a string."""
        result = validate_semantic_tokens({"$theme": "light", "tokens": {"x": {"ref": 1}}})
        assert result.errors[0].path == "/tokens/x/ref"


class TestPlatformRules:
    """Tests for platform rule validation."""

    def test_starter_is_valid(self):
        """Both starter platforms validate."""
        for doc in STARTER_PLATFORM_RULES.values():
            assert validate_platform_rules(doc).valid

    def test_rules_must_be_array(self):
        """rules is an array."""
        result = validate_platform_rules({"$platform": "web", "rules": {}})
        assert result.errors[0].path == "/rules"
        assert result.errors[0].code == "type"

    def test_unknown_transform(self):
        """Transforms come from a closed set."""
        result = validate_platform_rules(
            {"$platform": "web", "rules": [{"category": "spacing", "transform": "em"}]}
        )
        assert result.errors[0].path == "/rules/0/transform"
        assert result.errors[0].code == "enum"

    def test_rem_base_must_be_positive(self):
        """remBase must be greater than zero."""
        result = validate_platform_rules(
            {
                "$platform": "web",
                "rules": [{"category": "fontSize", "transform": "rem", "remBase": 0}],
            }
        )
        assert codes(result) == ["exclusiveMinimum"]


class TestSystemManifest:
    """Tests for system.json validation."""

    def test_starter_is_valid(self):
        """Starter manifest validates."""
        assert validate_system_manifest(STARTER_SYSTEM).valid

    def test_extra_keys_allowed(self):
        """Unknown keys are tolerated."""
        assert validate_system_manifest({"name": "x", "version": "1", "owner": "me"}).valid

    def test_required(self):
        """name and version are required."""
        result = validate_system_manifest({})
        assert sorted(e.path for e in result.errors) == ["/name", "/version"]

    def test_bad_component_source(self):
        """componentSource.type is npm or path."""
        result = validate_system_manifest(
            {"name": "x", "version": "1", "componentSource": {"type": "git", "value": "x"}}
        )
        assert result.errors[0].path == "/componentSource/type"


class TestContract:
    """Tests for contract validation."""

    def test_starter_is_valid(self):
        """Starter Button contract validates."""
        assert validate_contract(STARTER_BUTTON_CONTRACT).valid

    def test_name_pattern(self):
        """Names are PascalCase identifiers."""
        contract = copy.deepcopy(STARTER_BUTTON_CONTRACT)
        contract["name"] = "my-button"
        result = validate_contract(contract)
        assert codes(result) == ["pattern"]
        assert result.errors[0].path == "/name"

    def test_platform_targets_non_empty(self):
        """At least one platform target."""
        contract = copy.deepcopy(STARTER_BUTTON_CONTRACT)
        contract["platformTargets"] = []
        result = validate_contract(contract)
        assert codes(result) == ["minItems"]

    def test_unknown_platform_target(self):
        """Platform targets come from a closed set."""
        contract = copy.deepcopy(STARTER_BUTTON_CONTRACT)
        contract["platformTargets"] = ["web", "ios"]
        result = validate_contract(contract)
        assert result.errors[0].path == "/platformTargets/1"

    def test_bad_prop_type(self):
        """Prop types come from a closed set."""
        result = validate_contract(
            {"name": "Card", "platformTargets": ["web"], "props": {"x": {"type": "date"}}}
        )
        assert result.errors[0].path == "/props/x/type"
        assert result.errors[0].code == "enum"

    def test_enum_without_values(self):
        """Enum props must declare values."""
        result = validate_contract(
            {"name": "Card", "platformTargets": ["web"], "props": {"tone": {"type": "enum"}}}
        )
        assert codes(result) == ["enum_missing_values"]
        assert result.errors[0].path == "/props/tone"

    def test_enum_with_empty_values(self):
        """An empty values array is as bad as none."""
        result = validate_contract(
            {
                "name": "Card",
                "platformTargets": ["web"],
                "props": {"tone": {"type": "enum", "values": []}},
            }
        )
        assert codes(result) == ["enum_missing_values"]

    def test_example_with_unknown_prop(self):
        """Examples may only use declared props."""
        result = validate_contract(
            {
                "name": "Card",
                "platformTargets": ["web"],
                "props": {"title": {"type": "string"}},
                "examples": [{"props": {"title": "x", "color": "red"}}],
            }
        )
        assert codes(result) == ["unknown_prop"]
        assert result.errors[0].path == "/examples/0/props/color"

    def test_semantics_skipped_when_structure_fails(self):
        """Semantic errors never duplicate structural ones."""
        result = validate_contract(
            {"name": "bad", "platformTargets": ["web"], "props": {"tone": {"type": "enum"}}}
        )
        assert codes(result) == ["pattern"]

    def test_additional_property(self):
        """Contracts have a closed key set."""
        contract = copy.deepcopy(STARTER_BUTTON_CONTRACT)
        contract["theme"] = "dark"
        result = validate_contract(contract)
        assert codes(result) == ["additionalProperties"]
        assert result.errors[0].path == "/theme"


class TestModelErrors:
    """Tests for converting model construction errors."""

    def test_location_becomes_pointer(self):
        """pydantic locations map onto document pointers."""
        with pytest.raises(ModelValidationError) as exc_info:
            ComponentContract.model_validate(
                {
                    "name": "Card",
                    "platformTargets": ["web"],
                    "props": {},
                    "code": {"importPath": "x", "export_name": 5},
                }
            )
        result = model_errors(exc_info.value)
        assert not result.valid
        assert result.errors[0].path == "/code/export_name"
        assert result.errors[0].value == 5

    def test_root_uses_root_path(self):
        """A wrong-typed document is reported at the root, like the validators do."""
        with pytest.raises(ModelValidationError) as exc_info:
            SystemManifest.model_validate([])
        result = model_errors(exc_info.value)
        assert [e.path for e in result.errors] == ["/"]
        assert validate_system_manifest([]).errors[0].path == "/"

    def test_child_paths_have_one_leading_slash(self):
        """Child pointers never double the root slash."""
        result = validate_contract({"platformTargets": "web", "props": []})
        assert result.errors
        assert all(e.path.startswith("/") and not e.path.startswith("//") for e in result.errors)
