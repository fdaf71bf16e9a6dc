"""
Structural validators - one per document kind.

Validates:
- Shape, type and enum membership of core tokens, semantic tokens,
  platform rules, component contracts and the system manifest
- Contract semantics once the structure is sound (enum props have
  values, examples only use declared props)

Every validator is total: it never raises, and anything that is not the
expected shape is reported as an error. Errors carry a JSON pointer to
the offending field and a code named after the JSON-Schema keyword that
failed (type, required, enum, pattern, minItems, additionalProperties).
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterable
from enum import Enum
from typing import Any

from pydantic import ValidationError as ModelValidationError

from chuk_mcp_design.constants import (
    ComponentSourceType,
    Platform,
    PropType,
    Theme,
    TokenCategory,
    TokenTransform,
)
from chuk_mcp_design.errors import ValidationResult

# Path of the document root; child pointers are built from ""
ROOT_PATH = "/"

COMPONENT_NAME_PATTERN = re.compile(r"^[A-Z][a-zA-Z0-9]*$")

# Keys every document may carry alongside its payload
META_KEYS = ("$schema", "$version")

CONTRACT_KEYS = (
    *META_KEYS,
    "name",
    "description",
    "platformTargets",
    "props",
    "variants",
    "states",
    "code",
    "examples",
)


def json_type(value: Any) -> str:
    """Name of a value's JSON type, as used in error messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def is_number(value: Any) -> bool:
    """True for finite JSON numbers; booleans are not numbers."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def pointer(base: str, token: str | int) -> str:
    """Append one reference token to a JSON pointer."""
    escaped = str(token).replace("~", "~0").replace("/", "~1")
    return f"{base}/{escaped}"


def model_errors(exc: ModelValidationError) -> ValidationResult:
    """
    Convert pydantic errors into a ValidationResult.

    Locations become JSON pointers; the pydantic error type is the code.
    """
    result = ValidationResult()
    for error in exc.errors(include_url=False):
        path = ""
        for part in error["loc"]:
            path = pointer(path, part)
        value = None if error["type"] == "missing" else error.get("input")
        result.add_error(path or ROOT_PATH, error["msg"], error["type"], value)
    return result


class _Walker:
    """Collects structural errors while walking a document."""

    def __init__(self) -> None:
        self.result = ValidationResult()

    def fail(self, path: str, message: str, code: str, value: Any = None) -> None:
        self.result.add_error(path or ROOT_PATH, message, code, value)

    def obj(
        self,
        data: Any,
        path: str,
        required: Iterable[str] = (),
        allowed: Iterable[str] | None = None,
    ) -> dict[str, Any] | None:
        """Check an object, its required keys and (if given) its closed key set."""
        if not isinstance(data, dict):
            self.fail(path, f"must be object, got {json_type(data)}", "type", data)
            return None

        required = tuple(required)
        for key in required:
            if key not in data:
                self.fail(pointer(path, key), f"must have required property '{key}'", "required")

        if allowed is not None:
            known = set(required) | set(allowed)
            for key in data:
                if key not in known:
                    self.fail(
                        pointer(path, key),
                        f"must NOT have additional property '{key}'",
                        "additionalProperties",
                        key,
                    )
        return data

    def array(self, data: Any, path: str, min_items: int = 0) -> list[Any] | None:
        if not isinstance(data, list):
            self.fail(path, f"must be array, got {json_type(data)}", "type", data)
            return None
        if len(data) < min_items:
            self.fail(path, f"must NOT have fewer than {min_items} items", "minItems", data)
        return data

    def string(self, data: Any, path: str) -> bool:
        if not isinstance(data, str):
            self.fail(path, f"must be string, got {json_type(data)}", "type", data)
            return False
        return True

    def number(self, data: Any, path: str) -> bool:
        if not is_number(data):
            self.fail(path, f"must be number, got {json_type(data)}", "type", data)
            return False
        return True

    def boolean(self, data: Any, path: str) -> bool:
        if not isinstance(data, bool):
            self.fail(path, f"must be boolean, got {json_type(data)}", "type", data)
            return False
        return True

    def member(self, data: Any, path: str, choices: type[Enum]) -> bool:
        """Check a string drawn from a closed enum."""
        if not self.string(data, path):
            return False
        allowed = [c.value for c in choices]
        if data not in allowed:
            self.fail(
                path, f"must be equal to one of the allowed values: {', '.join(allowed)}", "enum", data
            )
            return False
        return True

    def optional_string(self, doc: dict[str, Any], key: str, path: str) -> None:
        if key in doc:
            self.string(doc[key], pointer(path, key))

    def meta(self, doc: dict[str, Any]) -> None:
        for key in META_KEYS:
            self.optional_string(doc, key, "")


def validate_core_tokens(data: Any) -> ValidationResult:
    """Validate the contents of tokens/core.json."""
    walker = _Walker()
    doc = walker.obj(data, "", required=("tokens",), allowed=META_KEYS)
    if doc is None:
        return walker.result
    walker.meta(doc)

    if "tokens" in doc:
        tokens = walker.obj(doc["tokens"], "/tokens")
        for key, token in (tokens or {}).items():
            path = pointer("/tokens", key)
            entry = walker.obj(token, path, required=("value",))
            if entry is None:
                continue
            if "value" in entry:
                value = entry["value"]
                if not (isinstance(value, str) or is_number(value)):
                    walker.fail(
                        pointer(path, "value"),
                        f"must be string or number, got {json_type(value)}",
                        "type",
                        value,
                    )
            if "category" in entry:
                walker.member(entry["category"], pointer(path, "category"), TokenCategory)
            walker.optional_string(entry, "description", path)

    return walker.result


def validate_semantic_tokens(data: Any) -> ValidationResult:
    """Validate the contents of tokens/semantic.<theme>.json."""
    walker = _Walker()
    doc = walker.obj(data, "", required=("$theme", "tokens"), allowed=META_KEYS)
    if doc is None:
        return walker.result
    walker.meta(doc)

    if "$theme" in doc:
        walker.member(doc["$theme"], "/$theme", Theme)

    if "tokens" in doc:
        tokens = walker.obj(doc["tokens"], "/tokens")
        for key, token in (tokens or {}).items():
            path = pointer("/tokens", key)
            entry = walker.obj(token, path, required=("ref",))
            if entry is None:
                continue
            if "ref" in entry:
                walker.string(entry["ref"], pointer(path, "ref"))
            walker.optional_string(entry, "description", path)

    return walker.result


def validate_platform_rules(data: Any) -> ValidationResult:
    """Validate the contents of tokens/platform.<platform>.json."""
    walker = _Walker()
    doc = walker.obj(data, "", required=("$platform", "rules"), allowed=META_KEYS)
    if doc is None:
        return walker.result
    walker.meta(doc)

    if "$platform" in doc:
        walker.member(doc["$platform"], "/$platform", Platform)

    if "rules" in doc:
        rules = walker.array(doc["rules"], "/rules")
        for i, rule in enumerate(rules or []):
            path = pointer("/rules", i)
            entry = walker.obj(rule, path, required=("category", "transform"))
            if entry is None:
                continue
            if "category" in entry:
                walker.string(entry["category"], pointer(path, "category"))
            if "transform" in entry:
                walker.member(entry["transform"], pointer(path, "transform"), TokenTransform)
            if "remBase" in entry:
                rem_path = pointer(path, "remBase")
                if walker.number(entry["remBase"], rem_path) and entry["remBase"] <= 0:
                    walker.fail(rem_path, "must be > 0", "exclusiveMinimum", entry["remBase"])

    return walker.result


def validate_system_manifest(data: Any) -> ValidationResult:
    """Validate the contents of system.json. Unknown keys are tolerated."""
    walker = _Walker()
    doc = walker.obj(data, "", required=("name", "version"))
    if doc is None:
        return walker.result

    walker.optional_string(doc, "$schema", "")
    for key in ("name", "version", "description"):
        walker.optional_string(doc, key, "")
    if "defaultPlatform" in doc:
        walker.member(doc["defaultPlatform"], "/defaultPlatform", Platform)
    if "defaultTheme" in doc:
        walker.member(doc["defaultTheme"], "/defaultTheme", Theme)
    if "componentSource" in doc:
        source = walker.obj(doc["componentSource"], "/componentSource", required=("type", "value"))
        if source is not None:
            if "type" in source:
                walker.member(source["type"], "/componentSource/type", ComponentSourceType)
            if "value" in source:
                walker.string(source["value"], "/componentSource/value")

    return walker.result


def validate_contract(data: Any) -> ValidationResult:
    """
    Validate a component contract.

    Semantic rules only run once the structure is sound, so their
    errors never duplicate structural ones.

    Args:
        data: Parsed JSON contract

    Returns:
        ValidationResult with every error found
    """
    walker = _Walker()
    _validate_contract_structure(walker, data)
    if not walker.result.valid:
        return walker.result

    _validate_contract_semantics(walker, data)
    return walker.result


def _validate_contract_structure(walker: _Walker, data: Any) -> None:
    doc = walker.obj(data, "", required=("name", "platformTargets", "props"), allowed=CONTRACT_KEYS)
    if doc is None:
        return
    walker.meta(doc)
    walker.optional_string(doc, "description", "")

    if "name" in doc and walker.string(doc["name"], "/name"):
        if not COMPONENT_NAME_PATTERN.match(doc["name"]):
            walker.fail(
                "/name",
                f'must match pattern "{COMPONENT_NAME_PATTERN.pattern}"',
                "pattern",
                doc["name"],
            )

    if "platformTargets" in doc:
        targets = walker.array(doc["platformTargets"], "/platformTargets", min_items=1)
        for i, target in enumerate(targets or []):
            walker.member(target, pointer("/platformTargets", i), Platform)

    if "props" in doc:
        props = walker.obj(doc["props"], "/props")
        for prop_name, prop in (props or {}).items():
            _validate_prop_definition(walker, prop, pointer("/props", prop_name))

    if "variants" in doc:
        variants = walker.array(doc["variants"], "/variants")
        for i, variant in enumerate(variants or []):
            path = pointer("/variants", i)
            entry = walker.obj(variant, path, required=("name", "props"))
            if entry is None:
                continue
            walker.optional_string(entry, "name", path)
            walker.optional_string(entry, "description", path)
            if "props" in entry:
                walker.obj(entry["props"], pointer(path, "props"))

    if "states" in doc:
        states = walker.array(doc["states"], "/states")
        for i, state in enumerate(states or []):
            path = pointer("/states", i)
            entry = walker.obj(state, path, required=("name",))
            if entry is not None:
                walker.optional_string(entry, "name", path)
                walker.optional_string(entry, "description", path)

    if "code" in doc:
        code = walker.obj(doc["code"], "/code", required=("importPath",))
        if code is not None:
            walker.optional_string(code, "importPath", "/code")
            walker.optional_string(code, "exportName", "/code")

    if "examples" in doc:
        examples = walker.array(doc["examples"], "/examples")
        for i, example in enumerate(examples or []):
            path = pointer("/examples", i)
            entry = walker.obj(example, path, required=("props",))
            if entry is None:
                continue
            walker.optional_string(entry, "name", path)
            walker.optional_string(entry, "description", path)
            if "props" in entry:
                walker.obj(entry["props"], pointer(path, "props"))


def _validate_prop_definition(walker: _Walker, prop: Any, path: str) -> None:
    entry = walker.obj(prop, path, required=("type",))
    if entry is None:
        return
    if "type" in entry:
        walker.member(entry["type"], pointer(path, "type"), PropType)
    if "values" in entry:
        values = walker.array(entry["values"], pointer(path, "values"))
        for i, value in enumerate(values or []):
            walker.string(value, pointer(pointer(path, "values"), i))
    if "required" in entry:
        walker.boolean(entry["required"], pointer(path, "required"))
    walker.optional_string(entry, "description", path)


def _validate_contract_semantics(walker: _Walker, contract: dict[str, Any]) -> None:
    props: dict[str, Any] = contract["props"]

    for prop_name, prop in props.items():
        if prop["type"] == PropType.ENUM.value and not prop.get("values"):
            walker.fail(
                pointer("/props", prop_name),
                "Enum props must have values array",
                "enum_missing_values",
            )

    for i, example in enumerate(contract.get("examples") or []):
        for prop_name in example["props"]:
            if prop_name not in props:
                walker.fail(
                    pointer(pointer(pointer("/examples", i), "props"), prop_name),
                    f"Example uses unknown prop: {prop_name}",
                    "unknown_prop",
                )
