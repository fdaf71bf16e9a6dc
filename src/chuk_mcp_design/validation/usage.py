"""
Usage validator - checks a candidate prop bag against a component contract.

Usage checking is expected to fail often (it is how callers learn what a
component accepts), so problems come back as a ValidationResult rather
than an error.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError as ModelValidationError

from chuk_mcp_design.constants import PropType
from chuk_mcp_design.errors import ValidationResult
from chuk_mcp_design.models.contract import ComponentContract, PropDefinition
from chuk_mcp_design.validation.schema import (
    ROOT_PATH,
    is_number,
    json_type,
    model_errors,
    pointer,
)


def validate_usage(
    contract: ComponentContract | Mapping[str, Any], props: Mapping[str, Any]
) -> ValidationResult:
    """
    Validate component usage against its contract.

    Collects every problem in one pass: missing required props, props the
    contract does not declare, and values of the wrong type.

    Args:
        contract: The component contract, as a model or a raw document
        props: Prop values supplied by the caller

    Returns:
        ValidationResult with any errors found. A raw contract that cannot
        be read as a contract yields its own errors instead.
    """
    if isinstance(contract, Mapping):
        try:
            contract = ComponentContract.model_validate(contract)
        except ModelValidationError as e:
            return model_errors(e)

    result = ValidationResult()

    if not isinstance(props, Mapping):
        result.add_error(ROOT_PATH, f"Props must be an object, got {json_type(props)}", "type", props)
        return result

    for prop_name, prop_def in contract.props.items():
        if prop_def.is_required and prop_name not in props:
            result.add_error(
                pointer("", prop_name),
                f"Required prop missing: {prop_name}",
                "required_prop_missing",
            )

    for prop_name, value in props.items():
        prop_def = contract.get_prop(prop_name)
        if prop_def is None:
            result.add_error(pointer("", prop_name), f"Unknown prop: {prop_name}", "unknown_prop")
            continue
        _check_value(result, pointer("", prop_name), prop_def, value)

    return result


def _check_value(result: ValidationResult, path: str, prop_def: PropDefinition, value: Any) -> None:
    """Type-check one supplied value against its declaration."""
    prop_type = prop_def.type

    if prop_type == PropType.ENUM:
        values = prop_def.values or []
        if not isinstance(value, str) or value not in values:
            result.add_error(
                path,
                f"Invalid enum value. Expected one of: {', '.join(values)}",
                "invalid_enum_value",
                value,
            )
        return

    if prop_type == PropType.STRING:
        matches = isinstance(value, str)
    elif prop_type == PropType.NUMBER:
        matches = is_number(value)
    elif prop_type == PropType.BOOLEAN:
        matches = isinstance(value, bool)
    else:
        raise AssertionError(f"Unhandled prop type: {prop_type}")

    if not matches:
        result.add_error(
            path,
            f"Expected {prop_type.value}, got {json_type(value)}",
            "type_mismatch",
            value,
        )


def validate_examples(contract: ComponentContract) -> ValidationResult:
    """
    Check that a contract's own examples are valid usages of it.

    Errors are relocated under /examples/<i>/props so they point into
    the contract document.

    Args:
        contract: A structurally valid contract

    Returns:
        ValidationResult with any errors found
    """
    result = ValidationResult()
    for i, example in enumerate(contract.examples or []):
        base = pointer(pointer("", "examples"), i) + "/props"
        for error in validate_usage(contract, example.props).errors:
            result.add_error(base + error.path, error.message, error.code, error.value)
    return result
