"""
Validation - structural document checks and prop usage checks.

This module provides:
- validate_core_tokens / validate_semantic_tokens / validate_platform_rules
- validate_contract: Structure plus contract semantics
- validate_system_manifest: Workspace metadata
- validate_usage: A prop bag against a component contract
- validate_examples: A contract's examples against the contract itself
- model_errors: pydantic errors as a ValidationResult
"""

from chuk_mcp_design.validation.schema import (
    model_errors,
    validate_contract,
    validate_core_tokens,
    validate_platform_rules,
    validate_semantic_tokens,
    validate_system_manifest,
)
from chuk_mcp_design.validation.usage import validate_examples, validate_usage

__all__ = [
    "model_errors",
    "validate_contract",
    "validate_core_tokens",
    "validate_examples",
    "validate_platform_rules",
    "validate_semantic_tokens",
    "validate_system_manifest",
    "validate_usage",
]
