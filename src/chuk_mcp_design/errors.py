"""
Error and result vocabulary shared by every part of the engine.

This module provides:
- ErrorCode: The closed set of failure kinds
- WorkspaceError: A failure carrying a kind, message, file path and details
- ValidationError / ValidationResult: Machine-readable validation output
- Ok / Err / Result: Explicit success-or-failure return values
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


class ErrorCode(str, Enum):
    """Failure kinds reported by workspace and compiler operations."""

    WORKSPACE_NOT_FOUND = "WORKSPACE_NOT_FOUND"
    WORKSPACE_INVALID_STRUCTURE = "WORKSPACE_INVALID_STRUCTURE"
    CONTRACT_NOT_FOUND = "CONTRACT_NOT_FOUND"
    CONTRACT_INVALID = "CONTRACT_INVALID"
    TOKEN_FILE_NOT_FOUND = "TOKEN_FILE_NOT_FOUND"
    TOKEN_FILE_INVALID = "TOKEN_FILE_INVALID"
    TOKEN_REF_NOT_FOUND = "TOKEN_REF_NOT_FOUND"
    SYSTEM_MANIFEST_NOT_FOUND = "SYSTEM_MANIFEST_NOT_FOUND"
    SYSTEM_MANIFEST_INVALID = "SYSTEM_MANIFEST_INVALID"
    VALIDATION_FAILED = "VALIDATION_FAILED"
    COMPILE_ERROR = "COMPILE_ERROR"


NOT_FOUND_CODES = frozenset(
    {
        ErrorCode.WORKSPACE_NOT_FOUND,
        ErrorCode.CONTRACT_NOT_FOUND,
        ErrorCode.TOKEN_FILE_NOT_FOUND,
        ErrorCode.SYSTEM_MANIFEST_NOT_FOUND,
    }
)


class WorkspaceError(Exception):
    """Structured error for workspace operations."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        path: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.path = path
        self.details = details or {}

    @property
    def is_not_found(self) -> bool:
        """True when the requested document or workspace is absent."""
        return self.code in NOT_FOUND_CODES

    def to_dict(self) -> dict[str, Any]:
        """Serializable form, stable for transports."""
        return {
            "name": "WorkspaceError",
            "code": self.code.value,
            "message": self.message,
            "path": self.path,
            "details": self.details,
        }

    def __repr__(self) -> str:
        return f"WorkspaceError({self.code.value}, {self.message!r})"


@dataclass(frozen=True)
class ValidationError:
    """A single validation error located by a JSON-pointer-like path."""

    path: str
    message: str
    code: str
    value: Any = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"path": self.path, "message": self.message, "code": self.code}
        if self.value is not None:
            data["value"] = self.value
        return data

    def __str__(self) -> str:
        return f"{self.path}: {self.message} ({self.code})"


@dataclass
class ValidationResult:
    """Result of validating a document or a whole workspace."""

    errors: list[ValidationError] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        """True iff there are no errors."""
        return not self.errors

    def add_error(self, path: str, message: str, code: str, value: Any = None) -> None:
        """Add an error."""
        self.errors.append(ValidationError(path, message, code, value))

    def to_dict(self) -> dict[str, Any]:
        return {"valid": self.valid, "errors": [e.to_dict() for e in self.errors]}

    def summary(self) -> str:
        """One-line description of every error, for messages."""
        return "; ".join(str(e) for e in self.errors)

    def __bool__(self) -> bool:
        return self.valid

    def __str__(self) -> str:
        if not self.errors:
            return "Validation passed: no errors found"
        return "\n".join(str(e) for e in self.errors)


def valid_result() -> ValidationResult:
    """Create a successful validation result."""
    return ValidationResult()


def invalid_result(errors: list[ValidationError]) -> ValidationResult:
    """Create a failed validation result."""
    return ValidationResult(errors=list(errors))


def merge_validation_results(*results: ValidationResult) -> ValidationResult:
    """Merge results by concatenating their errors; valid iff none remain."""
    return ValidationResult(errors=[e for r in results for e in r.errors])


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed outcome carrying exactly one tagged error."""

    error: WorkspaceError

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> Any:
        """Raise the wrapped error."""
        raise self.error


Result = Union[Ok[T], Err]


def err(
    code: ErrorCode,
    message: str,
    path: str | None = None,
    details: dict[str, Any] | None = None,
) -> Err:
    """Shorthand for building a failed outcome."""
    return Err(WorkspaceError(code, message, path, details))
