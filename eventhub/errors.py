"""Error taxonomy for the commit gate.

ValidationError  -> caller supplied bad input, fix and resubmit.
ConflictError    -> uniqueness violated at write time.
StorageError     -> infrastructure failure, safe to retry later.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class ErrorCode(Enum):
    """Domain error codes."""

    VALIDATION_FAILED = "VALIDATION_FAILED"
    CONFLICT = "CONFLICT"
    STORAGE_UNAVAILABLE = "STORAGE_UNAVAILABLE"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code.value, "message": self.message}


class ValidationError(DomainError):
    """Raised when a candidate field fails normalization."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(
            code=ErrorCode.VALIDATION_FAILED,
            message=f'Field "{field}" {reason}',
        )
        self.field = field
        self.reason = reason

    def to_dict(self) -> Dict[str, Any]:
        return {**super().to_dict(), "field": self.field, "reason": self.reason}


class ConflictError(DomainError):
    """Raised when a write collides with a unique index."""

    def __init__(self, field: str, value: Any) -> None:
        super().__init__(
            code=ErrorCode.CONFLICT,
            message=f'A record with {field} "{value}" already exists',
        )
        self.field = field
        self.value = value

    def to_dict(self) -> Dict[str, Any]:
        return {**super().to_dict(), "field": self.field}


class StorageError(DomainError):
    """Raised when the database cannot be reached or fails mid-operation."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            code=ErrorCode.STORAGE_UNAVAILABLE,
            message=f"Storage failure during {operation}",
        )
        self.operation = operation
