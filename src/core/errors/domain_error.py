"""Base domain error class for Railway-Oriented Programming.

DomainError is the base class for structured error data that flows through
the system inside Result types. It is NOT an exception.

Architecture:
- Base class for core error types (validation, not found, conflict)
- Does NOT inherit from Exception (returned in Result, never raised)
- Uses dataclass inheritance (NOT Protocol/ABC)

Usage:
    from src.core.errors import DomainError
    from src.core.enums import ErrorCode

    @dataclass(frozen=True, slots=True, kw_only=True)
    class MyError(DomainError):
        pass  # Inherits code, message, details
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable error message.
        details: Optional context for debugging.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"
