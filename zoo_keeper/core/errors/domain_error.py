"""Base domain error class for Railway-Oriented Programming.

DomainError is the base class for every rejection reported by the zoo
domain. Errors flow through the system as data inside ``Failure``, they
are never raised.

Architecture:
- Does NOT inherit from Exception (returned in Result, not raised)
- Uses dataclass inheritance (NOT Protocol/ABC)
- Type-safe with Result[T, DomainError]

Usage:
    @dataclass(frozen=True, slots=True, kw_only=True)
    class MyError(DomainError):
        pass  # Inherits code, message, details
"""

from dataclasses import dataclass

from zoo_keeper.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable error message for display.
        details: Optional context for debugging (requested amount, etc.).
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"
