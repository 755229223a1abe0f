"""Sitter error types.

Returned when a sitter refuses to take an animal.

Usage:
    from zoo_keeper.core.enums import ErrorCode
    from zoo_keeper.core.result import Failure
    from zoo_keeper.domain.errors import SitterError

    return Failure(error=SitterError.of(ErrorCode.ANIMAL_HAS_SITTER))
"""

from dataclasses import dataclass
from typing import Self

from zoo_keeper.core.enums import ErrorCode
from zoo_keeper.core.errors import DomainError

SITTER_ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.ANIMAL_HAS_SITTER: "This animal already has a sitter.",
}


@dataclass(frozen=True, slots=True, kw_only=True)
class SitterError(DomainError):
    """Sitter assignment failure.

    Attributes:
        code: ErrorCode enum (ANIMAL_HAS_SITTER).
        message: Human-readable message.
        details: Additional context (animal name, ...).
    """

    @classmethod
    def of(cls, code: ErrorCode, details: dict[str, str] | None = None) -> Self:
        """Build the error with its fixed display message.

        Args:
            code: Sitter error kind.
            details: Optional debugging context.

        Returns:
            SitterError for ``code``.

        Raises:
            KeyError: If ``code`` is not a sitter error kind.
        """
        return cls(code=code, message=SITTER_ERROR_MESSAGES[code], details=details)
