"""Zoo error types.

Returned when the zoo aggregate rejects an operation: bad amounts,
shortages of budget or water, and duplicate sitters.

Usage:
    from zoo_keeper.core.enums import ErrorCode
    from zoo_keeper.core.result import Failure
    from zoo_keeper.domain.errors import ZooError

    return Failure(error=ZooError.of(ErrorCode.NOT_ENOUGH_BUDGET))
"""

from dataclasses import dataclass
from typing import Self

from zoo_keeper.core.enums import ErrorCode
from zoo_keeper.core.errors import DomainError

ZOO_ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.INCOME_NOT_POSITIVE: "Income amount has to be a positive value.",
    ErrorCode.EXPENSE_NOT_POSITIVE: "Expense amount has to be a positive value.",
    ErrorCode.NOT_ENOUGH_BUDGET: "Not enough budget to pay.",
    ErrorCode.SITTER_EXISTS: "Sitter is already added.",
    ErrorCode.WATER_LIMIT_NOT_POSITIVE: "Water limit has to be a positive value.",
    ErrorCode.NOT_ENOUGH_WATER: "There is not enough water to add a new animal.",
}


@dataclass(frozen=True, slots=True, kw_only=True)
class ZooError(DomainError):
    """Zoo operation failure.

    Attributes:
        code: ErrorCode enum (NOT_ENOUGH_BUDGET, NOT_ENOUGH_WATER, etc.).
        message: Human-readable message.
        details: Additional context (requested amount, current budget, ...).

    Note:
        The code is the contract. ``details`` is informational only and
        its keys may change.
    """

    @classmethod
    def of(cls, code: ErrorCode, details: dict[str, str] | None = None) -> Self:
        """Build the error with its fixed display message.

        Args:
            code: Zoo error kind.
            details: Optional debugging context.

        Returns:
            ZooError for ``code``.

        Raises:
            KeyError: If ``code`` is not a zoo error kind.
        """
        return cls(code=code, message=ZOO_ERROR_MESSAGES[code], details=details)
