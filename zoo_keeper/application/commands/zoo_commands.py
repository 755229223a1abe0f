"""Zoo commands (CQRS write operations).

All commands are immutable (frozen=True) and use keyword-only arguments
(kw_only=True). The target zoo is injected into the handler, not carried
by the command.

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic
- Handlers return the domain Result unchanged
"""

from dataclasses import dataclass
from decimal import Decimal

from zoo_keeper.domain.protocols.animal_protocol import AnimalProtocol
from zoo_keeper.domain.protocols.sitter_protocol import SitterProtocol


@dataclass(frozen=True, kw_only=True)
class AddIncome:
    """Book an income into the zoo budget.

    Attributes:
        amount: Income to add (must be positive).

    Example:
        >>> result = handler.handle(AddIncome(amount=Decimal("3000")))
    """

    amount: Decimal


@dataclass(frozen=True, kw_only=True)
class AddExpense:
    """Book an expense against the zoo budget.

    Attributes:
        amount: Expense to subtract (positive, at most the budget).
    """

    amount: Decimal


@dataclass(frozen=True, kw_only=True)
class PaySalaries:
    """Pay all hired sitters their current salary."""


@dataclass(frozen=True, kw_only=True)
class AdmitAnimal:
    """Admit an animal, consuming water allowance.

    Attributes:
        animal: Animal to admit.
    """

    animal: AnimalProtocol


@dataclass(frozen=True, kw_only=True)
class IncreaseWater:
    """Raise the daily water allowance.

    Attributes:
        amount: Water to add (must be positive).
    """

    amount: Decimal


@dataclass(frozen=True, kw_only=True)
class HireSitter:
    """Hire a sitter if the budget covers every salary.

    Attributes:
        sitter: Sitter to hire.
    """

    sitter: SitterProtocol
