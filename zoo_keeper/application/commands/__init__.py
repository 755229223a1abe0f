"""Commands - Write operations that change state.

Commands are immutable dataclasses with imperative names (AddIncome,
HireSitter). Each command has a corresponding handler.
"""

from zoo_keeper.application.commands.sitter_commands import (
    AssignAnimal,
    CreateSitter,
)
from zoo_keeper.application.commands.zoo_commands import (
    AddExpense,
    AddIncome,
    AdmitAnimal,
    HireSitter,
    IncreaseWater,
    PaySalaries,
)

__all__ = [
    # Zoo commands
    "AddExpense",
    "AddIncome",
    "AdmitAnimal",
    "HireSitter",
    "IncreaseWater",
    "PaySalaries",
    # Sitter commands
    "AssignAnimal",
    "CreateSitter",
]
