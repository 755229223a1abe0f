"""Zoo and sitter handler factories.

Handlers are cheap and bound to a specific zoo, so they are created per
call rather than cached. The logger is the shared singleton.
"""

from zoo_keeper.application.commands.handlers.add_expense_handler import (
    AddExpenseHandler,
)
from zoo_keeper.application.commands.handlers.add_income_handler import (
    AddIncomeHandler,
)
from zoo_keeper.application.commands.handlers.admit_animal_handler import (
    AdmitAnimalHandler,
)
from zoo_keeper.application.commands.handlers.assign_animal_handler import (
    AssignAnimalHandler,
)
from zoo_keeper.application.commands.handlers.create_sitter_handler import (
    CreateSitterHandler,
)
from zoo_keeper.application.commands.handlers.hire_sitter_handler import (
    HireSitterHandler,
)
from zoo_keeper.application.commands.handlers.increase_water_handler import (
    IncreaseWaterHandler,
)
from zoo_keeper.application.commands.handlers.pay_salaries_handler import (
    PaySalariesHandler,
)
from zoo_keeper.core.container.infrastructure import get_logger
from zoo_keeper.domain.entities.zoo import Zoo


def get_add_income_handler(zoo: Zoo) -> AddIncomeHandler:
    """Get AddIncome command handler for ``zoo``."""
    return AddIncomeHandler(zoo=zoo, logger=get_logger())


def get_add_expense_handler(zoo: Zoo) -> AddExpenseHandler:
    """Get AddExpense command handler for ``zoo``."""
    return AddExpenseHandler(zoo=zoo, logger=get_logger())


def get_pay_salaries_handler(zoo: Zoo) -> PaySalariesHandler:
    """Get PaySalaries command handler for ``zoo``."""
    return PaySalariesHandler(zoo=zoo, logger=get_logger())


def get_admit_animal_handler(zoo: Zoo) -> AdmitAnimalHandler:
    """Get AdmitAnimal command handler for ``zoo``."""
    return AdmitAnimalHandler(zoo=zoo, logger=get_logger())


def get_increase_water_handler(zoo: Zoo) -> IncreaseWaterHandler:
    """Get IncreaseWater command handler for ``zoo``."""
    return IncreaseWaterHandler(zoo=zoo, logger=get_logger())


def get_hire_sitter_handler(zoo: Zoo) -> HireSitterHandler:
    """Get HireSitter command handler for ``zoo``."""
    return HireSitterHandler(zoo=zoo, logger=get_logger())


def get_create_sitter_handler() -> CreateSitterHandler:
    """Get CreateSitter command handler."""
    return CreateSitterHandler(logger=get_logger())


def get_assign_animal_handler() -> AssignAnimalHandler:
    """Get AssignAnimal command handler."""
    return AssignAnimalHandler(logger=get_logger())
