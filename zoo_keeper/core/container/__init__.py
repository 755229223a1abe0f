"""Container module - Centralized dependency injection.

Composition root: the only place that picks adapters and wires handlers.

The container is organized into modules:
- infrastructure: Core services (logging)
- zoo_handlers: Command handler factories

Usage:
    from zoo_keeper.core.container import get_add_income_handler

    handler = get_add_income_handler(zoo)
    result = handler.handle(AddIncome(amount=Decimal("3000")))
"""

from zoo_keeper.core.container.infrastructure import get_logger
from zoo_keeper.core.container.zoo_handlers import (
    get_add_expense_handler,
    get_add_income_handler,
    get_admit_animal_handler,
    get_assign_animal_handler,
    get_create_sitter_handler,
    get_hire_sitter_handler,
    get_increase_water_handler,
    get_pay_salaries_handler,
)

__all__ = [
    # Infrastructure
    "get_logger",
    # Zoo handlers
    "get_add_expense_handler",
    "get_add_income_handler",
    "get_admit_animal_handler",
    "get_hire_sitter_handler",
    "get_increase_water_handler",
    "get_pay_salaries_handler",
    # Sitter handlers
    "get_assign_animal_handler",
    "get_create_sitter_handler",
]
