"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention and form a
closed set: every rejection a zoo or sitter operation can report has
exactly one code here.

Categories:
- Assignment conflicts (ANIMAL_HAS_SITTER, SITTER_EXISTS)
- Input validation (*_NOT_POSITIVE)
- Resource shortages (NOT_ENOUGH_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Assignment conflicts
    ANIMAL_HAS_SITTER = "animal_has_sitter"
    SITTER_EXISTS = "sitter_exists"

    # Input validation
    INCOME_NOT_POSITIVE = "income_not_positive"
    EXPENSE_NOT_POSITIVE = "expense_not_positive"
    WATER_LIMIT_NOT_POSITIVE = "water_limit_not_positive"

    # Resource shortages
    NOT_ENOUGH_BUDGET = "not_enough_budget"
    NOT_ENOUGH_WATER = "not_enough_water"
