"""Centralized constants for internal implementation details.

These are fixed business constants, NOT environment-specific
configuration. For environment-driven settings use
``zoo_keeper.core.config`` instead.

Example:
    >>> from zoo_keeper.core.constants import SALARY_PER_ANIMAL
    >>> SALARY_PER_ANIMAL * 2
    Decimal('1500')
"""

from decimal import Decimal

# =============================================================================
# Staffing
# =============================================================================

SALARY_PER_ANIMAL: Decimal = Decimal("750")
"""Salary a sitter earns for each animal assigned to them."""


# =============================================================================
# Display
# =============================================================================

DEFAULT_DISPLAY_NAME: str = "Unknown"
"""Name given to animals and sitters created without one."""
