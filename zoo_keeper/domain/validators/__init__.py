"""Validators package exports."""

from zoo_keeper.domain.validators.functions import (
    validate_non_negative_quantity,
    validate_quantity,
)

__all__ = [
    "validate_quantity",
    "validate_non_negative_quantity",
]
