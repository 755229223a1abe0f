"""Numeric input validators shared by domain entities.

Money and water amounts are exact decimals. Callers may pass ``int``,
``float``, ``str`` or ``Decimal``; floats are converted through ``str`` so
``6.1`` becomes ``Decimal("6.1")`` rather than its binary approximation.

These validators raise ``ValueError`` because a non-numeric amount is a
programming error, not a business rule violation.
"""

from decimal import Decimal, InvalidOperation


def validate_quantity(value: Decimal | int | float | str) -> Decimal:
    """Convert a numeric input to a finite Decimal.

    Args:
        value: Amount to convert.

    Returns:
        Decimal equivalent of ``value``.

    Raises:
        ValueError: If ``value`` is a bool, not numeric, NaN or infinite.

    Example:
        >>> validate_quantity(6)
        Decimal('6')
        >>> validate_quantity(0.1)
        Decimal('0.1')
    """
    # bool is an int subclass; True is never a meaningful amount
    if isinstance(value, bool):
        raise ValueError("Amount must be a number, not a bool")

    if not isinstance(value, Decimal):
        try:
            value = Decimal(str(value))
        except (InvalidOperation, TypeError) as e:
            raise ValueError(f"Amount must be a valid number: {e}") from e

    if value.is_nan() or value.is_infinite():
        raise ValueError("Amount cannot be NaN or Infinite")

    return value


def validate_non_negative_quantity(
    value: Decimal | int | float | str, *, field_name: str = "Amount"
) -> Decimal:
    """Convert a numeric input to a Decimal that is zero or more.

    Args:
        value: Amount to convert.
        field_name: Name used in the error message.

    Returns:
        Non-negative Decimal.

    Raises:
        ValueError: If ``value`` is invalid or negative.
    """
    amount = validate_quantity(value)
    if amount < 0:
        raise ValueError(f"{field_name} cannot be negative")
    return amount
