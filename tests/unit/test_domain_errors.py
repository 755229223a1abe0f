"""Unit tests for domain error kinds.

Tests cover:
- Every ErrorCode has exactly one display message
- Error factories build fixed messages
- Errors are data, not exceptions
"""

import pytest

from zoo_keeper.core.enums import ErrorCode
from zoo_keeper.core.errors import DomainError
from zoo_keeper.domain.errors import (
    ERROR_MESSAGES,
    SitterError,
    ZooError,
    describe_error,
)


@pytest.mark.unit
class TestErrorMessages:
    """Test the display-message mapping."""

    def test_every_code_has_a_message(self):
        """Test the taxonomy is closed: one message per code."""
        assert set(ERROR_MESSAGES) == set(ErrorCode)

    @pytest.mark.parametrize(
        ("code", "message"),
        [
            (ErrorCode.ANIMAL_HAS_SITTER, "This animal already has a sitter."),
            (ErrorCode.INCOME_NOT_POSITIVE, "Income amount has to be a positive value."),
            (ErrorCode.EXPENSE_NOT_POSITIVE, "Expense amount has to be a positive value."),
            (ErrorCode.NOT_ENOUGH_BUDGET, "Not enough budget to pay."),
            (ErrorCode.SITTER_EXISTS, "Sitter is already added."),
            (ErrorCode.WATER_LIMIT_NOT_POSITIVE, "Water limit has to be a positive value."),
            (ErrorCode.NOT_ENOUGH_WATER, "There is not enough water to add a new animal."),
        ],
    )
    def test_describe_error(self, code, message):
        """Test each code maps to its fixed message."""
        assert describe_error(code) == message


@pytest.mark.unit
class TestErrorFactories:
    """Test SitterError.of and ZooError.of."""

    def test_zoo_error_of(self):
        """Test ZooError.of fills in the message."""
        error = ZooError.of(ErrorCode.NOT_ENOUGH_WATER)

        assert error.code == ErrorCode.NOT_ENOUGH_WATER
        assert error.message == describe_error(ErrorCode.NOT_ENOUGH_WATER)
        assert error.details is None

    def test_sitter_error_of_with_details(self):
        """Test SitterError.of keeps the supplied details."""
        error = SitterError.of(ErrorCode.ANIMAL_HAS_SITTER, details={"animal_name": "Boncuk"})

        assert error.details == {"animal_name": "Boncuk"}

    def test_factories_reject_foreign_codes(self):
        """Test a sitter cannot report a zoo error kind and vice versa."""
        with pytest.raises(KeyError):
            SitterError.of(ErrorCode.NOT_ENOUGH_BUDGET)
        with pytest.raises(KeyError):
            ZooError.of(ErrorCode.ANIMAL_HAS_SITTER)

    def test_errors_are_domain_errors_not_exceptions(self):
        """Test errors flow as data."""
        error = ZooError.of(ErrorCode.SITTER_EXISTS)

        assert isinstance(error, DomainError)
        assert not isinstance(error, Exception)

    def test_str_includes_code_and_message(self):
        """Test str() renders code and message."""
        error = ZooError.of(ErrorCode.SITTER_EXISTS)

        assert str(error) == "sitter_exists: Sitter is already added."

    def test_errors_are_immutable(self):
        """Test frozen dataclass semantics."""
        error = ZooError.of(ErrorCode.SITTER_EXISTS)

        with pytest.raises(AttributeError):
            error.message = "changed"  # type: ignore[misc]

    def test_errors_compare_by_value(self):
        """Test two errors of the same kind are equal."""
        assert ZooError.of(ErrorCode.NOT_ENOUGH_BUDGET) == ZooError.of(
            ErrorCode.NOT_ENOUGH_BUDGET
        )
