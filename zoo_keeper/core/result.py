"""Result types for railway-oriented programming.

Every zoo and sitter operation reports its outcome as a value instead of
raising. A business rule violation (not enough budget, not enough water,
an animal that already has a sitter) is an expected outcome the caller
inspects, so it travels back as ``Failure`` data.

Usage:
    from zoo_keeper.core.result import Failure, Success

    result = zoo.add_expense(Decimal("250"))
    match result:
        case Success(value=budget):
            print(f"New budget is {budget}")
        case Failure(error=error):
            print(error.message)
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Operation passed its guards and mutated state.

    Attributes:
        value: Payload of the operation (new budget, admitted animal, ...).
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Operation was rejected; state is unchanged.

    Attributes:
        error: The rejection reason.
    """

    error: E


# Type alias for Result union
Result: TypeAlias = Success[T] | Failure[E]
