"""Zoo aggregate root.

The zoo owns the admitted animals, the hired sitters, a budget and a
remaining daily water allowance. Every operation is an independent guarded
transition: guards are checked in order, the first failing guard is
reported, and state is only mutated once all guards pass.

Invariants:
    - ``budget >= 0`` after every successful operation (guards, never clamping)
    - ``water_limit`` only decreases through a validated admission

Usage:
    from zoo_keeper.core.result import Failure, Success
    from zoo_keeper.domain.entities import Dog, Sitter, Zoo

    zoo = Zoo(water_limit=15, budget=3000, animals=[karabas], sitters=[ogun])
    match zoo.add_expense(250):
        case Success(value=budget):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import TypeVar

from zoo_keeper.core.enums import ErrorCode
from zoo_keeper.core.result import Failure, Result, Success
from zoo_keeper.domain.errors.zoo_error import ZooError
from zoo_keeper.domain.protocols.animal_protocol import AnimalProtocol
from zoo_keeper.domain.protocols.sitter_protocol import SitterProtocol
from zoo_keeper.domain.validators import (
    validate_non_negative_quantity,
    validate_quantity,
)

A = TypeVar("A", bound=AnimalProtocol)
S = TypeVar("S", bound=SitterProtocol)


@dataclass(eq=False, kw_only=True)
class Zoo:
    """Zoo aggregate (animals, sitters, budget, water allowance).

    Construction stores animals and sitters as given without checking them
    against budget or water; only later additions are gated. The starting
    ``water_limit`` is the supplied allowance minus the consumption of the
    initial animals.

    Attributes:
        water_limit: Remaining water allowance for further admissions.
        budget: Currency balance.
        animals: Admitted animals, in admission order.
        sitters: Hired sitters, in hiring order.

    Example:
        >>> zoo = Zoo(
        ...     water_limit=15,
        ...     budget=3000,
        ...     animals=[Dog(name="Karabas", water_consumption=6)],
        ...     sitters=[ogun],  # caring for two animals
        ... )
        >>> zoo.water_limit
        Decimal('9')
        >>> zoo.total_salaries
        Decimal('1500')
    """

    water_limit: Decimal
    budget: Decimal
    animals: list[AnimalProtocol] = field(default_factory=list)
    sitters: list[SitterProtocol] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Normalize amounts and consume the initial animals' water.

        Raises:
            ValueError: If an amount is not a number, or the budget or an
                initial animal's water consumption is negative.
        """
        self.budget = validate_non_negative_quantity(self.budget, field_name="Budget")
        self.animals = list(self.animals)
        self.sitters = list(self.sitters)

        initial_consumption = sum(
            (
                validate_non_negative_quantity(
                    animal.water_consumption, field_name="Water consumption"
                )
                for animal in self.animals
            ),
            Decimal("0"),
        )
        self.water_limit = validate_quantity(self.water_limit) - initial_consumption

    # =========================================================================
    # Derived Values
    # =========================================================================

    @property
    def total_salaries(self) -> Decimal:
        """Sum of the current salaries of all hired sitters."""
        return sum((sitter.salary for sitter in self.sitters), Decimal("0"))

    # =========================================================================
    # Budget Operations
    # =========================================================================

    def add_income(self, amount: Decimal | int | float) -> Result[Decimal, ZooError]:
        """Book an income.

        Args:
            amount: Income to add (must be positive).

        Returns:
            Success(budget): New budget.
            Failure(ZooError): INCOME_NOT_POSITIVE.
        """
        amount = validate_quantity(amount)
        if amount <= 0:
            return Failure(
                error=ZooError.of(
                    ErrorCode.INCOME_NOT_POSITIVE, details={"amount": str(amount)}
                )
            )

        self.budget += amount
        return Success(value=self.budget)

    def add_expense(self, amount: Decimal | int | float) -> Result[Decimal, ZooError]:
        """Book an expense.

        Args:
            amount: Expense to subtract (must be positive, at most the budget).

        Returns:
            Success(budget): New budget.
            Failure(ZooError): EXPENSE_NOT_POSITIVE or NOT_ENOUGH_BUDGET.
        """
        amount = validate_quantity(amount)
        if amount <= 0:
            return Failure(
                error=ZooError.of(
                    ErrorCode.EXPENSE_NOT_POSITIVE, details={"amount": str(amount)}
                )
            )
        if self.budget < amount:
            return Failure(
                error=ZooError.of(
                    ErrorCode.NOT_ENOUGH_BUDGET,
                    details={"required": str(amount), "budget": str(self.budget)},
                )
            )

        self.budget -= amount
        return Success(value=self.budget)

    def pay_salaries(self) -> Result[Decimal, ZooError]:
        """Pay every hired sitter's current salary out of the budget.

        Returns:
            Success(budget): New budget.
            Failure(ZooError): NOT_ENOUGH_BUDGET, budget unchanged.
        """
        total = self.total_salaries
        if self.budget < total:
            return Failure(
                error=ZooError.of(
                    ErrorCode.NOT_ENOUGH_BUDGET,
                    details={"required": str(total), "budget": str(self.budget)},
                )
            )

        self.budget -= total
        return Success(value=self.budget)

    # =========================================================================
    # Water Operations
    # =========================================================================

    def add_animal(self, animal: A) -> Result[A, ZooError]:
        """Admit an animal, consuming its water from the allowance.

        The allowance left after admission must still cover the animal's
        consumption once more (``water_limit - c >= c``).

        Args:
            animal: Animal to admit.

        Returns:
            Success(animal): Animal admitted.
            Failure(ZooError): NOT_ENOUGH_WATER, nothing changed.

        Raises:
            ValueError: If the animal's water consumption is negative.
        """
        consumption = validate_non_negative_quantity(
            animal.water_consumption, field_name="Water consumption"
        )
        remaining = self.water_limit - consumption
        if remaining < consumption:
            return Failure(
                error=ZooError.of(
                    ErrorCode.NOT_ENOUGH_WATER,
                    details={
                        "water_consumption": str(consumption),
                        "water_limit": str(self.water_limit),
                    },
                )
            )

        self.animals.append(animal)
        self.water_limit -= consumption
        return Success(value=animal)

    def increase_water(self, amount: Decimal | int | float) -> Result[Decimal, ZooError]:
        """Raise the remaining water allowance.

        Args:
            amount: Water to add (must be positive).

        Returns:
            Success(water_limit): New allowance.
            Failure(ZooError): WATER_LIMIT_NOT_POSITIVE.
        """
        amount = validate_quantity(amount)
        if amount <= 0:
            return Failure(
                error=ZooError.of(
                    ErrorCode.WATER_LIMIT_NOT_POSITIVE, details={"amount": str(amount)}
                )
            )

        self.water_limit += amount
        return Success(value=self.water_limit)

    # =========================================================================
    # Staffing Operations
    # =========================================================================

    def add_sitter(self, sitter: S) -> Result[S, ZooError]:
        """Hire a sitter if the budget covers all salaries including theirs.

        Hiring does not touch the budget; it only raises ``total_salaries``.

        Args:
            sitter: Sitter to hire.

        Returns:
            Success(sitter): Sitter hired.
            Failure(ZooError): SITTER_EXISTS or NOT_ENOUGH_BUDGET.
        """
        if any(hired.id == sitter.id for hired in self.sitters):
            return Failure(
                error=ZooError.of(
                    ErrorCode.SITTER_EXISTS, details={"sitter_id": str(sitter.id)}
                )
            )

        required = self.total_salaries + sitter.salary
        if required > self.budget:
            return Failure(
                error=ZooError.of(
                    ErrorCode.NOT_ENOUGH_BUDGET,
                    details={"required": str(required), "budget": str(self.budget)},
                )
            )

        self.sitters.append(sitter)
        return Success(value=sitter)
