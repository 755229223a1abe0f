"""Sitter domain entity.

A sitter owns the assignment relation to the animals it cares for and
keeps both sides of it consistent: an animal is in ``sitter.animals`` if
and only if ``animal.sitter is sitter``.

Usage:
    from zoo_keeper.domain.entities import Dog, Sitter

    karabas = Dog(name="Karabas", water_consumption=6)
    ogun = Sitter(name="Ogun", animals=[karabas])
    assert karabas.sitter is ogun
    assert ogun.salary == Decimal("750")
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import TypeVar
from uuid import UUID

from uuid_extensions import uuid7

from zoo_keeper.core.constants import DEFAULT_DISPLAY_NAME, SALARY_PER_ANIMAL
from zoo_keeper.core.enums import ErrorCode
from zoo_keeper.core.result import Failure, Result, Success
from zoo_keeper.domain.errors.sitter_error import SitterError
from zoo_keeper.domain.protocols.animal_protocol import AnimalProtocol

A = TypeVar("A", bound=AnimalProtocol)


@dataclass(eq=False, kw_only=True)
class Sitter:
    """Caregiver for a subset of animals.

    Construction claims every animal in ``animals`` that has no sitter yet.
    Animals already claimed by another sitter are skipped: they are left
    untouched and do not appear in this sitter's collection.

    Attributes:
        name: Display name.
        animals: Animals currently assigned, in assignment order.
        id: Unique identifier (UUIDv7), stable for the sitter's lifetime.

    Example:
        >>> dog1 = Dog(name="Karabas", water_consumption=6)
        >>> dog2 = Dog(name="Zeytin", water_consumption=6)
        >>> ogun = Sitter(name="Ogun", animals=[dog1, dog2])
        >>> ogun.salary
        Decimal('1500')
    """

    name: str | None = DEFAULT_DISPLAY_NAME
    animals: list[AnimalProtocol] = field(default_factory=list)
    id: UUID = field(default_factory=uuid7)

    def __post_init__(self) -> None:
        """Claim the unclaimed animals passed at construction."""
        candidates = self.animals
        self.animals = []
        for animal in candidates:
            if animal.sitter is None:
                animal.sitter = self
                self.animals.append(animal)

    @property
    def salary(self) -> Decimal:
        """Salary for the animals currently assigned (recomputed per read)."""
        return SALARY_PER_ANIMAL * len(self.animals)

    def assign(self, animal: A) -> Result[A, SitterError]:
        """Take care of an animal.

        The animal is mutated in place, so every holder of it observes the
        new sitter. An animal that already has a sitter is refused, even
        when that sitter is this one.

        Args:
            animal: Animal to assign.

        Returns:
            Success(animal): Animal now points back to this sitter.
            Failure(SitterError): ANIMAL_HAS_SITTER, nothing changed.
        """
        if animal.sitter is not None:
            return Failure(
                error=SitterError.of(
                    ErrorCode.ANIMAL_HAS_SITTER,
                    details={"animal_name": str(animal.name)},
                )
            )

        animal.sitter = self
        self.animals.append(animal)
        return Success(value=animal)
