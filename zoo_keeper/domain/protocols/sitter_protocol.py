"""SitterProtocol: caregiver role.

A sitter owns the assignment relation to its animals (not the animals
themselves) and earns a salary derived from how many it cares for.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Protocol
from uuid import UUID

if TYPE_CHECKING:
    from zoo_keeper.core.result import Result
    from zoo_keeper.domain.errors import SitterError
    from zoo_keeper.domain.protocols.animal_protocol import AnimalProtocol


class SitterProtocol(Protocol):
    """Protocol for sitters hired by a zoo.

    Attributes:
        id: Unique identifier, stable for the sitter's lifetime.
        name: Optional display name.
        animals: Animals currently assigned, in assignment order.
    """

    id: UUID
    name: str | None
    animals: list[AnimalProtocol]

    @property
    def salary(self) -> Decimal:
        """Salary derived from the number of assigned animals."""
        ...

    def assign(self, animal: AnimalProtocol) -> Result[AnimalProtocol, SitterError]:
        """Take care of ``animal`` if no sitter has claimed it yet.

        Args:
            animal: Animal to assign. Mutated in place on success.

        Returns:
            Success(animal): Animal now points back to this sitter.
            Failure(SitterError): Animal already has a sitter.
        """
        ...
