"""Sitter commands (CQRS write operations).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic
"""

from dataclasses import dataclass, field

from zoo_keeper.core.constants import DEFAULT_DISPLAY_NAME
from zoo_keeper.domain.protocols.animal_protocol import AnimalProtocol
from zoo_keeper.domain.protocols.sitter_protocol import SitterProtocol


@dataclass(frozen=True, kw_only=True)
class CreateSitter:
    """Create a sitter, claiming any unclaimed animals given.

    Attributes:
        name: Display name.
        animals: Animals the new sitter should care for. Those that
            already have a sitter are skipped.

    Example:
        >>> result = handler.handle(CreateSitter(name="Ogun", animals=(dog1, dog2)))
    """

    name: str | None = DEFAULT_DISPLAY_NAME
    animals: tuple[AnimalProtocol, ...] = field(default_factory=tuple)


@dataclass(frozen=True, kw_only=True)
class AssignAnimal:
    """Assign an animal to a sitter.

    Attributes:
        sitter: Sitter taking the animal.
        animal: Animal to assign (mutated in place on success).
    """

    sitter: SitterProtocol
    animal: AnimalProtocol
