"""Animal domain entities.

Dog and Cat satisfy ``AnimalProtocol`` directly; they differ only in the
sound they make. Neither keeps its ``sitter`` back-reference consistent by
itself: that is the job of the sitter performing the assignment.

Usage:
    from zoo_keeper.domain.entities import Dog

    karabas = Dog(name="Karabas", water_consumption=6)
    karabas.speak()  # prints "Woof!!"
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import TYPE_CHECKING, ClassVar

from zoo_keeper.core.constants import DEFAULT_DISPLAY_NAME
from zoo_keeper.domain.validators import validate_non_negative_quantity

if TYPE_CHECKING:
    from zoo_keeper.domain.protocols.sitter_protocol import SitterProtocol


@dataclass(eq=False, kw_only=True)
class Dog:
    """A dog.

    Attributes:
        water_consumption: Water used per admission period (non-negative).
        name: Display name.
        sitter: Sitter caring for the dog, set by ``Sitter.assign``.

    Example:
        >>> dog = Dog(name="Zeytin", water_consumption=6)
        >>> dog.water_consumption
        Decimal('6')
        >>> dog.sitter is None
        True
    """

    sound: ClassVar[str] = "Woof!!"

    water_consumption: Decimal
    name: str | None = DEFAULT_DISPLAY_NAME
    # Excluded from repr: the sitter's repr lists its animals
    sitter: SitterProtocol | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        """Normalize water consumption.

        Raises:
            ValueError: If water consumption is not a number or is negative.
        """
        self.water_consumption = validate_non_negative_quantity(
            self.water_consumption, field_name="Water consumption"
        )

    def speak(self) -> None:
        """Bark."""
        print(self.sound)


@dataclass(eq=False, kw_only=True)
class Cat:
    """A cat.

    Attributes:
        water_consumption: Water used per admission period (non-negative).
        name: Display name.
        sitter: Sitter caring for the cat, set by ``Sitter.assign``.
    """

    sound: ClassVar[str] = "Meow!!"

    water_consumption: Decimal
    name: str | None = DEFAULT_DISPLAY_NAME
    sitter: SitterProtocol | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        """Normalize water consumption.

        Raises:
            ValueError: If water consumption is not a number or is negative.
        """
        self.water_consumption = validate_non_negative_quantity(
            self.water_consumption, field_name="Water consumption"
        )

    def speak(self) -> None:
        """Meow."""
        print(self.sound)
