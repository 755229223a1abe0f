"""AnimalProtocol: capability set shared by every animal variant.

An animal has a display name, a water consumption per admission period,
an optional back-reference to the sitter caring for it, and a voice.

The ``sitter`` attribute is writable, but only ``SitterProtocol.assign``
(or a sitter's own construction) may set it. The sitter keeps its
``animals`` collection and this back-reference consistent; the animal
itself enforces nothing.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from zoo_keeper.domain.protocols.sitter_protocol import SitterProtocol


class AnimalProtocol(Protocol):
    """Protocol for animals admitted to a zoo.

    Attributes:
        name: Optional display name.
        water_consumption: Non-negative water used per admission period.
        sitter: Sitter caring for the animal, or None.
    """

    name: str | None
    water_consumption: Decimal
    sitter: SitterProtocol | None

    def speak(self) -> None:
        """Emit the variant's fixed sound. No return value, no state change."""
        ...
