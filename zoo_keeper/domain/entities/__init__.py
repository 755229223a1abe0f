"""Domain entities for business logic.

Pure business logic entities with no framework dependencies.
"""

from zoo_keeper.domain.entities.animal import Cat, Dog
from zoo_keeper.domain.entities.sitter import Sitter
from zoo_keeper.domain.entities.zoo import Zoo

__all__ = [
    "Cat",
    "Dog",
    "Sitter",
    "Zoo",
]
