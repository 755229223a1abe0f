"""Shared pytest fixtures.

Scenario builders mirror the canonical zoo setup:
- Karabas and Zeytin (dogs, 6 water each) cared for by Ogun
- Boncuk and Duman (cats, 5 water each), unclaimed
- A zoo with 15 water and 3000 budget holding Karabas and Ogun
"""

from unittest.mock import MagicMock

import pytest

from zoo_keeper.domain.entities import Cat, Dog, Sitter, Zoo
from zoo_keeper.domain.protocols.logger_protocol import LoggerProtocol


@pytest.fixture
def karabas() -> Dog:
    return Dog(name="Karabas", water_consumption=6)


@pytest.fixture
def zeytin() -> Dog:
    return Dog(name="Zeytin", water_consumption=6)


@pytest.fixture
def boncuk() -> Cat:
    return Cat(name="Boncuk", water_consumption=5)


@pytest.fixture
def duman() -> Cat:
    return Cat(name="Duman", water_consumption=5)


@pytest.fixture
def ogun(karabas: Dog, zeytin: Dog) -> Sitter:
    """Sitter caring for both dogs (salary 1500)."""
    return Sitter(name="Ogun", animals=[karabas, zeytin])


@pytest.fixture
def zoo(karabas: Dog, ogun: Sitter) -> Zoo:
    """Zoo with effective water limit 9 and total salaries 1500."""
    return Zoo(water_limit=15, budget=3000, animals=[karabas], sitters=[ogun])


@pytest.fixture
def mock_logger() -> MagicMock:
    """Logger double; bind() returns a child mock recording bound calls."""
    return MagicMock(spec=LoggerProtocol)
