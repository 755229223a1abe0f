"""Unit tests for Sitter domain entity.

Tests cover:
- Construction-time claiming of unclaimed animals
- Skipping animals that already have a sitter
- assign() with Result types
- Derived salary
- Unique identifiers
"""

from decimal import Decimal
from uuid import UUID

import pytest

from zoo_keeper.core.constants import DEFAULT_DISPLAY_NAME
from zoo_keeper.core.enums import ErrorCode
from zoo_keeper.core.result import Failure, Success
from zoo_keeper.domain.entities import Cat, Dog, Sitter
from zoo_keeper.domain.errors import SitterError


@pytest.mark.unit
class TestSitterCreation:
    """Test sitter construction."""

    def test_claims_unclaimed_animals(self, karabas, zeytin):
        """Test Ogun with two unclaimed dogs claims both and earns 1500."""
        ogun = Sitter(name="Ogun", animals=[karabas, zeytin])

        assert karabas.sitter is ogun
        assert zeytin.sitter is ogun
        assert ogun.animals == [karabas, zeytin]
        assert ogun.salary == Decimal("1500")

    def test_skips_animals_claimed_by_another_sitter(self, karabas, zeytin):
        """Test an animal with a sitter is left untouched and not collected."""
        ogun = Sitter(name="Ogun", animals=[karabas])
        oguz = Sitter(name="Oguz", animals=[karabas, zeytin])

        assert karabas.sitter is ogun
        assert zeytin.sitter is oguz
        assert oguz.animals == [zeytin]
        assert ogun.animals == [karabas]

    def test_duplicate_animal_in_initial_list_is_claimed_once(self, karabas):
        """Test the same animal listed twice appears once."""
        ogun = Sitter(name="Ogun", animals=[karabas, karabas])

        assert ogun.animals == [karabas]
        assert ogun.salary == Decimal("750")

    def test_does_not_alias_callers_list(self, karabas):
        """Test the sitter owns its own collection."""
        initial = [karabas]
        ogun = Sitter(name="Ogun", animals=initial)

        initial.clear()

        assert ogun.animals == [karabas]

    def test_defaults(self):
        """Test a sitter may start with no animals and no name."""
        sitter = Sitter()

        assert sitter.name == DEFAULT_DISPLAY_NAME
        assert sitter.animals == []
        assert sitter.salary == Decimal("0")

    def test_ids_are_unique_uuids(self):
        """Test each sitter gets its own UUID."""
        first = Sitter(name="Oguz")
        second = Sitter(name="Oguz")

        assert isinstance(first.id, UUID)
        assert first.id != second.id


@pytest.mark.unit
class TestSitterAssign:
    """Test assign() with Result types."""

    def test_assign_unclaimed_animal(self, boncuk):
        """Test assign sets the back-reference and returns the same animal."""
        oguz = Sitter(name="Oguz")

        result = oguz.assign(boncuk)

        assert isinstance(result, Success)
        assert result.value is boncuk
        assert boncuk.sitter is oguz
        assert oguz.animals == [boncuk]

    def test_assignment_is_visible_to_every_holder(self, boncuk):
        """Test the caller's reference observes the new sitter."""
        oguz = Sitter(name="Oguz")
        held_elsewhere = {"cat": boncuk}

        oguz.assign(boncuk)

        assert held_elsewhere["cat"].sitter is oguz

    def test_assign_claimed_animal_fails(self, boncuk):
        """Test an animal with another sitter is refused."""
        oguz = Sitter(name="Oguz")
        osman = Sitter(name="Osman")
        oguz.assign(boncuk)

        result = osman.assign(boncuk)

        assert isinstance(result, Failure)
        assert isinstance(result.error, SitterError)
        assert result.error.code == ErrorCode.ANIMAL_HAS_SITTER
        assert result.error.message == "This animal already has a sitter."
        assert boncuk.sitter is oguz
        assert osman.animals == []
        assert oguz.animals == [boncuk]

    def test_assign_same_animal_twice_to_same_sitter_fails(self, duman):
        """Test re-assigning to the current sitter is refused too."""
        oguz = Sitter(name="Oguz")
        oguz.assign(duman)

        result = oguz.assign(duman)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.ANIMAL_HAS_SITTER
        assert oguz.animals == [duman]

    def test_failure_details_name_the_animal(self, karabas, ogun):
        """Test details carry the refused animal's name."""
        result = Sitter(name="Osman").assign(karabas)

        assert isinstance(result, Failure)
        assert result.error.details == {"animal_name": "Karabas"}

    def test_mixed_variants(self):
        """Test a sitter can care for dogs and cats alike."""
        sitter = Sitter(name="Osman")

        sitter.assign(Dog(name="Pasa", water_consumption=6))
        sitter.assign(Cat(name="Limon", water_consumption=5))

        assert [animal.name for animal in sitter.animals] == ["Pasa", "Limon"]


@pytest.mark.unit
class TestSitterSalary:
    """Test derived salary."""

    def test_salary_tracks_assignments(self, boncuk, duman):
        """Test salary is recomputed on each read."""
        oguz = Sitter(name="Oguz")
        assert oguz.salary == Decimal("0")

        oguz.assign(boncuk)
        assert oguz.salary == Decimal("750")

        oguz.assign(duman)
        assert oguz.salary == Decimal("1500")

    def test_failed_assignment_does_not_change_salary(self, ogun, karabas):
        """Test a refused assignment leaves salary untouched."""
        osman = Sitter(name="Osman")

        osman.assign(karabas)

        assert osman.salary == Decimal("0")
        assert ogun.salary == Decimal("1500")
