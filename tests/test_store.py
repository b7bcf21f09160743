"""Tests for the form store and its error set."""

import pytest

from itbi_declaration.exceptions import InvalidFieldValueError, UnknownFieldError
from itbi_declaration.models.enums import MaritalStatus, RegistryOffice
from itbi_declaration.models.form import FormState
from itbi_declaration.store import (
    LAND_USE_EMPTY,
    LAND_USE_MISMATCH,
    ErrorSet,
    FormStore,
)


class TestErrorSet:
    """Tests for ErrorSet."""

    def test_starts_clean(self) -> None:
        """Test a new set has no active errors."""
        errors = ErrorSet()

        assert not errors
        assert errors.active == []

    def test_merge_keeps_previous_errors(self) -> None:
        """Test merging adds flags without dropping earlier ones."""
        errors = ErrorSet()
        errors.merge(["name"])
        errors.merge(["cpf"])

        assert errors.active == ["name", "cpf"]
        assert "name" in errors

    def test_clear(self) -> None:
        """Test clearing drops only the named keys."""
        errors = ErrorSet()
        errors.merge(["name", "cpf"])
        errors.clear("name")

        assert not errors.has("name")
        assert errors.has("cpf")

    def test_contains_ignores_non_strings(self) -> None:
        assert 1 not in ErrorSet()


class TestSetField:
    """Tests for FormStore.set_field."""

    def test_replaces_one_field(self) -> None:
        """Test only the named field changes."""
        store = FormStore()
        store.set_field("name", "Maria")

        assert store.state.name == "Maria"
        assert store.state.rg == ""

    def test_unknown_field(self) -> None:
        """Test unknown field names are rejected."""
        with pytest.raises(UnknownFieldError):
            FormStore().set_field("nickname", "x")

    def test_land_use_is_not_a_scalar_field(self) -> None:
        with pytest.raises(UnknownFieldError):
            FormStore().set_field("land_use", "10")

    def test_masks_cpf(self) -> None:
        """Test both tax-id fields are masked on input."""
        store = FormStore()
        store.set_field("cpf", "12345678901")
        store.set_field("spouse_cpf", "9876")

        assert store.state.cpf == "123.456.789-01"
        assert store.state.spouse_cpf == "987.6"

    def test_does_not_mask_other_fields(self) -> None:
        store = FormStore()
        store.set_field("rg", "12345678901")

        assert store.state.rg == "12345678901"

    def test_stores_enum_values(self) -> None:
        """Test enum members are stored by their label."""
        store = FormStore()
        store.set_field("marital_status", MaritalStatus.MARRIED)
        store.set_field("registry_office", RegistryOffice.SECOND)

        assert store.state.marital_status == "Casado(a)"
        assert store.state.registry_office == "2º Ofício de Registro de Imóveis"
        assert store.state.spouse_required

    def test_none_becomes_empty(self) -> None:
        store = FormStore(FormState(name="Maria"))
        store.set_field("name", None)

        assert store.state.name == ""

    def test_clears_own_error(self) -> None:
        """Test editing a field clears its error flag and no other."""
        store = FormStore()
        store.errors.merge(["name", "cpf"])

        store.set_field("name", "Maria")

        assert not store.errors.has("name")
        assert store.errors.has("cpf")

    def test_dropping_spouse_requirement_clears_spouse_errors(self) -> None:
        """Test switching to a status without spouse clears the spouse flags."""
        store = FormStore(FormState(marital_status=MaritalStatus.MARRIED.value))
        store.errors.merge(["spouse_name", "spouse_cpf", "spouse_rg", "name"])

        store.set_field("marital_status", MaritalStatus.SINGLE)

        assert not store.errors.has("spouse_name")
        assert not store.errors.has("spouse_cpf")
        assert not store.errors.has("spouse_rg")
        assert store.errors.has("name")

    def test_keeping_spouse_requirement_keeps_spouse_errors(self) -> None:
        store = FormStore(FormState(marital_status=MaritalStatus.MARRIED.value))
        store.errors.merge(["spouse_name"])

        store.set_field("marital_status", MaritalStatus.COMMON_LAW_UNION)

        assert store.errors.has("spouse_name")

    def test_total_area_clears_mismatch(self) -> None:
        """Test editing the total area clears the mismatch flag."""
        store = FormStore()
        store.errors.merge(["total_area", LAND_USE_MISMATCH, LAND_USE_EMPTY])

        store.set_field("total_area", "100")

        assert not store.errors.has("total_area")
        assert not store.errors.has(LAND_USE_MISMATCH)
        assert store.errors.has(LAND_USE_EMPTY)


class TestSetArea:
    """Tests for FormStore.set_area and set_area_by_category."""

    def test_sets_position(self) -> None:
        store = FormStore()
        store.set_area(3, "40.5")

        assert store.state.land_use[3].value == "40.5"
        assert store.state.land_use[3].category.id == "a4"

    def test_out_of_range(self) -> None:
        """Test positions outside 0-5 are rejected."""
        store = FormStore()

        with pytest.raises(IndexError):
            store.set_area(6, "1")
        with pytest.raises(IndexError):
            store.set_area(-1, "1")

    def test_negative_area_rejected(self) -> None:
        """Test negative areas are refused and the value kept."""
        store = FormStore()
        store.set_area(0, "10")

        with pytest.raises(InvalidFieldValueError):
            store.set_area(0, "-1")
        assert store.state.land_use[0].value == "10"

    def test_unparsable_text_is_kept(self) -> None:
        """Test raw text is stored as typed."""
        store = FormStore()
        store.set_area(0, "abc")

        assert store.state.land_use[0].value == "abc"

    def test_clears_land_use_errors(self) -> None:
        """Test any area edit clears both land-use flags."""
        store = FormStore()
        store.errors.merge([LAND_USE_EMPTY, LAND_USE_MISMATCH, "name"])

        store.set_area(2, "5")

        assert not store.errors.has(LAND_USE_EMPTY)
        assert not store.errors.has(LAND_USE_MISMATCH)
        assert store.errors.has("name")

    def test_by_category(self) -> None:
        store = FormStore()
        store.set_area_by_category("a6", "12")

        assert store.state.land_use[5].value == "12"

    def test_by_unknown_category(self) -> None:
        with pytest.raises(UnknownFieldError):
            FormStore().set_area_by_category("a7", "12")
