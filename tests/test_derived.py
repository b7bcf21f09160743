"""Tests for derived land-use values."""

from decimal import Decimal

from itbi_declaration.config import ReconciliationConfig
from itbi_declaration.derived import area_value, reconcile
from itbi_declaration.models.form import FormState


def _state(total: str, *areas: str) -> FormState:
    state = FormState(total_area=total)
    for entry, value in zip(state.land_use, areas):
        entry.value = value
    return state


class TestAreaValue:
    """Tests for area_value."""

    def test_blank_is_zero(self) -> None:
        assert area_value("") == 0

    def test_garbage_is_zero(self) -> None:
        assert area_value("dez") == 0

    def test_number(self) -> None:
        assert area_value("12.3456") == Decimal("12.3456")


class TestReconcile:
    """Tests for reconcile."""

    def test_exact_match(self) -> None:
        """Test 30 + 30 + 40 reconciles with a total of 100."""
        result = reconcile(_state("100", "30", "30", "", "40"))

        assert result.declared_sum == Decimal("100.0000")
        assert result.difference == Decimal("0.0000")
        assert result.reconciled

    def test_short_by_one(self) -> None:
        """Test 30 + 30 + 39 against 100 leaves -1.0000."""
        result = reconcile(_state("100", "30", "30", "39"))

        assert result.difference == Decimal("-1.0000")
        assert not result.reconciled
        assert result.display()["difference"] == "-1.0000 ha"

    def test_float_noise_is_rounded_away(self) -> None:
        """Test sums are rounded to four places before comparison."""
        result = reconcile(_state("0.3", "0.1", "0.2"))

        assert result.reconciled

    def test_sub_quantum_inputs_round_half_up(self) -> None:
        """Test extra input digits round to the nearest 0.0001."""
        result = reconcile(_state("10.0001", "10.00005"))

        assert result.declared_sum == Decimal("10.0001")
        assert result.reconciled

    def test_one_quantum_off_is_a_mismatch(self) -> None:
        result = reconcile(_state("10.0001", "10"))

        assert not result.reconciled

    def test_invalid_entries_count_as_zero(self) -> None:
        result = reconcile(_state("50", "abc", "50"))

        assert result.areas[0] == 0
        assert result.reconciled

    def test_oversized_entries_count_as_zero(self) -> None:
        """Test areas too large to round to four places are ignored."""
        huge = "1234567890123456789012345"
        result = reconcile(_state(huge, huge, "1e30"))

        assert result.areas[:2] == (0, 0)
        assert result.total_area == 0
        assert result.is_empty

    def test_largest_areas_in_every_category(self) -> None:
        """Test six maximal areas still sum and round exactly."""
        area = "999999999999999.9999"
        result = reconcile(_state("", *[area] * 6))

        assert result.declared_sum == Decimal("5999999999999999.9994")
        assert result.display()["declared_sum"] == "5999999999999999.9994 ha"

    def test_does_not_modify_state(self) -> None:
        state = _state("100", "30")
        reconcile(state)

        assert state.land_use[0].value == "30"
        assert state.total_area == "100"

    def test_custom_places(self) -> None:
        """Test rounding follows the configured places."""
        config = ReconciliationConfig(tolerance=Decimal("0.01"), decimal_places=2)
        result = reconcile(_state("10", "9.999"), config)

        assert result.declared_sum == Decimal("10.00")
        assert result.reconciled


class TestReconciliationDisplay:
    """Tests for Reconciliation.display and percentage_declared."""

    def test_without_total(self) -> None:
        """Test placeholders are shown until a total is entered."""
        result = reconcile(_state("", "10"))

        display = result.display()
        assert display["declared_sum"] == "10.0000 ha"
        assert display["total_area"] == "— ha"
        assert display["difference"] == "— ha"
        assert display["percentage"] == ""
        assert result.percentage_declared is None

    def test_with_total(self) -> None:
        result = reconcile(_state("200", "50"))

        display = result.display()
        assert display["total_area"] == "200.0000 ha"
        assert display["difference"] == "-150.0000 ha"
        assert display["percentage"] == "25.0% declarado"

    def test_excess_is_signed(self) -> None:
        result = reconcile(_state("100", "60", "50"))

        assert result.display()["difference"] == "+10.0000 ha"
        assert result.percentage_declared == Decimal("110.0")

    def test_empty(self) -> None:
        result = reconcile(_state("100"))

        assert result.is_empty
        assert result.has_total
