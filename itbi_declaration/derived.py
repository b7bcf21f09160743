"""Values derived from the form state, recomputed on every read."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from itbi_declaration.config import ReconciliationConfig
from itbi_declaration.formatting import format_area, format_signed_area, parse_decimal
from itbi_declaration.models.form import FormState

ZERO = Decimal("0")
_PERCENT_QUANTUM = Decimal("0.1")


def area_value(raw: str) -> Decimal:
    """Numeric value of an area input; blank or unparsable counts as zero."""
    value = parse_decimal(raw)
    return ZERO if value is None else value


@dataclass(frozen=True)
class Reconciliation:
    """Declared land-use areas compared with the registered total area."""

    areas: tuple[Decimal, ...]
    declared_sum: Decimal
    total_area: Decimal
    difference: Decimal
    reconciled: bool
    places: int = 4

    @property
    def has_total(self) -> bool:
        return self.total_area > 0

    @property
    def is_empty(self) -> bool:
        return self.declared_sum == 0

    @property
    def percentage_declared(self) -> Decimal | None:
        """Share of the total area already declared, ``None`` without a total."""
        if not self.has_total:
            return None
        ratio = self.declared_sum / self.total_area * 100
        return ratio.quantize(_PERCENT_QUANTUM, rounding=ROUND_HALF_UP)

    def display(self) -> dict[str, str]:
        """Strings for the running totalizer shown on the land-use step."""
        percentage = self.percentage_declared
        return {
            "declared_sum": format_area(self.declared_sum, self.places),
            "total_area": format_area(self.total_area, self.places) if self.has_total else "— ha",
            "difference": (
                format_signed_area(self.difference, self.places) if self.has_total else "— ha"
            ),
            "percentage": f"{percentage}% declarado" if percentage is not None else "",
        }


def reconcile(state: FormState, config: ReconciliationConfig | None = None) -> Reconciliation:
    """Compute sum, difference and reconciliation flag for ``state``.

    Parameters
    ----------
    state : FormState
        Form to read.
    config : ReconciliationConfig | None
        Rounding places and tolerance. Defaults to 4 places / 0.0001.

    Returns
    -------
    Reconciliation
        Derived values; ``state`` is not modified.
    """
    config = config or ReconciliationConfig()
    quantum = config.quantum

    areas = tuple(area_value(entry.value) for entry in state.land_use)
    declared_sum = sum(areas, ZERO).quantize(quantum, rounding=ROUND_HALF_UP)
    total_area = area_value(state.total_area)
    difference = (declared_sum - total_area).quantize(quantum, rounding=ROUND_HALF_UP)

    return Reconciliation(
        areas=areas,
        declared_sum=declared_sum,
        total_area=total_area,
        difference=difference,
        reconciled=abs(difference) < config.tolerance,
        places=config.decimal_places,
    )
