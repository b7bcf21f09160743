"""Per-step validation rules and land-use reconciliation alerts."""

from dataclasses import dataclass

from itbi_declaration.config import ReconciliationConfig
from itbi_declaration.derived import Reconciliation, reconcile
from itbi_declaration.formatting import parse_decimal
from itbi_declaration.models.enums import AlertSeverity, Step
from itbi_declaration.models.form import SPOUSE_FIELDS, FormState
from itbi_declaration.store import LAND_USE_EMPTY, LAND_USE_MISMATCH

DECLARANT_REQUIRED = ("name", "cpf", "rg", "marital_status", "occupation", "address")
SPOUSE_REQUIRED = SPOUSE_FIELDS
PROPERTY_REQUIRED = ("registry_entry", "registry_office", "location")

FIELD_ERROR_MESSAGES: dict[str, str] = {
    "name": "Informe o nome completo.",
    "cpf": "CPF inválido.",
    "rg": "Informe o RG.",
    "marital_status": "Selecione o estado civil.",
    "occupation": "Informe a profissão.",
    "address": "Informe o endereço.",
    "spouse_name": "Informe o nome do cônjuge.",
    "spouse_cpf": "Informe o CPF do cônjuge.",
    "spouse_rg": "Informe o RG do cônjuge.",
    "registry_entry": "Informe o número da matrícula.",
    "registry_office": "Selecione o cartório.",
    "location": "Informe a localização do imóvel.",
    "total_area": "Informe a área total válida.",
    LAND_USE_EMPTY: "Nenhuma área foi informada. Preencha ao menos uma categoria de aptidão.",
    LAND_USE_MISMATCH: "A soma das áreas por aptidão deve ser exatamente igual à área total registrada.",
}


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one step."""

    step: Step
    errors: tuple[str, ...] = ()

    @property
    def passed(self) -> bool:
        return not self.errors

    def messages(self) -> dict[str, str]:
        return {key: FIELD_ERROR_MESSAGES.get(key, "") for key in self.errors}


@dataclass(frozen=True)
class Alert:
    """Banner shown under the land-use totalizer."""

    key: str
    severity: AlertSeverity
    message: str


def _blank(state: FormState, name: str) -> bool:
    return not getattr(state, name).strip()


def validate_step(
    state: FormState,
    step: Step | int,
    config: ReconciliationConfig | None = None,
) -> ValidationResult:
    """Validate the fields owned by ``step``.

    Parameters
    ----------
    state : FormState
        Form to check; never modified.
    step : Step | int
        Step number 1-4. Step 4 has no field rules.
    config : ReconciliationConfig | None
        Tolerance and rounding for the land-use check.

    Returns
    -------
    ValidationResult
        Failed keys in rule order; empty when the step passes.
    """
    step = Step(step)
    errors: list[str] = []

    if step == Step.DECLARANT:
        errors.extend(name for name in DECLARANT_REQUIRED if _blank(state, name))
        if state.spouse_required:
            errors.extend(name for name in SPOUSE_REQUIRED if _blank(state, name))

    elif step == Step.PROPERTY:
        errors.extend(name for name in PROPERTY_REQUIRED if _blank(state, name))
        total_area = parse_decimal(state.total_area)
        if total_area is None or total_area <= 0:
            errors.append("total_area")

    elif step == Step.LAND_USE:
        reconciliation = reconcile(state, config)
        if reconciliation.is_empty:
            errors.append(LAND_USE_EMPTY)
        elif not reconciliation.reconciled:
            errors.append(LAND_USE_MISMATCH)

    return ValidationResult(step=step, errors=tuple(errors))


def reconciliation_alerts(reconciliation: Reconciliation) -> list[Alert]:
    """Banners for the running land-use summary.

    Nothing is reported until a total area is known. A sum above the total
    is a blocking warning; an empty or short declaration is informational.
    """
    if not reconciliation.has_total:
        return []

    display = reconciliation.display()
    declared = display["declared_sum"]
    total = display["total_area"]

    if reconciliation.is_empty:
        return [
            Alert(
                key=LAND_USE_EMPTY,
                severity=AlertSeverity.INFO,
                message=FIELD_ERROR_MESSAGES[LAND_USE_EMPTY],
            )
        ]
    if not reconciliation.reconciled and reconciliation.difference > 0:
        return [
            Alert(
                key="land_use_exceeds",
                severity=AlertSeverity.WARNING,
                message=(
                    f"A soma das áreas declaradas ({declared}) excede a área total do "
                    f"imóvel ({total}). A declaração deve cobrir exatamente a área registrada."
                ),
            )
        ]
    if not reconciliation.reconciled:
        return [
            Alert(
                key="land_use_short",
                severity=AlertSeverity.INFO,
                message=(
                    f"A soma das áreas ({declared}) é inferior à área total do imóvel "
                    f"({total}). Toda a área deve ser declarada por aptidão antes de prosseguir."
                ),
            )
        ]
    return [
        Alert(
            key="land_use_reconciled",
            severity=AlertSeverity.SUCCESS,
            message="Área totalmente declarada. A soma corresponde exatamente à área total do imóvel.",
        )
    ]
