"""Form state for the aptitude declaration."""

from dataclasses import dataclass, field, fields

from itbi_declaration.models.aptitude import APTITUDE_CATEGORIES, AptitudeCategory
from itbi_declaration.models.enums import MaritalStatus


@dataclass
class LandUseEntry:
    """Declared area for one aptitude category (raw input, hectares)."""

    category: AptitudeCategory
    value: str = ""


def _empty_land_use() -> list[LandUseEntry]:
    return [LandUseEntry(category=category) for category in APTITUDE_CATEGORIES]


@dataclass
class FormState:
    """Everything the declarant typed, as raw strings.

    Numeric fields (``total_area`` and the land-use values) keep the text
    the user entered; parsing happens in :mod:`itbi_declaration.derived`.
    """

    # Declarant
    name: str = ""
    cpf: str = ""
    rg: str = ""
    marital_status: str = ""
    occupation: str = ""
    email: str = ""
    address: str = ""

    # Spouse, only relevant when the marital status requires it
    spouse_name: str = ""
    spouse_cpf: str = ""
    spouse_rg: str = ""

    # Property
    registry_entry: str = ""  # Matricula
    registry_office: str = ""
    property_name: str = ""
    location: str = ""
    total_area: str = ""
    ccir: str = ""
    nirf: str = ""
    itbi_process: str = ""

    land_use: list[LandUseEntry] = field(default_factory=_empty_land_use)
    notes: str = ""

    @property
    def marital(self) -> MaritalStatus | None:
        """Marital status as an enum, ``None`` while not selected."""
        try:
            return MaritalStatus(self.marital_status)
        except ValueError:
            return None

    @property
    def spouse_required(self) -> bool:
        marital = self.marital
        return marital is not None and marital.requires_spouse


SCALAR_FIELDS: frozenset[str] = frozenset(
    f.name for f in fields(FormState) if f.name != "land_use"
)
TAX_ID_FIELDS: frozenset[str] = frozenset({"cpf", "spouse_cpf"})
SPOUSE_FIELDS: tuple[str, ...] = ("spouse_name", "spouse_cpf", "spouse_rg")
