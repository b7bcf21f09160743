"""Enumeration types for the declaration form."""

from enum import Enum, IntEnum


class MaritalStatus(str, Enum):
    SINGLE = "Solteiro(a)"
    MARRIED = "Casado(a)"
    DIVORCED = "Divorciado(a)"
    WIDOWED = "Viúvo(a)"
    COMMON_LAW_UNION = "União estável"

    @property
    def requires_spouse(self) -> bool:
        return self in (MaritalStatus.MARRIED, MaritalStatus.COMMON_LAW_UNION)


class RegistryOffice(str, Enum):
    FIRST = "1º Ofício de Registro de Imóveis"
    SECOND = "2º Ofício de Registro de Imóveis"
    THIRD = "3º Ofício de Registro de Imóveis"


class Step(IntEnum):
    DECLARANT = 1
    PROPERTY = 2
    LAND_USE = 3
    REVIEW = 4

    @property
    def title(self) -> str:
        return _STEP_TITLES[self]


_STEP_TITLES = {
    Step.DECLARANT: "Declarante",
    Step.PROPERTY: "Imóvel",
    Step.LAND_USE: "Aptidão",
    Step.REVIEW: "Revisão",
}


class TabState(str, Enum):
    PENDING = "PENDING"
    ACTIVE = "ACTIVE"
    DONE = "DONE"


class ExportMode(str, Enum):
    PREVIEW = "PREVIEW"
    SAVE = "SAVE"


class AlertSeverity(str, Enum):
    INFO = "INFO"
    WARNING = "WARNING"
    SUCCESS = "SUCCESS"
