"""Domain models for the aptitude declaration."""

from itbi_declaration.models.aptitude import APTITUDE_CATEGORIES, AptitudeCategory
from itbi_declaration.models.enums import (
    AlertSeverity,
    ExportMode,
    MaritalStatus,
    RegistryOffice,
    Step,
    TabState,
)
from itbi_declaration.models.form import FormState, LandUseEntry

__all__ = [
    "APTITUDE_CATEGORIES",
    "AlertSeverity",
    "AptitudeCategory",
    "ExportMode",
    "FormState",
    "LandUseEntry",
    "MaritalStatus",
    "RegistryOffice",
    "Step",
    "TabState",
]
