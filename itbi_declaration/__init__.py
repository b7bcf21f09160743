"""Rural ITBI agricultural-aptitude declaration: form flow, validation and documents."""

from itbi_declaration.config import DeclarationConfig
from itbi_declaration.models import ExportMode, FormState, MaritalStatus, RegistryOffice, Step
from itbi_declaration.wizard import DeclarationWizard

__version__ = "0.1.0"

__all__ = [
    "DeclarationConfig",
    "DeclarationWizard",
    "ExportMode",
    "FormState",
    "MaritalStatus",
    "RegistryOffice",
    "Step",
    "__version__",
]
