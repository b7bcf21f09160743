"""Sample data generators."""

from itbi_declaration.generators.base import BaseGenerator
from itbi_declaration.generators.declaration import DeclarationGenerator

__all__ = ["BaseGenerator", "DeclarationGenerator"]
