"""Declaration content tree, its renderers and the exporter."""

from itbi_declaration.document.builder import build_document, build_review_summary
from itbi_declaration.document.exporter import (
    DocumentEngine,
    DocumentExporter,
    ExportResult,
    generate_protocol,
)
from itbi_declaration.document.html import HtmlRenderer
from itbi_declaration.document.pdf import ReportLabEngine
from itbi_declaration.document.tree import DeclarationDocument

__all__ = [
    "DeclarationDocument",
    "DocumentEngine",
    "DocumentExporter",
    "ExportResult",
    "HtmlRenderer",
    "ReportLabEngine",
    "build_document",
    "build_review_summary",
    "generate_protocol",
]
