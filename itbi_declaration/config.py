"""Configuration management for itbi-declaration."""

from dataclasses import dataclass, field
from decimal import Decimal
from pathlib import Path

from itbi_declaration.exceptions import ConfigurationError


@dataclass
class ReconciliationConfig:
    """Rounding and tolerance applied to declared land-use areas."""

    tolerance: Decimal = Decimal("0.0001")
    decimal_places: int = 4

    @property
    def quantum(self) -> Decimal:
        """Smallest representable area step (``0.0001`` for 4 places)."""
        return Decimal(1).scaleb(-self.decimal_places)


@dataclass
class PageLayout:
    """Layout handed to the document engine on every export."""

    page_size: str = "A4"
    orientation: str = "portrait"
    margins_mm: tuple[float, float, float, float] = (10.0, 10.0, 10.0, 10.0)
    image_quality: float = 0.98
    render_scale: int = 2
    page_break_modes: tuple[str, ...] = ("avoid-all", "css", "legacy")


@dataclass
class ExportConfig:
    """Export configuration."""

    output_dir: Path = field(default_factory=lambda: Path("output"))
    filename_prefix: str = "Declaracao_Aptidao_Agricola"
    name_max_length: int = 30
    extension: str = "pdf"
    layout: PageLayout = field(default_factory=PageLayout)


@dataclass
class IssuerConfig:
    """Issuing authority printed on the declaration."""

    authority: str = "Prefeitura Municipal de Porto Velho · Secretaria Municipal de Economia"
    department: str = "Secretaria Executiva da Receita Municipal — SERM"
    title: str = "DECLARAÇÃO DE APTIDÃO AGRÍCOLA"
    subtitle: str = "ITBI — Imóvel Rural | Porto Velho / RO"
    municipality: str = "Porto Velho/RO"
    origin: str = "Portal SEMEC / Porto Velho-RO"


@dataclass
class DeclarationConfig:
    """Main configuration for itbi-declaration."""

    reconciliation: ReconciliationConfig = field(default_factory=ReconciliationConfig)
    export: ExportConfig = field(default_factory=ExportConfig)
    issuer: IssuerConfig = field(default_factory=IssuerConfig)
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "DeclarationConfig":
        """Create config from environment variables."""
        import os

        export = ExportConfig(
            output_dir=Path(os.getenv("ITBI_OUTPUT_DIR", "output")),
        )

        log_level = os.getenv("ITBI_LOG_LEVEL", "INFO").upper()
        if log_level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ConfigurationError(f"Invalid ITBI_LOG_LEVEL: {log_level}")

        return cls(export=export, log_level=log_level)
