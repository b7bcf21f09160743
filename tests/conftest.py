"""Pytest configuration and fixtures."""

from datetime import datetime
from pathlib import Path

import pytest

from itbi_declaration.config import DeclarationConfig, ExportConfig, PageLayout
from itbi_declaration.document.tree import DeclarationDocument
from itbi_declaration.models.enums import MaritalStatus, RegistryOffice
from itbi_declaration.models.form import FormState


class RecordingEngine:
    """Document engine double that writes a fixed payload."""

    def __init__(self, payload: bytes = b"%PDF-1.4 fake") -> None:
        self.payload = payload
        self.calls: list[tuple[DeclarationDocument, PageLayout, Path]] = []

    def render(self, document: DeclarationDocument, layout: PageLayout, target: Path) -> None:
        self.calls.append((document, layout, target))
        target.write_bytes(self.payload)


class FailingEngine:
    """Document engine double that writes a partial file and then fails."""

    def __init__(self) -> None:
        self.targets: list[Path] = []

    def render(self, document: DeclarationDocument, layout: PageLayout, target: Path) -> None:
        self.targets.append(target)
        target.write_bytes(b"%PDF-partial")
        raise RuntimeError("rasterizer crashed")


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def now() -> datetime:
    """Fixed export instant."""
    return datetime(2024, 3, 15, 10, 30)


@pytest.fixture
def config(tmp_path: Path) -> DeclarationConfig:
    """Config writing into a temporary output folder."""
    return DeclarationConfig(export=ExportConfig(output_dir=tmp_path / "out"))


@pytest.fixture
def filled_state() -> FormState:
    """A complete, reconciled declaration for a single declarant."""
    state = FormState(
        name="Maria José da Silva",
        cpf="123.456.789-01",
        rg="1234567 SESDEC/RO",
        marital_status=MaritalStatus.SINGLE.value,
        occupation="agricultora",
        email="maria@example.com",
        address="Rua das Flores, 100, Centro, CEP 76800-000",
        registry_entry="45.678",
        registry_office=RegistryOffice.FIRST.value,
        location="Linha 10, Km 5, Zona Rural — Porto Velho/RO",
        total_area="100.0000",
    )
    state.land_use[0].value = "30"
    state.land_use[1].value = "30"
    state.land_use[3].value = "40"
    return state


@pytest.fixture
def engine() -> RecordingEngine:
    return RecordingEngine()


@pytest.fixture
def failing_engine() -> FailingEngine:
    return FailingEngine()
