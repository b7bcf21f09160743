"""End-to-end tests for the declaration wizard."""

import random
from datetime import datetime

import pytest

from itbi_declaration.config import DeclarationConfig
from itbi_declaration.exceptions import ConsentRequiredError, ExportNotAllowedError
from itbi_declaration.models.enums import AlertSeverity, ExportMode, MaritalStatus, RegistryOffice, Step
from itbi_declaration.store import LAND_USE_MISMATCH
from itbi_declaration.wizard import DeclarationWizard


@pytest.fixture
def transitions() -> list[Step]:
    return []


@pytest.fixture
def wizard(config: DeclarationConfig, engine, now: datetime, transitions: list[Step]) -> DeclarationWizard:
    return DeclarationWizard(
        config=config,
        engine=engine,
        on_transition=transitions.append,
        clock=lambda: now,
        rng=random.Random(11),
    )


def fill_declarant(wizard: DeclarationWizard) -> None:
    wizard.set_field("name", "Maria José da Silva")
    wizard.set_field("cpf", "12345678901")
    wizard.set_field("rg", "1234567")
    wizard.set_field("marital_status", MaritalStatus.SINGLE)
    wizard.set_field("occupation", "agricultora")
    wizard.set_field("address", "Rua das Flores, 100")


def fill_property(wizard: DeclarationWizard) -> None:
    wizard.set_field("registry_entry", "45.678")
    wizard.set_field("registry_office", RegistryOffice.FIRST)
    wizard.set_field("location", "Linha 10, Km 5")
    wizard.set_field("total_area", "100")


class TestWalkthrough:
    """Tests for a full declaration session."""

    def test_happy_path(
        self, wizard: DeclarationWizard, transitions: list[Step], config: DeclarationConfig
    ) -> None:
        """Test filling, validating, reviewing and saving a declaration."""
        fill_declarant(wizard)
        assert wizard.state.cpf == "123.456.789-01"
        assert wizard.next()

        fill_property(wizard)
        assert wizard.next()

        wizard.set_area(0, "30")
        wizard.set_area(1, "30")
        wizard.set_area(3, "40")
        assert wizard.alerts()[0].severity == AlertSeverity.SUCCESS
        assert wizard.next()

        assert wizard.step == Step.REVIEW
        assert "Maria José da Silva" in wizard.review_summary()
        assert "TOTAL DECLARADO" in wizard.preview_html()
        assert not wizard.can_export

        wizard.set_consent(True)
        assert wizard.can_export

        result = wizard.export(ExportMode.SAVE)

        assert result.path is not None
        assert result.path.parent == config.export.output_dir
        assert wizard.session.succeeded
        assert wizard.navigator.progress_percent == 100.0
        assert transitions == [Step.PROPERTY, Step.LAND_USE, Step.REVIEW, Step.REVIEW]
        assert not wizard.back()

    def test_mismatch_blocks_land_use(self, wizard: DeclarationWizard) -> None:
        """Test the land-use step refuses a short declaration."""
        fill_declarant(wizard)
        fill_property(wizard)
        wizard.go_to(Step.PROPERTY)
        wizard.go_to(Step.LAND_USE)
        wizard.set_area(0, "30")
        wizard.set_area(1, "30")
        wizard.set_area(2, "39")

        assert not wizard.next()
        assert wizard.error_messages() == {
            LAND_USE_MISMATCH: "A soma das áreas por aptidão deve ser exatamente igual à área total registrada."
        }
        assert wizard.reconciliation.display()["difference"] == "-1.0000 ha"

        wizard.set_area(2, "40")
        assert wizard.error_messages() == {}
        assert wizard.next()

    def test_error_messages_cleared_on_edit(self, wizard: DeclarationWizard) -> None:
        assert not wizard.next()
        assert "name" in wizard.error_messages()

        wizard.set_field("name", "Maria")

        assert "name" not in wizard.error_messages()
        assert "cpf" in wizard.error_messages()

    def test_spouse_messages_dropped_with_status(self, wizard: DeclarationWizard) -> None:
        """Test spouse messages disappear once the status no longer needs a spouse."""
        fill_declarant(wizard)
        wizard.set_field("marital_status", MaritalStatus.MARRIED)
        assert not wizard.next()
        assert "spouse_name" in wizard.error_messages()

        wizard.set_field("marital_status", MaritalStatus.DIVORCED)

        assert wizard.error_messages() == {}
        assert wizard.next()

    def test_oversized_area_does_not_raise(self, wizard: DeclarationWizard) -> None:
        """Test huge area input keeps the totalizer and preview working."""
        fill_declarant(wizard)
        fill_property(wizard)
        wizard.go_to(Step.LAND_USE)
        wizard.set_area(0, "1e30")

        assert wizard.alerts()[0].key == "land_use_empty"
        assert not wizard.next()
        assert "land_use_empty" in wizard.error_messages()
        assert "TOTAL DECLARADO" in wizard.preview_html()
        assert "Maria José da Silva" in wizard.review_summary()


class TestExportGate:
    """Tests for export preconditions."""

    def test_only_on_review(self, wizard: DeclarationWizard) -> None:
        wizard.set_consent(True)

        with pytest.raises(ExportNotAllowedError):
            wizard.export()

    def test_consent_required(self, wizard: DeclarationWizard) -> None:
        fill_declarant(wizard)
        wizard.go_to(Step.REVIEW)

        with pytest.raises(ConsentRequiredError):
            wizard.export()

    def test_preview_keeps_session_open(self, wizard: DeclarationWizard, engine) -> None:
        """Test a preview leaves the wizard editable."""
        fill_declarant(wizard)
        wizard.go_to(Step.REVIEW)
        wizard.set_consent(True)

        result = wizard.export(ExportMode.PREVIEW)

        assert result.path is None
        assert len(engine.calls) == 1
        assert not wizard.session.succeeded
        assert wizard.back()


class TestReset:
    """Tests for DeclarationWizard.reset."""

    def test_reset(self, wizard: DeclarationWizard) -> None:
        fill_declarant(wizard)
        wizard.go_to(Step.REVIEW)
        wizard.set_consent(True)
        wizard.export()

        wizard.reset()

        assert wizard.step == Step.DECLARANT
        assert wizard.state.name == ""
        assert not wizard.session.succeeded
        assert not wizard.session.consent
        assert wizard.error_messages() == {}
        assert wizard.alerts() == []
