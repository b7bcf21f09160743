"""The declaration wizard: store, navigator, validation and export wired together."""

import logging
import random
from datetime import datetime
from enum import Enum
from typing import Callable

from itbi_declaration.config import DeclarationConfig
from itbi_declaration.derived import Reconciliation, reconcile
from itbi_declaration.document.builder import build_document, build_review_summary
from itbi_declaration.document.exporter import DocumentEngine, DocumentExporter, ExportResult
from itbi_declaration.document.html import HtmlRenderer
from itbi_declaration.document.pdf import ReportLabEngine
from itbi_declaration.exceptions import ExportNotAllowedError
from itbi_declaration.models.enums import ExportMode, Step, TabState
from itbi_declaration.models.form import FormState
from itbi_declaration.navigator import StepNavigator
from itbi_declaration.session import SessionContext
from itbi_declaration.store import FormStore
from itbi_declaration.validation import (
    FIELD_ERROR_MESSAGES,
    Alert,
    reconciliation_alerts,
)

logger = logging.getLogger(__name__)


class DeclarationWizard:
    """One declaration session.

    The host feeds user input through :meth:`set_field` / :meth:`set_area`,
    moves with :meth:`go_to`, reads :meth:`preview_html` on the review step
    and finally calls :meth:`export`.

    Parameters
    ----------
    config : DeclarationConfig | None
        Library configuration.
    engine : DocumentEngine | None
        Export engine; defaults to :class:`ReportLabEngine`.
    on_transition : Callable[[Step], None] | None
        Host hook fired after each successful step change and after a save
        (scroll to top).
    clock : Callable[[], datetime] | None
        Source of "now" for document dates.
    rng : random.Random | None
        Source for the cosmetic protocol number.
    """

    def __init__(
        self,
        config: DeclarationConfig | None = None,
        engine: DocumentEngine | None = None,
        on_transition: Callable[[Step], None] | None = None,
        clock: Callable[[], datetime] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.config = config or DeclarationConfig()
        self.clock = clock or datetime.now
        self.store = FormStore()
        self.session = SessionContext()
        self.navigator = StepNavigator(
            self.store,
            self.session,
            on_transition=on_transition,
            config=self.config.reconciliation,
        )
        self.exporter = DocumentExporter(
            engine or ReportLabEngine(),
            self.session,
            config=self.config,
            clock=self.clock,
            rng=rng,
            on_saved=self.navigator.notify,
        )
        self.renderer = HtmlRenderer()

    @property
    def state(self) -> FormState:
        return self.store.state

    @property
    def step(self) -> Step:
        return self.navigator.current

    # Input

    def set_field(self, name: str, value: str | Enum) -> None:
        self.store.set_field(name, value)

    def set_area(self, position: int, value: str) -> None:
        self.store.set_area(position, value)

    def set_consent(self, accepted: bool) -> None:
        self.session.consent = bool(accepted)

    # Navigation

    def go_to(self, step: Step | int) -> bool:
        return self.navigator.go_to(step)

    def next(self) -> bool:
        return self.navigator.next()

    def back(self) -> bool:
        return self.navigator.back()

    def tab_states(self) -> dict[Step, TabState]:
        return self.navigator.tab_states()

    # Derived values

    @property
    def reconciliation(self) -> Reconciliation:
        return reconcile(self.state, self.config.reconciliation)

    def alerts(self) -> list[Alert]:
        return reconciliation_alerts(self.reconciliation)

    def error_messages(self) -> dict[str, str]:
        """Inline messages for every flagged field."""
        return {key: FIELD_ERROR_MESSAGES.get(key, "") for key in self.store.errors.active}

    # Review and export

    @property
    def can_export(self) -> bool:
        return self.step == Step.REVIEW and self.session.can_export

    def review_summary(self) -> str:
        return build_review_summary(self.state, self.config).text

    def preview_html(self) -> str:
        """HTML preview of the declaration as it will be exported today."""
        document = build_document(self.state, self.clock().date(), self.config)
        return self.renderer.render(document)

    def export(self, mode: ExportMode = ExportMode.SAVE) -> ExportResult:
        """Render the PDF (see :meth:`DocumentExporter.export`).

        Raises
        ------
        ExportNotAllowedError
            If the wizard is not on the review step, consent is missing or
            another export is running.
        """
        if self.step != Step.REVIEW:
            raise ExportNotAllowedError("O PDF só pode ser gerado na etapa de revisão")
        return self.exporter.export(self.state, mode)

    def reset(self) -> None:
        """Discard everything and start a new session."""
        self.store.state = FormState()
        self.store.errors.flags.clear()
        self.session.reset()
        self.navigator.reset()
        logger.debug("New declaration session started")
