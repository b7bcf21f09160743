"""Session-scoped flags gating document export."""

import logging
from dataclasses import dataclass

from itbi_declaration.exceptions import ConsentRequiredError, ExportInProgressError

logger = logging.getLogger(__name__)


@dataclass
class SessionContext:
    """Flags that live beside the form for one declaration session.

    ``generating`` is the only mutual-exclusion mechanism for exports: it is
    checked and set in the same call that starts an export. ``succeeded``
    switches the wizard to its terminal presentation. Both are reset only
    by :meth:`reset` (a new session).
    """

    consent: bool = False
    generating: bool = False
    succeeded: bool = False
    protocol: str = ""  # Cosmetic, see DocumentExporter

    @property
    def can_export(self) -> bool:
        return self.consent and not self.generating

    def begin_export(self) -> None:
        """Claim the export slot.

        Raises
        ------
        ConsentRequiredError
            If the declarant has not acknowledged the declaration.
        ExportInProgressError
            If another export is still running.
        """
        if not self.consent:
            raise ConsentRequiredError("A declaração precisa ser aceita antes de gerar o PDF")
        if self.generating:
            raise ExportInProgressError("Já existe um PDF sendo gerado")
        self.generating = True

    def end_export(self) -> None:
        self.generating = False

    def mark_succeeded(self) -> None:
        self.succeeded = True
        logger.info("Declaration session completed")

    def reset(self) -> None:
        """Start a new session."""
        self.consent = False
        self.generating = False
        self.succeeded = False
        self.protocol = ""
