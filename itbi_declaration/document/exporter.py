"""Export of the declaration through a document engine."""

import logging
import random
import shutil
import tempfile
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, Iterator, Protocol

from itbi_declaration.config import DeclarationConfig, PageLayout
from itbi_declaration.document.builder import build_document
from itbi_declaration.document.tree import DeclarationDocument
from itbi_declaration.exceptions import ExportError
from itbi_declaration.formatting import sanitize_filename_component
from itbi_declaration.models.enums import ExportMode
from itbi_declaration.models.form import FormState
from itbi_declaration.session import SessionContext

logger = logging.getLogger(__name__)

EXPORT_FAILED_MESSAGE = "Erro ao gerar o PDF. Tente novamente."


class DocumentEngine(Protocol):
    """Lays a content tree out into a paginated file."""

    def render(self, document: DeclarationDocument, layout: PageLayout, target: Path) -> None:
        ...


@dataclass(frozen=True)
class ExportResult:
    """Artifact produced by one export.

    ``content`` always holds the document bytes. ``path`` is set only in
    save mode, where the file was written to the output directory.
    """

    mode: ExportMode
    filename: str
    content: bytes
    path: Path | None = None


def generate_protocol(year: int, rng: random.Random | None = None) -> str:
    """Reference number ``ITBI-{year}-{00001..99999}``.

    Cosmetic only: random, not unique, never checked or stored beyond the
    session.
    """
    rng = rng or random.Random()
    return f"ITBI-{year}-{rng.randint(1, 99999):05d}"


def export_filename(name: str, day: datetime, config: DeclarationConfig) -> str:
    """``Declaracao_Aptidao_Agricola_{name}_{YYYY-MM-DD}.pdf``."""
    export = config.export
    safe_name = sanitize_filename_component(name, export.name_max_length)
    return f"{export.filename_prefix}_{safe_name}_{day.date().isoformat()}.{export.extension}"


@contextmanager
def staging_area() -> Iterator[Path]:
    """Scratch directory the engine renders into, removed on exit."""
    directory = tempfile.mkdtemp(prefix="itbi-declaration-")
    try:
        yield Path(directory)
    finally:
        shutil.rmtree(directory, ignore_errors=True)


class DocumentExporter:
    """Run one export at a time through a :class:`DocumentEngine`.

    Parameters
    ----------
    engine : DocumentEngine
        Layout collaborator (``ReportLabEngine`` in production).
    session : SessionContext
        Consent, in-progress and success flags.
    config : DeclarationConfig | None
        Output directory, filename convention, layout, issuer wording.
    clock : Callable[[], datetime] | None
        Source of "now" for the document date and filename.
    rng : random.Random | None
        Source for the cosmetic protocol number.
    on_saved : Callable[[], None] | None
        Called after a successful save (host scroll-to-top).
    """

    def __init__(
        self,
        engine: DocumentEngine,
        session: SessionContext,
        config: DeclarationConfig | None = None,
        clock: Callable[[], datetime] | None = None,
        rng: random.Random | None = None,
        on_saved: Callable[[], None] | None = None,
    ) -> None:
        self.engine = engine
        self.session = session
        self.config = config or DeclarationConfig()
        self.clock = clock or datetime.now
        self.rng = rng or random.Random()
        self.on_saved = on_saved

    def export(self, state: FormState, mode: ExportMode = ExportMode.SAVE) -> ExportResult:
        """Render ``state`` and deliver it according to ``mode``.

        Raises
        ------
        ConsentRequiredError
            If consent was not given.
        ExportInProgressError
            If an export is already running.
        ExportError
            If the engine fails; nothing is left in the output directory.
        """
        self.session.begin_export()
        try:
            return self._export(state, ExportMode(mode))
        finally:
            self.session.end_export()

    def _export(self, state: FormState, mode: ExportMode) -> ExportResult:
        now = self.clock()
        self.session.protocol = generate_protocol(now.year, self.rng)
        document = build_document(state, now.date(), self.config)
        filename = export_filename(state.name, now, self.config)

        try:
            with staging_area() as staging:
                artifact = staging / filename
                self.engine.render(document, self.config.export.layout, artifact)
                content = artifact.read_bytes()
                path = None
                if mode == ExportMode.SAVE:
                    path = self._publish(artifact, filename)
        except Exception as exc:
            logger.exception("Document export failed (protocol %s)", self.session.protocol)
            raise ExportError(EXPORT_FAILED_MESSAGE) from exc

        if mode == ExportMode.SAVE:
            self.session.mark_succeeded()
            logger.info("Declaration saved to %s (protocol %s)", path, self.session.protocol)
            if self.on_saved is not None:
                self.on_saved()
        else:
            logger.info("Declaration preview rendered (%d bytes)", len(content))

        return ExportResult(mode=mode, filename=filename, content=content, path=path)

    def _publish(self, artifact: Path, filename: str) -> Path:
        """Move a finished artifact from staging into the output directory."""
        output_dir = Path(self.config.export.output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        destination = output_dir / filename
        shutil.move(str(artifact), str(destination))
        return destination
