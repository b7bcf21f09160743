"""ReportLab document engine for the exported declaration."""

import logging
from pathlib import Path
from xml.sax.saxutils import escape

from reportlab.lib.colors import HexColor
from reportlab.lib.enums import TA_CENTER, TA_JUSTIFY, TA_RIGHT
from reportlab.lib.pagesizes import A4, landscape, letter, portrait
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import (
    HRFlowable,
    KeepTogether,
    Paragraph,
    SimpleDocTemplate,
    Spacer,
    Table,
    TableStyle,
)

from itbi_declaration.config import PageLayout
from itbi_declaration.document.tree import (
    DeclarationDocument,
    Header,
    SignatureColumn,
    TextBlock,
)
from itbi_declaration.document.tree import Table as TableNode
from itbi_declaration.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Document palette
GREEN = HexColor("#1a4731")
GOLD = HexColor("#c9973a")
GREEN_LIGHT = HexColor("#e8f5ee")
GOLD_LIGHT = HexColor("#f9efd7")
GRAY_LIGHT = HexColor("#f5f5f3")
BORDER = HexColor("#d6d6ce")
TEXT_MUTED = HexColor("#4a4a4a")
WHITE = HexColor("#ffffff")

PAGE_SIZES = {
    "A4": A4,
    "LETTER": letter,
}


def page_size(layout: PageLayout) -> tuple[float, float]:
    """Resolve the layout's page size and orientation to points."""
    try:
        size = PAGE_SIZES[layout.page_size.upper()]
    except KeyError:
        raise ConfigurationError(f"Unsupported page size: {layout.page_size}") from None
    if layout.orientation == "landscape":
        return landscape(size)
    if layout.orientation == "portrait":
        return portrait(size)
    raise ConfigurationError(f"Unsupported orientation: {layout.orientation}")


def markup(block: TextBlock) -> str:
    """Paragraph markup for a text block, bold runs in ``<b>``."""
    return "".join(
        f"<b>{escape(span.text)}</b>" if span.bold else escape(span.text)
        for span in block.spans
    )


class ReportLabEngine:
    """Lay the declaration content tree out as a paginated PDF.

    Output is vector, so ``image_quality`` and ``render_scale`` from the
    layout do not apply; page size, margins and the ``avoid-all`` break
    mode do.
    """

    def __init__(self) -> None:
        self.styles = getSampleStyleSheet()
        self._setup_custom_styles()

    def _setup_custom_styles(self) -> None:
        base = self.styles["Normal"]
        self.styles.add(ParagraphStyle(
            name="Authority",
            parent=base,
            fontSize=7.5,
            leading=10,
            textColor=WHITE,
            alignment=TA_CENTER,
        ))
        self.styles.add(ParagraphStyle(
            name="DocTitle",
            parent=base,
            fontName="Times-Bold",
            fontSize=18,
            leading=22,
            textColor=WHITE,
            alignment=TA_CENTER,
            spaceBefore=6,
        ))
        self.styles.add(ParagraphStyle(
            name="DocSubtitle",
            parent=base,
            fontSize=9,
            textColor=WHITE,
            alignment=TA_CENTER,
        ))
        self.styles.add(ParagraphStyle(
            name="Body",
            parent=base,
            fontSize=10.5,
            leading=16,
            alignment=TA_JUSTIFY,
            spaceAfter=10,
        ))
        self.styles.add(ParagraphStyle(
            name="Cell",
            parent=base,
            fontSize=9.5,
            leading=12,
        ))
        self.styles.add(ParagraphStyle(
            name="CellLabel",
            parent=base,
            fontName="Helvetica-Bold",
            fontSize=9.5,
            leading=12,
            textColor=GREEN,
        ))
        self.styles.add(ParagraphStyle(
            name="CellNumber",
            parent=base,
            fontName="Helvetica-Bold",
            fontSize=9.5,
            leading=12,
            alignment=TA_RIGHT,
        ))
        self.styles.add(ParagraphStyle(
            name="TableTitle",
            parent=base,
            fontName="Helvetica-Bold",
            fontSize=9,
            textColor=WHITE,
        ))
        self.styles.add(ParagraphStyle(
            name="Boxed",
            parent=base,
            fontSize=9.5,
            leading=14,
            textColor=TEXT_MUTED,
        ))
        self.styles.add(ParagraphStyle(
            name="Signature",
            parent=base,
            fontSize=10,
            leading=14,
            alignment=TA_CENTER,
        ))
        self.styles.add(ParagraphStyle(
            name="Legal",
            parent=base,
            fontSize=8,
            leading=11,
            textColor=TEXT_MUTED,
        ))
        self.styles.add(ParagraphStyle(
            name="Footer",
            parent=base,
            fontSize=8,
            textColor=TEXT_MUTED,
            alignment=TA_CENTER,
        ))

    def render(self, document: DeclarationDocument, layout: PageLayout, target: Path) -> None:
        """Write ``document`` as a PDF file at ``target``."""
        size = page_size(layout)
        top, right, bottom, left = (value * mm for value in layout.margins_mm)
        doc = SimpleDocTemplate(
            str(target),
            pagesize=size,
            topMargin=top,
            rightMargin=right,
            bottomMargin=bottom,
            leftMargin=left,
            title=document.header.title,
            author=document.header.authority,
        )
        story = self.story(document, layout, width=size[0] - left - right)
        logger.debug("Rendering %d sections to %s", len(story), target)
        doc.build(story)

    def story(self, document: DeclarationDocument, layout: PageLayout, width: float) -> list:
        """Flowables in reading order, one entry per document section."""
        sections = [
            self._header(document.header, width),
            [Paragraph(markup(document.identification), self.styles["Body"])],
            [Paragraph(markup(document.declaration), self.styles["Body"])],
            self._table(document.property_table, width),
            self._table(document.land_use_table, width),
        ]
        if document.notes is not None:
            sections.append(self._boxed(document.notes, width, GRAY_LIGHT, GREEN))
        sections.append(self._boxed(document.statement, width, GOLD_LIGHT, GOLD))
        sections.append(self._signatures(document.signatures, width))
        sections.append([
            Spacer(1, 8 * mm),
            HRFlowable(width="100%", thickness=0.5, color=BORDER),
            Paragraph(markup(document.liability), self.styles["Legal"]),
        ])
        sections.append(self._footer(document.footer, width))

        if "avoid-all" in layout.page_break_modes:
            return [KeepTogether(section) for section in sections]
        return [flowable for section in sections for flowable in section]

    def _header(self, header: Header, width: float) -> list:
        band = Table(
            [
                [Paragraph(escape(header.authority.upper()), self.styles["Authority"])],
                [Paragraph(escape(header.department.upper()), self.styles["Authority"])],
                [Paragraph(escape(header.title), self.styles["DocTitle"])],
                [Paragraph(escape(header.subtitle), self.styles["DocSubtitle"])],
            ],
            colWidths=[width],
        )
        band.setStyle(TableStyle([
            ("BACKGROUND", (0, 0), (-1, -1), GREEN),
            ("TOPPADDING", (0, 0), (-1, 0), 14),
            ("BOTTOMPADDING", (0, -1), (-1, -1), 14),
        ]))
        return [band, HRFlowable(width="100%", thickness=3, color=GOLD, spaceAfter=14)]

    def _table(self, node: TableNode, width: float) -> list:
        value_style = self.styles["CellNumber"] if node.numeric else self.styles["Cell"]
        data = [[
            Paragraph(escape(node.columns[0]), self.styles["CellLabel"]),
            Paragraph(escape(node.columns[1]), value_style),
        ]]
        highlighted = []
        for index, row in enumerate(node.rows, start=1):
            data.append([
                Paragraph(escape(row.label), self.styles["CellLabel"]),
                Paragraph(escape(row.value), value_style),
            ])
            if row.highlight:
                highlighted.append(("BACKGROUND", (0, index), (-1, index), GREEN_LIGHT))

        title = Table(
            [[Paragraph(escape(node.title.upper()), self.styles["TableTitle"])]],
            colWidths=[width],
        )
        title.setStyle(TableStyle([("BACKGROUND", (0, 0), (-1, -1), GREEN)]))

        table = Table(data, colWidths=[width * 0.4, width * 0.6], repeatRows=1)
        table.setStyle(TableStyle([
            ("BACKGROUND", (0, 0), (-1, 0), GRAY_LIGHT),
            ("GRID", (0, 0), (-1, -1), 0.5, BORDER),
            ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
            *highlighted,
        ]))
        return [title, table, Spacer(1, 6 * mm)]

    def _boxed(self, block: TextBlock, width: float, background, accent) -> list:
        box = Table([[Paragraph(markup(block), self.styles["Boxed"])]], colWidths=[width])
        box.setStyle(TableStyle([
            ("BACKGROUND", (0, 0), (-1, -1), background),
            ("LINEBEFORE", (0, 0), (0, -1), 3, accent),
            ("LEFTPADDING", (0, 0), (-1, -1), 10),
            ("TOPPADDING", (0, 0), (-1, -1), 8),
            ("BOTTOMPADDING", (0, 0), (-1, -1), 8),
        ]))
        return [box, Spacer(1, 5 * mm)]

    def _signatures(self, columns: tuple[SignatureColumn, ...], width: float) -> list:
        cells = []
        for column in columns:
            lines = [f"<b>{escape(column.heading)}</b>"]
            lines.extend(escape(line) for line in column.lines)
            lines.append(f'<font size="8" color="#4a4a4a">{escape(column.caption.upper())}</font>')
            cells.append(Paragraph("<br/>".join(lines), self.styles["Signature"]))

        gap = 15 * mm
        column_width = (width - gap * (len(cells) - 1)) / len(cells)
        row: list = []
        widths: list[float] = []
        for index, cell in enumerate(cells):
            if index:
                row.append("")
                widths.append(gap)
            row.append(cell)
            widths.append(column_width)

        table = Table([row], colWidths=widths)
        table.setStyle(TableStyle([
            *(
                ("LINEABOVE", (index, 0), (index, 0), 1, TEXT_MUTED)
                for index in range(0, len(row), 2)
            ),
            ("TOPPADDING", (0, 0), (-1, -1), 8),
        ]))
        return [Spacer(1, 22 * mm), table]

    def _footer(self, footer: str, width: float) -> list:
        box = Table([[Paragraph(escape(footer), self.styles["Footer"])]], colWidths=[width])
        box.setStyle(TableStyle([
            ("BACKGROUND", (0, 0), (-1, -1), GRAY_LIGHT),
            ("BOX", (0, 0), (-1, -1), 0.5, BORDER),
        ]))
        return [Spacer(1, 4 * mm), box]
