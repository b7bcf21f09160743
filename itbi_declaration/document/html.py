"""HTML preview of the declaration for the host page."""

from html import escape

from itbi_declaration.document.tree import (
    DeclarationDocument,
    Header,
    SignatureColumn,
    Table,
    TextBlock,
)


class HtmlRenderer:
    """Render a :class:`DeclarationDocument` as an HTML fragment.

    Class names follow the host stylesheet (``preview-*``); styling itself
    lives with the host.
    """

    def render(self, document: DeclarationDocument) -> str:
        parts = [
            '<div class="preview-section">',
            self._header(document.header),
            '<div class="preview-body">',
            self.block(document.identification),
            self.block(document.declaration),
            self._table(document.property_table),
            self._table(document.land_use_table),
        ]
        if document.notes is not None:
            parts.append(self.block(document.notes))
        parts.append(self.block(document.statement))
        parts.append(self._signatures(document.signatures))
        parts.append("</div>")
        parts.append(self.block(document.liability, css_class="preview-penas"))
        parts.append(f'<div class="preview-info">{escape(document.footer)}</div>')
        parts.append("</div>")
        return "\n".join(parts)

    def block(self, block: TextBlock, css_class: str | None = None) -> str:
        """Render one paragraph, bold runs as ``<strong>``."""
        css_class = css_class or f"preview-{block.style.value.lower()}"
        inner = "".join(
            f"<strong>{escape(span.text)}</strong>" if span.bold else escape(span.text)
            for span in block.spans
        )
        return f'<p class="{css_class}">{inner}</p>'

    def _header(self, header: Header) -> str:
        return (
            '<div class="preview-header">'
            f'<div class="preview-orgao">{escape(header.authority)} · {escape(header.department)}</div>'
            f'<div class="preview-titulo">{escape(header.title)}</div>'
            f'<div class="preview-subtitulo">{escape(header.subtitle)}</div>'
            "</div>"
        )

    def _table(self, table: Table) -> str:
        align = ' style="text-align:right"' if table.numeric else ""
        head = (
            f"<thead><tr><th>{escape(table.columns[0])}</th>"
            f"<th{align}>{escape(table.columns[1])}</th></tr></thead>"
        )
        rows = []
        for row in table.rows:
            css = ' class="highlight"' if row.highlight else ""
            rows.append(
                f"<tr{css}><td>{escape(row.label)}</td>"
                f"<td{align}>{escape(row.value)}</td></tr>"
            )
        return (
            f'<table class="preview-table" data-title="{escape(table.title)}">'
            f"{head}<tbody>{''.join(rows)}</tbody></table>"
        )

    def _signatures(self, columns: tuple[SignatureColumn, ...]) -> str:
        boxes = []
        for column in columns:
            lines = [f"<strong>{escape(column.heading)}</strong>"]
            lines.extend(escape(line) for line in column.lines)
            lines.append(escape(column.caption))
            boxes.append(f'<div class="assinatura-box">{"<br/>".join(lines)}</div>')
        return f'<div class="preview-footer">{"".join(boxes)}</div>'
