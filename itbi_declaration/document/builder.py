"""Projection of the form state into the declaration content tree."""

from datetime import date

from itbi_declaration.config import DeclarationConfig, IssuerConfig
from itbi_declaration.derived import reconcile
from itbi_declaration.document import texts
from itbi_declaration.document.tree import (
    BlockStyle,
    DeclarationDocument,
    Header,
    SignatureColumn,
    Span,
    Table,
    TableRow,
    TextBlock,
)
from itbi_declaration.formatting import format_area, format_long_date
from itbi_declaration.models.form import FormState


def spouse_clause(state: FormState) -> str:
    """``, e seu cônjuge ...`` when the marital status requires a spouse."""
    if not state.spouse_required:
        return ""
    name = state.spouse_name or texts.SPOUSE_PLACEHOLDER
    cpf = state.spouse_cpf or texts.SPOUSE_PLACEHOLDER
    rg = state.spouse_rg or texts.SPOUSE_PLACEHOLDER
    return f", e seu cônjuge {name}, CPF {cpf}, RG {rg}"


def _identification(state: FormState, issuer: IssuerConfig) -> TextBlock:
    return TextBlock(
        spans=(
            Span(state.name, bold=True),
            Span(
                f", {state.occupation}, {state.marital_status.lower()}, "
                "inscrito(a) no RG sob o nº "
            ),
            Span(state.rg, bold=True),
            Span(" e CPF sob o nº "),
            Span(state.cpf, bold=True),
            Span(f"{spouse_clause(state)}, residente e domiciliado(a) à "),
            Span(state.address, bold=True),
            Span(
                f", Município de {issuer.municipality}, na qualidade de proprietário(a) "
                "do imóvel rural apresentado para emissão de ITBI,"
            ),
        )
    )


def _property_table(state: FormState, total_area: str) -> Table:
    rows = [TableRow("Matrícula", f"{state.registry_entry} — {state.registry_office}")]
    if state.property_name.strip():
        rows.append(TableRow("Denominação", state.property_name))
    rows.append(TableRow("Localização", state.location))
    rows.append(TableRow("Área Total Registrada", total_area, highlight=True))
    if state.ccir.strip():
        rows.append(TableRow("CCIR", state.ccir))
    if state.nirf.strip():
        rows.append(TableRow("NIRF / CAFIR", state.nirf))
    return Table(
        title=texts.PROPERTY_TABLE_TITLE,
        columns=texts.PROPERTY_TABLE_COLUMNS,
        rows=tuple(rows),
    )


def build_document(
    state: FormState,
    issued_on: date,
    config: DeclarationConfig | None = None,
) -> DeclarationDocument:
    """Build the declaration content tree.

    Pure: the same state and date always yield an equal tree, and ``state``
    is only read.

    Parameters
    ----------
    state : FormState
        Completed form.
    issued_on : date
        Date printed in the signature block and the footer.
    config : DeclarationConfig | None
        Issuer wording and area rounding.

    Returns
    -------
    DeclarationDocument
        Tree consumed by the HTML preview and the PDF engine.
    """
    config = config or DeclarationConfig()
    issuer = config.issuer
    places = config.reconciliation.decimal_places
    reconciliation = reconcile(state, config.reconciliation)
    long_date = format_long_date(issued_on)

    land_use_rows = [
        TableRow(entry.category.short_label, format_area(area, places))
        for entry, area in zip(state.land_use, reconciliation.areas)
        if area != 0
    ]
    land_use_rows.append(
        TableRow(
            texts.LAND_USE_TOTAL_LABEL,
            format_area(reconciliation.declared_sum, places),
            highlight=True,
        )
    )

    notes = None
    if state.notes.strip():
        notes = TextBlock(
            spans=(Span(texts.NOTES_LEAD, bold=True), Span(f" {state.notes}")),
            style=BlockStyle.NOTES,
        )

    return DeclarationDocument(
        header=Header(
            authority=issuer.authority,
            department=issuer.department,
            title=issuer.title,
            subtitle=issuer.subtitle,
        ),
        identification=_identification(state, issuer),
        declaration=TextBlock(spans=(Span(texts.DECLARA, bold=True), Span(texts.DECLARA_TAIL))),
        property_table=_property_table(state, format_area(reconciliation.total_area, places)),
        land_use_table=Table(
            title=texts.LAND_USE_TABLE_TITLE,
            columns=texts.LAND_USE_TABLE_COLUMNS,
            rows=tuple(land_use_rows),
            numeric=True,
        ),
        notes=notes,
        statement=TextBlock(
            spans=(Span(texts.CONSENT_LEAD, bold=True), Span(texts.CONSENT_TAIL)),
            style=BlockStyle.STATEMENT,
        ),
        liability=TextBlock(
            spans=(Span(texts.LIABILITY_LEAD, bold=True), Span(texts.LIABILITY_TAIL)),
            style=BlockStyle.LEGAL,
        ),
        signatures=(
            SignatureColumn(
                heading=state.name,
                lines=(f"CPF: {state.cpf}",),
                caption=texts.SIGNATURE_DECLARANT,
            ),
            SignatureColumn(
                heading=f"{issuer.municipality}, {long_date}",
                lines=(),
                caption=texts.SIGNATURE_PLACE_DATE,
            ),
        ),
        footer=f"Emissão: {long_date} | {issuer.origin}",
        issued_on=issued_on,
    )


def build_review_summary(state: FormState, config: DeclarationConfig | None = None) -> TextBlock:
    """One-paragraph summary shown on the review card before signing."""
    config = config or DeclarationConfig()
    reconciliation = reconcile(state, config.reconciliation)
    total_area = format_area(reconciliation.total_area, config.reconciliation.decimal_places)
    return TextBlock(
        spans=(
            Span(state.name, bold=True),
            Span(
                f", {state.occupation}, {state.marital_status.lower()}, CPF {state.cpf}, "
                f"RG {state.rg}{spouse_clause(state)}, residente à {state.address}, "
                f"{config.issuer.municipality} — responsável pelo imóvel rural objeto da "
                "Matrícula nº "
            ),
            Span(state.registry_entry, bold=True),
            Span(f", {state.registry_office}, medindo "),
            Span(total_area, bold=True),
            Span(f", localizado em {state.location}, "),
            Span("declara, sob as penas da lei", bold=True),
            Span(", a aptidão agrícola do imóvel conforme tabela preenchida."),
        )
    )
