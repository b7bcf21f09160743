"""Abstract content tree of the declaration.

The builder produces one :class:`DeclarationDocument`; the HTML preview and
the PDF engine both walk that same tree, so conditional content is decided
once.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum


class BlockStyle(str, Enum):
    BODY = "BODY"
    NOTES = "NOTES"
    STATEMENT = "STATEMENT"
    LEGAL = "LEGAL"


@dataclass(frozen=True)
class Span:
    text: str
    bold: bool = False


@dataclass(frozen=True)
class TextBlock:
    """A paragraph made of plain and bold runs."""

    spans: tuple[Span, ...]
    style: BlockStyle = BlockStyle.BODY

    @property
    def text(self) -> str:
        return "".join(span.text for span in self.spans)


@dataclass(frozen=True)
class Header:
    authority: str
    department: str
    title: str
    subtitle: str


@dataclass(frozen=True)
class TableRow:
    label: str
    value: str
    highlight: bool = False


@dataclass(frozen=True)
class Table:
    title: str
    columns: tuple[str, str]
    rows: tuple[TableRow, ...]
    numeric: bool = False  # Right-align the value column

    @property
    def labels(self) -> list[str]:
        return [row.label for row in self.rows]


@dataclass(frozen=True)
class SignatureColumn:
    heading: str
    lines: tuple[str, ...]
    caption: str


@dataclass(frozen=True)
class DeclarationDocument:
    """Everything printed on the declaration, in reading order."""

    header: Header
    identification: TextBlock
    declaration: TextBlock
    property_table: Table
    land_use_table: Table
    notes: TextBlock | None
    statement: TextBlock
    liability: TextBlock
    signatures: tuple[SignatureColumn, ...]
    footer: str
    issued_on: date

    @property
    def tables(self) -> tuple[Table, Table]:
        return (self.property_table, self.land_use_table)
