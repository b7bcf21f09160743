"""Text formatting helpers shared by the store, validation and documents."""

import re
from datetime import date
from decimal import Decimal, InvalidOperation

CPF_DIGITS = 11

# Six areas of this size summed and quantized to 4 places stay within the
# 28-digit default decimal context
MAX_INTEGER_DIGITS = 15

MONTHS_PT_BR = (
    "janeiro",
    "fevereiro",
    "março",
    "abril",
    "maio",
    "junho",
    "julho",
    "agosto",
    "setembro",
    "outubro",
    "novembro",
    "dezembro",
)

_NON_DIGIT_RE = re.compile(r"\D")
_ALNUM_RUN_RE = re.compile(r"[^\W_]+")


def format_cpf(value: str) -> str:
    """Mask a CPF progressively as digits are typed.

    Non-digits are stripped and the result truncated to 11 digits before
    separators are inserted, each one only once enough digits reach it::

        >>> format_cpf("1234")
        '123.4'
        >>> format_cpf("123456789012345")
        '123.456.789-01'
    """
    digits = _NON_DIGIT_RE.sub("", value or "")[:CPF_DIGITS]
    if len(digits) <= 3:
        return digits
    if len(digits) <= 6:
        return f"{digits[:3]}.{digits[3:]}"
    if len(digits) <= 9:
        return f"{digits[:3]}.{digits[3:6]}.{digits[6:]}"
    return f"{digits[:3]}.{digits[3:6]}.{digits[6:9]}-{digits[9:]}"


def parse_decimal(value: str) -> Decimal | None:
    """Parse a decimal typed with a dot separator.

    Returns ``None`` for blank or unparsable text, for non-finite values and
    for numbers with more than ``MAX_INTEGER_DIGITS`` integer digits.
    """
    text = (value or "").strip()
    if not text:
        return None
    try:
        number = Decimal(text)
    except InvalidOperation:
        return None
    if not number.is_finite():
        return None
    if number and number.adjusted() >= MAX_INTEGER_DIGITS:
        return None
    return number


def format_area(value: Decimal, places: int = 4) -> str:
    """Format hectares with a fixed number of places: ``12.5000 ha``."""
    return f"{value:.{places}f} ha"


def format_signed_area(value: Decimal, places: int = 4) -> str:
    """Format a difference with an explicit sign: ``+0.0000 ha``."""
    if value == 0:
        value = abs(value)  # drop the sign of -0
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:.{places}f} ha"


def format_long_date(day: date) -> str:
    """Long pt-BR date, e.g. ``15 de março de 2024``."""
    return f"{day.day:02d} de {MONTHS_PT_BR[day.month - 1]} de {day.year}"


def sanitize_filename_component(value: str, max_length: int) -> str:
    """Join alphanumeric runs with underscores and truncate.

    ``"José da Silva-Neto"`` becomes ``"José_da_Silva_Neto"``.
    """
    return "_".join(_ALNUM_RUN_RE.findall(value or ""))[:max_length]
