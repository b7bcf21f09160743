"""In-memory form store: the single source of truth for field values."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from itbi_declaration.exceptions import InvalidFieldValueError, UnknownFieldError
from itbi_declaration.formatting import format_cpf, parse_decimal
from itbi_declaration.models.aptitude import category_position
from itbi_declaration.models.form import SCALAR_FIELDS, SPOUSE_FIELDS, TAX_ID_FIELDS, FormState

logger = logging.getLogger(__name__)

# Synthetic error keys for the land-use reconciliation check
LAND_USE_EMPTY = "land_use_empty"
LAND_USE_MISMATCH = "land_use_mismatch"
LAND_USE_KEYS = (LAND_USE_EMPTY, LAND_USE_MISMATCH)


@dataclass
class ErrorSet:
    """Field name (or synthetic key) to "has error" flag."""

    flags: dict[str, bool] = field(default_factory=dict)

    def merge(self, keys: Iterable[str]) -> None:
        """Flag ``keys`` while keeping every error already raised."""
        for key in keys:
            self.flags[key] = True

    def clear(self, *keys: str) -> None:
        for key in keys:
            self.flags[key] = False

    def has(self, key: str) -> bool:
        return self.flags.get(key, False)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has(key)

    @property
    def active(self) -> list[str]:
        """Keys currently flagged, in the order they were first raised."""
        return [key for key, flagged in self.flags.items() if flagged]

    def __bool__(self) -> bool:
        return any(self.flags.values())


class FormStore:
    """Holds the :class:`FormState` and its validation error flags.

    Every edit replaces exactly one value and clears the error flag of
    what was edited.
    """

    def __init__(self, state: FormState | None = None) -> None:
        self.state = state or FormState()
        self.errors = ErrorSet()

    def set_field(self, name: str, value: str | Enum) -> None:
        """Replace one scalar field.

        Parameters
        ----------
        name : str
            Field name on :class:`FormState` (``"name"``, ``"cpf"``, ...).
        value : str | Enum
            New value. Enum members (``MaritalStatus``, ``RegistryOffice``)
            are stored by value. Tax-id fields are masked with
            :func:`format_cpf`.

        Raises
        ------
        UnknownFieldError
            If ``name`` is not a scalar form field.
        """
        if name not in SCALAR_FIELDS:
            raise UnknownFieldError(f"Unknown form field: {name}")

        if isinstance(value, Enum):
            value = value.value
        value = "" if value is None else str(value)
        if name in TAX_ID_FIELDS:
            value = format_cpf(value)

        setattr(self.state, name, value)
        self.errors.clear(name)
        if name == "total_area":
            self.errors.clear(LAND_USE_MISMATCH)
        elif name == "marital_status" and not self.state.spouse_required:
            self.errors.clear(*SPOUSE_FIELDS)
        logger.debug("Field %s updated", name)

    def set_area(self, position: int, value: str) -> None:
        """Replace the declared area of the category at ``position`` (0-5).

        Raises
        ------
        IndexError
            If ``position`` is outside the category table.
        InvalidFieldValueError
            If ``value`` parses to a negative number.
        """
        if not 0 <= position < len(self.state.land_use):
            raise IndexError(f"No aptitude category at position {position}")

        value = "" if value is None else str(value)
        number = parse_decimal(value)
        if number is not None and number < 0:
            raise InvalidFieldValueError(f"Land-use area cannot be negative: {value}")

        self.state.land_use[position].value = value
        self.errors.clear(*LAND_USE_KEYS)
        logger.debug("Land-use area %s updated", self.state.land_use[position].category.id)

    def set_area_by_category(self, category_id: str, value: str) -> None:
        """Same as :meth:`set_area`, addressing the category by id (``"a1"``)."""
        try:
            position = category_position(category_id)
        except KeyError:
            raise UnknownFieldError(f"Unknown aptitude category: {category_id}") from None
        self.set_area(position, value)
