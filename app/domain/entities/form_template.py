"""Form template and field definition entities.

A template lists the fields of one kind of submission, their output
position and their spreadsheet column header. The position-sorted field
list is the single source of truth for both the persisted field order and
the spreadsheet column order.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import Any, Iterable, Mapping

_DECIMAL = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def _comparable(value: Any) -> Any:
    return value.upper() if isinstance(value, str) else value


def _as_number(value: Any) -> float:
    """Numeric value of a position for a mixed comparison; NaN when there is none.

    Blank strings count as 0 and missing positions as NaN.
    """
    if isinstance(value, (bool, int, float)):
        return float(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        if _DECIMAL.fullmatch(text):
            return float(text)
    return math.nan


def compare_positions(a: Any, b: Any) -> int:
    """Compare two position values.

    Two strings compare upper-cased. Any other pair compares as numbers, so
    ``"3"`` sorts after ``2``. A pair involving a value with no numeric
    reading (a missing position, ``"abc"`` against a number) compares equal
    and the stable sort keeps input order. Existing spreadsheets depend on
    this exact ordering.
    """
    va, vb = _comparable(a), _comparable(b)
    if not (isinstance(va, str) and isinstance(vb, str)):
        va, vb = _as_number(va), _as_number(vb)
    if va > vb:
        return 1
    if va < vb:
        return -1
    return 0


@dataclass(frozen=True)
class TemplateField:
    """One field of a template: form field name, sort key, and sheet column label."""

    id: str
    position: Any = None
    sheet_header: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TemplateField":
        field_id = data.get("id")
        return cls(
            id=str(field_id),
            position=data.get("position"),
            sheet_header=str(data.get("sheetHeader") or field_id),
        )


def sort_fields(fields: Iterable[TemplateField]) -> tuple[TemplateField, ...]:
    """Return fields in ascending position order (stable)."""
    return tuple(
        sorted(fields, key=cmp_to_key(lambda a, b: compare_positions(a.position, b.position)))
    )


@dataclass(frozen=True)
class SpamCheckFields:
    """Template fields sent to the spam classifier.

    ``content`` fields are joined into one text blob; ``other`` fields are
    passed through as separate parameters.
    """

    content: tuple[str, ...] = ()
    other: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "SpamCheckFields":
        data = data or {}
        return cls(
            content=tuple(str(f) for f in data.get("content") or ()),
            other=tuple(str(f) for f in data.get("other") or ()),
        )


@dataclass(frozen=True)
class FormTemplate:
    """Submission template (``formTemplate/{name}``) with fields sorted by position."""

    name: str
    fields: tuple[TemplateField, ...] = field(default_factory=tuple)
    spam_check: SpamCheckFields = field(default_factory=SpamCheckFields)

    @classmethod
    def from_document(cls, name: str, data: Mapping[str, Any]) -> "FormTemplate":
        raw_fields = data.get("fields") or []
        return cls(
            name=name,
            fields=sort_fields(TemplateField.from_dict(f) for f in raw_fields),
            spam_check=SpamCheckFields.from_dict(data.get("fieldsSpamCheck")),
        )

    @property
    def field_ids(self) -> tuple[str, ...]:
        """Field names in position order."""
        return tuple(f.id for f in self.fields)

    @property
    def sheet_headers(self) -> tuple[str, ...]:
        """Sheet column labels in position order."""
        return tuple(f.sheet_header for f in self.fields)
