"""Spreadsheet header and data rows for a submission."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping

from app.domain.entities import FormTemplate
from app.shared.utils.datetime import format_local_date, format_local_time, to_timezone

DATE_HEADER = "Date"
TIME_HEADER = "Time"


def build_header_row(template: FormTemplate) -> list[str]:
    """``["Date", "Time", *sheet headers in position order]``."""
    return [DATE_HEADER, TIME_HEADER, *template.sheet_headers]


def build_data_row(
    created_at: datetime,
    timezone: str,
    template: FormTemplate,
    template_data: Mapping[str, Any],
) -> list[str]:
    """Local date, local time, then one value per template field in position order.

    Missing or empty values become ``""`` so every value lines up under its
    header.
    """
    local = to_timezone(created_at, timezone)
    values = [str(template_data.get(field_id) or "") for field_id in template.field_ids]
    return [format_local_date(local), format_local_time(local), *values]
