"""Shared utilities: datetime and generators."""

from app.shared.utils.datetime import (
    ensure_utc,
    format_local_date,
    format_local_time,
    to_timezone,
    utc_now,
)
from app.shared.utils.generators import generate_cuid, generate_document_id

__all__ = [
    "generate_cuid",
    "generate_document_id",
    "utc_now",
    "ensure_utc",
    "to_timezone",
    "format_local_date",
    "format_local_time",
]
