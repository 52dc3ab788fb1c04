"""Shared utilities: telemetry (logging) and cross-cutting helpers.

Used by domain, application, and infrastructure. No business logic.
"""

from app.shared.utils import (
    ensure_utc,
    format_local_date,
    format_local_time,
    generate_cuid,
    to_timezone,
    utc_now,
)

__all__ = [
    "generate_cuid",
    "utc_now",
    "ensure_utc",
    "to_timezone",
    "format_local_date",
    "format_local_time",
]
