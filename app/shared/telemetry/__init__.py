"""Shared telemetry: logging setup and request-id context."""

from app.shared.telemetry.logging import (
    RequestIDFilter,
    get_logger,
    request_id_var,
    setup_logging,
)

__all__ = [
    "RequestIDFilter",
    "get_logger",
    "request_id_var",
    "setup_logging",
]
