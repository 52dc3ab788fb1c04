"""Application DTOs (no transport or persistence dependency)."""

from app.application.dtos.submission import (
    FormHandlerResult,
    FormHandlerStatus,
    RequestMeta,
    SheetSyncResult,
)

__all__ = [
    "FormHandlerResult",
    "FormHandlerStatus",
    "RequestMeta",
    "SheetSyncResult",
]
