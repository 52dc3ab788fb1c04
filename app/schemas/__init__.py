"""Pydantic request/response schemas for the API."""

from app.schemas.form_handler import (
    ErrorMessage,
    FormHandlerErrorResponse,
    FormHandlerSuccessResponse,
    MessageData,
    RedirectData,
    SchemaDefaultTriggerResponse,
    SheetSyncTriggerResponse,
)
from app.schemas.health import HealthResponse, ReadinessResponse

__all__ = [
    "ErrorMessage",
    "FormHandlerErrorResponse",
    "FormHandlerSuccessResponse",
    "HealthResponse",
    "MessageData",
    "ReadinessResponse",
    "RedirectData",
    "SchemaDefaultTriggerResponse",
    "SheetSyncTriggerResponse",
]
