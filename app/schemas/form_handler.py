"""Form handler API schemas.

Response bodies keep the shapes the embedded client script expects:
``{"data": {"redirect": url}}``, ``{"data": {"message": text}}`` and
``{"error": {"message": text}}``.
"""

from pydantic import BaseModel, Field


class RedirectData(BaseModel):
    redirect: str = Field(..., description="URL the client should navigate to")


class MessageData(BaseModel):
    message: str = Field(default="", description="Success text for the user")


class FormHandlerSuccessResponse(BaseModel):
    """Response for an accepted submission."""

    data: RedirectData | MessageData


class ErrorMessage(BaseModel):
    message: str = Field(default="", description="Error text for the user")


class FormHandlerErrorResponse(BaseModel):
    """Response for a disabled or failed submission."""

    error: ErrorMessage


class SheetSyncTriggerResponse(BaseModel):
    """Response for POST /triggers/sheet-sync/{submission_id}."""

    submission_id: str
    synced: bool = Field(..., description="False when the sync failed (see logs)")
    sheet_title: str | None = None
    sheet_created: bool = False


class SchemaDefaultTriggerResponse(BaseModel):
    """Response for POST /triggers/schema-default/{collection}/{document_id}."""

    collection: str
    document_id: str
    applied: bool = Field(..., description="False when the default schema document is missing")
