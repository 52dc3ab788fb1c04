"""Document-created triggers.

Called by the event source (e.g. an Eventarc/Firestore trigger) when a
document is created. Each call handles one document.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.v1.dependencies import get_schema_default_service, get_sheet_sync_service
from app.application.use_cases.schema_default import SchemaDefaultService
from app.application.use_cases.sheet_sync import SheetSyncService
from app.schemas.form_handler import (
    SchemaDefaultTriggerResponse,
    SheetSyncTriggerResponse,
)

router = APIRouter()


@router.post(
    "/sheet-sync/{submission_id}",
    response_model=SheetSyncTriggerResponse,
    status_code=202,
)
async def sheet_sync_trigger(
    submission_id: str,
    service: Annotated[SheetSyncService, Depends(get_sheet_sync_service)],
) -> SheetSyncTriggerResponse:
    """Mirror a stored submission into its app spreadsheet. Failures are logged, not returned."""
    result = await service.sync(submission_id)
    if result is None:
        return SheetSyncTriggerResponse(submission_id=submission_id, synced=False)
    return SheetSyncTriggerResponse(
        submission_id=submission_id,
        synced=True,
        sheet_title=result.sheet_title,
        sheet_created=result.sheet_created,
    )


@router.post(
    "/schema-default/{collection}/{document_id}",
    response_model=SchemaDefaultTriggerResponse,
)
async def schema_default_trigger(
    collection: str,
    document_id: str,
    service: Annotated[SchemaDefaultService, Depends(get_schema_default_service)],
) -> SchemaDefaultTriggerResponse:
    """Fill a new ``app`` or ``formTemplate`` document with its default schema."""
    merged = await service.apply(collection, document_id)
    return SchemaDefaultTriggerResponse(
        collection=collection,
        document_id=document_id,
        applied=merged is not None,
    )
