"""Application use cases: one entry point per workflow."""

from app.application.use_cases.form_handler import FormHandlerService, parse_submission
from app.application.use_cases.schema_default import SchemaDefaultService
from app.application.use_cases.sheet_sync import SheetSyncService

__all__ = [
    "FormHandlerService",
    "SchemaDefaultService",
    "SheetSyncService",
    "parse_submission",
]
