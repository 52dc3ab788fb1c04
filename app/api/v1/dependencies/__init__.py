"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the Firestore client, repositories and
application use cases. Routes depend only on these dependencies, not on
infrastructure directly. Tests override ``get_firestore`` and
``get_optional_sheets_client``.
"""

from app.api.v1.dependencies.repositories import (
    FirestoreDep,
    get_app_repo,
    get_firestore,
    get_form_field_repo,
    get_form_template_repo,
    get_schema_default_repo,
    get_submission_repo,
)
from app.api.v1.dependencies.services import (
    get_form_handler_service,
    get_optional_sheet_sync_service,
    get_optional_sheets_client,
    get_schema_default_service,
    get_sheet_sync_service,
    get_sheets_client,
    get_spam_classifier_factory,
)

__all__ = [
    "FirestoreDep",
    "get_app_repo",
    "get_firestore",
    "get_form_field_repo",
    "get_form_template_repo",
    "get_schema_default_repo",
    "get_submission_repo",
    "get_form_handler_service",
    "get_optional_sheet_sync_service",
    "get_optional_sheets_client",
    "get_schema_default_service",
    "get_sheet_sync_service",
    "get_sheets_client",
    "get_spam_classifier_factory",
]
