"""Use case dependencies built from Firestore repositories and external clients."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, Request

from app.application.interfaces.services import ISheetsClient
from app.application.services.config_resolver import ConfigResolver
from app.application.services.field_registry import FieldRegistry
from app.application.services.spam_check import SpamCheckService
from app.application.use_cases.form_handler import FormHandlerService
from app.application.use_cases.schema_default import SchemaDefaultService
from app.application.use_cases.sheet_sync import SheetSyncService
from app.core.config import get_settings
from app.infrastructure.external.spam import AkismetClientFactory
from app.infrastructure.firebase.collections import SCHEMA_DEFAULT_DOCS
from app.infrastructure.firebase.repositories import (
    FirestoreAppRepository,
    FirestoreFormFieldRepository,
    FirestoreFormTemplateRepository,
    FirestoreSchemaDefaultRepository,
    FirestoreSubmissionRepository,
)

from .repositories import (
    get_app_repo,
    get_form_field_repo,
    get_form_template_repo,
    get_schema_default_repo,
    get_submission_repo,
)


def get_spam_classifier_factory(request: Request) -> AkismetClientFactory:
    """Akismet clients share the app-wide HTTP client created in lifespan."""
    settings = get_settings()
    return AkismetClientFactory(
        request.app.state.http_client,
        endpoint=settings.akismet_endpoint,
        timeout=settings.akismet_timeout_seconds,
    )


def get_optional_sheets_client(request: Request) -> ISheetsClient | None:
    return getattr(request.app.state, "sheets_client", None)


def get_sheets_client(
    client: Annotated[ISheetsClient | None, Depends(get_optional_sheets_client)],
) -> ISheetsClient:
    if client is None:
        raise HTTPException(status_code=503, detail="Google Sheets is not configured")
    return client


def get_form_handler_service(
    app_repo: Annotated[FirestoreAppRepository, Depends(get_app_repo)],
    field_repo: Annotated[FirestoreFormFieldRepository, Depends(get_form_field_repo)],
    template_repo: Annotated[FirestoreFormTemplateRepository, Depends(get_form_template_repo)],
    submission_repo: Annotated[FirestoreSubmissionRepository, Depends(get_submission_repo)],
    classifier_factory: Annotated[AkismetClientFactory, Depends(get_spam_classifier_factory)],
) -> FormHandlerService:
    return FormHandlerService(
        config_resolver=ConfigResolver(app_repo),
        field_registry=FieldRegistry(field_repo, template_repo),
        spam_check=SpamCheckService(classifier_factory),
        submission_repo=submission_repo,
    )


def _sheet_sync_service(
    app_repo: FirestoreAppRepository,
    template_repo: FirestoreFormTemplateRepository,
    submission_repo: FirestoreSubmissionRepository,
    sheets_client: ISheetsClient,
) -> SheetSyncService:
    return SheetSyncService(app_repo, template_repo, submission_repo, sheets_client)


def get_sheet_sync_service(
    app_repo: Annotated[FirestoreAppRepository, Depends(get_app_repo)],
    template_repo: Annotated[FirestoreFormTemplateRepository, Depends(get_form_template_repo)],
    submission_repo: Annotated[FirestoreSubmissionRepository, Depends(get_submission_repo)],
    sheets_client: Annotated[ISheetsClient, Depends(get_sheets_client)],
) -> SheetSyncService:
    return _sheet_sync_service(app_repo, template_repo, submission_repo, sheets_client)


def get_optional_sheet_sync_service(
    app_repo: Annotated[FirestoreAppRepository, Depends(get_app_repo)],
    template_repo: Annotated[FirestoreFormTemplateRepository, Depends(get_form_template_repo)],
    submission_repo: Annotated[FirestoreSubmissionRepository, Depends(get_submission_repo)],
    sheets_client: Annotated[ISheetsClient | None, Depends(get_optional_sheets_client)],
) -> SheetSyncService | None:
    """In-process sheet sync after a submission; None when disabled or Sheets is not configured."""
    if not get_settings().sheet_sync_inline or sheets_client is None:
        return None
    return _sheet_sync_service(app_repo, template_repo, submission_repo, sheets_client)


def get_schema_default_service(
    repo: Annotated[FirestoreSchemaDefaultRepository, Depends(get_schema_default_repo)],
) -> SchemaDefaultService:
    return SchemaDefaultService(repo, SCHEMA_DEFAULT_DOCS)
