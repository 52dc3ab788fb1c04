"""Firestore client and repository dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException

from app.infrastructure.firebase import get_firestore_client
from app.infrastructure.firebase._rest_client import FirestoreRESTClient
from app.infrastructure.firebase.repositories import (
    FirestoreAppRepository,
    FirestoreFormFieldRepository,
    FirestoreFormTemplateRepository,
    FirestoreSchemaDefaultRepository,
    FirestoreSubmissionRepository,
)


def get_firestore() -> FirestoreRESTClient:
    """Return the Firestore client or 503 when credentials were not configured."""
    client = get_firestore_client()
    if client is None:
        raise HTTPException(status_code=503, detail="Firestore is not configured")
    return client


FirestoreDep = Annotated[FirestoreRESTClient, Depends(get_firestore)]


def get_app_repo(db: FirestoreDep) -> FirestoreAppRepository:
    return FirestoreAppRepository(db)


def get_form_field_repo(db: FirestoreDep) -> FirestoreFormFieldRepository:
    return FirestoreFormFieldRepository(db)


def get_form_template_repo(db: FirestoreDep) -> FirestoreFormTemplateRepository:
    return FirestoreFormTemplateRepository(db)


def get_submission_repo(db: FirestoreDep) -> FirestoreSubmissionRepository:
    return FirestoreSubmissionRepository(db)


def get_schema_default_repo(db: FirestoreDep) -> FirestoreSchemaDefaultRepository:
    return FirestoreSchemaDefaultRepository(db)
