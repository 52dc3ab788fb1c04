"""Firestore-backed repository implementations."""

from app.infrastructure.firebase.repositories.app_repo_firestore import (
    FirestoreAppRepository,
)
from app.infrastructure.firebase.repositories.form_repo_firestore import (
    FirestoreFormFieldRepository,
    FirestoreFormTemplateRepository,
)
from app.infrastructure.firebase.repositories.schema_default_repo_firestore import (
    FirestoreSchemaDefaultRepository,
)
from app.infrastructure.firebase.repositories.submission_repo_firestore import (
    FirestoreSubmissionRepository,
)

__all__ = [
    "FirestoreAppRepository",
    "FirestoreFormFieldRepository",
    "FirestoreFormTemplateRepository",
    "FirestoreSchemaDefaultRepository",
    "FirestoreSubmissionRepository",
]
