"""Firestore-backed submission store (implements ISubmissionRepository)."""

from __future__ import annotations

import logging

from app.domain.entities import PersistedSubmission
from app.infrastructure.firebase._rest_client import FirestoreRESTClient
from app.infrastructure.firebase._rest_encoding import SERVER_TIMESTAMP
from app.infrastructure.firebase.collections import COLLECTION_SUBMIT_FORM

logger = logging.getLogger(__name__)


class FirestoreSubmissionRepository:
    """Submissions in ``submitForm``. Each write creates a new document."""

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._client = client
        self._coll = client.collection(COLLECTION_SUBMIT_FORM)

    async def create(self, submission: PersistedSubmission) -> PersistedSubmission:
        """Allocate a new doc id, then set the data with a server-side createdDateTime."""
        doc_ref = self._coll.document()
        await doc_ref.set({
            **submission.to_document(),
            "createdDateTime": SERVER_TIMESTAMP,
        })
        logger.info(
            "Stored submission %s for app %s (template %s)",
            doc_ref.id,
            submission.app_key,
            submission.template_name,
        )
        return submission.with_identity(doc_ref.id)

    async def get(self, submission_id: str) -> PersistedSubmission | None:
        """Return stored submission by id."""
        doc = await self._coll.document(submission_id).get()
        if not doc:
            return None
        return PersistedSubmission.from_document(doc.id, doc.to_dict())
