"""Firestore-backed form field and form template repositories."""

from __future__ import annotations

from typing import Any

from app.domain.entities import FormTemplate
from app.infrastructure.firebase._rest_client import FirestoreRESTClient
from app.infrastructure.firebase.collections import (
    COLLECTION_FORM_FIELD,
    COLLECTION_FORM_TEMPLATE,
)


class FirestoreFormFieldRepository:
    """Field definitions in ``formField`` (implements IFormFieldRepository)."""

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._client = client
        self._coll = client.collection(COLLECTION_FORM_FIELD)

    async def get_required_field_ids(self) -> list[str]:
        """Return ids of fields flagged required (server-side where query)."""
        return [
            snapshot.id
            async for snapshot in self._coll.where("required", "==", True).stream()
        ]

    async def get_default_field_values(self) -> dict[str, Any]:
        """Return id -> default value for fields flagged default."""
        defaults: dict[str, Any] = {}
        async for snapshot in self._coll.where("default", "==", True).stream():
            defaults[snapshot.id] = snapshot.to_dict().get("value")
        return defaults


class FirestoreFormTemplateRepository:
    """Templates in ``formTemplate`` (implements IFormTemplateRepository)."""

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._client = client
        self._coll = client.collection(COLLECTION_FORM_TEMPLATE)

    async def get_template(self, name: str) -> FormTemplate | None:
        """Return template by name with fields sorted by position."""
        if not name or "/" in name:
            return None
        doc = await self._coll.document(name).get()
        if not doc:
            return None
        return FormTemplate.from_document(doc.id, doc.to_dict())
