"""Firestore-backed default-schema repository (implements ISchemaDefaultRepository)."""

from __future__ import annotations

from typing import Any

from app.infrastructure.firebase._rest_client import FirestoreRESTClient
from app.infrastructure.firebase.collections import COLLECTION_GLOBAL


class FirestoreSchemaDefaultRepository:
    """Reads ``global/{schema}`` and reads/overwrites the target document."""

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._client = client

    async def get_schema(self, schema_name: str) -> dict[str, Any] | None:
        doc = await self._client.collection(COLLECTION_GLOBAL).document(schema_name).get()
        return doc.to_dict() if doc else None

    async def get_document(self, collection: str, document_id: str) -> dict[str, Any] | None:
        doc = await self._client.collection(collection).document(document_id).get()
        return doc.to_dict() if doc else None

    async def set_document(self, collection: str, document_id: str, data: dict[str, Any]) -> None:
        await self._client.collection(collection).document(document_id).set(data)
