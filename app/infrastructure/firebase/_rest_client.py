"""Minimal async Firestore client over the REST v1 API.

Covers what the repositories and scripts need: document get/set/update,
equality queries and collection listing. Service account tokens come from
google-auth; HTTP goes through httpx.AsyncClient.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from typing import Any

import httpx
from google.auth.transport.requests import Request
from google.oauth2 import service_account

from app.infrastructure.firebase._rest_encoding import (
    decode_document,
    encode_document,
    encode_value,
    nest_field_paths,
    quote_field_path,
    split_server_timestamps,
)
from app.shared.utils.generators import generate_document_id

FIRESTORE_SCOPE = "https://www.googleapis.com/auth/datastore"
_BASE = "https://firestore.googleapis.com/v1"

# Query operators accepted by where(); Firestore REST enum names.
_OPERATORS = {
    "==": "EQUAL",
    "!=": "NOT_EQUAL",
    "<": "LESS_THAN",
    "<=": "LESS_THAN_OR_EQUAL",
    ">": "GREATER_THAN",
    ">=": "GREATER_THAN_OR_EQUAL",
    "array-contains": "ARRAY_CONTAINS",
}


class FirestoreError(Exception):
    """Firestore answered with an unexpected HTTP status."""

    def __init__(self, status_code: int, path: str, body: str = "") -> None:
        self.status_code = status_code
        self.path = path
        super().__init__(f"Firestore HTTP {status_code} for {path}: {body[:200]}")


def load_credentials(info: dict[str, Any], scopes: list[str] | None = None):
    """Service account credentials for the given scopes (Firestore by default)."""
    return service_account.Credentials.from_service_account_info(
        info, scopes=scopes or [FIRESTORE_SCOPE]
    )


def _refresh_token(credentials) -> str:
    if not credentials.valid:
        credentials.refresh(Request())
    return credentials.token


def _snapshot(document: dict[str, Any]) -> "DocumentSnapshot":
    name = document.get("name", "")
    return DocumentSnapshot(name.rsplit("/", 1)[-1], decode_document(document.get("fields")))


class DocumentSnapshot:
    """Document id plus decoded fields."""

    def __init__(self, id_: str, data: dict[str, Any]) -> None:
        self.id = id_
        self._data = data

    def to_dict(self) -> dict[str, Any]:
        return self._data


class DocumentReference:
    def __init__(self, client: "FirestoreRESTClient", path: str) -> None:
        self._client = client
        self.path = path

    @property
    def id(self) -> str:
        return self.path.rsplit("/", 1)[-1]

    async def get(self) -> DocumentSnapshot | None:
        """Return the snapshot, or None when the document does not exist."""
        out = await self._client._send("GET", self.path)
        return _snapshot(out) if out else None

    async def set(self, data: dict[str, Any]) -> None:
        """Create or replace the document.

        Top-level SERVER_TIMESTAMP values are applied as REQUEST_TIME
        transforms in the same commit as the write.
        """
        plain, server_time_fields = split_server_timestamps(data)
        if not server_time_fields:
            await self._client._send("PATCH", self.path, body=encode_document(plain))
            return
        await self._client.commit([
            {
                "update": {"name": self.path, **encode_document(plain)},
                "updateTransforms": [
                    {"fieldPath": p, "setToServerValue": "REQUEST_TIME"}
                    for p in server_time_fields
                ],
            }
        ])

    async def update(self, updates: dict[str | tuple[str, ...], Any]) -> None:
        """Write only the given field paths of an existing document.

        Keys are dotted strings or tuples of segments; use tuples when a
        segment (e.g. a template name) may contain a dot.
        """
        paths = {
            (tuple(key.split(".")) if isinstance(key, str) else tuple(key)): value
            for key, value in updates.items()
        }
        params = [("updateMask.fieldPaths", quote_field_path(p)) for p in paths]
        params.append(("currentDocument.exists", "true"))
        await self._client._send(
            "PATCH", self.path, body=encode_document(nest_field_paths(paths)), params=params
        )


class Query:
    """Single equality-style filter over one collection, run through runQuery."""

    def __init__(
        self,
        client: "FirestoreRESTClient",
        collection_path: str,
        field: str,
        op: str,
        value: Any,
    ) -> None:
        if op not in _OPERATORS:
            raise ValueError(f"Unsupported query operator: {op!r}")
        self._client = client
        self._parent, self._collection_id = collection_path.rsplit("/", 1)
        self._filter = {
            "field": {"fieldPath": field},
            "op": _OPERATORS[op],
            "value": encode_value(value),
        }

    async def stream(self) -> AsyncIterator[DocumentSnapshot]:
        body = {
            "structuredQuery": {
                "from": [{"collectionId": self._collection_id}],
                "where": {"fieldFilter": self._filter},
            }
        }
        rows = await self._client._send("POST", f"{self._parent}:runQuery", body=body) or []
        for row in rows:
            if "document" in row:
                yield _snapshot(row["document"])


class CollectionReference:
    def __init__(self, client: "FirestoreRESTClient", path: str) -> None:
        self._client = client
        self.path = path

    def document(self, document_id: str | None = None) -> DocumentReference:
        """Reference a document; a new id is generated when none is given."""
        return DocumentReference(self._client, f"{self.path}/{document_id or generate_document_id()}")

    def where(self, field: str, op: str, value: Any) -> Query:
        return Query(self._client, self.path, field, op, value)

    async def stream(self) -> AsyncIterator[DocumentSnapshot]:
        """Every document in the collection, following page tokens."""
        page_token: str | None = None
        while True:
            params = [("pageToken", page_token)] if page_token else None
            out = await self._client._send("GET", self.path, params=params)
            if not out:
                return
            for document in out.get("documents", []):
                yield _snapshot(document)
            page_token = out.get("nextPageToken")
            if not page_token:
                return


class FirestoreRESTClient:
    """Firestore (default) database of one project.

    Mirrors the firebase-admin call shapes the repositories use, all async::

        await db.collection("app").document(key).get()
        await db.collection("submitForm").document().set({...})
        async for snap in db.collection("formField").where("required", "==", True).stream(): ...
    """

    def __init__(
        self,
        project_id: str,
        credentials,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.project_id = project_id
        self._credentials = credentials
        self._root = f"projects/{project_id}/databases/(default)/documents"
        self._http = http_client or httpx.AsyncClient(timeout=30.0)
        self._owns_http = http_client is None

    def collection(self, collection_id: str) -> CollectionReference:
        return CollectionReference(self, f"{self._root}/{collection_id}")

    async def commit(self, writes: list[dict[str, Any]]) -> dict[str, Any]:
        """Apply REST Write objects atomically."""
        return await self._send("POST", f"{self._root}:commit", body={"writes": writes})

    async def aclose(self) -> None:
        """Close the HTTP pool unless it was injected by the caller."""
        if self._owns_http:
            await self._http.aclose()

    async def _token(self) -> str:
        # google-auth refreshes synchronously
        return await asyncio.to_thread(_refresh_token, self._credentials)

    async def _send(
        self,
        method: str,
        path: str,
        *,
        body: dict[str, Any] | None = None,
        params: list[tuple[str, str]] | None = None,
    ) -> Any:
        """Call the REST API; returns decoded JSON, or None on 404."""
        resp = await self._http.request(
            method,
            f"{_BASE}/{path}",
            json=body,
            params=params,
            headers={"Authorization": f"Bearer {await self._token()}"},
        )
        if resp.status_code == 404:
            return None
        if resp.status_code >= 400:
            raise FirestoreError(resp.status_code, path, resp.text)
        return resp.json() if resp.content else {}
