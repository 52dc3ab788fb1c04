"""Pytest configuration and fixtures for the form handler.

Uses app.main:app for HTTP tests with an in-memory Firestore, a recording
Sheets client and a scripted spam classifier. All imports use app.*.
"""

import copy
import os
from datetime import UTC, datetime
from typing import Any, AsyncIterator

# Settings are read at import time of app.main; no real credentials in tests.
os.environ.setdefault("REQUIRE_FIREBASE", "false")
os.environ.setdefault("FORM_HANDLER_RATE_LIMIT", "1000/minute")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from app.api.v1.dependencies import get_spam_classifier_factory  # noqa: E402
from app.infrastructure.firebase import set_firestore_client  # noqa: E402
from app.infrastructure.firebase._rest_encoding import SERVER_TIMESTAMP  # noqa: E402
from app.main import app  # noqa: E402
from app.shared.utils.generators import generate_document_id  # noqa: E402

# Value the fake Firestore stores for server-timestamp fields.
FAKE_SERVER_TIME = datetime(2024, 3, 7, 2, 5, tzinfo=UTC)


class FakeSnapshot:
    def __init__(self, doc_id: str, data: dict[str, Any]) -> None:
        self.id = doc_id
        self._data = data

    def to_dict(self) -> dict[str, Any]:
        return copy.deepcopy(self._data)


class FakeDocument:
    def __init__(self, store: dict[str, dict[str, Any]], doc_id: str) -> None:
        self._store = store
        self.id = doc_id

    async def get(self) -> FakeSnapshot | None:
        if self.id not in self._store:
            return None
        return FakeSnapshot(self.id, self._store[self.id])

    async def set(self, data: dict[str, Any]) -> None:
        self._store[self.id] = {
            k: FAKE_SERVER_TIME if v is SERVER_TIMESTAMP else copy.deepcopy(v)
            for k, v in data.items()
        }

    async def update(self, updates: dict[Any, Any]) -> None:
        if self.id not in self._store:
            raise KeyError(f"document {self.id} does not exist")
        for key, value in updates.items():
            segments = key.split(".") if isinstance(key, str) else list(key)
            node = self._store[self.id]
            for segment in segments[:-1]:
                node = node.setdefault(segment, {})
            node[segments[-1]] = value

    async def delete(self) -> None:
        self._store.pop(self.id, None)


class FakeQuery:
    def __init__(self, store: dict[str, dict[str, Any]], field: str, value: Any) -> None:
        self._store = store
        self._field = field
        self._value = value

    async def stream(self) -> AsyncIterator[FakeSnapshot]:
        for doc_id, data in list(self._store.items()):
            if data.get(self._field) == self._value:
                yield FakeSnapshot(doc_id, data)


class FakeCollection:
    def __init__(self, store: dict[str, dict[str, Any]]) -> None:
        self._store = store

    def document(self, document_id: str | None = None) -> FakeDocument:
        return FakeDocument(self._store, document_id or generate_document_id())

    def where(self, field: str, op: str, value: Any) -> FakeQuery:
        assert op == "==", "fake supports equality filters only"
        return FakeQuery(self._store, field, value)

    async def stream(self) -> AsyncIterator[FakeSnapshot]:
        for doc_id, data in list(self._store.items()):
            yield FakeSnapshot(doc_id, data)


class FakeFirestore:
    """In-memory stand-in for FirestoreRESTClient (collection/document/where API)."""

    def __init__(self) -> None:
        self.data: dict[str, dict[str, dict[str, Any]]] = {}

    def collection(self, name: str) -> FakeCollection:
        return FakeCollection(self.data.setdefault(name, {}))

    def seed(self, collections: dict[str, dict[str, dict[str, Any]]]) -> None:
        for name, docs in collections.items():
            self.data.setdefault(name, {}).update(copy.deepcopy(docs))

    def docs(self, name: str) -> dict[str, dict[str, Any]]:
        return self.data.get(name, {})

    async def aclose(self) -> None:
        return None


class FakeSheetsClient:
    """Records Sheets calls; sheets maps title -> sheet id."""

    def __init__(self, sheets: dict[str, int] | None = None) -> None:
        self.sheets: dict[str, int] = dict(sheets or {})
        self.calls: list[tuple] = []
        self._next_id = 1000

    async def get_sheet_ids(self, spreadsheet_id: str) -> dict[str, int]:
        self.calls.append(("get_sheet_ids", spreadsheet_id))
        return dict(self.sheets)

    async def add_sheet(self, spreadsheet_id: str, title: str) -> int:
        self._next_id += 1
        self.sheets[title] = self._next_id
        self.calls.append(("add_sheet", spreadsheet_id, title))
        return self._next_id

    async def insert_blank_row(self, spreadsheet_id: str, sheet_id: int, row_index: int) -> None:
        self.calls.append(("insert_blank_row", spreadsheet_id, sheet_id, row_index))

    async def update_values(self, spreadsheet_id: str, range_: str, rows: list[list[str]]) -> None:
        self.calls.append(("update_values", spreadsheet_id, range_, rows))


class FakeSpamClassifier:
    def __init__(self, result: bool = False, error: Exception | None = None, key_valid: bool = True) -> None:
        self.result = result
        self.error = error
        self.key_valid = key_valid
        self.payloads: list[dict[str, Any]] = []
        self.verify_calls = 0

    async def check_spam(self, payload: dict[str, Any]) -> bool:
        self.payloads.append(payload)
        if self.error is not None:
            raise self.error
        return self.result

    async def verify_key(self) -> bool:
        self.verify_calls += 1
        return self.key_valid


class FakeSpamClassifierFactory:
    def __init__(self, classifier: FakeSpamClassifier | None = None) -> None:
        self.classifier = classifier or FakeSpamClassifier()
        self.created: list[tuple[str, str]] = []

    def __call__(self, api_key: str, site_url: str) -> FakeSpamClassifier:
        self.created.append((api_key, site_url))
        return self.classifier


def starter_collections() -> dict[str, dict[str, dict[str, Any]]]:
    """One app with a contact template; global flags defer to the app."""
    return {
        "global": {
            "app": {
                "condition": {
                    "messageGlobal": 2,
                    "corsBypass": 2,
                    "submitForm": 2,
                    "spamFilterAkismet": 2,
                },
                "message": {"success": "Global thanks", "error": "Global error"},
            },
        },
        "formField": {
            "appKey": {"required": True, "default": False},
            "templateName": {"required": True, "default": False},
            "urlRedirect": {"required": True, "default": True, "value": False},
            "name": {"required": False, "default": False},
            "email": {"required": False, "default": False},
            "message": {"required": False, "default": False},
        },
        "formTemplate": {
            "contactDefault": {
                "fields": [
                    {"id": "message", "position": 3, "sheetHeader": "Message"},
                    {"id": "name", "position": 1, "sheetHeader": "Name"},
                    {"id": "email", "position": 2, "sheetHeader": "Email"},
                ],
                "fieldsSpamCheck": {"content": ["message"], "other": ["name"]},
            },
        },
        "app": {
            "exampleApp": {
                "appInfo": {
                    "appName": "Example",
                    "appUrl": "https://www.example.com",
                    "appTimeZone": "America/New_York",
                    "appFrom": "forms@example.com",
                },
                "condition": {
                    "messageGlobal": False,
                    "corsBypass": False,
                    "submitForm": True,
                    "spamFilterAkismet": False,
                },
                "message": {"success": "App thanks", "error": "App error"},
                "service": {
                    "spamFilterAkismet": {"key": "akismet-key"},
                    "googleSheets": {
                        "spreadsheetId": "spreadsheet-1",
                        "sheetId": {"contactDefault": 42},
                    },
                },
            },
        },
    }


@pytest.fixture
def firestore() -> FakeFirestore:
    """Seeded in-memory Firestore installed as the app's client."""
    db = FakeFirestore()
    db.seed(starter_collections())
    set_firestore_client(db)  # type: ignore[arg-type]
    yield db
    set_firestore_client(None)


@pytest.fixture
def sheets_client() -> FakeSheetsClient:
    return FakeSheetsClient({"contactDefault": 42})


@pytest.fixture
def spam_factory() -> FakeSpamClassifierFactory:
    return FakeSpamClassifierFactory()


@pytest.fixture
async def client(
    firestore: FakeFirestore,
    sheets_client: FakeSheetsClient,
    spam_factory: FakeSpamClassifierFactory,
) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI) with fake backends."""
    app.state.sheets_client = sheets_client
    app.dependency_overrides[get_spam_classifier_factory] = lambda: spam_factory
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
    app.state.sheets_client = None
