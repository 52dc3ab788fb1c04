"""API tests for the document-created trigger endpoints."""

from datetime import UTC, datetime

from httpx import AsyncClient


def _store_submission(firestore, doc_id: str = "sub-1", template: str = "contactDefault") -> None:
    firestore.seed({
        "submitForm": {
            doc_id: {
                "appKey": "exampleApp",
                "createdDateTime": datetime(2024, 3, 7, 2, 5, tzinfo=UTC),
                "from": "forms@example.com",
                "toUids": ["exampleApp"],
                "template": {"name": template, "data": {"name": "Jax", "message": "Hi"}},
            }
        }
    })


async def test_sheet_sync_trigger_creates_missing_sheet(
    client: AsyncClient, firestore, sheets_client
) -> None:
    sheets_client.sheets.clear()
    _store_submission(firestore)

    response = await client.post("/api/v1/triggers/sheet-sync/sub-1")

    assert response.status_code == 202
    body = response.json()
    assert body["synced"] is True
    assert body["sheet_created"] is True
    assert body["sheet_title"] == "contactDefault"
    new_id = sheets_client.sheets["contactDefault"]
    sheet_ids = firestore.docs("app")["exampleApp"]["service"]["googleSheets"]["sheetId"]
    assert sheet_ids["contactDefault"] == new_id
    writes = [c[2:] for c in sheets_client.calls if c[0] == "update_values"]
    assert writes == [
        ("contactDefault!A1", [["Date", "Time", "Name", "Email", "Message"]]),
        ("contactDefault!A2", [["03/06/2024", "9:05 PM EST", "Jax", "", "Hi"]]),
    ]


async def test_sheet_sync_trigger_reports_failure_without_error_status(
    client: AsyncClient, sheets_client
) -> None:
    response = await client.post("/api/v1/triggers/sheet-sync/missing")

    assert response.status_code == 202
    assert response.json()["synced"] is False
    assert not any(c[0] == "update_values" for c in sheets_client.calls)


async def test_sheet_sync_trigger_requires_sheets_client(client: AsyncClient, firestore) -> None:
    from app.main import app

    app.state.sheets_client = None
    _store_submission(firestore)
    response = await client.post("/api/v1/triggers/sheet-sync/sub-1")
    assert response.status_code == 503


async def test_schema_default_trigger_fills_new_app(client: AsyncClient, firestore) -> None:
    firestore.seed({
        "global": {
            "schemaApp": {
                "appInfo": {"appName": "", "appTimeZone": "UTC"},
                "condition": {"submitForm": False},
            }
        },
        "app": {"newApp": {"appInfo": {"appName": "New"}}},
    })

    response = await client.post("/api/v1/triggers/schema-default/app/newApp")

    assert response.status_code == 200
    assert response.json() == {"collection": "app", "document_id": "newApp", "applied": True}
    doc = firestore.docs("app")["newApp"]
    assert doc["appInfo"] == {"appName": "New"}
    assert doc["condition"] == {"submitForm": False}


async def test_schema_default_trigger_without_schema_document(client: AsyncClient) -> None:
    response = await client.post("/api/v1/triggers/schema-default/formTemplate/t1")
    assert response.status_code == 200
    assert response.json()["applied"] is False


async def test_schema_default_trigger_unknown_collection(client: AsyncClient) -> None:
    response = await client.post("/api/v1/triggers/schema-default/submitForm/x")
    assert response.status_code == 404
    assert response.json() == {
        "error": {
            "code": "SCHEMA_COLLECTION_NOT_FOUND",
            "message": "No default schema for collection 'submitForm'",
            "details": {"collection": "submitForm"},
        }
    }
