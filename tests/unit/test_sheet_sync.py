"""Unit tests for SheetSyncService with mocked repositories."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock

import pytest

from app.application.use_cases.sheet_sync import SheetSyncService
from app.domain.entities import AppConfig, FormTemplate, PersistedSubmission
from app.domain.exceptions import SheetSyncException

TEMPLATE = FormTemplate.from_document(
    "contactDefault",
    {
        "fields": [
            {"id": "name", "position": 1, "sheetHeader": "Name"},
            {"id": "message", "position": 2, "sheetHeader": "Message"},
        ]
    },
)
SUBMISSION = PersistedSubmission(
    id="sub1",
    app_key="app1",
    template_name="contactDefault",
    template_data={"name": "Jax", "message": "Hi"},
    recipients=("app1",),
    created_at=datetime(2024, 3, 7, 2, 5, tzinfo=UTC),
)


def _app(sheet_ids: dict | None = None, spreadsheet_id: str | None = "ss1") -> AppConfig:
    sheets = {"sheetId": sheet_ids or {}}
    if spreadsheet_id:
        sheets["spreadsheetId"] = spreadsheet_id
    return AppConfig.from_document(
        "app1",
        {
            "appInfo": {"appUrl": "https://example.com", "appTimeZone": "America/New_York"},
            "service": {"googleSheets": sheets},
        },
    )


def _service(app: AppConfig | None, sheets_client, submission=SUBMISSION):
    app_repo = AsyncMock()
    app_repo.get_app.return_value = app
    template_repo = AsyncMock()
    template_repo.get_template.return_value = TEMPLATE
    submission_repo = AsyncMock()
    submission_repo.get.return_value = submission
    return SheetSyncService(app_repo, template_repo, submission_repo, sheets_client), app_repo


async def test_existing_sheet_gets_row_inserted_under_header(sheets_client) -> None:
    service, app_repo = _service(_app({"contactDefault": 42}), sheets_client)

    result = await service.sync_submission(SUBMISSION)

    assert result.sheet_created is False
    assert result.sheet_id == 42
    assert sheets_client.calls[1:] == [
        ("insert_blank_row", "ss1", 42, 1),
        (
            "update_values",
            "ss1",
            "contactDefault!A2",
            [["03/06/2024", "9:05 PM EST", "Jax", "Hi"]],
        ),
    ]
    app_repo.set_sheet_id.assert_not_called()


async def test_missing_sheet_is_created_with_header(sheets_client) -> None:
    sheets_client.sheets.clear()
    service, app_repo = _service(_app(), sheets_client)

    result = await service.sync_submission(SUBMISSION)

    assert result.sheet_created is True
    assert result.sheet_id == 1001
    app_repo.set_sheet_id.assert_awaited_once_with("app1", "contactDefault", 1001)
    assert sheets_client.calls[1:] == [
        ("add_sheet", "ss1", "contactDefault"),
        ("update_values", "ss1", "contactDefault!A1", [["Date", "Time", "Name", "Message"]]),
        (
            "update_values",
            "ss1",
            "contactDefault!A2",
            [["03/06/2024", "9:05 PM EST", "Jax", "Hi"]],
        ),
    ]


async def test_unrecorded_sheet_id_falls_back_to_metadata(sheets_client) -> None:
    service, _ = _service(_app(), sheets_client)
    result = await service.sync_submission(SUBMISSION)
    assert result.sheet_id == 42
    assert ("insert_blank_row", "ss1", 42, 1) in sheets_client.calls


async def test_app_without_spreadsheet_raises(sheets_client) -> None:
    service, _ = _service(_app(spreadsheet_id=None), sheets_client)
    with pytest.raises(SheetSyncException):
        await service.sync_submission(SUBMISSION)
    assert sheets_client.calls == []


async def test_sync_by_id_loads_submission(sheets_client) -> None:
    service, _ = _service(_app({"contactDefault": 42}), sheets_client)
    result = await service.sync("sub1")
    assert result is not None
    assert result.submission_id == "sub1"
    service.submission_repo.get.assert_awaited_once_with("sub1")


async def test_sync_swallows_and_logs_failures(sheets_client, caplog) -> None:
    service, _ = _service(None, sheets_client)
    assert await service.sync(SUBMISSION) is None
    assert "Sheet sync failed for submission sub1" in caplog.text


async def test_sync_unknown_submission_returns_none(sheets_client) -> None:
    service, _ = _service(_app(), sheets_client, submission=None)
    assert await service.sync("missing") is None
    assert sheets_client.calls == []


async def test_missing_created_time_uses_now(sheets_client, caplog) -> None:
    service, _ = _service(_app({"contactDefault": 42}), sheets_client)
    undated = PersistedSubmission(
        id="sub2", app_key="app1", template_name="contactDefault", template_data={"name": "Jax"}
    )
    result = await service.sync_submission(undated)
    assert result.data_row[2:] == ["Jax", ""]
    assert "has no createdDateTime" in caplog.text
