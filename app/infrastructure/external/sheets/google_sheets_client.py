"""Google Sheets client using the Sheets API v4 (implements ISheetsClient)."""

from __future__ import annotations

import asyncio
from typing import Any

from google.oauth2 import service_account
from googleapiclient.discovery import build

from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

SHEETS_SCOPE = "https://www.googleapis.com/auth/spreadsheets"
NEW_SHEET_ROWS = 1000
NEW_SHEET_COLUMNS = 26


class GoogleSheetsClient:
    """Sheets API calls for the sheet sync.

    The discovery client is blocking, so ``build`` and every
    ``request.execute`` run in a worker thread.
    """

    def __init__(self, credentials: Any) -> None:
        self._credentials = credentials
        self._service: Any = None

    @classmethod
    def from_service_account_info(cls, info: dict[str, Any]) -> "GoogleSheetsClient":
        creds = service_account.Credentials.from_service_account_info(
            info, scopes=[SHEETS_SCOPE]
        )
        return cls(creds)

    async def _spreadsheets(self) -> Any:
        if self._service is None:
            self._service = await asyncio.to_thread(
                build, "sheets", "v4", credentials=self._credentials, cache_discovery=False
            )
        return self._service.spreadsheets()

    async def get_sheet_ids(self, spreadsheet_id: str) -> dict[str, int]:
        spreadsheets = await self._spreadsheets()
        request = spreadsheets.get(spreadsheetId=spreadsheet_id, includeGridData=False)
        result = await asyncio.to_thread(request.execute)
        return {
            sheet["properties"]["title"]: sheet["properties"]["sheetId"]
            for sheet in result.get("sheets", [])
        }

    async def add_sheet(self, spreadsheet_id: str, title: str) -> int:
        spreadsheets = await self._spreadsheets()
        body = {
            "requests": [
                {
                    "addSheet": {
                        "properties": {
                            "title": title,
                            "index": 0,
                            "gridProperties": {
                                "rowCount": NEW_SHEET_ROWS,
                                "columnCount": NEW_SHEET_COLUMNS,
                            },
                        }
                    }
                }
            ]
        }
        request = spreadsheets.batchUpdate(spreadsheetId=spreadsheet_id, body=body)
        result = await asyncio.to_thread(request.execute)
        for reply in result.get("replies", []):
            if "addSheet" in reply:
                sheet_id = reply["addSheet"]["properties"]["sheetId"]
                logger.info("Added sheet %r (%s) to spreadsheet %s", title, sheet_id, spreadsheet_id)
                return sheet_id
        raise RuntimeError(f"addSheet reply missing for sheet {title!r}")

    async def insert_blank_row(self, spreadsheet_id: str, sheet_id: int, row_index: int) -> None:
        spreadsheets = await self._spreadsheets()
        body = {
            "requests": [
                {
                    "insertDimension": {
                        "range": {
                            "sheetId": sheet_id,
                            "dimension": "ROWS",
                            "startIndex": row_index,
                            "endIndex": row_index + 1,
                        },
                        "inheritFromBefore": False,
                    }
                }
            ]
        }
        request = spreadsheets.batchUpdate(spreadsheetId=spreadsheet_id, body=body)
        await asyncio.to_thread(request.execute)

    async def update_values(
        self, spreadsheet_id: str, range_: str, rows: list[list[str]]
    ) -> None:
        spreadsheets = await self._spreadsheets()
        request = spreadsheets.values().update(
            spreadsheetId=spreadsheet_id,
            range=range_,
            valueInputOption="RAW",
            body={"values": rows},
        )
        await asyncio.to_thread(request.execute)
