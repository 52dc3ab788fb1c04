"""Service interfaces (ports) for the application layer.

Protocols define contracts for external services (DIP): the spam
classifier and the spreadsheet API.
"""

from __future__ import annotations

from typing import Any, Protocol


# Spam classifier interface
class ISpamClassifier(Protocol):
    """Protocol for a boolean spam classifier (e.g. Akismet)."""

    async def check_spam(self, payload: dict[str, Any]) -> bool:
        """Return True if the payload is spam. Raises SpamCheckException on failure."""

    async def verify_key(self) -> bool:
        """Return True if the classifier credential is valid."""


# Spam classifier factory interface
class ISpamClassifierFactory(Protocol):
    """Builds a classifier for one app's credential and site URL."""

    def __call__(self, api_key: str, site_url: str) -> ISpamClassifier:
        """Return a classifier bound to the credential."""


# Spreadsheet client interface
class ISheetsClient(Protocol):
    """Protocol for the spreadsheet API used by the sheet sync."""

    async def get_sheet_ids(self, spreadsheet_id: str) -> dict[str, int]:
        """Return title -> sheet id for all sheets (tabs) in the spreadsheet."""

    async def add_sheet(self, spreadsheet_id: str, title: str) -> int:
        """Create a sheet at index 0 and return its new sheet id."""

    async def insert_blank_row(self, spreadsheet_id: str, sheet_id: int, row_index: int) -> None:
        """Insert one empty row before ``row_index`` (0-based)."""

    async def update_values(
        self, spreadsheet_id: str, range_: str, rows: list[list[str]]
    ) -> None:
        """Write rows at an A1 range (RAW input)."""
