"""Google Sheets integration for the sheet sync."""

from app.infrastructure.external.sheets.google_sheets_client import GoogleSheetsClient

__all__ = ["GoogleSheetsClient"]
