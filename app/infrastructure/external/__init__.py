"""External service clients (Google Sheets, Akismet)."""
