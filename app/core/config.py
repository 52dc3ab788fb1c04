"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Firebase credentials are validated at load time;
the same service account authenticates Firestore and Google Sheets.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings are optional with defaults except the Firebase service
    account, which is required unless require_firebase is False (tests,
    local tooling that injects its own client).
    """

    # App
    app_name: str = "form-handler"
    app_version: str = "1.0.0"
    debug: bool = False

    # Firebase / Firestore: use key (env) or path (file). Also used for Sheets.
    firebase_service_account_key: SecretStr | None = None
    firebase_service_account_path: str | None = None  # Path to JSON file
    require_firebase: bool = True

    # Akismet spam filter
    akismet_endpoint: str = "rest.akismet.com/1.1"
    akismet_timeout_seconds: float = 10.0

    # Sheet sync: run in-process after each stored submission. Disable when an
    # external document-created trigger calls /triggers/sheet-sync instead.
    sheet_sync_inline: bool = True

    # Request / middleware
    max_request_size: int = 64 * 1024  # 64KB, form submissions are small
    request_id_header: str = "X-Request-ID"
    form_handler_rate_limit: str = "30/minute"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_required(self) -> "Settings":
        """Require FIREBASE_SERVICE_ACCOUNT_KEY or FIREBASE_SERVICE_ACCOUNT_PATH."""
        if self.max_request_size <= 0:
            raise ValueError("MAX_REQUEST_SIZE must be a positive number of bytes")
        if not self.require_firebase:
            return self
        has_key = (
            self.firebase_service_account_key
            and self.firebase_service_account_key.get_secret_value()
        )
        if not has_key and not self.firebase_service_account_path:
            raise ValueError(
                "Set FIREBASE_SERVICE_ACCOUNT_KEY (full JSON string) "
                "or FIREBASE_SERVICE_ACCOUNT_PATH (path to JSON file)."
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
