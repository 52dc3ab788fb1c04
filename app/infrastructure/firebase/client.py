"""Process-wide Firestore client.

Created at startup from FIREBASE_SERVICE_ACCOUNT_KEY (JSON string) or
FIREBASE_SERVICE_ACCOUNT_PATH (file). The same service account info is
reused for the Google Sheets client.
"""

import json
import logging
from pathlib import Path
from typing import Any

from app.core.config import get_settings
from app.infrastructure.firebase._rest_client import FirestoreRESTClient, load_credentials

logger = logging.getLogger(__name__)

_firestore_client: FirestoreRESTClient | None = None


def load_service_account_info() -> dict[str, Any] | None:
    """Return the service account JSON from settings, or None when not configured."""
    settings = get_settings()
    if settings.firebase_service_account_key:
        raw = settings.firebase_service_account_key.get_secret_value()
        if raw:
            try:
                return json.loads(raw)
            except json.JSONDecodeError as e:
                raise ValueError("FIREBASE_SERVICE_ACCOUNT_KEY is not valid JSON") from e

    if not settings.firebase_service_account_path:
        return None
    path = Path(settings.firebase_service_account_path).expanduser().resolve()
    if not path.is_file():
        logger.warning("FIREBASE_SERVICE_ACCOUNT_PATH not found: %s", path)
        return None
    return json.loads(path.read_text(encoding="utf-8"))


def init_firebase() -> bool:
    """Create the client; returns False (and logs) when credentials are missing or broken.

    A failure here does not stop the app: health stays up and readiness
    reports Firestore as unavailable.
    """
    global _firestore_client
    try:
        info = load_service_account_info()
        if not info:
            logger.warning("Firestore not configured; submissions will fail until it is")
            return False
        project_id = info.get("project_id")
        if not project_id:
            logger.error("Service account JSON has no project_id")
            return False
        _firestore_client = FirestoreRESTClient(project_id, load_credentials(info))
    except Exception:
        logger.exception("Firestore initialization failed")
        return False
    logger.info("Firestore client ready for project %s", project_id)
    return True


def get_firestore_client() -> FirestoreRESTClient | None:
    return _firestore_client


def set_firestore_client(client: FirestoreRESTClient | None) -> None:
    """Install a client directly (tests, scripts)."""
    global _firestore_client
    _firestore_client = client


async def close_firebase() -> None:
    """Release the client's connection pool at shutdown."""
    global _firestore_client
    if _firestore_client is not None:
        await _firestore_client.aclose()
        _firestore_client = None
