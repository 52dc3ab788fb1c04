"""Shared setup for command-line scripts: .env, logging and the Firestore client."""

from __future__ import annotations

import sys
from pathlib import Path

from dotenv import load_dotenv

from app.infrastructure.firebase import get_firestore_client, init_firebase
from app.infrastructure.firebase._rest_client import FirestoreRESTClient
from app.shared.telemetry.logging import setup_logging


def project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def load_env() -> None:
    """Load .env from project root so get_settings() sees FIREBASE_* when run as script."""
    load_dotenv(project_root() / ".env", override=True)


def firestore_or_exit() -> FirestoreRESTClient:
    """Initialize logging and Firestore, or exit with status 1."""
    load_env()
    setup_logging()
    if not init_firebase():
        print("Firestore is not configured (FIREBASE_SERVICE_ACCOUNT_*)", file=sys.stderr)
        sys.exit(1)
    client = get_firestore_client()
    assert client is not None
    return client
