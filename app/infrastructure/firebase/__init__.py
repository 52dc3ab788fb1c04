"""Firestore integration (REST API + google-auth)."""

from app.infrastructure.firebase.client import (
    close_firebase,
    get_firestore_client,
    init_firebase,
    load_service_account_info,
    set_firestore_client,
)

__all__ = [
    "close_firebase",
    "get_firestore_client",
    "init_firebase",
    "load_service_account_info",
    "set_firestore_client",
]
