"""Spam classification (Akismet)."""

from app.infrastructure.external.spam.akismet_client import (
    AkismetClient,
    AkismetClientFactory,
)

__all__ = ["AkismetClient", "AkismetClientFactory"]
