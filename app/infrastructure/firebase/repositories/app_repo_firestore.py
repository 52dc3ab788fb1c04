"""Firestore-backed app/global configuration repository (implements IAppRepository)."""

from __future__ import annotations

from app.domain.entities import AppConfig, GlobalConfig
from app.infrastructure.firebase._rest_client import FirestoreRESTClient
from app.infrastructure.firebase.collections import (
    COLLECTION_APP,
    COLLECTION_GLOBAL,
    GLOBAL_APP_DOC,
)


class FirestoreAppRepository:
    """Reads ``app/{appKey}`` and ``global/app``; records new sheet ids on the app doc."""

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._client = client
        self._apps = client.collection(COLLECTION_APP)
        self._global = client.collection(COLLECTION_GLOBAL)

    async def get_app(self, app_key: str) -> AppConfig | None:
        """Return app config by key, or None when the key is unknown."""
        if not app_key or "/" in app_key:
            return None
        doc = await self._apps.document(app_key).get()
        if not doc:
            return None
        return AppConfig.from_document(doc.id, doc.to_dict())

    async def get_global(self) -> GlobalConfig:
        """Return global config; a missing document disables every global condition."""
        doc = await self._global.document(GLOBAL_APP_DOC).get()
        return GlobalConfig.from_document(doc.to_dict() if doc else None)

    async def set_sheet_id(self, app_key: str, template_name: str, sheet_id: int) -> None:
        """Set ``service.googleSheets.sheetId.<template>`` (last writer wins)."""
        await self._apps.document(app_key).update({
            ("service", "googleSheets", "sheetId", template_name): sheet_id,
        })
