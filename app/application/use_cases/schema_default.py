"""Schema default use case: fill a newly created document with its default schema."""

from __future__ import annotations

from typing import Any, Mapping

from app.application.interfaces.repositories import ISchemaDefaultRepository
from app.domain.exceptions import UnknownSchemaCollectionException
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class SchemaDefaultService:
    """Applies ``global/{schema}`` to a new document of a mapped collection.

    Keys already present on the document are kept.
    """

    def __init__(
        self,
        repo: ISchemaDefaultRepository,
        schemas: Mapping[str, str],
    ) -> None:
        self.repo = repo
        self.schemas = schemas

    async def apply(self, collection: str, document_id: str) -> dict[str, Any] | None:
        """Return the merged document written, or None when the schema document is missing."""
        schema_name = self.schemas.get(collection)
        if schema_name is None:
            raise UnknownSchemaCollectionException(collection)

        schema = await self.repo.get_schema(schema_name)
        if schema is None:
            logger.warning("Default schema global/%s not found", schema_name)
            return None

        existing = await self.repo.get_document(collection, document_id) or {}
        merged = {**schema, **existing}
        await self.repo.set_document(collection, document_id, merged)
        logger.info("Applied schema %s to %s/%s", schema_name, collection, document_id)
        return merged
