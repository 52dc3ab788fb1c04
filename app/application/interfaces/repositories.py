"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference domain entities only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.domain.entities import (
        AppConfig,
        FormTemplate,
        GlobalConfig,
        PersistedSubmission,
    )


# App (tenant) configuration repository interface
class IAppRepository(Protocol):
    """Protocol for app and global configuration documents (DIP)."""

    async def get_app(self, app_key: str) -> AppConfig | None:
        """Return the app config, or None when the key is unknown."""

    async def get_global(self) -> GlobalConfig:
        """Return the global config (empty config when the document is missing)."""

    async def set_sheet_id(self, app_key: str, template_name: str, sheet_id: int) -> None:
        """Record the spreadsheet sheet id created for a template (partial update)."""


# Form field repository interface
class IFormFieldRepository(Protocol):
    """Protocol for field definitions (``formField``)."""

    async def get_required_field_ids(self) -> list[str]:
        """Return ids of fields with ``required == true``."""

    async def get_default_field_values(self) -> dict[str, Any]:
        """Return id -> value for fields with ``default == true``."""


# Form template repository interface
class IFormTemplateRepository(Protocol):
    """Protocol for submission templates (``formTemplate``)."""

    async def get_template(self, name: str) -> FormTemplate | None:
        """Return the template by name, or None if it does not exist."""


# Submission repository interface
class ISubmissionRepository(Protocol):
    """Protocol for persisted submissions (``submitForm``)."""

    async def create(self, submission: PersistedSubmission) -> PersistedSubmission:
        """Allocate an id, write the submission with a server timestamp, return it with its id."""

    async def get(self, submission_id: str) -> PersistedSubmission | None:
        """Return a stored submission, or None if not found."""


# Default schema repository interface
class ISchemaDefaultRepository(Protocol):
    """Protocol for applying default document schemas to new documents."""

    async def get_schema(self, schema_name: str) -> dict[str, Any] | None:
        """Return ``global/{schema_name}`` data, or None."""

    async def get_document(self, collection: str, document_id: str) -> dict[str, Any] | None:
        """Return the current document data, or None."""

    async def set_document(self, collection: str, document_id: str, data: dict[str, Any]) -> None:
        """Overwrite the document."""
