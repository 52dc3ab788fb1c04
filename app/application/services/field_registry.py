"""Field registry: required/default field definitions and templates."""

from __future__ import annotations

from typing import Any

from app.application.interfaces.repositories import (
    IFormFieldRepository,
    IFormTemplateRepository,
)
from app.domain.entities import FormTemplate
from app.domain.exceptions import TemplateNotFoundException

# Keys the pipeline itself relies on; always kept by the whitelist.
PIPELINE_FIELDS = frozenset({"appKey", "templateName"})


class FieldRegistry:
    """Reads ``formField`` and ``formTemplate`` on every call (no caching)."""

    def __init__(
        self,
        field_repo: IFormFieldRepository,
        template_repo: IFormTemplateRepository,
    ) -> None:
        self.field_repo = field_repo
        self.template_repo = template_repo

    async def required_field_names(self) -> frozenset[str]:
        """Names of fields flagged ``required`` plus the pipeline keys."""
        return frozenset(await self.field_repo.get_required_field_ids()) | PIPELINE_FIELDS

    async def default_field_values(self) -> dict[str, Any]:
        """name -> value for fields flagged ``default``."""
        return await self.field_repo.get_default_field_values()

    async def template_for(self, name: str | None) -> FormTemplate:
        """Return the template with its fields in position order."""
        template = await self.template_repo.get_template(name) if name else None
        if template is None:
            raise TemplateNotFoundException(str(name))
        return template
