"""Domain entities: app configuration, form templates, and submissions."""

from app.domain.entities.app_config import (
    AppConditions,
    AppConfig,
    AppInfo,
    GlobalConditions,
    GlobalConfig,
    Messages,
)
from app.domain.entities.form_template import (
    FormTemplate,
    SpamCheckFields,
    TemplateField,
    compare_positions,
    sort_fields,
)
from app.domain.entities.submission import (
    SPAM_RECIPIENT_SENTINEL,
    PersistedSubmission,
)

__all__ = [
    "AppConditions",
    "AppConfig",
    "AppInfo",
    "GlobalConditions",
    "GlobalConfig",
    "Messages",
    "FormTemplate",
    "SpamCheckFields",
    "TemplateField",
    "compare_positions",
    "sort_fields",
    "SPAM_RECIPIENT_SENTINEL",
    "PersistedSubmission",
]
