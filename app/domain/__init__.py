"""Domain layer: entities, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.entities import (
    AppConfig,
    FormTemplate,
    GlobalConfig,
    PersistedSubmission,
)
from app.domain.enums import ConditionFlag
from app.domain.exceptions import (
    AppNotFoundException,
    FormHandlerException,
    RejectedRequestException,
    SheetSyncException,
    SpamCheckException,
    SubmissionDisabledException,
    TemplateNotFoundException,
)

__all__ = [
    # Entities
    "AppConfig",
    "FormTemplate",
    "GlobalConfig",
    "PersistedSubmission",
    # Enums
    "ConditionFlag",
    # Exceptions
    "AppNotFoundException",
    "FormHandlerException",
    "RejectedRequestException",
    "SheetSyncException",
    "SpamCheckException",
    "SubmissionDisabledException",
    "TemplateNotFoundException",
]
