"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from app.infrastructure or app.api.
"""

from app.application.interfaces.repositories import (
    IAppRepository,
    IFormFieldRepository,
    IFormTemplateRepository,
    ISchemaDefaultRepository,
    ISubmissionRepository,
)
from app.application.interfaces.services import (
    ISheetsClient,
    ISpamClassifier,
    ISpamClassifierFactory,
)

__all__ = [
    "IAppRepository",
    "IFormFieldRepository",
    "IFormTemplateRepository",
    "ISchemaDefaultRepository",
    "ISheetsClient",
    "ISpamClassifier",
    "ISpamClassifierFactory",
    "ISubmissionRepository",
]
