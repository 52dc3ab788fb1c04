"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions. Infrastructure implements
the interfaces (Firestore repositories, Sheets and Akismet clients).
"""

from app.application.interfaces import (
    IAppRepository,
    IFormFieldRepository,
    IFormTemplateRepository,
    ISchemaDefaultRepository,
    ISheetsClient,
    ISpamClassifier,
    ISpamClassifierFactory,
    ISubmissionRepository,
)
from app.application.use_cases import (
    FormHandlerService,
    SchemaDefaultService,
    SheetSyncService,
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
    "FormHandlerService",
    "SchemaDefaultService",
    "SheetSyncService",
]
