"""DTOs for the form-handler and sheet-sync use cases (no dependency on transport)."""

from dataclasses import dataclass, field
from enum import Enum

from app.domain.entities import Messages, PersistedSubmission


@dataclass(frozen=True)
class RequestMeta:
    """Request attributes the pipeline needs besides the body."""

    ip: str | None = None
    user_agent: str | None = None
    origin: str | None = None
    referrer: str | None = None


class FormHandlerStatus(str, Enum):
    """Outcome of one form-handler invocation."""

    ACCEPTED = "accepted"
    REJECTED = "rejected"
    DISABLED = "disabled"
    FAILED = "failed"


@dataclass(frozen=True)
class FormHandlerResult:
    """What the HTTP layer needs to answer the submitting client.

    REJECTED carries no message: the response has no body. allowed_origin is
    the Access-Control-Allow-Origin value once the app is known.
    """

    status: FormHandlerStatus
    messages: Messages = field(default_factory=Messages)
    allowed_origin: str | None = None
    url_redirect: str | None = None
    submission: PersistedSubmission | None = None

    @property
    def submission_id(self) -> str | None:
        return self.submission.id if self.submission else None


@dataclass(frozen=True)
class SheetSyncResult:
    """Outcome of mirroring one submission into the app spreadsheet."""

    submission_id: str | None
    spreadsheet_id: str
    sheet_title: str
    sheet_id: int
    sheet_created: bool
    data_row: list[str]
