"""Persisted form submission entity (``submitForm/{id}``).

The document layout matches what the email trigger and the sheet sync
read: ``appKey``, ``createdDateTime``, ``from``, ``spam``, ``toUids``,
``replyTo`` and ``template: {name, data}``.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from types import MappingProxyType
from typing import Any, Mapping

# Recipient marker that stops the email trigger from notifying the app owner.
SPAM_RECIPIENT_SENTINEL = "SPAM_SUSPECTED_DO_NOT_EMAIL"


@dataclass(frozen=True)
class PersistedSubmission:
    """A normalized submission. Immutable once written."""

    app_key: str
    template_name: str
    template_data: Mapping[str, str] = field(default_factory=dict)
    recipients: tuple[str, ...] = ()
    from_address: str = ""
    reply_to: str | None = None
    spam: str | None = None
    created_at: datetime | None = None
    id: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "template_data", MappingProxyType(dict(self.template_data))
        )

    @property
    def is_spam(self) -> bool:
        return self.spam == "true"

    def with_identity(self, submission_id: str) -> "PersistedSubmission":
        return replace(self, id=submission_id)

    def to_document(self) -> dict[str, Any]:
        """Firestore fields, without ``createdDateTime`` (set server-side by the store)."""
        doc: dict[str, Any] = {
            "appKey": self.app_key,
            "from": self.from_address,
            "toUids": list(self.recipients),
            "template": {
                "name": self.template_name,
                "data": dict(self.template_data),
            },
        }
        if self.spam is not None:
            doc["spam"] = self.spam
        if self.reply_to is not None:
            doc["replyTo"] = self.reply_to
        return doc

    @classmethod
    def from_document(cls, doc_id: str, data: Mapping[str, Any]) -> "PersistedSubmission":
        template = data.get("template") or {}
        return cls(
            id=doc_id,
            app_key=str(data.get("appKey", "")),
            template_name=str(template.get("name", "")),
            template_data={
                k: "" if v is None else str(v)
                for k, v in (template.get("data") or {}).items()
            },
            recipients=tuple(data.get("toUids") or ()),
            from_address=str(data.get("from") or ""),
            reply_to=data.get("replyTo"),
            spam=data.get("spam"),
            created_at=data.get("createdDateTime"),
        )
