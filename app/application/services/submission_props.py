"""Props merge and whitelist engine.

A submission becomes a stored record in three steps:

1. ``merge_candidate``: layer app key, default field values, the raw
   submission and the app info block (later layers win).
2. ``whitelist``: keep only keys that are required fields, template fields
   or app info keys.
3. ``SubmissionProps``: fold the allowed entries (and later the spam flag)
   into an immutable record, then ``to_submission()``.

Every step returns a new value; nothing is mutated in place.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from app.domain.entities import SPAM_RECIPIENT_SENTINEL, PersistedSubmission


def merge_candidate(
    app_key: str,
    defaults: Mapping[str, Any],
    submission: Mapping[str, Any],
    app_info: Mapping[str, Any],
) -> dict[str, Any]:
    """Return the union of all layers; on key collision the later layer wins."""
    return {"appKey": app_key, **defaults, **submission, **app_info}


def allowed_keys(
    required: Iterable[str],
    template_field_ids: Iterable[str],
    app_info_keys: Iterable[str],
) -> frozenset[str]:
    return frozenset(required) | frozenset(template_field_ids) | frozenset(app_info_keys)


def whitelist(candidate: Mapping[str, Any], allowed: frozenset[str]) -> dict[str, Any]:
    """Drop every key not in ``allowed``; candidate order is preserved."""
    return {key: value for key, value in candidate.items() if key in allowed}


def normalize_value(value: Any) -> str | None:
    """Scalar text for a stored field; None means the key is skipped."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, dict)):
        return json.dumps(value, separators=(",", ":"))
    return str(value).strip()


@dataclass(frozen=True)
class SubmissionProps:
    """Accumulated, normalized props for one submission.

    ``appKey`` seeds the recipient; a later ``spam == "true"`` replaces it
    with the do-not-email sentinel. Keys that are template fields are also
    copied into ``template_data``.
    """

    template_field_ids: tuple[str, ...] = ()
    entries: Mapping[str, str] = field(default_factory=dict)
    template_data: Mapping[str, str] = field(default_factory=dict)
    recipient_id: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))
        object.__setattr__(
            self, "template_data", MappingProxyType(dict(self.template_data))
        )

    @classmethod
    def build(
        cls,
        allowed_entries: Mapping[str, Any],
        template_field_ids: Iterable[str],
    ) -> "SubmissionProps":
        return cls(template_field_ids=tuple(template_field_ids)).with_entries(allowed_entries)

    def with_entries(self, new_entries: Mapping[str, Any]) -> "SubmissionProps":
        """Return a new record with ``new_entries`` folded in, in order."""
        entries = dict(self.entries)
        template_data = dict(self.template_data)
        recipient_id = self.recipient_id
        for key, raw in new_entries.items():
            value = normalize_value(raw)
            if value is None:
                continue
            entries[key] = value
            if key == "appKey":
                recipient_id = value
            elif key == "spam" and value == "true":
                recipient_id = SPAM_RECIPIENT_SENTINEL
            if key in self.template_field_ids:
                template_data[key] = value
        return replace(
            self,
            entries=entries,
            template_data=template_data,
            recipient_id=recipient_id,
        )

    @property
    def app_key(self) -> str:
        return self.entries.get("appKey", "")

    @property
    def template_name(self) -> str:
        return self.entries.get("templateName", "")

    @property
    def url_redirect(self) -> str | None:
        """Redirect target for the client; ``"false"`` and empty mean none."""
        value = self.entries.get("urlRedirect")
        if not value or value == "false":
            return None
        return value

    def to_submission(self) -> PersistedSubmission:
        return PersistedSubmission(
            app_key=self.app_key,
            template_name=self.template_name,
            template_data=self.template_data,
            recipients=(self.recipient_id,),
            from_address=self.entries.get("appFrom", ""),
            reply_to=self.template_data.get("email"),
            spam=self.entries.get("spam"),
        )
