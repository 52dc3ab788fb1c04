"""App (tenant) and global configuration entities.

Represents the business view of the ``app/{appKey}`` and ``global/app``
documents, independent of persistence. Built once per invocation and never
mutated; the sheet-id mapping only grows through repository updates.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from app.domain.enums import ConditionFlag


def _message_text(value: Any) -> str:
    """Message values are stored either as plain text or as ``{"text": ...}``."""
    if isinstance(value, Mapping):
        return str(value.get("text", ""))
    return "" if value is None else str(value)


@dataclass(frozen=True)
class Messages:
    """Success and error text returned to the submitting user."""

    success: str = ""
    error: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "Messages":
        data = data or {}
        return cls(
            success=_message_text(data.get("success")),
            error=_message_text(data.get("error")),
        )


@dataclass(frozen=True)
class AppInfo:
    """The ``appInfo`` block: display name, origin URL, timezone and extra info keys.

    Every key of this block is merged into the candidate record and is
    whitelisted, so the raw mapping is kept alongside the typed accessors.
    """

    fields: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    @property
    def name(self) -> str:
        return str(self.fields.get("appName", ""))

    @property
    def url(self) -> str:
        return str(self.fields.get("appUrl", ""))

    @property
    def timezone(self) -> str:
        return str(self.fields.get("appTimeZone") or "UTC")


@dataclass(frozen=True)
class AppConditions:
    """Per-app boolean conditions, consulted when the global flag defers to the app."""

    message_global: bool = False
    cors_bypass: bool = False
    submit_form: bool = False
    spam_filter_akismet: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "AppConditions":
        data = data or {}
        return cls(
            message_global=bool(data.get("messageGlobal")),
            cors_bypass=bool(data.get("corsBypass")),
            submit_form=bool(data.get("submitForm")),
            spam_filter_akismet=bool(data.get("spamFilterAkismet")),
        )


@dataclass(frozen=True)
class GlobalConditions:
    """Tri-state global conditions from ``global/app``."""

    message_global: ConditionFlag = ConditionFlag.GLOBAL_OFF
    cors_bypass: ConditionFlag = ConditionFlag.GLOBAL_OFF
    submit_form: ConditionFlag = ConditionFlag.GLOBAL_OFF
    spam_filter_akismet: ConditionFlag = ConditionFlag.GLOBAL_OFF

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "GlobalConditions":
        data = data or {}
        return cls(
            message_global=ConditionFlag.parse(data.get("messageGlobal")),
            cors_bypass=ConditionFlag.parse(data.get("corsBypass")),
            submit_form=ConditionFlag.parse(data.get("submitForm")),
            spam_filter_akismet=ConditionFlag.parse(data.get("spamFilterAkismet")),
        )


@dataclass(frozen=True)
class AppConfig:
    """Tenant configuration (``app/{appKey}``)."""

    id: str
    info: AppInfo
    conditions: AppConditions
    messages: Messages
    akismet_key: str | None = None
    spreadsheet_id: str | None = None
    sheet_ids: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "sheet_ids", MappingProxyType(dict(self.sheet_ids)))

    @classmethod
    def from_document(cls, doc_id: str, data: Mapping[str, Any]) -> "AppConfig":
        """Build from a Firestore document (id + decoded fields)."""
        service = data.get("service") or {}
        akismet = service.get("spamFilterAkismet") or {}
        sheets = service.get("googleSheets") or {}
        return cls(
            id=doc_id,
            info=AppInfo(data.get("appInfo") or {}),
            conditions=AppConditions.from_dict(data.get("condition")),
            messages=Messages.from_dict(data.get("message")),
            akismet_key=akismet.get("key"),
            spreadsheet_id=sheets.get("spreadsheetId"),
            sheet_ids=sheets.get("sheetId") or {},
        )

    def sheet_id_for(self, template_name: str) -> int | None:
        """Return the known sheet id for a template, or None if never created."""
        value = self.sheet_ids.get(template_name)
        return int(value) if value is not None else None


@dataclass(frozen=True)
class GlobalConfig:
    """Global configuration (``global/app``): fallback messages and override flags."""

    conditions: GlobalConditions
    messages: Messages

    @classmethod
    def from_document(cls, data: Mapping[str, Any] | None) -> "GlobalConfig":
        data = data or {}
        return cls(
            conditions=GlobalConditions.from_dict(data.get("condition")),
            messages=Messages.from_dict(data.get("message")),
        )
