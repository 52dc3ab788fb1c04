"""Application services: config resolution, field registry, props engine, spam check, sheet rows."""

from app.application.services.config_resolver import (
    ConfigResolver,
    ResolvedConfig,
    resolve_config,
)
from app.application.services.field_registry import PIPELINE_FIELDS, FieldRegistry
from app.application.services.sheet_rows import build_data_row, build_header_row
from app.application.services.spam_check import SpamCheckService, build_spam_payload
from app.application.services.submission_props import (
    SubmissionProps,
    allowed_keys,
    merge_candidate,
    normalize_value,
    whitelist,
)

__all__ = [
    "ConfigResolver",
    "FieldRegistry",
    "PIPELINE_FIELDS",
    "ResolvedConfig",
    "SpamCheckService",
    "SubmissionProps",
    "allowed_keys",
    "build_data_row",
    "build_header_row",
    "build_spam_payload",
    "merge_candidate",
    "normalize_value",
    "resolve_config",
    "whitelist",
]
