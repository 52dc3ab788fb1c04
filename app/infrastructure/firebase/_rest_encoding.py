"""Python values <-> Firestore REST ``Value`` objects, plus field-path helpers."""

import base64
import re
from datetime import UTC, datetime
from typing import Any

from app.shared.utils.datetime import ensure_utc

# Field names that may appear unquoted in a field path.
_BARE_FIELD_NAME = re.compile(r"^[A-Za-z_][A-Za-z_0-9]*$")


class _ServerTimestamp:
    """Marks a field to be set to the commit time (REQUEST_TIME transform)."""

    def __repr__(self) -> str:
        return "SERVER_TIMESTAMP"


SERVER_TIMESTAMP = _ServerTimestamp()


def encode_value(value: Any) -> dict[str, Any]:
    # bool before int: bool is an int subclass
    if value is None:
        return {"nullValue": None}
    if isinstance(value, bool):
        return {"booleanValue": value}
    if isinstance(value, int):
        return {"integerValue": str(value)}
    if isinstance(value, float):
        return {"doubleValue": value}
    if isinstance(value, str):
        return {"stringValue": value}
    if isinstance(value, datetime):
        utc = ensure_utc(value)
        return {"timestampValue": utc.strftime("%Y-%m-%dT%H:%M:%S.%fZ")}
    if isinstance(value, bytes):
        return {"bytesValue": base64.standard_b64encode(value).decode("ascii")}
    if isinstance(value, (list, tuple)):
        return {"arrayValue": {"values": [encode_value(v) for v in value]}}
    if isinstance(value, dict):
        return {"mapValue": {"fields": {k: encode_value(v) for k, v in value.items()}}}
    raise TypeError(f"Cannot store {type(value).__name__} in Firestore")


def decode_value(value: dict[str, Any]) -> Any:
    if "stringValue" in value:
        return value["stringValue"]
    if "booleanValue" in value:
        return value["booleanValue"]
    if "integerValue" in value:
        return int(value["integerValue"])
    if "doubleValue" in value:
        return float(value["doubleValue"])
    if "timestampValue" in value:
        parsed = datetime.fromisoformat(value["timestampValue"].replace("Z", "+00:00"))
        return parsed.astimezone(UTC)
    if "mapValue" in value:
        return decode_document(value["mapValue"].get("fields"))
    if "arrayValue" in value:
        return [decode_value(v) for v in value["arrayValue"].get("values") or []]
    if "bytesValue" in value:
        return base64.standard_b64decode(value["bytesValue"])
    # nullValue, and types this app never stores (geoPoint, reference)
    return None


def encode_document(data: dict[str, Any]) -> dict[str, Any]:
    """``{"fields": {...}}`` body for a document write."""
    return {"fields": {k: encode_value(v) for k, v in data.items()}}


def decode_document(fields: dict[str, Any] | None) -> dict[str, Any]:
    return {k: decode_value(v) for k, v in (fields or {}).items()}


def split_server_timestamps(data: dict[str, Any]) -> tuple[dict[str, Any], list[str]]:
    """Separate top-level SERVER_TIMESTAMP fields from the plain data."""
    plain: dict[str, Any] = {}
    server_time_paths: list[str] = []
    for key, value in data.items():
        if value is SERVER_TIMESTAMP:
            server_time_paths.append(quote_field_path((key,)))
        else:
            plain[key] = value
    return plain, server_time_paths


def quote_field_path(segments: tuple[str, ...]) -> str:
    """Dotted field path; segments that are not bare identifiers are backtick-quoted."""
    return ".".join(
        s if _BARE_FIELD_NAME.match(s) else "`" + s.replace("\\", "\\\\").replace("`", "\\`") + "`"
        for s in segments
    )


def nest_field_paths(updates: dict[tuple[str, ...], Any]) -> dict[str, Any]:
    """``{("a", "b"): 1}`` -> ``{"a": {"b": 1}}`` for a masked PATCH body."""
    nested: dict[str, Any] = {}
    for segments, value in updates.items():
        *parents, leaf = segments
        node = nested
        for segment in parents:
            node = node.setdefault(segment, {})
        node[leaf] = value
    return nested
