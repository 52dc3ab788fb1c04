"""Unit tests for Firestore REST value encoding and field paths."""

from datetime import UTC, datetime

from app.infrastructure.firebase._rest_encoding import (
    SERVER_TIMESTAMP,
    decode_document,
    encode_document,
    nest_field_paths,
    quote_field_path,
    split_server_timestamps,
)


def test_encode_document_types() -> None:
    encoded = encode_document(
        {
            "s": "x",
            "b": True,
            "i": 3,
            "n": None,
            "t": datetime(2024, 3, 7, 2, 5, tzinfo=UTC),
            "m": {"toUids": ["a"]},
        }
    )["fields"]
    assert encoded["s"] == {"stringValue": "x"}
    assert encoded["b"] == {"booleanValue": True}
    assert encoded["i"] == {"integerValue": "3"}
    assert encoded["n"] == {"nullValue": None}
    assert encoded["t"] == {"timestampValue": "2024-03-07T02:05:00.000000Z"}
    assert encoded["m"] == {
        "mapValue": {"fields": {"toUids": {"arrayValue": {"values": [{"stringValue": "a"}]}}}}
    }


def test_decode_submission_document() -> None:
    fields = {
        "appKey": {"stringValue": "app1"},
        "createdDateTime": {"timestampValue": "2024-03-07T02:05:00.123456Z"},
        "template": {
            "mapValue": {
                "fields": {
                    "name": {"stringValue": "contact"},
                    "data": {"mapValue": {}},
                }
            }
        },
        "sheetId": {"integerValue": "42"},
    }
    decoded = decode_document(fields)
    assert decoded["appKey"] == "app1"
    assert decoded["createdDateTime"] == datetime(2024, 3, 7, 2, 5, 0, 123456, tzinfo=UTC)
    assert decoded["template"] == {"name": "contact", "data": {}}
    assert decoded["sheetId"] == 42
    assert decode_document(None) == {}


def test_split_server_timestamps() -> None:
    plain, transforms = split_server_timestamps({"appKey": "a", "createdDateTime": SERVER_TIMESTAMP})
    assert plain == {"appKey": "a"}
    assert transforms == ["createdDateTime"]


def test_quote_field_path() -> None:
    assert quote_field_path(("service", "googleSheets", "sheetId", "contactDefault")) == (
        "service.googleSheets.sheetId.contactDefault"
    )
    assert quote_field_path(("sheetId", "contact-form")) == "sheetId.`contact-form`"
    assert quote_field_path(("a`b",)) == "`a\\`b`"


def test_nest_field_paths() -> None:
    nested = nest_field_paths(
        {("service", "googleSheets", "sheetId", "contact"): 7, ("service", "x"): 1}
    )
    assert nested == {"service": {"googleSheets": {"sheetId": {"contact": 7}}, "x": 1}}
