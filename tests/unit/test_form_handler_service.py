"""Unit tests for body parsing and the form-handler error boundary."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from app.application.dtos.submission import FormHandlerResult, FormHandlerStatus, RequestMeta
from app.application.use_cases.form_handler import FormHandlerService, parse_submission
from app.domain.entities import PersistedSubmission
from app.domain.exceptions import RejectedRequestException


@pytest.mark.parametrize(
    "content_type",
    ["text/plain", "TEXT/PLAIN", " Text/Plain "],
)
def test_parse_accepts_text_plain(content_type: str) -> None:
    assert parse_submission(b'{"appKey": "a"}', content_type) == {"appKey": "a"}


@pytest.mark.parametrize(
    "content_type",
    [
        None,
        "",
        "application/json",
        "text/html",
        "text/plain; charset=utf-8",
        "text/plain;charset=UTF-8",
    ],
)
def test_parse_rejects_other_content_types(content_type: str | None) -> None:
    with pytest.raises(RejectedRequestException):
        parse_submission(b'{"appKey": "a"}', content_type)


@pytest.mark.parametrize("body", [b"", b"not json", b"[1, 2]", b'"text"', b"\xff\xfe"])
def test_parse_rejects_non_object_bodies(body: bytes) -> None:
    with pytest.raises(RejectedRequestException):
        parse_submission(body, "text/plain")


def _service(resolver) -> FormHandlerService:
    return FormHandlerService(resolver, AsyncMock(), AsyncMock(), AsyncMock())


async def test_unknown_app_is_rejected_without_message() -> None:
    resolver = AsyncMock()
    resolver.resolve.return_value = None
    result = await _service(resolver).handle(b'{"appKey": "x"}', "text/plain", RequestMeta())
    assert result.status is FormHandlerStatus.REJECTED
    assert result.allowed_origin is None
    assert result.submission_id is None


async def test_failure_before_resolution_has_empty_messages() -> None:
    resolver = MagicMock()
    resolver.resolve = AsyncMock(side_effect=RuntimeError("firestore down"))
    result = await _service(resolver).handle(b'{"appKey": "x"}', "text/plain", RequestMeta())
    assert result.status is FormHandlerStatus.FAILED
    assert result.messages.error == ""
    assert result.messages.success == ""


def test_result_exposes_stored_submission_id() -> None:
    stored = PersistedSubmission(app_key="a", template_name="t").with_identity("sub1")
    result = FormHandlerResult(status=FormHandlerStatus.ACCEPTED, submission=stored)
    assert result.submission_id == "sub1"
