"""Unit tests for the Akismet REST client using httpx.MockTransport."""

import httpx
import pytest

from app.domain.exceptions import SpamCheckException
from app.infrastructure.external.spam import AkismetClient, AkismetClientFactory
from app.infrastructure.external.spam.akismet_client import akismet_params


def _client(handler, requests: list[httpx.Request] | None = None) -> AkismetClient:
    def recording(request: httpx.Request) -> httpx.Response:
        if requests is not None:
            requests.append(request)
        return handler(request)

    http = httpx.AsyncClient(transport=httpx.MockTransport(recording))
    return AkismetClient("key123", "https://example.com", http)


def test_params_map_aliases_and_drop_none() -> None:
    assert akismet_params({"ip": "1.2.3.4", "email": "a@b.c", "user_ip": None, "x": 1}) == {
        "user_ip": "1.2.3.4",
        "comment_author_email": "a@b.c",
        "x": "1",
    }


@pytest.mark.parametrize(("body", "expected"), [("true", True), ("false", False)])
async def test_comment_check_verdict(body: str, expected: bool) -> None:
    requests: list[httpx.Request] = []
    client = _client(lambda r: httpx.Response(200, text=body), requests)

    assert await client.check_spam({"user_ip": "1.2.3.4", "comment_content": "hi"}) is expected

    (request,) = requests
    assert str(request.url) == "https://key123.rest.akismet.com/1.1/comment-check"
    form = dict(httpx.QueryParams(request.content.decode()))
    assert form == {"blog": "https://example.com", "user_ip": "1.2.3.4", "comment_content": "hi"}


async def test_comment_check_invalid_reply_raises_with_debug_help() -> None:
    client = _client(
        lambda r: httpx.Response(200, text="invalid", headers={"X-akismet-debug-help": "bad key"})
    )
    with pytest.raises(SpamCheckException) as exc_info:
        await client.check_spam({"user_ip": "1.2.3.4"})
    assert "bad key" in exc_info.value.message


async def test_http_error_status_raises() -> None:
    client = _client(lambda r: httpx.Response(503, text="busy"))
    with pytest.raises(SpamCheckException) as exc_info:
        await client.check_spam({})
    assert exc_info.value.details == {"status_code": 503}


async def test_transport_error_raises() -> None:
    def fail(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(SpamCheckException):
        await _client(fail).check_spam({})


@pytest.mark.parametrize(("body", "expected"), [("valid", True), ("invalid", False)])
async def test_verify_key(body: str, expected: bool) -> None:
    requests: list[httpx.Request] = []
    client = _client(lambda r: httpx.Response(200, text=body), requests)
    assert await client.verify_key() is expected
    assert str(requests[0].url) == "https://rest.akismet.com/1.1/verify-key"


def test_factory_binds_key_and_site() -> None:
    factory = AkismetClientFactory(httpx.AsyncClient(), endpoint="rest.akismet.com/1.1")
    client = factory("k", "https://site.example")
    assert client.api_key == "k"
    assert client.blog == "https://site.example"
