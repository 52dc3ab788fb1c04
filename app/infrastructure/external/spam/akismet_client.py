"""Akismet REST client (implements ISpamClassifier) over httpx."""

from __future__ import annotations

from typing import Any

import httpx

from app.domain.exceptions import SpamCheckException
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

DEFAULT_ENDPOINT = "rest.akismet.com/1.1"

# Submission field names accepted in place of the Akismet parameter names.
_PARAM_ALIASES = {
    "ip": "user_ip",
    "useragent": "user_agent",
    "content": "comment_content",
    "name": "comment_author",
    "email": "comment_author_email",
    "url": "comment_author_url",
    "type": "comment_type",
}


def akismet_params(payload: dict[str, Any]) -> dict[str, str]:
    """Map payload keys to Akismet parameters and drop empty values."""
    params: dict[str, str] = {}
    for key, value in payload.items():
        if value is None:
            continue
        params[_PARAM_ALIASES.get(key, key)] = str(value)
    return params


class AkismetClient:
    """One app's Akismet credential bound to its site URL (``blog``)."""

    def __init__(
        self,
        api_key: str,
        blog: str,
        http_client: httpx.AsyncClient,
        endpoint: str = DEFAULT_ENDPOINT,
        timeout: float = 10.0,
    ) -> None:
        self.api_key = api_key
        self.blog = blog
        self._http = http_client
        self._endpoint = endpoint.strip("/")
        self._timeout = timeout

    async def _post(self, url: str, data: dict[str, str]) -> httpx.Response:
        try:
            resp = await self._http.post(url, data=data, timeout=self._timeout)
        except httpx.HTTPError as e:
            raise SpamCheckException(f"Akismet request failed: {e}") from e
        if resp.status_code != 200:
            raise SpamCheckException(
                f"Akismet returned HTTP {resp.status_code}", status_code=resp.status_code
            )
        return resp

    async def check_spam(self, payload: dict[str, Any]) -> bool:
        """Return True when Akismet classifies the payload as spam."""
        data = {"blog": self.blog, **akismet_params(payload)}
        url = f"https://{self.api_key}.{self._endpoint}/comment-check"
        resp = await self._post(url, data)
        body = resp.text.strip()
        if body == "true":
            return True
        if body == "false":
            return False
        help_text = resp.headers.get("X-akismet-debug-help") or body
        raise SpamCheckException(f"Akismet comment-check failed: {help_text}")

    async def verify_key(self) -> bool:
        url = f"https://{self._endpoint}/verify-key"
        resp = await self._post(url, {"key": self.api_key, "blog": self.blog})
        return resp.text.strip() == "valid"


class AkismetClientFactory:
    """Creates per-app clients sharing one HTTP connection pool."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        endpoint: str = DEFAULT_ENDPOINT,
        timeout: float = 10.0,
    ) -> None:
        self._http = http_client
        self._endpoint = endpoint
        self._timeout = timeout

    def __call__(self, api_key: str, site_url: str) -> AkismetClient:
        return AkismetClient(
            api_key,
            site_url,
            self._http,
            endpoint=self._endpoint,
            timeout=self._timeout,
        )
