"""Request ID middleware.

Forwards a client-supplied request id or generates one, exposes it to log
records for the duration of the request and echoes it on the response.
Raw ASGI so background tasks (sheet sync) still run after the response.
"""

import re
from typing import Callable

from app.middleware._asgi import get_header
from app.shared.telemetry.logging import request_id_var
from app.shared.utils.generators import generate_cuid

REQUEST_ID_MAX_LENGTH = 64
_SAFE_REQUEST_ID = re.compile(r"^[A-Za-z0-9_-]+$")


def resolve_request_id(raw: str | None) -> str:
    """Return the client value when it is short and log-safe, else a fresh id."""
    value = (raw or "").strip()
    if value and len(value) <= REQUEST_ID_MAX_LENGTH and _SAFE_REQUEST_ID.match(value):
        return value
    return generate_cuid()


def RequestIDMiddleware(app: Callable, header_name: str = "X-Request-ID") -> Callable:
    """Add or forward the request id header. Raw ASGI."""
    header_bytes = header_name.lower().encode()

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        request_id = resolve_request_id(get_header(scope, header_name))
        scope.setdefault("state", {})["request_id"] = request_id
        token = request_id_var.set(request_id)

        async def send_with_request_id(message: dict) -> None:
            if message["type"] == "http.response.start":
                message["headers"] = [
                    *message.get("headers", []),
                    (header_bytes, request_id.encode()),
                ]
            await send(message)

        try:
            await app(scope, receive, send_with_request_id)
        finally:
            request_id_var.reset(token)

    return asgi_app
