"""Request body size limit middleware.

Form submissions are small JSON documents; anything larger than
``max_bytes`` is answered with 413 before it reaches the pipeline. Checks the
declared Content-Length and, when none is sent, counts the streamed body.
"""

import json
from typing import Callable

from app.middleware._asgi import get_header


async def _send_413(send: Callable, max_bytes: int) -> None:
    body = json.dumps(
        {"error": {"message": f"Request body must be at most {max_bytes} bytes"}}
    ).encode()
    await send({
        "type": "http.response.start",
        "status": 413,
        "headers": [
            (b"content-type", b"application/json"),
            (b"content-length", str(len(body)).encode()),
        ],
    })
    await send({"type": "http.response.body", "body": body, "more_body": False})


def RequestSizeLimitMiddleware(app: Callable, max_bytes: int) -> Callable:
    """Reject requests whose body exceeds max_bytes. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return

        declared = get_header(scope, "content-length")
        if declared is not None:
            if declared.isdigit() and int(declared) > max_bytes:
                await _send_413(send, max_bytes)
                return
            await app(scope, receive, send)
            return

        # No Content-Length (chunked): buffer up to the limit, then replay.
        buffered: list[dict] = []
        total = 0
        more_body = True
        while more_body:
            message = await receive()
            if message["type"] != "http.request":
                buffered.append(message)
                break
            total += len(message.get("body", b""))
            if total > max_bytes:
                await _send_413(send, max_bytes)
                return
            buffered.append(message)
            more_body = message.get("more_body", False)

        async def replay() -> dict:
            if buffered:
                return buffered.pop(0)
            return await receive()

        await app(scope, replay, send)

    return asgi_app
