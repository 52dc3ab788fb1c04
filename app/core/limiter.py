"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules can use the same
instance without circular imports.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from app.core.config import get_settings

limiter = Limiter(key_func=get_remote_address)


def _form_handler_limit() -> str:
    return get_settings().form_handler_rate_limit


# Public, unauthenticated submission endpoint.
limit_form_handler = limiter.limit(_form_handler_limit)
