"""FastAPI application for the form handler.

create_app() only wires things together: lifespan, rate limiter, error
handlers, middleware and the v1 router. Settings are read when the app is
built, so tests can set the environment before importing this module.
"""

from fastapi import FastAPI
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from app.api.v1 import api_router
from app.core.config import get_settings
from app.core.exception_handlers import register_exception_handlers
from app.core.lifespan import create_lifespan
from app.core.limiter import limiter
from app.middleware import RequestIDMiddleware, RequestSizeLimitMiddleware

API_PREFIX = "/api/v1"


def create_app() -> FastAPI:
    settings = get_settings()
    application = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    # slowapi reads the limiter from app.state
    application.state.limiter = limiter
    application.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    register_exception_handlers(application)

    # Last added runs first: the size limit rejects before a request id is assigned.
    application.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)
    application.add_middleware(RequestSizeLimitMiddleware, max_bytes=settings.max_request_size)

    application.include_router(api_router, prefix=API_PREFIX)
    return application


app = create_app()
