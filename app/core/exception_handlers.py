"""Exception handlers for errors that escape a route.

The form-handler route turns its own pipeline failures into responses; these
handlers cover the trigger and health routes and anything unexpected. Every
error body uses the same envelope as the form handler: ``{"error": {...}}``.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import get_settings
from app.domain.exceptions import FormHandlerException

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR_CODE: dict[str, int] = {
    "APP_NOT_FOUND": 404,
    "TEMPLATE_NOT_FOUND": 404,
    "SCHEMA_COLLECTION_NOT_FOUND": 404,
    "SUBMISSION_DISABLED": 403,
    "SPAM_CHECK_FAILED": 502,
    "SHEET_SYNC_FAILED": 502,
}


def _error(status_code: int, code: str, message: Any, details: Any = None) -> JSONResponse:
    body: dict[str, Any] = {"code": code, "message": message}
    if details:
        body["details"] = details
    return JSONResponse(status_code=status_code, content={"error": body})


def _form_handler_exception_handler(request: Request, exc: FormHandlerException) -> Response:
    # Rejections never say why.
    if exc.error_code == "REQUEST_REJECTED":
        return Response(status_code=400)
    status_code = _STATUS_BY_ERROR_CODE.get(exc.error_code, 400)
    return _error(status_code, exc.error_code, exc.message, exc.details)


def _validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _error(422, "VALIDATION_ERROR", "Request validation failed", exc.errors())


def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error(exc.status_code, "HTTP_ERROR", exc.detail)


def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """500; the exception text is only exposed in debug mode."""
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    message = str(exc) if get_settings().debug else "Internal server error"
    return _error(500, "INTERNAL_ERROR", message)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(FormHandlerException, _form_handler_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)
