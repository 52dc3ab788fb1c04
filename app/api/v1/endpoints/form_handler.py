"""Public form submission endpoint.

Browsers post the form as ``text/plain`` JSON (no CORS preflight). The
allowed origin is per app, so the Access-Control-Allow-Origin header is set
here rather than by a global CORS middleware.
"""

from typing import Annotated

from fastapi import APIRouter, BackgroundTasks, Depends, Request
from fastapi.responses import JSONResponse, Response

from app.api.v1.dependencies import (
    get_form_handler_service,
    get_optional_sheet_sync_service,
)
from app.application.dtos.submission import (
    FormHandlerResult,
    FormHandlerStatus,
    RequestMeta,
)
from app.application.use_cases.form_handler import FormHandlerService
from app.application.use_cases.sheet_sync import SheetSyncService
from app.core.limiter import limit_form_handler
from app.schemas.form_handler import (
    ErrorMessage,
    FormHandlerErrorResponse,
    FormHandlerSuccessResponse,
    MessageData,
    RedirectData,
)

router = APIRouter()

_ERROR_STATUS = {
    FormHandlerStatus.DISABLED: 403,
    FormHandlerStatus.FAILED: 500,
}


def _request_meta(request: Request) -> RequestMeta:
    return RequestMeta(
        ip=request.client.host if request.client else None,
        user_agent=request.headers.get("user-agent"),
        origin=request.headers.get("origin"),
        referrer=request.headers.get("referer"),
    )


def _to_response(result: FormHandlerResult) -> Response:
    headers = (
        {"Access-Control-Allow-Origin": result.allowed_origin}
        if result.allowed_origin
        else None
    )
    if result.status is FormHandlerStatus.REJECTED:
        return Response(status_code=204)
    if result.status is FormHandlerStatus.ACCEPTED:
        data = (
            RedirectData(redirect=result.url_redirect)
            if result.url_redirect
            else MessageData(message=result.messages.success)
        )
        return JSONResponse(
            content=FormHandlerSuccessResponse(data=data).model_dump(),
            headers=headers,
        )
    body = FormHandlerErrorResponse(error=ErrorMessage(message=result.messages.error))
    return JSONResponse(
        status_code=_ERROR_STATUS[result.status],
        content=body.model_dump(),
        headers=headers,
    )


@router.post(
    "",
    response_model=FormHandlerSuccessResponse,
    responses={
        204: {"description": "Rejected request (no body)"},
        403: {"description": "Submission disabled", "model": FormHandlerErrorResponse},
        500: {"description": "Submission failed", "model": FormHandlerErrorResponse},
    },
)
@limit_form_handler
async def submit_form(
    request: Request,
    background_tasks: BackgroundTasks,
    service: Annotated[FormHandlerService, Depends(get_form_handler_service)],
    sheet_sync: Annotated[SheetSyncService | None, Depends(get_optional_sheet_sync_service)],
) -> Response:
    """Validate, normalize, spam-check and store one form submission."""
    body = await request.body()
    result = await service.handle(body, request.headers.get("content-type"), _request_meta(request))
    if result.submission_id is not None and sheet_sync is not None:
        background_tasks.add_task(sheet_sync.sync, result.submission_id)
    return _to_response(result)
