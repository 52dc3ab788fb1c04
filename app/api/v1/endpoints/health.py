"""Health check endpoints. No dependencies; used for liveness and readiness probes."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from app.infrastructure.firebase import get_firestore_client
from app.schemas.health import HealthResponse, ReadinessResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"description": "Firestore not configured", "model": ReadinessResponse}},
)
def readiness_check(request: Request) -> ReadinessResponse | JSONResponse:
    """Return 200 when Firestore is configured, 503 otherwise.

    Sheets is reported but not required: submissions are still stored
    without it and can be re-synced later.
    """
    body = ReadinessResponse(
        firestore=get_firestore_client() is not None,
        sheets=getattr(request.app.state, "sheets_client", None) is not None,
    )
    if body.firestore:
        return body
    body.status = "not_ready"
    return JSONResponse(status_code=503, content=body.model_dump())
