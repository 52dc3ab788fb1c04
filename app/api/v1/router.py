"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from app.api.v1.dependencies (no manual repo/service construction).
"""

from fastapi import APIRouter

from app.api.v1.endpoints import form_handler, health, triggers

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(form_handler.router, prefix="/form-handler", tags=["form-handler"])
api_router.include_router(triggers.router, prefix="/triggers", tags=["triggers"])
