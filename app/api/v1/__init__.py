"""API v1: form handler, document-created triggers and health."""

from app.api.v1.router import api_router

__all__ = ["api_router"]
