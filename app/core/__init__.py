"""Core: settings, application lifespan, and HTTP error handling."""

from app.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
