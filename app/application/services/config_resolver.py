"""Effective per-app configuration: global tri-state flags layered over app booleans."""

from __future__ import annotations

from dataclasses import dataclass

from app.application.interfaces.repositories import IAppRepository
from app.domain.entities import AppConfig, GlobalConfig, Messages
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ResolvedConfig:
    """Configuration in effect for one app during one invocation."""

    app: AppConfig
    global_config: GlobalConfig
    messages: Messages
    submission_enabled: bool
    cors_bypass: bool
    spam_check_enabled: bool

    def allowed_origin(self, request_origin: str | None) -> str | None:
        """Return the Access-Control-Allow-Origin value, or None to reject the caller.

        With the bypass on every origin gets ``*``. Otherwise the request
        origin must equal the registered app URL exactly; a missing Origin
        header is a mismatch.
        """
        if self.cors_bypass:
            return "*"
        app_url = self.app.info.url
        if request_origin and request_origin == app_url:
            return app_url
        return None


class ConfigResolver:
    """Loads the app and global documents and resolves the effective settings."""

    def __init__(self, app_repo: IAppRepository) -> None:
        self.app_repo = app_repo

    async def resolve(self, app_key: str | None) -> ResolvedConfig | None:
        """Return the effective config, or None when the app key is unknown."""
        if not app_key:
            return None
        app = await self.app_repo.get_app(app_key)
        if app is None:
            logger.warning("Unknown appKey %r", app_key)
            return None
        global_config = await self.app_repo.get_global()
        return resolve_config(app, global_config)


def resolve_config(app: AppConfig, global_config: GlobalConfig) -> ResolvedConfig:
    """Combine app and global documents; pure, used by the resolver and tests."""
    g = global_config.conditions
    c = app.conditions
    use_global_messages = g.message_global.resolve(c.message_global)
    return ResolvedConfig(
        app=app,
        global_config=global_config,
        messages=global_config.messages if use_global_messages else app.messages,
        submission_enabled=g.submit_form.resolve(c.submit_form),
        cors_bypass=g.cors_bypass.resolve(c.cors_bypass),
        spam_check_enabled=g.spam_filter_akismet.resolve(c.spam_filter_akismet),
    )
