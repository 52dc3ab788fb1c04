"""Unit tests for ConfigResolver and the CORS decision."""

from unittest.mock import AsyncMock

import pytest

from app.application.services.config_resolver import ConfigResolver, resolve_config
from app.domain.entities import AppConfig, GlobalConfig


def _app(**condition) -> AppConfig:
    return AppConfig.from_document(
        "app1",
        {
            "appInfo": {"appUrl": "https://www.example.com"},
            "condition": condition,
            "message": {"success": "app ok", "error": "app err"},
        },
    )


def _global(**condition) -> GlobalConfig:
    return GlobalConfig.from_document(
        {"condition": condition, "message": {"success": "global ok", "error": "global err"}}
    )


@pytest.mark.parametrize(
    ("global_flag", "app_flag", "expected"),
    [(0, True, "app ok"), (1, False, "global ok"), (2, True, "global ok"), (2, False, "app ok")],
)
def test_message_block_selection(global_flag: int, app_flag: bool, expected: str) -> None:
    resolved = resolve_config(_app(messageGlobal=app_flag), _global(messageGlobal=global_flag))
    assert resolved.messages.success == expected


def test_submission_and_spam_flags() -> None:
    resolved = resolve_config(
        _app(submitForm=True, spamFilterAkismet=False),
        _global(submitForm=2, spamFilterAkismet=1),
    )
    assert resolved.submission_enabled is True
    assert resolved.spam_check_enabled is True


def test_allowed_origin_without_bypass() -> None:
    resolved = resolve_config(_app(corsBypass=True), _global(corsBypass=0))
    assert resolved.cors_bypass is False
    assert resolved.allowed_origin("https://www.example.com") == "https://www.example.com"
    assert resolved.allowed_origin("https://www.example.com/") is None
    assert resolved.allowed_origin("https://evil.example") is None
    assert resolved.allowed_origin(None) is None
    assert resolved.allowed_origin("") is None


def test_allowed_origin_with_bypass() -> None:
    resolved = resolve_config(_app(corsBypass=True), _global(corsBypass=2))
    assert resolved.allowed_origin("https://anything.example") == "*"


async def test_resolver_returns_none_for_unknown_app() -> None:
    repo = AsyncMock()
    repo.get_app.return_value = None
    assert await ConfigResolver(repo).resolve("missing") is None
    repo.get_global.assert_not_called()


async def test_resolver_returns_none_for_empty_key() -> None:
    repo = AsyncMock()
    assert await ConfigResolver(repo).resolve(None) is None
    repo.get_app.assert_not_called()


async def test_resolver_reads_app_and_global() -> None:
    repo = AsyncMock()
    repo.get_app.return_value = _app(submitForm=True)
    repo.get_global.return_value = _global(submitForm=2)
    resolved = await ConfigResolver(repo).resolve("app1")
    assert resolved is not None
    assert resolved.app.id == "app1"
    assert resolved.submission_enabled is True
