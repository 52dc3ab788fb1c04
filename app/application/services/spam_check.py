"""Spam classifier adapter: builds the classifier payload and fails open."""

from __future__ import annotations

from typing import Any

from app.application.dtos.submission import RequestMeta
from app.application.interfaces.services import ISpamClassifierFactory
from app.application.services.config_resolver import ResolvedConfig
from app.domain.entities import FormTemplate
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


def build_spam_payload(
    template: FormTemplate,
    template_data: dict[str, str] | Any,
    meta: RequestMeta,
) -> dict[str, Any]:
    """Classifier parameters for one submission.

    ``content`` fields present in the data are joined with spaces into
    ``comment_content``; each present ``other`` field is sent as its own key.
    """
    payload: dict[str, Any] = {"user_ip": meta.ip}
    if meta.user_agent:
        payload["user_agent"] = meta.user_agent
    if meta.referrer:
        payload["referrer"] = meta.referrer
    content = " ".join(
        template_data[f] for f in template.spam_check.content if f in template_data
    )
    if content:
        payload["comment_content"] = content
    for f in template.spam_check.other:
        if f in template_data:
            payload[f] = template_data[f]
    return payload


class SpamCheckService:
    """Classifies a submission when the app has spam filtering enabled.

    Returns ``{"spam": "true" | "false"}`` to be folded into the props, or
    ``{}`` when the check is disabled or fails. A failed check never blocks
    the submission.
    """

    def __init__(self, classifier_factory: ISpamClassifierFactory) -> None:
        self.classifier_factory = classifier_factory

    async def check(
        self,
        config: ResolvedConfig,
        template: FormTemplate,
        template_data: dict[str, str] | Any,
        meta: RequestMeta,
    ) -> dict[str, str]:
        if not config.spam_check_enabled:
            return {}
        api_key = config.app.akismet_key
        if not api_key:
            logger.warning("Spam check enabled for app %s but no Akismet key is set", config.app.id)
            return {}

        classifier = self.classifier_factory(api_key, config.app.info.url)
        payload = build_spam_payload(template, template_data, meta)
        try:
            is_spam = await classifier.check_spam(payload)
        except Exception:
            await self._log_key_status(classifier, config.app.id)
            logger.exception("Akismet spam check failed for app %s", config.app.id)
            return {}
        return {"spam": "true" if is_spam else "false"}

    @staticmethod
    async def _log_key_status(classifier: Any, app_key: str) -> None:
        """Distinguish a bad credential from a transport failure in the logs."""
        try:
            valid = await classifier.verify_key()
        except Exception as e:
            logger.warning("Akismet key verification failed for app %s: %s", app_key, e)
            return
        if valid:
            logger.info("Akismet: API key is valid (app %s)", app_key)
        else:
            logger.warning("Akismet: Invalid API key (app %s)", app_key)
