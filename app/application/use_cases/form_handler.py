"""Form handler use case: validate, normalize, classify and store one submission."""

from __future__ import annotations

import json
from typing import Any

from app.application.dtos.submission import (
    FormHandlerResult,
    FormHandlerStatus,
    RequestMeta,
)
from app.application.interfaces.repositories import ISubmissionRepository
from app.application.services.config_resolver import ConfigResolver
from app.application.services.field_registry import FieldRegistry
from app.application.services.spam_check import SpamCheckService
from app.application.services.submission_props import (
    SubmissionProps,
    allowed_keys,
    merge_candidate,
    whitelist,
)
from app.domain.entities import Messages
from app.domain.exceptions import RejectedRequestException, SubmissionDisabledException
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

ACCEPTED_CONTENT_TYPE = "text/plain"


def parse_submission(body: bytes | str, content_type: str | None) -> dict[str, Any]:
    """Return the submitted JSON object.

    Clients post ``text/plain`` to avoid a CORS preflight. The header must be
    exactly that, case aside; parameters such as a charset are rejected, as
    is a body that is not a JSON object.
    """
    if (content_type or "").strip().lower() != ACCEPTED_CONTENT_TYPE:
        raise RejectedRequestException(f"unsupported content type {content_type!r}")
    try:
        data = json.loads(body)
    except (TypeError, ValueError, UnicodeDecodeError) as e:
        raise RejectedRequestException("body is not valid JSON") from e
    if not isinstance(data, dict):
        raise RejectedRequestException("body is not a JSON object")
    return data


class FormHandlerService:
    """Runs the submission pipeline; the single error boundary for one request."""

    def __init__(
        self,
        config_resolver: ConfigResolver,
        field_registry: FieldRegistry,
        spam_check: SpamCheckService,
        submission_repo: ISubmissionRepository,
    ) -> None:
        self.config_resolver = config_resolver
        self.field_registry = field_registry
        self.spam_check = spam_check
        self.submission_repo = submission_repo

    async def handle(
        self,
        body: bytes | str,
        content_type: str | None,
        meta: RequestMeta,
    ) -> FormHandlerResult:
        """Process one submission and describe the response to send.

        Rejected requests (bad content type or body, unknown app, foreign
        origin) get no message at all. Any other failure is logged and
        answered with the resolved error message, or an empty one when the
        app config was not resolved yet.
        """
        messages = Messages()
        allowed_origin: str | None = None
        try:
            submission = parse_submission(body, content_type)

            config = await self.config_resolver.resolve(submission.get("appKey"))
            if config is None:
                raise RejectedRequestException("unknown appKey")
            allowed_origin = config.allowed_origin(meta.origin)
            if allowed_origin is None:
                raise RejectedRequestException(f"origin {meta.origin!r} not allowed")
            messages = config.messages

            if not config.submission_enabled:
                raise SubmissionDisabledException(messages.error, app_name=config.app.info.name)

            template = await self.field_registry.template_for(submission.get("templateName"))
            candidate = merge_candidate(
                config.app.id,
                await self.field_registry.default_field_values(),
                submission,
                config.app.info.fields,
            )
            allowed = allowed_keys(
                await self.field_registry.required_field_names(),
                template.field_ids,
                config.app.info.fields.keys(),
            )
            props = SubmissionProps.build(whitelist(candidate, allowed), template.field_ids)

            spam_result = await self.spam_check.check(config, template, props.template_data, meta)
            props = props.with_entries(spam_result)

            stored = await self.submission_repo.create(props.to_submission())
        except RejectedRequestException as e:
            logger.warning("Form submission rejected: %s", e.message)
            return FormHandlerResult(status=FormHandlerStatus.REJECTED)
        except SubmissionDisabledException as e:
            logger.warning("Form submission disabled for app %s", e.details.get("app_name"))
            return FormHandlerResult(
                status=FormHandlerStatus.DISABLED,
                messages=messages,
                allowed_origin=allowed_origin,
            )
        except Exception:
            logger.exception("Form submission failed")
            return FormHandlerResult(
                status=FormHandlerStatus.FAILED,
                messages=messages,
                allowed_origin=allowed_origin,
            )

        return FormHandlerResult(
            status=FormHandlerStatus.ACCEPTED,
            messages=messages,
            allowed_origin=allowed_origin,
            url_redirect=props.url_redirect,
            submission=stored,
        )
