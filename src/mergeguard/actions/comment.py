"""Comment action: posts ``payload.body`` on the pull request or issue after validation."""

from __future__ import annotations

from collections.abc import Mapping

from mergeguard.exceptions import ConfigError
from mergeguard.model import EventContext, Outcome
from mergeguard.plugins.base import Action
from mergeguard.types import JsonObject
from mergeguard.utils import format_template, resolve


class CommentAction(Action):
    name = "comment"
    supported_events = ("pull_request.*", "issues.*")

    async def process_before_validate(self, options: JsonObject, context: EventContext) -> None:
        return None

    async def process_after_validate(self, options: JsonObject, context: EventContext, outcome: Outcome) -> None:
        payload = options.get("payload")
        body = payload.get("body") if isinstance(payload, Mapping) else None
        if not isinstance(body, str) or not body:
            raise ConfigError("comment: payload.body must be a non-empty string")

        number = context.subject.get("number")
        if not isinstance(number, int):
            raise ConfigError(f"comment: event {context.event_selector} has no pull request or issue number")

        rendered = format_template(body, status=outcome.status, message=outcome.message or "")
        await resolve(context.github.create_comment(context.repository, number, rendered))
