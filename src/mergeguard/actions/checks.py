"""Check-run action.

Opens an ``in_progress`` check run on the pull request head before
validation and completes it afterwards. Options::

    - do: checks
      name: Mergeguard          # optional check-run name
      status: success           # check-run conclusion
      payload:
        title: Ready to merge
        summary: "{message}"    # {status} and {message} come from the outcome
        text: optional details
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, TypeAlias

from mergeguard.constants.checks import (
    IN_PROGRESS_SUMMARY,
    IN_PROGRESS_TITLE,
    STATUS_COMPLETED,
    STATUS_IN_PROGRESS,
    VALID_CONCLUSIONS,
)
from mergeguard.constants.config import DEFAULT_CHECK_NAME
from mergeguard.exceptions import ConfigError
from mergeguard.model import EventContext, Outcome
from mergeguard.plugins.base import Action
from mergeguard.types import JsonObject
from mergeguard.utils import format_template, resolve

logger = logging.getLogger(__name__)

_OUTPUT_KEYS: tuple[str, ...] = ("title", "summary", "text")

RunKey: TypeAlias = tuple[str, str, str]


class ChecksAction(Action):
    name = "checks"
    supported_events = (
        "pull_request.opened",
        "pull_request.edited",
        "pull_request.synchronize",
        "pull_request.reopened",
        "pull_request.labeled",
        "pull_request.unlabeled",
        "pull_request.milestoned",
        "pull_request.demilestoned",
        "pull_request.ready_for_review",
        "pull_request_review.submitted",
        "pull_request_review.dismissed",
    )

    def __init__(self) -> None:
        self._open_runs: dict[RunKey, Any] = {}

    async def process_before_validate(self, options: JsonObject, context: EventContext) -> None:
        check_name, head_sha = self._target(options, context)
        _validate_options(options)
        created = await resolve(
            context.github.create_check_run(
                context.repository,
                name=check_name,
                head_sha=head_sha,
                status=STATUS_IN_PROGRESS,
                output={"title": IN_PROGRESS_TITLE, "summary": IN_PROGRESS_SUMMARY},
            )
        )
        run_id = _run_id(created)
        if run_id is not None:
            self._open_runs[(context.repository.full_name, head_sha, check_name)] = run_id
        logger.debug("Opened check run %r for %s@%s", check_name, context.repository.full_name, head_sha)

    async def process_after_validate(self, options: JsonObject, context: EventContext, outcome: Outcome) -> None:
        check_name, head_sha = self._target(options, context)
        run_id = self._open_runs.pop((context.repository.full_name, head_sha, check_name), None)
        _validate_options(options)
        conclusion = options.get("status")
        if conclusion is None:
            conclusion = "success" if outcome.passed else "failure"
        output = _render_output(options.get("payload"), outcome)
        if run_id is None:
            await resolve(
                context.github.create_check_run(
                    context.repository,
                    name=check_name,
                    head_sha=head_sha,
                    status=STATUS_COMPLETED,
                    conclusion=conclusion,
                    output=output,
                )
            )
        else:
            await resolve(
                context.github.update_check_run(
                    context.repository,
                    run_id,
                    status=STATUS_COMPLETED,
                    conclusion=conclusion,
                    output=output,
                )
            )
        logger.info("Check run %r on %s concluded %s", check_name, context.repository.full_name, conclusion)

    @staticmethod
    def _target(options: JsonObject, context: EventContext) -> tuple[str, str]:
        check_name = options.get("name", DEFAULT_CHECK_NAME)
        if not isinstance(check_name, str) or not check_name:
            raise ConfigError("checks: name must be a non-empty string")
        head_sha = context.head_sha
        if head_sha is None:
            raise ConfigError(f"checks: event {context.event_selector} carries no pull request head sha")
        return check_name, head_sha


def _validate_options(options: JsonObject) -> None:
    conclusion = options.get("status")
    if conclusion is not None and conclusion not in VALID_CONCLUSIONS:
        raise ConfigError(f"checks: status must be one of {sorted(VALID_CONCLUSIONS)}, got {conclusion!r}")
    payload = options.get("payload")
    if payload is not None and not isinstance(payload, Mapping):
        raise ConfigError("checks: payload must be a mapping")


def _run_id(created: Any) -> Any:
    if isinstance(created, Mapping):
        return created.get("id")
    return created


def _render_output(payload: Mapping[str, Any] | None, outcome: Outcome) -> dict[str, str]:
    if payload is None:
        payload = {}

    values = {"status": outcome.status, "message": outcome.message or ""}
    output: dict[str, str] = {}
    for key in _OUTPUT_KEYS:
        value = payload.get(key)
        if value is not None:
            output[key] = format_template(str(value), **values)
    output.setdefault("title", f"Policy {outcome.status}")
    output.setdefault("summary", outcome.message or "")
    return output
