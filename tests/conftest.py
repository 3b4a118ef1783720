"""Shared fixtures and helpers for Mergeguard tests."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock

from mergeguard.model import EventContext, RepoRef

REPO: RepoRef = RepoRef(owner="acme", name="widgets")


def _payload(
    *,
    title: str = "Add widget support",
    body: str = "Implements widgets.",
    labels: tuple[str, ...] = (),
    milestone: str | None = None,
    action: str = "opened",
) -> dict[str, Any]:
    """Return a minimal pull_request webhook payload."""
    return {
        "action": action,
        "pull_request": {
            "number": 7,
            "title": title,
            "body": body,
            "labels": [{"name": name} for name in labels],
            "milestone": {"title": milestone} if milestone else None,
            "head": {"sha": "abc123"},
        },
        "repository": {"full_name": REPO.full_name},
    }


def _github(policy_text: str | None = None) -> MagicMock:
    """Return an API double serving *policy_text* as the policy file."""
    github = MagicMock()
    github.get_file_content = AsyncMock(return_value=policy_text)
    github.create_check_run = AsyncMock(return_value=101)
    github.update_check_run = AsyncMock(return_value=None)
    github.create_comment = AsyncMock(return_value=None)
    return github


def _context(
    policy_text: str | None = None,
    *,
    event: str = "pull_request",
    action: str = "opened",
    payload: dict[str, Any] | None = None,
    github: MagicMock | None = None,
) -> EventContext:
    """Build an EventContext whose API double serves *policy_text*."""
    return EventContext(
        event=event,
        action=action,
        payload=payload if payload is not None else _payload(action=action),
        repository=REPO,
        github=github if github is not None else _github(policy_text),
    )


def _validator(status: str = "pass", *, supported: Any = True, message: str | None = None) -> MagicMock:
    """Return a validator double. *supported* may be a bool or a callable(selector)."""
    validator = MagicMock()
    result: dict[str, Any] = {"status": status}
    if message is not None:
        result["message"] = message
    validator.process_validate = AsyncMock(return_value=result)
    if callable(supported):
        validator.is_event_supported = MagicMock(side_effect=supported)
    else:
        validator.is_event_supported = MagicMock(return_value=supported)
    return validator


def _action(*, supported: Any = True) -> MagicMock:
    """Return an action double. *supported* may be a bool or a callable(selector)."""
    action = MagicMock()
    action.process_before_validate = AsyncMock(return_value=None)
    action.process_after_validate = AsyncMock(return_value=None)
    if callable(supported):
        action.is_event_supported = MagicMock(side_effect=supported)
    else:
        action.is_event_supported = MagicMock(return_value=supported)
    return action
