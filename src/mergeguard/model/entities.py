"""Dataclasses for events, policy documents and evaluation outcomes."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from mergeguard.types import JsonObject, OutcomeStatus

STATUS_PASS: OutcomeStatus = "pass"
STATUS_FAIL: OutcomeStatus = "fail"
STATUS_ERROR: OutcomeStatus = "error"

_VALID_STATUSES: frozenset[str] = frozenset({STATUS_PASS, STATUS_FAIL, STATUS_ERROR})


@dataclass(frozen=True)
class RepoRef:
    """Owner/name pair identifying a repository."""

    owner: str
    name: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"


@dataclass(frozen=True)
class EventContext:
    """Immutable view of one repository event.

    ``github`` is the source-control API handle used by the policy source,
    validators and actions; the engine itself never calls it except for the
    fatal-config fallback report.
    """

    event: str
    action: str
    payload: Mapping[str, Any]
    repository: RepoRef
    github: Any

    @property
    def event_selector(self) -> str:
        """Return ``family.action`` for this event, e.g. ``pull_request.opened``."""
        return f"{self.event}.{self.action}"

    @property
    def subject(self) -> Mapping[str, Any]:
        """Return the pull request or issue object the event is about."""
        for key in ("pull_request", "issue"):
            value = self.payload.get(key)
            if isinstance(value, Mapping):
                return value
        return {}

    @property
    def head_sha(self) -> str | None:
        """Return the pull request head commit, when the payload carries one."""
        pull_request = self.payload.get("pull_request")
        if not isinstance(pull_request, Mapping):
            return None
        head = pull_request.get("head")
        if not isinstance(head, Mapping):
            return None
        sha = head.get("sha")
        return sha if isinstance(sha, str) else None


@dataclass(frozen=True)
class Check:
    """One ``validate`` entry: a validator name plus its verbatim options."""

    do: str
    options: JsonObject


@dataclass(frozen=True)
class ActionInvocation:
    """One ``pass``/``fail``/``error`` entry: an action name plus its verbatim options."""

    do: str
    options: JsonObject


@dataclass(frozen=True)
class RuleBlock:
    """A top-level entry of the ``mergeable`` rule list."""

    index: int
    when: str
    validate: tuple[Check, ...]
    pass_actions: tuple[ActionInvocation, ...] = ()
    fail_actions: tuple[ActionInvocation, ...] = ()
    error_actions: tuple[ActionInvocation, ...] = ()
    name: str | None = None

    @property
    def label(self) -> str:
        return self.name or f"rule #{self.index + 1}"

    def actions_for(self, status: OutcomeStatus) -> tuple[ActionInvocation, ...]:
        """Return the action list configured for an outcome status."""
        if status == STATUS_PASS:
            return self.pass_actions
        if status == STATUS_FAIL:
            return self.fail_actions
        return self.error_actions


@dataclass(frozen=True)
class PolicyDocument:
    """Parsed version 2 policy document."""

    version: int
    rules: tuple[RuleBlock, ...]
    source: str = ""


@dataclass(frozen=True)
class CheckResult:
    """Result of running a single validator."""

    validator: str
    status: OutcomeStatus
    message: str | None = None


@dataclass(frozen=True)
class Outcome:
    """Aggregate result of one rule block's validate list."""

    status: OutcomeStatus
    message: str | None = None
    results: tuple[CheckResult, ...] = ()

    @property
    def passed(self) -> bool:
        return self.status == STATUS_PASS

    @classmethod
    def from_value(cls, value: Any) -> Outcome:
        """Normalize a validator return value into an Outcome.

        Accepts an ``Outcome`` or a mapping with ``status`` and optional
        ``message``. Anything else, or an unknown status, becomes ``error``.
        """
        if isinstance(value, Outcome):
            return value
        if isinstance(value, Mapping):
            status = value.get("status")
            message = value.get("message")
            if status in _VALID_STATUSES:
                return cls(status=status, message=None if message is None else str(message))
            return cls(status=STATUS_ERROR, message=f"Validator returned unknown status {status!r}")
        return cls(status=STATUS_ERROR, message=f"Validator returned {type(value).__name__}, expected a result")


@dataclass(frozen=True)
class RuleResult:
    """Outcome of one evaluated rule block."""

    index: int
    label: str
    outcome: Outcome


@dataclass
class ExecutionReport:
    """What one executor invocation did."""

    event_selector: str
    results: list[RuleResult] = field(default_factory=list)
    config_error: str | None = None

    @property
    def matched(self) -> int:
        return len(self.results)

    @property
    def has_failures(self) -> bool:
        """Return True when the config was invalid or any rule did not pass."""
        if self.config_error is not None:
            return True
        return any(not result.outcome.passed for result in self.results)
