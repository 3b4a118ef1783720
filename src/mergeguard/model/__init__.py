"""Core data models for Mergeguard."""

from .entities import (
    STATUS_ERROR,
    STATUS_FAIL,
    STATUS_PASS,
    ActionInvocation,
    Check,
    CheckResult,
    EventContext,
    ExecutionReport,
    Outcome,
    PolicyDocument,
    RepoRef,
    RuleBlock,
    RuleResult,
)

__all__ = [
    "STATUS_ERROR",
    "STATUS_FAIL",
    "STATUS_PASS",
    "ActionInvocation",
    "Check",
    "CheckResult",
    "EventContext",
    "ExecutionReport",
    "Outcome",
    "PolicyDocument",
    "RepoRef",
    "RuleBlock",
    "RuleResult",
]
