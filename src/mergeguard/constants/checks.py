"""Check-run status values used by the fallback report and the ``checks`` action."""

from __future__ import annotations

STATUS_IN_PROGRESS: str = "in_progress"
STATUS_COMPLETED: str = "completed"

CONCLUSION_CANCELLED: str = "cancelled"
VALID_CONCLUSIONS: frozenset[str] = frozenset(
    {"success", "failure", "neutral", "cancelled", "timed_out", "action_required", "skipped"}
)

INVALID_CONFIG_TITLE: str = "Invalid policy configuration"
INVALID_CONFIG_SUMMARY: str = "The policy file could not be loaded; no rules were evaluated."
IN_PROGRESS_TITLE: str = "Evaluating policy"
IN_PROGRESS_SUMMARY: str = "Policy checks are running."
