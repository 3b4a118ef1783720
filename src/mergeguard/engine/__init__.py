"""Policy execution engine."""

from __future__ import annotations

from mergeguard.engine.dispatcher import dispatch_actions
from mergeguard.engine.evaluator import evaluate_rule
from mergeguard.engine.executor import execute
from mergeguard.engine.fallback import report_cancelled

__all__ = ["dispatch_actions", "evaluate_rule", "execute", "report_cancelled"]
