"""Action dispatcher: runs the action list that matches a rule outcome.

Each supported action gets ``process_before_validate`` then
``process_after_validate``, exactly once each, before the next action
starts. Failures are isolated per action and per phase: a failing
before hook does not stop the after hook.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from mergeguard.exceptions import ActionFault
from mergeguard.model import EventContext, Outcome, RuleBlock
from mergeguard.plugins.registry import Registry
from mergeguard.utils import resolve

logger = logging.getLogger(__name__)


async def dispatch_actions(rule: RuleBlock, outcome: Outcome, context: EventContext, registry: Registry) -> None:
    """Run the ``pass``, ``fail`` or ``error`` list of *rule* for *outcome*."""
    for invocation in rule.actions_for(outcome.status):
        try:
            action = registry.resolve_action(invocation.do)
            supported = action.is_event_supported(context.event_selector)
        except Exception as exc:
            logger.warning("Skipping action '%s' in %s: %s", invocation.do, rule.label, exc)
            continue

        if not supported:
            logger.debug("Action '%s' does not support %s, skipping", invocation.do, context.event_selector)
            continue

        options = invocation.options
        await _invoke(
            invocation.do,
            "before",
            lambda: action.process_before_validate(options, context),
        )
        await _invoke(
            invocation.do,
            "after",
            lambda: action.process_after_validate(options, context, outcome),
        )


async def _invoke(name: str, phase: str, call: Callable[[], Any]) -> None:
    """Run one lifecycle call, logging and absorbing any failure."""
    try:
        await resolve(call())
    except Exception as exc:
        logger.warning("%s", ActionFault(name, phase, exc))
