"""Top-level executor: one event in, every matching rule evaluated and acted on.

States: parse config -> match rules -> for each matched rule, evaluate then
dispatch -> done. A rule naming an unknown action is an ``error`` before any
validator runs. An unusable policy short-circuits to the cancelled report
and no rule runs. Rule blocks run sequentially in document order and are
independent of each other.
"""

from __future__ import annotations

import logging

from mergeguard.config import Settings
from mergeguard.engine.dispatcher import dispatch_actions
from mergeguard.engine.evaluator import evaluate_rule
from mergeguard.engine.fallback import report_cancelled
from mergeguard.exceptions import ConfigParseError, UnknownPluginError
from mergeguard.model import STATUS_ERROR, EventContext, ExecutionReport, Outcome, RuleBlock, RuleResult
from mergeguard.policy import fetch_policy, matches
from mergeguard.plugins.registry import Registry

logger = logging.getLogger(__name__)


async def execute(
    context: EventContext,
    registry: Registry,
    *,
    settings: Settings | None = None,
) -> ExecutionReport:
    """Evaluate the repository policy for one event."""
    settings = settings if settings is not None else Settings()
    report = ExecutionReport(event_selector=context.event_selector)

    try:
        policy = await fetch_policy(context, settings)
    except ConfigParseError as exc:
        logger.warning("Invalid policy for %s: %s", context.repository.full_name, exc)
        report.config_error = str(exc)
        await report_cancelled(context, settings, exc)
        return report

    matched = [rule for rule in policy.rules if matches(rule.when, context.event, context.action)]
    if not matched:
        logger.debug("No rule in %s matches %s", policy.source, context.event_selector)
        return report

    for rule in matched:
        outcome = await _run_rule(rule, context, registry)
        report.results.append(RuleResult(index=rule.index, label=rule.label, outcome=outcome))

    return report


async def _run_rule(rule: RuleBlock, context: EventContext, registry: Registry) -> Outcome:
    try:
        _resolve_actions(rule, registry)
        outcome = await evaluate_rule(rule, context, registry)
    except UnknownPluginError as exc:
        logger.warning("%s in %s", exc, rule.label)
        outcome = Outcome(status=STATUS_ERROR, message=str(exc))
    except Exception as exc:
        logger.exception("Unexpected error evaluating %s", rule.label)
        outcome = Outcome(status=STATUS_ERROR, message=str(exc))

    logger.info("%s on %s: %s", rule.label, context.event_selector, outcome.status)

    try:
        await dispatch_actions(rule, outcome, context, registry)
    except Exception:
        logger.exception("Unexpected error dispatching actions for %s", rule.label)
    return outcome


def _resolve_actions(rule: RuleBlock, registry: Registry) -> None:
    """Resolve every action *rule* can dispatch. Raises UnknownPluginError."""
    for invocation in (*rule.pass_actions, *rule.fail_actions, *rule.error_actions):
        registry.resolve_action(invocation.do)
