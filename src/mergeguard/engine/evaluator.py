"""Rule evaluator: runs a rule block's validate list and reduces it to one Outcome.

Reduction is first-non-pass-wins. Checks run in document order and
evaluation stops at the first ``fail`` or ``error``; the rule passes only
when every check that ran passed. Checks whose validator does not support
the current event are skipped and do not affect the outcome.
"""

from __future__ import annotations

import logging

from mergeguard.exceptions import UnknownPluginError, ValidatorFault
from mergeguard.model import STATUS_ERROR, STATUS_PASS, Check, CheckResult, EventContext, Outcome, RuleBlock
from mergeguard.plugins.registry import Registry
from mergeguard.utils import resolve

logger = logging.getLogger(__name__)


async def evaluate_rule(rule: RuleBlock, context: EventContext, registry: Registry) -> Outcome:
    """Run every check of *rule* in order and return the aggregate outcome."""
    results: list[CheckResult] = []

    for check in rule.validate:
        result = await _run_check(check, context, registry)
        if result is None:
            continue
        results.append(result)
        if result.status != STATUS_PASS:
            logger.debug("%s stopped at '%s' with %s", rule.label, check.do, result.status)
            return Outcome(status=result.status, message=result.message, results=tuple(results))

    return Outcome(status=STATUS_PASS, results=tuple(results))


async def _run_check(check: Check, context: EventContext, registry: Registry) -> CheckResult | None:
    """Run one check. Returns None when the validator skips this event."""
    try:
        validator = registry.resolve_validator(check.do)
    except UnknownPluginError as exc:
        logger.warning("%s", exc)
        return CheckResult(validator=check.do, status=STATUS_ERROR, message=str(exc))

    try:
        if not validator.is_event_supported(context.event_selector):
            logger.debug("Validator '%s' does not support %s, skipping", check.do, context.event_selector)
            return None
        outcome = Outcome.from_value(await resolve(validator.process_validate(check.options, context)))
    except Exception as exc:
        logger.warning("%s", ValidatorFault(check.do, exc))
        return CheckResult(validator=check.do, status=STATUS_ERROR, message=str(exc))

    return CheckResult(validator=check.do, status=outcome.status, message=outcome.message)
