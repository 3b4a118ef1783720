"""Built-in report used when the policy document cannot be loaded."""

from __future__ import annotations

import logging

from mergeguard.config import Settings
from mergeguard.constants.checks import (
    CONCLUSION_CANCELLED,
    INVALID_CONFIG_SUMMARY,
    INVALID_CONFIG_TITLE,
    STATUS_COMPLETED,
)
from mergeguard.model import EventContext
from mergeguard.utils import resolve

logger = logging.getLogger(__name__)


async def report_cancelled(context: EventContext, settings: Settings, error: Exception) -> None:
    """Post a single completed/cancelled check run describing *error*.

    Never raises: a failure to report is logged.
    """
    output = {
        "title": INVALID_CONFIG_TITLE,
        "summary": INVALID_CONFIG_SUMMARY,
        "text": str(error),
    }
    try:
        await resolve(
            context.github.create_check_run(
                context.repository,
                name=settings.check_name,
                head_sha=context.head_sha,
                status=STATUS_COMPLETED,
                conclusion=CONCLUSION_CANCELLED,
                output=output,
            )
        )
    except Exception:
        logger.exception("Failed to report invalid policy for %s", context.repository.full_name)
