"""Base class for validators that check values extracted from the event subject."""

from __future__ import annotations

import logging
from abc import abstractmethod
from typing import ClassVar

from mergeguard.exceptions import ConfigError
from mergeguard.model import STATUS_FAIL, STATUS_PASS, EventContext, Outcome
from mergeguard.plugins.base import Validator
from mergeguard.types import JsonObject
from mergeguard.validators.options import OPTION_PROCESSORS

logger = logging.getLogger(__name__)


class SubjectValidator(Validator):
    """Runs option processors against values pulled from the pull request or issue."""

    supported_events: ClassVar[tuple[str, ...]] = ("pull_request.*", "issues.*")
    subject_label: ClassVar[str]

    @abstractmethod
    def extract(self, context: EventContext) -> list[str]:
        """Return the values the options are applied to."""

    async def process_validate(self, options: JsonObject, context: EventContext) -> Outcome:
        values = self.extract(context)
        failures: list[str] = []

        for option, settings in options.items():
            processor = OPTION_PROCESSORS.get(option)
            if processor is None:
                raise ConfigError(
                    f"{self.name}: unknown option '{option}', expected one of {sorted(OPTION_PROCESSORS)}"
                )
            if not isinstance(settings, dict):
                raise ConfigError(f"{self.name}: option '{option}' must be a mapping")
            failure = processor(values, settings, self.subject_label)
            if failure is not None:
                failures.append(failure)

        if failures:
            logger.debug("%s validator failed: %s", self.name, failures)
            return Outcome(status=STATUS_FAIL, message="; ".join(failures))
        return Outcome(status=STATUS_PASS)
