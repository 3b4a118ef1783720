"""Plugin interfaces for validators and actions."""

from __future__ import annotations

import inspect
import re
from abc import ABC, abstractmethod
from typing import ClassVar

from mergeguard.model import EventContext, Outcome
from mergeguard.policy.matcher import selector_in
from mergeguard.types import JsonObject

_PLUGIN_NAME_PATTERN: re.Pattern[str] = re.compile(r"^[a-z][a-z0-9_]*$")


class Plugin(ABC):
    """Shared base for anything a policy can reference with ``do``."""

    name: ClassVar[str]
    supported_events: ClassVar[tuple[str, ...]] = ()

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Validate concrete plugins define a lower_snake_case `name`."""
        super().__init_subclass__(**kwargs)
        if inspect.isabstract(cls):
            return

        name = getattr(cls, "name", None)
        if not isinstance(name, str) or not _PLUGIN_NAME_PATTERN.match(name):
            raise TypeError(f"{cls.__name__}.name must be lower_snake_case (got {name!r})")

    def is_event_supported(self, event_selector: str) -> bool:
        """Return True when this plugin acts on ``family.action`` events like *event_selector*."""
        return selector_in(self.supported_events, event_selector)


class Validator(Plugin):
    """A named check run against an event."""

    @abstractmethod
    async def process_validate(self, options: JsonObject, context: EventContext) -> Outcome:
        """Validate the event against the given options."""


class Action(Plugin):
    """A named effect bracketed around validation."""

    @abstractmethod
    async def process_before_validate(self, options: JsonObject, context: EventContext) -> None:
        """Start the action's effect (e.g. open a check run)."""

    @abstractmethod
    async def process_after_validate(self, options: JsonObject, context: EventContext, outcome: Outcome) -> None:
        """Finish the action's effect with the rule outcome."""
