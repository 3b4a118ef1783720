"""Name-keyed registry of validator and action instances.

The registry is owned by the caller and may outlive many executor
invocations. Entries are created on first reference and never removed, so
pre-registered instances (test doubles, stateful plugins) always win over
the catalog.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, MutableMapping
from typing import Any

from mergeguard.exceptions import UnknownPluginError
from mergeguard.plugins.catalog import ACTION_CATALOG, VALIDATOR_CATALOG

logger = logging.getLogger(__name__)


class Registry:
    """Two independent name -> instance mappings, populated lazily."""

    def __init__(
        self,
        validators: MutableMapping[str, Any] | None = None,
        actions: MutableMapping[str, Any] | None = None,
        *,
        validator_catalog: Mapping[str, Callable[[], Any]] | None = None,
        action_catalog: Mapping[str, Callable[[], Any]] | None = None,
    ) -> None:
        self.validators: MutableMapping[str, Any] = validators if validators is not None else {}
        self.actions: MutableMapping[str, Any] = actions if actions is not None else {}
        self._validator_catalog = VALIDATOR_CATALOG if validator_catalog is None else validator_catalog
        self._action_catalog = ACTION_CATALOG if action_catalog is None else action_catalog

    def resolve_validator(self, name: str) -> Any:
        """Return the validator registered under *name*, constructing it on first use."""
        return self._resolve(self.validators, self._validator_catalog, "validator", name)

    def resolve_action(self, name: str) -> Any:
        """Return the action registered under *name*, constructing it on first use."""
        return self._resolve(self.actions, self._action_catalog, "action", name)

    @staticmethod
    def _resolve(
        entries: MutableMapping[str, Any],
        catalog: Mapping[str, Callable[[], Any]],
        kind: str,
        name: str,
    ) -> Any:
        if name in entries:
            return entries[name]

        factory = catalog.get(name)
        if factory is None:
            raise UnknownPluginError(kind, name)

        instance = factory()
        entries[name] = instance
        logger.debug("Registered %s '%s' (%s)", kind, name, type(instance).__name__)
        return instance
