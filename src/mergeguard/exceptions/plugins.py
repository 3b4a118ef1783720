"""Plugin resolution and invocation exceptions."""

from __future__ import annotations

from mergeguard.exceptions.base import MergeguardError
from mergeguard.exceptions.config import ConfigError


class UnknownPluginError(ConfigError):
    """Raised when a ``do`` name has no registered implementation."""

    def __init__(self, kind: str, name: str) -> None:
        super().__init__(f"Unknown {kind} '{name}'")
        self.kind = kind
        self.name = name


class ValidatorFault(MergeguardError):
    """Raised when a validator call fails with an unexpected exception."""

    def __init__(self, name: str, cause: BaseException) -> None:
        super().__init__(f"Validator '{name}' failed: {cause}")
        self.name = name
        self.cause = cause


class ActionFault(MergeguardError):
    """Raised when an action lifecycle call fails."""

    def __init__(self, name: str, phase: str, cause: BaseException) -> None:
        super().__init__(f"Action '{name}' failed during {phase}: {cause}")
        self.name = name
        self.phase = phase
        self.cause = cause
