"""Shared exception hierarchy for Mergeguard."""

from __future__ import annotations

from .base import MergeguardError
from .config import ConfigError, ConfigParseError
from .plugins import ActionFault, UnknownPluginError, ValidatorFault

__all__ = [
    "ActionFault",
    "ConfigError",
    "ConfigParseError",
    "MergeguardError",
    "UnknownPluginError",
    "ValidatorFault",
]
