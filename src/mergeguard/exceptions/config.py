"""Configuration-related exceptions."""

from __future__ import annotations

from mergeguard.exceptions.base import MergeguardError


class ConfigError(MergeguardError, ValueError):
    """Raised when settings or a policy document are invalid."""


class ConfigParseError(ConfigError):
    """Raised when a policy document is malformed, unversioned or structurally invalid."""
