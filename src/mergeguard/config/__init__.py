"""Settings loading and validation for Mergeguard.

This package facade re-exports all public names so that callers can use
``from mergeguard.config import ...``.
"""

from __future__ import annotations

from mergeguard.config.loader import load_settings
from mergeguard.config.model import Settings
from mergeguard.config.validator import suggest_key, validate_settings_file

__all__ = [
    "Settings",
    "load_settings",
    "suggest_key",
    "validate_settings_file",
]
