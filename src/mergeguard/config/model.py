"""Settings data model."""

from __future__ import annotations

from dataclasses import dataclass

from mergeguard.constants.config import DEFAULT_CHECK_NAME, DEFAULT_POLICY_PATH


@dataclass(frozen=True)
class Settings:
    """Resolved engine settings."""

    policy_path: str = DEFAULT_POLICY_PATH
    check_name: str = DEFAULT_CHECK_NAME
    use_default_policy: bool = True
