"""Settings loading and normalization."""

from __future__ import annotations

from pathlib import Path

import yaml

from mergeguard.config.model import Settings
from mergeguard.constants.config import DEFAULT_CHECK_NAME, DEFAULT_POLICY_PATH, SETTINGS_FILENAME
from mergeguard.constants.validation import ALLOWED_SETTINGS_KEYS
from mergeguard.exceptions import ConfigError


def load_settings(root: Path, settings_path: Path | None = None) -> Settings:
    """Load settings from ``mergeguard.yaml`` or an explicit path."""
    root = root.resolve()
    path = settings_path.resolve() if settings_path else (root / SETTINGS_FILENAME)
    if not path.exists():
        if settings_path is not None:
            raise ConfigError(f"Settings file not found: {path}")
        return Settings()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (yaml.YAMLError, ValueError) as exc:
        raise ConfigError(f"Invalid YAML settings file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Settings file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in set(raw) - ALLOWED_SETTINGS_KEYS)
    if unknown:
        raise ConfigError(f"Unknown settings keys: {', '.join(unknown)}")

    policy_path = _ensure_string(raw.get("policy_path", DEFAULT_POLICY_PATH), "policy_path")
    check_name = _ensure_string(raw.get("check_name", DEFAULT_CHECK_NAME), "check_name")

    use_default_policy = raw.get("use_default_policy", True)
    if not isinstance(use_default_policy, bool):
        raise ConfigError("use_default_policy must be a boolean")

    return Settings(
        policy_path=policy_path,
        check_name=check_name,
        use_default_policy=use_default_policy,
    )


def _ensure_string(value: object, key_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{key_name} must be a non-empty string")
    return value.strip()
