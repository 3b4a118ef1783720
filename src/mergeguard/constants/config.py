"""Settings defaults and filenames."""

from __future__ import annotations

SETTINGS_FILENAME: str = "mergeguard.yaml"
DEFAULT_POLICY_PATH: str = ".github/mergeguard.yml"
DEFAULT_CHECK_NAME: str = "Mergeguard"
