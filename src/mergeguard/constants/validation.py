"""Stable validation error codes and allowed-key sets for settings and policy validation."""

from __future__ import annotations

SET001: str = "SET001"  # settings file not found (explicit --config)
SET002: str = "SET002"  # invalid YAML parse
SET003: str = "SET003"  # top-level value is not a mapping
SET004: str = "SET004"  # unknown key
SET005: str = "SET005"  # invalid value type

POL001: str = "POL001"  # policy file not found / unreadable
POL002: str = "POL002"  # invalid YAML parse
POL003: str = "POL003"  # top-level value is not a mapping
POL004: str = "POL004"  # unknown top-level key
POL005: str = "POL005"  # missing or unsupported version
POL006: str = "POL006"  # rule list missing or not a list
POL007: str = "POL007"  # rule not a mapping / unknown rule key
POL008: str = "POL008"  # invalid `when` selector list
POL009: str = "POL009"  # invalid validate / action list entry
POL010: str = "POL010"  # plugin name not in the built-in catalog

ALLOWED_SETTINGS_KEYS: frozenset[str] = frozenset({"policy_path", "check_name", "use_default_policy"})
STRING_SETTINGS_KEYS: frozenset[str] = frozenset({"policy_path", "check_name"})
BOOL_SETTINGS_KEYS: frozenset[str] = frozenset({"use_default_policy"})
