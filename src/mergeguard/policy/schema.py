"""Strict structural validation for version 2 policy documents.

Validates the parsed YAML tree before it is turned into model objects.
Raises ConfigParseError on the first violation.
"""

from __future__ import annotations

from typing import Any

from mergeguard.constants.policy import (
    ALLOWED_RULE_KEYS,
    ALLOWED_TOP_KEYS,
    OUTCOME_LIST_KEYS,
    PLUGIN_NAME_KEY,
    POLICY_VERSION,
    REQUIRED_RULE_KEYS,
    REQUIRED_TOP_KEYS,
    RULES_KEY,
)
from mergeguard.exceptions import ConfigParseError
from mergeguard.policy.matcher import split_selectors


def is_valid_version(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value == POLICY_VERSION


def selector_problem(when: Any) -> str | None:
    """Return a description of what is wrong with a ``when`` value, or None."""
    if not isinstance(when, str) or not when.strip():
        return "'when' must be a non-empty string"
    for selector in split_selectors(when):
        family, separator, action = selector.partition(".")
        if not separator or not family or not action:
            return f"selector {selector!r} must have the form family.action or family.*"
    return None


def validate_policy(data: Any, source: str) -> None:
    """Validate a parsed policy tree. Raises ConfigParseError on any violation."""
    if not isinstance(data, dict):
        raise ConfigParseError(f"{source}: policy must be a mapping, got {type(data).__name__}")

    unknown_top = set(data.keys()) - ALLOWED_TOP_KEYS
    if unknown_top:
        raise ConfigParseError(f"{source}: unknown top-level keys: {sorted(map(str, unknown_top))}")

    for key in sorted(REQUIRED_TOP_KEYS):
        if key not in data:
            raise ConfigParseError(f"{source}: missing required key '{key}'")

    if not is_valid_version(data["version"]):
        raise ConfigParseError(f"{source}: 'version' must be {POLICY_VERSION}, got {data['version']!r}")

    rules = data[RULES_KEY]
    if not isinstance(rules, list):
        raise ConfigParseError(f"{source}: '{RULES_KEY}' must be a list of rules")

    for index, rule in enumerate(rules):
        _validate_rule(rule, f"{source}: {RULES_KEY}[{index}]")


def _validate_rule(rule: Any, where: str) -> None:
    if not isinstance(rule, dict):
        raise ConfigParseError(f"{where} must be a mapping")

    unknown = set(rule.keys()) - ALLOWED_RULE_KEYS
    if unknown:
        raise ConfigParseError(f"{where}: unknown keys: {sorted(map(str, unknown))}")

    for key in sorted(REQUIRED_RULE_KEYS):
        if key not in rule:
            raise ConfigParseError(f"{where}: missing required key '{key}'")

    problem = selector_problem(rule["when"])
    if problem is not None:
        raise ConfigParseError(f"{where}: {problem}")

    if "name" in rule and not isinstance(rule["name"], str):
        raise ConfigParseError(f"{where}: 'name' must be a string")

    _validate_entries(rule["validate"], f"{where}.validate", allow_none=False)
    for key in OUTCOME_LIST_KEYS:
        if key in rule:
            _validate_entries(rule[key], f"{where}.{key}", allow_none=True)


def _validate_entries(entries: Any, where: str, *, allow_none: bool) -> None:
    if entries is None and allow_none:
        return
    if not isinstance(entries, list):
        raise ConfigParseError(f"{where} must be a list")
    for index, entry in enumerate(entries):
        problem = entry_problem(entry)
        if problem is not None:
            raise ConfigParseError(f"{where}[{index}]: {problem}")


def entry_problem(entry: Any) -> str | None:
    """Return a description of what is wrong with a validate/action entry, or None."""
    if not isinstance(entry, dict):
        return "entry must be a mapping"
    name = entry.get(PLUGIN_NAME_KEY)
    if not isinstance(name, str) or not name.strip():
        return f"'{PLUGIN_NAME_KEY}' must be a non-empty string"
    return None
