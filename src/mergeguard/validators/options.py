"""Option processors shared by the built-in validators.

Each processor receives the values extracted from the event (a title, the
label names, ...), the option's settings mapping and a human label for the
subject. It returns a failure message, or None when the option is satisfied.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any, TypeAlias

from mergeguard.exceptions import ConfigError

OptionProcessor: TypeAlias = Callable[[list[str], dict[str, Any], str], str | None]


def _compile(settings: dict[str, Any], option: str) -> re.Pattern[str]:
    regex = settings.get("regex")
    if not isinstance(regex, str) or not regex:
        raise ConfigError(f"{option}.regex must be a non-empty string")
    try:
        return re.compile(regex, re.IGNORECASE)
    except re.error as exc:
        raise ConfigError(f"{option}.regex is not a valid regular expression: {exc}") from exc


def _required_text(settings: dict[str, Any], key: str, option: str) -> str:
    value = settings.get(key)
    if not isinstance(value, str) or not value:
        raise ConfigError(f"{option}.{key} must be a non-empty string")
    return value


def _message(settings: dict[str, Any], default: str) -> str:
    message = settings.get("message")
    return message if isinstance(message, str) and message else default


def must_include(values: list[str], settings: dict[str, Any], subject: str) -> str | None:
    pattern = _compile(settings, "must_include")
    if any(pattern.search(value) for value in values):
        return None
    return _message(settings, f"{subject} does not include '{pattern.pattern}'")


def must_exclude(values: list[str], settings: dict[str, Any], subject: str) -> str | None:
    pattern = _compile(settings, "must_exclude")
    if not any(pattern.search(value) for value in values):
        return None
    return _message(settings, f"{subject} must exclude '{pattern.pattern}'")


def no_empty(values: list[str], settings: dict[str, Any], subject: str) -> str | None:
    enabled = settings.get("enabled", True)
    if not isinstance(enabled, bool):
        raise ConfigError("no_empty.enabled must be a boolean")
    if not enabled or any(value.strip() for value in values):
        return None
    return _message(settings, f"{subject} can not be empty")


def begins_with(values: list[str], settings: dict[str, Any], subject: str) -> str | None:
    prefix = _required_text(settings, "match", "begins_with")
    if any(value.startswith(prefix) for value in values):
        return None
    return _message(settings, f"{subject} must begin with '{prefix}'")


def ends_with(values: list[str], settings: dict[str, Any], subject: str) -> str | None:
    suffix = _required_text(settings, "match", "ends_with")
    if any(value.endswith(suffix) for value in values):
        return None
    return _message(settings, f"{subject} must end with '{suffix}'")


OPTION_PROCESSORS: dict[str, OptionProcessor] = {
    "must_include": must_include,
    "must_exclude": must_exclude,
    "no_empty": no_empty,
    "begins_with": begins_with,
    "ends_with": ends_with,
}
