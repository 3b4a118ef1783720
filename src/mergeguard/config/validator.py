"""Settings file validation."""

from __future__ import annotations

import difflib
from pathlib import Path

import yaml

from mergeguard.constants.config import SETTINGS_FILENAME
from mergeguard.constants.validation import (
    ALLOWED_SETTINGS_KEYS,
    BOOL_SETTINGS_KEYS,
    SET001,
    SET002,
    SET003,
    SET004,
    SET005,
    STRING_SETTINGS_KEYS,
)
from mergeguard.exceptions.validation import ValidationError


def validate_settings_file(
    root: Path,
    settings_path: Path | None = None,
    *,
    settings_explicit: bool = False,
) -> list[ValidationError]:
    """Validate a mergeguard.yaml file and return all validation errors.

    Never raises; every problem is returned as a :class:`ValidationError`.
    """
    errors: list[ValidationError] = []
    path = settings_path.resolve() if settings_path else (root.resolve() / SETTINGS_FILENAME)
    path_str = str(path)

    if not path.exists():
        if settings_explicit:
            errors.append(
                ValidationError(code=SET001, path=path_str, field="", message=f"settings file not found: {path}")
            )
        return errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (yaml.YAMLError, ValueError) as exc:
        errors.append(ValidationError(code=SET002, path=path_str, field="", message=f"invalid YAML: {exc}"))
        return errors

    if raw is None:
        return errors

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=SET003,
                path=path_str,
                field="",
                message=f"settings must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    for key in sorted(map(str, raw.keys())):
        if key not in ALLOWED_SETTINGS_KEYS:
            errors.append(
                ValidationError(
                    code=SET004,
                    path=path_str,
                    field=key,
                    message=f"unknown key `{key}`",
                    hint=suggest_key(key, ALLOWED_SETTINGS_KEYS),
                )
            )

    for key in sorted(STRING_SETTINGS_KEYS & set(raw)):
        value = raw[key]
        if not isinstance(value, str) or not value.strip():
            errors.append(
                ValidationError(
                    code=SET005,
                    path=path_str,
                    field=key,
                    message=f"invalid type for `{key}`",
                    hint="expected a non-empty string",
                )
            )

    for key in sorted(BOOL_SETTINGS_KEYS & set(raw)):
        if not isinstance(raw[key], bool):
            errors.append(
                ValidationError(
                    code=SET005,
                    path=path_str,
                    field=key,
                    message=f"invalid type for `{key}`",
                    hint="expected a boolean",
                )
            )

    return errors


def suggest_key(key: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean' hint for a misspelled key, or an empty string."""
    matches = difflib.get_close_matches(key, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
