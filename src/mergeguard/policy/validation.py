"""Collect-all validation for policy files.

Returns a list of :class:`ValidationError` instances rather than raising,
so ``mergeguard validate-config`` can report every problem in one pass.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from mergeguard.constants.policy import (
    ALLOWED_RULE_KEYS,
    ALLOWED_TOP_KEYS,
    OUTCOME_LIST_KEYS,
    PLUGIN_NAME_KEY,
    POLICY_VERSION,
    REQUIRED_RULE_KEYS,
    RULES_KEY,
)
from mergeguard.constants.validation import (
    POL001,
    POL002,
    POL003,
    POL004,
    POL005,
    POL006,
    POL007,
    POL008,
    POL009,
    POL010,
)
from mergeguard.exceptions.validation import ValidationError
from mergeguard.plugins.catalog import ACTION_CATALOG, VALIDATOR_CATALOG
from mergeguard.policy.schema import entry_problem, is_valid_version, selector_problem


def validate_policy_file(path: Path, *, check_plugins: bool = True) -> list[ValidationError]:
    """Validate a policy file and return all validation errors.

    With *check_plugins*, ``do`` names missing from the built-in catalog are
    reported as ``POL010``.
    """
    resolved = path.resolve()
    path_str = str(resolved)

    try:
        text = resolved.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        return [ValidationError(code=POL001, path=path_str, field="", message=f"failed to read policy file: {exc}")]

    try:
        raw = yaml.safe_load(text)
    except (yaml.YAMLError, ValueError) as exc:
        return [ValidationError(code=POL002, path=path_str, field="", message=f"invalid YAML: {exc}")]

    return validate_policy_tree(raw, path_str, check_plugins=check_plugins)


def validate_policy_tree(raw: Any, path_str: str, *, check_plugins: bool = True) -> list[ValidationError]:
    """Validate an already parsed policy tree."""
    errors: list[ValidationError] = []

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=POL003,
                path=path_str,
                field="",
                message=f"policy must be a mapping, got {type(raw).__name__}",
            )
        )
        return errors

    for key in sorted(map(str, set(raw.keys()) - ALLOWED_TOP_KEYS)):
        errors.append(ValidationError(code=POL004, path=path_str, field=key, message=f"unknown top-level key `{key}`"))

    if "version" not in raw:
        errors.append(
            ValidationError(
                code=POL005,
                path=path_str,
                field="version",
                message="missing required field `version`",
                hint=f"add `version: {POLICY_VERSION}`",
            )
        )
    elif not is_valid_version(raw["version"]):
        errors.append(
            ValidationError(
                code=POL005,
                path=path_str,
                field="version",
                message=f"unsupported version {raw['version']!r}",
                hint=f"expected {POLICY_VERSION}",
            )
        )

    rules = raw.get(RULES_KEY)
    if not isinstance(rules, list):
        errors.append(
            ValidationError(
                code=POL006,
                path=path_str,
                field=RULES_KEY,
                message=f"`{RULES_KEY}` must be a list of rules",
            )
        )
        return errors

    for index, rule in enumerate(rules):
        _validate_rule(rule, f"{RULES_KEY}[{index}]", path_str, errors, check_plugins)

    return errors


def _validate_rule(
    rule: Any,
    where: str,
    path_str: str,
    errors: list[ValidationError],
    check_plugins: bool,
) -> None:
    if not isinstance(rule, dict):
        errors.append(ValidationError(code=POL007, path=path_str, field=where, message="rule must be a mapping"))
        return

    for key in sorted(map(str, set(rule.keys()) - ALLOWED_RULE_KEYS)):
        errors.append(ValidationError(code=POL007, path=path_str, field=where, message=f"unknown rule key `{key}`"))
    for key in sorted(REQUIRED_RULE_KEYS - set(rule.keys())):
        errors.append(
            ValidationError(code=POL007, path=path_str, field=where, message=f"missing required field `{key}`")
        )

    if "when" in rule:
        problem = selector_problem(rule["when"])
        if problem is not None:
            errors.append(ValidationError(code=POL008, path=path_str, field=f"{where}.when", message=problem))

    if "validate" in rule:
        _validate_entries(rule["validate"], f"{where}.validate", path_str, errors, VALIDATOR_CATALOG, check_plugins)
    for key in OUTCOME_LIST_KEYS:
        if rule.get(key) is not None:
            _validate_entries(rule[key], f"{where}.{key}", path_str, errors, ACTION_CATALOG, check_plugins)


def _validate_entries(
    entries: Any,
    where: str,
    path_str: str,
    errors: list[ValidationError],
    catalog: dict[str, Any],
    check_plugins: bool,
) -> None:
    if not isinstance(entries, list):
        errors.append(ValidationError(code=POL009, path=path_str, field=where, message="must be a list"))
        return

    for index, entry in enumerate(entries):
        field = f"{where}[{index}]"
        problem = entry_problem(entry)
        if problem is not None:
            errors.append(ValidationError(code=POL009, path=path_str, field=field, message=problem))
            continue
        name = entry[PLUGIN_NAME_KEY].strip()
        if check_plugins and name not in catalog:
            errors.append(
                ValidationError(
                    code=POL010,
                    path=path_str,
                    field=field,
                    message=f"unknown plugin `{name}`",
                    hint=f"built-in names: {', '.join(sorted(catalog))}",
                )
            )
