"""Preflight validation orchestrator.

Combines settings-file and policy-file validation into a single entry point
used by ``mergeguard validate-config``.
"""

from __future__ import annotations

from pathlib import Path

from mergeguard.config import validate_settings_file
from mergeguard.exceptions.validation import ValidationError, sort_errors
from mergeguard.policy.validation import validate_policy_file


def preflight_validate(
    root: Path,
    settings_path: Path | None = None,
    *,
    policy_path: Path | None = None,
) -> list[ValidationError]:
    """Run all preflight checks and return errors in deterministic order.

    Returns an empty list when everything is valid.
    """
    errors: list[ValidationError] = []
    errors.extend(validate_settings_file(root, settings_path, settings_explicit=settings_path is not None))
    if policy_path is not None:
        errors.extend(validate_policy_file(policy_path))
    return sort_errors(errors)
