"""Parse policy text into a PolicyDocument."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from mergeguard.constants.policy import OUTCOME_LIST_KEYS, PLUGIN_NAME_KEY, RULES_KEY
from mergeguard.exceptions import ConfigParseError
from mergeguard.model import ActionInvocation, Check, PolicyDocument, RuleBlock
from mergeguard.policy.schema import validate_policy

logger = logging.getLogger(__name__)


def parse_policy(text: str, source: str = "<policy>") -> PolicyDocument:
    """Parse and validate policy YAML. Raises ConfigParseError on any problem."""
    try:
        raw = yaml.safe_load(text)
    except (yaml.YAMLError, ValueError) as exc:
        raise ConfigParseError(f"Invalid YAML in {source}: {exc}") from exc

    validate_policy(raw, source)
    policy = build_policy(raw, source)
    logger.debug("Parsed policy %s with %d rule(s)", source, len(policy.rules))
    return policy


def load_policy_file(path: Path) -> PolicyDocument:
    """Read and parse a policy file from disk."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigParseError(f"Failed to read policy file {path}: {exc}") from exc
    return parse_policy(text, str(path))


def build_policy(raw: dict[str, Any], source: str) -> PolicyDocument:
    """Turn an already validated policy tree into model objects."""
    rules = tuple(_build_rule(index, rule) for index, rule in enumerate(raw[RULES_KEY]))
    return PolicyDocument(version=raw["version"], rules=rules, source=source)


def _build_rule(index: int, rule: dict[str, Any]) -> RuleBlock:
    lists = {key: tuple(_build_action(entry) for entry in rule.get(key) or ()) for key in OUTCOME_LIST_KEYS}
    return RuleBlock(
        index=index,
        when=rule["when"],
        validate=tuple(_build_check(entry) for entry in rule["validate"]),
        pass_actions=lists["pass"],
        fail_actions=lists["fail"],
        error_actions=lists["error"],
        name=rule.get("name"),
    )


def _options(entry: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in entry.items() if key != PLUGIN_NAME_KEY}


def _build_check(entry: dict[str, Any]) -> Check:
    return Check(do=entry[PLUGIN_NAME_KEY].strip(), options=_options(entry))


def _build_action(entry: dict[str, Any]) -> ActionInvocation:
    return ActionInvocation(do=entry[PLUGIN_NAME_KEY].strip(), options=_options(entry))
