"""Schema constants for version 2 policy documents."""

from __future__ import annotations

POLICY_VERSION: int = 2
RULES_KEY: str = "mergeable"

REQUIRED_TOP_KEYS: frozenset[str] = frozenset({"version", RULES_KEY})
ALLOWED_TOP_KEYS: frozenset[str] = REQUIRED_TOP_KEYS

REQUIRED_RULE_KEYS: frozenset[str] = frozenset({"when", "validate"})
OUTCOME_LIST_KEYS: tuple[str, ...] = ("pass", "fail", "error")
ALLOWED_RULE_KEYS: frozenset[str] = REQUIRED_RULE_KEYS | {"name", *OUTCOME_LIST_KEYS}

PLUGIN_NAME_KEY: str = "do"
SELECTOR_SEPARATOR: str = ","
WILDCARD_ACTION: str = "*"

# Used when the repository has no policy file and the defaults are enabled.
DEFAULT_POLICY_YAML: str = """\
version: 2
mergeable:
  - when: pull_request.*
    name: Work in progress
    validate:
      - do: title
        must_exclude:
          regex: ^wip\\b|work in progress|do not merge
          message: Title indicates work in progress
      - do: label
        must_exclude:
          regex: wip|work in progress|do not merge
    pass:
      - do: checks
        status: success
        payload:
          title: Ready to merge
          summary: All policy checks passed.
    fail:
      - do: checks
        status: failure
        payload:
          title: Not ready to merge
          summary: "{message}"
    error:
      - do: checks
        status: action_required
        payload:
          title: Policy evaluation error
          summary: "{message}"
"""
