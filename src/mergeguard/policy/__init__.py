"""Policy documents: parsing, structural checks, retrieval and event matching."""

from __future__ import annotations

from mergeguard.policy.loader import load_policy_file, parse_policy
from mergeguard.policy.matcher import matches, matches_selector, selector_in, split_selectors
from mergeguard.policy.source import fetch_policy

__all__ = [
    "fetch_policy",
    "load_policy_file",
    "matches",
    "matches_selector",
    "parse_policy",
    "selector_in",
    "split_selectors",
]
