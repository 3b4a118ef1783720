"""Event selector matching for ``when`` clauses and plugin event support."""

from __future__ import annotations

from collections.abc import Iterable

from mergeguard.constants.policy import SELECTOR_SEPARATOR, WILDCARD_ACTION


def split_selectors(selector_list: str) -> list[str]:
    """Split a comma-separated selector list, dropping blank fragments."""
    return [part.strip() for part in selector_list.split(SELECTOR_SEPARATOR) if part.strip()]


def matches_selector(selector: str, family: str, action: str) -> bool:
    """Return True when a single ``family.action`` selector matches the event.

    The family must match exactly; the action half may be ``*``.
    """
    selector_family, separator, selector_action = selector.partition(".")
    if not separator:
        return False
    if selector_family != family:
        return False
    return selector_action == WILDCARD_ACTION or selector_action == action


def matches(selector_list: str, family: str, action: str) -> bool:
    """Return True when any selector in a ``when`` clause matches the event."""
    return any(matches_selector(selector, family, action) for selector in split_selectors(selector_list))


def selector_in(supported: Iterable[str], event_selector: str) -> bool:
    """Return True when *event_selector* is covered by any of the *supported* selectors."""
    family, _, action = event_selector.partition(".")
    return any(matches_selector(selector, family, action) for selector in supported)
