"""Placeholder filling for user-authored check and comment text."""

from __future__ import annotations


def format_template(template: str, **values: str) -> str:
    """Replace ``{name}`` placeholders with *values*; unknown placeholders stay as written.

    Unlike ``str.format`` this never raises on stray braces in policy text.
    """
    rendered = template
    for name, value in values.items():
        rendered = rendered.replace("{" + name + "}", value)
    return rendered
