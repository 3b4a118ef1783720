"""Validator/action contracts and the name-keyed plugin registry."""

from __future__ import annotations

from typing import Any

from mergeguard.plugins.base import Action, Plugin, Validator

__all__ = ["Action", "Plugin", "Registry", "Validator"]


def __getattr__(name: str) -> Any:
    """Lazily expose the registry; the catalog imports plugins that import this package."""
    if name == "Registry":
        from .registry import Registry

        return Registry
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
