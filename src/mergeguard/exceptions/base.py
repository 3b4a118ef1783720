"""Root exception type."""

from __future__ import annotations


class MergeguardError(Exception):
    """Base class for all Mergeguard errors."""
