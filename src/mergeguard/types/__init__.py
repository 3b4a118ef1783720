"""Shared type aliases for Mergeguard."""

from .common import JsonObject, JsonScalar, JsonValue, OutcomeStatus

__all__ = [
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "OutcomeStatus",
]
