"""Small shared helpers."""

from .aio import resolve
from .templates import format_template

__all__ = ["format_template", "resolve"]
