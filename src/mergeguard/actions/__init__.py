"""Built-in actions."""

from __future__ import annotations

from mergeguard.actions.checks import ChecksAction
from mergeguard.actions.comment import CommentAction

__all__ = ["ChecksAction", "CommentAction"]
