"""Source-control API boundary."""

from __future__ import annotations

from mergeguard.github.api import GitHubApi
from mergeguard.github.dry_run import DryRunGitHub, RecordedCall

__all__ = ["DryRunGitHub", "GitHubApi", "RecordedCall"]
