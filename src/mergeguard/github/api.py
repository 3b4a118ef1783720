"""The API surface the policy source, validators and actions rely on.

Any object providing these methods can be used as ``EventContext.github``.
Methods may be coroutines or plain functions.
"""

from __future__ import annotations

from typing import Any, Protocol

from mergeguard.model import RepoRef


class GitHubApi(Protocol):
    def get_file_content(self, repository: RepoRef, path: str) -> Any:
        """Return the file's text, or None when it does not exist."""

    def create_check_run(self, repository: RepoRef, **params: Any) -> Any:
        """Create a check run; return its id (or a mapping carrying ``id``)."""

    def update_check_run(self, repository: RepoRef, check_run_id: Any, **params: Any) -> Any:
        """Update an existing check run."""

    def create_comment(self, repository: RepoRef, number: int, body: str) -> Any:
        """Comment on a pull request or issue."""
