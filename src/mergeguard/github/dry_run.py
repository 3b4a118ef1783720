"""Offline API client that records write calls instead of sending them."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from mergeguard.model import RepoRef

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecordedCall:
    """One write call captured by :class:`DryRunGitHub`."""

    method: str
    repository: str
    params: dict[str, Any]


@dataclass
class DryRunGitHub:
    """Serves files from a local mapping and records every write."""

    files: dict[str, Path] = field(default_factory=dict)
    calls: list[RecordedCall] = field(default_factory=list)
    _next_id: int = 1

    async def get_file_content(self, repository: RepoRef, path: str) -> str | None:
        local = self.files.get(path)
        if local is None:
            return None
        return local.read_text(encoding="utf-8")

    async def create_check_run(self, repository: RepoRef, **params: Any) -> int:
        run_id = self._next_id
        self._next_id += 1
        self._record("create_check_run", repository, {"id": run_id, **params})
        return run_id

    async def update_check_run(self, repository: RepoRef, check_run_id: Any, **params: Any) -> None:
        self._record("update_check_run", repository, {"id": check_run_id, **params})

    async def create_comment(self, repository: RepoRef, number: int, body: str) -> None:
        self._record("create_comment", repository, {"number": number, "body": body})

    def _record(self, method: str, repository: RepoRef, params: dict[str, Any]) -> None:
        call = RecordedCall(method=method, repository=repository.full_name, params=params)
        self.calls.append(call)
        logger.debug("dry-run %s %s %s", method, call.repository, params)
