"""Tests for the invalid-policy fallback report."""

from __future__ import annotations

import pytest

from mergeguard.config import Settings
from mergeguard.engine import report_cancelled
from mergeguard.exceptions import ConfigParseError

from ..conftest import _context, _github


@pytest.mark.asyncio
async def test_reports_completed_cancelled_check_run() -> None:
    github = _github()
    context = _context(github=github)

    await report_cancelled(context, Settings(check_name="Policy"), ConfigParseError("version must be 2"))

    github.create_check_run.assert_awaited_once()
    args, kwargs = github.create_check_run.await_args
    assert args == (context.repository,)
    assert kwargs["name"] == "Policy"
    assert kwargs["head_sha"] == "abc123"
    assert kwargs["status"] == "completed"
    assert kwargs["conclusion"] == "cancelled"
    assert kwargs["output"]["text"] == "version must be 2"


@pytest.mark.asyncio
async def test_api_failure_is_logged_not_raised(caplog: pytest.LogCaptureFixture) -> None:
    github = _github()
    github.create_check_run.side_effect = ConnectionError("offline")

    await report_cancelled(_context(github=github), Settings(), ConfigParseError("bad"))

    assert "Failed to report invalid policy" in caplog.text
