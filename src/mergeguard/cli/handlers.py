"""CLI subcommand handlers."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from mergeguard.config import load_settings
from mergeguard.engine import execute
from mergeguard.exceptions import ConfigError
from mergeguard.exceptions.validation import format_errors
from mergeguard.github import DryRunGitHub
from mergeguard.model import EventContext, ExecutionReport, RepoRef
from mergeguard.plugins.registry import Registry
from mergeguard.validation import preflight_validate


def handle_validate_config(args: argparse.Namespace) -> int:
    """Run settings + policy validation and report results."""
    errors = preflight_validate(root=args.root, settings_path=args.config, policy_path=args.policy)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0


def handle_run(args: argparse.Namespace) -> int:
    """Evaluate a policy offline and print outcomes and the API calls it would make."""
    try:
        settings = load_settings(args.root, args.config)
        payload = _load_payload(args.payload)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    action = args.action or payload.get("action")
    if not isinstance(action, str) or not action:
        print("Configuration error: --action is required when the payload has no 'action'", file=sys.stderr)
        return 2

    policy_file = args.policy if args.policy is not None else args.root / settings.policy_path
    github = DryRunGitHub(files={settings.policy_path: policy_file} if policy_file.is_file() else {})
    context = EventContext(
        event=args.event,
        action=action,
        payload=payload,
        repository=_repository(payload, owner=args.owner, name=args.repo),
        github=github,
    )

    report = asyncio.run(execute(context, Registry(), settings=settings))
    print(render_report(report, github))

    if report.config_error is not None:
        return 2
    return 1 if report.has_failures else 0


def render_report(report: ExecutionReport, github: DryRunGitHub) -> str:
    """Render outcomes and recorded API calls as plain text."""
    lines = [f"Event: {report.event_selector}"]
    if report.config_error is not None:
        lines.append(f"Invalid policy: {report.config_error}")
    elif not report.results:
        lines.append("No rule matched.")
    for result in report.results:
        line = f"  {result.outcome.status.upper():<5} {result.label}"
        if result.outcome.message:
            line = f"{line}: {result.outcome.message}"
        lines.append(line)

    if github.calls:
        lines.append("API calls (not sent):")
        for call in github.calls:
            lines.append(f"  {call.method} {call.repository} {json.dumps(call.params, sort_keys=True, default=str)}")
    return "\n".join(lines)


def _load_payload(path: Path) -> dict[str, Any]:
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to read payload {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON payload in {path}: {exc}") from exc
    if not isinstance(payload, dict):
        raise ConfigError(f"Payload {path} must be a JSON object")
    return payload


def _repository(payload: Mapping[str, Any], *, owner: str | None, name: str | None) -> RepoRef:
    repo = payload.get("repository")
    full_name = repo.get("full_name") if isinstance(repo, Mapping) else None
    default_owner, _, default_name = full_name.partition("/") if isinstance(full_name, str) else ("", "", "")
    return RepoRef(owner=owner or default_owner or "local", name=name or default_name or "repository")
