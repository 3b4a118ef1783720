"""Tests for the top-level executor."""

from __future__ import annotations

import dataclasses
import textwrap
from unittest.mock import MagicMock

import pytest

from mergeguard.config import Settings
from mergeguard.engine import execute
from mergeguard.plugins.registry import Registry
from mergeguard.validators import LabelValidator, TitleValidator

from ..conftest import _action, _context, _github, _validator

PR_RULE = """\
  - when: pull_request.*
    validate:
      - do: title
        must_exclude:
          regex: wip|work in progress|do not merge
          message: 'a custom message'
      - do: label
        must_exclude:
          regex: wip|work in progress
    pass:
      - do: checks
    fail:
      - do: checks
"""

REVIEW_RULE = """\
  - when: pull_request_review.submitted
    validate:
      - do: milestone
        no_empty:
          enabled: true
    pass:
      - do: checks
    fail:
      - do: checks
"""

PR_ONLY = "version: 2\nmergeable:\n" + PR_RULE
WITH_REVIEW_RULE = PR_ONLY + REVIEW_RULE

TWO_RULES = textwrap.dedent(
    """
    version: 2
    mergeable:
      - when: pull_request.opened
        validate:
          - do: title
            must_exclude:
              regex: 'wip'
        pass:
          - do: checks
            status: success
        fail:
          - do: checks
            status: failure
      - when: issues.opened
        validate:
          - do: label
            must_exclude:
              regex: 'wip'
          - do: title
        pass:
          - do: checks
            status: success
        fail:
          - do: checks
            status: failure
    """
)


def _lifecycle_registry() -> tuple[Registry, MagicMock]:
    """Registry whose 'checks' action only supports a few events."""
    checks = _action(
        supported=lambda selector: selector
        in {"pull_request.opened", "pull_request.edited", "pull_request_review.submitted"}
    )
    registry = Registry(actions={"checks": checks})
    return registry, checks


@pytest.mark.asyncio
async def test_hooks_fire_when_event_is_in_configuration() -> None:
    registry, checks = _lifecycle_registry()
    registry.validators.update(title=_validator(), label=_validator())
    context = _context(PR_ONLY, event="pull_request", action="opened")

    await execute(context, registry)

    assert checks.process_before_validate.await_count == 1
    assert checks.process_after_validate.await_count == 1


@pytest.mark.asyncio
async def test_hooks_do_not_fire_when_event_is_not_in_configuration() -> None:
    registry, checks = _lifecycle_registry()
    context = _context(PR_ONLY, event="pull_request_review", action="submitted")

    report = await execute(context, registry)

    assert report.results == []
    assert checks.process_before_validate.await_count == 0
    assert checks.process_after_validate.await_count == 0


@pytest.mark.asyncio
async def test_second_rule_matches_event_missing_from_first() -> None:
    registry, checks = _lifecycle_registry()
    registry.validators.update(milestone=_validator())
    context = _context(WITH_REVIEW_RULE, event="pull_request_review", action="submitted")

    report = await execute(context, registry)

    assert [result.index for result in report.results] == [1]
    assert checks.process_before_validate.await_count == 1
    assert checks.process_after_validate.await_count == 1


@pytest.mark.asyncio
async def test_no_rule_matches_other_action_of_same_family() -> None:
    registry, checks = _lifecycle_registry()
    milestone = _validator()
    registry.validators.update(milestone=milestone)
    context = _context(WITH_REVIEW_RULE, event="pull_request_review", action="commented")

    await execute(context, registry)

    milestone.process_validate.assert_not_awaited()
    assert checks.process_before_validate.await_count == 0
    assert checks.process_after_validate.await_count == 0


@pytest.mark.asyncio
async def test_malformed_policy_reports_cancelled_once_and_runs_nothing() -> None:
    bad_yaml = "\n      version: 2\n      mergeable:\n    when: pull_request.*\n"
    github = _github(bad_yaml)
    title = _validator()
    registry = Registry(validators={"title": title})
    context = _context(github=github)

    report = await execute(context, registry)

    assert report.config_error is not None
    assert report.results == []
    title.process_validate.assert_not_awaited()
    github.update_check_run.assert_not_awaited()
    assert github.create_check_run.await_count == 1
    params = github.create_check_run.await_args.kwargs
    assert params["status"] == "completed"
    assert params["conclusion"] == "cancelled"


@pytest.mark.parametrize(
    "policy",
    [
        "mergeable:\n  - when: pull_request.*\n    validate: []\n",
        "version: 1\nmergeable:\n  - when: pull_request.*\n    validate: []\n",
        "version: '2'\nmergeable: []\n",
        "version: 2\nmergeable:\n  - when: pull_request\n    validate: []\n",
    ],
    ids=["missing-version", "old-version", "string-version", "bad-selector"],
)
@pytest.mark.asyncio
async def test_invalid_policy_takes_fallback_path(policy: str) -> None:
    github = _github(policy)

    report = await execute(_context(github=github), Registry())

    assert report.config_error is not None
    assert github.create_check_run.await_count == 1
    assert github.create_check_run.await_args.kwargs["conclusion"] == "cancelled"


@pytest.mark.asyncio
async def test_registry_populates_defaults_then_reuses_doubles() -> None:
    policy = textwrap.dedent(
        """
        version: 2
        mergeable:
          - when: pull_request.*
            validate:
              - do: title
                must_exclude:
                  regex: wip|work in progress|do not merge
                  message: 'a custom message'
              - do: label
                must_exclude:
                  regex: wip|work in progress
            pass:
              - do: checks
                status: success
                payload:
                  title: Success!!
                  summary: You are ready to merge
            fail:
              - do: checks
                status: success
                payload:
                  title: Success!!
                  summary: You are ready to merge
        """
    )
    registry = Registry()
    context = _context(policy)

    await execute(context, registry)

    assert isinstance(registry.validators["title"], TitleValidator)
    assert isinstance(registry.validators["label"], LabelValidator)

    title = _validator()
    label = _validator()
    checks = _action(supported=False)
    registry.validators.update(title=title, label=label)
    registry.actions["checks"] = checks

    await execute(context, registry)

    assert title.process_validate.await_count == 1
    assert label.process_validate.await_count == 1
    assert checks.process_before_validate.await_count == 0
    assert checks.process_after_validate.await_count == 0


@pytest.mark.asyncio
async def test_comma_separated_selectors() -> None:
    policy = textwrap.dedent(
        """
        version: 2
        mergeable:
          - when: pull_request.opened, issues.opened
            validate:
              - do: title
                must_include:
                  regex: wip|work in progress|do not merge
              - do: issue_only
            pass:
              - do: checks
                status: success
            fail:
              - do: checks
                status: failure
        """
    )
    title = _validator()
    issue_only = _validator(supported=lambda selector: selector == "issues.opened")
    checks = _action(supported=lambda selector: selector == "pull_request.opened")
    registry = Registry(validators={"title": title, "issue_only": issue_only}, actions={"checks": checks})
    context = _context(policy, event="pull_request", action="opened")

    await execute(context, registry)

    assert title.process_validate.await_count == 1
    assert title.is_event_supported.call_count == 1
    assert issue_only.process_validate.await_count == 0
    assert issue_only.is_event_supported.call_count == 1
    assert checks.process_before_validate.await_count == 1
    assert checks.process_after_validate.await_count == 1

    await execute(dataclasses.replace(context, event="issues"), registry)

    assert title.process_validate.await_count == 2
    assert title.is_event_supported.call_count == 2
    assert issue_only.process_validate.await_count == 1
    assert issue_only.is_event_supported.call_count == 2
    assert checks.process_before_validate.await_count == 1
    assert checks.process_after_validate.await_count == 1


@pytest.mark.asyncio
async def test_independent_rules_accumulate_across_invocations() -> None:
    title = _validator()
    label = _validator()
    checks = _action()
    registry = Registry(validators={"title": title, "label": label}, actions={"checks": checks})
    context = _context(TWO_RULES, event="pull_request", action="opened")

    await execute(context, registry)

    assert title.process_validate.await_count == 1
    assert label.process_validate.await_count == 0
    assert checks.process_before_validate.await_count == 1
    assert checks.process_after_validate.await_count == 1

    await execute(dataclasses.replace(context, event="issues"), registry)

    assert title.process_validate.await_count == 2
    assert label.process_validate.await_count == 1
    assert checks.process_before_validate.await_count == 2
    assert checks.process_after_validate.await_count == 2


@pytest.mark.asyncio
async def test_unmatched_event_then_matching_event() -> None:
    title = _validator()
    label = _validator()
    checks = _action()
    registry = Registry(validators={"title": title, "label": label}, actions={"checks": checks})
    context = _context(TWO_RULES, event="pull_request_review", action="opened")

    await execute(context, registry)

    title.process_validate.assert_not_awaited()
    label.process_validate.assert_not_awaited()
    checks.process_before_validate.assert_not_awaited()
    checks.process_after_validate.assert_not_awaited()

    await execute(dataclasses.replace(context, event="pull_request"), registry)

    assert title.process_validate.await_count == 1
    assert label.process_validate.await_count == 0
    assert checks.process_before_validate.await_count == 1
    assert checks.process_after_validate.await_count == 1


@pytest.mark.asyncio
async def test_rejecting_validator_runs_only_error_list() -> None:
    policy = textwrap.dedent(
        """
        version: 2
        mergeable:
          - when: pull_request.opened
            validate:
              - do: error
            pass:
              - do: pass_action
            fail:
              - do: fail_action
            error:
              - do: error_action
        """
    )
    error_validator = _validator()
    error_validator.process_validate.side_effect = RuntimeError("Uncaught error")
    pass_action, fail_action, error_action = _action(), _action(), _action()
    registry = Registry(
        validators={"error": error_validator},
        actions={"pass_action": pass_action, "fail_action": fail_action, "error_action": error_action},
    )

    report = await execute(_context(policy), registry)

    assert report.results[0].outcome.status == "error"
    assert report.results[0].outcome.message == "Uncaught error"
    assert error_action.process_before_validate.await_count == 1
    assert error_action.process_after_validate.await_count == 1
    for action in (pass_action, fail_action):
        action.process_before_validate.assert_not_awaited()
        action.process_after_validate.assert_not_awaited()


@pytest.mark.asyncio
async def test_all_pass_runs_only_pass_list() -> None:
    policy = textwrap.dedent(
        """
        version: 2
        mergeable:
          - when: pull_request.*
            validate:
              - do: first
              - do: second
            pass:
              - do: on_pass
            fail:
              - do: on_fail
            error:
              - do: on_error
        """
    )
    on_pass, on_fail, on_error = _action(), _action(), _action()
    registry = Registry(
        validators={"first": _validator(), "second": _validator()},
        actions={"on_pass": on_pass, "on_fail": on_fail, "on_error": on_error},
    )

    report = await execute(_context(policy), registry)

    assert report.results[0].outcome.status == "pass"
    on_pass.process_after_validate.assert_awaited_once()
    on_fail.process_before_validate.assert_not_awaited()
    on_error.process_before_validate.assert_not_awaited()


@pytest.mark.asyncio
async def test_unknown_validator_errors_only_its_rule() -> None:
    policy = textwrap.dedent(
        """
        version: 2
        mergeable:
          - when: pull_request.opened
            validate:
              - do: does_not_exist
            error:
              - do: on_error
          - when: pull_request.opened
            validate:
              - do: ok
            pass:
              - do: on_pass
        """
    )
    on_error, on_pass = _action(), _action()
    registry = Registry(validators={"ok": _validator()}, actions={"on_error": on_error, "on_pass": on_pass})

    report = await execute(_context(policy), registry)

    assert [result.outcome.status for result in report.results] == ["error", "pass"]
    assert "does_not_exist" in (report.results[0].outcome.message or "")
    on_error.process_after_validate.assert_awaited_once()
    on_pass.process_after_validate.assert_awaited_once()


@pytest.mark.asyncio
async def test_rules_run_in_document_order() -> None:
    policy = textwrap.dedent(
        """
        version: 2
        mergeable:
          - when: pull_request.*
            name: first
            validate:
              - do: v
            pass:
              - do: a
                marker: 1
          - when: pull_request.opened
            name: second
            validate:
              - do: v
            pass:
              - do: a
                marker: 2
        """
    )
    seen: list[int] = []
    action = _action()
    action.process_after_validate.side_effect = lambda options, context, outcome: seen.append(options["marker"])
    registry = Registry(validators={"v": _validator()}, actions={"a": action})

    report = await execute(_context(policy), registry)

    assert [result.label for result in report.results] == ["first", "second"]
    assert seen == [1, 2]


@pytest.mark.asyncio
async def test_missing_policy_uses_default_policy() -> None:
    context = _context(None)
    registry = Registry()

    report = await execute(context, registry)

    assert len(report.results) == 1
    assert report.results[0].outcome.status == "pass"
    github = context.github
    github.create_check_run.assert_awaited_once()
    github.update_check_run.assert_awaited_once()
    assert github.update_check_run.await_args.kwargs["conclusion"] == "success"


@pytest.mark.asyncio
async def test_missing_policy_without_defaults_reports_cancelled() -> None:
    context = _context(None)

    report = await execute(context, Registry(), settings=Settings(use_default_policy=False))

    assert report.config_error is not None
    assert context.github.create_check_run.await_args.kwargs["conclusion"] == "cancelled"


@pytest.mark.parametrize(
    "content",
    [
        b"version: 2\nmergeable: []\n# \xff\xfe",
        "version: 2\nmergeable:\n  - when: pull_request.*\n    name: 2001-13-01\n    validate: []\n",
    ],
    ids=["undecodable-bytes", "out-of-range-date"],
)
@pytest.mark.asyncio
async def test_unreadable_policy_content_takes_fallback_path(content: str | bytes) -> None:
    github = _github(content)

    report = await execute(_context(github=github), Registry())

    assert report.config_error is not None
    assert report.results == []
    assert github.create_check_run.await_count == 1
    assert github.create_check_run.await_args.kwargs["conclusion"] == "cancelled"


@pytest.mark.asyncio
async def test_unknown_action_errors_its_rule_before_validation() -> None:
    policy = textwrap.dedent(
        """
        version: 2
        mergeable:
          - when: pull_request.opened
            validate:
              - do: v
            pass:
              - do: teleport
            error:
              - do: on_error
          - when: pull_request.opened
            validate:
              - do: v
            pass:
              - do: on_pass
        """
    )
    validator = _validator()
    on_error, on_pass = _action(), _action()
    registry = Registry(validators={"v": validator}, actions={"on_error": on_error, "on_pass": on_pass})

    report = await execute(_context(policy), registry)

    assert [result.outcome.status for result in report.results] == ["error", "pass"]
    assert report.results[0].outcome.message == "Unknown action 'teleport'"
    assert validator.process_validate.await_count == 1
    on_error.process_before_validate.assert_awaited_once()
    on_error.process_after_validate.assert_awaited_once()
    on_pass.process_after_validate.assert_awaited_once()
    assert "teleport" not in registry.actions
