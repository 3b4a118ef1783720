"""CLI entrypoint for Mergeguard."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from mergeguard import __version__
from mergeguard.cli.handlers import handle_run, handle_validate_config
from mergeguard.constants.branding import CLI_DESCRIPTION


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="mergeguard",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate = subparsers.add_parser("validate-config", help="Validate settings and a policy file")
    validate.add_argument("-r", "--root", type=Path, default=Path("."), help="Working root (default: .)")
    validate.add_argument("-c", "--config", type=Path, help="Explicit settings file")
    validate.add_argument("-p", "--policy", type=Path, required=True, help="Policy file to validate")

    run = subparsers.add_parser("run", help="Evaluate a policy against a saved webhook payload (no API writes)")
    run.add_argument("-r", "--root", type=Path, default=Path("."), help="Working root (default: .)")
    run.add_argument("-c", "--config", type=Path, help="Explicit settings file")
    run.add_argument(
        "-p",
        "--policy",
        type=Path,
        default=None,
        help="Policy file (default: <root>/<policy_path from settings>)",
    )
    run.add_argument("-e", "--event", required=True, help="Event family, e.g. pull_request")
    run.add_argument("-a", "--action", default=None, help="Event action (default: payload 'action')")
    run.add_argument("-P", "--payload", type=Path, required=True, help="Webhook payload JSON file")
    run.add_argument("--owner", default=None, help="Repository owner (default: from payload)")
    run.add_argument("--repo", default=None, help="Repository name (default: from payload)")
    run.add_argument("-v", "--verbose", action="store_true", help="Show debug diagnostics")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    verbose = getattr(args, "verbose", False)
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format="%(levelname)s %(message)s")

    if args.command == "validate-config":
        return handle_validate_config(args)
    if args.command == "run":
        return handle_run(args)

    parser.error(f"Unsupported command: {args.command}")
    return 2
