"""CLI entrypoint for issuewarden."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Mapping
from pathlib import Path

from issuewarden import __version__
from issuewarden.config import load_config, validate_config_file
from issuewarden.constants.branding import CLI_DESCRIPTION
from issuewarden.constants.config import (
    ENV_GITHUB_API_URL,
    ENV_GITHUB_EVENT_NAME,
    ENV_GITHUB_EVENT_PATH,
    ENV_GITHUB_REPOSITORY,
    ENV_GITHUB_TOKEN,
    ENV_GITHUB_WORKSPACE,
)
from issuewarden.constants.github import DEFAULT_API_URL
from issuewarden.exceptions import ConfigError, EventParseError, IssueWardenError
from issuewarden.exceptions.validation import format_errors
from issuewarden.gateway.dry_run import DryRunTracker, DryRunWebClient
from issuewarden.gateway.tracker import GitHubTracker, IssueTracker
from issuewarden.gateway.web import HttpxWebClient, WebClient
from issuewarden.model import Event, TriageResult
from issuewarden.parsers import load_event
from issuewarden.reporting import StdoutReporter, write_report
from issuewarden.triage import triage_event

logger = logging.getLogger(__name__)


def build_parser(environ: Mapping[str, str] | None = None) -> argparse.ArgumentParser:
    """Build top-level CLI parser. Defaults come from the Actions environment."""
    env = os.environ if environ is None else environ
    default_workspace = Path(env.get(ENV_GITHUB_WORKSPACE) or ".")

    parser = argparse.ArgumentParser(
        prog="issuewarden",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    run = subparsers.add_parser("run", help="Triage one issue-tracker event")
    run.add_argument("-w", "--workspace", type=Path, default=default_workspace, help="Repository checkout root")
    run.add_argument("-c", "--config", type=Path, default=None, help="Explicit config file")
    run.add_argument(
        "--event-path",
        type=Path,
        default=Path(env[ENV_GITHUB_EVENT_PATH]) if env.get(ENV_GITHUB_EVENT_PATH) else None,
        help="Webhook payload JSON file",
    )
    run.add_argument(
        "--event-name",
        default=env.get(ENV_GITHUB_EVENT_NAME) or None,
        help="Webhook event name, e.g. issues or issue_comment",
    )
    run.add_argument(
        "--repository",
        default=env.get(ENV_GITHUB_REPOSITORY) or None,
        help="owner/repo, used when the payload has no repository",
    )
    run.add_argument("-o", "--output", type=Path, default=None, help="Write a JSON report to this file")
    run.add_argument("--dry-run", action="store_true", help="Record actions instead of performing them")
    run.add_argument("--no-stdout", action="store_true", help="Do not print the summary")
    run.add_argument("--no-color", action="store_true", help="Disable colored output")
    run.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    validate = subparsers.add_parser("validate-config", help="Validate configuration without triaging")
    validate.add_argument("-w", "--workspace", type=Path, default=default_workspace, help="Repository checkout root")
    validate.add_argument("-c", "--config", type=Path, default=None, help="Explicit config file")
    validate.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    if args.command == "validate-config":
        return _handle_validate_config(args)
    if args.command != "run":
        parser.error(f"Unsupported command: {args.command}")
    return _handle_run(args, os.environ)


def _handle_validate_config(args: argparse.Namespace) -> int:
    """Validate config file and environment inputs and report results."""
    errors = validate_config_file(
        args.workspace,
        args.config,
        config_explicit=args.config is not None,
        environ=os.environ,
    )
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0


def _handle_run(args: argparse.Namespace, environ: Mapping[str, str]) -> int:
    errors = validate_config_file(
        args.workspace,
        args.config,
        config_explicit=args.config is not None,
        environ=environ,
    )
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    token = environ.get(ENV_GITHUB_TOKEN, "")
    if not token and not args.dry_run:
        print(f"Configuration error: {ENV_GITHUB_TOKEN} is not set", file=sys.stderr)
        return 2

    try:
        config = load_config(args.workspace, args.config, environ=environ)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    event = _read_event(args)
    if event is None:
        return 0

    api_url = environ.get(ENV_GITHUB_API_URL) or DEFAULT_API_URL
    real_tracker = (
        GitHubTracker(token=token, repository=event.repository.full_name, api_url=api_url) if token else None
    )
    real_web = HttpxWebClient()
    tracker: IssueTracker
    web: WebClient
    if args.dry_run:
        tracker = DryRunTracker(reader=real_tracker)
        web = DryRunWebClient(real_web)
    else:
        assert real_tracker is not None
        tracker, web = real_tracker, real_web

    try:
        result = triage_event(event, config=config, tracker=tracker, web=web, dry_run=args.dry_run)
    except IssueWardenError as exc:
        print(f"Triage error: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Triage error: could not read comment template: {exc}", file=sys.stderr)
        return 1
    finally:
        real_web.close()
        if real_tracker is not None:
            real_tracker.close()

    try:
        _emit(result, args)
    except OSError as exc:
        print(f"Report error: {exc}", file=sys.stderr)
        return 1
    return 0


def _read_event(args: argparse.Namespace) -> Event | None:
    if args.event_path is None or not args.event_name:
        logger.info("No event payload or event name given, nothing to classify")
        return None
    try:
        event = load_event(args.event_path, args.event_name, repository=args.repository)
    except EventParseError as exc:
        logger.info("Nothing to classify: %s", exc)
        return None
    if event is None:
        logger.info("Nothing to classify")
    return event


def _emit(result: TriageResult, args: argparse.Namespace) -> None:
    if args.output is not None:
        write_report(args.output, result)
        logger.info("Wrote report to %s", args.output)
    if not args.no_stdout:
        use_color = not args.no_color and sys.stdout.isatty()
        print(StdoutReporter(result, color=use_color).render())


if __name__ == "__main__":
    raise SystemExit(main())
