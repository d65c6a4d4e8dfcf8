"""Command-line interface that prints a GitHub user's recent activity."""

from __future__ import annotations

import argparse
import asyncio
import sys

from github_activity import __version__
from github_activity.events import format_events
from github_activity.github import GitHubConfigError, GitHubEventsConfig, fetch_activity
from github_activity.logging import configure_logging, get_logger, log_error

logger = get_logger(__name__)

DEFAULT_COUNT = "5"


def _parse_count(value: str) -> int:
    """Parse ``--numbers`` as a non-negative integer."""
    try:
        count = int(value)
    except ValueError as exc:
        msg = f"expected a non-negative integer, got {value!r}"
        raise argparse.ArgumentTypeError(msg) from exc
    if count < 0:
        msg = f"expected a non-negative integer, got {value!r}"
        raise argparse.ArgumentTypeError(msg)
    return count


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for ``github-activity``."""
    parser = argparse.ArgumentParser(
        prog="github-activity",
        description=(
            "Fetch the recent public activity of a GitHub user and display it "
            "in the terminal."
        ),
    )
    parser.add_argument("username", nargs="?", default=None, help="GitHub username")
    parser.add_argument(
        "-n",
        "--numbers",
        type=_parse_count,
        default=DEFAULT_COUNT,
        metavar="COUNT",
        help="how many activities should be listed (default: %(default)s)",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Print the most recent public events for a GitHub user.

    Parameters
    ----------
    argv : list[str] | None, optional
        Command-line arguments. ``None`` defaults to ``sys.argv``.

    Returns
    -------
    int
        Exit code: 0 when activity (or its absence) was reported, 1 when no
        username was given, configuration is invalid or the fetch failed.

    """
    args = build_parser().parse_args(argv)
    configure_logging()

    username = (args.username or "").strip()
    if not username:
        print("Please provide a GitHub username.", file=sys.stderr)
        return 1

    try:
        config = GitHubEventsConfig.from_env()
    except GitHubConfigError as exc:
        log_error(logger, "Invalid configuration: %s", exc)
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 1

    events = asyncio.run(fetch_activity(username, config=config))
    if events is None:
        print(f'Could not fetch activity for "{username}".', file=sys.stderr)
        return 1

    if not events:
        print(f'No activities for user "{username}" found.', file=sys.stderr)
        return 0

    print(f"Activities of {username}:")
    for line in format_events(events, args.numbers):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
