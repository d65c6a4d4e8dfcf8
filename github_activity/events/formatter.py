"""Render activity events as one-line, human-readable descriptions.

Each known :class:`~github_activity.events.models.EventKind` maps to a
describer in ``_DESCRIBERS``; anything else falls through to the unknown
action description. Formatting never raises: missing or malformed fields
resolve to fixed defaults.

Examples
--------
>>> format_event({"type": "WatchEvent", "repo": {"name": "octocat/Hello-World"}})
'- Starred octocat/Hello-World'

"""

from __future__ import annotations

import collections.abc as cabc
import itertools
import typing as typ

from .models import EventKind, EventRecord, mapping_field, text_field

LINE_PREFIX = "- "

_Describer = cabc.Callable[[EventRecord], str]


def _commit_count(payload: dict[str, typ.Any]) -> int:
    commits = payload.get("commits")
    return len(commits) if isinstance(commits, list) else 0


def _action(event: EventRecord, default: str) -> str:
    return text_field(event.payload, "action", default)


def _release_name(payload: dict[str, typ.Any]) -> str:
    return text_field(mapping_field(payload, "release"), "name", "a release")


def _describe_create(event: EventRecord) -> str:
    ref_type = text_field(event.payload, "ref_type", "repository")
    ref = text_field(event.payload, "ref", "unknown")
    return f"Created a new {ref_type} ({ref}) in {event.repo_name}"


def _describe_delete(event: EventRecord) -> str:
    ref_type = text_field(event.payload, "ref_type", "entity")
    ref = text_field(event.payload, "ref", "unknown")
    return f"Deleted {ref_type} ({ref}) in {event.repo_name}"


def _describe_unknown(event: EventRecord) -> str:
    return (
        f"{event.actor_login} performed an unknown action "
        f"({event.type_label}) in {event.repo_name}"
    )


_DESCRIBERS: dict[EventKind, _Describer] = {
    EventKind.WATCH: lambda event: f"Starred {event.repo_name}",
    EventKind.PUSH: lambda event: (
        f"Pushed {_commit_count(event.payload)} commit(s) to {event.repo_name}"
    ),
    EventKind.PULL_REQUEST: lambda event: (
        f"{event.actor_login} {_action(event, 'performed an action on')} "
        f"a pull request in {event.repo_name}"
    ),
    EventKind.ISSUES: lambda event: (
        f"{event.actor_login} {_action(event, 'performed an action on')} "
        f"an issue in {event.repo_name}"
    ),
    EventKind.FORK: lambda event: (
        f"Forked {event.repo_name} to {event.actor_login}'s account"
    ),
    EventKind.CREATE: _describe_create,
    EventKind.DELETE: _describe_delete,
    EventKind.ISSUE_COMMENT: lambda event: (
        f"{event.actor_login} {_action(event, 'commented on')} "
        f"an issue in {event.repo_name}"
    ),
    EventKind.RELEASE: lambda event: (
        f"Published {_release_name(event.payload)} in {event.repo_name}"
    ),
    EventKind.FORK_APPLY: lambda event: (
        f"Applied a patch from a fork in {event.repo_name}"
    ),
    EventKind.PUBLIC: lambda event: f"Made {event.repo_name} public",
    EventKind.COMMIT_COMMENT: lambda event: (
        f"Commented on a commit in {event.repo_name}"
    ),
    EventKind.PULL_REQUEST_REVIEW: lambda event: (
        f"{event.actor_login} {_action(event, 'reviewed')} "
        f"a pull request in {event.repo_name}"
    ),
    EventKind.PULL_REQUEST_REVIEW_COMMENT: lambda event: (
        f"Commented on a pull request review in {event.repo_name}"
    ),
}


def format_event(event: object) -> str:
    """Describe a single activity event.

    Parameters
    ----------
    event : object
        An :class:`EventRecord` or a raw record as decoded from the GitHub
        API. Any other value is treated as an empty record.

    Returns
    -------
    str
        The description, prefixed with ``"- "``.

    """
    record = event if isinstance(event, EventRecord) else EventRecord.from_raw(event)
    describe = _DESCRIBERS.get(record.kind, _describe_unknown)
    return f"{LINE_PREFIX}{describe(record)}"


def format_events(events: cabc.Iterable[object], limit: int) -> list[str]:
    """Describe at most ``limit`` events from the head of ``events``.

    A ``limit`` larger than the number of events shows every event; a
    ``limit`` of zero or less shows none.
    """
    if limit <= 0:
        return []
    return [format_event(event) for event in itertools.islice(events, limit)]
