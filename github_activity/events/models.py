"""Typed models for GitHub public activity events.

GitHub's ``/users/{username}/events`` feed returns loosely typed records:
every field may be missing, ``null`` or of an unexpected type. The models in
this module normalise a raw record once, at the boundary, so formatting code
can work with plain strings and a kind tag without defensive checks.
"""

from __future__ import annotations

import collections.abc as cabc
import enum
import typing as typ

import msgspec

UNKNOWN_ACTOR = "unknown-user"
UNKNOWN_REPO = "unknown-repo"


class EventKind(enum.StrEnum):
    """Event kinds with a dedicated description.

    ``UNKNOWN`` covers every tag outside the known set, including a missing
    tag; the record keeps the original tag for display.
    """

    WATCH = "WatchEvent"
    PUSH = "PushEvent"
    PULL_REQUEST = "PullRequestEvent"
    ISSUES = "IssuesEvent"
    FORK = "ForkEvent"
    CREATE = "CreateEvent"
    DELETE = "DeleteEvent"
    ISSUE_COMMENT = "IssueCommentEvent"
    RELEASE = "ReleaseEvent"
    FORK_APPLY = "ForkApplyEvent"
    PUBLIC = "PublicEvent"
    COMMIT_COMMENT = "CommitCommentEvent"
    PULL_REQUEST_REVIEW = "PullRequestReviewEvent"
    PULL_REQUEST_REVIEW_COMMENT = "PullRequestReviewCommentEvent"
    UNKNOWN = "unknown"

    @classmethod
    def classify(cls, tag: str | None) -> EventKind:
        """Return the kind for ``tag`` using an exact, case-sensitive match."""
        if tag is None or tag == cls.UNKNOWN.value:
            return cls.UNKNOWN
        try:
            return cls(tag)
        except ValueError:
            return cls.UNKNOWN


def text_field(mapping: cabc.Mapping[str, typ.Any], key: str, default: str) -> str:
    """Return ``mapping[key]`` when it is a non-empty string, else ``default``.

    Unlike a plain truthiness fallback, non-string values such as ``5`` or
    ``True`` are replaced by ``default`` rather than rendered.
    """
    value = mapping.get(key)
    if isinstance(value, str) and value:
        return value
    return default


def mapping_field(
    mapping: cabc.Mapping[str, typ.Any], key: str
) -> cabc.Mapping[str, typ.Any]:
    """Return ``mapping[key]`` when it is a mapping, else an empty dict."""
    value = mapping.get(key)
    if isinstance(value, cabc.Mapping):
        return value
    return {}


class EventRecord(msgspec.Struct, kw_only=True, frozen=True):
    """A single activity feed entry with defaults already resolved.

    Attributes
    ----------
    type
        Raw event tag, or ``None`` when the record carries no string tag.
    actor_login
        Login of the acting user, ``"unknown-user"`` when absent.
    repo_name
        ``owner/name`` of the affected repository, ``"unknown-repo"`` when
        absent.
    payload
        Kind-specific data; empty when absent or not a mapping.

    """

    type: str | None = None
    actor_login: str = UNKNOWN_ACTOR
    repo_name: str = UNKNOWN_REPO
    payload: dict[str, typ.Any] = msgspec.field(default_factory=dict)

    @property
    def kind(self) -> EventKind:
        """Classify the record by its tag."""
        return EventKind.classify(self.type)

    @property
    def type_label(self) -> str:
        """Return the tag as shown in descriptions; a missing tag reads ``None``."""
        return str(self.type)

    @classmethod
    def from_raw(cls, raw: object) -> EventRecord:
        """Build a record from a decoded JSON value without raising.

        Any value that is not a mapping yields an empty record, so callers can
        pass through whatever the API returned.
        """
        if not isinstance(raw, cabc.Mapping):
            return cls()

        tag = raw.get("type")
        return cls(
            type=tag if isinstance(tag, str) else None,
            actor_login=text_field(mapping_field(raw, "actor"), "login", UNKNOWN_ACTOR),
            repo_name=text_field(mapping_field(raw, "repo"), "name", UNKNOWN_REPO),
            payload=dict(mapping_field(raw, "payload")),
        )
