"""Unit tests for activity event models."""

from __future__ import annotations

import pytest

from github_activity.events import EventKind, EventRecord
from github_activity.events.models import text_field


class TestEventKindClassify:
    """Tests for EventKind.classify."""

    @pytest.mark.parametrize(
        "kind", [kind for kind in EventKind if kind is not EventKind.UNKNOWN]
    )
    def test_known_tags_round_trip(self, kind: EventKind) -> None:
        """Every known tag maps back to its own kind."""
        assert EventKind.classify(kind.value) is kind

    @pytest.mark.parametrize("tag", [None, "", "unknown", "pushevent", "GollumEvent"])
    def test_other_tags_are_unknown(self, tag: str | None) -> None:
        """Missing, empty, differently cased or unlisted tags are unknown."""
        assert EventKind.classify(tag) is EventKind.UNKNOWN


class TestEventRecordFromRaw:
    """Tests for EventRecord.from_raw."""

    def test_extracts_nested_fields(self) -> None:
        """Actor login, repo name and payload are lifted from a full record."""
        record = EventRecord.from_raw(
            {
                "id": "1",
                "type": "PushEvent",
                "actor": {"login": "alice", "id": 1},
                "repo": {"name": "octo/reef", "id": 2},
                "payload": {"commits": [{"sha": "a"}]},
            }
        )

        assert record == EventRecord(
            type="PushEvent",
            actor_login="alice",
            repo_name="octo/reef",
            payload={"commits": [{"sha": "a"}]},
        )
        assert record.kind is EventKind.PUSH

    def test_empty_mapping_uses_sentinels(self) -> None:
        """A record with no fields resolves every sentinel."""
        record = EventRecord.from_raw({})

        assert record.type is None
        assert record.type_label == "None"
        assert record.actor_login == "unknown-user"
        assert record.repo_name == "unknown-repo"
        assert record.payload == {}
        assert record.kind is EventKind.UNKNOWN

    def test_non_string_type_is_missing(self) -> None:
        """A tag that is not a string is treated as absent."""
        record = EventRecord.from_raw({"type": 12})

        assert record.type is None
        assert record.type_label == "None"

    def test_empty_type_is_kept_for_display(self) -> None:
        """An empty string tag is preserved rather than replaced."""
        record = EventRecord.from_raw({"type": ""})

        assert record.type_label == ""
        assert record.kind is EventKind.UNKNOWN

    @pytest.mark.parametrize("raw", [None, 3.5, "WatchEvent", [], ()])
    def test_non_mappings_yield_empty_record(self, raw: object) -> None:
        """Non-mapping inputs never raise."""
        assert EventRecord.from_raw(raw) == EventRecord()

    def test_payload_is_copied(self) -> None:
        """The record does not share the caller's payload dict."""
        payload = {"action": "opened"}
        record = EventRecord.from_raw({"type": "IssuesEvent", "payload": payload})

        payload["action"] = "closed"

        assert record.payload == {"action": "opened"}


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("alice", "alice"),
        ("", "fallback"),
        (None, "fallback"),
        (5, "fallback"),
        (True, "fallback"),
        (["alice"], "fallback"),
    ],
)
def test_text_field_only_keeps_non_empty_strings(value: object, expected: str) -> None:
    """Truthy values that are not strings are replaced by the default."""
    assert text_field({"login": value}, "login", "fallback") == expected


def test_text_field_missing_key_uses_default() -> None:
    """An absent key yields the default."""
    assert text_field({}, "login", "fallback") == "fallback"
