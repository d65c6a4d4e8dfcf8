"""Activity event models and one-line formatting."""

from __future__ import annotations

from .formatter import format_event, format_events
from .models import EventKind, EventRecord

__all__ = ["EventKind", "EventRecord", "format_event", "format_events"]
