"""Summarise a GitHub user's recent public activity in the terminal."""

from __future__ import annotations

__version__ = "1.0.0"
