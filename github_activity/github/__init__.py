"""GitHub REST events client."""

from __future__ import annotations

from .client import GitHubEventsClient, fetch_activity
from .config import GitHubEventsConfig
from .errors import GitHubAPIError, GitHubConfigError, GitHubResponseShapeError

__all__ = [
    "GitHubAPIError",
    "GitHubConfigError",
    "GitHubEventsClient",
    "GitHubEventsConfig",
    "GitHubResponseShapeError",
    "fetch_activity",
]
