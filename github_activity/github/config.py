"""Configuration for the GitHub events API client."""

from __future__ import annotations

import dataclasses
import os

from github_activity import __version__

from .errors import GitHubConfigError

_DEFAULT_BASE_URL = "https://api.github.com"
_DEFAULT_USER_AGENT = f"github-activity/{__version__}"
_ALLOWED_SCHEMES = ("http://", "https://")


@dataclasses.dataclass(frozen=True, slots=True)
class GitHubEventsConfig:
    """Configuration for the GitHub REST events endpoint.

    Attributes
    ----------
    base_url
        REST API root; the events path is appended to it.
    user_agent
        ``User-Agent`` header value. GitHub rejects requests without one.

    """

    base_url: str = _DEFAULT_BASE_URL
    user_agent: str = _DEFAULT_USER_AGENT

    @classmethod
    def from_env(cls) -> GitHubEventsConfig:
        """Build configuration from environment variables.

        Reads the following environment variables:

        - ``GITHUB_ACTIVITY_API_URL``: Optional API base URL override
        - ``GITHUB_ACTIVITY_USER_AGENT``: Optional user agent override

        Raises
        ------
        GitHubConfigError
            If the base URL is not an HTTP(S) URL or the user agent is blank.

        """
        base_url = os.environ.get("GITHUB_ACTIVITY_API_URL", _DEFAULT_BASE_URL).strip()
        if not base_url.startswith(_ALLOWED_SCHEMES):
            raise GitHubConfigError.invalid_base_url(base_url)

        user_agent = os.environ.get(
            "GITHUB_ACTIVITY_USER_AGENT", _DEFAULT_USER_AGENT
        ).strip()
        if not user_agent:
            raise GitHubConfigError.empty_user_agent()

        return cls(base_url=base_url.rstrip("/"), user_agent=user_agent)
