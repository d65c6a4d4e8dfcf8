"""Fetch a user's public activity from the GitHub REST events endpoint."""

from __future__ import annotations

import typing as typ
from urllib.parse import quote

import httpx
import msgspec

from github_activity.logging import get_logger, log_error, log_exception, log_info

from .config import GitHubEventsConfig
from .errors import GitHubAPIError, GitHubResponseShapeError

logger = get_logger(__name__)

_HTTP_ERROR_STATUS_THRESHOLD = 400
_ACCEPT = "application/vnd.github+json"

_FETCH_ERRORS: tuple[type[BaseException], ...] = (
    httpx.HTTPError,
    msgspec.DecodeError,
    GitHubAPIError,
    GitHubResponseShapeError,
)


class GitHubEventsClient:
    """Thin async client for ``GET /users/{username}/events``."""

    def __init__(
        self,
        config: GitHubEventsConfig,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialise the client with the provided API configuration."""
        self._config = config
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient()

    async def aclose(self) -> None:
        """Close any owned HTTP resources."""
        if self._owns_client:
            await self._client.aclose()

    def events_url(self, username: str) -> str:
        """Return the events URL with ``username`` encoded as one path segment."""
        return f"{self._config.base_url}/users/{quote(username, safe='')}/events"

    async def list_user_events(self, username: str) -> list[typ.Any]:
        """Return the first page of public events for ``username``.

        Parameters
        ----------
        username : str
            GitHub login whose activity should be fetched.

        Returns
        -------
        list[Any]
            Decoded event records, newest first, possibly empty.

        Raises
        ------
        ValueError
            If ``username`` is blank.
        httpx.HTTPError
            If the request fails at the transport level.
        GitHubAPIError
            If GitHub answers with a non-2xx status.
        msgspec.DecodeError
            If the body is not valid JSON.
        GitHubResponseShapeError
            If the body is valid JSON but not an array.

        """
        if not username.strip():
            msg = "username must be non-empty"
            raise ValueError(msg)

        url = self.events_url(username)
        log_info(logger, "Fetching public events from %s", url)
        response = await self._client.get(
            url,
            headers={"Accept": _ACCEPT, "User-Agent": self._config.user_agent},
        )
        if response.status_code >= _HTTP_ERROR_STATUS_THRESHOLD:
            raise GitHubAPIError.http_error(response.status_code, url=url)

        events = msgspec.json.decode(response.content)
        if not isinstance(events, list):
            raise GitHubResponseShapeError.not_a_list(events)
        return events


async def fetch_activity(
    username: str,
    *,
    client: GitHubEventsClient | None = None,
    config: GitHubEventsConfig | None = None,
) -> list[typ.Any] | None:
    """Fetch public events for ``username``, returning ``None`` on failure.

    Transport, HTTP status, decoding and response shape failures are logged
    and reported as ``None`` so callers only need to handle "no data"; so is
    a blank ``username``, which is logged without sending a request. When
    ``client`` is omitted one is built from ``config`` (or the environment)
    and closed before returning.
    """
    if not username.strip():
        log_error(logger, "Cannot fetch activity without a username")
        return None

    owned = client is None
    active = client or GitHubEventsClient(config or GitHubEventsConfig.from_env())
    try:
        return await active.list_user_events(username)
    except _FETCH_ERRORS as exc:
        log_exception(logger, f"Failed to fetch activity for {username!r}: {exc}", exc)
        return None
    finally:
        if owned:
            await active.aclose()
