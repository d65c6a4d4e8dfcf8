"""GitHub events API errors."""

from __future__ import annotations


class GitHubAPIError(RuntimeError):
    """Raised when GitHub returns an error response."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        """Initialise with a message and optional HTTP status code."""
        self.status_code = status_code
        super().__init__(message)

    @classmethod
    def http_error(cls, status_code: int, *, url: str) -> GitHubAPIError:
        """Return an error for non-2xx HTTP responses."""
        return cls(f"GitHub HTTP {status_code} for {url}", status_code=status_code)


class GitHubResponseShapeError(RuntimeError):
    """Raised when the events endpoint returns something other than a list."""

    @classmethod
    def not_a_list(cls, received: object) -> GitHubResponseShapeError:
        """Return an error naming the JSON type that was received instead."""
        return cls(
            "GitHub events response must be a JSON array, "
            f"got {type(received).__name__}"
        )


class GitHubConfigError(RuntimeError):
    """Raised when GitHub client configuration is invalid."""

    @classmethod
    def invalid_base_url(cls, value: str) -> GitHubConfigError:
        """Return an error for an API base URL without an HTTP(S) scheme."""
        return cls(f"GITHUB_ACTIVITY_API_URL must be an http(s) URL, got {value!r}")

    @classmethod
    def empty_user_agent(cls) -> GitHubConfigError:
        """Return an error when the configured user agent is blank."""
        return cls("GITHUB_ACTIVITY_USER_AGENT must be non-empty")
