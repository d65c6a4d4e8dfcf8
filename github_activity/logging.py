"""Diagnostic logging for github-activity via femtologging.

Activity lines are printed to stdout by the CLI and never logged. Diagnostics
(fetch URLs, fetch failures, configuration problems) go through femtologging
at the level named by ``GITHUB_ACTIVITY_LOG_LEVEL``, which defaults to
``WARNING`` so an ordinary run prints nothing but the activity itself.

Example:
>>> from github_activity.logging import get_logger, log_info
>>> logger = get_logger(__name__)
>>> log_info(logger, "Fetching public events from %s", "https://api.github.com")

"""

from __future__ import annotations

import collections.abc as cabc
import os
import typing as typ

from femtologging import basicConfig, get_logger

LOG_LEVEL_ENV = "GITHUB_ACTIVITY_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

_KNOWN_LEVELS = frozenset(
    {"TRACE", "DEBUG", "INFO", "WARN", "WARNING", "ERROR", "CRITICAL"}
)


class _SupportsLog(typ.Protocol):
    """Protocol for femtologging-compatible loggers."""

    def log(
        self,
        level: str,
        message: str,
        /,
        *,
        exc_info: object | None = None,
        stack_info: bool = False,
    ) -> str | None: ...


def normalize_log_level(level: str | None) -> tuple[str, bool]:
    """Return ``(level, invalid)`` with unknown or blank levels mapped to the default.

    Parameters
    ----------
    level : str | None
        Raw value of ``GITHUB_ACTIVITY_LOG_LEVEL``.

    Returns
    -------
    tuple[str, bool]
        The upper-cased level, or ``DEFAULT_LOG_LEVEL`` together with ``True``
        when the input is not a femtologging level.

    """
    normalized = (level or "").strip().upper()
    if normalized in _KNOWN_LEVELS:
        return (normalized, False)
    return (DEFAULT_LOG_LEVEL, True)


def configure_logging(environ: cabc.Mapping[str, str] | None = None) -> str:
    """Configure femtologging from ``GITHUB_ACTIVITY_LOG_LEVEL``.

    An invalid value is reported as a warning once logging is configured.
    Returns the level in effect.
    """
    env = os.environ if environ is None else environ
    raw_level = env.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
    level, invalid = normalize_log_level(raw_level)
    basicConfig(level=level)
    if invalid:
        log_warning(
            get_logger(__name__),
            "Invalid %s %r, falling back to %s",
            LOG_LEVEL_ENV,
            raw_level,
            level,
        )
    return level


def _log(
    logger: _SupportsLog,
    level: str,
    message: str,
    *,
    exc_info: object | None = None,
) -> None:
    logger.log(level, message, exc_info=exc_info, stack_info=False)


def log_info(logger: _SupportsLog, template: str, *args: object) -> None:
    """Log a percent-formatted INFO message."""
    _log(logger, "INFO", template % args)


def log_warning(logger: _SupportsLog, template: str, *args: object) -> None:
    """Log a percent-formatted WARNING message."""
    _log(logger, "WARNING", template % args)


def log_error(logger: _SupportsLog, template: str, *args: object) -> None:
    """Log a percent-formatted ERROR message."""
    _log(logger, "ERROR", template % args)


def log_exception(logger: _SupportsLog, message: str, exc: BaseException) -> None:
    """Log ``message`` at ERROR with ``exc`` attached as exc_info."""
    _log(logger, "ERROR", message, exc_info=exc)


__all__ = [
    "DEFAULT_LOG_LEVEL",
    "LOG_LEVEL_ENV",
    "configure_logging",
    "get_logger",
    "log_error",
    "log_exception",
    "log_info",
    "log_warning",
    "normalize_log_level",
]
