"""Environment-driven composition of the process-wide dispatcher.

Purpose
-------
Translate ``LOG_DISPATCH_*`` environment variables (optionally loaded from a
``.env`` file) into one :class:`LogDispatcher` the host holds for its whole
lifetime.

Contents
--------
* :class:`DispatchSettings` – resolved configuration values.
* :func:`load_settings` / :func:`parse_levels` – environment parsing.
* :func:`build_dispatcher` – composition root for the supported backends.
* :func:`enable_dotenv` / :func:`env_bool` – ``.env`` loading helpers.

System Role
-----------
Outer shell only: nothing in the domain, port or adapter modules reads the
environment. Invalid values fail at start-up with :class:`ValueError`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, TextIO

from dotenv import find_dotenv, load_dotenv
from rich.console import Console

from lib_log_dispatch.adapters import (
    LineSink,
    NullSink,
    RichConsoleAdapter,
    StdlibLoggingAdapter,
    default_line_writer,
    new_std_log,
)
from lib_log_dispatch.application.ports import LogDispatcher
from lib_log_dispatch.domain import SeverityLevel

BACKENDS = ("console", "stream", "logging", "rich", "null")
"""Backend names accepted by ``LOG_DISPATCH_BACKEND`` and the CLI."""

ENV_BACKEND = "LOG_DISPATCH_BACKEND"
ENV_LEVELS = "LOG_DISPATCH_LEVELS"
ENV_LOGGER = "LOG_DISPATCH_LOGGER"
ENV_USE_DOTENV = "LOG_DISPATCH_USE_DOTENV"

DEFAULT_LOGGER_NAME = "lib_log_dispatch"


@dataclass(frozen=True, slots=True)
class DispatchSettings:
    """Configuration for :func:`build_dispatcher`.

    An empty ``levels`` tuple means every level is forwarded.
    """

    backend: str = "console"
    levels: tuple[SeverityLevel, ...] = ()
    logger_name: str = DEFAULT_LOGGER_NAME

    def __post_init__(self) -> None:
        if self.backend not in BACKENDS:
            raise ValueError(f"Unknown dispatch backend: {self.backend!r} (expected one of {', '.join(BACKENDS)})")


def parse_levels(raw: str | None) -> tuple[SeverityLevel, ...]:
    """Parse a comma separated list of level names.

    Examples
    --------
    >>> parse_levels("err, warn")
    (<SeverityLevel.ERROR: 'ERR'>, <SeverityLevel.WARN: 'WARN'>)
    >>> parse_levels("")
    ()
    >>> parse_levels(None)
    ()
    """

    if not raw:
        return ()
    return tuple(SeverityLevel.from_name(part) for part in raw.split(",") if part.strip())


def load_settings(environ: Optional[Mapping[str, str]] = None) -> DispatchSettings:
    """Read :class:`DispatchSettings` from ``environ`` (defaults to :data:`os.environ`)."""

    env = os.environ if environ is None else environ
    backend = (env.get(ENV_BACKEND) or "console").strip().lower()
    levels = parse_levels(env.get(ENV_LEVELS))
    logger_name = (env.get(ENV_LOGGER) or DEFAULT_LOGGER_NAME).strip()
    return DispatchSettings(backend=backend, levels=levels, logger_name=logger_name)


def build_dispatcher(
    settings: DispatchSettings,
    *,
    stream: TextIO | None = None,
    console: Console | None = None,
) -> LogDispatcher:
    """Assemble the dispatcher described by ``settings``.

    ``stream`` feeds the ``stream`` backend and ``console`` the ``console`` and
    ``rich`` backends; both default to stderr. Severity-aware backends are
    wrapped in a :class:`LineSink` when a whitelist is configured, relying on
    the level-first calling convention.

    Examples
    --------
    >>> import io
    >>> buffer = io.StringIO()
    >>> settings = DispatchSettings(backend="stream", levels=(SeverityLevel.ERROR,))
    >>> dispatcher = build_dispatcher(settings, stream=buffer)
    >>> dispatcher.dispatch(SeverityLevel.INFO, "ignored")
    >>> dispatcher.dispatch(SeverityLevel.ERROR, "kept")
    >>> buffer.getvalue()
    'ERR kept\\n'
    """

    if settings.backend == "null":
        return NullSink()
    if settings.backend == "console":
        return LineSink(default_line_writer(console), *settings.levels)
    if settings.backend == "stream":
        return new_std_log(stream, *settings.levels)

    adapter: LogDispatcher
    if settings.backend == "logging":
        adapter = StdlibLoggingAdapter(settings.logger_name)
    else:
        adapter = RichConsoleAdapter(console=console)
    if not settings.levels:
        return adapter
    return LineSink(adapter.dispatch, *settings.levels)


def env_bool(name: str, default: bool, environ: Optional[Mapping[str, str]] = None) -> bool:
    """Return the boolean value of an environment variable with fallback.

    Examples
    --------
    >>> env_bool("LOG_EXAMPLE_BOOL", default=True, environ={})
    True
    >>> env_bool("LOG_EXAMPLE_BOOL", default=True, environ={"LOG_EXAMPLE_BOOL": "0"})
    False
    """

    env = os.environ if environ is None else environ
    value = env.get(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def enable_dotenv(path: str | Path | None = None) -> Path | None:
    """Load a ``.env`` file without overriding variables already set.

    When ``path`` is ``None`` the nearest ``.env`` is searched from the current
    working directory upwards. Returns the loaded file or ``None``.
    """

    if path is None:
        found = find_dotenv(usecwd=True)
        if not found:
            return None
        candidate = Path(found)
    else:
        candidate = Path(path)
        if not candidate.is_file():
            return None
    load_dotenv(candidate, override=False)
    return candidate.resolve()


__all__ = [
    "BACKENDS",
    "DispatchSettings",
    "build_dispatcher",
    "enable_dotenv",
    "env_bool",
    "load_settings",
    "parse_levels",
]
