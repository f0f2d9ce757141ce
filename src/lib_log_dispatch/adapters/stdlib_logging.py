"""Bridge from the dispatch port to :mod:`logging` loggers.

Purpose
-------
Show the adapter shape for leveled third-party loggers: switch on the level,
call the matching severity method, and fail loudly on anything unmapped.

Contents
--------
* :class:`StdlibLoggingAdapter` – :class:`LogDispatcher` backed by a
  :class:`logging.Logger`.

System Role
-----------
Used by hosts that already route diagnostics through the stdlib logging tree.
Handlers, formatters and levels stay under the host's control; the adapter
never configures them.
"""

from __future__ import annotations

import logging
from typing import Any

from lib_log_dispatch.adapters._formatting import render_values
from lib_log_dispatch.application.ports.dispatcher import LogDispatcher
from lib_log_dispatch.domain.levels import SeverityLevel, UnknownSeverityError


class StdlibLoggingAdapter(LogDispatcher):
    """Send dispatch calls to ``logger`` at ERROR, WARNING or INFO."""

    def __init__(self, logger: logging.Logger | str | None = None) -> None:
        """Wrap ``logger``; a string or ``None`` is resolved via :func:`logging.getLogger`."""
        if isinstance(logger, logging.Logger):
            self._logger = logger
        else:
            self._logger = logging.getLogger(logger or "lib_log_dispatch")

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def dispatch(self, level: SeverityLevel, *values: Any) -> None:
        """Log the rendered values at the stdlib level matching ``level``.

        Values are only rendered when the logger is enabled for that level.
        Records point at the caller of this method, not at the adapter.

        Raises
        ------
        UnknownSeverityError
            ``level`` is not a :class:`SeverityLevel` member.
        """
        if not isinstance(level, SeverityLevel):
            raise UnknownSeverityError(f"unknown level: {level!r}")
        python_level = level.to_python_level()
        if not self._logger.isEnabledFor(python_level):
            return
        self._logger.log(python_level, render_values(values), stacklevel=2)


__all__ = ["StdlibLoggingAdapter"]
