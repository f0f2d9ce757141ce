"""Dispatcher that discards everything.

Lets hosts switch logging off through the same port instead of holding an
optional dispatcher and checking it at every call site.
"""

from __future__ import annotations

from typing import Any

from lib_log_dispatch.application.ports.dispatcher import LogDispatcher
from lib_log_dispatch.domain.levels import SeverityLevel


class NullSink(LogDispatcher):
    """Accept and drop every dispatch call."""

    def dispatch(self, level: SeverityLevel, *values: Any) -> None:
        return None

    def __repr__(self) -> str:
        return "NullSink()"


def discard_log() -> NullSink:
    """Return a dispatcher that ignores all levels and values."""

    return NullSink()


__all__ = ["NullSink", "discard_log"]
