"""Public package surface for the leveled dispatch layer.

Host applications obtain one :class:`LogDispatcher` at start-up (directly from
a constructor below or via :func:`lib_log_dispatch.config.build_dispatcher`)
and call ``dispatch(level, *values)`` at every log point.
"""

from __future__ import annotations

from .adapters import (
    LineSink,
    NullSink,
    RichConsoleAdapter,
    StdlibLoggingAdapter,
    default_line_writer,
    discard_log,
    new_global_log,
    new_std_log,
)
from .application.ports import LineWriter, LogDispatcher
from .domain import FilteredTo, LevelFilter, SeverityLevel, Unfiltered, UnknownSeverityError, level_filter

__all__ = [
    "FilteredTo",
    "LevelFilter",
    "LineSink",
    "LineWriter",
    "LogDispatcher",
    "NullSink",
    "RichConsoleAdapter",
    "SeverityLevel",
    "StdlibLoggingAdapter",
    "Unfiltered",
    "UnknownSeverityError",
    "default_line_writer",
    "discard_log",
    "level_filter",
    "new_global_log",
    "new_std_log",
]
