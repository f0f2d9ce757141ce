"""Concrete dispatchers implementing :class:`~lib_log_dispatch.application.ports.LogDispatcher`."""

from __future__ import annotations

from .line_sink import LineSink, default_line_writer, new_global_log, new_std_log
from .null_sink import NullSink, discard_log
from .rich_console import RichConsoleAdapter
from .stdlib_logging import StdlibLoggingAdapter

__all__ = [
    "LineSink",
    "NullSink",
    "RichConsoleAdapter",
    "StdlibLoggingAdapter",
    "default_line_writer",
    "discard_log",
    "new_global_log",
    "new_std_log",
]
