"""Line-oriented dispatcher that prefixes each line with its severity.

Purpose
-------
Wrap any ``print``-like function so hosts get level filtering without the
function knowing anything about severities.

Contents
--------
* :class:`LineSink` – the filtering, level-prefixing dispatcher.
* :func:`default_line_writer` – process default writer (Rich console on
  stderr).
* :func:`new_global_log` / :func:`new_std_log` – named constructors that only
  differ in where the line writer comes from.

System Role
-----------
Reference implementation of :class:`~lib_log_dispatch.application.ports.LogDispatcher`.
Because the level is forwarded as the first value, a sink with no concept of
severity still shows it as the leading token of the line.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

from rich.console import Console

from lib_log_dispatch.application.ports.dispatcher import LineWriter, LogDispatcher
from lib_log_dispatch.adapters._formatting import render_values
from lib_log_dispatch.domain.filters import FilteredTo, LevelFilter, Unfiltered, level_filter
from lib_log_dispatch.domain.levels import SeverityLevel


class LineSink(LogDispatcher):
    """Forward whitelisted calls to ``emit`` as ``emit(level, *values)``.

    Passing no levels allows every level. Passing one or more turns them into
    a whitelist; duplicates collapse and order does not matter. The whitelist
    is fixed for the lifetime of the sink.
    """

    def __init__(self, emit: LineWriter, *levels: SeverityLevel) -> None:
        self._emit = emit
        self._allowed = level_filter(levels)

    @classmethod
    def with_filter(cls, emit: LineWriter, allowed: LevelFilter) -> "LineSink":
        """Build a sink from an explicit filter.

        This is the only way to get an empty whitelist, which blocks every
        level; ``LineSink(emit)`` with no levels allows everything instead.
        """

        if not isinstance(allowed, (Unfiltered, FilteredTo)):
            raise TypeError(f"allowed must be Unfiltered or FilteredTo, got {type(allowed).__name__}")
        sink = cls(emit)
        sink._allowed = allowed
        return sink

    @property
    def emit(self) -> LineWriter:
        return self._emit

    @property
    def allowed(self) -> LevelFilter:
        return self._allowed

    def dispatch(self, level: SeverityLevel, *values: Any) -> None:
        """Call ``emit(level, *values)`` when ``level`` passes the whitelist.

        Suppressed calls return exactly like forwarded ones.

        Examples
        --------
        >>> lines = []
        >>> sink = LineSink(lambda *v: lines.append(v), SeverityLevel.ERROR)
        >>> sink.dispatch(SeverityLevel.WARN, "disk full")
        >>> sink.dispatch(SeverityLevel.ERROR, "disk full")
        >>> lines == [(SeverityLevel.ERROR, "disk full")]
        True
        """

        if not self._allowed.allows(level):
            return
        self._emit(level, *values)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(emit={self._emit!r}, allowed={self._allowed!r})"


def default_line_writer(console: Console | None = None) -> LineWriter:
    """Return the process default line writer.

    Values are printed space separated on one line of a Rich console bound to
    stderr. Markup and highlighting are disabled so payloads print verbatim.
    """

    target = console if console is not None else Console(stderr=True)

    def _write(*values: Any) -> None:
        target.print(render_values(values), markup=False, highlight=False, emoji=False, soft_wrap=True)

    return _write


def new_global_log(*levels: SeverityLevel) -> LineSink:
    """Create a :class:`LineSink` writing through :func:`default_line_writer`.

    All levels are reported by default; passing levels makes them a whitelist.
    The writer is resolved here, at construction time.
    """

    return LineSink(default_line_writer(), *levels)


def new_std_log(stream: TextIO | None = None, *levels: SeverityLevel) -> LineSink:
    """Create a :class:`LineSink` printing lines to ``stream``.

    ``stream`` defaults to :data:`sys.stderr` as it is at construction time.
    To keep the default stream and still whitelist, pass ``None`` first:
    ``new_std_log(None, SeverityLevel.ERROR)``.

    Examples
    --------
    >>> import io
    >>> buffer = io.StringIO()
    >>> new_std_log(buffer).dispatch(SeverityLevel.INFO, "bucket", "created")
    >>> buffer.getvalue()
    'INFO bucket created\\n'
    """

    target = stream if stream is not None else sys.stderr

    def _write(*values: Any) -> None:
        print(*values, file=target)

    return LineSink(_write, *levels)


__all__ = ["LineSink", "default_line_writer", "new_global_log", "new_std_log"]
