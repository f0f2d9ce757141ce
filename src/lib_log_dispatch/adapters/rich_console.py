"""Rich-powered console adapter that styles each line by severity.

Purpose
-------
Give interactive runs of the host a coloured, severity-aware console while
still speaking the plain dispatch port.

Contents
--------
* :data:`_STYLE_MAP` - default level-to-style mapping.
* :class:`RichConsoleAdapter` - :class:`LogDispatcher` printing through Rich.

System Role
-----------
Severity-aware counterpart of :class:`~lib_log_dispatch.adapters.line_sink.LineSink`:
it renders the level itself, so it raises on levels it has no style for.
"""

from __future__ import annotations

from typing import Any, Mapping

from rich.console import Console

from lib_log_dispatch.adapters._formatting import render_values
from lib_log_dispatch.application.ports.dispatcher import LogDispatcher
from lib_log_dispatch.domain.levels import SeverityLevel, UnknownSeverityError


_STYLE_MAP: Mapping[SeverityLevel, str] = {
    SeverityLevel.ERROR: "red",
    SeverityLevel.WARN: "yellow",
    SeverityLevel.INFO: "cyan",
}

#: Default Rich styles keyed by :class:`SeverityLevel`.


class RichConsoleAdapter(LogDispatcher):
    """Print ``"<LEVEL> <values...>"`` lines with per-level styles."""

    def __init__(
        self,
        console: Console | None = None,
        *,
        no_color: bool = False,
        styles: Mapping[SeverityLevel | str, str] | None = None,
    ) -> None:
        """Configure the target console and optional style overrides.

        ``styles`` keys may be levels or level names understood by
        :meth:`SeverityLevel.from_name`.
        """
        if console is not None:
            self._console = console
        else:
            self._console = Console(stderr=True, no_color=no_color)
        self._no_color = no_color
        merged = dict(_STYLE_MAP)
        for key, value in (styles or {}).items():
            level = SeverityLevel.from_name(key) if isinstance(key, str) else key
            if not isinstance(level, SeverityLevel):
                raise ValueError(f"Unknown severity level: {key!r}")
            merged[level] = value
        self._style_map = merged

    def dispatch(self, level: SeverityLevel, *values: Any) -> None:
        """Print one styled line for ``level``.

        Examples
        --------
        >>> from io import StringIO
        >>> console = Console(file=StringIO(), record=True, width=80)
        >>> RichConsoleAdapter(console=console).dispatch(SeverityLevel.WARN, "slow", "request")
        >>> console.export_text()
        'WARN  slow request\\n'
        """
        try:
            style = self._style_map[level]
        except (KeyError, TypeError) as exc:
            raise UnknownSeverityError(f"unknown level: {level!r}") from exc
        line = self._format_line(level, values)
        self._console.print(line, style="" if self._no_color else style, markup=False, highlight=False, soft_wrap=True)

    @staticmethod
    def _format_line(level: SeverityLevel, values: tuple[Any, ...]) -> str:
        """Return the text of one console line.

        Examples
        --------
        >>> RichConsoleAdapter._format_line(SeverityLevel.ERROR, ("put", "failed"))
        'ERR   put failed'
        """
        return f"{level.value:<5} {render_values(values)}".rstrip()


__all__ = ["RichConsoleAdapter"]
