"""Severity tags understood by every dispatcher.

Purpose
-------
Give host code a closed set of severities to classify messages with, and give
sinks a hashable key to whitelist on.

Contents
--------
* :class:`SeverityLevel` enum with lookup and stdlib conversion helpers.
* :class:`UnknownSeverityError` raised by severity-aware adapters.

System Role
-----------
Shared by the dispatch port, the whitelist filters and every adapter. The
levels carry no ordering: filtering is set membership, never a threshold.
"""

from __future__ import annotations

import logging
from enum import Enum


class UnknownSeverityError(RuntimeError):
    """A value outside :class:`SeverityLevel` reached a severity-aware adapter.

    This is an integration bug (the adapter's level table is out of sync with
    the enum), not a runtime data problem, so callers should let it surface.
    """


class SeverityLevel(Enum):
    """The three severities a host can attach to a message."""

    ERROR = "ERR"
    WARN = "WARN"
    INFO = "INFO"

    def __str__(self) -> str:
        """Return the token rendered at the start of an emitted line.

        Examples
        --------
        >>> str(SeverityLevel.ERROR)
        'ERR'
        """

        return self.value

    def to_python_level(self) -> int:
        """Return the :mod:`logging` constant matching this level."""

        return _PYTHON_LEVELS[self]

    @classmethod
    def from_name(cls, name: str) -> "SeverityLevel":
        """Resolve a member name, token or common alias case-insensitively.

        Examples
        --------
        >>> SeverityLevel.from_name("warning") is SeverityLevel.WARN
        True
        >>> SeverityLevel.from_name("err") is SeverityLevel.ERROR
        True
        """

        normalized = name.strip().upper()
        try:
            return _ALIASES[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown severity level: {name!r}") from exc


_PYTHON_LEVELS = {
    SeverityLevel.ERROR: logging.ERROR,
    SeverityLevel.WARN: logging.WARNING,
    SeverityLevel.INFO: logging.INFO,
}

_ALIASES = {
    **{member.name: member for member in SeverityLevel},
    **{member.value: member for member in SeverityLevel},
    "WARNING": SeverityLevel.WARN,
}


__all__ = ["SeverityLevel", "UnknownSeverityError"]
