"""Render dispatch payloads into a single line of text.

Severity-aware adapters receive the payload as separate values; the backends
they wrap want one message string. Rendering here keeps the stdlib and Rich
adapters producing identical text for the same call.
"""

from __future__ import annotations

from typing import Any, Iterable


def render_values(values: Iterable[Any]) -> str:
    """Join ``str(value)`` for every value with single spaces.

    Examples
    --------
    >>> render_values(["disk", "full:", 93.5])
    'disk full: 93.5'
    >>> render_values([])
    ''
    """

    return " ".join(str(value) for value in values)


__all__ = ["render_values"]
