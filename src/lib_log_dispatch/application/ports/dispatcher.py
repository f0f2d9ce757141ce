"""Dispatch port describing the single logging operation hosts depend on.

Purpose
-------
Let a host hold one value and call ``dispatch`` at every log point without
knowing which backend sits behind it.

Contents
--------
* :class:`LogDispatcher` – runtime-checkable protocol with one ``dispatch``
  method.
* :data:`LineWriter` – type of the variadic ``print``-like functions that
  line-based sinks forward to.

System Role
-----------
Any object with a matching ``dispatch`` method satisfies the port
structurally, so adapting a third-party logger takes one small shim.
Rendering values is entirely the backend's concern.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol, runtime_checkable

from lib_log_dispatch.domain.levels import SeverityLevel

LineWriter = Callable[..., None]


@runtime_checkable
class LogDispatcher(Protocol):
    """Accept a severity and payload and decide whether to forward them."""

    def dispatch(self, level: SeverityLevel, *values: Any) -> None:
        """Forward, suppress or discard ``values`` logged at ``level``."""


__all__ = ["LineWriter", "LogDispatcher"]
