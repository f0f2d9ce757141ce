"""Ports exposed to host applications and implemented by adapters."""

from __future__ import annotations

from .dispatcher import LineWriter, LogDispatcher

__all__ = ["LineWriter", "LogDispatcher"]
