"""Domain value objects shared by the dispatch port and its adapters."""

from __future__ import annotations

from .filters import FilteredTo, LevelFilter, Unfiltered, level_filter
from .levels import SeverityLevel, UnknownSeverityError

__all__ = [
    "FilteredTo",
    "LevelFilter",
    "SeverityLevel",
    "Unfiltered",
    "UnknownSeverityError",
    "level_filter",
]
