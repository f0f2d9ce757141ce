"""Level whitelists modelled as an explicit sum type.

"No filter" and "filter to nothing" are different things: a sink built with
no levels forwards everything, while a sink whose whitelist is empty forwards
nothing. Keeping them as two types stops call sites from confusing the two.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

from .levels import SeverityLevel


@dataclass(frozen=True, slots=True)
class Unfiltered:
    """Allow every level."""

    def allows(self, level: SeverityLevel) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class FilteredTo:
    """Allow exactly the levels in ``levels``; an empty set allows nothing."""

    levels: frozenset[SeverityLevel]

    def allows(self, level: SeverityLevel) -> bool:
        return level in self.levels


LevelFilter = Union[Unfiltered, FilteredTo]


def level_filter(levels: Iterable[SeverityLevel]) -> LevelFilter:
    """Turn a constructor's level arguments into a filter.

    Examples
    --------
    >>> level_filter(())
    Unfiltered()
    >>> level_filter([SeverityLevel.ERROR, SeverityLevel.ERROR]).levels == frozenset({SeverityLevel.ERROR})
    True
    """

    collected = frozenset(levels)
    if not collected:
        return Unfiltered()
    return FilteredTo(collected)


__all__ = ["FilteredTo", "LevelFilter", "Unfiltered", "level_filter"]
