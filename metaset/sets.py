"""Sets that are either a finite collection of items or the complement of one."""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class MetaSet:
    """A set given either by the items it includes or by the items it excludes.

    An including set holds exactly ``items``. An excluding set holds every
    item except ``items``, and so is infinite.
    """

    items: frozenset = frozenset()
    excluded: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.items, frozenset):
            object.__setattr__(self, "items", frozenset(self.items))

    def is_finite(self) -> bool:
        """Return True for an including set, False for an excluding one."""
        return not self.excluded

    def __contains__(self, item: Hashable) -> bool:
        return (item in self.items) != self.excluded


def include(items: Iterable[Hashable]) -> MetaSet:
    """Build the finite set holding exactly ``items``."""
    return MetaSet(frozenset(items))


def exclude(items: Iterable[Hashable]) -> MetaSet:
    """Build the set holding everything except ``items``."""
    return MetaSet(frozenset(items), excluded=True)