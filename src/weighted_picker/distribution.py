"""Cumulative distribution table mapping sampled points to entries."""

from __future__ import annotations

import logging
from bisect import bisect_right
from typing import Generic, Optional, Sequence, TypeVar

from .constants import PERCENTAGE_TOTAL
from .types import Entry, PriorityKind

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


class DistributionTable(Generic[T]):
    """Ordered half-open intervals ``[lower, upper)`` over ``[0, total)``.

    Entry ``i`` owns ``[boundaries[i - 1], boundaries[i])`` with ``boundaries[-1]``
    treated as 0. Points in ``[assigned_total, total)`` belong to no entry.
    """

    def __init__(self, entries: Sequence[Entry[T]], *, total: Optional[int] = None) -> None:
        self._entries = tuple(entries)
        boundaries: list[int] = []
        running = 0
        for entry in self._entries:
            if entry.priority <= 0:
                raise ValueError(f"entry priority must be positive, got {entry.priority}")
            running += entry.priority
            boundaries.append(running)
        self._boundaries = boundaries
        self._assigned = running
        if total is None:
            total = running
        if total < running:
            raise ValueError(f"table total {total} is smaller than the assigned mass {running}")
        self._total = total
        LOGGER.debug(
            "Built distribution table with %d entries (assigned=%d, total=%d)",
            len(self._entries),
            self._assigned,
            self._total,
        )

    @classmethod
    def for_kind(cls, entries: Sequence[Entry[T]], kind: PriorityKind) -> "DistributionTable[T]":
        """Build the table used for draws with replacement.

        Weight tables partition the whole sample space; percentage tables always span
        100 so the unregistered remainder stays unselectable.
        """

        if kind is PriorityKind.PERCENTAGE:
            return cls(entries, total=PERCENTAGE_TOTAL)
        return cls(entries)

    @property
    def entries(self) -> tuple[Entry[T], ...]:
        return self._entries

    @property
    def total(self) -> int:
        return self._total

    @property
    def assigned_total(self) -> int:
        return self._assigned

    @property
    def dead_mass(self) -> int:
        return self._total - self._assigned

    def __len__(self) -> int:
        return len(self._entries)

    def interval(self, index: int) -> tuple[int, int]:
        """Return the ``(lower, upper)`` bounds owned by entry ``index``."""

        upper = self._boundaries[index]
        return upper - self._entries[index].priority, upper

    def locate(self, point: int) -> Optional[int]:
        """Return the index of the entry owning ``point``, or ``None`` in the dead zone."""

        if not 0 <= point < self._total:
            raise ValueError(f"point {point} outside [0, {self._total})")
        if point >= self._assigned:
            return None
        return bisect_right(self._boundaries, point)


__all__ = ["DistributionTable"]
