"""Proportional draws with and without replacement."""

from __future__ import annotations

import logging
from typing import Optional, Sequence, TypeVar

from .config import PickerConfig
from .distribution import DistributionTable
from .errors import InvalidCountError, NotEnoughValuesError, SamplingExhaustedError
from .types import DrawMode, Entry, PriorityKind, RandomNumberGenerator

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


def _check_count(n: int) -> None:
    if isinstance(n, bool) or not isinstance(n, int) or n <= 0:
        raise InvalidCountError(n)


class Sampler:
    """Draw entries proportionally to their share of a :class:`DistributionTable`."""

    def __init__(self, rng: RandomNumberGenerator, config: Optional[PickerConfig] = None) -> None:
        self.rng = rng
        self.config = config or PickerConfig()

    # ------------------------------------------------------------------
    # With replacement
    # ------------------------------------------------------------------
    def draw_index(self, table: DistributionTable[T]) -> int:
        """Return the index of one entry, redrawing points that land in the dead zone."""

        if len(table) == 0 or table.assigned_total <= 0:
            raise SamplingExhaustedError(
                "Cannot draw from a table without selectable entries",
                details={"entries": len(table), "total": table.total},
            )
        for _ in range(self.config.max_redraws):
            index = table.locate(self.rng.next_int(table.total))
            if index is not None:
                self._log_draw(index, table)
                return index
        LOGGER.warning(
            "Hit %d consecutive dead-zone draws (dead mass %d of %d); drawing from the assigned span",
            self.config.max_redraws,
            table.dead_mass,
            table.total,
        )
        # Uniform over [0, assigned) is the distribution the redraw loop converges to.
        index = table.locate(self.rng.next_int(table.assigned_total))
        if index is None:  # pragma: no cover - guarded by the assigned span
            raise SamplingExhaustedError("Point in assigned span matched no entry")
        self._log_draw(index, table)
        return index

    def draw_one(self, table: DistributionTable[T]) -> T:
        return table.entries[self.draw_index(table)].value

    def draw(self, table: DistributionTable[T], n: int) -> list[T]:
        """Return ``n`` independent draws in draw order; duplicates are allowed."""

        _check_count(n)
        return [self.draw_one(table) for _ in range(n)]

    def pick_one(self, table: DistributionTable[T]) -> T:
        return self.draw(table, 1)[0]

    # ------------------------------------------------------------------
    # Without replacement
    # ------------------------------------------------------------------
    def draw_distinct(self, entries: Sequence[Entry[T]], n: int) -> list[T]:
        """Return ``n`` values at distinct registration positions, in draw order.

        Every step rebuilds the table over the entries not drawn yet, with the total
        recomputed from their priorities, so percentage requests lose their dead zone
        here.
        """

        _check_count(n)
        if n > len(entries):
            raise NotEnoughValuesError(n, len(entries))
        live = list(range(len(entries)))
        result: list[T] = []
        for _ in range(n):
            table = DistributionTable([entries[position] for position in live])
            chosen = live.pop(self.draw_index(table))
            result.append(entries[chosen].value)
        return result

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------
    def sample(
        self,
        entries: Sequence[Entry[T]],
        kind: PriorityKind,
        mode: DrawMode,
        n: int = 1,
    ) -> list[T]:
        """Run one draw operation over a fresh snapshot of ``entries``."""

        if mode is DrawMode.DISTINCT:
            return self.draw_distinct(entries, n)
        table = DistributionTable.for_kind(entries, kind)
        if mode is DrawMode.ONE:
            return [self.pick_one(table)]
        return self.draw(table, n)

    def _log_draw(self, index: int, table: DistributionTable[T]) -> None:
        if self.config.log_draws:
            LOGGER.debug("Drew entry %d with interval %s of %d", index, table.interval(index), table.total)


__all__ = ["Sampler"]
