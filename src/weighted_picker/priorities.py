"""Validation and accumulation of (value, priority) pairs."""

from __future__ import annotations

from typing import Generic, Iterable, Optional, Sequence, TypeVar

from .constants import INT32_MAX, PERCENTAGE_TOTAL
from .errors import (
    CountMismatchError,
    InvalidPriorityError,
    MixedPriorityKindError,
    PercentageOverflowError,
)
from .types import Entry, PriorityKind

T = TypeVar("T")


def validate_priority(priority: object) -> int:
    """Return ``priority`` if it is a positive integer, raise otherwise."""

    if isinstance(priority, bool) or not isinstance(priority, int):
        raise InvalidPriorityError(priority, "Value priorities must be integers")
    if priority <= 0:
        raise InvalidPriorityError(priority)
    if priority > INT32_MAX:
        raise InvalidPriorityError(priority, "Value priorities must fit in 32 bits")
    return priority


class PriorityModel(Generic[T]):
    """Accumulates validated entries that all share one :class:`PriorityKind`."""

    def __init__(self) -> None:
        self._entries: list[Entry[T]] = []
        self._kind: Optional[PriorityKind] = None

    @property
    def kind(self) -> Optional[PriorityKind]:
        return self._kind

    def __len__(self) -> int:
        return len(self._entries)

    def total(self) -> int:
        return sum(entry.priority for entry in self._entries)

    def entries(self) -> tuple[Entry[T], ...]:
        """Snapshot of the registered entries in registration order."""

        return tuple(self._entries)

    def register(self, value: T, priority: int, kind: PriorityKind) -> Entry[T]:
        checked = validate_priority(priority)
        self._check_kind(kind)
        if kind is PriorityKind.PERCENTAGE:
            self._check_percentage_total(self.total() + checked)
        self._check_total(self.total() + checked)
        entry = Entry(value, checked)
        self._entries.append(entry)
        self._kind = kind
        return entry

    def register_batch(
        self,
        values: Sequence[T],
        priorities: Iterable[int],
        kind: PriorityKind,
    ) -> tuple[Entry[T], ...]:
        ordered = list(priorities)
        if len(ordered) != len(values):
            raise CountMismatchError(len(values), len(ordered))
        checked = [validate_priority(priority) for priority in ordered]
        self._check_kind(kind)
        if kind is PriorityKind.PERCENTAGE:
            self._check_percentage_total(self.total() + sum(checked))
        self._check_total(self.total() + sum(checked))
        batch = tuple(Entry(value, priority) for value, priority in zip(values, checked))
        self._entries.extend(batch)
        self._kind = kind
        return batch

    def finalize_for_percentage(self) -> None:
        """Reject percentage requests whose priorities add up to more than 100."""

        if self._kind is PriorityKind.PERCENTAGE:
            self._check_percentage_total(self.total())

    def _check_kind(self, kind: PriorityKind) -> None:
        if self._kind is not None and self._kind is not kind:
            raise MixedPriorityKindError(self._kind.value, kind.value)

    @staticmethod
    def _check_total(total: int) -> None:
        # Table totals are drawn through the int32 random source contract.
        if total > INT32_MAX:
            raise InvalidPriorityError(total, "Sum of value priorities must fit in 32 bits")

    @staticmethod
    def _check_percentage_total(total: int) -> None:
        if total > PERCENTAGE_TOTAL:
            raise PercentageOverflowError(total)


__all__ = ["PriorityModel", "validate_priority"]
