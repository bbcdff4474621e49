"""Common data types used across the weighted_picker package."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, Protocol, TypeVar, overload

T = TypeVar("T")


class PriorityKind(str, Enum):
    """How registered priorities are interpreted."""

    WEIGHT = "weight"
    PERCENTAGE = "percentage"


class DrawMode(str, Enum):
    """Supported draw operations."""

    ONE = "one"
    WITH_REPLACEMENT = "with_replacement"
    DISTINCT = "distinct"


@dataclass(frozen=True)
class Entry(Generic[T]):
    """A registered value together with its positive priority.

    The value is opaque to the sampling code: entries are told apart by position,
    never by equality.
    """

    value: T
    priority: int


class RandomNumberGenerator(Protocol):
    """Source of uniformly distributed numbers consumed by the samplers."""

    @overload
    def next_int(self) -> int:  # pragma: no cover - protocol definition
        ...

    @overload
    def next_int(self, start: int) -> int:  # pragma: no cover - protocol definition
        ...

    @overload
    def next_int(self, start: int, stop: int) -> int:  # pragma: no cover - protocol definition
        ...

    def next_int(self, start: Optional[int] = None, stop: Optional[int] = None) -> int:
        """Return a non-negative int32, an int in ``[0, start)`` or in ``[start, stop)``."""

        ...  # pragma: no cover - protocol definition

    def next_double(self) -> float:  # pragma: no cover - protocol definition
        """Return a float in ``[0.0, 1.0)``."""

        ...


__all__ = [
    "DrawMode",
    "Entry",
    "PriorityKind",
    "RandomNumberGenerator",
]
