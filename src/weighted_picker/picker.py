"""Fluent builder that collects values and priorities before sampling."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Generic, Iterable, Optional, TypeVar, Union

from .config import PickerConfig
from .errors import CountMismatchError, IllegalCallOrderError, NotEnoughValuesError
from .priorities import PriorityModel, validate_priority
from .random_source import DefaultRandomSource
from .sampler import Sampler
from .types import DrawMode, Entry, PriorityKind, RandomNumberGenerator

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

PriorityArgs = Union[int, Iterable[int]]


class BuilderState(str, Enum):
    """Call-order states of :class:`RandomPicker`."""

    EMPTY = "empty"
    VALUE = "value"
    PRIORITIZED = "prioritized"
    BATCH = "batch"
    BATCH_PRIORITIZED = "batch_prioritized"


class RandomPicker(Generic[T]):
    """Compose a weighted selection and draw from it.

    Values are added one at a time with :meth:`value` / :meth:`and_value`, each
    optionally followed by :meth:`with_weight` or :meth:`with_percentage`, or all at
    once with :meth:`values` followed by :meth:`with_weights` or
    :meth:`with_percentages`. Values registered without any priority are picked
    uniformly. Calls made out of order raise :class:`IllegalCallOrderError`.

    One builder must not be mutated from several threads at once.
    """

    def __init__(
        self,
        rng: Optional[RandomNumberGenerator] = None,
        *,
        config: Optional[PickerConfig] = None,
    ) -> None:
        self.config = config or PickerConfig()
        self.rng = rng if rng is not None else DefaultRandomSource(self.config.seed)
        self._sampler = Sampler(self.rng, self.config)
        self._model: PriorityModel[T] = PriorityModel()
        self._pending: list[T] = []
        self._state = BuilderState.EMPTY

    @property
    def state(self) -> BuilderState:
        return self._state

    @property
    def kind(self) -> Optional[PriorityKind]:
        return self._model.kind

    # ------------------------------------------------------------------
    # Values
    # ------------------------------------------------------------------
    def value(self, value: T) -> "RandomPicker[T]":
        """Add the first value."""

        self._require("value", BuilderState.EMPTY)
        self._pending.append(value)
        self._state = BuilderState.VALUE
        return self

    def and_value(self, value: T) -> "RandomPicker[T]":
        """Add another value after :meth:`value`."""

        self._require("and_value", BuilderState.VALUE, BuilderState.PRIORITIZED)
        if self._state is BuilderState.VALUE and self._model.kind is not None:
            raise IllegalCallOrderError(
                "and_value",
                self._state.value,
                f"the previous value needs a {self._model.kind.value} first",
            )
        self._pending.append(value)
        self._state = BuilderState.VALUE
        return self

    def values(self, values: Iterable[T]) -> "RandomPicker[T]":
        """Add all values at once; at least two are required."""

        self._require("values", BuilderState.EMPTY)
        batch = list(values)
        if len(batch) <= 1:
            raise NotEnoughValuesError(2, len(batch), "values() needs at least two values")
        self._pending.extend(batch)
        self._state = BuilderState.BATCH
        return self

    # ------------------------------------------------------------------
    # Priorities
    # ------------------------------------------------------------------
    def with_weight(self, weight: int) -> "RandomPicker[T]":
        return self._prioritize_last("with_weight", weight, PriorityKind.WEIGHT)

    def with_percentage(self, percentage: int) -> "RandomPicker[T]":
        return self._prioritize_last("with_percentage", percentage, PriorityKind.PERCENTAGE)

    def with_weights(self, *weights: PriorityArgs) -> "RandomPicker[T]":
        return self._prioritize_batch("with_weights", weights, PriorityKind.WEIGHT)

    def with_percentages(self, *percentages: PriorityArgs) -> "RandomPicker[T]":
        return self._prioritize_batch("with_percentages", percentages, PriorityKind.PERCENTAGE)

    # ------------------------------------------------------------------
    # Picking
    # ------------------------------------------------------------------
    def pick(self, n: int) -> list[T]:
        """Draw ``n`` values with replacement."""

        return self._draw(DrawMode.WITH_REPLACEMENT, n)

    def pick_one(self) -> T:
        """Draw a single value."""

        return self._draw(DrawMode.ONE, 1)[0]

    def pick_distinct(self, n: int) -> list[T]:
        """Draw ``n`` values from distinct positions, without replacement."""

        return self._draw(DrawMode.DISTINCT, n)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _require(self, method: str, *allowed: BuilderState) -> None:
        if self._state not in allowed:
            raise IllegalCallOrderError(method, self._state.value)

    def _prioritize_last(self, method: str, priority: int, kind: PriorityKind) -> "RandomPicker[T]":
        self._require(method, BuilderState.VALUE)
        if len(self._pending) != 1:
            raise IllegalCallOrderError(
                method,
                self._state.value,
                f"{method}() applies to a single value; give every earlier value a priority too",
            )
        self._model.register(self._pending[0], priority, kind)
        self._pending.clear()
        self._state = BuilderState.PRIORITIZED
        return self

    def _prioritize_batch(
        self,
        method: str,
        priorities: tuple[PriorityArgs, ...],
        kind: PriorityKind,
    ) -> "RandomPicker[T]":
        self._require(method, BuilderState.BATCH)
        single = priorities[0] if len(priorities) == 1 else None
        if isinstance(single, Iterable) and not isinstance(single, str):
            ordered = list(single)
        else:
            ordered = [validate_priority(priority) for priority in priorities]
        self._model.register_batch(self._pending, ordered, kind)
        self._pending.clear()
        self._state = BuilderState.BATCH_PRIORITIZED
        return self

    def _snapshot(self, requested: int) -> tuple[tuple[Entry[T], ...], PriorityKind]:
        registered = self._model.entries()
        if not registered and not self._pending:
            raise NotEnoughValuesError(requested, 0)
        if not registered:
            return tuple(Entry(value, 1) for value in self._pending), PriorityKind.WEIGHT
        if self._pending:
            raise CountMismatchError(len(registered) + len(self._pending), len(registered))
        self._model.finalize_for_percentage()
        return registered, self._model.kind or PriorityKind.WEIGHT

    def _draw(self, mode: DrawMode, n: int) -> list[T]:
        entries, kind = self._snapshot(n)
        LOGGER.debug("Drawing %s (n=%s) from %d %s entries", mode.value, n, len(entries), kind.value)
        return self._sampler.sample(entries, kind, mode, n)


def out_of(
    rng: Optional[RandomNumberGenerator] = None,
    *,
    config: Optional[PickerConfig] = None,
) -> RandomPicker:
    """Start a new selection, e.g. ``out_of().value("a").with_weight(1)...``."""

    return RandomPicker(rng, config=config)


__all__ = ["BuilderState", "RandomPicker", "out_of"]
