import logging
from collections import Counter

import pytest

from weighted_picker import out_of
from weighted_picker.config import PickerConfig
from weighted_picker.errors import (
    CountMismatchError,
    IllegalCallOrderError,
    InvalidCountError,
    InvalidPriorityError,
    MixedPriorityKindError,
    NotEnoughValuesError,
    PercentageOverflowError,
)
from weighted_picker.picker import BuilderState, RandomPicker
from weighted_picker.random_source import DefaultRandomSource
from weighted_picker.types import PriorityKind


class ScriptedRandom:
    def __init__(self, *values: int) -> None:
        self._values = list(values)

    def next_int(self, start=None, stop=None):
        return self._values.pop(0)

    def next_double(self):
        return 0.0


def _seeded(seed: int = 1234) -> DefaultRandomSource:
    return DefaultRandomSource(seed=seed)


def test_weighted_values_converge_to_shares():
    picker = out_of(_seeded()).value("a").with_weight(1).and_value("b").with_weight(3)

    counts = Counter(picker.pick(4000))

    assert counts["a"] / 4000 == pytest.approx(0.25, abs=0.04)
    assert counts["b"] / 4000 == pytest.approx(0.75, abs=0.04)


def test_batch_weights_accept_varargs_and_iterables():
    first = out_of(ScriptedRandom(0, 3)).values(["a", "b"]).with_weights(1, 3)
    second = out_of(ScriptedRandom(0, 3)).values(["a", "b"]).with_weights([1, 3])

    assert first.pick(2) == ["a", "b"]
    assert second.pick(2) == ["a", "b"]
    assert first.state is BuilderState.BATCH_PRIORITIZED


def test_single_percentage_always_returns_value():
    picker = out_of(_seeded()).value("p").with_percentage(30)

    assert {picker.pick_one() for _ in range(500)} == {"p"}


def test_percentage_dead_zone_is_redrawn():
    picker = out_of(ScriptedRandom(75, 30, 29)).value("p").with_percentage(30)

    assert picker.pick_one() == "p"


def test_percentage_distinct_returns_permutation():
    picker = out_of(_seeded()).value("x").with_percentage(50).and_value("y").with_percentage(50)

    for _ in range(100):
        result = picker.pick_distinct(2)
        assert len(result) == 2
        assert sorted(result) == ["x", "y"]


def test_pick_distinct_subset_is_distinct_by_position():
    picker = out_of(_seeded()).values(["a", "b", "c", "d", "e"]).with_weights(5, 4, 3, 2, 1)

    for n in range(1, 6):
        result = picker.pick_distinct(n)
        assert len(result) == n
        assert len(set(result)) == n


def test_pick_distinct_rejects_more_than_registered():
    picker = out_of(_seeded()).values(["a", "b"]).with_percentages(10, 20)

    with pytest.raises(NotEnoughValuesError):
        picker.pick_distinct(3)


def test_values_without_priorities_are_uniform():
    picker = out_of(_seeded()).value("a").and_value("b").and_value("c")

    counts = Counter(picker.pick(3000))

    for value in "abc":
        assert counts[value] / 3000 == pytest.approx(1 / 3, abs=0.04)
    assert picker.kind is None


def test_picking_does_not_consume_the_selection():
    picker = out_of(_seeded()).values(["a", "b", "c"])

    assert sorted(picker.pick_distinct(3)) == ["a", "b", "c"]
    assert sorted(picker.pick_distinct(3)) == ["a", "b", "c"]


@pytest.mark.parametrize("count", [0, -1])
def test_pick_rejects_non_positive_count(count):
    picker = out_of(_seeded()).values(["a", "b"])

    with pytest.raises(InvalidCountError):
        picker.pick(count)
    with pytest.raises(InvalidCountError):
        picker.pick_distinct(count)


@pytest.mark.parametrize("priority", [0, -5])
def test_non_positive_priorities_fail_for_every_kind(priority):
    with pytest.raises(InvalidPriorityError):
        out_of(_seeded()).value("a").with_weight(priority)
    with pytest.raises(InvalidPriorityError):
        out_of(_seeded()).value("a").with_percentage(priority)
    with pytest.raises(InvalidPriorityError):
        out_of(_seeded()).values(["a", "b"]).with_weights(1, priority)


def test_mixing_percentage_and_weight_fails():
    picker = out_of(_seeded()).value("a").with_percentage(20).and_value("b")

    with pytest.raises(MixedPriorityKindError):
        picker.with_weight(3)


def test_percentage_overflow_fails_at_registration():
    picker = out_of(_seeded()).value("a").with_percentage(60).and_value("b")

    with pytest.raises(PercentageOverflowError):
        picker.with_percentage(41)


def test_percentages_summing_to_hundred_are_accepted():
    picker = out_of(_seeded()).values(["a", "b", "c"]).with_percentages(20, 30, 50)

    assert picker.kind is PriorityKind.PERCENTAGE
    assert set(picker.pick(200)) <= {"a", "b", "c"}


def test_batch_count_mismatch():
    with pytest.raises(CountMismatchError):
        out_of(_seeded()).values(["a", "b", "c"]).with_weights(1, 2)


def test_values_requires_at_least_two():
    with pytest.raises(NotEnoughValuesError):
        out_of(_seeded()).values(["only"])


def test_pick_from_empty_builder_fails():
    with pytest.raises(NotEnoughValuesError):
        out_of(_seeded()).pick_one()


def test_value_missing_priority_fails_at_pick():
    picker = out_of(_seeded()).value("a").with_weight(2)
    picker.and_value("b")

    with pytest.raises(CountMismatchError):
        picker.pick_one()


@pytest.mark.parametrize(
    "build",
    [
        lambda p: p.with_weight(1),
        lambda p: p.and_value("a"),
        lambda p: p.with_weights(1, 2),
        lambda p: p.value("a").value("b"),
        lambda p: p.value("a").with_weight(1).with_weight(2),
        lambda p: p.value("a").with_percentage(10).with_percentage(10),
        lambda p: p.value("a").and_value("b").with_weight(1),
        lambda p: p.value("a").with_weight(1).and_value("b").and_value("c"),
        lambda p: p.values(["a", "b"]).with_weight(1),
        lambda p: p.values(["a", "b"]).and_value("c"),
        lambda p: p.values(["a", "b"]).with_weights(1, 1).with_weights(1, 1),
        lambda p: p.value("a").with_weights(1),
    ],
)
def test_illegal_call_order(build):
    with pytest.raises(IllegalCallOrderError):
        build(out_of(_seeded()))


def test_default_rng_uses_configured_seed():
    first = RandomPicker(config=PickerConfig(seed=99)).values(list("abcdef"))
    second = RandomPicker(config=PickerConfig(seed=99)).values(list("abcdef"))

    assert first.pick(30) == second.pick(30)
    assert isinstance(first.rng, DefaultRandomSource)


def test_draw_logging(caplog):
    picker = out_of(_seeded(), config=PickerConfig(log_draws=True)).values(["a", "b"])

    with caplog.at_level(logging.DEBUG, logger="weighted_picker"):
        picker.pick(2)

    assert "Drawing with_replacement" in caplog.text
    assert "Drew entry" in caplog.text


def test_weights_beyond_int32_fail_at_registration():
    with pytest.raises(InvalidPriorityError):
        out_of(_seeded()).values(["a", "b"]).with_weights(2**31 - 1, 1)
    with pytest.raises(InvalidPriorityError):
        out_of(_seeded()).value("a").with_weight(2**40)


def test_largest_total_weight_still_draws():
    picker = out_of(_seeded()).values(["a", "b"]).with_weights(2**31 - 2, 1)

    assert picker.pick_one() in {"a", "b"}


@pytest.mark.parametrize("weights", [(1.5,), ("3",), (None,)])
def test_batch_weights_reject_non_integer_argument(weights):
    with pytest.raises(InvalidPriorityError):
        out_of(_seeded()).values(["a", "b"]).with_weights(*weights)


def test_negative_seed_is_accepted():
    first = RandomPicker(config=PickerConfig(seed=-7)).values(list("abcdef"))
    second = RandomPicker(config=PickerConfig(seed=-7)).values(list("abcdef"))

    assert first.pick(20) == second.pick(20)
