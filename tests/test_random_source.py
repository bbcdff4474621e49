import pytest

from weighted_picker.constants import INT32_MAX
from weighted_picker.errors import InvalidArgumentError
from weighted_picker.random_source import DefaultRandomSource


def test_seeded_sources_repeat_sequence():
    first = DefaultRandomSource(seed=7)
    second = DefaultRandomSource(seed=7)

    assert [first.next_int(100) for _ in range(20)] == [second.next_int(100) for _ in range(20)]
    assert first.next_double() == second.next_double()


def test_next_int_ranges():
    rng = DefaultRandomSource(seed=1)

    for _ in range(500):
        assert 0 <= rng.next_int() <= INT32_MAX
        assert 0 <= rng.next_int(3) < 3
        assert -5 <= rng.next_int(-5, 5) < 5
        assert 0.0 <= rng.next_double() < 1.0


def test_next_int_single_slot_range():
    rng = DefaultRandomSource(seed=3)

    assert rng.next_int(1) == 0
    assert rng.next_int(4, 5) == 4


@pytest.mark.parametrize("bound", [0, -1])
def test_next_int_rejects_non_positive_bound(bound):
    with pytest.raises(InvalidArgumentError):
        DefaultRandomSource().next_int(bound)


@pytest.mark.parametrize("minimum,maximum", [(5, 5), (6, 2)])
def test_next_int_rejects_empty_interval(minimum, maximum):
    with pytest.raises(InvalidArgumentError):
        DefaultRandomSource().next_int(minimum, maximum)


def test_next_int_rejects_values_outside_int32():
    with pytest.raises(InvalidArgumentError):
        DefaultRandomSource().next_int(INT32_MAX + 1)
    with pytest.raises(ValueError):
        DefaultRandomSource().next_int(0, 2**40)
