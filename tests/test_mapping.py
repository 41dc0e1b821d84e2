import pytest

from dudes_in_space.geom.mapping import (
    FitIntoRangeError,
    clamp_into_range,
    fit_into_range,
    fit_into_range_inclusive,
    map_into_range,
    map_into_range_inclusive,
    sign,
)
from dudes_in_space.utils.ranges import Range, RangeInclusive


def test_map_midpoint():
    assert map_into_range(5.0, (0.0, 10.0), (0.0, 100.0)) == 50.0


def test_map_endpoints():
    source = Range(2.0, 6.0)
    target = Range(-3.0, 9.0)
    assert map_into_range(source.start, source, target) == pytest.approx(target.start)
    assert map_into_range(source.end, source, target) == pytest.approx(target.end)


@pytest.mark.parametrize("x", [-4.0, 0.0, 1.5, 3.25, 12.0])
def test_map_roundtrip(x):
    source = (-1.0, 4.0)
    target = (10.0, 30.0)
    there = map_into_range(x, source, target)
    assert map_into_range(there, target, source) == pytest.approx(x)


def test_map_reversed_target():
    assert map_into_range(0.0, (0.0, 1.0), (5.0, -5.0)) == pytest.approx(5.0)


def test_fit_inside():
    assert fit_into_range(2.0, Range(0.0, 4.0), Range(0.0, 8.0)) == pytest.approx(
        map_into_range(2.0, (0.0, 4.0), (0.0, 8.0))
    )


def test_fit_at_half_open_end_raises():
    with pytest.raises(FitIntoRangeError) as info:
        fit_into_range(4.0, (0.0, 4.0), (0.0, 8.0))
    assert info.value.x == 4.0
    assert info.value.source == Range(0.0, 4.0)


def test_fit_below_raises():
    with pytest.raises(FitIntoRangeError):
        fit_into_range(-0.1, (0.0, 4.0), (0.0, 8.0))


def test_fit_inclusive_accepts_end():
    assert fit_into_range_inclusive(4.0, RangeInclusive(0.0, 4.0), (1.0, 8.0)) == pytest.approx(8.0)


def test_fit_inclusive_outside_raises():
    with pytest.raises(FitIntoRangeError) as info:
        fit_into_range_inclusive(5.0, (0.0, 4.0), (0.0, 8.0))
    assert info.value.target == RangeInclusive(0.0, 8.0)


def test_map_inclusive_matches_half_open():
    assert map_into_range_inclusive(1.5, (0.0, 3.0), (2.0, 4.0)) == pytest.approx(
        map_into_range(1.5, (0.0, 3.0), (2.0, 4.0))
    )


def test_clamp_above_gives_target_end():
    assert clamp_into_range(100.0, (0.0, 10.0), (-1.0, 1.0)) == pytest.approx(1.0)


def test_clamp_below_gives_target_start():
    assert clamp_into_range(-100.0, RangeInclusive(0.0, 10.0), (-1.0, 1.0)) == pytest.approx(-1.0)


def test_clamp_inside_equals_map():
    assert clamp_into_range(3.0, (0.0, 10.0), (0.0, 5.0)) == pytest.approx(
        map_into_range(3.0, (0.0, 10.0), (0.0, 5.0))
    )


@pytest.mark.parametrize("value, expected", [(0.0, 1.0), (2.5, 1.0), (-2.5, -1.0), (-1, -1), (7, 1)])
def test_sign(value, expected):
    assert sign(value) == expected