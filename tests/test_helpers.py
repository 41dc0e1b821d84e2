from datetime import timedelta

import pytest

from dudes_in_space.geom.noneg import NegError, noneg_float
from dudes_in_space.utils.helpers import (
    RequiredToBeInRangeError,
    drain_energy,
    normalize,
    normalize_opt,
    pretty_duration,
    required_to_be_in_range,
    transfer_energy,
)
from dudes_in_space.utils.ranges import Range, RangeInclusive


def test_normalize_scales_by_max():
    values = [1.0, 2.0, 4.0]
    result = normalize(values)
    assert max(result) == 1.0
    assert all(r * max(values) == pytest.approx(v) for r, v in zip(result, values))


def test_normalize_empty_raises():
    with pytest.raises(ValueError):
        normalize([])


def test_normalize_opt_keeps_gaps():
    result = normalize_opt([None, 2.0, 8.0, None])
    assert result[0] is None and result[3] is None
    assert result[2] == 1.0
    assert result[1] * 8.0 == pytest.approx(2.0)


def test_normalize_opt_all_missing_raises():
    with pytest.raises(ValueError):
        normalize_opt([None, None])


def test_transfer_energy_conserves_total():
    result = transfer_energy(noneg_float(5.0), noneg_float(0.0), noneg_float(2.0), noneg_float(10.0))
    assert result.dst == noneg_float(2.0)
    assert result.source.unwrap() + result.dst.unwrap() == pytest.approx(5.0)
    assert result.completely_drained is False


def test_transfer_energy_drains_source():
    result = transfer_energy(noneg_float(1.5), noneg_float(0.0), noneg_float(4.0), noneg_float(10.0))
    assert result.source == noneg_float(0.0)
    assert result.dst == noneg_float(1.5)
    assert result.completely_drained is True


def test_transfer_energy_respects_capacity():
    result = transfer_energy(noneg_float(5.0), noneg_float(9.0), noneg_float(3.0), noneg_float(10.0))
    assert result.dst == noneg_float(10.0)
    assert result.source.unwrap() + result.dst.unwrap() == pytest.approx(14.0)


def test_transfer_energy_over_capacity_raises():
    with pytest.raises(NegError):
        transfer_energy(noneg_float(5.0), noneg_float(12.0), noneg_float(1.0), noneg_float(10.0))


def test_drain_energy():
    partial = drain_energy(noneg_float(5.0), noneg_float(2.0))
    assert partial.source.unwrap() + 2.0 == pytest.approx(5.0)
    assert partial.completely_drained is False
    full = drain_energy(noneg_float(1.0), noneg_float(2.0))
    assert full.source == noneg_float(0.0)
    assert full.completely_drained is True


def test_pretty_duration_pinned():
    assert pretty_duration(timedelta(days=2)) == "2.00 d"
    assert pretty_duration(timedelta(hours=3)) == "3.00 h"


@pytest.mark.parametrize(
    "duration, suffix",
    [
        (timedelta(minutes=5), " m"),
        (timedelta(seconds=5), " s"),
        (timedelta(milliseconds=5), " ms"),
        (timedelta(microseconds=5), " µs"),
        (timedelta(0), " ns"),
    ],
)
def test_pretty_duration_units(duration, suffix):
    assert pretty_duration(duration).endswith(suffix)


def test_pretty_duration_negative_raises():
    with pytest.raises(ValueError):
        pretty_duration(timedelta(seconds=-1))


def test_required_to_be_in_range_accepts():
    assert required_to_be_in_range(0.5, Range(0.0, 1.0)) == 0.5
    assert required_to_be_in_range([0.0, 1.0], RangeInclusive(0.0, 1.0)) == [0.0, 1.0]


def test_required_to_be_in_range_rejects():
    with pytest.raises(RequiredToBeInRangeError) as info:
        required_to_be_in_range(1.0, Range(0.0, 1.0))
    assert info.value.value == 1.0
    with pytest.raises(RequiredToBeInRangeError):
        required_to_be_in_range([0.5, 2.0], RangeInclusive(0.0, 1.0))