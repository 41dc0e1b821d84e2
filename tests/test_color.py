import pytest

from dudes_in_space.utils.color import Color


def test_from_rgb24_is_opaque():
    c = Color.from_rgb24(0, 0, 0)
    assert c.a == 1.0
    assert (c.r, c.g, c.b) == (0.0, 0.0, 0.0)


def test_from_rgb24_scales_by_256():
    c = Color.from_rgb24(128, 64, 32)
    assert c.r * 256 == 128
    assert c.g * 256 == 64
    assert c.b * 256 == 32


def test_from_rgb24_rejects_out_of_range():
    with pytest.raises(ValueError):
        Color.from_rgb24(256, 0, 0)


def test_hsv_without_saturation_is_grey():
    c = Color.from_hsv(0.5, 0.3, 0.0, 0.7)
    assert c.a == 0.5
    assert c.r == c.g == c.b == pytest.approx(0.7)


def test_hsv_pure_red():
    c = Color.from_hsv(1.0, 0.0, 1.0, 1.0)
    assert (c.r, c.g, c.b) == (1.0, 0.0, 0.0)


@pytest.mark.parametrize("h", [0.05, 0.2, 0.4, 0.55, 0.7, 0.9])
def test_hsv_extremes_match_value_and_saturation(h):
    v, s = 0.8, 0.6
    c = Color.from_hsv(1.0, h, s, v)
    channels = (c.r, c.g, c.b)
    assert max(channels) == pytest.approx(v)
    assert min(channels) == pytest.approx(v * (1.0 - s))


def test_hue_wraps_at_one():
    assert Color.from_hsv(1.0, 1.0, 0.5, 0.5) == Color.from_hsv(1.0, 0.0, 0.5, 0.5)


def test_with_changes_only_one_channel():
    base = Color(0.1, 0.2, 0.3, 0.4)
    assert base.with_a(0.9) == Color(0.9, 0.2, 0.3, 0.4)
    assert base.with_r(0.9) == Color(0.1, 0.9, 0.3, 0.4)
    assert base.with_g(0.9) == Color(0.1, 0.2, 0.9, 0.4)
    assert base.with_b(0.9) == Color(0.1, 0.2, 0.3, 0.9)


def test_map_applies_function_to_one_channel():
    base = Color(0.1, 0.2, 0.3, 0.4)
    double = lambda x: x * 2
    assert base.map_a(double) == Color(0.2, 0.2, 0.3, 0.4)
    assert base.map_r(double) == Color(0.1, 0.4, 0.3, 0.4)
    assert base.map_g(double) == Color(0.1, 0.2, 0.6, 0.4)
    assert base.map_b(double) == Color(0.1, 0.2, 0.3, 0.8)