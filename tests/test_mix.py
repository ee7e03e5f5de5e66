"""
Tests for mixing two colors across color spaces.
"""

import pytest

import huehash
from huehash.core.color import Color
from huehash.logic.mix.engine import mix, mixed_hue

SPACES = ("rgb", "hsl", "hsb", "lab")


class TestBoundaries:
    """Weight 0 returns the first color, weight 1 the second."""

    @pytest.mark.parametrize("space", SPACES)
    def test_weight_zero(self, color_pair, space):
        a, b = color_pair
        result = mix(a, b, 0.0, space)
        assert result.rgb == pytest.approx(a.rgb, abs=1e-2)
        assert result.alpha == pytest.approx(a.alpha)

    @pytest.mark.parametrize("space", SPACES)
    def test_weight_one(self, color_pair, space):
        a, b = color_pair
        result = mix(a, b, 1.0, space)
        assert result.rgb == pytest.approx(b.rgb, abs=1e-2)
        assert result.alpha == pytest.approx(b.alpha)

    @pytest.mark.parametrize("space", SPACES)
    def test_weight_is_clipped(self, color_pair, space):
        a, b = color_pair
        assert mix(a, b, 2.0, space) == mix(a, b, 1.0, space)
        assert mix(a, b, -1.0, space) == mix(a, b, 0.0, space)


class TestInterpolation:

    def test_rgb_midpoint(self):
        result = mix(Color(0.0, 0.0, 0.0, 0.0), Color(1.0, 0.5, 0.25, 1.0))
        assert result.rgba == pytest.approx((0.5, 0.25, 0.125, 0.5))

    def test_alpha_is_linear_in_every_space(self):
        a = Color(1.0, 0.0, 0.0, 0.0)
        b = Color(0.0, 0.0, 1.0, 1.0)
        for space in SPACES:
            assert mix(a, b, 0.25, space).alpha == pytest.approx(0.25)

    def test_hsl_takes_shorter_arc(self):
        a = Color.from_hsl(10.0, 1.0, 0.5)
        b = Color.from_hsl(350.0, 1.0, 0.5)
        # Midpoint crosses 0deg, which is pure red
        assert mix(a, b, 0.5, "hsl").rgb == pytest.approx((1.0, 0.0, 0.0), abs=1e-6)

    def test_hsb_takes_shorter_arc(self):
        a = Color.from_hsb(20.0, 1.0, 1.0)
        b = Color.from_hsb(340.0, 1.0, 1.0)
        assert mix(a, b, 0.5, "hsb").rgb == pytest.approx((1.0, 0.0, 0.0), abs=1e-6)

    def test_unknown_space(self, color_pair):
        with pytest.raises(ValueError):
            mix(*color_pair, 0.5, "cmyk")

    def test_public_export(self):
        assert huehash.mix is mix


class TestMixedHue:

    @pytest.mark.parametrize("source, target, delta", [
        (10.0, 50.0, 40.0),
        (350.0, 10.0, 20.0),
        (10.0, 350.0, -20.0),
        (0.0, 180.0, 180.0),
        (90.0, 0.0, -90.0),
    ])
    def test_delta(self, source, target, delta):
        assert mixed_hue(source, target) == pytest.approx(delta)

    def test_never_longer_than_half_turn(self):
        for source in range(0, 360, 15):
            for target in range(0, 360, 15):
                assert abs(mixed_hue(float(source), float(target))) <= 180.0
