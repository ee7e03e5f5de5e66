"""
Tests for WCAG relative luminance and contrast ratio.
"""

import pytest

import huehash
from huehash.core.color import BLACK, WHITE, Color
from huehash.core.contrast import get_contrast_ratio, get_pass_fail, get_wcag_contrast
from huehash.core.luminance import get_luminance


class TestLuminance:

    def test_mid_gray(self):
        assert get_luminance(0.5, 0.5, 0.5) == pytest.approx(0.2140, abs=1e-3)

    def test_linear_segment(self):
        # At or below 0.03928 the channel is divided by 12.92
        assert get_luminance(0.03, 0.03, 0.03) == pytest.approx(0.03 / 12.92)

    def test_channel_weights(self):
        assert get_luminance(1.0, 0.0, 0.0) == pytest.approx(0.2126)
        assert get_luminance(0.0, 1.0, 0.0) == pytest.approx(0.7152)
        assert get_luminance(0.0, 0.0, 1.0) == pytest.approx(0.0722)

    def test_public_wrapper(self):
        assert huehash.luminance(WHITE) == pytest.approx(1.0)


class TestContrastRatio:

    def test_extremes(self):
        assert get_contrast_ratio(WHITE, BLACK) == pytest.approx(21.0)
        assert get_contrast_ratio(WHITE, WHITE) == pytest.approx(1.0)

    def test_symmetric(self):
        a = Color(0.2, 0.4, 0.6)
        b = Color(0.9, 0.8, 0.1)
        assert get_contrast_ratio(a, b) == get_contrast_ratio(b, a)

    def test_within_bounds(self):
        ratio = huehash.contrast_ratio(Color(0.3, 0.3, 0.3), Color(0.7, 0.1, 0.5))
        assert 1.0 <= ratio <= 21.0

    def test_wcag_against_white_and_black(self):
        data = get_wcag_contrast(0.0)
        assert data["white"]["ratio"] == 21.0
        assert data["black"]["ratio"] == 1.0
        assert set(data["white"]["levels"].values()) == {"Pass"}
        assert set(data["black"]["levels"].values()) == {"Fail"}

    @pytest.mark.parametrize("ratio, expected", [
        (2.9, {"AA-Large": "Fail", "AA": "Fail", "AAA-Large": "Fail", "AAA": "Fail"}),
        (3.0, {"AA-Large": "Pass", "AA": "Fail", "AAA-Large": "Fail", "AAA": "Fail"}),
        (4.5, {"AA-Large": "Pass", "AA": "Pass", "AAA-Large": "Pass", "AAA": "Fail"}),
        (7.0, {"AA-Large": "Pass", "AA": "Pass", "AAA-Large": "Pass", "AAA": "Pass"}),
    ])
    def test_pass_fail_levels(self, ratio, expected):
        assert get_pass_fail(ratio) == expected
