"""
Tests for the Color value type: hex parsing, packed integers and perception.
"""

import pytest

from huehash.core.color import BLACK, WHITE, Color
from huehash.core.errors import HuehashError, InvalidHexString


class TestHexParsing:
    """Strict and lenient hex parsing."""

    def test_six_digits(self):
        assert Color.parse_strict("#ff0000") == Color(1.0, 0.0, 0.0, 1.0)

    def test_without_hash(self):
        assert Color.parse_strict("00ff00") == Color(0.0, 1.0, 0.0, 1.0)

    def test_eight_digits_reads_alpha(self):
        color = Color.parse_strict("#ff000080")
        assert color.rgb == (1.0, 0.0, 0.0)
        assert color.alpha == pytest.approx(128 / 255)

    def test_surrounding_whitespace_is_trimmed(self):
        assert Color.parse_strict("  #0000ff  ") == Color(0.0, 0.0, 1.0)

    def test_leading_hex_run_only(self):
        # Parsing stops at the first non-hex character
        assert Color.parse_strict("#12zz") == Color(0.0, 0.0, 0x12 / 255)

    def test_short_value_is_low_bytes(self):
        assert Color.parse_strict("#fff") == Color(0.0, 0x0F / 255, 1.0)

    def test_from_hex_alias(self):
        assert Color.from_hex("#336699") == Color.parse_strict("#336699")

    @pytest.mark.parametrize("text", ["", "#", "zzz", "#gg0000", "   "])
    def test_invalid_raises(self, text):
        with pytest.raises(InvalidHexString) as info:
            Color.parse_strict(text)
        assert info.value.value == text

    def test_invalid_is_value_error(self):
        with pytest.raises(ValueError):
            Color.parse_strict("nope")
        with pytest.raises(HuehashError):
            Color.parse_strict("nope")

    def test_lenient_falls_back_to_black(self):
        assert Color.parse_lenient("nope") == BLACK
        assert Color.parse_lenient("#ffffff") == WHITE


class TestPackedIntegers:

    def test_from_int_caps_rgb(self):
        assert Color.from_int(0x1FFFFFF) == WHITE

    def test_from_int_alpha(self):
        assert Color.from_int(0x00FF0000, use_alpha=True) == Color(0.0, 1.0, 0.0, 0.0)

    def test_to_int_rounds_half_up(self):
        color = Color(1.0, 0.5, 0.0)
        assert color.to_int() == 0xFF8000
        assert color.to_rgba_int() == 0xFF8000FF
        assert color.to_abgr_int() == 0xFF0080FF

    def test_out_of_range_channels_clip_on_export(self):
        assert Color(1.5, -0.2, 0.0).to_int() == 0xFF0000

    def test_hex_is_lowercase(self):
        assert Color.parse_strict("#ABCDEF").to_hex() == "#abcdef"

    def test_hex_with_alpha(self):
        assert Color(1.0, 1.0, 1.0, 0.0).to_hex(alpha=True) == "#ffffff00"

    def test_is_equal_to_hex(self):
        color = Color.parse_strict("#336699")
        assert color.is_equal_to_hex("#336699")
        assert color.is_equal_to_hex(0x336699)
        assert not color.is_equal_to_hex("#336698")


class TestColorValue:

    def test_channels_not_clamped_on_construction(self):
        color = Color(1.5, -0.5, 0.0)
        assert color.red == 1.5
        assert color.clipped() == Color(1.0, 0.0, 0.0)

    def test_frozen(self):
        with pytest.raises(AttributeError):
            BLACK.red = 1.0

    def test_with_alpha(self, red):
        assert red.with_alpha(0.25) == Color(1.0, 0.0, 0.0, 0.25)
        assert red.alpha == 1.0

    def test_hsl_view(self, steel):
        h, s, L = steel.hsl
        assert h == pytest.approx(210.0)
        assert s == pytest.approx(0.5)
        assert L == pytest.approx(0.4)

    def test_from_hsl_clips_alpha(self):
        assert Color.from_hsl(0.0, 1.0, 0.5, alpha=3.0).alpha == 1.0


class TestPerception:

    def test_luminance_extremes(self):
        assert WHITE.luminance == pytest.approx(1.0)
        assert BLACK.luminance == 0.0

    def test_contrast_ratio_white_black(self):
        assert WHITE.contrast_ratio(BLACK) == pytest.approx(21.0)

    @pytest.mark.parametrize("color, expected", [
        (WHITE, True),
        (BLACK, False),
        (Color(0.5, 0.5, 0.5), True),
        (Color(0.0, 0.0, 1.0), False),
        (Color(1.0, 1.0, 0.0), True),
    ])
    def test_is_light(self, color, expected):
        assert color.is_light() is expected
