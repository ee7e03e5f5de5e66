"""
Tests for log level row tints.
"""

import pytest

from huehash.core.color import Color
from huehash.core.levels import LEVEL_TINTS, LogLevel, level_color

WHITE_TINT = Color(1.0, 1.0, 1.0)
DARK_DEFAULT = Color(0.11, 0.11, 0.12)


class TestLevelColor:

    @pytest.mark.parametrize("level", [LogLevel.UNDEFINED, LogLevel.DEBUG, LogLevel.INFO, LogLevel.NOTICE])
    def test_default_tint(self, level):
        assert level_color(level) == WHITE_TINT
        assert level_color(level, dark=True) == DARK_DEFAULT

    def test_error(self):
        assert level_color(LogLevel.ERROR) == Color(1.0, 0.968, 0.898)
        dark = level_color(LogLevel.ERROR, dark=True)
        assert dark == Color(0.858, 0.717, 0.603, 0.4)
        assert dark.to_hex(alpha=True) == "#dbb79a66"

    def test_fault(self):
        assert level_color(LogLevel.FAULT) == Color(0.98, 0.90, 0.90)
        assert level_color(LogLevel.FAULT, dark=True) == Color(0.26, 0.15, 0.17)

    def test_accepts_names(self):
        assert level_color("error") == level_color(LogLevel.ERROR)
        assert level_color(" FAULT ", dark=True) == level_color(LogLevel.FAULT, dark=True)

    def test_unknown_name_falls_back(self):
        assert level_color("verbose") == WHITE_TINT
        assert level_color(None, dark=True) == DARK_DEFAULT

    def test_every_level_has_a_tint(self):
        assert set(LEVEL_TINTS) == set(LogLevel)
