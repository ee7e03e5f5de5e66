#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huehash/core/color.py

import math
import re
from dataclasses import dataclass, replace
from typing import Tuple, Union

from . import config as c
from . import conversions as conv
from .contrast import get_contrast_ratio
from .errors import InvalidHexString
from .luminance import get_luminance
from huehash.shared.clamping import _clamp01

# Leading '#' characters are skipped, an optional 0x prefix is accepted and
# the longest run of hex digits that follows is read.
HEX_PREFIX_REGEX = re.compile(r"#*(?:0[xX])?([0-9a-fA-F]+)")
UINT64_MAX = 0xFFFFFFFFFFFFFFFF
BYTE_MASK = 0xFF
ALPHA_HEX_MIN_LEN = 8


def _round_to_byte(x: float) -> int:
    """Quantize a channel to 0..255, clipping out-of-range values."""
    if not x > 0:
        return 0
    return int(math.floor(_clamp01(x) * c.RGB_MAX + 0.5))


@dataclass(frozen=True)
class Color:
    """Normalized RGBA color. Channels are not clamped on construction."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    # ==========================================
    # Construction
    # ==========================================

    @classmethod
    def parse_strict(cls, text: str) -> "Color":
        """Parse '#RRGGBB' or '#RRGGBBAA', raising InvalidHexString on failure."""
        trimmed = str(text).strip()
        match = HEX_PREFIX_REGEX.match(trimmed)
        if not match:
            raise InvalidHexString(text)
        value = min(int(match.group(1), 16), UINT64_MAX)
        return cls.from_int(value, use_alpha=len(trimmed) >= ALPHA_HEX_MIN_LEN)

    from_hex = parse_strict

    @classmethod
    def parse_lenient(cls, text: str) -> "Color":
        """Parse a hex string, falling back to opaque black."""
        try:
            return cls.parse_strict(text)
        except InvalidHexString:
            return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_int(cls, value: int, use_alpha: bool = False) -> "Color":
        """Build a color from packed 0xRRGGBB, or 0xRRGGBBAA when use_alpha is set."""
        if not use_alpha and value > c.MAX_DEC:
            value = c.MAX_DEC
        r = value >> (24 if use_alpha else 16) & BYTE_MASK
        g = value >> (16 if use_alpha else 8) & BYTE_MASK
        b = value >> (8 if use_alpha else 0) & BYTE_MASK
        a = value & BYTE_MASK if use_alpha else BYTE_MASK
        return cls(r / c.RGB_MAX, g / c.RGB_MAX, b / c.RGB_MAX, a / c.RGB_MAX)

    @classmethod
    def from_hsl(cls, h: float, s: float, L: float, alpha: float = 1.0) -> "Color":
        return cls(*conv.hsl_to_rgb(h, s, L), _clamp01(alpha))

    @classmethod
    def from_hsb(cls, h: float, s: float, v: float, alpha: float = 1.0) -> "Color":
        return cls(*conv.hsb_to_rgb(h, s, v), _clamp01(alpha))

    @classmethod
    def from_xyz(cls, x: float, y: float, z: float, alpha: float = 1.0) -> "Color":
        return cls(*conv.xyz_to_rgb(x, y, z), alpha)

    @classmethod
    def from_lab(cls, L: float, a: float, b: float, alpha: float = 1.0) -> "Color":
        return cls(*conv.lab_to_rgb(L, a, b), alpha)

    # ==========================================
    # Export
    # ==========================================

    @property
    def rgb(self) -> Tuple[float, float, float]:
        return (self.red, self.green, self.blue)

    @property
    def rgba(self) -> Tuple[float, float, float, float]:
        return (self.red, self.green, self.blue, self.alpha)

    def to_int(self) -> int:
        """Packed 24-bit 0xRRGGBB."""
        return (
            _round_to_byte(self.red) << 16
            | _round_to_byte(self.green) << 8
            | _round_to_byte(self.blue)
        )

    def to_rgba_int(self) -> int:
        """Packed 32-bit 0xRRGGBBAA."""
        return self.to_int() << 8 | _round_to_byte(self.alpha)

    def to_abgr_int(self) -> int:
        """Packed 32-bit 0xAABBGGRR."""
        return (
            _round_to_byte(self.alpha) << 24
            | _round_to_byte(self.blue) << 16
            | _round_to_byte(self.green) << 8
            | _round_to_byte(self.red)
        )

    def to_hex(self, alpha: bool = False) -> str:
        if alpha:
            return f"#{self.to_rgba_int():08x}"
        return f"#{self.to_int():06x}"

    def is_equal_to_hex(self, other: Union[str, int]) -> bool:
        if isinstance(other, int):
            return self.to_int() == other
        return self.to_hex() == other

    def clipped(self) -> "Color":
        return Color(
            _clamp01(self.red), _clamp01(self.green), _clamp01(self.blue), _clamp01(self.alpha)
        )

    def with_alpha(self, alpha: float) -> "Color":
        return replace(self, alpha=alpha)

    # ==========================================
    # Color space views
    # ==========================================

    @property
    def hsl(self) -> Tuple[float, float, float]:
        """(hue degrees, saturation, lightness)."""
        return conv.rgb_to_hsl(self.red, self.green, self.blue)

    @property
    def hsb(self) -> Tuple[float, float, float]:
        """(hue degrees, saturation, brightness)."""
        return conv.rgb_to_hsb(self.red, self.green, self.blue)

    @property
    def xyz(self) -> Tuple[float, float, float]:
        return conv.rgb_to_xyz(self.red, self.green, self.blue)

    @property
    def lab(self) -> Tuple[float, float, float]:
        return conv.rgb_to_lab(self.red, self.green, self.blue)

    # ==========================================
    # Perception
    # ==========================================

    @property
    def luminance(self) -> float:
        return get_luminance(self.red, self.green, self.blue)

    def contrast_ratio(self, other: "Color") -> float:
        return get_contrast_ratio(self, other)

    def is_light(self) -> bool:
        brightness = (
            self.red * c.BRIGHTNESS_R
            + self.green * c.BRIGHTNESS_G
            + self.blue * c.BRIGHTNESS_B
        ) / c.BRIGHTNESS_DIV
        return brightness >= c.BRIGHTNESS_LIGHT_TH


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
