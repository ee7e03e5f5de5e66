#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huehash/logic/adjust/filters.py

from huehash.core import config as c
from huehash.core.color import BLACK, WHITE, Color
from huehash.logic.mix.engine import mix
from huehash.shared.clamping import _clamp01


def _hsl_shift(color: Color, hue: float = 0.0, saturation: float = 0.0, lightness: float = 0.0) -> Color:
    """Shift HSL components; the result is clipped back into range."""
    h, s, L = color.hsl
    return Color.from_hsl(h + hue, s + saturation, L + lightness, color.alpha)


def lighter(color: Color, amount: float = c.DEFAULT_ADJUST_AMOUNT) -> Color:
    return _hsl_shift(color, lightness=amount)


def darken(color: Color, amount: float = c.DEFAULT_ADJUST_AMOUNT) -> Color:
    return _hsl_shift(color, lightness=-amount)


def saturate(color: Color, amount: float = c.DEFAULT_ADJUST_AMOUNT) -> Color:
    return _hsl_shift(color, saturation=amount)


def desaturate(color: Color, amount: float = c.DEFAULT_ADJUST_AMOUNT) -> Color:
    return _hsl_shift(color, saturation=-amount)


def adjusted_hue(color: Color, degrees: float) -> Color:
    """Rotate the hue by degrees, wrapping mod 360."""
    return _hsl_shift(color, hue=degrees)


def complement(color: Color) -> Color:
    return adjusted_hue(color, c.HUE_HALF)


def grayscale(color: Color, mode: str = c.DEFAULT_GRAYSCALE_MODE) -> Color:
    """Fully desaturate a color.

    Modes:
      luminance  0.299r + 0.587g + 0.114b
      lightness  (max + min) / 2
      average    (r + g + b) / 3
      value      max(r, g, b)
    """
    r, g, b = color.rgb
    if mode == "luminance":
        L = c.GRAY_LUMA_R * r + c.GRAY_LUMA_G * g + c.GRAY_LUMA_B * b
    elif mode == "lightness":
        L = (max(r, g, b) + min(r, g, b)) / c.DIV_2
    elif mode == "average":
        L = (r + g + b) / c.DIV_3
    elif mode == "value":
        L = max(r, g, b)
    else:
        raise ValueError(f"unknown grayscale mode: '{mode}'")
    return Color.from_hsl(0.0, 0.0, L, color.alpha)


def invert(color: Color) -> Color:
    return Color(c.UNIT - color.red, c.UNIT - color.green, c.UNIT - color.blue, color.alpha)


def adjusted_alpha(color: Color, amount: float) -> Color:
    return color.with_alpha(_clamp01(color.alpha + amount))


def tint(color: Color, amount: float = c.DEFAULT_ADJUST_AMOUNT) -> Color:
    """Mix toward white in RGB."""
    return mix(color, WHITE, amount)


def shade(color: Color, amount: float = c.DEFAULT_ADJUST_AMOUNT) -> Color:
    """Mix toward black in RGB."""
    return mix(color, BLACK, amount)
