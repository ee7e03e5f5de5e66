#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huehash/logic/mix/engine.py

from huehash.core import config as c
from huehash.core.color import Color
from huehash.shared.clamping import _clamp01


def _lerp(a: float, b: float, t: float) -> float:
    return a + t * (b - a)


def mixed_hue(source: float, target: float) -> float:
    """Signed hue delta in degrees along the shorter arc."""
    h_diff = target - source
    if h_diff > c.HUE_HALF:
        h_diff -= c.HUE_MAX
    elif h_diff < -c.HUE_HALF:
        h_diff += c.HUE_MAX
    return h_diff


def mix(color_a: Color, color_b: Color, weight: float = c.DEFAULT_MIX_WEIGHT, space: str = "rgb") -> Color:
    """Interpolate from color_a toward color_b in the given color space.

    weight is clipped to [0, 1]. Alpha is always interpolated linearly. In hsl
    and hsb the hue travels the shorter way around the circle.
    """
    t = _clamp01(weight)
    alpha = _lerp(color_a.alpha, color_b.alpha, t)

    if space == "rgb":
        return Color(
            _lerp(color_a.red, color_b.red, t),
            _lerp(color_a.green, color_b.green, t),
            _lerp(color_a.blue, color_b.blue, t),
            alpha,
        )

    if space in ("hsl", "hsb"):
        h1, s1, v1 = getattr(color_a, space)
        h2, s2, v2 = getattr(color_b, space)
        h_new = (h1 + t * mixed_hue(h1, h2)) % c.HUE_MAX
        build = Color.from_hsl if space == "hsl" else Color.from_hsb
        return build(h_new, _lerp(s1, s2, t), _lerp(v1, v2, t), alpha)

    if space == "lab":
        l1, a1, b1 = color_a.lab
        l2, a2, b2 = color_b.lab
        return Color.from_lab(_lerp(l1, l2, t), _lerp(a1, a2, t), _lerp(b1, b2, t), alpha)

    raise ValueError(f"unknown color space: '{space}'")
