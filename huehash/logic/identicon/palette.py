#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huehash/logic/identicon/palette.py

from typing import NamedTuple, Optional

from huehash.core import config as c
from huehash.core.color import Color
from .prng import SeedState


class Palette(NamedTuple):
    foreground: Color
    background: Color
    spot: Color


def random_color(state: SeedState) -> Color:
    """Draw one HSL color: one draw for hue, one for saturation, four for lightness."""
    h = state.draw() * c.HUE_MAX
    s = (state.draw() * c.SATURATION_RANGE + c.SATURATION_FLOOR) / c.PERCENT
    # Averaging four draws keeps lightness away from near-black and near-white.
    L = sum(state.draw() for _ in range(c.LIGHTNESS_SAMPLES)) * c.LIGHTNESS_SAMPLE_WEIGHT / c.PERCENT
    return Color.from_hsl(h, s, L)


def select_palette(
    state: SeedState,
    foreground: Optional[Color] = None,
    background: Optional[Color] = None,
    spot: Optional[Color] = None,
) -> Palette:
    """Resolve foreground, background and spot in that order.

    A supplied color skips its draws entirely.
    """
    fg = foreground if foreground is not None else random_color(state)
    bg = background if background is not None else random_color(state)
    sp = spot if spot is not None else random_color(state)
    return Palette(fg, bg, sp)
