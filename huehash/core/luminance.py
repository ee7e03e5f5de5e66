#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huehash/core/luminance.py

from . import config as c


def _wcag_to_linear(color_comp: float) -> float:
    if color_comp <= c.WCAG_LINEAR_TH:
        return color_comp / c.SRGB_SLOPE
    return ((color_comp + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


def get_luminance(r: float, g: float, b: float) -> float:
    """WCAG relative luminance of normalized sRGB channels."""
    return (
        c.LUMA_R * _wcag_to_linear(r) +
        c.LUMA_G * _wcag_to_linear(g) +
        c.LUMA_B * _wcag_to_linear(b)
    )
