#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huehash/core/conversions.py

import functools
import math
from typing import Tuple

from . import config as c
from huehash.shared.clamping import _clamp, _clamp01


def _round_decimal(x: float, precision: float = c.ROUND_PRECISION) -> float:
    """Round to 1/precision, halves away from zero."""
    return math.copysign(math.floor(abs(x) * precision + 0.5), x) / precision


def rgb_to_hsl(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert normalized RGB to HSL (hue in degrees)."""
    cmax = max(r, g, b)
    cmin = min(r, g, b)
    delta = cmax - cmin
    L = (cmax + cmin) / c.DIV_2
    h = 0.0
    s = 0.0
    if delta != 0:
        if L < 0.5:
            s = delta / (cmax + cmin)
        else:
            s = delta / (c.DIV_2 - cmax - cmin)
        if r == cmax:
            h = (g - b) / delta + (c.HSL_HUE_MOD if g < b else 0.0)
        elif g == cmax:
            h = (b - r) / delta + c.DIV_2
        else:
            h = (r - g) / delta + 4.0
    return (h / c.HSL_HUE_MOD) * c.HUE_MAX, s, L


def _hue_to_rgb(m1: float, m2: float, h: float) -> float:
    """Resolve one channel from the HSL m1/m2 pair and a hue fraction."""
    hue = h % c.UNIT
    if hue * 6.0 < c.UNIT:
        return m1 + (m2 - m1) * hue * 6.0
    if hue * 2.0 < c.UNIT:
        return m2
    if hue * 3.0 < 1.9999:
        return m1 + (m2 - m1) * ((2.0 / 3.0) - hue) * 6.0
    return m1


def hsl_to_rgb(h: float, s: float, L: float) -> Tuple[float, float, float]:
    """Convert HSL (hue in degrees) to normalized RGB."""
    h = (h % c.HUE_MAX) / c.HUE_MAX
    s = _clamp01(s)
    L = _clamp01(L)
    m2 = L * (s + c.UNIT) if L <= 0.5 else (L + s) - (L * s)
    m1 = (L * c.DIV_2) - m2
    return (
        _hue_to_rgb(m1, m2, h + c.UNIT / 3.0),
        _hue_to_rgb(m1, m2, h),
        _hue_to_rgb(m1, m2, h - c.UNIT / 3.0),
    )


def rgb_to_hsb(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert normalized RGB to HSB (hue in degrees)."""
    if r == g == b == 0.0:
        return (0.0, 0.0, 0.0)
    if r == g == b == c.UNIT:
        return (0.0, 0.0, c.UNIT)
    cmax = max(r, g, b)
    cmin = min(r, g, b)
    delta = cmax - cmin
    v = cmax
    if delta == 0:
        return (0.0, 0.0, v)
    s = delta / v if v != 0 else 0.0
    if cmax == r:
        h = c.HUE_SECTOR * (((g - b) / delta) % c.HSL_HUE_MOD)
    elif cmax == g:
        h = c.HUE_SECTOR * ((b - r) / delta + c.DIV_2)
    else:
        h = c.HUE_SECTOR * ((r - g) / delta + 4.0)
    return (h % c.HUE_MAX, s, v)


def hsb_to_rgb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """Convert HSB (hue in degrees) to normalized RGB."""
    h = h % c.HUE_MAX
    s = _clamp01(s)
    v = _clamp01(v)
    chroma = v * s
    x = chroma * (c.UNIT - abs(((h / c.HUE_SECTOR) % c.DIV_2) - c.UNIT))
    m = v - chroma
    if 0 <= h < 60:
        r_p, g_p, b_p = chroma, x, 0
    elif 60 <= h < 120:
        r_p, g_p, b_p = x, chroma, 0
    elif 120 <= h < 180:
        r_p, g_p, b_p = 0, chroma, x
    elif 180 <= h < 240:
        r_p, g_p, b_p = 0, x, chroma
    elif 240 <= h < 300:
        r_p, g_p, b_p = x, 0, chroma
    else:
        r_p, g_p, b_p = chroma, 0, x
    return _clamp01(r_p + m), _clamp01(g_p + m), _clamp01(b_p + m)


def _srgb_to_linear(color_comp: float) -> float:
    """Linearize a gamma-encoded sRGB component."""
    if color_comp > c.SRGB_TO_LINEAR_TH:
        return ((color_comp + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA
    return color_comp / c.SRGB_SLOPE


def _linear_to_srgb(l_val: float) -> float:
    """Apply sRGB gamma to a linear component."""
    if l_val > c.LINEAR_TO_SRGB_TH:
        return c.SRGB_DIVISOR * (l_val ** (c.UNIT / c.SRGB_GAMMA)) - c.SRGB_OFFSET
    return l_val * c.SRGB_SLOPE


def rgb_to_xyz(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert normalized RGB to CIE XYZ (Y of white = 100)."""
    r_lin = _srgb_to_linear(r)
    g_lin = _srgb_to_linear(g)
    b_lin = _srgb_to_linear(b)
    x = r_lin * c.M_SRGB_XYZ_X[0] + g_lin * c.M_SRGB_XYZ_X[1] + b_lin * c.M_SRGB_XYZ_X[2]
    y = r_lin * c.M_SRGB_XYZ_Y[0] + g_lin * c.M_SRGB_XYZ_Y[1] + b_lin * c.M_SRGB_XYZ_Y[2]
    z = r_lin * c.M_SRGB_XYZ_Z[0] + g_lin * c.M_SRGB_XYZ_Z[1] + b_lin * c.M_SRGB_XYZ_Z[2]
    return (
        _round_decimal(x * c.XYZ_SCALING),
        _round_decimal(y * c.XYZ_SCALING),
        _round_decimal(z * c.XYZ_SCALING),
    )


def xyz_to_rgb(x: float, y: float, z: float) -> Tuple[float, float, float]:
    """Convert CIE XYZ to normalized RGB.

    XYZ is clipped to the D65 white point first. The gamma-encoded result is
    rounded to three decimals and taken by absolute value, which folds small
    negative rounding noise back into range (and also folds genuinely
    out-of-gamut negatives).
    """
    x_n = _clamp(x, 0.0, c.D65_X) / c.XYZ_SCALING
    y_n = _clamp(y, 0.0, c.D65_Y) / c.XYZ_SCALING
    z_n = _clamp(z, 0.0, c.D65_Z) / c.XYZ_SCALING
    r_lin = x_n * c.M_XYZ_SRGB_R[0] + y_n * c.M_XYZ_SRGB_R[1] + z_n * c.M_XYZ_SRGB_R[2]
    g_lin = x_n * c.M_XYZ_SRGB_G[0] + y_n * c.M_XYZ_SRGB_G[1] + z_n * c.M_XYZ_SRGB_G[2]
    b_lin = x_n * c.M_XYZ_SRGB_B[0] + y_n * c.M_XYZ_SRGB_B[1] + z_n * c.M_XYZ_SRGB_B[2]
    return (
        abs(_round_decimal(_linear_to_srgb(r_lin))),
        abs(_round_decimal(_linear_to_srgb(g_lin))),
        abs(_round_decimal(_linear_to_srgb(b_lin))),
    )


def _xyz_f(t: float) -> float:
    """Helper function for XYZ to LAB."""
    return t ** c.LAB_POW if t > c.LAB_E else (c.LAB_K * t) + c.LAB_OFFSET


def _xyz_f_inv(t: float) -> float:
    """Helper function for LAB to XYZ."""
    cube = t ** 3
    return cube if cube > c.LAB_E else (t - c.LAB_OFFSET) / c.LAB_K


def xyz_to_lab(x: float, y: float, z: float) -> Tuple[float, float, float]:
    """Convert XYZ to CIE LAB."""
    x_r = _xyz_f(x / c.D65_X)
    y_r = _xyz_f(y / c.D65_Y)
    z_r = _xyz_f(z / c.D65_Z)
    L = _round_decimal((c.LAB_L_MULT * y_r) - c.LAB_L_SUB)
    a = _round_decimal(c.LAB_A_MULT * (x_r - y_r))
    b = _round_decimal(c.LAB_B_MULT * (y_r - z_r))
    return L, a, b


def lab_to_xyz(L: float, a: float, b: float) -> Tuple[float, float, float]:
    """Convert CIE LAB to XYZ, clipping L to [0, 100] and a/b to [-128, 127]."""
    L = _clamp(L, 0.0, c.LAB_L_MAX)
    a = _clamp(a, c.LAB_AB_MIN, c.LAB_AB_MAX)
    b = _clamp(b, c.LAB_AB_MIN, c.LAB_AB_MAX)
    y_r = (L + c.LAB_L_SUB) / c.LAB_L_MULT
    x_r = a / c.LAB_A_MULT + y_r
    z_r = y_r - b / c.LAB_B_MULT
    return (
        _xyz_f_inv(x_r) * c.D65_X,
        _xyz_f_inv(y_r) * c.D65_Y,
        _xyz_f_inv(z_r) * c.D65_Z,
    )


def rgb_to_lab(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Direct RGB to LAB conversion."""
    return xyz_to_lab(*rgb_to_xyz(r, g, b))


def lab_to_rgb(L: float, a: float, b: float) -> Tuple[float, float, float]:
    """Direct LAB to RGB conversion."""
    return xyz_to_rgb(*lab_to_xyz(L, a, b))


# Apply LRU caching to all functions in this module
for _name, _obj in list(globals().items()):
    if callable(_obj) and getattr(_obj, "__module__", None) == __name__:
        globals()[_name] = functools.lru_cache(maxsize=c.LRU_CACHE_SIZE)(_obj)
