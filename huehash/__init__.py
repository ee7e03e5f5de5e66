#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huehash/__init__.py

__version__ = "0.1.0"

from huehash.core.color import BLACK, WHITE, Color
from huehash.core.errors import (
    AllocationFailure,
    HuehashError,
    InvalidDimensions,
    InvalidHexString,
)
from huehash.core.levels import LogLevel, level_color
from huehash.logic.adjust.filters import grayscale
from huehash.logic.identicon.engine import IdenticonSession, generate_identicon
from huehash.logic.mix.engine import mix


def luminance(color: Color) -> float:
    """WCAG relative luminance of a color, in [0, 1]."""
    return color.luminance


def contrast_ratio(color_a: Color, color_b: Color) -> float:
    """WCAG contrast ratio between two colors, in [1, 21]."""
    return color_a.contrast_ratio(color_b)


__all__ = [
    "AllocationFailure",
    "BLACK",
    "Color",
    "HuehashError",
    "IdenticonSession",
    "InvalidDimensions",
    "InvalidHexString",
    "LogLevel",
    "WHITE",
    "contrast_ratio",
    "generate_identicon",
    "grayscale",
    "level_color",
    "luminance",
    "mix",
]
