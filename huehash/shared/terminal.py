#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huehash/shared/terminal.py

import os
import re
import sys
from typing import List

import numpy as np

from huehash.core import config as c
from huehash.core.color import Color

ANSI_ESCAPE = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')


def ensure_truecolor() -> None:
    """Ensure the COLORTERM environment variable is set to truecolor."""
    if sys.platform == "win32":
        return
    if os.environ.get("COLORTERM") != "truecolor":
        os.environ["COLORTERM"] = "truecolor"


def get_visible_len(s: str) -> int:
    return len(ANSI_ESCAPE.sub('', s))


def _bg(r: int, g: int, b: int) -> str:
    return f"\033[48;2;{r};{g};{b}m"


def _fg(r: int, g: int, b: int) -> str:
    return f"\033[38;2;{r};{g};{b}m"


def _bytes(color: Color):
    value = color.to_int()
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


def print_color_block(color: Color, title: str = "color", end: str = "\n") -> None:
    vis_len = get_visible_len(title)
    padding = " " * max(0, 18 - vis_len)
    swatch = _bg(*_bytes(color))
    print(
        f"{title}{padding}{c.BOLD_WHITE}:{c.RESET}   {swatch}                {c.RESET}"
        f"  {c.BOLD_WHITE}{color.to_hex()}{c.RESET}",
        end=end,
    )


def halfblock_lines(pixels: np.ndarray) -> List[str]:
    """Render an (h, w, 4) RGBA buffer as truecolor half-block text.

    Each text row covers two pixel rows: the upper pixel is the glyph color,
    the lower pixel the cell background. Alpha is ignored.
    """
    rgb = np.floor(np.clip(pixels[..., :3], 0.0, 1.0) * c.RGB_MAX + 0.5).astype(int)
    height, width = rgb.shape[:2]
    lines = []
    for y in range(0, height, 2):
        parts = []
        for x in range(width):
            top = rgb[y, x]
            if y + 1 < height:
                parts.append(f"{_fg(*top)}{_bg(*rgb[y + 1, x])}{c.UPPER_HALF_BLOCK}")
            else:
                parts.append(f"{_fg(*top)}{c.UPPER_HALF_BLOCK}")
        lines.append("".join(parts) + c.RESET)
    return lines
