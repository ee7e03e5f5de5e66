#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huehash/logic/inspector/renderer.py

import argparse
from typing import Optional, Dict, Any

from huehash.core import config as c
from huehash.core.color import Color
from huehash.shared.formatting import format_colorspace
from huehash.shared.terminal import print_color_block


def _draw_bar(val: float, max_val: float, r_c: int, g_c: int, b_c: int) -> str:
    """Draw a ANSI-colored bar representation of a value."""
    total_len = 16
    percent = min(abs(val), max_val) / max_val
    filled = max(0, min(total_len, int(total_len * percent)))
    empty = total_len - filled

    color_ansi = f"\033[38;2;{r_c};{g_c};{b_c}m"
    empty_ansi = "\033[90m"

    filled_part = f"{color_ansi}{'█' * filled}{c.RESET}"
    empty_part = f"{empty_ansi}{'░' * empty}{c.RESET}"
    return empty_part + filled_part if val < 0 else filled_part + empty_part


def _heading(key: str, value: str) -> str:
    return f"\n{c.MSG_BOLD_COLORS['info']}{key}{c.RESET}{' ' * (18 - len(key))}{c.BOLD_WHITE}: {value}{c.RESET}"


def _bar_line(label: str, bar: str) -> str:
    return f"                    {c.BOLD_WHITE}{label}{c.RESET} {bar}"


def render_color_info(
    color: Color,
    args: argparse.Namespace,
    tech_data: Optional[Dict[str, Any]] = None,
    wcag_data: Optional[Dict[str, Any]] = None,
) -> None:
    """Strictly prints color information. Data must be pre-calculated by the engine."""
    print()
    print_color_block(color, f"{c.BOLD_WHITE}color{c.RESET}")

    hide_bars = getattr(args, "hide_bars", False)
    data = tech_data or {}

    if getattr(args, "luminance", False):
        print(_heading("luminance", f"{color.luminance:.6f}"))
        if not hide_bars:
            print(_bar_line("L", _draw_bar(color.luminance, 1.0, 200, 200, 200)))

    if getattr(args, "rgb", False):
        print(_heading("rgb", format_colorspace("rgba", *color.rgba)))
        if not hide_bars:
            print(_bar_line("R", _draw_bar(color.red, 1.0, 255, 60, 60)))
            print(_bar_line("G", _draw_bar(color.green, 1.0, 60, 255, 60)))
            print(_bar_line("B", _draw_bar(color.blue, 1.0, 60, 80, 255)))

    if "hsl" in data:
        h, s, l_hsl = data["hsl"]
        print(_heading("hsl", format_colorspace("hsl", h, s, l_hsl)))
        if not hide_bars:
            print(_bar_line("H", _draw_bar(h, 360, 255, 200, 0)))
            print(_bar_line("S", _draw_bar(s, 1.0, 0, 200, 255)))
            print(_bar_line("L", _draw_bar(l_hsl, 1.0, 200, 200, 200)))

    if "hsb" in data:
        h, s, v = data["hsb"]
        print(_heading("hsb", format_colorspace("hsb", h, s, v)))
        if not hide_bars:
            print(_bar_line("H", _draw_bar(h, 360, 255, 200, 0)))
            print(_bar_line("S", _draw_bar(s, 1.0, 0, 200, 255)))
            print(_bar_line("B", _draw_bar(v, 1.0, 200, 200, 200)))

    if "xyz" in data:
        x, y, z = data["xyz"]
        print(_heading("xyz", format_colorspace("xyz", x, y, z)))
        if not hide_bars:
            print(_bar_line("X", _draw_bar(x, c.D65_X, 255, 60, 60)))
            print(_bar_line("Y", _draw_bar(y, c.D65_Y, 60, 255, 60)))
            print(_bar_line("Z", _draw_bar(z, c.D65_Z, 60, 80, 255)))

    if "lab" in data:
        L, a, b = data["lab"]
        print(_heading("lab", format_colorspace("lab", L, a, b)))
        if not hide_bars:
            print(_bar_line("L", _draw_bar(L, c.LAB_L_MAX, 200, 200, 200)))
            print(_bar_line("A", _draw_bar(a, c.LAB_AB_MAX, 60, 255, 60) if a < 0 else _draw_bar(a, c.LAB_AB_MAX, 255, 60, 60)))
            print(_bar_line("B", _draw_bar(b, c.LAB_AB_MAX, 60, 80, 255) if b < 0 else _draw_bar(b, c.LAB_AB_MAX, 255, 255, 60)))

    if wcag_data:
        print(f"\n{c.MSG_BOLD_COLORS['info']}contrast{c.RESET}")
        for against in ("white", "black"):
            entry = wcag_data[against]
            verdicts = "  ".join(
                f"{level} {c.MSG_COLORS['success'] if v == 'Pass' else c.MSG_COLORS['error']}{v}{c.RESET}"
                for level, v in entry["levels"].items()
            )
            print(f"  vs {against:<6}{c.BOLD_WHITE}{entry['ratio']:>6.2f}:1{c.RESET}  {verdicts}")

    print()
