#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huehash/logic/mix/renderer.py

from huehash.core import config as c
from huehash.core.color import Color
from huehash.shared.terminal import print_color_block


def render_mix(color_a: Color, color_b: Color, result: Color, weight: float, space: str) -> None:
    """Print both inputs and the mixed color."""
    info = c.MSG_BOLD_COLORS['info']
    print()
    print_color_block(color_a, f"{info}color 1{c.RESET}")
    print_color_block(color_b, f"{info}color 2{c.RESET}")
    print_color_block(result, f"{info}mix {space} {weight:.2f}{c.RESET}")
    print()
