#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huehash/logic/identicon/renderer.py

import numpy as np

from huehash.core import config as c
from huehash.shared.terminal import halfblock_lines, print_color_block
from .engine import IdenticonSession


def render_cells(cells: np.ndarray) -> None:
    """Print the cell-code grid, one row per line."""
    for row in cells:
        print(" ".join(str(int(code)) for code in row))


def render_identicon(session: IdenticonSession, pixels: np.ndarray, show_cells: bool = False, show_palette: bool = False) -> None:
    """Print an identicon preview to the terminal."""
    print()
    for line in halfblock_lines(pixels):
        print(f"  {line}")
    print()

    if show_palette:
        label = c.MSG_BOLD_COLORS['info']
        print_color_block(session.palette.foreground, f"{label}foreground{c.RESET}")
        print_color_block(session.palette.background, f"{label}background{c.RESET}")
        print_color_block(session.palette.spot, f"{label}spot{c.RESET}")
        print()

    if show_cells:
        render_cells(session.cells)
        print()
