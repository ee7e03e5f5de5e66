#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huehash/logic/contrast/engine.py

import argparse

from huehash.core import config as c
from huehash.core.contrast import get_contrast_ratio, get_pass_fail
from huehash.shared.logger import fail
from huehash.shared.terminal import print_color_block


def run(args: argparse.Namespace) -> None:
    """Main execution engine for the contrast command"""
    colors = args.hex or []
    if len(colors) != 2:
        fail("exactly two colors are required for a contrast ratio", "use -H HEX twice")

    color_a, color_b = colors
    ratio = get_contrast_ratio(color_a, color_b)
    info = c.MSG_BOLD_COLORS['info']

    print()
    print_color_block(color_a, f"{info}color 1{c.RESET}")
    print_color_block(color_b, f"{info}color 2{c.RESET}")
    print()
    print(f"{info}contrast ratio{c.RESET}    {c.BOLD_WHITE}:{c.RESET}   {ratio:.2f}:1")
    for level, verdict in get_pass_fail(ratio).items():
        tone = c.MSG_COLORS['success'] if verdict == "Pass" else c.MSG_COLORS['error']
        print(f"  {level:<10}{tone}{verdict}{c.RESET}")
    print()
