#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huehash/logic/adjust/engine.py

import argparse
from typing import List, Tuple

from huehash.core import config as c
from huehash.core.color import Color
from huehash.shared.terminal import print_color_block
from . import filters


def apply_pipeline(color: Color, args: argparse.Namespace) -> Tuple[Color, List[str]]:
    """Apply every requested adjustment in PIPELINE order.

    Returns the final color and a description of each applied step.
    """
    steps = []
    for name in c.PIPELINE:
        value = getattr(args, name, None)
        if value is None or value is False:
            continue
        if name == "rotate":
            color = filters.adjusted_hue(color, value)
            steps.append(f"rotate {value:+.2f}deg")
        elif name == "complement":
            color = filters.complement(color)
            steps.append("complement")
        elif name == "lighten":
            color = filters.lighter(color, value)
            steps.append(f"lighten {value:.2f}")
        elif name == "darken":
            color = filters.darken(color, value)
            steps.append(f"darken {value:.2f}")
        elif name == "saturate":
            color = filters.saturate(color, value)
            steps.append(f"saturate {value:.2f}")
        elif name == "desaturate":
            color = filters.desaturate(color, value)
            steps.append(f"desaturate {value:.2f}")
        elif name == "tint":
            color = filters.tint(color, value)
            steps.append(f"tint {value:.2f}")
        elif name == "shade":
            color = filters.shade(color, value)
            steps.append(f"shade {value:.2f}")
        elif name == "grayscale":
            color = filters.grayscale(color, value)
            steps.append(f"grayscale {value}")
        elif name == "invert":
            color = filters.invert(color)
            steps.append("invert")
        elif name == "opacity":
            color = filters.adjusted_alpha(color, value)
            steps.append(f"opacity {value:+.2f}")
    return color, steps


def run(args: argparse.Namespace) -> None:
    """Main execution engine for the adjust command"""
    base = args.hex
    result, steps = apply_pipeline(base, args)

    info = c.MSG_BOLD_COLORS['info']
    print()
    print_color_block(base, f"{info}original{c.RESET}")
    print_color_block(result, f"{info}adjusted{c.RESET}")
    if args.verbose:
        print()
        for step in steps or ["no adjustments"]:
            print(f"  {c.MSG_BOLD_COLORS['dim']}-{c.RESET} {step}")
    print()
