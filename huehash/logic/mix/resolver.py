#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huehash/logic/mix/resolver.py

import argparse

from huehash.shared.logger import fail
from .engine import mix
from .renderer import render_mix


def resolve_mix_input(args: argparse.Namespace) -> None:
    """Validate the two inputs and render their mix."""
    colors = args.hex or []
    if len(colors) != 2:
        fail("exactly two colors are required for a mix", "use -H HEX twice")

    color_a, color_b = colors
    result = mix(color_a, color_b, args.weight, args.colorspace)
    render_mix(color_a, color_b, result, args.weight, args.colorspace)
