#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huehash/logic/inspector/engine.py

import argparse
from typing import Dict, Any

from huehash.core import config as c
from huehash.core.color import Color
from huehash.core.contrast import get_wcag_contrast
from .renderer import render_color_info


def run(args: argparse.Namespace) -> None:
    """Main execution engine for the inspector command"""

    # If --all-tech-infos is used, activate every key in TECH_INFO_KEYS
    if getattr(args, "all_tech_infos", False):
        for key in c.TECH_INFO_KEYS:
            setattr(args, key, True)

    color: Color = args.hex
    wcag_data = None
    if getattr(args, "contrast", False):
        wcag_data = get_wcag_contrast(color.luminance)

    render_color_info(
        color=color,
        args=args,
        tech_data=get_color_data(color, args),
        wcag_data=wcag_data,
    )


def get_color_data(color: Color, args: argparse.Namespace) -> Dict[str, Any]:
    """Collect the requested color space views."""
    data = {}

    if getattr(args, "hsl", False):
        data["hsl"] = color.hsl
    if getattr(args, "hsb", False):
        data["hsb"] = color.hsb
    if getattr(args, "xyz", False):
        data["xyz"] = color.xyz
    if getattr(args, "lab", False):
        data["lab"] = color.lab

    return data
