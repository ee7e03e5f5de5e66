#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huehash/subcommands/adjust.py

import argparse
import sys

from huehash.core import config as c
from huehash.shared.logger import HuehashArgumentParser
from huehash.shared.sanitizer import INPUT_HANDLERS
from huehash.shared.terminal import ensure_truecolor
from huehash.logic.adjust import engine


def get_adjust_parser() -> argparse.ArgumentParser:
    """Create argument parser for adjust command."""
    parser = HuehashArgumentParser(
        prog="huehash adjust",
        description=(
            "huehash adjust: lighten, darken, saturate or otherwise adjust a color\n"
            f"steps run in fixed order: {', '.join(c.PIPELINE)}"
        ),
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-H",
        "--hex",
        required=True,
        type=INPUT_HANDLERS["hex"],
        help="base color"
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="list the applied steps"
    )

    hsl_group = parser.add_argument_group("hsl adjustments")
    hsl_group.add_argument("--rotate", type=INPUT_HANDLERS["float_signed_360"], help="rotate hue by degrees")
    hsl_group.add_argument("--complement", action="store_true", help="rotate hue by 180 degrees")
    hsl_group.add_argument("--lighten", type=INPUT_HANDLERS["float_0_1"], help="raise lightness by amount (0 to 1)")
    hsl_group.add_argument("--darken", type=INPUT_HANDLERS["float_0_1"], help="lower lightness by amount (0 to 1)")
    hsl_group.add_argument("--saturate", type=INPUT_HANDLERS["float_0_1"], help="raise saturation by amount (0 to 1)")
    hsl_group.add_argument("--desaturate", type=INPUT_HANDLERS["float_0_1"], help="lower saturation by amount (0 to 1)")

    mix_group = parser.add_argument_group("mixing and filters")
    mix_group.add_argument("--tint", type=INPUT_HANDLERS["float_0_1"], help="mix toward white by amount")
    mix_group.add_argument("--shade", type=INPUT_HANDLERS["float_0_1"], help="mix toward black by amount")
    mix_group.add_argument(
        "--grayscale",
        type=INPUT_HANDLERS["grayscale_mode"],
        help=f"desaturate fully using a mode: {', '.join(c.GRAYSCALE_MODES)}",
    )
    mix_group.add_argument("--invert", action="store_true", help="invert rgb channels")
    mix_group.add_argument("--opacity", type=INPUT_HANDLERS["float_signed_1"], help="add to alpha (-1 to 1)")

    return parser


def main() -> None:
    """Main entry point for adjust command."""
    parser = get_adjust_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    engine.run(args)


if __name__ == "__main__":
    main()
