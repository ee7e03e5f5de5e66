#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huehash/subcommands/mix.py

import argparse
import sys

from huehash.core import config as c
from huehash.shared.logger import HuehashArgumentParser
from huehash.shared.sanitizer import INPUT_HANDLERS
from huehash.shared.terminal import ensure_truecolor
from huehash.logic.mix.resolver import resolve_mix_input


def get_mix_parser() -> argparse.ArgumentParser:
    """Create argument parser for mix command."""
    parser = HuehashArgumentParser(
        prog="huehash mix",
        description="huehash mix: mix two colors in rgb, hsl, hsb or lab",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-H",
        "--hex",
        action="append",
        type=INPUT_HANDLERS["hex"],
        help="use -H HEX twice for the two inputs"
    )
    parser.add_argument(
        "-w",
        "--weight",
        type=INPUT_HANDLERS["float_0_1"],
        default=c.DEFAULT_MIX_WEIGHT,
        help=f"weight of the second color, 0 to 1 (default: {c.DEFAULT_MIX_WEIGHT})",
    )
    parser.add_argument(
        "-cs",
        "--colorspace",
        default="rgb",
        type=INPUT_HANDLERS["colorspace"],
        help="colorspace to mix in: rgb, hsl, hsb, lab (default: rgb)"
    )

    return parser


def main() -> None:
    """Main entry point for mix command."""
    parser = get_mix_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    resolve_mix_input(args)


if __name__ == "__main__":
    main()
