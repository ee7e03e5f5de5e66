#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huehash/subcommands/level.py

import argparse
import sys

from huehash.core import config as c
from huehash.core.levels import level_color
from huehash.shared.formatting import format_colorspace
from huehash.shared.logger import HuehashArgumentParser
from huehash.shared.sanitizer import INPUT_HANDLERS
from huehash.shared.terminal import ensure_truecolor, print_color_block


def get_level_parser() -> argparse.ArgumentParser:
    """Create argument parser for level command."""
    parser = HuehashArgumentParser(
        prog="huehash level",
        description="huehash level: row tint used for a log level",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "level",
        type=INPUT_HANDLERS["level"],
        help="undefined, debug, info, notice, error or fault"
    )
    parser.add_argument(
        "-d",
        "--dark",
        action="store_true",
        help="use the dark appearance tint"
    )

    return parser


def main() -> None:
    """Main entry point for level command."""
    parser = get_level_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()

    tint = level_color(args.level, dark=args.dark)
    appearance = "dark" if args.dark else "light"
    print()
    print_color_block(tint, f"{c.MSG_BOLD_COLORS['info']}{args.level} {appearance}{c.RESET}")
    print(f"{' ' * 18}{c.BOLD_WHITE}:{c.RESET}   {format_colorspace('rgba', *tint.rgba)}  {tint.to_hex(alpha=True)}")
    print()


if __name__ == "__main__":
    main()
