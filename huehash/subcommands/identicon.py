#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huehash/subcommands/identicon.py

import argparse
import sys

from huehash.core import config as c
from huehash.shared.logger import HuehashArgumentParser
from huehash.shared.sanitizer import INPUT_HANDLERS
from huehash.shared.terminal import ensure_truecolor
from huehash.logic.identicon.resolver import resolve_identicon_input


def get_identicon_parser() -> argparse.ArgumentParser:
    """Create argument parser for identicon command."""
    parser = HuehashArgumentParser(
        prog="huehash identicon",
        description="huehash identicon: preview the deterministic identicon of a message",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-t",
        "--text",
        required=True,
        help="message to fingerprint"
    )
    parser.add_argument(
        "-R",
        "--raw",
        action="store_true",
        help="hash the UTF-8 bytes of the text instead of its JSON encoding"
    )
    parser.add_argument(
        "-S",
        "--size",
        type=INPUT_HANDLERS["grid_size"],
        default=c.DEFAULT_SIZE,
        help=f"grid side in cells (default: {c.DEFAULT_SIZE}, max: {c.MAX_GRID_SIZE})",
    )
    parser.add_argument(
        "-sc",
        "--scale",
        type=INPUT_HANDLERS["scale"],
        default=c.DEFAULT_PREVIEW_SCALE,
        help=f"pixels per cell (default: {c.DEFAULT_PREVIEW_SCALE}, max: {c.MAX_SCALE})",
    )
    parser.add_argument(
        "-fg",
        "--foreground",
        type=INPUT_HANDLERS["hex"],
        default=None,
        help="override the foreground color"
    )
    parser.add_argument(
        "-bg",
        "--background",
        type=INPUT_HANDLERS["hex"],
        default=None,
        help="override the background color"
    )
    parser.add_argument(
        "-sp",
        "--spot",
        type=INPUT_HANDLERS["hex"],
        default=None,
        help="override the spot color"
    )
    parser.add_argument(
        "-p",
        "--palette",
        action="store_true",
        help="show the resolved palette"
    )
    parser.add_argument(
        "--cells",
        action="store_true",
        help="print the cell codes (0 background, 1 foreground, 2 spot)"
    )

    return parser


def main() -> None:
    """Main entry point for identicon command."""
    parser = get_identicon_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    resolve_identicon_input(args)


if __name__ == "__main__":
    main()
