#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huehash/subcommands/contrast.py

import argparse
import sys

from huehash.shared.logger import HuehashArgumentParser
from huehash.shared.sanitizer import INPUT_HANDLERS
from huehash.shared.terminal import ensure_truecolor
from huehash.logic.contrast import engine


def get_contrast_parser() -> argparse.ArgumentParser:
    """Create argument parser for contrast command."""
    parser = HuehashArgumentParser(
        prog="huehash contrast",
        description="huehash contrast: WCAG contrast ratio between two colors",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-H",
        "--hex",
        action="append",
        type=INPUT_HANDLERS["hex"],
        help="use -H HEX twice for the two inputs"
    )

    return parser


def main() -> None:
    """Main entry point for contrast command."""
    parser = get_contrast_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    engine.run(args)


if __name__ == "__main__":
    main()
