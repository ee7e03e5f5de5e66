#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huehash/main.py

import argparse
import sys

from huehash import __version__
from huehash.logic.inspector import engine
from huehash.subcommands.command_registry import SUBCOMMANDS
from huehash.shared.logger import fail, HuehashArgumentParser
from huehash.shared.sanitizer import INPUT_HANDLERS
from huehash.shared.terminal import ensure_truecolor

# (short flag, long flag, dest, help) for the inspector's technical views
TECH_INFO_FLAGS = [
    ("-all", "--all-tech-infos", "all_tech_infos", "show all technical information"),
    ("-hb", "--hide-bars", "hide_bars", "hide visual color bars"),
    ("-rgb", "--red-green-blue", "rgb", "show RGBA values"),
    ("-l", "--luminance", "luminance", "show WCAG relative luminance"),
    ("-hsl", "--hue-saturation-lightness", "hsl", "show HSL values"),
    ("-hsb", "--hue-saturation-brightness", "hsb", "show HSB values"),
    ("-xyz", "--ciexyz", "xyz", "show CIE 1931 XYZ values"),
    ("-lab", "--cielab", "lab", "show CIE 1976 LAB values"),
    ("-wcag", "--contrast", "contrast", "show contrast against white and black"),
]


def get_color_parser() -> argparse.ArgumentParser:
    """Create argument parser for the root inspector command."""
    parser = HuehashArgumentParser(
        prog="huehash",
        description=(
            "huehash: inspect colors and preview deterministic identicons\n"
            f"commands: {', '.join(SUBCOMMANDS)} (see 'huehash <command> -h')"
        ),
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )
    parser.add_argument("-h", "--help", action="help", default=argparse.SUPPRESS,
                        help="show this help message and exit")
    parser.add_argument("-v", "--version", action="version", version=f"huehash {__version__}",
                        help="show program version and exit")
    parser.add_argument("-hf", "--help-full", action="store_true",
                        help="show help for the root command and every subcommand")
    parser.add_argument(
        "-H",
        "--hex",
        type=INPUT_HANDLERS["hex"],
        help="color to inspect: RRGGBB or RRGGBBAA, '#' optional, shorthand allowed",
    )

    info_group = parser.add_argument_group("technical information flags")
    for short, long, dest, text in TECH_INFO_FLAGS:
        info_group.add_argument(short, long, dest=dest, action="store_true", help=text)

    # Catches subcommand names given after other flags
    parser.add_argument("command", nargs="?", help=argparse.SUPPRESS)
    return parser


def print_full_help(parser: argparse.ArgumentParser) -> None:
    parser.print_help()
    for name, module in SUBCOMMANDS.items():
        print("\n" * 2)
        getattr(module, f"get_{name}_parser")().print_help()


def handle_color_command(args: argparse.Namespace) -> None:
    """Validate root arguments and run the inspector."""
    if args.help_full:
        print_full_help(get_color_parser())
        sys.exit(0)

    if args.command:
        if args.command.lower() in SUBCOMMANDS:
            fail(f"the '{args.command}' command must be the first argument")
        fail(f"unrecognized command or argument: '{args.command}'")

    if args.hex is None:
        fail("the argument -H/--hex is required", f"or run one of: {', '.join(SUBCOMMANDS)}")

    engine.run(args)


def main() -> None:
    """huehash CLI entry point."""
    # A subcommand owns the rest of argv
    if len(sys.argv) > 1 and sys.argv[1].lower() in SUBCOMMANDS:
        command = SUBCOMMANDS[sys.argv.pop(1).lower()]
        ensure_truecolor()
        command.main()
        sys.exit(0)

    args = get_color_parser().parse_args()
    ensure_truecolor()
    handle_color_command(args)


if __name__ == "__main__":
    main()
