#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huehash/shared/sanitizer.py

import argparse
import re

from huehash.core import config as c
from huehash.core.color import Color
from huehash.core.levels import LogLevel

HEX_DIGIT = re.compile(r"[0-9A-F]")
LETTER = re.compile(r"[a-z]")
DIGIT = re.compile(r"[0-9]")
DIGIT_OR_DOT = re.compile(r"[0-9.]")

# Digit count -> padding appended to reach a full RRGGBB / RRGGBBAA value
HEX_PADDING = {5: "0", 7: "F"}


def _squash(value) -> str:
    """Collapse whitespace so user input can be echoed on one log line."""
    if value is None:
        return ""
    return " ".join(str(value).split())


def normalize_hex(value) -> str:
    """
    Reduce loose hex input to 6 (RRGGBB) or 8 (RRGGBBAA) uppercase digits.

    Anything that is not a hex digit is dropped. 'RGB' and 'RGBA' shorthand
    doubles every digit, one or two digits repeat to fill six, odd lengths are
    padded and anything past eight digits is cut.
    """
    digits = "".join(HEX_DIGIT.findall(_squash(value).upper()))
    count = len(digits)

    if count in (0, 6, 8):
        return digits
    if count in (3, 4):
        return "".join(d * 2 for d in digits)
    if count < 3:
        return (digits * 6)[:6]
    if count in HEX_PADDING:
        return digits + HEX_PADDING[count]
    return digits[:8]


def _parse_signed(value, fractional: bool):
    """
    Pull a signed number out of noisy text.

    Letters are ignored, a leading '-' makes it negative and only the first
    decimal point survives. Returns None when no digits are left.
    """
    text = _squash(value)
    body = "".join((DIGIT_OR_DOT if fractional else DIGIT).findall(text))
    if "." in body:
        head, _, tail = body.partition(".")
        body = f"{head}.{tail.replace('.', '')}"
    if not body.strip("."):
        return None

    number = float(body) if fractional else int(body)
    return -number if text.startswith("-") else number


# ==========================================
# Argparse type handlers
# ==========================================

def handle_hex(v: str) -> Color:
    """Turn a CLI hex argument into a Color."""
    digits = normalize_hex(v)
    if not digits:
        raise argparse.ArgumentTypeError(f"invalid hex value: '{_squash(v)}'")
    return Color.parse_strict(f"#{digits}")


def handle_choice(choices):
    """Validator accepting one word from choices, ignoring case, spaces and symbols."""
    def validator(v: str) -> str:
        word = "".join(LETTER.findall(_squash(v).lower()))
        if word not in choices:
            raise argparse.ArgumentTypeError(
                f"invalid choice: '{_squash(v)}' (choose from {', '.join(choices)})"
            )
        return word
    return validator


def handle_range(min_v, max_v, fractional: bool = True):
    """Validator parsing a number and clamping it into [min_v, max_v]."""
    kind = "float" if fractional else "integer"

    def validator(v: str):
        number = _parse_signed(v, fractional)
        if number is None:
            raise argparse.ArgumentTypeError(f"invalid {kind} value: '{_squash(v)}'")
        return max(min_v, min(max_v, number))
    return validator


INPUT_HANDLERS = {
    "hex": handle_hex,
    "colorspace": handle_choice(c.COLOR_SPACES),
    "grayscale_mode": handle_choice(c.GRAYSCALE_MODES),
    "level": handle_choice(tuple(level.value for level in LogLevel)),

    "float_0_1": handle_range(0.0, 1.0),
    "float_signed_1": handle_range(-1.0, 1.0),
    "float_signed_360": handle_range(-360.0, 360.0),

    "grid_size": handle_range(1, c.MAX_GRID_SIZE, fractional=False),
    "scale": handle_range(1, c.MAX_SCALE, fractional=False),
}
