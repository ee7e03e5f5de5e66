#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huehash/shared/logger.py

import argparse
import sys
from typing import NoReturn, Optional

from huehash.core import config as c

STDOUT_LEVELS = ("info", "success")
EXIT_USAGE = 2


def log(level: str, message: str) -> None:
    """Print '[level] message' in the level's color; errors and warnings go to stderr."""
    level = str(level).lower()
    stream = sys.stdout if level in STDOUT_LEVELS else sys.stderr
    tag_color = c.MSG_BOLD_COLORS.get(level, c.RESET)
    msg_color = c.MSG_COLORS.get(level, c.RESET)
    print(f"{tag_color}[{level}]{c.RESET} {msg_color}{message}{c.RESET}", file=stream)


def fail(message: str, hint: Optional[str] = None) -> NoReturn:
    """Log an error, optionally followed by an info hint, and exit with status 2."""
    log("error", message)
    if hint:
        log("info", hint)
    sys.exit(EXIT_USAGE)


class HuehashArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        """Report argparse errors through log() instead of the default usage dump."""
        fail(message)
