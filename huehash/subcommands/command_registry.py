#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huehash/subcommands/command_registry.py

from . import (
    identicon,
    mix,
    adjust,
    contrast,
    level,
)

SUBCOMMANDS = {
    'identicon': identicon,
    'mix': mix,
    'adjust': adjust,
    'contrast': contrast,
    'level': level,
}
