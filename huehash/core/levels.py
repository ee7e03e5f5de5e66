#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huehash/core/levels.py

from enum import Enum
from typing import Union

from .color import Color


class LogLevel(Enum):
    UNDEFINED = "undefined"
    DEBUG = "debug"
    INFO = "info"
    NOTICE = "notice"
    ERROR = "error"
    FAULT = "fault"


# Row tints as (light appearance, dark appearance)
_DEFAULT_TINT = (Color(1.0, 1.0, 1.0), Color(0.11, 0.11, 0.12))
_ERROR_TINT = (Color(1.0, 0.968, 0.898), Color(0.858, 0.717, 0.603, 0.4))
_FAULT_TINT = (Color(0.98, 0.90, 0.90), Color(0.26, 0.15, 0.17))

LEVEL_TINTS = {
    LogLevel.UNDEFINED: _DEFAULT_TINT,
    LogLevel.DEBUG: _DEFAULT_TINT,
    LogLevel.INFO: _DEFAULT_TINT,
    LogLevel.NOTICE: _DEFAULT_TINT,
    LogLevel.ERROR: _ERROR_TINT,
    LogLevel.FAULT: _FAULT_TINT,
}


def level_color(level: Union[LogLevel, str], dark: bool = False) -> Color:
    """Row background color for a log level in the given appearance.

    Unknown level names fall back to the default tint.
    """
    if not isinstance(level, LogLevel):
        try:
            level = LogLevel(str(level).strip().lower())
        except ValueError:
            level = LogLevel.UNDEFINED
    light, dark_tint = LEVEL_TINTS[level]
    return dark_tint if dark else light
