#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huehash/core/errors.py


class HuehashError(Exception):
    """Base class for errors raised by huehash."""


class InvalidHexString(HuehashError, ValueError):
    """Raised when a hex color string has no leading hex digits."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"invalid color hex string: '{value}'")


class InvalidDimensions(HuehashError, ValueError):
    """Raised when an identicon size or scale is not a positive integer."""


class AllocationFailure(HuehashError, MemoryError):
    """Raised when the output canvas cannot be allocated."""
