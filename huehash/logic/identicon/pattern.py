#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huehash/logic/identicon/pattern.py

import math

import numpy as np

from huehash.core import config as c
from .prng import SeedState


def generate_pattern(state: SeedState, size: int) -> np.ndarray:
    """Draw a size x size grid of cell codes, mirrored left to right.

    Only the left ceil(size / 2) columns of each row are drawn; the remaining
    columns reflect the first size - half of them.
    """
    half = int(math.ceil(size / 2))
    mirror = size - half
    cells = np.zeros((size, size), dtype=np.int64)
    for y in range(size):
        row = [int(math.floor(state.draw() * c.PATTERN_SPREAD)) for _ in range(half)]
        row.extend(reversed(row[:mirror]))
        cells[y] = row
    return cells
