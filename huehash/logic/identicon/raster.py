#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huehash/logic/identicon/raster.py

import numpy as np

from huehash.core import config as c
from huehash.core.color import BLACK, Color
from huehash.core.errors import AllocationFailure
from .palette import Palette


def resolve_cell_color(code: int, palette: Palette) -> Color:
    """Map a cell code to its palette color; unknown codes render black."""
    if code == c.CELL_BACKGROUND:
        return palette.background
    if code == c.CELL_FOREGROUND:
        return palette.foreground
    if code == c.CELL_SPOT:
        return palette.spot
    return BLACK


def _rgba(color: Color) -> np.ndarray:
    return np.clip(np.array(color.rgba, dtype=np.float64), 0.0, 1.0)


def allocate_canvas(edge: int) -> np.ndarray:
    try:
        return np.empty((edge, edge, 4), dtype=np.float64)
    except (MemoryError, ValueError, OverflowError) as exc:
        raise AllocationFailure(f"cannot allocate a {edge}x{edge} canvas") from exc


def rasterize(cells: np.ndarray, palette: Palette, scale: int, scale_multiple: int = 1) -> np.ndarray:
    """Paint the cell grid into an (edge, edge, 4) RGBA buffer with flat blocks.

    The background goes under the whole canvas first, then each cell fills its
    block with nearest-neighbor upscaling.
    """
    size = cells.shape[0]
    block = scale * scale_multiple
    canvas = allocate_canvas(size * block)
    canvas[...] = _rgba(palette.background)

    lookup = {}
    for (y, x), code in np.ndenumerate(cells):
        code = int(code)
        if code not in lookup:
            lookup[code] = _rgba(resolve_cell_color(code, palette))
        canvas[y * block:(y + 1) * block, x * block:(x + 1) * block] = lookup[code]
    return canvas


def to_rgba8(buffer: np.ndarray) -> np.ndarray:
    """Quantize a normalized buffer to uint8 RGBA, rounding halves up."""
    return np.floor(np.clip(buffer, 0.0, 1.0) * c.RGB_MAX + 0.5).astype(np.uint8)
