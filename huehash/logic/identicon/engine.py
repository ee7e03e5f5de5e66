#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huehash/logic/identicon/engine.py

from typing import Any, Dict, Mapping, Optional, Union

import numpy as np

from huehash.core import config as c
from huehash.core.color import Color
from huehash.core.errors import InvalidDimensions
from .palette import Palette, select_palette
from .pattern import generate_pattern
from .prng import SeedState
from .raster import rasterize
from .seed import encode_payload

ColorLike = Union[Color, str]

COLOR_KEY_ALIASES = {
    "foreground": "foreground",
    "fg": "foreground",
    "background": "background",
    "bg": "background",
    "spot": "spot",
}


def _check_dimension(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidDimensions(f"{name} must be an integer, got {value!r}")
    if value < 1:
        raise InvalidDimensions(f"{name} must be >= 1, got {value}")
    return int(value)


def _as_color(value: ColorLike) -> Color:
    if isinstance(value, Color):
        return value
    return Color.parse_strict(value)


def resolve_color_overrides(colors: Optional[Mapping[str, ColorLike]]) -> Dict[str, Color]:
    """Normalize an override mapping to foreground/background/spot Colors."""
    if not colors:
        return {}
    resolved = {}
    for key, value in colors.items():
        if value is None:
            continue
        name = COLOR_KEY_ALIASES.get(str(key).lower())
        if name is None:
            raise ValueError(f"unknown palette color: '{key}'")
        resolved[name] = _as_color(value)
    return resolved


class IdenticonSession:
    """
    One identicon generation over its own seed state.

    Draw order is fixed: the palette first (foreground, background, spot, six
    draws each unless overridden), then the pattern row by row. Changing this
    order changes every image.
    """

    def __init__(
        self,
        data: bytes,
        size: int = c.DEFAULT_SIZE,
        scale: int = c.DEFAULT_SCALE,
        colors: Optional[Mapping[str, ColorLike]] = None,
    ):
        self.size = _check_dimension("size", size)
        self.scale = _check_dimension("scale", scale)
        self.data = bytes(data)
        self.state = SeedState.from_bytes(self.data)
        self.palette: Palette = select_palette(self.state, **resolve_color_overrides(colors))
        self.cells: np.ndarray = generate_pattern(self.state, self.size)

    def render(self, scale_multiple: int = c.DEFAULT_SCALE_MULTIPLE) -> np.ndarray:
        scale_multiple = _check_dimension("scale_multiple", scale_multiple)
        return rasterize(self.cells, self.palette, self.scale, scale_multiple)

    @property
    def edge(self) -> int:
        return self.size * self.scale


def generate_identicon(
    payload: Any,
    size: int = c.DEFAULT_SIZE,
    scale: int = c.DEFAULT_SCALE,
    colors: Optional[Mapping[str, ColorLike]] = None,
    scale_multiple: int = c.DEFAULT_SCALE_MULTIPLE,
) -> np.ndarray:
    """Render the identicon for a payload as an (edge, edge, 4) RGBA float buffer.

    payload is raw bytes or any JSON-encodable value. edge is
    size * scale * scale_multiple.
    """
    session = IdenticonSession(encode_payload(payload), size=size, scale=scale, colors=colors)
    return session.render(scale_multiple)
