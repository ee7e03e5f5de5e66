#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huehash/shared/formatting.py


def format_colorspace(fmt: str, *args) -> str:
    if fmt == 'rgb':
        r, g, b = args[:3]
        return f"rgb({r * 255:.0f}, {g * 255:.0f}, {b * 255:.0f})"
    elif fmt == 'rgba':
        r, g, b, a = args
        return f"rgba({r * 255:.0f}, {g * 255:.0f}, {b * 255:.0f}, {a:.3f})"
    elif fmt == 'hsl':
        h, s, l = args
        return f"hsl({h:.2f}deg, {s * 100:.2f}%, {l * 100:.2f}%)"
    elif fmt == 'hsb':
        h, s, b = args
        return f"hsb({h:.2f}deg, {s * 100:.2f}%, {b * 100:.2f}%)"
    elif fmt == 'xyz':
        return f"xyz({args[0]:.3f}, {args[1]:.3f}, {args[2]:.3f})"
    elif fmt == 'lab':
        return f"lab({args[0]:.3f} {args[1]:.3f} {args[2]:.3f})"

    return ""
