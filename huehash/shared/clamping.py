#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huehash/shared/clamping.py


def _clamp(v: float, lo: float, hi: float) -> float:
    if v != v:
        return lo
    return max(lo, min(hi, v))


def _clamp01(v: float) -> float:
    return _clamp(v, 0.0, 1.0)
