#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huehash/logic/identicon/prng.py

from typing import Iterable, List

from huehash.core import config as c
from .seed import derive_seed


def _uint32(n: int) -> int:
    """Convert to unsigned 32-bit integer."""
    return n & c.UINT32_MASK


def _int32(n: int) -> int:
    """Reinterpret the low 32 bits as a signed integer."""
    n &= c.UINT32_MASK
    return n - (1 << 32) if n & c.INT32_SIGN else n


class SeedState:
    """
    Xorshift stream over four 32-bit words.

    Every draw mutates the words in place, so one instance must be owned by
    exactly one generation call. The mixing step works on the words
    reinterpreted as signed int32 with arithmetic right shifts.
    """

    def __init__(self, words: Iterable[int]):
        self.words: List[int] = [_uint32(w) for w in words]
        if len(self.words) != c.SEED_WORDS:
            raise ValueError(f"seed state needs {c.SEED_WORDS} words, got {len(self.words)}")
        self.draw_count = 0

    @classmethod
    def from_bytes(cls, data: bytes) -> "SeedState":
        return cls(derive_seed(data))

    def draw(self) -> float:
        """Advance the stream and return uint32(s3) / INT32_MAX, within [0, 1]."""
        s = self.words
        t = _uint32(s[0] ^ (s[0] << c.XORSHIFT_A))
        s[0], s[1], s[2] = s[1], s[2], s[3]
        tmp = _int32(s[3])
        tmp_t = _int32(t)
        s[3] = _uint32(tmp ^ (tmp >> c.XORSHIFT_B) ^ tmp_t ^ (tmp_t >> c.XORSHIFT_C))
        self.draw_count += 1
        return s[3] / c.INT32_MAX

    def snapshot(self) -> List[int]:
        return list(self.words)

    def __repr__(self) -> str:
        return f"SeedState({self.words!r}, draws={self.draw_count})"
