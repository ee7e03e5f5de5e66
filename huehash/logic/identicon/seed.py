#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huehash/logic/identicon/seed.py

import json
from typing import Any, List

from huehash.core import config as c


def encode_payload(payload: Any) -> bytes:
    """Encode a payload into the bytes that get hashed.

    Raw bytes pass through unchanged. Anything else is JSON-encoded with a
    fixed layout (compact separators, sorted keys, UTF-8, escaped slashes) so
    the same logical value always hashes to the same seed. A string such as
    hello is therefore hashed with its quotes: b'"hello"'.
    """
    if isinstance(payload, (bytes, bytearray, memoryview)):
        return bytes(payload)
    text = json.dumps(payload, ensure_ascii=False, separators=(",", ":"), sort_keys=True)
    return text.replace("/", "\\/").encode("utf-8")


def derive_seed(data: bytes) -> List[int]:
    """Fold bytes into four 32-bit words: word[i % 4] = word * 31 + byte."""
    seed = [0] * c.SEED_WORDS
    for i, byte in enumerate(data):
        word = i % c.SEED_WORDS
        seed[word] = (seed[word] * c.SEED_MULTIPLIER + byte) & c.UINT32_MASK
    return seed
