"""
Tests for payload encoding and the rolling seed hash.
"""

import pytest

from huehash.logic.identicon.seed import derive_seed, encode_payload


class TestEncodePayload:

    def test_bytes_pass_through(self):
        assert encode_payload(b"hello") == b"hello"
        assert encode_payload(bytearray(b"abc")) == b"abc"

    def test_string_is_json_quoted(self, hello_json_bytes):
        assert encode_payload("hello") == hello_json_bytes

    def test_compact_sorted_objects(self):
        assert encode_payload({"b": 1, "a": [1, 2]}) == b'{"a":[1,2],"b":1}'

    def test_key_order_does_not_matter(self):
        assert encode_payload({"x": 1, "y": 2}) == encode_payload({"y": 2, "x": 1})

    def test_slashes_escaped(self):
        assert encode_payload("a/b") == b'"a\\/b"'

    def test_unicode_kept_as_utf8(self):
        assert encode_payload("é") == '"é"'.encode("utf-8")

    def test_unencodable_payload(self):
        with pytest.raises(TypeError):
            encode_payload(object())


class TestDeriveSeed:

    def test_empty_is_zero(self):
        assert derive_seed(b"") == [0, 0, 0, 0]

    def test_hello_bytes(self):
        assert derive_seed(b"hello") == [3335, 101, 108, 108]

    def test_hello_json(self, hello_json_bytes):
        assert derive_seed(hello_json_bytes) == [1162, 3335, 3165, 108]

    def test_words_wrap_at_32_bits(self):
        seed = derive_seed(bytes([255]) * 64)
        assert all(0 <= word <= 0xFFFFFFFF for word in seed)

    def test_deterministic(self):
        assert derive_seed(b"same input") == derive_seed(b"same input")

    def test_zero_bytes_give_zero_seed(self):
        assert derive_seed(bytes([0, 0, 0, 0])) == [0, 0, 0, 0]

    def test_single_byte_change_changes_seed(self):
        base = bytearray(b"fingerprint payload")
        original = derive_seed(bytes(base))
        for index in range(len(base)):
            changed = bytearray(base)
            changed[index] ^= 0x01
            assert derive_seed(bytes(changed)) != original
