"""Tests for the deterministic random sources."""

import pytest
from Cryptodome.Cipher import AES
from Cryptodome.Random import get_random_bytes

from fixedrandom import FixedByteRandom, FixedSliceRandom, FixedSliceSequenceRandom
from tverrors import RandomExhausted, RandomLengthMismatch, RandomNotExhausted


class TestFixedByteRandom:
    def test_fill(self):
        b = bytearray(5)
        FixedByteRandom(0xab).fill(b)
        assert b == b"\xab" * 5

    def test_fill_memoryview_slice(self):
        b = bytearray(6)
        FixedByteRandom(1).fill(memoryview(b)[2:4])
        assert b == b"\x00\x00\x01\x01\x00\x00"

    def test_read(self):
        assert FixedByteRandom(0).read(3) == b"\x00\x00\x00"

    def test_not_a_byte(self):
        with pytest.raises(ValueError):
            FixedByteRandom(256)


class TestFixedSliceRandom:
    def test_fill(self):
        r = FixedSliceRandom(b"\x01\x02\x03")
        b = bytearray(3)
        r.fill(b)
        assert b == b"\x01\x02\x03"
        assert r.read(3) == b"\x01\x02\x03"

    @pytest.mark.parametrize("n", [0, 2, 4])
    def test_length_must_match(self, n):
        with pytest.raises(RandomLengthMismatch):
            FixedSliceRandom(b"abc").read(n)

    def test_fill_does_not_resize(self):
        b = bytearray(4)
        with pytest.raises(RandomLengthMismatch):
            FixedSliceRandom(b"abc").fill(b)
        assert b == bytearray(4)

    def test_as_randfunc(self):
        """read() supplies a fixed IV where a cipher would draw a random one."""
        key = get_random_bytes(16)
        iv = bytes(range(16))
        c = AES.new(key, AES.MODE_CBC, iv=FixedSliceRandom(iv).read(16))
        assert c.iv == iv


class TestFixedSliceSequenceRandom:
    def test_in_order(self):
        a, b, c = b"a", b"bb", b"ccc"
        with FixedSliceSequenceRandom([a, b, c]) as r:
            assert r.read(1) == a
            assert r.read(2) == b
            assert r.read(3) == c

    def test_fourth_call(self):
        r = FixedSliceSequenceRandom([b"a", b"b", b"c"])
        for _ in range(3):
            r.read(1)
        with pytest.raises(RandomExhausted):
            r.read(1)
        r.check_consumed()

    def test_early_check(self):
        r = FixedSliceSequenceRandom([b"a", b"b", b"c"])
        r.read(1)
        r.read(1)
        with pytest.raises(RandomNotExhausted, match="called 2 times, expected 3"):
            r.check_consumed()

    def test_early_exit_from_with(self):
        with pytest.raises(RandomNotExhausted):
            with FixedSliceSequenceRandom([b"a"]):
                pass

    def test_with_does_not_mask_other_errors(self):
        with pytest.raises(KeyError):
            with FixedSliceSequenceRandom([b"a"]):
                raise KeyError("x")

    def test_length_mismatch_does_not_advance(self):
        r = FixedSliceSequenceRandom([b"ab"])
        with pytest.raises(RandomLengthMismatch):
            r.read(1)
        assert r.current == 0
        assert r.read(2) == b"ab"
        r.check_consumed()

    def test_empty(self):
        with FixedSliceSequenceRandom([]) as r:
            with pytest.raises(RandomExhausted):
                r.read(0)
