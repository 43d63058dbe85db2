# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

"""Deterministic stand-ins for a secure random source.

Useful for known-answer tests where the vectors include the random seed.
Each source fills a writable buffer via fill(); read(n) wraps that so a
source can be passed as the randfunc argument of pycryptodomex APIs.
"""

from tverrors import RandomExhausted, RandomLengthMismatch, RandomNotExhausted

class SecureRandom(object):
    def fill(self, dest):
        raise NotImplementedError

    def read(self, n):
        b = bytearray(n)
        self.fill(b)
        return bytes(b)

def _copy_exact(dest, b):
    m = memoryview(dest)
    if len(m) != len(b):
        raise RandomLengthMismatch(
            f"Asked for {len(m)} random bytes but the vector has {len(b)}")
    m[:] = b

class FixedByteRandom(SecureRandom):
    def __init__(self, byte):
        if not 0 <= byte <= 0xff:
            raise ValueError(f"Not a byte: {byte}")
        self.byte = byte

    def fill(self, dest):
        m = memoryview(dest)
        m[:] = bytes([self.byte]) * len(m)

class FixedSliceRandom(SecureRandom):
    def __init__(self, b):
        self.bytes = bytes(b)

    def fill(self, dest):
        _copy_exact(dest, self.bytes)

class FixedSliceSequenceRandom(SecureRandom):
    """Each entry of vectors is the output for one call to fill(), in order.

    fill() must be called exactly once per entry; check_consumed() (or
    leaving the with block) verifies that. Not thread-safe.
    """
    def __init__(self, vectors):
        self.vectors = [bytes(v) for v in vectors]
        self.current = 0

    def fill(self, dest):
        if self.current >= len(self.vectors):
            raise RandomExhausted(
                f"fill() called more than {len(self.vectors)} times")
        _copy_exact(dest, self.vectors[self.current])
        self.current += 1

    def check_consumed(self):
        if self.current != len(self.vectors):
            raise RandomNotExhausted(
                f"fill() called {self.current} times, expected {len(self.vectors)}")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, tb):
        if exc_type is None:
            self.check_consumed()
