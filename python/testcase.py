# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

import re

import digestlist
import tvgrammar
from tverrors import AlreadyConsumed, MalformedBool, MalformedInteger, MissingAttribute

_usizere = re.compile(r"[0-9]+")

class TestCase(object):
    """A set of named attributes. Every attribute must be consumed exactly
    once; this catches typos and omissions in both the vectors and the test.
    """
    __test__ = False

    def __init__(self, attributes=None):
        # Each entry is [key, value, consumed].
        self.attributes = [] if attributes is None else attributes

    def add(self, key, value):
        self.attributes.append([key, value, False])

    def has_key(self, key):
        return any(a[0] == key for a in self.attributes)

    def __len__(self):
        return len(self.attributes)

    def all_consumed(self):
        return all(a[2] for a in self.attributes)

    def unconsumed(self):
        return [a[0] for a in self.attributes if not a[2]]

    def consume_optional_string(self, key):
        for a in self.attributes:
            if a[0] == key:
                if a[2]:
                    raise AlreadyConsumed(f"Attribute {key} was already consumed")
                a[2] = True
                return a[1]
        return None

    def consume_string(self, key):
        """The raw value, without unquoting or other interpretation."""
        s = self.consume_optional_string(key)
        if s is None:
            raise MissingAttribute(f'No attribute named "{key}"')
        return s

    def consume_bytes(self, key):
        return tvgrammar.decode_quoted_or_hex(self.consume_string(key))

    def consume_optional_bytes(self, key):
        s = self.consume_optional_string(key)
        return None if s is None else tvgrammar.decode_quoted_or_hex(s)

    def consume_usize(self, key):
        return _parse_usize(key, self.consume_string(key))

    def consume_optional_usize(self, key):
        s = self.consume_optional_string(key)
        return None if s is None else _parse_usize(key, s)

    def consume_bool(self, key):
        s = self.consume_string(key)
        if s == "true":
            return True
        if s == "false":
            return False
        raise MalformedBool(f"{key}: expected true or false, found {s}")

    def consume_digest_alg(self, key):
        """Maps SHA1, SHA256, SHA384, SHA512 and SHA512_256 to digests, and
        SHA224 to None."""
        return digestlist.lookup(self.consume_string(key))

def _parse_usize(key, s):
    # int() would also take signs, underscores and surrounding whitespace.
    if not _usizere.fullmatch(s):
        raise MalformedInteger(f"{key}: expected a decimal integer, found {s}")
    return int(s)
