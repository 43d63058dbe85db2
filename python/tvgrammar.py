# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

import re

from tverrors import MalformedHex, MalformedQuoted

_hexre = re.compile(r"[0-9a-fA-F]*")

def decode_hex(s):
    """Decode a string of hex digits. The input must have an even number of
    digits; bytes.fromhex alone would also accept whitespace."""
    if len(s) % 2 != 0:
        raise MalformedHex(f"Hex string does not have an even number of digits in {s}")
    if not _hexre.fullmatch(s):
        bad = next(c for c in s if c not in "0123456789abcdefABCDEF")
        raise MalformedHex(f"Invalid hex digit '{bad}' in {s}")
    return bytes.fromhex(s)

def decode_quoted_or_hex(s):
    """Either a double-quoted UTF-8 string or hex. The empty value is \"\"."""
    if s.startswith('"'):
        # No escapes, and no inner quotes.
        if len(s) < 2 or not s.endswith('"'):
            raise MalformedQuoted(f"expected quoted string, found {s}")
        return s[1:-1].encode("utf-8")
    return decode_hex(s)
