# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

from testcase import TestCase
from tverrors import VectorSyntaxError

BEFORE_FIRST_LINE = "BeforeFirstLine"
IN_CASE = "InCase"
DONE = "Done"

class ParseTv(object):
    """Splits a stream of lines into TestCases.

    Cases are separated by blank lines. "[name]" lines set the current
    section, which carries over to later cases until the next marker.
    """
    def __init__(self, lines, verbose=False):
        self._lines = iter(lines)
        self._verbose = verbose
        self._lineno = 0
        self.section = ""
        self.state = BEFORE_FIRST_LINE

    def __iter__(self):
        return self

    def __next__(self):
        tc = self.next_case()
        if tc is None:
            raise StopIteration
        return tc

    def _error(self, msg):
        raise VectorSyntaxError(msg, self._lineno)

    def _next_line(self):
        l = next(self._lines, None)
        if l is None:
            return None
        self._lineno += 1
        l = l.rstrip("\r\n")
        if self._verbose:
            print(f"Line: {l}")
        return l

    def next_case(self):
        if self.state == DONE:
            return None
        self.state = BEFORE_FIRST_LINE
        tc = TestCase()
        while True:
            l = self._next_line()
            if l is None:
                self.state = DONE
                return tc if tc else None
            if not l.strip():
                if tc:
                    return tc
            elif l.lstrip().startswith("#"):
                pass
            elif l.startswith("["):
                self._handle_section(l)
            else:
                self._handle_attribute(tc, l)
                self.state = IN_CASE

    def _handle_section(self, l):
        if self.state != BEFORE_FIRST_LINE:
            self._error("Section marker must come before the first attribute")
        if not l.endswith("]"):
            self._error(f"Section marker not terminated with ']': {l}")
        self.section = l[1:-1]

    def _handle_attribute(self, tc, l):
        parts = l.split(" = ", 1)
        if len(parts) != 2:
            self._error("Syntax error: Expected Key = Value.")
        k, v = (p.strip() for p in parts)
        if not k:
            self._error("Syntax error: Empty key.")
        # An empty value must be written as "".
        if not v:
            self._error(f"Syntax error: Empty value for {k}.")
        if tc.has_key(k):
            self._error(f"Syntax error: Duplicate key {k}.")
        tc.add(k, v)

def parse_file(fpath, verbose=False):
    with fpath.open(encoding="utf-8") as f:
        p = ParseTv(f, verbose)
        return [(p.section, tc) for tc in p]
