# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

class TestVectorError(Exception):
    __test__ = False

class VectorSyntaxError(TestVectorError):
    def __init__(self, msg, lineno=None):
        if lineno is not None:
            msg = f"line {lineno}: {msg}"
        super().__init__(msg)
        self.lineno = lineno

# Raised by TestCase accessors. Inside a callback these are ordinary
# exceptions, so the driver reports them as "Test panicked."

class AttributeErrorBase(TestVectorError):
    pass

class MissingAttribute(AttributeErrorBase):
    pass

class AlreadyConsumed(AttributeErrorBase):
    pass

class MalformedHex(AttributeErrorBase):
    pass

class MalformedQuoted(AttributeErrorBase):
    pass

class MalformedInteger(AttributeErrorBase):
    pass

class MalformedBool(AttributeErrorBase):
    pass

class UnsupportedAlgorithm(AttributeErrorBase):
    pass

class Unspecified(TestVectorError):
    """A callback may return an instance of this (or False) to reject a case."""

class TestFailed(TestVectorError):
    def __init__(self, failed, total):
        super().__init__(f"Test failed: {failed} of {total} test cases failed.")
        self.failed = failed
        self.total = total

class RandomSourceError(TestVectorError):
    pass

class RandomLengthMismatch(RandomSourceError):
    pass

class RandomExhausted(RandomSourceError):
    pass

class RandomNotExhausted(RandomSourceError):
    pass
