# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

import Cryptodome.Hash.HMAC
import Cryptodome.Hash.SHA1
import Cryptodome.Hash.SHA256
import Cryptodome.Hash.SHA384
import Cryptodome.Hash.SHA512

from tverrors import UnsupportedAlgorithm

class Digest(object):
    def __init__(self, name, module, **kwargs):
        self._name = name
        self._module = module
        self._kwargs = kwargs

    def name(self):
        return self._name

    def new(self, data=None):
        return self._module.new(data, **self._kwargs)

    def hash(self, data):
        return self.new(data).digest()

    def hmac(self, key, data):
        return Cryptodome.Hash.HMAC.new(key, data, digestmod=self.new()).digest()

    @property
    def output_len(self):
        return self.new().digest_size

    @property
    def block_len(self):
        return self._module.block_size

    def __repr__(self):
        return f"Digest({self._name})"

SHA1 = Digest("SHA1", Cryptodome.Hash.SHA1)
SHA256 = Digest("SHA256", Cryptodome.Hash.SHA256)
SHA384 = Digest("SHA384", Cryptodome.Hash.SHA384)
SHA512 = Digest("SHA512", Cryptodome.Hash.SHA512)
SHA512_256 = Digest("SHA512_256", Cryptodome.Hash.SHA512, truncate="256")

# SHA224 is deliberately unsupported, but NIST vector files contain it, so
# the name is recognized and maps to None.
by_name = {
    "SHA1": SHA1,
    "SHA224": None,
    "SHA256": SHA256,
    "SHA384": SHA384,
    "SHA512": SHA512,
    "SHA512_256": SHA512_256,
}

all_digests = [d for d in by_name.values() if d is not None]

def lookup(name):
    if name not in by_name:
        raise UnsupportedAlgorithm(f"Unsupported digest algorithm: {name}")
    return by_name[name]
