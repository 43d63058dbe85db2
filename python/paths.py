# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

import os
import pathlib

_file = pathlib.Path(__file__).resolve()

top = _file.parent.parent

def src_path():
    """Directory that vector file paths are relative to."""
    override = os.environ.get("TESTVECTORS_SRC")
    if override:
        return pathlib.Path(override)
    return top
