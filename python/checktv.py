#!/usr/bin/env python3
#
# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

"""Check that test vector files parse, and summarize what they contain."""

import argparse
import pathlib
import sys

import parsetv
import paths
from tverrors import VectorSyntaxError

def fail(msg):
    sys.stderr.write(f'Error: {msg}\n')
    sys.exit(1)

def summarize(fpath, verbose):
    cases = parsetv.parse_file(fpath, verbose)
    sections = []
    for section, _ in cases:
        if section and section not in sections:
            sections.append(section)
    s = f"{fpath}: {len(cases)} test cases"
    if sections:
        s += f", sections: {', '.join(sections)}"
    return s

def parse_args(argv=None):
    p = argparse.ArgumentParser(description=__doc__)
    p.add_argument('files', nargs='+', type=pathlib.Path,
                   help='vector files, relative to the source root unless absolute')
    p.add_argument('--verbose', action='store_true',
                   help='echo every line as it is parsed')
    return p.parse_args(argv)

def main(argv=None):
    args = parse_args(argv)
    for fn in args.files:
        fpath = paths.src_path() / fn
        try:
            print(summarize(fpath, args.verbose))
        except VectorSyntaxError as e:
            fail(f"{fpath}: {e}")
        except OSError as e:
            fail(f"{fpath}: {e.strerror}")

if __name__ == "__main__":
    main()
