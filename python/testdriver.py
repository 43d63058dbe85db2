# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

"""Run a callback over every test case in a vector file.

The callback is called as f(section, test_case). It accepts the case by
returning None (or True) and rejects it by returning False or an
Unspecified instance, or by raising. Whatever happens, the scan carries on
with the next case; failing cases are dumped to stdout and the run as a
whole raises TestFailed at the end.
"""

import pathlib
import sys
import traceback

import parsetv
import paths
from tverrors import TestFailed, Unspecified

UNCONSUMED_ATTRIBUTES = "Test didn't consume all attributes."
CALLBACK_RETURNED_ERROR = "Test returned an error."
CALLBACK_PANICKED = "Test panicked."

def _is_error(result):
    return result is False or isinstance(result, Unspecified)

def run_case(f, section, tc):
    """Returns None if the case passed, otherwise the failure reason."""
    try:
        result = f(section, tc)
    except Exception:
        traceback.print_exc(file=sys.stderr)
        return CALLBACK_PANICKED
    if _is_error(result):
        return CALLBACK_RETURNED_ERROR
    if not tc.all_consumed():
        return UNCONSUMED_ATTRIBUTES
    return None

def dump_case(name, reason, tc):
    print(f"{name}: {reason}")
    for k, v, consumed in tc.attributes:
        print(f"{k}{'' if consumed else ' (unconsumed)'} = {v}")

def from_lines(name, lines, f, verbose=False):
    p = parsetv.ParseTv(lines, verbose)
    total = 0
    failed = 0
    for tc in p:
        total += 1
        reason = run_case(f, p.section, tc)
        if reason is None:
            if verbose:
                print(f"OK: {name} #{total}")
        else:
            failed += 1
            dump_case(name, reason, tc)
    if failed:
        raise TestFailed(failed, total)
    return total

def from_file(relpath, f, base=None, verbose=False):
    """Run f over the file at relpath, relative to base (by default the
    source root from paths.src_path()). Returns the number of cases."""
    if base is None:
        base = paths.src_path()
    with (pathlib.Path(base) / relpath).open(encoding="utf-8") as lines:
        return from_lines(relpath, lines, f, verbose)
