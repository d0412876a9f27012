from __future__ import annotations

import re
from typing import Optional


# Plain decimal forms only: no '_' separators, no 'nan'/'inf', no hex
_INT_RE = re.compile(r"^[+-]?[0-9]+$")
_FLOAT_RE = re.compile(r"^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?$")


def parse_int(value) -> Optional[int]:
    """Parse a prompt answer or file field like ' 42 ' or '+3' into an integer.

    Returns None for unparsable inputs.
    """
    if value is None:
        return None
    s = str(value).strip()
    if not _INT_RE.match(s):
        return None
    return int(s)


def parse_float(value) -> Optional[float]:
    """Parse '55000.5', '1e3' or '40000' into a float; None if unparsable."""
    if value is None:
        return None
    s = str(value).strip()
    if not _FLOAT_RE.match(s):
        return None
    num = float(s)
    # '1e999' matches the pattern but overflows
    if num in (float("inf"), float("-inf")):
        return None
    return num
