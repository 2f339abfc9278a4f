"""
Coordinate parsing utilities (survey-aware).

Turns the angle strings people actually type into signed decimal degrees:
- Decimal degrees: 34.111397, -119.330528
- Hemisphere suffix/prefix: 34.111397N, W 119.330528
- DMS/DM: 34°6'41.03"N, 34 6 41.03 N, 119°19.83'W

Malformed input yields ``None``; deciding what to do about it is up to the
caller (the CLI reports a usage error).
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

from geodesy.angles import dms_to_decimal

_NUM = r"[-+]?\d+(?:\.\d+)?"
_HEMI_PREFIX = re.compile(r"^\s*([NSEW])(?![A-Z])")
_HEMI_SUFFIX = re.compile(r"(?<![A-Z])([NSEW])\s*$")
_SEPARATORS = re.compile("[°º'\"′″:]")


def _to_float(num_text: str) -> float:
    return float(num_text.strip())


def split_hemisphere(text: str) -> Tuple[str, Optional[str]]:
    """Strip a leading or trailing N/S/E/W; returns ``(rest, letter or None)``."""
    u = str(text).strip().upper()
    for pattern in (_HEMI_SUFFIX, _HEMI_PREFIX):
        m = pattern.search(u)
        if m:
            return (u[:m.start(1)] + u[m.end(1):]).strip(), m.group(1)
    return u, None


def parse_angle(text: str) -> Optional[float]:
    """
    Parse a single angular coordinate into signed decimal degrees.

    A negative leading number and an S/W hemisphere both make the result
    negative; an explicit N/E wins over a stray minus sign.
    """
    if text is None or not str(text).strip():
        return None

    body, hemi = split_hemisphere(text)
    cleaned = _SEPARATORS.sub(" ", body)
    cleaned = re.sub(r"\s+", " ", cleaned).strip()
    if not cleaned or re.search(r"[^\d\s.+\-]", cleaned):
        return None

    nums = re.findall(_NUM, cleaned)
    if not nums or len(nums) > 3:
        return None

    try:
        values = [_to_float(n) for n in nums]
    except ValueError:
        return None

    sign = -1.0 if values[0] < 0 or nums[0].startswith("-") else 1.0
    if hemi in ("S", "W"):
        sign = -1.0
    elif hemi in ("N", "E"):
        sign = 1.0

    degrees, minutes, seconds = (abs(v) for v in values + [0.0] * (3 - len(values)))
    return sign * dms_to_decimal(degrees, minutes, seconds)


def normalize_grid_zone(text: str) -> str:
    """Grid zones are case-insensitive; the engine expects uppercase."""
    return re.sub(r"\s+", "", str(text or "")).upper()


__all__ = ["parse_angle", "split_hemisphere", "normalize_grid_zone"]
