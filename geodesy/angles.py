"""
Decimal degree <-> degrees/minutes/seconds conversions.

The sexagesimal helpers work on magnitudes; callers keep track of the
hemisphere themselves (see ``to_sexagesimal`` / ``from_sexagesimal``).
"""

from __future__ import annotations

from typing import Any, Optional, Tuple, Union

from geodesy.errors import InvalidHemisphereError
from geodesy.models import DMS, LatitudeHemisphere, LongitudeHemisphere

Hemisphere = Union[LatitudeHemisphere, LongitudeHemisphere]


def whole_degrees(value: float) -> int:
    return int(value)


def whole_minutes(value: float) -> int:
    return int((value - whole_degrees(value)) * 60)


def seconds(value: float) -> float:
    return ((value - whole_degrees(value)) * 60 - whole_minutes(value)) * 60


def whole_seconds(value: float) -> int:
    return int(seconds(value))


def decimal_to_dms(value: float) -> DMS:
    """Split a decimal-degree magnitude into degrees, minutes and seconds."""
    return DMS(whole_degrees(value), whole_minutes(value), seconds(value))


def dms_to_decimal(degrees: int, minutes: int, seconds: float) -> float:
    """Combine degrees, minutes and seconds; no range checks are applied."""
    return degrees + minutes / 60.0 + seconds / 3600.0


def _hemisphere(kind: str, positive: bool) -> Hemisphere:
    if kind == "lat":
        return LatitudeHemisphere.N if positive else LatitudeHemisphere.S
    if kind == "lon":
        return LongitudeHemisphere.E if positive else LongitudeHemisphere.W
    raise ValueError(f"kind must be 'lat' or 'lon', got {kind!r}")


def to_sexagesimal(value: float, kind: str) -> Tuple[DMS, Hemisphere]:
    """
    Signed decimal degrees -> (unsigned DMS, hemisphere).

    ``kind`` is "lat" or "lon". Zero is reported as S / W, the way the
    conversion form always displayed it.
    """
    hemisphere = _hemisphere(kind, value > 0)
    return decimal_to_dms(abs(value)), hemisphere


def parse_hemisphere(value: Any, kind: Optional[str] = None) -> Hemisphere:
    """
    Hemisphere enum from an enum or a letter (case and surrounding blanks ignored).

    With ``kind`` "lat" only N/S are accepted, with "lon" only E/W.

    Raises:
        InvalidHemisphereError: not a hemisphere, or the wrong axis for ``kind``.
    """
    if kind == "lat":
        allowed: Tuple[type, ...] = (LatitudeHemisphere,)
    elif kind == "lon":
        allowed = (LongitudeHemisphere,)
    elif kind is None:
        allowed = (LatitudeHemisphere, LongitudeHemisphere)
    else:
        raise ValueError(f"kind must be 'lat' or 'lon', got {kind!r}")

    if isinstance(value, allowed):
        return value
    if isinstance(value, str):
        letter = value.strip().upper()
        for enum in allowed:
            if letter in enum.__members__:
                return enum(letter)
    raise InvalidHemisphereError(value, kind)


def from_sexagesimal(degrees: int, minutes: int, seconds: float, hemisphere, kind: Optional[str] = None) -> float:
    """Unsigned DMS plus a hemisphere (enum or letter) -> signed decimal degrees."""
    hemisphere = parse_hemisphere(hemisphere, kind)
    return hemisphere.sign * dms_to_decimal(degrees, minutes, seconds)


__all__ = [
    "whole_degrees",
    "whole_minutes",
    "seconds",
    "whole_seconds",
    "decimal_to_dms",
    "dms_to_decimal",
    "to_sexagesimal",
    "parse_hemisphere",
    "from_sexagesimal",
]
