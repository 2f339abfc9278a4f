"""
Exceptions raised by the coordinate engine.

All of them are input-validation failures detected before any projection
arithmetic runs, so a failed call never produces a partial result.
"""

from __future__ import annotations

from typing import Any, Optional


class CoordinateConversionError(ValueError):
    """Base class for every conversion failure raised by :mod:`geodesy`."""

    error_type = "CoordinateConversionError"


class UnknownDatumError(CoordinateConversionError):
    """The datum selector is not one of the supported reference ellipsoids."""

    error_type = "UnknownDatum"

    def __init__(self, datum: Any):
        self.datum = datum
        super().__init__(f"Unknown datum: {datum!r}.")


class InvalidGridZoneFormatError(CoordinateConversionError):
    """The grid zone does not start with a two-digit zone number."""

    error_type = "InvalidGridZoneFormat"

    def __init__(self, grid_zone: str):
        self.grid_zone = grid_zone
        super().__init__(f"Invalid grid zone format: {grid_zone!r}.")


class NonexistentZoneError(CoordinateConversionError):
    """Band 'X' paired with zone 32, 34 or 36 (these zones were merged away)."""

    error_type = "NonexistentZone"

    def __init__(self, grid_zone: str):
        self.grid_zone = grid_zone
        super().__init__(f"Zone {grid_zone} does not exist!")


class InvalidHemisphereError(CoordinateConversionError):
    """Not N/S for a latitude, or not E/W for a longitude."""

    error_type = "InvalidHemisphere"

    def __init__(self, hemisphere: Any, kind: Optional[str] = None):
        self.hemisphere = hemisphere
        self.kind = kind
        axis = {"lat": "latitude ", "lon": "longitude "}.get(kind, "")
        super().__init__(f"Unknown {axis}hemisphere: {hemisphere!r}.")


__all__ = [
    "CoordinateConversionError",
    "UnknownDatumError",
    "InvalidGridZoneFormatError",
    "NonexistentZoneError",
    "InvalidHemisphereError",
]
