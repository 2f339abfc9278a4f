"""
Value objects passed in and out of the coordinate engine.

Every record is immutable: conversions return new instances instead of filling
in a caller-supplied result object.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from geodesy.errors import UnknownDatumError


class Datum(Enum):
    """Supported reference ellipsoids."""

    CLARKE_1866 = "Clarke1866"
    GRS_80 = "GRS80"
    WGS_84 = "WGS84"

    @classmethod
    def parse(cls, value: Any) -> "Datum":
        """
        Resolve a datum selector.

        Accepts a ``Datum``, its name or value in any case and with or without
        separators ("WGS84", "wgs-84", "GRS_80", "clarke 1866"), or the legacy
        integer selectors 0 (Clarke 1866), 1 (GRS 80) and 2 (WGS 84).
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return _LEGACY_SELECTORS[value]
            except KeyError:
                raise UnknownDatumError(value) from None
        if isinstance(value, str):
            key = re.sub(r"[\s_\-]", "", value).upper()
            for datum in cls:
                if key in (datum.name.replace("_", ""), datum.value.upper()):
                    return datum
        raise UnknownDatumError(value)


_LEGACY_SELECTORS: Dict[int, Datum] = {
    0: Datum.CLARKE_1866,
    1: Datum.GRS_80,
    2: Datum.WGS_84,
}


class LatitudeHemisphere(Enum):
    N = "N"
    S = "S"

    @property
    def sign(self) -> int:
        return 1 if self is LatitudeHemisphere.N else -1


class LongitudeHemisphere(Enum):
    E = "E"
    W = "W"

    @property
    def sign(self) -> int:
        return 1 if self is LongitudeHemisphere.E else -1


@dataclass(frozen=True)
class LatLon:
    """Geodetic position in decimal degrees (not range-checked)."""

    latitude: float
    longitude: float

    def to_dict(self) -> Dict[str, float]:
        return {"latitude": self.latitude, "longitude": self.longitude}


@dataclass(frozen=True)
class UTM:
    """
    UTM/UPS grid coordinate.

    ``grid_zone`` is a zone number plus band letter ("13S") or one of the polar
    designators ("30A", "31B", "30Y", "31Z"). It is stored uppercase.
    """

    grid_zone: str
    easting: float
    northing: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "grid_zone", (self.grid_zone or "").strip().upper())

    @property
    def zone_number(self) -> Optional[int]:
        head = self.grid_zone[:2]
        return int(head) if len(head) == 2 and head.isascii() and head.isdigit() else None

    @property
    def band(self) -> str:
        return self.grid_zone[2:3]

    def to_dict(self) -> Dict[str, Any]:
        return {"grid_zone": self.grid_zone, "easting": self.easting, "northing": self.northing}


@dataclass(frozen=True)
class DMS:
    """Unsigned sexagesimal angle; the hemisphere is tracked separately."""

    degrees: int
    minutes: int
    seconds: float

    @property
    def whole_seconds(self) -> int:
        return int(self.seconds)

    def to_dict(self) -> Dict[str, Any]:
        return {"degrees": self.degrees, "minutes": self.minutes, "seconds": self.seconds}


__all__ = [
    "Datum",
    "LatitudeHemisphere",
    "LongitudeHemisphere",
    "LatLon",
    "UTM",
    "DMS",
]
