"""
UTM/UPS grid zone resolution.

Forward: latitude/longitude -> grid zone designator and central meridian.
Inverse: grid zone designator -> central meridian.

The irregular zones around Norway (band V) and Svalbard (band X) are listed in
``IRREGULAR_ZONES`` and checked, in order, before the regular 6-degree rule.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional, Tuple

from geodesy.errors import InvalidGridZoneFormatError, NonexistentZoneError
from geodesy.models import LatLon
from utils.logger import get_logger

logger = get_logger(__name__)


# Latitude band letters from -80 to 84 degrees, 'I' and 'O' are never used
LATITUDE_BANDS = "CDEFGHJKLMNPQRSTUVWX"

NORTH_POLAR_LIMIT = 84.0
SOUTH_POLAR_LIMIT = -80.0

POLAR_BANDS: FrozenSet[str] = frozenset("ABYZ")
NONEXISTENT_ZONES: FrozenSet[str] = frozenset({"32X", "34X", "36X"})


@dataclass(frozen=True)
class ZoneRule:
    """An irregular zone; both ranges are half-open, like the latitude bands."""

    label: str
    lat_min: float
    lat_max: float
    lon_min: float
    lon_max: float
    meridian: float  # degrees

    def matches(self, latitude: float, longitude: float) -> bool:
        return (self.lat_min <= latitude < self.lat_max
                and self.lon_min <= longitude < self.lon_max)


IRREGULAR_ZONES: Tuple[ZoneRule, ...] = (
    ZoneRule("31X", 72.0, math.inf, 0.0, 9.0, 4.5),
    ZoneRule("33X", 72.0, math.inf, 9.0, 21.0, 15.0),
    ZoneRule("35X", 72.0, math.inf, 21.0, 33.0, 27.0),
    ZoneRule("37X", 72.0, math.inf, 33.0, 42.0, 37.5),
    ZoneRule("31V", 56.0, 64.0, 0.0, 3.0, 1.5),
    ZoneRule("32V", 56.0, 64.0, 3.0, 12.0, 7.5),
)

_IRREGULAR_MERIDIANS: Dict[str, float] = {rule.label: rule.meridian for rule in IRREGULAR_ZONES}


def zone_number(longitude: float) -> int:
    """Regular 6-degree zone number (1..60) for a longitude."""
    number = int(math.floor((longitude + 180.0) / 6.0)) + 1
    return min(max(number, 1), 60)


def standard_meridian(number: int) -> float:
    """Central meridian in degrees of a regular zone."""
    return (number - 1) * 6.0 - 180.0 + 3.0


def band_letter(latitude: float) -> str:
    """
    Latitude band letter for -80 <= latitude <= 84.

    The raw letter is 'C' plus one per 8 degrees; it is then pushed past 'H'
    (skipping 'I') and past 'N' (skipping 'O'). Everything from 80 degrees up is
    band 'X', which is 12 degrees tall.
    """
    if latitude >= 80.0:
        return "X"
    offset = int(math.floor((latitude - SOUTH_POLAR_LIMIT) / 8.0))
    letter = chr(ord("C") + offset)
    if letter > "H":
        letter = chr(ord(letter) + 1)
    if letter > "N":
        letter = chr(ord(letter) + 1)
    return letter


def is_southern_band(band: str) -> bool:
    """True for the southern hemisphere UTM bands C..M."""
    return "B" < band < "N"


def _polar_zone(lat_lon: LatLon) -> Optional[str]:
    west = lat_lon.longitude < 0
    if lat_lon.latitude < SOUTH_POLAR_LIMIT:
        return "30A" if west else "31B"
    if lat_lon.latitude > NORTH_POLAR_LIMIT:
        return "30Y" if west else "31Z"
    return None


def resolve_zone(lat_lon: LatLon) -> Tuple[str, float]:
    """Return ``(grid_zone, central_meridian_radians)`` for a position."""
    polar = _polar_zone(lat_lon)
    if polar is not None:
        return polar, 0.0

    for rule in IRREGULAR_ZONES:
        if rule.matches(lat_lon.latitude, lat_lon.longitude):
            return rule.label, math.radians(rule.meridian)

    number = zone_number(lat_lon.longitude)
    grid_zone = f"{number:02d}{band_letter(lat_lon.latitude)}"
    return grid_zone, math.radians(standard_meridian(number))


def resolve_central_meridian(grid_zone: str) -> float:
    """
    Central meridian in radians for a grid zone designator.

    Raises:
        InvalidGridZoneFormatError: the designator does not start with two
            digits followed by a band letter.
        NonexistentZoneError: 32X, 34X or 36X.
    """
    head = grid_zone[:2]
    if len(grid_zone) < 3 or not (head.isascii() and head.isdigit()):
        logger.debug("Rejected grid zone %r", grid_zone)
        raise InvalidGridZoneFormatError(grid_zone)

    number = int(head)
    band = grid_zone[2]
    label = f"{head}{band}"

    if band in POLAR_BANDS:
        return 0.0
    if label in NONEXISTENT_ZONES:
        logger.debug("Rejected grid zone %r", grid_zone)
        raise NonexistentZoneError(grid_zone)
    if label in _IRREGULAR_MERIDIANS:
        return math.radians(_IRREGULAR_MERIDIANS[label])
    return math.radians(standard_meridian(number))


__all__ = [
    "LATITUDE_BANDS",
    "IRREGULAR_ZONES",
    "NONEXISTENT_ZONES",
    "ZoneRule",
    "zone_number",
    "standard_meridian",
    "band_letter",
    "is_southern_band",
    "resolve_zone",
    "resolve_central_meridian",
]
