"""
Coordinate engine: geodetic latitude/longitude <-> UTM/UPS.

Every function here is pure; results are returned as new value objects and
failures are raised as ``CoordinateConversionError`` subclasses.
"""

__version__ = "0.1.0"

from geodesy.angles import (
    decimal_to_dms,
    dms_to_decimal,
    from_sexagesimal,
    parse_hemisphere,
    to_sexagesimal,
)
from geodesy.ellipsoid import Ellipsoid, ellipsoid_for
from geodesy.errors import (
    CoordinateConversionError,
    InvalidGridZoneFormatError,
    InvalidHemisphereError,
    NonexistentZoneError,
    UnknownDatumError,
)
from geodesy.models import (
    DMS,
    UTM,
    Datum,
    LatitudeHemisphere,
    LatLon,
    LongitudeHemisphere,
)
from geodesy.projection import forward, inverse, point_scale_factor
from geodesy.zones import resolve_central_meridian, resolve_zone

__all__ = [
    "__version__",
    "forward",
    "inverse",
    "point_scale_factor",
    "resolve_zone",
    "resolve_central_meridian",
    "ellipsoid_for",
    "Ellipsoid",
    "decimal_to_dms",
    "dms_to_decimal",
    "to_sexagesimal",
    "from_sexagesimal",
    "parse_hemisphere",
    "Datum",
    "LatLon",
    "UTM",
    "DMS",
    "LatitudeHemisphere",
    "LongitudeHemisphere",
    "CoordinateConversionError",
    "UnknownDatumError",
    "InvalidGridZoneFormatError",
    "NonexistentZoneError",
    "InvalidHemisphereError",
]
