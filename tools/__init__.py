"""
================================================================================
utmconv Tools Package
================================================================================

Tool classes sit between the pure ``geodesy`` engine and the outside world.
They read defaults from settings, log what they do and return plain
dictionaries, so callers never have to handle engine exceptions themselves.

TOOL OVERVIEW:
--------------
1. UTMConverter
   - Lat/lon (decimal or DMS) → UTM/UPS
   - UTM/UPS → lat/lon with DMS breakdown
   - Batch conversion with per-point errors
   - Cross-check against pyproj

License: MIT
================================================================================
"""

from tools.utm_converter import LATLON_TO_UTM, UTM_TO_LATLON, UTMConverter

__all__ = [
    "UTMConverter",   # Settings-aware converter returning dict results
    "LATLON_TO_UTM",  # Batch direction constant
    "UTM_TO_LATLON",  # Batch direction constant
]
