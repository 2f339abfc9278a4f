"""
UTM/UPS converter tool.

Wraps the ``geodesy`` engine for callers that want plain dictionaries back
(the CLI, scripts, JSON output): every method returns ``{"success": True, ...}``
or ``{"success": False, "error": ..., "error_type": ...}`` instead of raising
for bad coordinates.

pyproj is used only by ``cross_check`` as an independent reference for the
engine's own series.
"""

from __future__ import annotations

import math
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from config import get_settings
from geodesy import (
    DMS,
    UTM,
    CoordinateConversionError,
    Datum,
    LatLon,
    ellipsoid_for,
    forward,
    from_sexagesimal,
    inverse,
    point_scale_factor,
    resolve_zone,
    to_sexagesimal,
)
from utils.coordinate_parsing import normalize_grid_zone
from utils.logger import get_logger

logger = get_logger(__name__)

LATLON_TO_UTM = "latlon_to_utm"
UTM_TO_LATLON = "utm_to_latlon"


class UTMConverter:
    """Convert between geodetic lat/lon and UTM/UPS on one datum."""

    def __init__(self, datum: Any = None) -> None:
        self.settings = get_settings()
        self.datum: Datum = Datum.parse(datum) if datum is not None else self.settings.datum

    # ------------------------------------------------------------------
    # Result helpers
    # ------------------------------------------------------------------

    def _failure(self, exc: CoordinateConversionError, **context: Any) -> Dict[str, Any]:
        logger.warning("Conversion failed (%s): %s", exc.error_type, exc)
        return {
            "success": False,
            "error": str(exc),
            "error_type": exc.error_type,
            "datum": self.datum.value,
            **context,
        }

    @staticmethod
    def _dms_summary(lat_lon: LatLon) -> Dict[str, Any]:
        summary: Dict[str, Any] = {}
        for key, value, kind in (("latitude", lat_lon.latitude, "lat"),
                                 ("longitude", lat_lon.longitude, "lon")):
            dms, hemisphere = to_sexagesimal(value, kind)
            summary[key] = {**dms.to_dict(), "hemisphere": hemisphere.value}
        return summary

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------

    def latlon_to_utm(self, latitude: float, longitude: float) -> Dict[str, Any]:
        """
        Convert decimal degrees to UTM/UPS.

        Returns:
            Dictionary with ``latlon`` (input), ``utm`` (grid zone, easting,
            northing), ``scale_factor`` and ``datum``.
        """
        lat_lon = LatLon(latitude=float(latitude), longitude=float(longitude))
        try:
            utm = forward(lat_lon, self.datum)
            k = point_scale_factor(lat_lon, self.datum)
        except CoordinateConversionError as exc:
            return self._failure(exc, latlon=lat_lon.to_dict())

        logger.info(f"Converted {latitude}, {longitude} -> {utm.grid_zone} {utm.easting:.3f} {utm.northing:.3f}")
        return {
            "success": True,
            "datum": self.datum.value,
            "latlon": lat_lon.to_dict(),
            "utm": utm.to_dict(),
            "dms": self._dms_summary(lat_lon),
            "scale_factor": k,
        }

    def dms_to_utm(
        self,
        lat_dms: Sequence[float],
        lat_hemisphere: str,
        lon_dms: Sequence[float],
        lon_hemisphere: str,
    ) -> Dict[str, Any]:
        """
        Convert a sexagesimal position to UTM/UPS.

        Args:
            lat_dms, lon_dms: ``(degrees, minutes, seconds)`` magnitudes; a
                ``DMS`` instance works too.
            lat_hemisphere: "N" or "S".
            lon_hemisphere: "E" or "W".

        A hemisphere letter on the wrong axis (e.g. "E" for the latitude)
        is reported as an ``InvalidHemisphere`` failure.
        """
        lat_parts = self._dms_parts(lat_dms)
        lon_parts = self._dms_parts(lon_dms)
        try:
            latitude = from_sexagesimal(*lat_parts, lat_hemisphere, kind="lat")
            longitude = from_sexagesimal(*lon_parts, lon_hemisphere, kind="lon")
        except CoordinateConversionError as exc:
            return self._failure(exc, hemispheres={
                "latitude": getattr(lat_hemisphere, "value", lat_hemisphere),
                "longitude": getattr(lon_hemisphere, "value", lon_hemisphere),
            })
        return self.latlon_to_utm(latitude, longitude)

    @staticmethod
    def _dms_parts(value: Any) -> Tuple[float, float, float]:
        if isinstance(value, DMS):
            return value.degrees, value.minutes, value.seconds
        parts = list(value) + [0, 0]
        return parts[0], parts[1], parts[2]

    def utm_to_latlon(self, grid_zone: str, easting: float, northing: float) -> Dict[str, Any]:
        """
        Convert a UTM/UPS coordinate to decimal degrees.

        The grid zone is case-insensitive. The result also carries the
        sexagesimal breakdown with hemisphere letters under ``dms``.
        """
        utm = UTM(grid_zone=normalize_grid_zone(grid_zone), easting=float(easting), northing=float(northing))
        try:
            lat_lon = inverse(utm, self.datum)
        except CoordinateConversionError as exc:
            return self._failure(exc, utm=utm.to_dict())

        logger.info(f"Converted {utm.grid_zone} {easting} {northing} -> {lat_lon.latitude:.8f}, {lat_lon.longitude:.8f}")
        return {
            "success": True,
            "datum": self.datum.value,
            "utm": utm.to_dict(),
            "latlon": lat_lon.to_dict(),
            "dms": self._dms_summary(lat_lon),
        }

    def convert_batch(self, points: Iterable[Sequence[Any]], direction: str = LATLON_TO_UTM) -> List[Dict[str, Any]]:
        """
        Convert many points in one direction.

        Args:
            points: ``(lat, lon)`` pairs for ``latlon_to_utm`` or
                ``(grid_zone, easting, northing)`` triples for ``utm_to_latlon``.
            direction: ``"latlon_to_utm"`` or ``"utm_to_latlon"``.

        Returns:
            One result dictionary per point, failures included.
        """
        if direction == LATLON_TO_UTM:
            convert = self.latlon_to_utm
        elif direction == UTM_TO_LATLON:
            convert = self.utm_to_latlon
        else:
            raise ValueError(f"Unknown direction: {direction!r}")

        results = [convert(*point) for point in points]
        successful = sum(1 for r in results if r["success"])
        logger.info(f"Batch conversion complete: {successful}/{len(results)} successful ({direction})")
        return results

    # ------------------------------------------------------------------
    # Independent reference
    # ------------------------------------------------------------------

    def _reference_proj_string(self, lat_lon: LatLon) -> str:
        ell = ellipsoid_for(self.datum)
        ellps = f"+a={ell.a} +b={ell.b} +units=m +no_defs"
        if lat_lon.latitude > 84.0:
            return f"+proj=ups {ellps}"
        if lat_lon.latitude < -80.0:
            return f"+proj=ups +south {ellps}"
        _, lambda0 = resolve_zone(lat_lon)
        y_0 = 10000000 if lat_lon.latitude < 0 else 0
        return (
            f"+proj=tmerc +lat_0=0 +lon_0={math.degrees(lambda0)!r} +k=0.9996 "
            f"+x_0=500000 +y_0={y_0} {ellps}"
        )

    def cross_check(self, latitude: float, longitude: float, tolerance: Optional[float] = None) -> Dict[str, Any]:
        """
        Compare the engine against pyproj for one position.

        pyproj is given a PROJ definition built from the same ellipsoid and the
        zone/central meridian the engine resolved, so only the projection
        mathematics are compared.

        Returns:
            Dictionary with both results, ``delta_m`` (planar distance between
            them) and ``agrees`` (``delta_m`` within the tolerance).
        """
        from pyproj import CRS, Transformer

        tolerance = self.settings.cross_check_tolerance_m if tolerance is None else tolerance
        lat_lon = LatLon(latitude=float(latitude), longitude=float(longitude))
        try:
            utm = forward(lat_lon, self.datum)
        except CoordinateConversionError as exc:
            return self._failure(exc, latlon=lat_lon.to_dict())

        crs = CRS.from_proj4(self._reference_proj_string(lat_lon))
        transformer = Transformer.from_crs(crs.geodetic_crs, crs, always_xy=True)
        easting, northing = transformer.transform(lat_lon.longitude, lat_lon.latitude)

        delta = math.hypot(utm.easting - easting, utm.northing - northing)
        if delta > tolerance:
            logger.warning(f"Engine and pyproj differ by {delta:.4f} m at {latitude}, {longitude}")
        else:
            logger.debug("Cross-check %s, %s: delta %.6f m", latitude, longitude, delta)

        return {
            "success": True,
            "datum": self.datum.value,
            "latlon": lat_lon.to_dict(),
            "utm": utm.to_dict(),
            "reference": {"easting": float(easting), "northing": float(northing), "method": "pyproj"},
            "delta_m": delta,
            "tolerance_m": tolerance,
            "agrees": delta <= tolerance,
        }


__all__ = ["UTMConverter", "LATLON_TO_UTM", "UTM_TO_LATLON"]
