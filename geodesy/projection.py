"""
Forward and inverse UTM/UPS projections.

The formulae are the series given in Snyder, "Map Projections: A Working
Manual" (USGS Professional Paper 1395): transverse Mercator (chapter 8) for
UTM and the ellipsoidal polar stereographic (chapter 21) for UPS.

Polar aspects are handled through the north-polar equations only. The south
pole is projected by reflecting the point through the equator and the prime
meridian, projecting it as if it were north, then reflecting the result back.
"""

from __future__ import annotations

import math
from typing import Any, Tuple

from geodesy.ellipsoid import Ellipsoid, ellipsoid_for
from geodesy.models import LatLon, UTM
from geodesy.zones import (
    NORTH_POLAR_LIMIT,
    SOUTH_POLAR_LIMIT,
    is_southern_band,
    resolve_central_meridian,
    resolve_zone,
)
from utils.logger import get_logger

logger = get_logger(__name__)


UTM_SCALE_FACTOR = 0.9996
UPS_SCALE_FACTOR = 0.994

UTM_FALSE_EASTING = 500000.0
UTM_FALSE_NORTHING_SOUTH = 10000000.0
UPS_FALSE_ORIGIN = 2000000.0

POLAR_CONVERGENCE = 1e-14
MAX_POLAR_ITERATIONS = 100


# ==============================================================================
# SHARED SERIES
# ==============================================================================

def _meridional_arc(ell: Ellipsoid, phi: float) -> float:
    """Distance along the meridian from the equator to latitude ``phi``."""
    e2, e4, e6 = ell.e2, ell.e4, ell.e6
    return ell.a * (
        (1 - e2 / 4 - 3 * e4 / 64 - 5 * e6 / 256) * phi
        - (3 * e2 / 8 + 3 * e4 / 32 + 45 * e6 / 1024) * math.sin(2 * phi)
        + (15 * e4 / 256 + 45 * e6 / 1024) * math.sin(4 * phi)
        - (35 * e6 / 3072) * math.sin(6 * phi)
    )


def _polar_rho_denominator(ell: Ellipsoid) -> float:
    e = ell.e
    return math.sqrt(math.pow(1 + e, 1 + e) * math.pow(1 - e, 1 - e))


def _polar_rho(ell: Ellipsoid, phi: float) -> float:
    """Radius on the north-polar stereographic plane for latitude ``phi``."""
    e = ell.e
    sin_phi = math.sin(phi)
    t = math.sqrt(
        ((1 - sin_phi) / (1 + sin_phi))
        * math.pow((1 + e * sin_phi) / (1 - e * sin_phi), e)
    )
    return 2 * ell.a * UPS_SCALE_FACTOR * t / _polar_rho_denominator(ell)


def _polar_latitude(ell: Ellipsoid, x: float, y: float) -> float:
    """
    Invert the north-polar radius back to a latitude.

    Starts from the conformal-latitude series and refines it by fixed-point
    iteration until two successive estimates agree to ``POLAR_CONVERGENCE``.
    """
    e, e2, e4, e6, e8 = ell.e, ell.e2, ell.e4, ell.e6, ell.e8
    rho = math.hypot(x, y)
    t = rho * _polar_rho_denominator(ell) / (2 * ell.a * UPS_SCALE_FACTOR)

    chi = math.pi / 2 - 2 * math.atan(t)
    phit = (
        chi
        + (e2 / 2 + 5 * e4 / 24 + e6 / 12 + 13 * e8 / 360) * math.sin(2 * chi)
        + (7 * e4 / 48 + 29 * e6 / 240 + 811 * e8 / 11520) * math.sin(4 * chi)
        + (7 * e6 / 120 + 81 * e8 / 1120) * math.sin(6 * chi)
        + (4279 * e8 / 161280) * math.sin(8 * chi)
    )

    for _ in range(MAX_POLAR_ITERATIONS):
        phi = phit
        sin_phi = math.sin(phi)
        phit = math.pi / 2 - 2 * math.atan(
            t * math.pow((1 - e * sin_phi) / (1 + e * sin_phi), e / 2)
        )
        if abs(phi - phit) <= POLAR_CONVERGENCE:
            break
    return phit


# ==============================================================================
# FORWARD: LAT/LON -> UTM/UPS
# ==============================================================================

def _ups_north(ell: Ellipsoid, phi: float, dlam: float) -> Tuple[float, float]:
    rho = _polar_rho(ell, phi)
    return rho * math.sin(dlam), -rho * math.cos(dlam)


def _utm_series(ell: Ellipsoid, phi: float, dlam: float) -> Tuple[float, float]:
    k0 = UTM_SCALE_FACTOR
    ep2 = ell.ep2
    sin_phi, cos_phi, tan_phi = math.sin(phi), math.cos(phi), math.tan(phi)

    aa = dlam * cos_phi
    aa2 = aa * aa
    aa3 = aa2 * aa
    aa4 = aa2 * aa2
    aa5 = aa4 * aa
    aa6 = aa3 * aa3

    nn = ell.a / math.sqrt(1 - ell.e2 * sin_phi * sin_phi)
    tt = tan_phi * tan_phi
    cc = ep2 * cos_phi * cos_phi
    mm = _meridional_arc(ell, phi)
    mm0 = _meridional_arc(ell, 0.0)

    x = k0 * nn * (
        aa
        + (1 - tt + cc) * aa3 / 6
        + (5 - 18 * tt + tt * tt + 72 * cc - 58 * ep2) * aa5 / 120
    )
    y = k0 * (
        mm - mm0 + nn * tan_phi * (
            aa2 / 2
            + (5 - tt + 9 * cc + 4 * cc * cc) * aa4 / 24
            + (61 - 58 * tt + tt * tt + 600 * cc - 330 * ep2) * aa6 / 720
        )
    )
    return x, y


def forward(lat_lon: LatLon, datum: Any) -> UTM:
    """
    Project a geodetic position to UTM, or to UPS beyond 84N / 80S.

    Raises:
        UnknownDatumError: ``datum`` is not a supported datum.
    """
    ell = ellipsoid_for(datum)
    grid_zone, lambda0 = resolve_zone(lat_lon)

    phi = math.radians(lat_lon.latitude)
    lam = math.radians(lat_lon.longitude)

    if lat_lon.latitude > NORTH_POLAR_LIMIT:
        x, y = _ups_north(ell, phi, lam - lambda0)
        x += UPS_FALSE_ORIGIN
        y += UPS_FALSE_ORIGIN
    elif lat_lon.latitude < SOUTH_POLAR_LIMIT:
        x, y = _ups_north(ell, -phi, -lam + lambda0)
        x = -x + UPS_FALSE_ORIGIN
        y = -y + UPS_FALSE_ORIGIN
    else:
        x, y = _utm_series(ell, phi, lam - lambda0)
        x += UTM_FALSE_EASTING
        if y < 0.0:
            y += UTM_FALSE_NORTHING_SOUTH

    logger.debug("forward %s -> %s %.3f %.3f", lat_lon, grid_zone, x, y)
    return UTM(grid_zone=grid_zone, easting=x, northing=y)


def point_scale_factor(lat_lon: LatLon, datum: Any) -> float:
    """Point scale factor k of the grid at a geodetic position."""
    ell = ellipsoid_for(datum)
    _, lambda0 = resolve_zone(lat_lon)
    phi = math.radians(lat_lon.latitude)
    lam = math.radians(lat_lon.longitude)

    if lat_lon.latitude > NORTH_POLAR_LIMIT or lat_lon.latitude < SOUTH_POLAR_LIMIT:
        phi = abs(phi)
        if math.isclose(phi, math.pi / 2):
            return UPS_SCALE_FACTOR
        m = math.cos(phi) / math.sqrt(1 - ell.e2 * math.sin(phi) ** 2)
        return _polar_rho(ell, phi) / (ell.a * m)

    k0 = UTM_SCALE_FACTOR
    ep2 = ell.ep2
    aa = (lam - lambda0) * math.cos(phi)
    aa2 = aa * aa
    aa4 = aa2 * aa2
    aa6 = aa4 * aa2
    tt = math.tan(phi) ** 2
    cc = ep2 * math.cos(phi) ** 2
    return k0 * (
        1
        + (1 + cc) * aa2 / 2
        + (5 - 4 * tt + 42 * cc + 13 * cc * cc - 28 * ep2) * aa4 / 24
        + (61 - 148 * tt + 16 * tt * tt) * aa6 / 720
    )


# ==============================================================================
# INVERSE: UTM/UPS -> LAT/LON
# ==============================================================================

def _utm_inverse(ell: Ellipsoid, x: float, y: float) -> Tuple[float, float]:
    """Return ``(phi, dlam)`` in radians for false-origin-free UTM x/y."""
    k0 = UTM_SCALE_FACTOR
    e2, e4, e6, ep2 = ell.e2, ell.e4, ell.e6, ell.ep2

    # footpoint latitude
    root = math.sqrt(1 - e2)
    e1 = (1 - root) / (1 + root)
    e12 = e1 * e1
    e13 = e1 * e12
    e14 = e12 * e12

    mm = _meridional_arc(ell, 0.0) + y / k0
    mu = mm / (ell.a * (1 - e2 / 4 - 3 * e4 / 64 - 5 * e6 / 256))
    phi1 = (
        mu
        + (3 * e1 / 2 - 27 * e13 / 32) * math.sin(2 * mu)
        + (21 * e12 / 16 - 55 * e14 / 32) * math.sin(4 * mu)
        + (151 * e13 / 96) * math.sin(6 * mu)
        + (1097 * e14 / 512) * math.sin(8 * mu)
    )

    sin1, cos1, tan1 = math.sin(phi1), math.cos(phi1), math.tan(phi1)
    cc1 = ep2 * cos1 * cos1
    tt1 = tan1 * tan1
    nn1 = ell.a / math.sqrt(1 - e2 * sin1 * sin1)
    rr1 = ell.a * (1 - e2) / math.pow(1 - e2 * sin1 * sin1, 1.5)

    dd = x / (nn1 * k0)
    dd2 = dd * dd
    dd3 = dd * dd2
    dd4 = dd2 * dd2
    dd5 = dd3 * dd2
    dd6 = dd4 * dd2

    phi = phi1 - (nn1 * tan1 / rr1) * (
        dd2 / 2
        - (5 + 3 * tt1 + 10 * cc1 - 4 * cc1 * cc1 - 9 * ep2) * dd4 / 24
        + (61 + 90 * tt1 + 298 * cc1 + 45 * tt1 * tt1 - 252 * ep2 - 3 * cc1 * cc1) * dd6 / 720
    )
    dlam = (
        dd
        - (1 + 2 * tt1 + cc1) * dd3 / 6
        + (5 - 2 * cc1 + 28 * tt1 - 3 * cc1 * cc1 + 8 * ep2 + 24 * tt1 * tt1) * dd5 / 120
    ) / cos1
    return phi, dlam


def inverse(utm: UTM, datum: Any) -> LatLon:
    """
    Recover the geodetic position of a UTM/UPS coordinate.

    Raises:
        UnknownDatumError: ``datum`` is not a supported datum.
        InvalidGridZoneFormatError: the zone does not start with two digits.
        NonexistentZoneError: the zone is 32X, 34X or 36X.
    """
    ell = ellipsoid_for(datum)
    lambda0 = resolve_central_meridian(utm.grid_zone)
    band = utm.band

    if band in ("Y", "Z"):
        x = utm.easting - UPS_FALSE_ORIGIN
        y = utm.northing - UPS_FALSE_ORIGIN
        phi = _polar_latitude(ell, x, y)
        lam = lambda0 + math.atan2(x, -y)
    elif band in ("A", "B"):
        x = -(utm.easting - UPS_FALSE_ORIGIN)
        y = -(utm.northing - UPS_FALSE_ORIGIN)
        phi = -_polar_latitude(ell, x, y)
        lam = lambda0 - math.atan2(x, -y)
    else:
        x = utm.easting - UTM_FALSE_EASTING
        y = utm.northing
        if is_southern_band(band):
            y -= UTM_FALSE_NORTHING_SOUTH
        phi, dlam = _utm_inverse(ell, x, y)
        lam = lambda0 + dlam

    result = LatLon(latitude=math.degrees(phi), longitude=math.degrees(lam))
    logger.debug("inverse %s -> %s", utm, result)
    return result


__all__ = [
    "UTM_SCALE_FACTOR",
    "UPS_SCALE_FACTOR",
    "forward",
    "inverse",
    "point_scale_factor",
]
