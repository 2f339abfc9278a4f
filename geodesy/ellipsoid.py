"""Reference ellipsoid parameters for the supported datums."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from geodesy.models import Datum


# (semimajor axis a, semiminor axis b) in metres
AXES: Dict[Datum, Tuple[float, float]] = {
    Datum.CLARKE_1866: (6378206.4, 6356583.8),
    Datum.GRS_80: (6378137.0, 6356752.3),
    Datum.WGS_84: (6378137.0, 6356752.31425),
}


@dataclass(frozen=True)
class Ellipsoid:
    """Axes of an ellipsoid plus the eccentricity terms the projections use."""

    a: float
    b: float

    @property
    def flattening(self) -> float:
        return 1.0 - (self.b / self.a)

    @property
    def e2(self) -> float:
        f = self.flattening
        return 2.0 * f - f * f

    @property
    def e(self) -> float:
        return math.sqrt(self.e2)

    @property
    def e4(self) -> float:
        return self.e2 * self.e2

    @property
    def e6(self) -> float:
        return self.e4 * self.e2

    @property
    def e8(self) -> float:
        return self.e4 * self.e4

    @property
    def ep2(self) -> float:
        """Second eccentricity squared."""
        return self.e2 / (1.0 - self.e2)


def ellipsoid_for(datum: Any) -> Ellipsoid:
    """Return the ellipsoid for ``datum``; raises ``UnknownDatumError`` otherwise."""
    a, b = AXES[Datum.parse(datum)]
    return Ellipsoid(a=a, b=b)


__all__ = ["AXES", "Ellipsoid", "ellipsoid_for"]
