"""
Conversions between geodetic (latitude, longitude, height) and geocentric
Earth-Centered-Earth-Fixed (ECEF) cartesian coordinates
"""

__all__ = ['ecef_offset', 'ecef_to_geo', 'geo_to_ecef']

from functools import lru_cache
import math
from typing import Tuple, Union

from geoframes import units
from geoframes._const import OLSON_MIN_RADIUS
from geoframes.ellipsoid import Ellipsoid
from geoframes.errors import DegenerateInputError, DomainViolationError
from geoframes.structures import Geodetic, XYZ
from geoframes.units import AngleUnit, RangeUnit

_Triple = Tuple[float, float, float]


def _prime_vertical_scale(e2: float, sin_lat: float) -> float:
    """
    1 / sqrt(1 - e^2 sin^2(lat)); the prime vertical radius of curvature is a times this.

    Ellipsoid validation keeps e^2 below 1, so the DomainViolationError only fires for
    an ellipsoid whose eccentricity was altered after construction.
    """
    arg = 1.0 - e2 * sin_lat * sin_lat
    if arg <= 0:
        raise DomainViolationError(
            f'1 - e^2 sin^2(lat) must be positive, got {arg}; is the eccentricity below 1?'
        )
    return 1.0 / math.sqrt(arg)


def _geo_to_ecef(ellipsoid: Ellipsoid, lat: float, lon: float, height: float) -> _Triple:
    """Geodetic (radians, meters) to ECEF (meters)"""
    e2 = ellipsoid.eccentricity_squared
    sin_lat, cos_lat = math.sin(lat), math.cos(lat)

    v = ellipsoid.a * _prime_vertical_scale(e2, sin_lat)

    return (
        (v + height) * cos_lat * math.cos(lon),
        (v + height) * cos_lat * math.sin(lon),
        (v * (1.0 - e2) + height) * sin_lat,
    )


@lru_cache(maxsize=16)
def _olson_coefficients(a: float, e2: float) -> Tuple[float, ...]:
    """Constants of Olson's method, derived from the semi-major axis and e^2"""
    a1 = a * e2
    a2 = a1 * a1
    a3 = a1 * e2 / 2
    a4 = 2.5 * a2
    a5 = a1 + a3
    a6 = 1.0 - e2
    return a1, a2, a3, a4, a5, a6


def _ecef_to_geo(ellipsoid: Ellipsoid, x: float, y: float, z: float) -> _Triple:
    """
    ECEF (meters) to geodetic (radians, meters) without iteration.

    D. K. Olson, "Converting Earth-Centered, Earth-Fixed Coordinates to Geodetic
    Coordinates", IEEE Transactions on Aerospace and Electronic Systems, 1996.
    """
    a, e2 = ellipsoid.a, ellipsoid.eccentricity_squared
    a1, a2, a3, a4, a5, a6 = _olson_coefficients(a, e2)

    zp = abs(z)
    w2 = x * x + y * y
    w = math.sqrt(w2)
    z2 = z * z
    r2 = w2 + z2
    r = math.sqrt(r2)
    if r < OLSON_MIN_RADIUS:
        raise DegenerateInputError(
            f'Point is {r:.1f}m from the center of the earth; geodetic coordinates are '
            f'only defined beyond {OLSON_MIN_RADIUS:.0f}m.'
        )

    lon = math.atan2(y, x)
    s2 = z2 / r2
    c2 = w2 / r2
    u = a2 / r
    v = a3 - a4 / r

    # Solve for whichever of sin/cos is better conditioned
    if c2 > 0.3:
        s = (zp / r) * (1.0 + c2 * (a1 + u + s2 * v) / r)
        lat = math.asin(s)
        ss = s * s
        c = math.sqrt(1.0 - ss)
    else:
        c = (w / r) * (1.0 - s2 * (a5 - u - c2 * v) / r)
        lat = math.acos(c)
        ss = 1.0 - c * c
        s = math.sqrt(ss)

    g = 1.0 - e2 * ss
    rg = a / math.sqrt(g)
    rf = a6 * rg
    u = w - rg * c
    v = zp - rf * s
    f = c * u + s * v
    m = c * v - s * u
    p = m / (rf / g + f)

    lat = lat + p
    height = f + m * p / 2
    if z < 0.0:
        lat = -lat

    return lat, lon, height


def _ecef_offset(
    ellipsoid: Ellipsoid,
    lat1: float, lon1: float, h1: float,
    lat2: float, lon2: float, h2: float,
) -> _Triple:
    """ECEF vector (meters) from the first geodetic point to the second (radians, meters)"""
    a = ellipsoid.a
    s1, c1 = math.sin(lat1), math.cos(lat1)
    s2, c2 = math.sin(lat2), math.cos(lat2)
    p1, p2 = c1 * math.cos(lon1), c2 * math.cos(lon2)
    q1, q2 = c1 * math.sin(lon1), c2 * math.sin(lon2)

    if ellipsoid.is_sphere:
        return (
            a * (p2 - p1) + (h2 * p2 - h1 * p1),
            a * (q2 - q1) + (h2 * q2 - h1 * q1),
            a * (s2 - s1) + (h2 * s2 - h1 * s1),
        )

    e2 = ellipsoid.eccentricity_squared
    w1 = _prime_vertical_scale(e2, s1)
    w2 = _prime_vertical_scale(e2, s2)
    return (
        a * (p2 * w2 - p1 * w1) + (h2 * p2 - h1 * p1),
        a * (q2 * w2 - q1 * w1) + (h2 * q2 - h1 * q1),
        (1.0 - e2) * a * (s2 * w2 - s1 * w1) + (h2 * s2 - h1 * s1),
    )


def geo_to_ecef(
    ellipsoid: Ellipsoid,
    lat: float,
    lon: float,
    height: float = 0.0,
    *,
    angle_unit: Union[AngleUnit, str] = AngleUnit.DEGREE,
    range_unit: Union[RangeUnit, str] = RangeUnit.METER,
) -> XYZ:
    """
    Converts a geodetic position to ECEF coordinates.

    Args:
        ellipsoid:
            The earth model

        lat, lon:
            Geodetic latitude and longitude

        height:
            Height above the ellipsoid

    Keyword Args:
        angle_unit:
            (Default degrees) Unit of lat/lon

        range_unit:
            (Default meters) Unit of the height and of the returned coordinates

    Returns:
        XYZ
    """
    x, y, z = _geo_to_ecef(
        ellipsoid,
        units.to_radians(lat, angle_unit),
        units.to_radians(lon, angle_unit),
        units.to_meters(height, range_unit),
    )
    return XYZ(
        units.from_meters(x, range_unit),
        units.from_meters(y, range_unit),
        units.from_meters(z, range_unit),
    )


def ecef_to_geo(
    ellipsoid: Ellipsoid,
    x: float,
    y: float,
    z: float,
    *,
    angle_unit: Union[AngleUnit, str] = AngleUnit.DEGREE,
    range_unit: Union[RangeUnit, str] = RangeUnit.METER,
) -> Geodetic:
    """
    Converts ECEF coordinates to a geodetic position using Olson's closed-form
    approximation, which is accurate to well below a millimeter for points near the
    earth's surface.

    Args:
        ellipsoid:
            The earth model

        x, y, z:
            ECEF coordinates

    Keyword Args:
        angle_unit:
            (Default degrees) Unit of the returned lat/lon

        range_unit:
            (Default meters) Unit of x/y/z and of the returned height

    Returns:
        Geodetic
    """
    lat, lon, height = _ecef_to_geo(
        ellipsoid,
        units.to_meters(x, range_unit),
        units.to_meters(y, range_unit),
        units.to_meters(z, range_unit),
    )
    return Geodetic(
        units.from_radians(lat, angle_unit),
        units.from_radians(lon, angle_unit),
        units.from_meters(height, range_unit),
    )


def ecef_offset(
    ellipsoid: Ellipsoid,
    lat1: float, lon1: float, h1: float,
    lat2: float, lon2: float, h2: float,
    *,
    angle_unit: Union[AngleUnit, str] = AngleUnit.DEGREE,
    range_unit: Union[RangeUnit, str] = RangeUnit.METER,
) -> XYZ:
    """
    Calculates the ECEF vector pointing from one geodetic position to another, i.e.
    ECEF(point 2) - ECEF(point 1).

    Args:
        ellipsoid:
            The earth model

        lat1, lon1, h1:
            The first (origin) position

        lat2, lon2, h2:
            The second (target) position

    Keyword Args:
        angle_unit:
            (Default degrees) Unit of latitudes and longitudes

        range_unit:
            (Default meters) Unit of the heights and of the returned vector

    Returns:
        XYZ
    """
    dx, dy, dz = _ecef_offset(
        ellipsoid,
        units.to_radians(lat1, angle_unit),
        units.to_radians(lon1, angle_unit),
        units.to_meters(h1, range_unit),
        units.to_radians(lat2, angle_unit),
        units.to_radians(lon2, angle_unit),
        units.to_meters(h2, range_unit),
    )
    return XYZ(
        units.from_meters(dx, range_unit),
        units.from_meters(dy, range_unit),
        units.from_meters(dz, range_unit),
    )
