"""
Local tangent plane frames: East-North-Up (ENU), Azimuth-Elevation-Range (AER), and
UVW (a local vector rotated onto the ECEF axes, without translation)
"""

__all__ = [
    'aer_to_enu', 'ecef_to_enu', 'ecef_to_enuv', 'enu_rotation_matrix', 'enu_to_aer',
    'enu_to_ecef', 'enu_to_uvw', 'uvw_to_enu',
]

import math
from typing import Tuple, Union

import numpy as np

from geoframes import units
from geoframes.ellipsoid import Ellipsoid
from geoframes.geocentric import _geo_to_ecef
from geoframes.structures import AER, ENU, UVW, XYZ
from geoframes.units import AngleUnit, RangeUnit

_Triple = Tuple[float, float, float]


def enu_rotation_matrix(lat: float, lon: float) -> np.ndarray:
    """
    The rotation from ECEF axes to ENU axes at a geodetic latitude/longitude (radians).

    Rows are the east, north and up unit vectors expressed in ECEF, so that
    `R @ ecef_vector` is an ENU vector and `R.T @ enu_vector` is an ECEF (UVW) vector.

    Args:
        lat:
            Geodetic latitude, in radians

        lon:
            Longitude, in radians

    Returns:
        np.ndarray of shape (3, 3)
    """
    sin_lat, cos_lat = np.sin(lat), np.cos(lat)
    sin_lon, cos_lon = np.sin(lon), np.cos(lon)
    return np.array([
        [-sin_lon, cos_lon, 0.],
        [-sin_lat * cos_lon, -sin_lat * sin_lon, cos_lat],
        [cos_lat * cos_lon, cos_lat * sin_lon, sin_lat],
    ])


def _rotate(matrix: np.ndarray, vector: _Triple) -> _Triple:
    out = matrix @ np.asarray(vector, dtype=float)
    return float(out[0]), float(out[1]), float(out[2])


# -------------------------------------------------------------------------
# Radian / meter cores
# -------------------------------------------------------------------------

def _ecef_to_enuv(dx: float, dy: float, dz: float, lat0: float, lon0: float) -> _Triple:
    return _rotate(enu_rotation_matrix(lat0, lon0), (dx, dy, dz))


def _enu_to_uvw(east: float, north: float, up: float, lat0: float, lon0: float) -> _Triple:
    return _rotate(enu_rotation_matrix(lat0, lon0).T, (east, north, up))


def _ecef_to_enu(
    ellipsoid: Ellipsoid, x: float, y: float, z: float, lat0: float, lon0: float, h0: float
) -> _Triple:
    x0, y0, z0 = _geo_to_ecef(ellipsoid, lat0, lon0, h0)
    return _ecef_to_enuv(x - x0, y - y0, z - z0, lat0, lon0)


def _enu_to_ecef(
    ellipsoid: Ellipsoid, east: float, north: float, up: float,
    lat0: float, lon0: float, h0: float
) -> _Triple:
    x0, y0, z0 = _geo_to_ecef(ellipsoid, lat0, lon0, h0)
    u, v, w = _enu_to_uvw(east, north, up, lat0, lon0)
    return x0 + u, y0 + v, z0 + w


def _enu_to_aer(east: float, north: float, up: float) -> _Triple:
    horizontal = math.hypot(east, north)
    slant_range = math.hypot(horizontal, up)
    elevation = math.atan2(up, horizontal)
    azimuth = units.wrap_azimuth(math.atan2(east, north))
    return azimuth, elevation, slant_range


def _aer_to_enu(azimuth: float, elevation: float, slant_range: float) -> _Triple:
    up = slant_range * math.sin(elevation)
    horizontal = slant_range * math.cos(elevation)
    return horizontal * math.sin(azimuth), horizontal * math.cos(azimuth), up


# -------------------------------------------------------------------------
# Public interface
# -------------------------------------------------------------------------

def ecef_to_enu(
    ellipsoid: Ellipsoid,
    x: float, y: float, z: float,
    lat0: float, lon0: float, h0: float = 0.0,
    *,
    angle_unit: Union[AngleUnit, str] = AngleUnit.DEGREE,
    range_unit: Union[RangeUnit, str] = RangeUnit.METER,
) -> ENU:
    """
    Expresses an ECEF position in the ENU frame anchored at a geodetic reference point.

    Args:
        ellipsoid:
            The earth model

        x, y, z:
            The ECEF position

        lat0, lon0, h0:
            The geodetic anchor of the local frame

    Keyword Args:
        angle_unit:
            (Default degrees) Unit of lat0/lon0

        range_unit:
            (Default meters) Unit of x/y/z, h0 and the returned ENU coordinates

    Returns:
        ENU
    """
    east, north, up = _ecef_to_enu(
        ellipsoid,
        units.to_meters(x, range_unit),
        units.to_meters(y, range_unit),
        units.to_meters(z, range_unit),
        units.to_radians(lat0, angle_unit),
        units.to_radians(lon0, angle_unit),
        units.to_meters(h0, range_unit),
    )
    return ENU(
        units.from_meters(east, range_unit),
        units.from_meters(north, range_unit),
        units.from_meters(up, range_unit),
    )


def enu_to_ecef(
    ellipsoid: Ellipsoid,
    east: float, north: float, up: float,
    lat0: float, lon0: float, h0: float = 0.0,
    *,
    angle_unit: Union[AngleUnit, str] = AngleUnit.DEGREE,
    range_unit: Union[RangeUnit, str] = RangeUnit.METER,
) -> XYZ:
    """
    Converts ENU coordinates anchored at a geodetic reference point back to ECEF.

    Args:
        ellipsoid:
            The earth model

        east, north, up:
            The position in the local frame

        lat0, lon0, h0:
            The geodetic anchor of the local frame

    Keyword Args:
        angle_unit:
            (Default degrees) Unit of lat0/lon0

        range_unit:
            (Default meters) Unit of the ENU coordinates, h0 and the returned ECEF coordinates

    Returns:
        XYZ
    """
    x, y, z = _enu_to_ecef(
        ellipsoid,
        units.to_meters(east, range_unit),
        units.to_meters(north, range_unit),
        units.to_meters(up, range_unit),
        units.to_radians(lat0, angle_unit),
        units.to_radians(lon0, angle_unit),
        units.to_meters(h0, range_unit),
    )
    return XYZ(
        units.from_meters(x, range_unit),
        units.from_meters(y, range_unit),
        units.from_meters(z, range_unit),
    )


def ecef_to_enuv(
    dx: float, dy: float, dz: float,
    lat0: float, lon0: float,
    *,
    angle_unit: Union[AngleUnit, str] = AngleUnit.DEGREE,
    range_unit: Union[RangeUnit, str] = RangeUnit.METER,
) -> ENU:
    """
    Rotates an ECEF vector (an offset between two points, or a velocity) into the ENU
    axes at a reference latitude/longitude. No translation is applied, so no ellipsoid
    or reference height is required.

    Keyword Args:
        angle_unit:
            (Default degrees) Unit of lat0/lon0

        range_unit:
            (Default meters) Unit of the vector components, in and out

    Returns:
        ENU
    """
    east, north, up = _ecef_to_enuv(
        units.to_meters(dx, range_unit),
        units.to_meters(dy, range_unit),
        units.to_meters(dz, range_unit),
        units.to_radians(lat0, angle_unit),
        units.to_radians(lon0, angle_unit),
    )
    return ENU(
        units.from_meters(east, range_unit),
        units.from_meters(north, range_unit),
        units.from_meters(up, range_unit),
    )


def enu_to_aer(
    east: float, north: float, up: float,
    *,
    angle_unit: Union[AngleUnit, str] = AngleUnit.DEGREE,
    range_unit: Union[RangeUnit, str] = RangeUnit.METER,
) -> AER:
    """
    Converts ENU coordinates to azimuth (clockwise from north, within [0, 360)),
    elevation and slant range.

    Keyword Args:
        angle_unit:
            (Default degrees) Unit of the returned azimuth/elevation

        range_unit:
            (Default meters) Unit of the ENU coordinates and the returned range

    Returns:
        AER
    """
    azimuth, elevation, slant_range = _enu_to_aer(
        units.to_meters(east, range_unit),
        units.to_meters(north, range_unit),
        units.to_meters(up, range_unit),
    )
    return AER(
        units.azimuth_from_radians(azimuth, angle_unit),
        units.from_radians(elevation, angle_unit),
        units.from_meters(slant_range, range_unit),
    )


def aer_to_enu(
    azimuth: float, elevation: float, slant_range: float,
    *,
    angle_unit: Union[AngleUnit, str] = AngleUnit.DEGREE,
    range_unit: Union[RangeUnit, str] = RangeUnit.METER,
) -> ENU:
    """
    Converts azimuth, elevation and slant range to ENU coordinates.

    Keyword Args:
        angle_unit:
            (Default degrees) Unit of azimuth/elevation

        range_unit:
            (Default meters) Unit of the slant range and the returned ENU coordinates

    Returns:
        ENU
    """
    east, north, up = _aer_to_enu(
        units.to_radians(azimuth, angle_unit),
        units.to_radians(elevation, angle_unit),
        units.to_meters(slant_range, range_unit),
    )
    return ENU(
        units.from_meters(east, range_unit),
        units.from_meters(north, range_unit),
        units.from_meters(up, range_unit),
    )


def enu_to_uvw(
    east: float, north: float, up: float,
    lat0: float, lon0: float,
    *,
    angle_unit: Union[AngleUnit, str] = AngleUnit.DEGREE,
    range_unit: Union[RangeUnit, str] = RangeUnit.METER,
) -> UVW:
    """
    Rotates an ENU vector onto the ECEF axes (no translation).

    Keyword Args:
        angle_unit:
            (Default degrees) Unit of lat0/lon0

        range_unit:
            (Default meters) Unit of the vector components, in and out

    Returns:
        UVW
    """
    u, v, w = _enu_to_uvw(
        units.to_meters(east, range_unit),
        units.to_meters(north, range_unit),
        units.to_meters(up, range_unit),
        units.to_radians(lat0, angle_unit),
        units.to_radians(lon0, angle_unit),
    )
    return UVW(
        units.from_meters(u, range_unit),
        units.from_meters(v, range_unit),
        units.from_meters(w, range_unit),
    )


def uvw_to_enu(
    u: float, v: float, w: float,
    lat0: float, lon0: float,
    *,
    angle_unit: Union[AngleUnit, str] = AngleUnit.DEGREE,
    range_unit: Union[RangeUnit, str] = RangeUnit.METER,
) -> ENU:
    """Rotates a UVW vector back into the ENU axes at lat0/lon0; inverse of enu_to_uvw"""
    east, north, up = _ecef_to_enuv(
        units.to_meters(u, range_unit),
        units.to_meters(v, range_unit),
        units.to_meters(w, range_unit),
        units.to_radians(lat0, angle_unit),
        units.to_radians(lon0, angle_unit),
    )
    return ENU(
        units.from_meters(east, range_unit),
        units.from_meters(north, range_unit),
        units.from_meters(up, range_unit),
    )
