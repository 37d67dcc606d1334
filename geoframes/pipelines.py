"""
Conversions composed from the geocentric and local frame primitives, e.g. geodetic
position to azimuth/elevation/range as seen from an anchor.

Each function converts units once on the way in and once on the way out; the
intermediate steps run on radians and meters.
"""

__all__ = [
    'aer_to_ecef', 'aer_to_geo', 'ecef_to_aer', 'enu_to_geo', 'geo_to_aer', 'geo_to_enu',
]

from typing import Tuple, Union

from geoframes import units
from geoframes.ellipsoid import Ellipsoid
from geoframes.geocentric import _ecef_to_geo, _geo_to_ecef
from geoframes.local import _aer_to_enu, _ecef_to_enu, _enu_to_aer, _enu_to_ecef, _enu_to_uvw
from geoframes.structures import AER, ENU, Geodetic, XYZ
from geoframes.units import AngleUnit, RangeUnit

_Triple = Tuple[float, float, float]


def _anchor(lat0, lon0, h0, angle_unit, range_unit) -> _Triple:
    return (
        units.to_radians(lat0, angle_unit),
        units.to_radians(lon0, angle_unit),
        units.to_meters(h0, range_unit),
    )


def _geodetic_out(lat, lon, height, angle_unit, range_unit) -> Geodetic:
    return Geodetic(
        units.from_radians(lat, angle_unit),
        units.from_radians(lon, angle_unit),
        units.from_meters(height, range_unit),
    )


def _aer_out(azimuth, elevation, slant_range, angle_unit, range_unit) -> AER:
    return AER(
        units.azimuth_from_radians(azimuth, angle_unit),
        units.from_radians(elevation, angle_unit),
        units.from_meters(slant_range, range_unit),
    )


def _aer_to_ecef(
    ellipsoid: Ellipsoid, azimuth: float, elevation: float, slant_range: float,
    lat0: float, lon0: float, h0: float
) -> _Triple:
    x0, y0, z0 = _geo_to_ecef(ellipsoid, lat0, lon0, h0)
    u, v, w = _enu_to_uvw(*_aer_to_enu(azimuth, elevation, slant_range), lat0, lon0)
    return x0 + u, y0 + v, z0 + w


def geo_to_enu(
    ellipsoid: Ellipsoid,
    lat: float, lon: float, height: float,
    lat0: float, lon0: float, h0: float = 0.0,
    *,
    angle_unit: Union[AngleUnit, str] = AngleUnit.DEGREE,
    range_unit: Union[RangeUnit, str] = RangeUnit.METER,
) -> ENU:
    """
    Expresses a geodetic position in the ENU frame anchored at another geodetic position.

    Args:
        ellipsoid:
            The earth model

        lat, lon, height:
            The target position

        lat0, lon0, h0:
            The anchor of the local frame

    Keyword Args:
        angle_unit:
            (Default degrees) Unit of latitudes and longitudes

        range_unit:
            (Default meters) Unit of heights and of the returned ENU coordinates

    Returns:
        ENU
    """
    x, y, z = _geo_to_ecef(
        ellipsoid,
        units.to_radians(lat, angle_unit),
        units.to_radians(lon, angle_unit),
        units.to_meters(height, range_unit),
    )
    east, north, up = _ecef_to_enu(
        ellipsoid, x, y, z, *_anchor(lat0, lon0, h0, angle_unit, range_unit)
    )
    return ENU(
        units.from_meters(east, range_unit),
        units.from_meters(north, range_unit),
        units.from_meters(up, range_unit),
    )


def enu_to_geo(
    ellipsoid: Ellipsoid,
    east: float, north: float, up: float,
    lat0: float, lon0: float, h0: float = 0.0,
    *,
    angle_unit: Union[AngleUnit, str] = AngleUnit.DEGREE,
    range_unit: Union[RangeUnit, str] = RangeUnit.METER,
) -> Geodetic:
    """
    Converts ENU coordinates anchored at a geodetic position to a geodetic position.

    Args:
        ellipsoid:
            The earth model

        east, north, up:
            The position in the local frame

        lat0, lon0, h0:
            The anchor of the local frame

    Keyword Args:
        angle_unit:
            (Default degrees) Unit of latitudes and longitudes

        range_unit:
            (Default meters) Unit of heights and of the ENU coordinates

    Returns:
        Geodetic
    """
    x, y, z = _enu_to_ecef(
        ellipsoid,
        units.to_meters(east, range_unit),
        units.to_meters(north, range_unit),
        units.to_meters(up, range_unit),
        *_anchor(lat0, lon0, h0, angle_unit, range_unit),
    )
    return _geodetic_out(*_ecef_to_geo(ellipsoid, x, y, z), angle_unit, range_unit)


def geo_to_aer(
    ellipsoid: Ellipsoid,
    lat: float, lon: float, height: float,
    lat0: float, lon0: float, h0: float = 0.0,
    *,
    angle_unit: Union[AngleUnit, str] = AngleUnit.DEGREE,
    range_unit: Union[RangeUnit, str] = RangeUnit.METER,
) -> AER:
    """
    Calculates the azimuth, elevation and slant range of a geodetic position as
    seen from an observer at (lat0, lon0, h0).

    Args:
        ellipsoid:
            The earth model

        lat, lon, height:
            The target position

        lat0, lon0, h0:
            The observer position

    Keyword Args:
        angle_unit:
            (Default degrees) Unit of latitudes, longitudes and the returned angles

        range_unit:
            (Default meters) Unit of heights and of the returned range

    Returns:
        AER
    """
    x, y, z = _geo_to_ecef(
        ellipsoid,
        units.to_radians(lat, angle_unit),
        units.to_radians(lon, angle_unit),
        units.to_meters(height, range_unit),
    )
    enu = _ecef_to_enu(ellipsoid, x, y, z, *_anchor(lat0, lon0, h0, angle_unit, range_unit))
    return _aer_out(*_enu_to_aer(*enu), angle_unit, range_unit)


def aer_to_geo(
    ellipsoid: Ellipsoid,
    azimuth: float, elevation: float, slant_range: float,
    lat0: float, lon0: float, h0: float = 0.0,
    *,
    angle_unit: Union[AngleUnit, str] = AngleUnit.DEGREE,
    range_unit: Union[RangeUnit, str] = RangeUnit.METER,
) -> Geodetic:
    """
    Calculates the geodetic position found at a given azimuth, elevation and slant
    range from an observer at (lat0, lon0, h0).

    Keyword Args:
        angle_unit:
            (Default degrees) Unit of all angles, in and out

        range_unit:
            (Default meters) Unit of the slant range and heights

    Returns:
        Geodetic
    """
    x, y, z = _aer_to_ecef(
        ellipsoid,
        units.to_radians(azimuth, angle_unit),
        units.to_radians(elevation, angle_unit),
        units.to_meters(slant_range, range_unit),
        *_anchor(lat0, lon0, h0, angle_unit, range_unit),
    )
    return _geodetic_out(*_ecef_to_geo(ellipsoid, x, y, z), angle_unit, range_unit)


def ecef_to_aer(
    ellipsoid: Ellipsoid,
    x: float, y: float, z: float,
    lat0: float, lon0: float, h0: float = 0.0,
    *,
    angle_unit: Union[AngleUnit, str] = AngleUnit.DEGREE,
    range_unit: Union[RangeUnit, str] = RangeUnit.METER,
) -> AER:
    """
    Calculates the azimuth, elevation and slant range of an ECEF position as seen
    from an observer at (lat0, lon0, h0).

    Keyword Args:
        angle_unit:
            (Default degrees) Unit of lat0/lon0 and the returned angles

        range_unit:
            (Default meters) Unit of x/y/z, h0 and the returned range

    Returns:
        AER
    """
    enu = _ecef_to_enu(
        ellipsoid,
        units.to_meters(x, range_unit),
        units.to_meters(y, range_unit),
        units.to_meters(z, range_unit),
        *_anchor(lat0, lon0, h0, angle_unit, range_unit),
    )
    return _aer_out(*_enu_to_aer(*enu), angle_unit, range_unit)


def aer_to_ecef(
    ellipsoid: Ellipsoid,
    azimuth: float, elevation: float, slant_range: float,
    lat0: float, lon0: float, h0: float = 0.0,
    *,
    angle_unit: Union[AngleUnit, str] = AngleUnit.DEGREE,
    range_unit: Union[RangeUnit, str] = RangeUnit.METER,
) -> XYZ:
    """
    Calculates the ECEF position found at a given azimuth, elevation and slant range
    from an observer at (lat0, lon0, h0): the observer's ECEF position plus the AER
    vector rotated onto the ECEF axes.

    Keyword Args:
        angle_unit:
            (Default degrees) Unit of azimuth, elevation, lat0 and lon0

        range_unit:
            (Default meters) Unit of the slant range, h0 and the returned coordinates

    Returns:
        XYZ
    """
    x, y, z = _aer_to_ecef(
        ellipsoid,
        units.to_radians(azimuth, angle_unit),
        units.to_radians(elevation, angle_unit),
        units.to_meters(slant_range, range_unit),
        *_anchor(lat0, lon0, h0, angle_unit, range_unit),
    )
    return XYZ(
        units.from_meters(x, range_unit),
        units.from_meters(y, range_unit),
        units.from_meters(z, range_unit),
    )
