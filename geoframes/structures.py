"""
Value types exchanged by geoframes operations.

None of these carry a unit: the unit is supplied by the caller alongside the value
for every operation (see geoframes.units). Each type exposes the operations that
start from it as methods; keyword arguments (angle_unit, range_unit, ...) are
forwarded to the corresponding module-level function.
"""

__all__ = ['AER', 'Destination', 'ENU', 'Geodetic', 'Geographic', 'RAD', 'UVW', 'XYZ']

from typing import NamedTuple, TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from geoframes.ellipsoid import Ellipsoid


# pylint: disable=import-outside-toplevel


class Geographic(NamedTuple):
    """A point on the ellipsoid surface (geodetic latitude, longitude)"""
    lat: float
    lon: float

    def geodesic_to(self, ellipsoid: 'Ellipsoid', end: 'Geographic', **kwargs) -> 'RAD':
        """Solves the inverse geodesic problem from this point to `end`"""
        from geoframes.geodesic import geo_to_rad
        return geo_to_rad(ellipsoid, self.lat, self.lon, end[0], end[1], **kwargs)

    def destination(
        self, ellipsoid: 'Ellipsoid', distance: float, azimuth: float, **kwargs
    ) -> 'Destination':
        """Solves the direct geodesic problem starting from this point"""
        from geoframes.geodesic import rad_to_geo
        return rad_to_geo(ellipsoid, self.lat, self.lon, distance, azimuth, **kwargs)


class Geodetic(NamedTuple):
    """A geodetic position (geodetic latitude, longitude, height above the ellipsoid)"""
    lat: float
    lon: float
    height: float = 0.0

    @property
    def geographic(self) -> Geographic:
        return Geographic(self.lat, self.lon)

    def to_ecef(self, ellipsoid: 'Ellipsoid', **kwargs) -> 'XYZ':
        from geoframes.geocentric import geo_to_ecef
        return geo_to_ecef(ellipsoid, *self, **kwargs)

    def offset_to(self, ellipsoid: 'Ellipsoid', other: 'Geodetic', **kwargs) -> 'XYZ':
        """The ECEF vector pointing from this position to `other`"""
        from geoframes.geocentric import ecef_offset
        return ecef_offset(ellipsoid, *self, *Geodetic(*other), **kwargs)

    def to_enu(self, ellipsoid: 'Ellipsoid', anchor: 'Geodetic', **kwargs) -> 'ENU':
        """This position expressed in the ENU frame anchored at `anchor`"""
        from geoframes.pipelines import geo_to_enu
        return geo_to_enu(ellipsoid, *self, *Geodetic(*anchor), **kwargs)

    def to_aer(self, ellipsoid: 'Ellipsoid', anchor: 'Geodetic', **kwargs) -> 'AER':
        """This position as seen from `anchor`"""
        from geoframes.pipelines import geo_to_aer
        return geo_to_aer(ellipsoid, *self, *Geodetic(*anchor), **kwargs)


class XYZ(NamedTuple):
    """Earth-Centered-Earth-Fixed cartesian coordinates (or an ECEF vector)"""
    x: float
    y: float
    z: float

    def to_geodetic(self, ellipsoid: 'Ellipsoid', **kwargs) -> Geodetic:
        from geoframes.geocentric import ecef_to_geo
        return ecef_to_geo(ellipsoid, *self, **kwargs)

    def to_enu(self, ellipsoid: 'Ellipsoid', anchor: Geodetic, **kwargs) -> 'ENU':
        from geoframes.local import ecef_to_enu
        return ecef_to_enu(ellipsoid, *self, *Geodetic(*anchor), **kwargs)

    def to_enuv(self, anchor: Geographic, **kwargs) -> 'ENU':
        """Rotates this ECEF vector (an offset or a velocity) into the ENU axes at `anchor`"""
        from geoframes.local import ecef_to_enuv
        return ecef_to_enuv(*self, anchor[0], anchor[1], **kwargs)

    def to_aer(self, ellipsoid: 'Ellipsoid', anchor: Geodetic, **kwargs) -> 'AER':
        from geoframes.pipelines import ecef_to_aer
        return ecef_to_aer(ellipsoid, *self, *Geodetic(*anchor), **kwargs)


class ENU(NamedTuple):
    """East-North-Up local tangent plane coordinates"""
    east: float
    north: float
    up: float

    def to_ecef(self, ellipsoid: 'Ellipsoid', anchor: Geodetic, **kwargs) -> XYZ:
        from geoframes.local import enu_to_ecef
        return enu_to_ecef(ellipsoid, *self, *Geodetic(*anchor), **kwargs)

    def to_geodetic(self, ellipsoid: 'Ellipsoid', anchor: Geodetic, **kwargs) -> Geodetic:
        from geoframes.pipelines import enu_to_geo
        return enu_to_geo(ellipsoid, *self, *Geodetic(*anchor), **kwargs)

    def to_aer(self, **kwargs) -> 'AER':
        from geoframes.local import enu_to_aer
        return enu_to_aer(*self, **kwargs)

    def to_uvw(self, anchor: Geographic, **kwargs) -> 'UVW':
        from geoframes.local import enu_to_uvw
        return enu_to_uvw(*self, anchor[0], anchor[1], **kwargs)


class AER(NamedTuple):
    """Azimuth (clockwise from north), elevation (above the horizon) and slant range"""
    azimuth: float
    elevation: float
    range: float

    def to_enu(self, **kwargs) -> ENU:
        from geoframes.local import aer_to_enu
        return aer_to_enu(*self, **kwargs)

    def to_ecef(self, ellipsoid: 'Ellipsoid', anchor: Geodetic, **kwargs) -> XYZ:
        from geoframes.pipelines import aer_to_ecef
        return aer_to_ecef(ellipsoid, *self, *Geodetic(*anchor), **kwargs)

    def to_geodetic(self, ellipsoid: 'Ellipsoid', anchor: Geodetic, **kwargs) -> Geodetic:
        from geoframes.pipelines import aer_to_geo
        return aer_to_geo(ellipsoid, *self, *Geodetic(*anchor), **kwargs)


class UVW(NamedTuple):
    """A local vector rotated onto the ECEF axes (no translation)"""
    u: float
    v: float
    w: float

    def to_enu(self, anchor: Geographic, **kwargs) -> ENU:
        from geoframes.local import uvw_to_enu
        return uvw_to_enu(*self, anchor[0], anchor[1], **kwargs)


class RAD(NamedTuple):
    """
    Solution of the inverse geodesic problem.

    Attributes:
        range:
            The geodesic distance between the two points

        azimuth:
            The forward azimuth at the start point

        back_azimuth:
            The azimuth at the end point pointing back towards the start point
    """
    range: float
    azimuth: float
    back_azimuth: float


class Destination(NamedTuple):
    """Solution of the direct geodesic problem: the end point and its back azimuth"""
    point: Geographic
    back_azimuth: float
