from geoframes._version import __version__, get_version  # noqa: F401
from geoframes.utils.logging import LOGGER
from geoframes.ellipsoid import (
    ELLIPSOIDS, Ellipsoid, GRS80, KRASSOWSKY1940, PZ90, SPHERE, WGS84, get_ellipsoid
)
from geoframes.errors import (
    DegenerateInputError, DomainViolationError, GeodesyError, InvalidArgumentError,
    UnconvergedError
)
from geoframes.units import AngleUnit, RangeUnit
from geoframes.structures import AER, Destination, ENU, Geodetic, Geographic, RAD, UVW, XYZ
from geoframes.geodesic import (
    Convergence, GeodesicSolution, direct, geo_to_rad, inverse, rad_to_geo,
    solve_direct, solve_inverse
)
from geoframes.geocentric import ecef_offset, ecef_to_geo, geo_to_ecef
from geoframes.local import (
    aer_to_enu, ecef_to_enu, ecef_to_enuv, enu_rotation_matrix, enu_to_aer, enu_to_ecef,
    enu_to_uvw, uvw_to_enu
)
from geoframes.pipelines import (
    aer_to_ecef, aer_to_geo, ecef_to_aer, enu_to_geo, geo_to_aer, geo_to_enu
)
from geoframes.vector import angle_between, cos_angle_between, distance, vector_from_two_points

__all__ = [
    'AER',
    'AngleUnit',
    'Convergence',
    'DegenerateInputError',
    'Destination',
    'DomainViolationError',
    'ELLIPSOIDS',
    'ENU',
    'Ellipsoid',
    'GRS80',
    'GeodesicSolution',
    'GeodesyError',
    'Geodetic',
    'Geographic',
    'InvalidArgumentError',
    'KRASSOWSKY1940',
    'LOGGER',
    'PZ90',
    'RAD',
    'RangeUnit',
    'SPHERE',
    'UVW',
    'UnconvergedError',
    'WGS84',
    'XYZ',
    'aer_to_ecef',
    'aer_to_enu',
    'aer_to_geo',
    'angle_between',
    'cos_angle_between',
    'direct',
    'distance',
    'ecef_offset',
    'ecef_to_aer',
    'ecef_to_enu',
    'ecef_to_enuv',
    'ecef_to_geo',
    'enu_rotation_matrix',
    'enu_to_aer',
    'enu_to_ecef',
    'enu_to_geo',
    'enu_to_uvw',
    'geo_to_aer',
    'geo_to_ecef',
    'geo_to_enu',
    'geo_to_rad',
    'get_ellipsoid',
    'get_version',
    'inverse',
    'rad_to_geo',
    'solve_direct',
    'solve_inverse',
    'uvw_to_enu',
    'vector_from_two_points',
]
