"""
Reference ellipsoids (earth models) used by every geoframes calculation
"""

__all__ = [
    'ELLIPSOIDS', 'Ellipsoid', 'GRS80', 'KRASSOWSKY1940', 'PZ90', 'SPHERE', 'WGS84',
    'get_ellipsoid',
]

from functools import cached_property
import math
from typing import Dict

from geoframes._const import EARTH_RADIUS_METERS, WGS84_A, WGS84_INVF, ZERO_TOLERANCE
from geoframes.errors import InvalidArgumentError


class Ellipsoid:
    """
    An immutable reference ellipsoid.

    Either the inverse flattening or the semi-minor axis is authoritative, depending
    on `inverse_flattening_defined`; the remaining shape parameters are derived from it.
    An inverse flattening of zero or infinity describes a sphere.

    Args:
        name:
            A display name, e.g. 'WGS84'

        semi_major_axis:
            The equatorial radius, in meters

        semi_minor_axis:
            The polar radius, in meters. Only used when `inverse_flattening_defined`
            is False.

        inverse_flattening:
            The inverse flattening (1/f)

        inverse_flattening_defined:
            (Default True) If True, the semi-minor axis is derived from the inverse
            flattening. If False, the semi-minor axis is taken as given.
    """

    def __init__(
        self,
        name: str,
        semi_major_axis: float,
        semi_minor_axis: float = 0.0,
        inverse_flattening: float = 0.0,
        inverse_flattening_defined: bool = True,
    ):
        a = float(semi_major_axis)
        invf = float(inverse_flattening)
        if not math.isfinite(a) or a <= 0:
            raise InvalidArgumentError(f'Semi-major axis must be a positive number, not {a}')

        if inverse_flattening_defined and (
            math.isclose(invf, 0., abs_tol=ZERO_TOLERANCE) or math.isinf(invf)
        ):
            b, f, invf = a, 0.0, math.inf
        elif inverse_flattening_defined:
            b, f = (1.0 - 1.0 / invf) * a, 1.0 / invf
        else:
            b = float(semi_minor_axis)
            if invf and math.isfinite(invf):
                f = 1.0 / invf
            else:
                # No usable inverse flattening supplied; derive it from the axes
                f = (a - b) / a
                invf = 1.0 / f if f else math.inf

        if not 0 < b <= a:
            raise InvalidArgumentError(
                f'Semi-minor axis must be within (0, a], got b={b} for a={a}'
            )

        self._name = name
        self._a = a
        self._b = b
        self._f = f
        self._invf = invf

    @classmethod
    def from_inverse_flattening(cls, name: str, semi_major_axis: float, inverse_flattening: float):
        """Creates an Ellipsoid from its semi-major axis and inverse flattening"""
        return cls(name, semi_major_axis, inverse_flattening=inverse_flattening)

    @classmethod
    def from_axes(cls, name: str, semi_major_axis: float, semi_minor_axis: float):
        """Creates an Ellipsoid from its semi-major and semi-minor axes"""
        return cls(
            name, semi_major_axis, semi_minor_axis=semi_minor_axis,
            inverse_flattening_defined=False
        )

    def __eq__(self, other):
        if not isinstance(other, Ellipsoid):
            return False

        return (
            self.name == other.name and
            self.a == other.a and
            self.b == other.b and
            self.f == other.f
        )

    def __hash__(self):
        return hash((self.name, self.a, self.b, self.f))

    def __repr__(self):
        return f'<Ellipsoid {self.name} (a={self.a}, invf={self.invf})>'

    @property
    def name(self) -> str:
        return self._name

    @property
    def a(self) -> float:
        """Semi-major axis, in meters"""
        return self._a

    @property
    def b(self) -> float:
        """Semi-minor axis, in meters"""
        return self._b

    @property
    def f(self) -> float:
        """Flattening"""
        return self._f

    @property
    def invf(self) -> float:
        """Inverse flattening; infinite for a sphere"""
        return self._invf

    @property
    def is_sphere(self) -> bool:
        return math.isclose(self._a, self._b, rel_tol=0., abs_tol=ZERO_TOLERANCE)

    @cached_property
    def eccentricity_squared(self) -> float:
        """First eccentricity squared, (a^2 - b^2) / a^2"""
        return 1.0 - (self._b * self._b) / (self._a * self._a)

    @cached_property
    def second_eccentricity_squared(self) -> float:
        """Second eccentricity squared, (a^2 - b^2) / b^2"""
        return (self._a * self._a) / (self._b * self._b) - 1.0

    @property
    def eccentricity(self) -> float:
        return math.sqrt(self.eccentricity_squared)


WGS84 = Ellipsoid.from_inverse_flattening('WGS84', WGS84_A, WGS84_INVF)
GRS80 = Ellipsoid.from_inverse_flattening('GRS80', 6378137.0, 298.257222101)
PZ90 = Ellipsoid.from_inverse_flattening('PZ90', 6378136.0, 298.25784)
KRASSOWSKY1940 = Ellipsoid.from_inverse_flattening('Krassowsky1940', 6378245.0, 298.3)
SPHERE = Ellipsoid.from_inverse_flattening('Sphere', EARTH_RADIUS_METERS, 0.)

ELLIPSOIDS: Dict[str, Ellipsoid] = {
    x.name.lower(): x for x in (WGS84, GRS80, PZ90, KRASSOWSKY1940, SPHERE)
}


def get_ellipsoid(name: str) -> Ellipsoid:
    """
    Look up one of the predefined ellipsoids by name (case insensitive).

    Args:
        name:
            One of 'WGS84', 'GRS80', 'PZ90', 'Krassowsky1940', 'Sphere'

    Returns:
        Ellipsoid
    """
    try:
        return ELLIPSOIDS[name.lower()]
    except (KeyError, AttributeError) as e:
        raise InvalidArgumentError(
            f"Unknown ellipsoid '{name}'. Options: {[x.name for x in ELLIPSOIDS.values()]}"
        ) from e
