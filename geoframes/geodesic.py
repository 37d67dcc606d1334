"""
Solutions to the direct and inverse geodesic problems.

Spheres are solved with closed-form spherical trigonometry; ellipsoids are solved with
Vincenty's iterative formulae (T. Vincenty, "Direct and Inverse Solutions of Geodesics
on the Ellipsoid with Application of Nested Equations", Survey Review, 1975). Equation
numbers in the comments refer to that paper.
"""

__all__ = [
    'Convergence', 'GeodesicSolution', 'direct', 'geo_to_rad', 'inverse',
    'rad_to_geo', 'solve_direct', 'solve_inverse',
]

from enum import Enum
import math
from typing import NamedTuple, Tuple, Union

from geoframes import units
from geoframes._const import (
    DIRECT_MAX_ITERATIONS, DIRECT_TOLERANCE, INVERSE_MAX_ITERATIONS,
    INVERSE_TOLERANCE, ZERO_TOLERANCE
)
from geoframes.ellipsoid import Ellipsoid
from geoframes.errors import DegenerateInputError, InvalidArgumentError, UnconvergedError
from geoframes.structures import Destination, Geographic, RAD
from geoframes.units import AngleUnit, RangeUnit
from geoframes.utils.logging import LOGGER, warn_once


class Convergence(Enum):
    """How a geodesic solution was reached"""
    CLOSED_FORM = 'closed_form'  # spherical formulae, no iteration
    CONVERGED = 'converged'
    ITERATION_LIMIT = 'iteration_limit'  # best estimate after exhausting the iteration cap
    COINCIDENT = 'coincident'  # start and end points are the same
    ANTIPODAL = 'antipodal'  # exactly antipodal points, solved along a meridian
    DEGENERATE = 'degenerate'  # non-finite input, or the iteration broke down numerically


class GeodesicSolution(NamedTuple):
    """A geodesic result together with the way it was obtained"""
    result: Union[RAD, Destination]
    status: Convergence
    iterations: int


_Triple = Tuple[float, float, float]


# -------------------------------------------------------------------------
# Shared Vincenty terms
# -------------------------------------------------------------------------

def _series_coefficients(u_sq: float) -> Tuple[float, float]:
    """Vincenty's A and B coefficients (eq. 3, 4)"""
    A = 1 + u_sq / 16384 * (4096 + u_sq * (-768 + u_sq * (320 - 175 * u_sq)))
    B = u_sq / 1024 * (256 + u_sq * (-128 + u_sq * (74 - 47 * u_sq)))
    return A, B


def _delta_sigma(B: float, sin_sigma: float, cos_sigma: float, cos_2sigma_m: float) -> float:
    """eq. 6"""
    return B * sin_sigma * (
        cos_2sigma_m + B / 4 * (
            cos_sigma * (-1 + 2 * cos_2sigma_m ** 2) -
            B / 6 * cos_2sigma_m * (-3 + 4 * sin_sigma ** 2) * (-3 + 4 * cos_2sigma_m ** 2)
        )
    )


def _longitude_correction(
    f: float, sin_alpha: float, cos_sq_alpha: float,
    sigma: float, sin_sigma: float, cos_sigma: float, cos_2sigma_m: float
) -> float:
    """Difference between the longitude on the auxiliary sphere and on the ellipsoid (eq. 10, 11)"""
    C = f / 16 * cos_sq_alpha * (4 + f * (4 - 3 * cos_sq_alpha))
    return (1 - C) * f * sin_alpha * (
        sigma + C * sin_sigma * (cos_2sigma_m + C * cos_sigma * (-1 + 2 * cos_2sigma_m ** 2))
    )


def _wrap_longitude(lon: float) -> float:
    """Wraps a longitude in radians into [-pi, pi)"""
    return (lon + math.pi) % (2 * math.pi) - math.pi


def _clamp_unit(value: float) -> float:
    """Clamps rounding overshoot before asin/acos; NaN passes through unchanged"""
    if math.isnan(value):
        return value
    return max(-1.0, min(1.0, value))


def _all_finite(*values: float) -> bool:
    return all(math.isfinite(x) for x in values)


_DEGENERATE_RESULT = (math.nan, math.nan, math.nan)


# -------------------------------------------------------------------------
# Inverse problem (radians / meters)
# -------------------------------------------------------------------------

def _inverse_sphere(
    radius: float, lat1: float, lon1: float, lat2: float, lon2: float
) -> Tuple[_Triple, Convergence]:
    d_lon = lon2 - lon1
    sin_lat1, cos_lat1 = math.sin(lat1), math.cos(lat1)
    sin_lat2, cos_lat2 = math.sin(lat2), math.cos(lat2)

    east = cos_lat2 * math.sin(d_lon)
    north = cos_lat1 * sin_lat2 - sin_lat1 * cos_lat2 * math.cos(d_lon)
    cos_d = sin_lat1 * sin_lat2 + cos_lat1 * cos_lat2 * math.cos(d_lon)

    # Same place (e.g. lon 180 vs -180, or a pole at two longitudes), or exact antipodes
    if math.isclose(math.hypot(east, north), 0., abs_tol=ZERO_TOLERANCE):
        if cos_d > 0:
            return (0.0, 0.0, 0.0), Convergence.COINCIDENT
        return (radius * math.pi, 0.0, 0.0), Convergence.ANTIPODAL

    azimuth = math.atan2(east, north)
    back_azimuth = math.atan2(
        -cos_lat1 * math.sin(d_lon),
        cos_lat2 * sin_lat1 - sin_lat2 * cos_lat1 * math.cos(d_lon)
    )
    distance = radius * math.acos(_clamp_unit(cos_d))

    return (
        (distance, units.wrap_azimuth(azimuth), units.wrap_azimuth(back_azimuth)),
        Convergence.CLOSED_FORM
    )


def _inverse_vincenty(
    ellipsoid: Ellipsoid,
    lat1: float, lon1: float, lat2: float, lon2: float,
    max_iterations: int,
) -> Tuple[_Triple, Convergence, int]:
    a, b, f = ellipsoid.a, ellipsoid.b, ellipsoid.f

    L = lon2 - lon1
    U1 = math.atan((1 - f) * math.tan(lat1))
    U2 = math.atan((1 - f) * math.tan(lat2))
    sinU1, cosU1 = math.sin(U1), math.cos(U1)
    sinU2, cosU2 = math.sin(U2), math.cos(U2)

    # eq. 13
    Lambda = L
    status = Convergence.ITERATION_LIMIT
    iterations = 0
    for _ in range(max_iterations):
        sinLambda, cosLambda = math.sin(Lambda), math.cos(Lambda)

        # eq. 14
        sinSigma = math.hypot(
            cosU2 * sinLambda,
            cosU1 * sinU2 - sinU1 * cosU2 * cosLambda
        )

        # eq. 15
        cosSigma = sinU1 * sinU2 + cosU1 * cosU2 * cosLambda

        if math.isclose(sinSigma, 0., abs_tol=ZERO_TOLERANCE):
            if cosSigma > 0:
                return (0.0, 0.0, 0.0), Convergence.COINCIDENT, iterations

            # Antipodal: every meridian through the poles is a geodesic, take the northbound one
            A, _ = _series_coefficients(ellipsoid.second_eccentricity_squared)
            return (b * A * math.pi, 0.0, 0.0), Convergence.ANTIPODAL, iterations

        # eq. 16
        sigma = math.atan2(sinSigma, cosSigma)

        # eq. 17
        sinAlpha = cosU1 * cosU2 * sinLambda / sinSigma
        cosSqAlpha = 1 - sinAlpha ** 2

        # eq. 18
        try:
            cos2SigmaM = cosSigma - 2 * sinU1 * sinU2 / cosSqAlpha
        except ZeroDivisionError:
            # Equatorial line
            cos2SigmaM = 0.

        Lambda_prev = Lambda
        Lambda = L + _longitude_correction(
            f, sinAlpha, cosSqAlpha, sigma, sinSigma, cosSigma, cos2SigmaM
        )
        iterations += 1

        if abs(Lambda - Lambda_prev) <= INVERSE_TOLERANCE * abs(Lambda):
            status = Convergence.CONVERGED
            break

    uSq = cosSqAlpha * (a ** 2 - b ** 2) / (b ** 2)
    A, B = _series_coefficients(uSq)
    deltaSigma = _delta_sigma(B, sinSigma, cosSigma, cos2SigmaM)

    # eq. 19
    distance = b * A * (sigma - deltaSigma)

    # eq. 20
    azimuth = math.atan2(cosU2 * sinLambda, cosU1 * sinU2 - sinU1 * cosU2 * cosLambda)

    # eq. 21, reversed to point back at the start
    back_azimuth = math.atan2(-cosU1 * sinLambda, sinU1 * cosU2 - cosU1 * sinU2 * cosLambda)

    return (
        (distance, units.wrap_azimuth(azimuth), units.wrap_azimuth(back_azimuth)),
        status,
        iterations
    )


def _inverse(
    ellipsoid: Ellipsoid,
    lat1: float, lon1: float, lat2: float, lon2: float,
    max_iterations: int = INVERSE_MAX_ITERATIONS,
) -> Tuple[_Triple, Convergence, int]:
    """Inverse problem in radians/meters: returns (distance, azimuth, back azimuth)"""
    if not _all_finite(lat1, lon1, lat2, lon2):
        return _DEGENERATE_RESULT, Convergence.DEGENERATE, 0

    if ellipsoid.is_sphere:
        result, status = _inverse_sphere(ellipsoid.a, lat1, lon1, lat2, lon2)
        return result, status, 0

    if max_iterations < 1:
        raise InvalidArgumentError(f'max_iterations must be at least 1, not {max_iterations}')

    return _inverse_vincenty(ellipsoid, lat1, lon1, lat2, lon2, max_iterations)


# -------------------------------------------------------------------------
# Direct problem (radians / meters)
# -------------------------------------------------------------------------

def _direct_sphere(
    radius: float, lat1: float, lon1: float, distance: float, azimuth: float
) -> _Triple:
    delta = distance / radius
    sin_lat1, cos_lat1 = math.sin(lat1), math.cos(lat1)
    sin_d, cos_d = math.sin(delta), math.cos(delta)
    sin_az, cos_az = math.sin(azimuth), math.cos(azimuth)

    lat2 = math.asin(_clamp_unit(sin_lat1 * cos_d + cos_lat1 * sin_d * cos_az))
    lon2 = lon1 + math.atan2(sin_d * sin_az, cos_lat1 * cos_d - sin_lat1 * sin_d * cos_az)
    back_azimuth = math.atan2(-cos_lat1 * sin_az, sin_lat1 * sin_d - cos_lat1 * cos_d * cos_az)

    return lat2, _wrap_longitude(lon2), units.wrap_azimuth(back_azimuth)


def _direct_vincenty(
    ellipsoid: Ellipsoid,
    lat1: float, lon1: float, distance: float, azimuth: float,
    max_iterations: int,
) -> Tuple[_Triple, Convergence, int]:
    a, b, f = ellipsoid.a, ellipsoid.b, ellipsoid.f

    sinAlpha1, cosAlpha1 = math.sin(azimuth), math.cos(azimuth)
    tanU1 = (1 - f) * math.tan(lat1)
    cosU1 = 1 / math.sqrt(1 + tanU1 ** 2)
    sinU1 = tanU1 * cosU1

    # eq. 1
    sigma1 = math.atan2(tanU1, cosAlpha1)

    # eq. 2
    sinAlpha = cosU1 * sinAlpha1
    cosSqAlpha = 1 - sinAlpha ** 2
    uSq = cosSqAlpha * (a ** 2 - b ** 2) / (b ** 2)
    A, B = _series_coefficients(uSq)

    sOverbA = distance / (b * A)
    sigma = sOverbA
    status = Convergence.ITERATION_LIMIT
    iterations = 0
    for _ in range(max_iterations):
        # eq. 5
        cos2SigmaM = math.cos(2 * sigma1 + sigma)
        sinSigma, cosSigma = math.sin(sigma), math.cos(sigma)

        sigma_prev = sigma
        # eq. 7
        sigma = sOverbA + _delta_sigma(B, sinSigma, cosSigma, cos2SigmaM)
        iterations += 1

        change = abs(sigma - sigma_prev)
        if not math.isfinite(change):
            status = Convergence.DEGENERATE
            break
        if change < DIRECT_TOLERANCE:
            status = Convergence.CONVERGED
            break

    cos2SigmaM = math.cos(2 * sigma1 + sigma)
    sinSigma, cosSigma = math.sin(sigma), math.cos(sigma)

    tmp = sinU1 * sinSigma - cosU1 * cosSigma * cosAlpha1

    # eq. 8
    lat2 = math.atan2(
        sinU1 * cosSigma + cosU1 * sinSigma * cosAlpha1,
        (1 - f) * math.hypot(sinAlpha, tmp)
    )

    # eq. 9
    Lambda = math.atan2(sinSigma * sinAlpha1, cosU1 * cosSigma - sinU1 * sinSigma * cosAlpha1)

    # eq. 11
    L = Lambda - _longitude_correction(
        f, sinAlpha, cosSqAlpha, sigma, sinSigma, cosSigma, cos2SigmaM
    )

    # eq. 12, reversed to point back at the start
    back_azimuth = math.atan2(-sinAlpha, tmp)

    return (
        (lat2, _wrap_longitude(lon1 + L), units.wrap_azimuth(back_azimuth)),
        status,
        iterations
    )


def _direct(
    ellipsoid: Ellipsoid,
    lat1: float, lon1: float, distance: float, azimuth: float,
    max_iterations: int = DIRECT_MAX_ITERATIONS,
) -> Tuple[_Triple, Convergence, int]:
    """Direct problem in radians/meters: returns (latitude, longitude, back azimuth)"""
    if math.isinf(distance):
        raise InvalidArgumentError('Geodesic distance must be finite.')

    if not _all_finite(lat1, lon1, distance, azimuth):
        return _DEGENERATE_RESULT, Convergence.DEGENERATE, 0

    if ellipsoid.is_sphere:
        return _direct_sphere(ellipsoid.a, lat1, lon1, distance, azimuth), \
            Convergence.CLOSED_FORM, 0

    if max_iterations < 1:
        raise InvalidArgumentError(f'max_iterations must be at least 1, not {max_iterations}')

    return _direct_vincenty(ellipsoid, lat1, lon1, distance, azimuth, max_iterations)


# -------------------------------------------------------------------------
# Public interface
# -------------------------------------------------------------------------

def _check_solution(solution: GeodesicSolution, strict: bool) -> GeodesicSolution:
    """Reports solutions that were not reached by convergence"""
    LOGGER.debug(
        'Geodesic solution %s after %d iteration(s)', solution.status.value, solution.iterations
    )
    if solution.status is Convergence.ITERATION_LIMIT:
        if strict:
            raise UnconvergedError(
                f'Vincenty iteration did not converge within {solution.iterations} iterations '
                '(nearly antipodal points?)',
                estimate=solution.result,
                iterations=solution.iterations,
            )
        warn_once(
            'Vincenty iteration did not converge; returning the last estimate. '
            '(this warning will not repeat)'
        )

    elif solution.status is Convergence.DEGENERATE:
        if strict:
            raise DegenerateInputError(
                'Geodesic calculation broke down numerically (non-finite input?).'
            )
        warn_once(
            'Geodesic calculation broke down numerically; result is not reliable. '
            '(this warning will not repeat)'
        )

    return solution


def solve_inverse(
    ellipsoid: Ellipsoid,
    lat_start: float,
    lon_start: float,
    lat_end: float,
    lon_end: float,
    *,
    angle_unit: Union[AngleUnit, str] = AngleUnit.DEGREE,
    range_unit: Union[RangeUnit, str] = RangeUnit.METER,
    max_iterations: int = INVERSE_MAX_ITERATIONS,
) -> GeodesicSolution:
    """
    Solves the inverse geodesic problem and reports how the solution was reached.

    Args:
        ellipsoid:
            The earth model

        lat_start, lon_start:
            The start point

        lat_end, lon_end:
            The end point

    Keyword Args:
        angle_unit:
            (Default degrees) Unit of the input and output angles

        range_unit:
            (Default meters) Unit of the output distance

        max_iterations:
            Iteration cap for Vincenty's formula

    Returns:
        GeodesicSolution, whose result is a RAD
    """
    (distance, azimuth, back_azimuth), status, iterations = _inverse(
        ellipsoid,
        units.to_radians(lat_start, angle_unit),
        units.to_radians(lon_start, angle_unit),
        units.to_radians(lat_end, angle_unit),
        units.to_radians(lon_end, angle_unit),
        max_iterations=max_iterations,
    )
    rad = RAD(
        units.from_meters(distance, range_unit),
        units.azimuth_from_radians(azimuth, angle_unit),
        units.azimuth_from_radians(back_azimuth, angle_unit),
    )
    return GeodesicSolution(rad, status, iterations)


def geo_to_rad(
    ellipsoid: Ellipsoid,
    lat_start: float,
    lon_start: float,
    lat_end: float,
    lon_end: float,
    *,
    angle_unit: Union[AngleUnit, str] = AngleUnit.DEGREE,
    range_unit: Union[RangeUnit, str] = RangeUnit.METER,
    strict: bool = False,
    max_iterations: int = INVERSE_MAX_ITERATIONS,
) -> RAD:
    """
    Calculate the distance, forward azimuth and back azimuth between two points.

    Args:
        ellipsoid:
            The earth model

        lat_start, lon_start:
            The start point

        lat_end, lon_end:
            The end point

    Keyword Args:
        angle_unit:
            (Default degrees) Unit of the input and output angles

        range_unit:
            (Default meters) Unit of the output distance

        strict:
            (Default False) If True, raise UnconvergedError rather than returning the
            last estimate when Vincenty's iteration does not converge

        max_iterations:
            Iteration cap for Vincenty's formula

    Returns:
        RAD
    """
    solution = solve_inverse(
        ellipsoid, lat_start, lon_start, lat_end, lon_end,
        angle_unit=angle_unit, range_unit=range_unit,
        max_iterations=max_iterations,
    )
    return _check_solution(solution, strict).result


def inverse(ellipsoid: Ellipsoid, start: Geographic, end: Geographic, **kwargs) -> RAD:
    """geo_to_rad, taking the two points as Geographic (or Geodetic) values"""
    return geo_to_rad(ellipsoid, start[0], start[1], end[0], end[1], **kwargs)


def solve_direct(
    ellipsoid: Ellipsoid,
    lat_start: float,
    lon_start: float,
    distance: float,
    azimuth: float,
    *,
    angle_unit: Union[AngleUnit, str] = AngleUnit.DEGREE,
    range_unit: Union[RangeUnit, str] = RangeUnit.METER,
    max_iterations: int = DIRECT_MAX_ITERATIONS,
) -> GeodesicSolution:
    """
    Solves the direct geodesic problem and reports how the solution was reached.

    Args:
        ellipsoid:
            The earth model

        lat_start, lon_start:
            The start point

        distance:
            The distance to travel along the geodesic

        azimuth:
            The forward azimuth at the start point

    Keyword Args:
        angle_unit:
            (Default degrees) Unit of the input and output angles

        range_unit:
            (Default meters) Unit of the distance

        max_iterations:
            Iteration cap for Vincenty's formula

    Returns:
        GeodesicSolution, whose result is a Destination
    """
    (lat_end, lon_end, back_azimuth), status, iterations = _direct(
        ellipsoid,
        units.to_radians(lat_start, angle_unit),
        units.to_radians(lon_start, angle_unit),
        units.to_meters(distance, range_unit),
        units.to_radians(azimuth, angle_unit),
        max_iterations=max_iterations,
    )
    destination = Destination(
        Geographic(
            units.from_radians(lat_end, angle_unit),
            units.from_radians(lon_end, angle_unit),
        ),
        units.azimuth_from_radians(back_azimuth, angle_unit),
    )
    return GeodesicSolution(destination, status, iterations)


def rad_to_geo(
    ellipsoid: Ellipsoid,
    lat_start: float,
    lon_start: float,
    distance: float,
    azimuth: float,
    *,
    angle_unit: Union[AngleUnit, str] = AngleUnit.DEGREE,
    range_unit: Union[RangeUnit, str] = RangeUnit.METER,
    strict: bool = False,
    max_iterations: int = DIRECT_MAX_ITERATIONS,
) -> Destination:
    """
    Given a start point, a distance and a forward azimuth, calculate the end point
    and the back azimuth at the end point.

    Args:
        ellipsoid:
            The earth model

        lat_start, lon_start:
            The start point

        distance:
            The distance to travel along the geodesic

        azimuth:
            The forward azimuth at the start point

    Keyword Args:
        angle_unit:
            (Default degrees) Unit of the input and output angles

        range_unit:
            (Default meters) Unit of the distance

        strict:
            (Default False) If True, raise rather than returning an estimate that was
            not reached by convergence

        max_iterations:
            Iteration cap for Vincenty's formula

    Returns:
        Destination, a (Geographic, back azimuth) pair
    """
    solution = solve_direct(
        ellipsoid, lat_start, lon_start, distance, azimuth,
        angle_unit=angle_unit, range_unit=range_unit,
        max_iterations=max_iterations,
    )
    return _check_solution(solution, strict).result


def direct(ellipsoid: Ellipsoid, start: Geographic, rad: RAD, **kwargs) -> Destination:
    """rad_to_geo, taking the start point as a Geographic and the travel as a RAD"""
    return rad_to_geo(ellipsoid, start[0], start[1], rad[0], rad[1], **kwargs)
