"""
Module for unit conversions.

Every public geoframes operation accepts an angle unit and a range unit alongside its
values. Values are converted to radians/meters on the way in, all math runs in
radians/meters, and results are converted back to the caller's units on the way out.
"""
__all__ = [
    'AngleUnit', 'RangeUnit', 'angle_unit', 'azimuth_from_radians', 'from_meters', 'from_radians',
    'range_unit', 'to_meters', 'to_radians', 'wrap_360', 'wrap_azimuth',
]

from enum import Enum
import math
from typing import Union

from geoframes.errors import InvalidArgumentError


class AngleUnit(Enum):
    """Unit in which angles (latitude, longitude, azimuth, elevation) are expressed"""
    RADIAN = 'rad'
    DEGREE = 'deg'


class RangeUnit(Enum):
    """Unit in which lengths (heights, distances, cartesian components) are expressed"""
    METER = 'm'
    KILOMETER = 'km'


_ANGLE_ALIASES = {
    'rad': AngleUnit.RADIAN,
    'radian': AngleUnit.RADIAN,
    'radians': AngleUnit.RADIAN,
    'deg': AngleUnit.DEGREE,
    'degree': AngleUnit.DEGREE,
    'degrees': AngleUnit.DEGREE,
}

_RANGE_ALIASES = {
    'm': RangeUnit.METER,
    'meter': RangeUnit.METER,
    'meters': RangeUnit.METER,
    'km': RangeUnit.KILOMETER,
    'kilometer': RangeUnit.KILOMETER,
    'kilometers': RangeUnit.KILOMETER,
}

# Multiply by these to get meters
_METERS_PER_UNIT = {
    RangeUnit.METER: 1.0,
    RangeUnit.KILOMETER: 1000.0,
}

_TWO_PI = 2 * math.pi


def angle_unit(unit: Union[AngleUnit, str]) -> AngleUnit:
    """
    Coerces an angle unit tag into an AngleUnit.

    Args:
        unit:
            An AngleUnit, or one of 'rad', 'radian(s)', 'deg', 'degree(s)'

    Returns:
        AngleUnit
    """
    if isinstance(unit, AngleUnit):
        return unit

    if isinstance(unit, str) and unit.lower() in _ANGLE_ALIASES:
        return _ANGLE_ALIASES[unit.lower()]

    raise InvalidArgumentError(
        f"Unknown angle unit {unit!r}. Options: {[x.value for x in AngleUnit]}"
    )


def range_unit(unit: Union[RangeUnit, str]) -> RangeUnit:
    """
    Coerces a range unit tag into a RangeUnit.

    Args:
        unit:
            A RangeUnit, or one of 'm', 'meter(s)', 'km', 'kilometer(s)'

    Returns:
        RangeUnit
    """
    if isinstance(unit, RangeUnit):
        return unit

    if isinstance(unit, str) and unit.lower() in _RANGE_ALIASES:
        return _RANGE_ALIASES[unit.lower()]

    raise InvalidArgumentError(
        f"Unknown range unit {unit!r}. Options: {[x.value for x in RangeUnit]}"
    )


def to_radians(value: float, unit: Union[AngleUnit, str]) -> float:
    """Converts an angle expressed in `unit` to radians"""
    if angle_unit(unit) is AngleUnit.DEGREE:
        return math.radians(value)
    return float(value)


def from_radians(value: float, unit: Union[AngleUnit, str]) -> float:
    """Converts an angle in radians to `unit`"""
    if angle_unit(unit) is AngleUnit.DEGREE:
        return math.degrees(value)
    return float(value)


def to_meters(value: float, unit: Union[RangeUnit, str]) -> float:
    """Converts a length expressed in `unit` to meters"""
    return value * _METERS_PER_UNIT[range_unit(unit)]


def from_meters(value: float, unit: Union[RangeUnit, str]) -> float:
    """Converts a length in meters to `unit`"""
    return value / _METERS_PER_UNIT[range_unit(unit)]


def wrap_azimuth(radians: float) -> float:
    """
    Wraps an angle in radians into [0, 2pi).

    Args:
        radians:
            Any angle, typically the output of atan2 (i.e. within [-pi, pi])

    Returns:
        float
    """
    wrapped = radians % _TWO_PI
    # A tiny negative input wraps to exactly 2pi under float rounding
    if wrapped >= _TWO_PI:
        return 0.0
    return wrapped


def wrap_360(degrees: float) -> float:
    """Wraps an angle in degrees into [0, 360)"""
    wrapped = degrees % 360.
    if wrapped >= 360.:
        return 0.0
    return wrapped


def azimuth_from_radians(radians: float, unit: Union[AngleUnit, str]) -> float:
    """
    Converts an azimuth in radians to `unit`, normalized into [0, 360) degrees
    or [0, 2pi) radians.
    """
    if angle_unit(unit) is AngleUnit.DEGREE:
        return wrap_360(math.degrees(radians))
    return wrap_azimuth(radians)
