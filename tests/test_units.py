import math

import pytest
from pytest import approx

from geoframes import geo_to_ecef, WGS84
from geoframes.errors import InvalidArgumentError
from geoframes.units import *


def test_angle_unit():
    assert angle_unit(AngleUnit.DEGREE) is AngleUnit.DEGREE
    assert angle_unit('deg') is AngleUnit.DEGREE
    assert angle_unit('Degrees') is AngleUnit.DEGREE
    assert angle_unit('rad') is AngleUnit.RADIAN
    assert angle_unit('radians') is AngleUnit.RADIAN

    with pytest.raises(InvalidArgumentError):
        angle_unit('grad')

    with pytest.raises(InvalidArgumentError):
        angle_unit(RangeUnit.METER)


def test_range_unit():
    assert range_unit(RangeUnit.KILOMETER) is RangeUnit.KILOMETER
    assert range_unit('m') is RangeUnit.METER
    assert range_unit('meters') is RangeUnit.METER
    assert range_unit('KM') is RangeUnit.KILOMETER

    with pytest.raises(InvalidArgumentError):
        range_unit('mi')

    with pytest.raises(InvalidArgumentError):
        range_unit(None)


def test_unknown_unit_rejected_by_operations():
    with pytest.raises(InvalidArgumentError):
        geo_to_ecef(WGS84, 0., 0., angle_unit='gon')

    with pytest.raises(InvalidArgumentError):
        geo_to_ecef(WGS84, 0., 0., range_unit='furlong')


def test_angle_conversion():
    assert to_radians(180., AngleUnit.DEGREE) == approx(math.pi)
    assert to_radians(1.5, 'rad') == 1.5
    assert from_radians(math.pi / 2, 'deg') == approx(90.)
    assert from_radians(0.25, AngleUnit.RADIAN) == 0.25


def test_range_conversion():
    assert to_meters(1., 'km') == 1000.
    assert to_meters(12.5, RangeUnit.METER) == 12.5
    assert from_meters(1000., RangeUnit.KILOMETER) == 1.
    assert from_meters(12.5, 'm') == 12.5


def test_wrap_azimuth():
    assert wrap_azimuth(0.) == 0.
    assert wrap_azimuth(-math.pi / 2) == approx(3 * math.pi / 2)
    assert wrap_azimuth(5 * math.pi / 2) == approx(math.pi / 2)

    # Tiny negative angles must not wrap onto 2pi itself
    actual = wrap_azimuth(-1e-20)
    assert 0. <= actual < 2 * math.pi


def test_wrap_360():
    assert wrap_360(-90.) == 270.
    assert wrap_360(720.) == 0.
    assert wrap_360(359.5) == 359.5

    actual = wrap_360(-1e-20)
    assert 0. <= actual < 360.


def test_azimuth_from_radians():
    assert azimuth_from_radians(-math.pi / 2, 'deg') == approx(270.)
    assert azimuth_from_radians(-math.pi / 2, 'rad') == approx(3 * math.pi / 2)
    assert azimuth_from_radians(2 * math.pi, 'deg') == 0.
