import math

import pytest
from pytest import approx

from geoframes.errors import DegenerateInputError
from geoframes.structures import XYZ
from geoframes.vector import *


def test_distance():
    assert distance((0., 0., 0.), (3., 4., 0.)) == 5.
    assert distance(XYZ(1., 1., 1.), XYZ(1., 1., 1.)) == 0.
    assert distance(XYZ(-1., 2., 5.), XYZ(1., -2., 1.)) == 6.


def test_vector_from_two_points():
    actual = vector_from_two_points(XYZ(1., 2., 3.), XYZ(4., 0., 3.))
    assert actual == XYZ(3., -2., 0.)
    assert isinstance(actual, XYZ)


def test_cos_angle_between():
    assert cos_angle_between((1., 0., 0.), (0., 5., 0.)) == 0.
    assert cos_angle_between((2., 0., 0.), (3., 0., 0.)) == 1.
    assert cos_angle_between((1., 1., 0.), (1., 0., 0.)) == approx(math.sqrt(2) / 2)

    with pytest.raises(DegenerateInputError):
        cos_angle_between((0., 0., 0.), (1., 0., 0.))


def test_angle_between():
    assert angle_between((1., 0., 0.), (0., 1., 0.)) == approx(90.)
    assert angle_between((1., 0., 0.), (-1., 0., 0.)) == approx(180.)
    assert angle_between((1., 0., 0.), (0., 1., 0.), angle_unit='rad') == approx(math.pi / 2)

    # Parallel vectors whose cosine rounds past 1
    assert angle_between((0.1, 0.2, 0.3), (0.3, 0.6, 0.9)) == approx(0., abs=1e-6)

    with pytest.raises(DegenerateInputError):
        angle_between((1., 2., 3.), (0., 0., 0.))


def test_angle_between_non_finite():
    with pytest.raises(DegenerateInputError):
        angle_between((math.nan, 0., 0.), (1., 0., 0.))

    with pytest.raises(DegenerateInputError):
        cos_angle_between((1., 0., 0.), (0., math.inf, 0.))
