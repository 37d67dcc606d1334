import math

import pytest
from pytest import approx

from geoframes.ellipsoid import Ellipsoid, KRASSOWSKY1940, SPHERE, WGS84
from geoframes.errors import DegenerateInputError, DomainViolationError
from geoframes.geocentric import *
from geoframes.geocentric import _prime_vertical_scale
from geoframes.structures import Geodetic, XYZ

from tests.functions import assert_geodetics_equal, assert_triples_equal


def test_geo_to_ecef():
    assert geo_to_ecef(WGS84, 0., 0., 0.) == XYZ(6_378_137., 0., 0.)
    assert_triples_equal(geo_to_ecef(WGS84, 0., 90.), (0., 6_378_137., 0.))
    assert_triples_equal(geo_to_ecef(WGS84, 90., 0.), (0., 0., WGS84.b))
    assert_triples_equal(geo_to_ecef(WGS84, -90., 0., 100.), (0., 0., -WGS84.b - 100.))

    # Sourced from pymap3d
    assert_triples_equal(
        geo_to_ecef(WGS84, 42., -82., 200.),
        (660_675.2518247, -4_700_948.68316, 4_245_737.66222),
        abs_tol=1e-3
    )


def test_geo_to_ecef_sphere():
    assert_triples_equal(
        geo_to_ecef(SPHERE, 45., 45., 1000.),
        (6_372_000. / 2, 6_372_000. / 2, 6_372_000. * math.sqrt(2) / 2)
    )


def test_geo_to_ecef_units():
    expected = geo_to_ecef(WGS84, 42., -82., 200.)
    actual = geo_to_ecef(
        WGS84, math.radians(42.), math.radians(-82.), 0.2, angle_unit='rad', range_unit='km'
    )
    assert_triples_equal(actual, tuple(x / 1000 for x in expected), abs_tol=1e-9)


def test_ecef_to_geo():
    assert_geodetics_equal(ecef_to_geo(WGS84, 6_378_137., 0., 0.), Geodetic(0., 0., 0.))
    assert_geodetics_equal(ecef_to_geo(WGS84, 0., 6_378_137., 0.), Geodetic(0., 90., 0.))
    assert_geodetics_equal(ecef_to_geo(WGS84, 0., 0., WGS84.b), Geodetic(90., 0., 0.))
    assert_geodetics_equal(ecef_to_geo(WGS84, 0., 0., -WGS84.b - 10.), Geodetic(-90., 0., 10.))

    # Sourced from pymap3d
    assert_geodetics_equal(
        ecef_to_geo(WGS84, 660_675.2518247, -4_700_948.68316, 4_245_737.66222),
        Geodetic(42., -82., 200.),
        angle_tol=1e-7, height_tol=1e-2
    )


@pytest.mark.parametrize('lat', [-89.9, -60., -33.3, -1., 0., 0.5, 30., 45., 59.9, 75., 89.9])
@pytest.mark.parametrize('height', [-100., 0., 1_000., 35_000.])
def test_ecef_round_trip(lat, height):
    for lon in (-179.9, -90., 0., 45., 135.):
        expected = Geodetic(lat, lon, height)
        actual = ecef_to_geo(WGS84, *geo_to_ecef(WGS84, *expected))
        assert_geodetics_equal(actual, expected)


def test_ecef_round_trip_other_ellipsoids():
    for ellipsoid in (SPHERE, KRASSOWSKY1940):
        expected = Geodetic(-12.5, 101.25, 432.1)
        actual = ecef_to_geo(ellipsoid, *geo_to_ecef(ellipsoid, *expected))
        assert_geodetics_equal(actual, expected)


def test_ecef_to_geo_units():
    expected = ecef_to_geo(WGS84, 660_675.2518247, -4_700_948.68316, 4_245_737.66222)
    actual = ecef_to_geo(
        WGS84, 660.6752518247, -4_700.94868316, 4_245.73766222,
        angle_unit='rad', range_unit='km'
    )
    assert actual.lat == approx(math.radians(expected.lat), abs=1e-12)
    assert actual.lon == approx(math.radians(expected.lon), abs=1e-12)
    assert actual.height == approx(expected.height / 1000, abs=1e-9)


def test_ecef_to_geo_near_center():
    with pytest.raises(DegenerateInputError):
        ecef_to_geo(WGS84, 0., 0., 0.)

    with pytest.raises(DegenerateInputError):
        ecef_to_geo(WGS84, 50_000., 50_000., 0.)


def test_ecef_offset():
    p1, p2 = Geodetic(42., -82., 200.), Geodetic(-33.8688, 151.2093, 58.)
    for ellipsoid in (WGS84, SPHERE):
        x1, y1, z1 = geo_to_ecef(ellipsoid, *p1)
        x2, y2, z2 = geo_to_ecef(ellipsoid, *p2)
        assert_triples_equal(
            ecef_offset(ellipsoid, *p1, *p2),
            (x2 - x1, y2 - y1, z2 - z1),
            abs_tol=1e-6
        )

    assert ecef_offset(WGS84, *p1, *p1) == XYZ(0., 0., 0.)


def test_ecef_offset_units():
    p1, p2 = Geodetic(42., -82., 200.), Geodetic(42.1, -82.1, 300.)
    expected = ecef_offset(WGS84, *p1, *p2)
    actual = ecef_offset(
        WGS84,
        math.radians(p1.lat), math.radians(p1.lon), p1.height / 1000,
        math.radians(p2.lat), math.radians(p2.lon), p2.height / 1000,
        angle_unit='rad', range_unit='km'
    )
    assert_triples_equal(actual, tuple(x / 1000 for x in expected), abs_tol=1e-9)


def test_prime_vertical_scale_domain():
    assert _prime_vertical_scale(0., 1.) == 1.

    with pytest.raises(DomainViolationError):
        _prime_vertical_scale(1., 1.)

    # An eccentricity pushed past 1 after construction
    ellipsoid = Ellipsoid.from_inverse_flattening('stretched', 6_378_137., 298.257223563)
    ellipsoid.__dict__['eccentricity_squared'] = 2.
    assert_triples_equal(geo_to_ecef(ellipsoid, 0., 0.), (6_378_137., 0., 0.))
    with pytest.raises(DomainViolationError):
        geo_to_ecef(ellipsoid, 60., 0.)
