import math

import pytest
from pytest import approx

from geoframes.ellipsoid import SPHERE, WGS84
from geoframes.geocentric import ecef_to_geo, geo_to_ecef
from geoframes.local import aer_to_enu, ecef_to_enu, enu_to_aer, enu_to_ecef
from geoframes.pipelines import *
from geoframes.structures import Geodetic

from tests.functions import assert_geodetics_equal, assert_triples_equal

_ANCHOR = (42., -82., 200.)


def test_aer_to_geo():
    # Sourced from pymap3d
    actual = aer_to_geo(WGS84, 33., 70., 1000., *_ANCHOR)
    assert actual.lat == approx(42.002582, abs=2e-6)
    assert actual.lon == approx(-81.997752, abs=2e-6)
    assert actual.height == approx(1139.70, abs=5e-2)


def test_geo_to_aer():
    actual = geo_to_aer(WGS84, *aer_to_geo(WGS84, 33., 70., 1000., *_ANCHOR), *_ANCHOR)
    assert_triples_equal(actual, (33., 70., 1000.), abs_tol=1e-6)


def test_geo_to_aer_due_north():
    actual = geo_to_aer(WGS84, 10.01, 0., 0., 10., 0., 0.)
    assert actual.azimuth == approx(0., abs=1e-9)

    # The earth curves away below the horizon
    assert actual.elevation < 0.
    assert actual.range == approx(1106., abs=5.)


@pytest.mark.parametrize('aer', [(0., 0., 1.), (123., -5., 25_000.), (271., 45., 100_000.)])
def test_aer_geo_round_trip(aer):
    for ellipsoid in (WGS84, SPHERE):
        geodetic = aer_to_geo(ellipsoid, *aer, *_ANCHOR)
        actual = geo_to_aer(ellipsoid, *geodetic, *_ANCHOR)
        assert_triples_equal(actual, aer, abs_tol=1e-5)


def test_geo_enu_round_trip():
    expected = Geodetic(42.1, -81.8, 950.)
    enu = geo_to_enu(WGS84, *expected, *_ANCHOR)
    assert_geodetics_equal(enu_to_geo(WGS84, *enu, *_ANCHOR), expected)

    # The anchor is the origin of its own frame
    assert_triples_equal(geo_to_enu(WGS84, *_ANCHOR, *_ANCHOR), (0., 0., 0.))


def test_compositions_match_primitives():
    target = Geodetic(41.9, -82.3, 1500.)
    xyz = geo_to_ecef(WGS84, *target)
    enu = ecef_to_enu(WGS84, *xyz, *_ANCHOR)

    assert_triples_equal(geo_to_enu(WGS84, *target, *_ANCHOR), enu)
    assert_triples_equal(geo_to_aer(WGS84, *target, *_ANCHOR), enu_to_aer(*enu), abs_tol=1e-9)
    assert_triples_equal(ecef_to_aer(WGS84, *xyz, *_ANCHOR), enu_to_aer(*enu), abs_tol=1e-9)

    aer = (210., 12., 30_000.)
    expected = enu_to_ecef(WGS84, *aer_to_enu(*aer), *_ANCHOR)
    assert_triples_equal(aer_to_ecef(WGS84, *aer, *_ANCHOR), expected)
    assert_geodetics_equal(
        aer_to_geo(WGS84, *aer, *_ANCHOR),
        ecef_to_geo(WGS84, *expected)
    )
    assert_geodetics_equal(
        enu_to_geo(WGS84, *enu, *_ANCHOR),
        target
    )


def test_pipeline_units():
    expected = geo_to_aer(WGS84, 41.9, -82.3, 1500., *_ANCHOR)
    actual = geo_to_aer(
        WGS84,
        math.radians(41.9), math.radians(-82.3), 1.5,
        math.radians(42.), math.radians(-82.), 0.2,
        angle_unit='rad', range_unit='km'
    )
    assert actual.azimuth == approx(math.radians(expected.azimuth), abs=1e-12)
    assert actual.elevation == approx(math.radians(expected.elevation), abs=1e-12)
    assert actual.range == approx(expected.range / 1000, abs=1e-9)

    expected = aer_to_ecef(WGS84, 33., 70., 1000., *_ANCHOR)
    actual = aer_to_ecef(WGS84, 33., 70., 1., 42., -82., 0.2, range_unit='km')
    assert_triples_equal(actual, tuple(x / 1000 for x in expected), abs_tol=1e-9)

    expected = aer_to_geo(WGS84, 33., 70., 1000., *_ANCHOR)
    actual = aer_to_geo(WGS84, 33., 70., 1., 42., -82., 0.2, range_unit='km')
    assert actual.lat == approx(expected.lat, abs=1e-12)
    assert actual.height == approx(expected.height / 1000, abs=1e-9)


def test_anchor_height_defaults_to_zero():
    assert geo_to_aer(WGS84, 42.1, -82., 0., 42., -82.) == \
        geo_to_aer(WGS84, 42.1, -82., 0., 42., -82., 0.)
