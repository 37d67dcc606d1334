from typing import Sequence

from pytest import approx

from geoframes import Geodetic


def assert_triples_equal(t1: Sequence[float], t2: Sequence[float], abs_tol=1e-6):
    """
    Asserts that two coordinate triples (XYZ, ENU, AER, ...) are equal within a
    specified absolute tolerance.

    Args:
        t1: The first triple
        t2: The second triple
        abs_tol: The absolute tolerance for floating point comparison.
                 Default is 1e-6 (a micrometer, for triples in meters).
    """
    try:
        assert len(t1) == len(t2)
        for x1, x2 in zip(t1, t2):
            assert x1 == approx(x2, abs=abs_tol)
    except AssertionError as e:
        print(tuple(t1))
        print(tuple(t2))
        raise e


def assert_geodetics_equal(g1: Geodetic, g2: Geodetic, angle_tol=1e-8, height_tol=1e-3):
    """
    Asserts that two geodetic positions are equal within the specified tolerances.

    Args:
        g1: The first Geodetic
        g2: The second Geodetic
        angle_tol: Tolerance on latitude/longitude, in degrees.
                   Default is 1e-8 (approx 1.1mm at the equator).
        height_tol: Tolerance on the height, in meters
    """
    try:
        assert g1.lat == approx(g2.lat, abs=angle_tol)
        assert g1.lon == approx(g2.lon, abs=angle_tol)
        assert g1.height == approx(g2.height, abs=height_tol)
    except AssertionError as e:
        print(g1)
        print(g2)
        raise e
