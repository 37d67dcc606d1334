
def test_compile():
    # Every module should import using the base dependencies alone
    import geoframes
    import geoframes.ellipsoid
    import geoframes.errors
    import geoframes.geocentric
    import geoframes.geodesic
    import geoframes.local
    import geoframes.pipelines
    import geoframes.structures
    import geoframes.units
    import geoframes.vector
    import geoframes.utils.functions
    import geoframes.utils.logging


def test_version():
    from geoframes import __version__, get_version

    assert get_version() == '0.1.0'
    assert __version__ == '0.1.0'
