"""
Constants declarations for geoframes
"""

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Major axis (meters)
WGS84_INVF = 298.257223563  # Inverse flattening

# Mean Earth Radius (spherical model)
EARTH_RADIUS_METERS = 6_371_000.0

# Absolute tolerance used for "is zero" / "are equal" checks
ZERO_TOLERANCE = 1e-12

# Vincenty inverse problem: relative change in lambda, iteration cap
INVERSE_TOLERANCE = 1e-15
INVERSE_MAX_ITERATIONS = 100

# Vincenty direct problem: absolute change in sigma, iteration cap
DIRECT_TOLERANCE = 1e-15
DIRECT_MAX_ITERATIONS = 1000

# Olson's geocentric inversion is not valid this close to the earth's center (meters)
OLSON_MIN_RADIUS = 100_000.0
