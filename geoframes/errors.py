"""
Exceptions raised by geoframes.

All errors derive from ValueError, since every failure mode in this package
stems from the arguments of a pure calculation.
"""

__all__ = [
    'DegenerateInputError', 'DomainViolationError', 'GeodesyError',
    'InvalidArgumentError', 'UnconvergedError',
]


class GeodesyError(ValueError):
    """Base class for all geoframes errors"""


class InvalidArgumentError(GeodesyError):
    """An argument is not acceptable, e.g. an unknown unit or a malformed ellipsoid"""


class DomainViolationError(GeodesyError):
    """An intermediate value fell outside the domain of sqrt/asin/acos"""


class DegenerateInputError(GeodesyError):
    """
    The input describes a singular configuration for which no meaningful result exists,
    e.g. a zero-length vector or a point at the center of the earth.
    """


class UnconvergedError(GeodesyError):
    """An iterative solver exhausted its iteration limit without converging"""

    def __init__(self, message: str, estimate=None, iterations: int = 0):
        super().__init__(message)
        self.estimate = estimate
        self.iterations = iterations
