""" Cartesian vector helpers, independent of any ellipsoid """

__all__ = ['angle_between', 'cos_angle_between', 'distance', 'vector_from_two_points']

import math
from typing import Sequence, Union

import numpy as np
from numpy.linalg import norm

from geoframes import units
from geoframes.errors import DegenerateInputError
from geoframes.structures import XYZ
from geoframes.units import AngleUnit

Vector = Sequence[float]


def distance(point1: Vector, point2: Vector) -> float:
    """
    The euclidean distance between two cartesian points, in the points' own unit.

    Args:
        point1:
            An XYZ (or any x, y, z sequence)

        point2:
            A second XYZ

    Returns:
        float
    """
    return float(norm(np.subtract(point2, point1, dtype=float)))


def cos_angle_between(vector1: Vector, vector2: Vector) -> float:
    """
    The cosine of the angle between two vectors, (v1 . v2) / (|v1| |v2|).

    Raises:
        DegenerateInputError:
            If either vector has zero length (its direction is undefined) or has a
            non-finite component
    """
    v1, v2 = np.asarray(vector1, dtype=float), np.asarray(vector2, dtype=float)
    magnitude = norm(v1) * norm(v2)
    if not math.isfinite(magnitude):
        raise DegenerateInputError(
            'Cannot compute the angle to a vector with non-finite components.'
        )
    if magnitude == 0:
        raise DegenerateInputError('Cannot compute the angle to a zero-length vector.')

    return float(np.dot(v1, v2) / magnitude)


def angle_between(
    vector1: Vector,
    vector2: Vector,
    *,
    angle_unit: Union[AngleUnit, str] = AngleUnit.DEGREE,
) -> float:
    """
    The angle between two vectors, within [0, 180] degrees.

    Args:
        vector1:
            An XYZ (or any x, y, z sequence)

        vector2:
            A second XYZ

    Keyword Args:
        angle_unit:
            (Default degrees) Unit of the returned angle

    Returns:
        float
    """
    cos_angle = cos_angle_between(vector1, vector2)
    # Rounding can push parallel vectors just past +/-1
    return units.from_radians(math.acos(max(-1.0, min(1.0, cos_angle))), angle_unit)


def vector_from_two_points(point1: Vector, point2: Vector) -> XYZ:
    """The vector pointing from point1 to point2, i.e. point2 - point1"""
    return XYZ(*(float(x) for x in np.subtract(point2, point1, dtype=float)))
