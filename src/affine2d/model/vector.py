"""
Free vectors in the Euclidean plane.
"""
from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator

import numpy as np

from affine2d import config
from affine2d.numerics import cos_sin, ieee_divide

if TYPE_CHECKING:
    import numpy.typing as npt
    from affine2d.model.matrix import Matrix

logger = logging.getLogger(__name__)


@dataclass
class Vector:
    """
    A 2-dimensional vector representing direction and magnitude.

    In-place operations (add, subtract, multiply, normalize, rotate,
    transform) modify the vector and return it, so calls can be chained:

        >>> Vector(1.0, 0.0).add(Vector(1.0, 0.0)).multiply(2.0)
        Vector(x=4.0, y=0.0)

    Operations producing a vector that is conceptually different from the
    receiver (projection, rejection and the arithmetic operators) return a
    new instance.

    Degenerate input never raises: normalizing a zero vector or projecting
    onto one yields NaN components.
    """
    x: float
    y: float

    @classmethod
    def from_angle_length(cls, angle: float, length: float) -> Vector:
        """
        Create a vector from its angle and length.

        Args:
            angle: Angle in radians from the positive x axis.
            length: Length of the vector.
        """
        c, s = cos_sin(angle)
        return cls(length * c, length * s)

    def clone(self) -> Vector:
        return Vector(self.x, self.y)

    # ------------------------------------------------------------------
    # In-place operations (chainable)
    # ------------------------------------------------------------------
    def add(self, vector: Vector) -> Vector:
        self.x += vector.x
        self.y += vector.y
        return self

    def subtract(self, vector: Vector) -> Vector:
        self.x -= vector.x
        self.y -= vector.y
        return self

    def multiply(self, scalar: float) -> Vector:
        self.x *= scalar
        self.y *= scalar
        return self

    def normalize(self) -> Vector:
        """Scale this vector to length 1, preserving direction."""
        length = self.length()
        if length == 0.0:
            logger.debug("Normalizing a zero-length vector; components become NaN.")
        self.x = ieee_divide(self.x, length)
        self.y = ieee_divide(self.y, length)
        return self

    def rotate(self, angle: float) -> Vector:
        """Rotate counter-clockwise about the origin by angle (radians)."""
        c, s = cos_sin(angle)
        self.x, self.y = (
            self.x * c - self.y * s,
            self.x * s + self.y * c,
        )
        return self

    def transform(self, matrix: Matrix) -> Vector:
        """
        Apply the linear part of an affine matrix.

        A vector has no position, so the translation column is ignored.
        """
        self.x, self.y = matrix.transform_vector(self.x, self.y)
        return self

    # ------------------------------------------------------------------
    # Measurements
    # ------------------------------------------------------------------
    def dot(self, vector: Vector) -> float:
        return self.x * vector.x + self.y * vector.y

    def cross(self, vector: Vector) -> float:
        """2D cross product returning a scalar (z-component)."""
        return self.x * vector.y - self.y * vector.x

    def length(self) -> float:
        """
        Length of the vector.

        Comparing lengths in hot loops is cheaper with length_squared().
        """
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def angle(self) -> float:
        """
        Angle from the positive x axis in radians, as returned by atan2(y, x).

        The range is [-pi, pi]: -pi is returned when x is negative and y is -0.0.
        """
        return math.atan2(self.y, self.x)

    # ------------------------------------------------------------------
    # Decomposition
    # ------------------------------------------------------------------
    def projection(self, target: Vector) -> Vector:
        """Vector projection of this vector onto target."""
        target_length_sq = target.dot(target)
        if target_length_sq == 0.0:
            logger.debug("Projecting onto a zero-length vector; result is NaN.")
        factor = ieee_divide(self.dot(target), target_length_sq)
        return Vector(target.x * factor, target.y * factor)

    def rejection(self, target: Vector) -> Vector:
        """Component of this vector orthogonal to target."""
        projection = self.projection(target)
        return self.clone().subtract(projection)

    def scalar_projection(self, target: Vector) -> float:
        """Signed length of this vector in the direction of target."""
        return ieee_divide(self.dot(target), target.length())

    # ------------------------------------------------------------------
    # Comparison & conversion
    # ------------------------------------------------------------------
    def is_close(self, other: Vector, abs_tol: float = config.DEFAULT_ABS_TOL) -> bool:
        return (
            math.isclose(self.x, other.x, rel_tol=0.0, abs_tol=abs_tol)
            and math.isclose(self.y, other.y, rel_tol=0.0, abs_tol=abs_tol)
        )

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y], dtype=np.float64)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    # ------------------------------------------------------------------
    # Operators (non-mutating)
    # ------------------------------------------------------------------
    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.clone().add(other)

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.clone().subtract(other)

    def __mul__(self, scalar: float) -> Vector:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.clone().multiply(scalar)

    def __rmul__(self, scalar: float) -> Vector:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vector:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Vector(ieee_divide(self.x, scalar), ieee_divide(self.y, scalar))

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y)
