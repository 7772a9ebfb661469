"""
Located positions in the Euclidean plane.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, Union

import numpy as np

from affine2d import config
from affine2d.model.matrix import Matrix
from affine2d.model.vector import Vector

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass
class Point:
    """
    A simple geometric point in 2D space.

    A point is "where", a vector is "how far and which way". Conversions
    between the two are explicit (to_vector, from_vector). The arithmetic
    operators follow affine rules: Point + Vector = Point,
    Point - Vector = Point and Point - Point = Vector.

    Point implements the Transformable protocol; translate,
    translate_by_vector and transform mutate in place and return self.
    """
    x: float
    y: float

    @classmethod
    def from_vector(cls, vector: Vector) -> Point:
        """The point displaced from the origin by vector."""
        return cls(vector.x, vector.y)

    def clone(self) -> Point:
        return Point(self.x, self.y)

    def angle_to(self, other: Point) -> float:
        """Angle in radians of the vector from this point to other."""
        return math.atan2(other.y - self.y, other.x - self.x)

    def distance_to(self, other: Point) -> float:
        return self.vector_to(other).length()

    def vector_to(self, other: Point) -> Vector:
        return Vector(other.x - self.x, other.y - self.y)

    def to_vector(self) -> Vector:
        """Reinterpret this location as a displacement from the origin."""
        return Vector(self.x, self.y)

    def to_matrix(self) -> Matrix:
        """Homogeneous column [[x], [y], [1]]."""
        return Matrix([[self.x], [self.y], [1.0]])

    # ------------------------------------------------------------------
    # In-place operations (chainable)
    # ------------------------------------------------------------------
    def translate(self, dx: float, dy: float) -> Point:
        self.x += dx
        self.y += dy
        return self

    def translate_by_vector(self, vector: Vector) -> Point:
        return self.translate(vector.x, vector.y)

    def transform(self, matrix: Matrix) -> Point:
        """Replace this point with matrix · (x, y, 1)."""
        result = matrix.multiply(self.to_matrix()).values
        self.x = float(result[0, 0])
        self.y = float(result[1, 0])
        return self

    # ------------------------------------------------------------------
    # Comparison & conversion
    # ------------------------------------------------------------------
    def is_close(self, other: Point, abs_tol: float = config.DEFAULT_ABS_TOL) -> bool:
        return self.to_vector().is_close(other.to_vector(), abs_tol=abs_tol)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y], dtype=np.float64)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    # ------------------------------------------------------------------
    # Operators (non-mutating)
    # ------------------------------------------------------------------
    def __add__(self, other: Vector) -> Point:
        # Point + Vector = Point (Translation)
        if isinstance(other, Vector):
            return self.clone().translate_by_vector(other)
        return NotImplemented

    def __sub__(self, other: Union[Vector, Point]) -> Union[Vector, Point]:
        # Point - Point = Vector (Direction)
        if isinstance(other, Point):
            return other.vector_to(self)
        # Point - Vector = Point (Inverse translation)
        if isinstance(other, Vector):
            return self.clone().translate(-other.x, -other.y)
        return NotImplemented
