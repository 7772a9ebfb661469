"""
Homogeneous transformation matrices for 2D affine geometry.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence, Union

import numpy as np

from affine2d import config
from affine2d.numerics import cos_sin

if TYPE_CHECKING:
    import numpy.typing as npt
    from affine2d.model.point import Point
    from affine2d.model.vector import Vector

logger = logging.getLogger(__name__)

MatrixLike = Union["Matrix", Sequence[Sequence[float]], "npt.NDArray[np.float64]"]


class Matrix:
    """
    A matrix in homogeneous 2D coordinates.

    The factories build 3x3 affine transforms whose last row is [0, 0, 1].
    A point is represented as the 3x1 column [[x], [y], [1]] and is
    transformed by left-multiplication. Instances are immutable: the backing
    array is read-only and every operation returns a new Matrix.
    """

    __slots__ = ("values",)

    def __init__(self, values: MatrixLike) -> None:
        """
        Args:
            values: Rows of the matrix, or another Matrix / 2D array.

        Raises:
            ValueError: If values do not form a non-empty 2D grid.
        """
        if isinstance(values, Matrix):
            values = values.values

        array = np.array(values, dtype=np.float64)
        if array.ndim != 2 or array.size == 0:
            raise ValueError(f"Matrix values must be a non-empty 2D grid, got shape {array.shape}.")

        array.flags.writeable = False
        self.values: npt.NDArray[np.float64] = array

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------
    @classmethod
    def identity(cls) -> Matrix:
        return cls(np.eye(3))

    @classmethod
    def rotation(cls, angle: float) -> Matrix:
        """Counter-clockwise rotation about the origin by angle (radians)."""
        c, s = cos_sin(angle)
        return cls([
            [c, -s, 0.0],
            [s, c, 0.0],
            [0.0, 0.0, 1.0],
        ])

    @classmethod
    def scale(cls, factor: float) -> Matrix:
        """Uniform scale about the origin."""
        return cls.scale_xy(factor, factor)

    @classmethod
    def scale_xy(cls, sx: float, sy: float) -> Matrix:
        """Non-uniform scale about the origin."""
        return cls([
            [sx, 0.0, 0.0],
            [0.0, sy, 0.0],
            [0.0, 0.0, 1.0],
        ])

    @classmethod
    def translation(cls, vector: Vector) -> Matrix:
        """Translation by the x and y components of vector."""
        return cls([
            [1.0, 0.0, vector.x],
            [0.0, 1.0, vector.y],
            [0.0, 0.0, 1.0],
        ])

    @classmethod
    def compose(cls, *matrices: Matrix) -> Matrix:
        """
        Multiply matrices in the given order.

        compose(a, b, c) equals a @ b @ c, so c is applied first. With no
        arguments the identity is returned.
        """
        result = cls.identity()
        for matrix in matrices:
            result = result.multiply(matrix)
        return result

    @classmethod
    def rotation_about(cls, center: Point, angle: float) -> Matrix:
        """Rotation by angle (radians) about an arbitrary center."""
        return cls.compose(
            cls._translation_xy(center.x, center.y),
            cls.rotation(angle),
            cls._translation_xy(-center.x, -center.y),
        )

    @classmethod
    def scale_about(cls, center: Point, sx: float, sy: float) -> Matrix:
        """Non-uniform scale about an arbitrary center."""
        return cls.compose(
            cls._translation_xy(center.x, center.y),
            cls.scale_xy(sx, sy),
            cls._translation_xy(-center.x, -center.y),
        )

    @classmethod
    def _translation_xy(cls, dx: float, dy: float) -> Matrix:
        return cls([
            [1.0, 0.0, dx],
            [0.0, 1.0, dy],
            [0.0, 0.0, 1.0],
        ])

    # ------------------------------------------------------------------
    # Algebra
    # ------------------------------------------------------------------
    @property
    def shape(self) -> tuple[int, int]:
        return self.values.shape

    def multiply(self, other: Matrix) -> Matrix:
        """
        Return the product self · other.

        As a transform this means "apply other, then self".

        Raises:
            ValueError: If the inner dimensions do not match.
        """
        if self.shape[1] != other.shape[0]:
            raise ValueError(f"Cannot multiply matrices of shape {self.shape} and {other.shape}.")

        with np.errstate(invalid="ignore", over="ignore"):
            return Matrix(self.values @ other.values)

    def __matmul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    def transform_point(self, x: float, y: float) -> tuple[float, float]:
        """
        Apply this matrix to the homogeneous point (x, y, 1).

        The third component is discarded without re-normalizing, which is
        exact for the affine matrices built by the factories.
        """
        result = self.multiply(Matrix([[x], [y], [1.0]])).values
        return float(result[0, 0]), float(result[1, 0])

    def transform_vector(self, x: float, y: float) -> tuple[float, float]:
        """Apply the linear part of this matrix to the direction (x, y, 0)."""
        result = self.multiply(Matrix([[x], [y], [0.0]])).values
        return float(result[0, 0]), float(result[1, 0])

    def determinant(self) -> float:
        self._require_square()
        with np.errstate(invalid="ignore", over="ignore"):
            return float(np.linalg.det(self.values))

    def inverse(self) -> Matrix:
        """
        Return the inverse matrix.

        A singular matrix has no inverse; the result is then filled with NaN
        so the failure propagates like any other degenerate input.
        """
        self._require_square()
        try:
            with np.errstate(invalid="ignore", over="ignore", divide="ignore"):
                inverse = np.linalg.inv(self.values)
        except np.linalg.LinAlgError as e:
            logger.debug(f"Matrix is singular ({e}); inverse is NaN.")
            return Matrix(np.full(self.shape, np.nan))
        return Matrix(inverse)

    def _require_square(self) -> None:
        if self.shape[0] != self.shape[1]:
            raise ValueError(f"Operation requires a square matrix, got shape {self.shape}.")

    # ------------------------------------------------------------------
    # Comparison & conversion
    # ------------------------------------------------------------------
    def to_list(self) -> list[list[float]]:
        return self.values.tolist()

    def is_close(self, other: MatrixLike, abs_tol: float = config.DEFAULT_ABS_TOL) -> bool:
        other_values = other.values if isinstance(other, Matrix) else np.asarray(other, dtype=np.float64)
        if self.shape != other_values.shape:
            return False
        return bool(np.allclose(self.values, other_values, rtol=0.0, atol=abs_tol))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return bool(np.array_equal(self.values, other.values))

    __hash__ = None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_list()})"
