from __future__ import annotations

import math
from typing import TYPE_CHECKING, Optional, TypeVar

from affine2d.model.matrix import Matrix

if TYPE_CHECKING:
    from affine2d.model.point import Point
    from affine2d.model.transformable import Transformable

T = TypeVar("T", bound="Transformable")


def deg2rad(degrees: float) -> float:
    return degrees * math.pi / 180


def rad2deg(radians: float) -> float:
    return radians * 180 / math.pi


def normalize_angle(angle: float) -> float:
    """
    Wrap an angle into (-pi, pi].

    Non-finite angles have no equivalent in that range and give NaN.
    """
    if not math.isfinite(angle):
        return math.nan

    wrapped = math.fmod(angle + math.pi, 2.0 * math.pi)
    if wrapped <= 0.0:
        wrapped += 2.0 * math.pi
    return wrapped - math.pi


def rotate_about(shape: T, center: Point, angle: float) -> T:
    """
    Rotate a shape in place about center by angle (radians).

    Args:
        shape: Any Transformable, e.g. a Point.
        center: Pivot of the rotation.
        angle: Counter-clockwise angle in radians.

    Returns:
        The same shape, to allow chaining.
    """
    return shape.transform(Matrix.rotation_about(center, angle))


def scale_about(shape: T, center: Point, sx: float, sy: Optional[float] = None) -> T:
    """
    Scale a shape in place about center.

    Args:
        shape: Any Transformable, e.g. a Point.
        center: Fixed point of the scale.
        sx: Scale factor along x (and along y when sy is omitted).
        sy: Optional scale factor along y for a non-uniform scale.

    Returns:
        The same shape, to allow chaining.
    """
    if sy is None:
        sy = sx
    return shape.transform(Matrix.scale_about(center, sx, sy))
