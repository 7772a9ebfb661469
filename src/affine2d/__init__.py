"""2D affine geometry: vectors, points and homogeneous transformation matrices."""
from affine2d.model.geometry_utils import deg2rad, normalize_angle, rad2deg, rotate_about, scale_about
from affine2d.model.matrix import Matrix
from affine2d.model.point import Point
from affine2d.model.transformable import Transformable
from affine2d.model.vector import Vector

__version__ = "0.1.0"

__all__ = [
    "Vector",
    "Point",
    "Matrix",
    "Transformable",
    "rotate_about",
    "scale_about",
    "deg2rad",
    "rad2deg",
    "normalize_angle",
]
