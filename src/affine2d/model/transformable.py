"""
Structural interface shared by geometric types that can be moved.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from affine2d.model.matrix import Matrix
    from affine2d.model.vector import Vector

T = TypeVar("T", bound="Transformable")


@runtime_checkable
class Transformable(Protocol):
    """
    Anything that can be copied, translated and transformed in place.

    Point satisfies this protocol, and so can any other geometric type by
    implementing the same four methods; no common base class is needed.
    Helpers such as geometry_utils.rotate_about accept any Transformable.
    """

    def clone(self: T) -> T: ...

    def translate(self: T, dx: float, dy: float) -> T: ...

    def translate_by_vector(self: T, vector: Vector) -> T: ...

    def transform(self: T, matrix: Matrix) -> T: ...
