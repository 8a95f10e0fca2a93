"""Two-dimensional points used as polyline bends and line anchors."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

from .config import get_geometry_config
from .math_utils import _norm2, ray_angle
from .types import Angle, Coord, GeometryError, Number


@dataclass(frozen=True, repr=False)
class Point:
    """Immutable coordinate pair over ``int`` or ``float``.

    Equality is exact and component-wise; use :meth:`is_close` for a tolerant
    comparison. Arithmetic returns new points and keeps integer coordinates
    integral wherever Python arithmetic does.
    """

    x: Number
    y: Number

    @classmethod
    def from_sequence(cls, values: Sequence[Number]) -> "Point":
        if isinstance(values, (str, bytes)) or len(values) != 2:
            raise GeometryError(f"expected two coordinates, got {values!r}")
        x, y = values
        for value in (x, y):
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise GeometryError(f"coordinate must be a real number, got {value!r}")
        return cls(x, y)

    def __iter__(self) -> Iterator[Number]:
        yield self.x
        yield self.y

    def as_tuple(self) -> Coord:
        return (self.x, self.y)

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)

    def __mul__(self, factor: Number) -> "Point":
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: Number) -> "Point":
        return Point(self.x / divisor, self.y / divisor)

    def dot(self, other: "Point") -> Number:
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Point") -> Number:
        """Z component of the cross product, exact for integer coordinates."""
        return self.x * other.y - self.y * other.x

    def norm(self) -> float:
        return _norm2(self.as_tuple())

    def distance(self, other: "Point") -> float:
        return (other - self).norm()

    def orthogonal(self) -> "Point":
        """The vector rotated counter-clockwise by a right angle."""
        return Point(-self.y, self.x)

    def angle(self, q: "Point", r: "Point") -> Angle:
        """Angle at this point between the rays towards ``q`` and ``r``.

        The result lies in ``[0, pi]``; it is ``0.0`` if either ray is empty.
        """
        return ray_angle((q - self).as_tuple(), (r - self).as_tuple())

    def is_close(self, other: "Point", epsilon: Optional[float] = None) -> bool:
        if epsilon is None:
            epsilon = get_geometry_config().epsilon
        return math.isclose(self.x, other.x, rel_tol=0.0, abs_tol=epsilon) and math.isclose(
            self.y, other.y, rel_tol=0.0, abs_tol=epsilon
        )

    def __repr__(self) -> str:
        return f"Point({self.x!r}, {self.y!r})"
