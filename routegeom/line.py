"""Infinite lines through two points and their pairwise classification."""

from __future__ import annotations

import enum
import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple

from .logging_utils import debug_log_call
from .point import Point

logger = logging.getLogger(__name__)


class IntersectionType(enum.Enum):
    """Relationship between two infinite lines."""

    POINT = "point"
    PARALLEL = "parallel"
    OVERLAPPING = "overlapping"


@dataclass(frozen=True, repr=False)
class Line:
    """Infinite line through ``p1`` and ``p2``.

    ``p1 == p2`` is allowed. Such a degenerate line is both horizontal and
    vertical, contains only its own point, and classifies as overlapping
    with any line through that point and parallel to any other line.
    """

    p1: Point
    p2: Point

    @property
    def dx(self):
        return self.p2.x - self.p1.x

    @property
    def dy(self):
        return self.p2.y - self.p1.y

    @property
    def direction(self) -> Point:
        return self.p2 - self.p1

    def length(self) -> float:
        return self.direction.norm()

    def is_horizontal(self) -> bool:
        return self.p1.y == self.p2.y

    def is_vertical(self) -> bool:
        return self.p1.x == self.p2.x

    def slope(self) -> float:
        if self.is_vertical():
            return math.inf
        return self.dy / self.dx

    def y_intercept(self) -> float:
        if self.is_vertical():
            return math.nan
        return self.p1.y - self.slope() * self.p1.x

    def is_degenerate(self) -> bool:
        return self.p1 == self.p2

    def contains(self, point: Point) -> bool:
        """Exact test whether ``point`` lies on the line.

        A degenerate line only contains its own point.
        """
        if self.is_degenerate():
            return point == self.p1
        return (point - self.p1).cross(self.direction) == 0

    @debug_log_call(logger, name="Line.intersect")
    def intersect(self, other: "Line") -> Tuple[IntersectionType, Optional[Point]]:
        """Classify ``self`` against ``other`` as infinite lines.

        Returns ``(POINT, p)`` with the unique crossing ``p`` (float
        coordinates), ``(OVERLAPPING, None)`` for collinear lines and
        ``(PARALLEL, None)`` for disjoint ones.
        """

        d1 = self.direction
        d2 = other.direction
        denom = d1.cross(d2)
        if denom == 0:
            if self.is_degenerate():
                touching = other.contains(self.p1)
            else:
                touching = self.contains(other.p1)
            if touching:
                return IntersectionType.OVERLAPPING, None
            return IntersectionType.PARALLEL, None

        t1 = (other.p1 - self.p1).cross(d2) / denom
        crossing = Point(
            float(self.p1.x) + t1 * float(d1.x),
            float(self.p1.y) + t1 * float(d1.y),
        )
        return IntersectionType.POINT, crossing

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.p1!r}, {self.p2!r})"
