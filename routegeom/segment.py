from __future__ import annotations

from .line import Line
from .point import Point
from .types import GeometryError, Number


class Segment(Line):
    """Piece of a line between ``start`` (t=0) and ``end`` (t=1).

    Queries inherited from :class:`Line`, ``intersect`` included, still treat
    the segment as its supporting infinite line.
    """

    @property
    def start(self) -> Point:
        return self.p1

    @property
    def end(self) -> Point:
        return self.p2

    def midpoint(self) -> Point:
        return Point((self.p1.x + self.p2.x) / 2, (self.p1.y + self.p2.y) / 2)

    def reversed(self) -> "Segment":
        return Segment(self.p2, self.p1)

    def point_at(self, t: Number) -> Point:
        if not 0 <= t <= 1:
            raise GeometryError(f"segment parameter must lie in [0, 1], got {t!r}")
        if t == 0:
            return self.p1
        if t == 1:
            return self.p2
        return Point(
            float(self.p1.x) + t * float(self.dx),
            float(self.p1.y) + t * float(self.dy),
        )
