"""Polygonal chains used as edge routes.

A layout stage hands over the bend points of an edge as a :class:`Polyline`;
:meth:`Polyline.normalize` drops the bends that do not change direction by
enough before the route is stored.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, Iterator, List, Optional, Sequence, Union

import numpy as np

from .logging_utils import debug_log_call
from .math_utils import interior_angle
from .point import Point
from .segment import Segment
from .types import Angle, GeometryError, Number

logger = logging.getLogger(__name__)


class Polyline:
    """Mutable open chain of points in traversal order.

    The polyline owns its point list; duplicates are allowed.
    """

    def __init__(self, points: Iterable[Point] = ()) -> None:
        self._points: List[Point] = list(points)

    @classmethod
    def from_array(cls, values: object) -> "Polyline":
        """Build a polyline from an ``(n, 2)`` array of coordinates."""

        arr = np.asarray(values)
        if arr.size == 0:
            return cls()
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise GeometryError(f"expected an (n, 2) coordinate array, got shape {arr.shape}")
        if not np.issubdtype(arr.dtype, np.number) or np.issubdtype(arr.dtype, np.complexfloating):
            raise GeometryError(f"expected real coordinates, got dtype {arr.dtype}")
        return cls(Point(x, y) for x, y in arr.tolist())

    def to_array(self) -> np.ndarray:
        if not self._points:
            return np.zeros((0, 2), dtype=float)
        return np.array([p.as_tuple() for p in self._points])

    @property
    def points(self) -> List[Point]:
        return list(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __getitem__(self, index: Union[int, slice]) -> Union[Point, "Polyline"]:
        if isinstance(index, slice):
            return Polyline(self._points[index])
        return self._points[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polyline):
            return NotImplemented
        return self._points == other._points

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Polyline({self._points!r})"

    def is_empty(self) -> bool:
        return not self._points

    def append(self, point: Point) -> None:
        self._points.append(point)

    def extend(self, points: Iterable[Point]) -> None:
        self._points.extend(points)

    def clear(self) -> None:
        self._points.clear()

    def copy(self) -> "Polyline":
        return Polyline(self._points)

    def segments(self) -> List[Segment]:
        return [Segment(a, b) for a, b in zip(self._points, self._points[1:])]

    def _segment_lengths(self) -> np.ndarray:
        if len(self._points) < 2:
            return np.zeros(0, dtype=float)
        deltas = np.diff(self.to_array().astype(float), axis=0)
        return np.hypot(deltas[:, 0], deltas[:, 1])

    def length(self) -> float:
        return float(self._segment_lengths().sum())

    def position(self, fraction: Number) -> Point:
        """Point reached after ``fraction`` of the total length from the start."""

        if not self._points:
            raise GeometryError("position of an empty polyline is undefined")
        if not 0 <= fraction <= 1:
            raise GeometryError(f"fraction must lie in [0, 1], got {fraction!r}")

        lengths = self._segment_lengths()
        remaining = fraction * float(lengths.sum())
        for segment, seg_len in zip(self.segments(), lengths.tolist()):
            if remaining <= seg_len:
                if seg_len == 0:
                    return segment.start
                return segment.point_at(remaining / seg_len)
            remaining -= seg_len
        return self._points[-1]

    def unify(self) -> "Polyline":
        """Drop points equal to their predecessor."""

        unified: List[Point] = []
        for point in self._points:
            if not unified or unified[-1] != point:
                unified.append(point)
        self._points = unified
        return self

    @debug_log_call(logger, name="Polyline.normalize")
    def normalize(
        self,
        source: Optional[Point] = None,
        target: Optional[Point] = None,
        min_angle: Angle = math.pi,
    ) -> "Polyline":
        """Remove bends whose interior angle is at least ``min_angle``.

        The interior angle at a point is ``pi`` minus the turn between its
        incoming and outgoing legs, so ``pi`` means collinear. The default
        threshold only drops exactly collinear points.

        ``source`` and ``target`` act as a virtual predecessor of the first
        point and a virtual successor of the last one; they are never inserted.
        Without them the end points are kept. Points are re-evaluated against
        their current neighbours after every removal and passes repeat until
        one of them removes nothing.
        """

        if len(self._points) < 2:
            return self

        chain = self._points
        first = 0 if source is not None else 1
        stop_offset = 0 if target is not None else 1
        passes = 0
        while True:
            passes += 1
            removed = self._normalize_pass(chain, first, stop_offset, source, target, min_angle)
            logger.debug("normalize pass %d removed %d point(s), %d left", passes, removed, len(chain))
            if not removed:
                break
        return self

    @staticmethod
    def _normalize_pass(
        chain: List[Point],
        first: int,
        stop_offset: int,
        source: Optional[Point],
        target: Optional[Point],
        min_angle: Angle,
    ) -> int:
        removed = 0
        i = first
        while i < len(chain) - stop_offset:
            prev = chain[i - 1] if i > 0 else source
            nxt = chain[i + 1] if i + 1 < len(chain) else target
            angle = interior_angle(prev.as_tuple(), chain[i].as_tuple(), nxt.as_tuple())
            if angle >= min_angle:
                del chain[i]
                removed += 1
            else:
                i += 1
        return removed


def polyline_from_coords(coords: Sequence[Sequence[Number]]) -> Polyline:
    """Build a polyline from ``(x, y)`` pairs, validating each pair."""

    return Polyline(Point.from_sequence(c) for c in coords)
