"""Example: simplify an edge route and classify crossings of its legs."""

import logging
import math

from routegeom import IntersectionType, Point, Polyline

logger = logging.getLogger(__name__)

ROUTE = [(1, 1), (2, 2), (3, 3), (3, 4), (4, 4), (4, 6), (5, 5), (5, 6), (6, 7), (7, 7), (8, 7), (9, 7)]
SOURCE = Point(0, 0)
TARGET = Point(9, 8)


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(name)s:%(message)s")

    for min_angle in (math.pi, 0.75 * math.pi, 0.5 * math.pi):
        route = Polyline(Point(x, y) for x, y in ROUTE)
        route.normalize(SOURCE, TARGET, min_angle)
        logger.info("min_angle=%.3f kept %d of %d bends", min_angle, len(route), len(ROUTE))
        print(f"min_angle={min_angle:.3f}: {[p.as_tuple() for p in route]}")

    route = Polyline(Point(x, y) for x, y in ROUTE).normalize()
    legs = route.segments()
    for i, first in enumerate(legs):
        for second in legs[i + 2:]:
            kind, point = first.intersect(second)
            if kind is IntersectionType.POINT:
                print(f"{first} x {second}: ({point.x:.3f}, {point.y:.3f})")
            else:
                print(f"{first} x {second}: {kind.value}")


if __name__ == "__main__":
    main()
