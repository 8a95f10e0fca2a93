from __future__ import annotations

from typing import Tuple, Union

Number = Union[int, float]
Angle = float
Coord = Tuple[Number, Number]


class GeometryError(ValueError):
    """Raised when geometry values cannot be built from the given input."""
