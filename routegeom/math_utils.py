from __future__ import annotations

import math
from typing import Tuple

from .types import Angle, Number

Vec = Tuple[Number, Number]


def _vec2(a: Vec, b: Vec) -> Tuple[float, float]:
    return float(b[0]) - float(a[0]), float(b[1]) - float(a[1])


def _dot2(a: Vec, b: Vec) -> float:
    return float(a[0]) * float(b[0]) + float(a[1]) * float(b[1])


def _cross2(a: Vec, b: Vec) -> float:
    return float(a[0]) * float(b[1]) - float(a[1]) * float(b[0])


def _norm2(v: Vec) -> float:
    return math.hypot(float(v[0]), float(v[1]))


def _is_zero(v: Vec) -> bool:
    return v[0] == 0 and v[1] == 0


def ray_angle(u: Vec, v: Vec) -> Angle:
    """Unsigned angle between direction vectors ``u`` and ``v`` in ``[0, pi]``.

    ``atan2(|u x v|, u . v)`` agrees with ``acos`` of the normalised dot product
    but is exact for parallel directions, where ``acos`` drifts off zero.
    Returns ``0.0`` when either vector has zero length.
    """

    if _is_zero(u) or _is_zero(v):
        return 0.0
    return math.atan2(abs(_cross2(u, v)), _dot2(u, v))


def bend_angle(prev: Vec, at: Vec, nxt: Vec) -> Angle:
    """Turn at ``at`` when walking ``prev -> at -> nxt``; ``0`` is straight."""

    return ray_angle(_vec2(prev, at), _vec2(at, nxt))


def interior_angle(prev: Vec, at: Vec, nxt: Vec) -> Angle:
    """``pi`` minus the bend angle; ``pi`` for collinear or zero-length legs."""

    return math.pi - bend_angle(prev, at, nxt)


__all__ = [
    "_cross2",
    "_dot2",
    "_is_zero",
    "_norm2",
    "_vec2",
    "bend_angle",
    "interior_angle",
    "ray_angle",
]
