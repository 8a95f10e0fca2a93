"""Configuration for tolerant geometry helpers."""

from __future__ import annotations

import copy
from dataclasses import dataclass


@dataclass
class GeometryConfig:
    """Tolerances used by approximate comparisons.

    Exact algorithms (line intersection, polyline normalization) ignore it.
    """

    epsilon: float = 1e-6


_GEOMETRY_CONFIG = GeometryConfig()


def get_geometry_config() -> GeometryConfig:
    return copy.deepcopy(_GEOMETRY_CONFIG)


def set_geometry_config(config: GeometryConfig) -> None:
    global _GEOMETRY_CONFIG
    _GEOMETRY_CONFIG = copy.deepcopy(config)
