"""Geometry kernel for graph-drawing edge routes.

Points, infinite lines and polylines, with polyline normalization and line
intersection classification.
"""

from .config import GeometryConfig, get_geometry_config, set_geometry_config
from .line import IntersectionType, Line
from .point import Point
from .polyline import Polyline, polyline_from_coords
from .segment import Segment
from .types import Angle, Coord, GeometryError, Number

__all__ = [
    'Angle',
    'Coord',
    'GeometryConfig',
    'GeometryError',
    'IntersectionType',
    'Line',
    'Number',
    'Point',
    'Polyline',
    'Segment',
    'get_geometry_config',
    'polyline_from_coords',
    'set_geometry_config',
]
__version__ = '0.1.0'
