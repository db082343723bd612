# hexkernel/__init__.py
# Hex grid coordinates, geometry primitives and pixel layouts

from .config import POINT_EPSILON, LINE_NUDGE, DIRECTION_COUNT
from .geometry import SQRT3, Mat2, Point, PointPair, as_point
from .coordinates import (
    Coordinates, EdgeCoordinates, DIRECTIONS, InvalidDirectionError, round_many,
)
from .layout import Orientation, POINTY_TOP, FLAT_TOP, Layout, BoundingBox
from .hexcell import HexCell

__all__ = [
    "POINT_EPSILON", "LINE_NUDGE", "DIRECTION_COUNT",
    "SQRT3", "Mat2", "Point", "PointPair", "as_point",
    "Coordinates", "EdgeCoordinates", "DIRECTIONS", "InvalidDirectionError", "round_many",
    "Orientation", "POINTY_TOP", "FLAT_TOP", "Layout", "BoundingBox",
    "HexCell",
]
