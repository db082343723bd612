from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from .coordinates import Coordinates, EdgeCoordinates
from .geometry import Point, PointLike, PointPair
from .layout import Layout

logger = logging.getLogger(__name__)

# Edges 0..2 belong to the cell, 3..5 to the neighbours across them
OWNED_EDGES = 3


@dataclass(frozen=True)
class HexCell:
    """A single grid cell bound to its axial coordinate."""

    coord: Coordinates

    @classmethod
    def at(cls, c: Coordinates) -> "HexCell":
        return cls(c)

    @classmethod
    def from_pixel(cls, p: PointLike, layout: Layout) -> "HexCell":
        return cls(layout.coord_at(p))

    def neighbour(self, d: int) -> "HexCell":
        return HexCell(self.coord.neighbour(d))

    def center(self, layout: Layout) -> Point:
        return layout.center_of_hex(self.coord)

    def vertices(self, layout: Layout) -> List[Point]:
        return layout.vertices_of_hex(self.coord)

    def edge_towards(self, t: int, layout: Layout) -> Optional[PointPair]:
        """Return edge ``t`` if this cell owns it, else ``None``.

        Every edge is shared by two cells; only edges 0..2 are owned here so
        that walking all cells visits each edge once.
        """
        if 0 <= t < OWNED_EDGES:
            return layout.vertices_of_edge(EdgeCoordinates(self.coord, t))
        logger.debug("edge %d of %s belongs to a neighbouring cell", t, self.coord)
        return None

    def edges_vertices(self, layout: Layout) -> List[PointPair]:
        return layout.all_edges_of_hex(self.coord)
