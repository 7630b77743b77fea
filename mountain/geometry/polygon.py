"""Planar footprint of a perimeter loop."""

from __future__ import annotations

from typing import Sequence

import numpy as np
from shapely.geometry import Polygon as ShapelyPolygon

from mountain.exceptions import PolygonError


class Footprint:
    """Projection of a closed perimeter loop onto the z=0 plane.

    Wraps shapely.geometry.Polygon to check that the loop traces a simple
    ring and to report its orientation and enclosed area. Unlike a general
    domain polygon, the vertex order is kept as given: the orientation of
    the loop is part of what is being checked.

    Args:
        coords: Sequence of (x, y) or (x, y, z) points in loop order.
            Does not need to be closed (first point != last point); any z
            component is discarded.

    Raises:
        PolygonError: If the loop has fewer than three points or
            intersects itself.
    """

    def __init__(self, coords: Sequence[Sequence[float]]):
        xy = np.asarray(coords, dtype=float)
        if xy.ndim != 2 or xy.shape[1] < 2:
            raise PolygonError("coords must have shape (n, 2) or (n, 3)")
        if len(xy) < 3:
            raise PolygonError(
                f"Footprint needs at least 3 points, got {len(xy)}"
            )

        self._coords = [(float(x), float(y)) for x, y in xy[:, :2]]
        self._polygon = ShapelyPolygon(self._coords)

        # Collinear runs along grid edges are fine; crossings are not
        if not self._polygon.exterior.is_simple or not self._polygon.is_valid:
            raise PolygonError("Footprint loop has self-intersections")

    @property
    def coords(self) -> list[tuple[float, float]]:
        """Return loop coordinates as list of (x, y) tuples in loop order."""
        return list(self._coords)

    @property
    def coords_array(self) -> np.ndarray:
        """Return loop coordinates as numpy array of shape (n, 2)."""
        return np.array(self._coords)

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """Return bounding box as (xmin, ymin, xmax, ymax)."""
        return self._polygon.bounds

    @property
    def area(self) -> float:
        """Return enclosed area in coordinate units squared."""
        return self._polygon.area

    @property
    def is_clockwise(self) -> bool:
        """Return True if the loop runs clockwise seen from +z."""
        return not self._polygon.exterior.is_ccw

    @property
    def is_simple(self) -> bool:
        return self._polygon.exterior.is_simple

    @property
    def n_vertices(self) -> int:
        """Return number of loop vertices."""
        return len(self._coords)

    def __repr__(self) -> str:
        return (
            f"Footprint(n_vertices={self.n_vertices}, "
            f"bounds={self.bounds}, clockwise={self.is_clockwise})"
        )
