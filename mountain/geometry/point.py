"""Typed 3D point."""

from __future__ import annotations

from typing import NamedTuple


class Point3(NamedTuple):
    """A point in 3D space with named coordinates."""

    x: float
    y: float
    z: float

    def flattened(self) -> Point3:
        """Return the vertical projection of this point onto z=0."""
        return Point3(self.x, self.y, 0.0)
