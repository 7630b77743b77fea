"""Surface area and volume of indexed triangle meshes.

Areas come from the cross product of two triangle edges. Volume treats each
surface triangle as the top face of a right prism standing on its z=0
footprint; for a piecewise-linear heightfield the prisms tile the solid
exactly, so their sum is the volume between the surface and z=0.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

import numpy as np

from mountain.exceptions import MeshGenerationError
from mountain.geometry.point import Point3

if TYPE_CHECKING:
    from mountain.mesh.heightfield import Grid
    from mountain.mesh.side import SideMesh

logger = logging.getLogger(__name__)


def triangle_area(
    a: Sequence[float],
    b: Sequence[float],
    c: Sequence[float],
) -> float:
    """Return the area of triangle ABC.

    Half the magnitude of ``(B - A) x (C - A)``. Never negative; zero for
    collinear points.

    Example:
        >>> triangle_area((0, 0, 0), (1, 0, 0), (0, 1, 0))
        0.5
    """
    a = np.asarray(a, dtype=float)
    normal = np.cross(np.asarray(b, dtype=float) - a, np.asarray(c, dtype=float) - a)
    return 0.5 * float(np.linalg.norm(normal))


def prism_volume(
    a: Sequence[float],
    b: Sequence[float],
    c: Sequence[float],
) -> float:
    """Return the volume under triangle ABC down to z=0.

    The area of the triangle flattened onto z=0 times the mean height of
    its corners.

    Example:
        >>> prism_volume((0, 0, 2), (1, 0, 2), (0, 1, 2))
        1.0
    """
    a, b, c = Point3(*a), Point3(*b), Point3(*c)
    area = triangle_area(a.flattened(), b.flattened(), c.flattened())
    return (a.z + b.z + c.z) / 3 * area


def _corners(
    vertices: np.ndarray,
    triangles: np.ndarray,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    vertices = np.asarray(vertices, dtype=float)
    triangles = np.asarray(triangles)

    if vertices.ndim != 2 or vertices.shape[1] != 3:
        raise MeshGenerationError("vertices must have shape (n, 3)")
    if triangles.ndim != 2 or triangles.shape[1] != 3:
        raise MeshGenerationError("triangles must have shape (m, 3)")
    if triangles.size and (
        triangles.min() < 0 or triangles.max() >= len(vertices)
    ):
        raise MeshGenerationError(
            f"triangles reference vertices outside [0, {len(vertices)})"
        )

    return (
        vertices[triangles[:, 0]],
        vertices[triangles[:, 1]],
        vertices[triangles[:, 2]],
    )


def triangle_areas(vertices: np.ndarray, triangles: np.ndarray) -> np.ndarray:
    """Return the area of every triangle of an indexed mesh.

    Args:
        vertices: Vertex positions, shape (n, 3).
        triangles: Triangle index buffer, shape (m, 3).

    Returns:
        Array of shape (m,).

    Raises:
        MeshGenerationError: If the buffers are mis-shaped or inconsistent.
    """
    a, b, c = _corners(vertices, triangles)
    return 0.5 * np.linalg.norm(np.cross(b - a, c - a), axis=1)


def prism_volumes(vertices: np.ndarray, triangles: np.ndarray) -> np.ndarray:
    """Return the prism volume under every triangle of an indexed mesh.

    Args:
        vertices: Vertex positions, shape (n, 3).
        triangles: Triangle index buffer, shape (m, 3).

    Returns:
        Array of shape (m,).
    """
    a, b, c = _corners(vertices, triangles)
    flat_a, flat_b, flat_c = a.copy(), b.copy(), c.copy()
    for corner in (flat_a, flat_b, flat_c):
        corner[:, 2] = 0.0
    base = 0.5 * np.linalg.norm(np.cross(flat_b - flat_a, flat_c - flat_a), axis=1)
    return (a[:, 2] + b[:, 2] + c[:, 2]) / 3 * base


def mesh_area(vertices: np.ndarray, triangles: np.ndarray) -> float:
    """Return the total area of an indexed triangle mesh."""
    return float(triangle_areas(vertices, triangles).sum())


def mesh_volume(vertices: np.ndarray, triangles: np.ndarray) -> float:
    """Return the total prism volume under an indexed triangle mesh."""
    return float(prism_volumes(vertices, triangles).sum())


class TerrainMeasures:
    """Area and volume totals of a closed heightfield solid.

    Args:
        surface_area: Area of the heightfield surface.
        side_area: Area of the side skirt.
        volume: Volume between the surface and z=0.
    """

    def __init__(self, surface_area: float, side_area: float, volume: float):
        self.surface_area = float(surface_area)
        self.side_area = float(side_area)
        self.volume = float(volume)

    @property
    def full_area(self) -> float:
        """Surface area plus side area."""
        return self.surface_area + self.side_area

    def as_dict(self) -> dict[str, float]:
        return {
            "volume": self.volume,
            "surface_area": self.surface_area,
            "side_area": self.side_area,
            "full_area": self.full_area,
        }

    def report(self, name: str = "Mountain") -> str:
        """Return the measures as display text, two decimals each."""
        return "\n".join(
            [
                f"Name: {name}",
                f"Volume: {self.volume:.2f} m³",
                f"Area (surface): {self.surface_area:.2f} m²",
                f"Area (side): {self.side_area:.2f} m²",
                f"Area (full): {self.full_area:.2f} m²",
            ]
        )

    def __repr__(self) -> str:
        return (
            f"TerrainMeasures(surface_area={self.surface_area:.4f}, "
            f"side_area={self.side_area:.4f}, volume={self.volume:.4f})"
        )


def measure_terrain(grid: Grid, side_mesh: SideMesh) -> TerrainMeasures:
    """Measure a heightfield and its side skirt.

    Surface area and volume come from the grid's triangles, side area from
    the skirt's. The skirt adds no volume: its walls are vertical.

    Args:
        grid: Heightfield grid.
        side_mesh: Side skirt built from the grid's perimeter.

    Returns:
        TerrainMeasures with the totals.
    """
    measures = TerrainMeasures(
        surface_area=mesh_area(grid.vertices, grid.triangles),
        side_area=mesh_area(side_mesh.vertices, side_mesh.triangles),
        volume=mesh_volume(grid.vertices, grid.triangles),
    )
    logger.info(
        f"Measured terrain: volume={measures.volume:.2f}, "
        f"surface={measures.surface_area:.2f}, side={measures.side_area:.2f}"
    )
    return measures
