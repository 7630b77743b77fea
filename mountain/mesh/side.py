"""Vertical side walls closing a heightfield down to z=0."""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from mountain.exceptions import MeshGenerationError

logger = logging.getLogger(__name__)


def side_triangles(loop_length: int) -> np.ndarray:
    """Return the triangle index buffer of a closed side ribbon.

    Vertices are interleaved as ``[top_0, bottom_0, top_1, bottom_1, ...]``
    so pair ``k`` is ``(2k, 2k + 1)``. Quad ``k`` joins pair ``k`` to pair
    ``(k + 1) % loop_length`` with the triangles
    ``(top_k, top_k+1, bottom_k+1)`` and ``(top_k, bottom_k+1, bottom_k)``.

    Args:
        loop_length: Number of perimeter vertices.

    Returns:
        Integer array of shape (2 * loop_length, 3).
    """
    k = np.arange(loop_length)
    top = 2 * k
    bottom = top + 1
    next_top = 2 * ((k + 1) % loop_length)
    next_bottom = next_top + 1

    triangles = np.empty((2 * loop_length, 3), dtype=np.int64)
    triangles[0::2] = np.column_stack([top, next_top, next_bottom])
    triangles[1::2] = np.column_stack([top, next_bottom, bottom])
    return triangles


class SideMesh:
    """Closed vertical skirt between a perimeter loop and its z=0 shadow.

    Args:
        vertices: Interleaved top/bottom vertex positions, shape (2L, 3).
        triangles: Triangle index buffer, shape (2L, 3).
    """

    def __init__(self, vertices: np.ndarray, triangles: np.ndarray):
        vertices = np.array(vertices, dtype=float)
        triangles = np.array(triangles, dtype=np.int64)
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

        vertices.setflags(write=False)
        triangles.setflags(write=False)
        self._vertices = vertices
        self._triangles = triangles

    @property
    def vertices(self) -> np.ndarray:
        """Read-only vertex positions, shape (2L, 3)."""
        return self._vertices

    @property
    def triangles(self) -> np.ndarray:
        """Read-only triangle index buffer, shape (2L, 3)."""
        return self._triangles

    @property
    def n_vertices(self) -> int:
        return len(self._vertices)

    @property
    def n_triangles(self) -> int:
        return len(self._triangles)

    @property
    def top_vertices(self) -> np.ndarray:
        """Top edge of the skirt, one vertex per perimeter entry."""
        return self._vertices[0::2]

    @property
    def bottom_vertices(self) -> np.ndarray:
        """Bottom edge of the skirt at z=0, one vertex per perimeter entry."""
        return self._vertices[1::2]

    def __repr__(self) -> str:
        return f"SideMesh(n_vertices={self.n_vertices}, n_triangles={self.n_triangles})"


def build_side_mesh(
    grid_vertices: np.ndarray,
    perimeter: Sequence[int],
) -> SideMesh:
    """Build the side skirt for a perimeter loop.

    For each loop entry a top copy of the grid vertex and a bottom copy at
    z=0 are emitted, interleaved, and stitched into a closed ring of quads.

    Args:
        grid_vertices: Grid vertex positions, shape (n, 3).
        perimeter: Ordered loop of grid vertex numbers.

    Returns:
        SideMesh with ``2 * len(perimeter)`` vertices and triangles.

    Raises:
        MeshGenerationError: If the loop is shorter than 3 or references
            vertices outside the grid.
    """
    grid_vertices = np.asarray(grid_vertices, dtype=float)
    loop = np.asarray(perimeter, dtype=np.int64)

    if loop.ndim != 1 or len(loop) < 3:
        raise MeshGenerationError(
            f"Perimeter loop needs at least 3 vertices, got {len(loop)}"
        )
    if loop.min() < 0 or loop.max() >= len(grid_vertices):
        raise MeshGenerationError(
            f"Perimeter references vertices outside [0, {len(grid_vertices)})"
        )

    top = grid_vertices[loop]
    bottom = top.copy()
    bottom[:, 2] = 0.0

    vertices = np.empty((2 * len(loop), 3), dtype=float)
    vertices[0::2] = top
    vertices[1::2] = bottom

    side = SideMesh(vertices, side_triangles(len(loop)))
    logger.debug(f"Built side mesh: {side.n_vertices} vertices, {side.n_triangles} triangles")
    return side
