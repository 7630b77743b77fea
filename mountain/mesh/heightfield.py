"""Heightfield grid construction."""

from __future__ import annotations

import logging
from typing import Iterator

import numpy as np

from mountain.config import TerrainConfig
from mountain.exceptions import MeshGenerationError
from mountain.geometry.point import Point3

logger = logging.getLogger(__name__)

def lattice_xy(config: TerrainConfig) -> np.ndarray:
    """Return the planar (x, y) lattice in row-major order, shape (n, 2)."""
    x = np.linspace(-config.plane_width / 2, config.plane_width / 2, config.cols)
    y = np.linspace(
        config.plane_height / 2, -config.plane_height / 2, config.rows
    )
    xx, yy = np.meshgrid(x, y)
    return np.column_stack([xx.ravel(), yy.ravel()])

def grid_triangles(cols: int, rows: int) -> np.ndarray:
    """Return the triangle index buffer of a row-major vertex grid.

    Each cell with top-left vertex ``a`` contributes the triangles
    ``(a, b, d)`` and ``(b, c, d)`` where ``b`` is below ``a``, ``d`` right
    of ``a`` and ``c`` diagonally opposite. With row 0 at the top of the
    plane both triangles face +z.

    Args:
        cols: Number of vertex columns.
        rows: Number of vertex rows.

    Returns:
        Integer array of shape (2 * (cols - 1) * (rows - 1), 3).
    """
    r, c = np.meshgrid(np.arange(rows - 1), np.arange(cols - 1), indexing="ij")
    a = (r * cols + c).ravel()
    b = a + cols
    d = a + 1
    cc = b + 1

    triangles = np.empty((2 * len(a), 3), dtype=np.int64)
    triangles[0::2] = np.column_stack([a, b, d])
    triangles[1::2] = np.column_stack([b, cc, d])
    return triangles

class Grid:
    """Immutable rectangular heightfield.

    Vertices are numbered row-major. Row 0 lies at ``y = +plane_height/2``
    and column 0 at ``x = -plane_width/2``; only the z coordinate varies
    from the flat lattice. All arrays exposed by the grid are read-only.

    Args:
        config: Terrain configuration defining the lattice.
        elevations: Elevation per vertex, shape (rows, cols) or (rows * cols,).

    Raises:
        MeshGenerationError: If the elevations do not match the lattice or
            contain NaN, infinite or negative values.
    """

    def __init__(self, config: TerrainConfig, elevations: np.ndarray):
        self._config = config
        rows, cols = config.rows, config.cols

        z = np.array(elevations, dtype=float)
        if z.size != rows * cols or z.ndim not in (1, 2):
            raise MeshGenerationError(
                f"elevations must have shape ({rows}, {cols}), "
                f"got {np.shape(elevations)}"
            )
        if z.ndim == 2 and z.shape != (rows, cols):
            raise MeshGenerationError(
                f"elevations must have shape ({rows}, {cols}), got {z.shape}"
            )
        if not np.all(np.isfinite(z)):
            raise MeshGenerationError("elevations contain NaN or infinite values")
        if np.any(z < 0):
            raise MeshGenerationError("elevations must be non-negative")

        vertices = np.column_stack([lattice_xy(config), z.ravel()])
        vertices.setflags(write=False)
        self._vertices = vertices

        z = z.reshape(rows, cols)
        z.setflags(write=False)
        self._elevations = z

        triangles = grid_triangles(cols, rows)
        triangles.setflags(write=False)
        self._triangles = triangles

    @property
    def config(self) -> TerrainConfig:
        """Return the terrain configuration."""
        return self._config

    @property
    def cols(self) -> int:
        return self._config.cols

    @property
    def rows(self) -> int:
        return self._config.rows

    @property
    def n_vertices(self) -> int:
        """Number of grid vertices."""
        return len(self._vertices)

    @property
    def n_triangles(self) -> int:
        """Number of surface triangles."""
        return len(self._triangles)

    @property
    def vertices(self) -> np.ndarray:
        """Read-only vertex positions, shape (n_vertices, 3)."""
        return self._vertices

    @property
    def triangles(self) -> np.ndarray:
        """Read-only triangle index buffer, shape (n_triangles, 3)."""
        return self._triangles

    @property
    def elevations(self) -> np.ndarray:
        """Read-only elevations, shape (rows, cols)."""
        return self._elevations

    def vertex_number(self, row: int, col: int) -> int:
        """Return the row-major vertex number at (row, col)."""
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(
                f"({row}, {col}) is outside a {self.rows}x{self.cols} grid"
            )
        return row * self.cols + col

    def point(self, row: int, col: int) -> Point3:
        """Return the vertex at (row, col) as a Point3."""
        return self.vertex(self.vertex_number(row, col))

    def vertex(self, number: int) -> Point3:
        """Return the vertex with the given row-major number as a Point3."""
        x, y, z = self._vertices[number]
        return Point3(float(x), float(y), float(z))

    def iter_triangles(self) -> Iterator[tuple[Point3, Point3, Point3]]:
        """Yield each surface triangle as three Point3 corners."""
        for i, j, k in self._triangles:
            yield self.vertex(i), self.vertex(j), self.vertex(k)

    def __repr__(self) -> str:
        return (
            f"Grid(rows={self.rows}, cols={self.cols}, "
            f"max_elevation={float(self._vertices[:, 2].max()):.2f})"
        )

class HeightfieldBuilder:
    """Builds grids with random, supplied or interpolated elevations.

    Args:
        config: Terrain configuration. Default: the reference configuration.
        rng: Random source for elevation sampling. Either a
            ``numpy.random.Generator`` or an integer seed. If None, a fresh
            unseeded generator is used.

    Example:
        >>> builder = HeightfieldBuilder(TerrainConfig(), rng=42)
        >>> grid = builder.build()
        >>> grid.point(0, 0).x
        -5.0
    """

    def __init__(
        self,
        config: TerrainConfig | None = None,
        rng: np.random.Generator | int | None = None,
    ):
        self._config = config or TerrainConfig()
        if isinstance(rng, np.random.Generator):
            self._rng = rng
        else:
            self._rng = np.random.default_rng(rng)

    @property
    def config(self) -> TerrainConfig:
        """Return the terrain configuration."""
        return self._config

    def build(self) -> Grid:
        """Build a grid with elevations drawn uniformly from [0, max_height].

        Returns:
            New Grid instance.
        """
        config = self._config
        elevations = self._rng.uniform(
            0.0, config.max_height, size=(config.rows, config.cols)
        )
        logger.debug(
            f"Sampled {elevations.size} random elevations in "
            f"[0, {config.max_height}]"
        )
        return Grid(config, elevations)

    def build_from_elevations(self, elevations: np.ndarray) -> Grid:
        """Build a grid from supplied elevations.

        Args:
            elevations: Elevation per vertex, shape (rows, cols) or flat.

        Returns:
            New Grid instance.
        """
        return Grid(self._config, elevations)

