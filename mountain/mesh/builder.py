"""High-level MountainBuilder API for closed heightfield solids."""

from __future__ import annotations

import logging
import math

import numpy as np

from mountain.config import TerrainConfig
from mountain.exceptions import MeshGenerationError, MountainError
from mountain.geometry.polygon import Footprint
from mountain.measure import TerrainMeasures, measure_terrain
from mountain.mesh.heightfield import Grid, HeightfieldBuilder
from mountain.mesh.perimeter import extract_perimeter
from mountain.mesh.side import SideMesh, build_side_mesh

logger = logging.getLogger(__name__)


class Mountain:
    """A heightfield closed into a solid by its side skirt.

    Holds the top surface grid, the perimeter loop, the side mesh and the
    loop's planar footprint. Measures are computed on first access.

    Args:
        grid: Heightfield grid (top surface).
        perimeter: Ordered boundary loop of grid vertex numbers.
        side_mesh: Side skirt built from the loop.
        footprint: Planar footprint of the loop.
    """

    def __init__(
        self,
        grid: Grid,
        perimeter: tuple[int, ...],
        side_mesh: SideMesh,
        footprint: Footprint,
    ):
        self._grid = grid
        self._perimeter = perimeter
        self._side_mesh = side_mesh
        self._footprint = footprint
        self._measures: TerrainMeasures | None = None

    @property
    def config(self) -> TerrainConfig:
        """Return the terrain configuration."""
        return self._grid.config

    @property
    def grid(self) -> Grid:
        """Return the top surface grid."""
        return self._grid

    @property
    def perimeter(self) -> tuple[int, ...]:
        """Return the ordered boundary loop."""
        return self._perimeter

    @property
    def side_mesh(self) -> SideMesh:
        """Return the side skirt."""
        return self._side_mesh

    @property
    def footprint(self) -> Footprint:
        """Return the planar footprint of the boundary loop."""
        return self._footprint

    @property
    def measures(self) -> TerrainMeasures:
        """Return surface area, side area and volume."""
        if self._measures is None:
            self._measures = measure_terrain(self._grid, self._side_mesh)
        return self._measures

    def report(self, name: str = "Mountain") -> str:
        """Return the measures as display text."""
        return self.measures.report(name)

    def get_mesh_info(self) -> dict:
        """Return information about the built meshes.

        Returns:
            Dictionary with configuration and mesh statistics.
        """
        info = self.config.as_dict()
        info.update(
            {
                "n_vertices": self._grid.n_vertices,
                "n_triangles": self._grid.n_triangles,
                "perimeter_length": len(self._perimeter),
                "side_vertices": self._side_mesh.n_vertices,
                "side_triangles": self._side_mesh.n_triangles,
                "footprint_area": self._footprint.area,
            }
        )
        return info

    def __repr__(self) -> str:
        return f"Mountain({self._grid!r}, perimeter_length={len(self._perimeter)})"


class MountainBuilder:
    """High-level API for building a measured heightfield solid.

    Orchestrates the full workflow:
    1. Configure the plane and elevation source
    2. Build the heightfield grid
    3. Extract the perimeter loop
    4. Build the side skirt
    5. Check the loop footprint against the plane

    Args:
        config: Terrain configuration. Default: the reference configuration.

    Example:
        >>> from mountain import MountainBuilder, TerrainConfig
        >>> mountain = (
        ...     MountainBuilder(TerrainConfig(max_height=2))
        ...     .set_seed(7)
        ...     .build()
        ... )
        >>> print(mountain.report())
    """

    def __init__(self, config: TerrainConfig | None = None):
        self._config = config or TerrainConfig()

        # Elevation source (set via builder methods)
        self._rng: np.random.Generator | int | None = None
        self._elevations: np.ndarray | None = None

        self._mountain: Mountain | None = None

    @property
    def config(self) -> TerrainConfig:
        """Return the terrain configuration."""
        return self._config

    def set_seed(self, seed: int) -> MountainBuilder:
        """Seed the random elevation source.

        Args:
            seed: Integer seed for ``numpy.random.default_rng``.

        Returns:
            Self for method chaining.
        """
        self._rng = seed
        return self

    def set_random_generator(self, rng: np.random.Generator) -> MountainBuilder:
        """Use the given generator for random elevations.

        Returns:
            Self for method chaining.
        """
        self._rng = rng
        return self

    def set_elevations(self, elevations: np.ndarray) -> MountainBuilder:
        """Use supplied elevations instead of random ones.

        Args:
            elevations: Elevation per vertex, shape (rows, cols) or flat.

        Returns:
            Self for method chaining.
        """
        self._elevations = np.asarray(elevations, dtype=float)
        return self

    def _build_grid(self) -> Grid:
        heightfield = HeightfieldBuilder(self._config, rng=self._rng)
        if self._elevations is not None:
            return heightfield.build_from_elevations(self._elevations)
        return heightfield.build()

    def build(self) -> Mountain:
        """Build the heightfield, its perimeter and its side skirt.

        Returns:
            Mountain holding the meshes.

        Raises:
            ConfigurationError: If the grid has fewer than 2x2 vertices.
            MeshGenerationError: If any stage produces inconsistent geometry.
        """
        config = self._config
        logger.info(
            f"Building {config.width_segments}x{config.height_segments} "
            f"heightfield over {config.plane_width}x{config.plane_height} plane"
        )

        # Step 1: Heightfield
        grid = self._build_grid()

        # Step 2: Boundary loop
        perimeter = extract_perimeter(grid.cols, grid.rows, grid.n_vertices)
        if len(perimeter) != config.perimeter_length:
            raise MeshGenerationError(
                f"Perimeter has {len(perimeter)} vertices, "
                f"expected {config.perimeter_length}"
            )

        # Step 3: Side skirt
        side_mesh = build_side_mesh(grid.vertices, perimeter)

        # Step 4: The loop must enclose the whole plane
        footprint = Footprint(grid.vertices[list(perimeter)])
        expected_area = config.plane_width * config.plane_height
        if not math.isclose(footprint.area, expected_area, rel_tol=1e-9):
            raise MeshGenerationError(
                f"Perimeter encloses {footprint.area}, "
                f"expected {expected_area}"
            )

        self._mountain = Mountain(grid, perimeter, side_mesh, footprint)
        logger.info(
            f"Built mountain: {grid.n_vertices} vertices, "
            f"{grid.n_triangles} surface triangles, "
            f"{side_mesh.n_triangles} side triangles"
        )
        return self._mountain

    def get_mountain(self) -> Mountain | None:
        """Return the most recently built Mountain, or None."""
        return self._mountain

    def get_mesh_info(self) -> dict:
        """Return information about the built mountain.

        Raises:
            MountainError: If build() has not been called.
        """
        if self._mountain is None:
            raise MountainError("Mountain has not been built yet. Call build() first.")
        return self._mountain.get_mesh_info()
