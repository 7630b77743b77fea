"""Mountain - closed heightfield solids and their measures.

Builds a randomized heightfield over a rectangular plane, closes it into a
watertight solid with vertical side walls along its perimeter, and measures
surface area, side area and enclosed volume.

Example:
    >>> from mountain import MountainBuilder, TerrainConfig
    >>> config = TerrainConfig(
    ...     plane_width=10,
    ...     plane_height=5,
    ...     width_segments=20,
    ...     height_segments=10,
    ...     max_height=2,
    ... )
    >>> mountain = MountainBuilder(config).set_seed(42).build()
    >>> print(mountain.report())
"""

from mountain.config import TerrainConfig
from mountain.exceptions import (
    ConfigurationError,
    MeshGenerationError,
    MountainError,
    PolygonError,
)
from mountain.geometry import Footprint, Point3
from mountain.measure import (
    TerrainMeasures,
    measure_terrain,
    prism_volume,
    triangle_area,
)
from mountain.mesh import (
    Grid,
    HeightfieldBuilder,
    Mountain,
    MountainBuilder,
    build_side_mesh,
    extract_perimeter,
)

__version__ = "0.1.0"

__all__ = [
    # Main API
    "MountainBuilder",
    "Mountain",
    "TerrainConfig",
    "Grid",
    "HeightfieldBuilder",
    "extract_perimeter",
    "build_side_mesh",
    "Footprint",
    "Point3",
    # Measures
    "TerrainMeasures",
    "measure_terrain",
    "triangle_area",
    "prism_volume",
    # Exceptions
    "MountainError",
    "ConfigurationError",
    "MeshGenerationError",
    "PolygonError",
]
