"""
Mountain Report Demo

This script builds the reference mountain and prints its measures, the
same numbers the original viewer showed in its info panel.

Usage:
    python mountain_report.py [seed]

The script will:
1. Build a 20x10 heightfield over a 10x5 plane with elevations in [0, 2]
2. Extract the perimeter loop and close the solid with side walls
3. Measure surface area, side area and volume
"""

import logging
import sys

from mountain import MountainBuilder, TerrainConfig
from mountain.logging_config import setup_logging


def main(seed=None):
    setup_logging(logging.INFO)

    # Reference parameters
    config = TerrainConfig(
        plane_width=10,
        plane_height=5,
        width_segments=20,
        height_segments=10,
        max_height=2,
    )

    builder = MountainBuilder(config)
    if seed is not None:
        builder.set_seed(seed)
    mountain = builder.build()

    info = mountain.get_mesh_info()
    print(f"\nMesh generated successfully:")
    print(f"  Surface vertices: {info['n_vertices']}")
    print(f"  Surface triangles: {info['n_triangles']}")
    print(f"  Perimeter vertices: {info['perimeter_length']}")
    print(f"  Side triangles: {info['side_triangles']}")
    print(f"  Footprint area: {info['footprint_area']:.2f} m²")

    print()
    print(mountain.report())

    return mountain


if __name__ == "__main__":
    main(int(sys.argv[1]) if len(sys.argv) > 1 else None)
