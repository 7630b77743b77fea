"""Mesh generation utilities."""

from mountain.mesh.builder import Mountain, MountainBuilder
from mountain.mesh.heightfield import Grid, HeightfieldBuilder, grid_triangles
from mountain.mesh.perimeter import BOUNDARY_RULES, classify_vertex, extract_perimeter
from mountain.mesh.side import SideMesh, build_side_mesh, side_triangles

__all__ = [
    "Mountain",
    "MountainBuilder",
    "Grid",
    "HeightfieldBuilder",
    "grid_triangles",
    "BOUNDARY_RULES",
    "classify_vertex",
    "extract_perimeter",
    "SideMesh",
    "build_side_mesh",
    "side_triangles",
]
