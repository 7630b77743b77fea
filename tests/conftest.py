"""Shared fixtures for mountain tests."""

import numpy as np
import pytest

from mountain import TerrainConfig
from mountain.mesh.heightfield import HeightfieldBuilder


@pytest.fixture
def reference_config():
    """The 20x10 over 10x5 configuration of the original viewer."""
    return TerrainConfig(
        plane_width=10,
        plane_height=5,
        width_segments=20,
        height_segments=10,
        max_height=2,
    )


@pytest.fixture
def square_config():
    """A 2x2 cell grid over a 2x2 plane; lattice spacing is 1."""
    return TerrainConfig(
        plane_width=2,
        plane_height=2,
        width_segments=2,
        height_segments=2,
        max_height=5,
    )


@pytest.fixture
def peak_elevations():
    """Zero everywhere except a unit peak at the centre vertex."""
    z = np.zeros((3, 3))
    z[1, 1] = 1.0
    return z


@pytest.fixture
def peak_grid(square_config, peak_elevations):
    return HeightfieldBuilder(square_config).build_from_elevations(peak_elevations)
