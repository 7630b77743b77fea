"""Tests for the MountainBuilder pipeline."""

import logging

import numpy as np
import pytest

from mountain import (
    ConfigurationError,
    MeshGenerationError,
    Mountain,
    MountainBuilder,
    MountainError,
    TerrainConfig,
)


def test_reference_build(reference_config):
    mountain = MountainBuilder(reference_config).set_seed(42).build()

    assert isinstance(mountain, Mountain)
    assert mountain.config == reference_config
    assert len(mountain.perimeter) == reference_config.perimeter_length
    assert mountain.side_mesh.n_triangles == 2 * len(mountain.perimeter)
    assert mountain.footprint.is_clockwise
    assert mountain.footprint.area == pytest.approx(50.0)


def test_default_config_used():
    mountain = MountainBuilder().set_seed(1).build()
    assert mountain.config == TerrainConfig()


def test_seeded_builds_are_identical(reference_config):
    a = MountainBuilder(reference_config).set_seed(3).build()
    b = MountainBuilder(reference_config).set_seed(3).build()

    np.testing.assert_array_equal(a.grid.vertices, b.grid.vertices)
    np.testing.assert_array_equal(a.side_mesh.vertices, b.side_mesh.vertices)
    assert a.measures.as_dict() == b.measures.as_dict()


def test_random_generator_injected(reference_config):
    rng = np.random.default_rng(8)
    expected = np.random.default_rng(8).uniform(0, 2, size=(11, 21))

    mountain = (
        MountainBuilder(reference_config).set_random_generator(rng).build()
    )
    np.testing.assert_array_equal(mountain.grid.elevations, expected)


def test_supplied_elevations(square_config, peak_elevations):
    mountain = MountainBuilder(square_config).set_elevations(peak_elevations).build()

    assert mountain.measures.volume == pytest.approx(1.0)
    assert mountain.perimeter == (0, 1, 2, 5, 8, 7, 6, 3)


def test_supplied_elevations_override_seed(square_config, peak_elevations):
    mountain = (
        MountainBuilder(square_config)
        .set_seed(5)
        .set_elevations(peak_elevations)
        .build()
    )
    np.testing.assert_array_equal(mountain.grid.elevations, peak_elevations)


def test_single_cell_grid():
    config = TerrainConfig(
        plane_width=1, plane_height=1, width_segments=1, height_segments=1
    )
    mountain = MountainBuilder(config).set_elevations([[1.0, 1.0], [1.0, 1.0]]).build()

    assert mountain.perimeter == (0, 1, 3, 2)
    assert mountain.measures.volume == pytest.approx(1.0)
    assert mountain.measures.side_area == pytest.approx(4.0)


def test_bad_elevations_surface_as_mountain_error(square_config):
    with pytest.raises(MeshGenerationError):
        MountainBuilder(square_config).set_elevations(np.zeros(4)).build()


def test_degenerate_config_rejected():
    with pytest.raises(ConfigurationError):
        TerrainConfig(width_segments=0)


def test_mesh_info(reference_config):
    builder = MountainBuilder(reference_config).set_seed(0)
    with pytest.raises(MountainError):
        builder.get_mesh_info()

    mountain = builder.build()
    info = builder.get_mesh_info()

    assert builder.get_mountain() is mountain
    assert info["n_vertices"] == 231
    assert info["n_triangles"] == 400
    assert info["perimeter_length"] == 60
    assert info["side_vertices"] == 120
    assert info["side_triangles"] == 120
    assert info["footprint_area"] == pytest.approx(50.0)
    assert info["width_segments"] == 20


def test_report_matches_measures(reference_config):
    mountain = MountainBuilder(reference_config).set_seed(4).build()
    report = mountain.report()

    assert report.splitlines()[0] == "Name: Mountain"
    assert f"Volume: {mountain.measures.volume:.2f} m³" in report


def test_build_logs_progress(reference_config, caplog):
    with caplog.at_level(logging.INFO, logger="mountain"):
        MountainBuilder(reference_config).set_seed(0).build().measures

    messages = [record.getMessage() for record in caplog.records]
    assert any(m.startswith("Building 20x10 heightfield") for m in messages)
    assert any(m.startswith("Measured terrain") for m in messages)
