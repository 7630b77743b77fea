"""Tests for TerrainConfig."""

import math

import numpy as np
import pytest

from mountain import ConfigurationError, MountainError, TerrainConfig


def test_defaults_match_reference():
    config = TerrainConfig()
    assert config.as_dict() == {
        "plane_width": 10.0,
        "plane_height": 5.0,
        "width_segments": 20,
        "height_segments": 10,
        "max_height": 2.0,
    }


def test_derived_counts(reference_config):
    assert reference_config.cols == 21
    assert reference_config.rows == 11
    assert reference_config.n_vertices == 231
    assert reference_config.n_triangles == 400
    assert reference_config.perimeter_length == 2 * 21 + 2 * 11 - 4


@pytest.mark.parametrize(
    "field, value",
    [
        ("plane_width", 0),
        ("plane_width", -1.0),
        ("plane_height", math.inf),
        ("plane_height", math.nan),
        ("width_segments", 0),
        ("height_segments", -3),
        ("width_segments", 2.5),
        ("height_segments", True),
        ("max_height", -0.1),
        ("max_height", math.nan),
        ("max_height", "2"),
    ],
)
def test_invalid_values_rejected(field, value):
    with pytest.raises(ConfigurationError):
        TerrainConfig(**{field: value})


def test_configuration_error_is_value_error():
    with pytest.raises(ValueError):
        TerrainConfig(width_segments=0)
    assert issubclass(ConfigurationError, MountainError)


def test_zero_max_height_allowed():
    assert TerrainConfig(max_height=0).max_height == 0.0


def test_from_dict_fills_defaults():
    config = TerrainConfig.from_dict({"width_segments": 4, "max_height": 1})
    assert config.width_segments == 4
    assert config.max_height == 1.0
    assert config.plane_width == 10.0


def test_from_dict_rejects_unknown_keys():
    with pytest.raises(ConfigurationError, match="Unknown configuration fields"):
        TerrainConfig.from_dict({"depth": 3})


def test_equality_and_repr():
    a = TerrainConfig(width_segments=4)
    b = TerrainConfig.from_dict(a.as_dict())
    assert a == b
    assert hash(a) == hash(b)
    assert "width_segments=4" in repr(a)


def test_numpy_scalars_accepted():
    config = TerrainConfig(
        plane_width=np.float32(4.0),
        plane_height=np.float64(2.0),
        width_segments=np.int64(4),
        height_segments=np.int32(2),
        max_height=np.float32(1.5),
    )

    assert config.cols == 5
    assert config.rows == 3
    assert type(config.width_segments) is int
    assert type(config.plane_width) is float
    assert config.max_height == 1.5


def test_numpy_bool_rejected():
    with pytest.raises(ConfigurationError):
        TerrainConfig(width_segments=np.bool_(True))
