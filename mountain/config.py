"""Terrain configuration for heightfield generation."""

from __future__ import annotations

import math
import numbers
from typing import Any, Mapping

from mountain.exceptions import ConfigurationError

DEFAULT_PLANE_WIDTH = 10.0
DEFAULT_PLANE_HEIGHT = 5.0
DEFAULT_WIDTH_SEGMENTS = 20
DEFAULT_HEIGHT_SEGMENTS = 10
DEFAULT_MAX_HEIGHT = 2.0


def _check_number(name: str, value: Any) -> float:
    # numbers.Real covers numpy scalars; bool is an Integral and is refused
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ConfigurationError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ConfigurationError(f"{name} must be finite, got {value}")
    return float(value)


def _check_dimension(name: str, value: Any) -> float:
    value = _check_number(name, value)
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {value}")
    return value


def _check_segments(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")
    if value < 1:
        raise ConfigurationError(f"{name} must be at least 1, got {value}")
    return int(value)


class TerrainConfig:
    """Configuration for a rectangular heightfield.

    The plane spans ``[-plane_width/2, plane_width/2]`` in x and
    ``[-plane_height/2, plane_height/2]`` in y, subdivided into
    ``width_segments x height_segments`` cells. Elevations are drawn from
    ``[0, max_height]``.

    Args:
        plane_width: Extent of the plane along x.
        plane_height: Extent of the plane along y.
        width_segments: Number of cells along x.
        height_segments: Number of cells along y.
        max_height: Upper bound for random elevations.

    Raises:
        ConfigurationError: If any field is out of range.

    Example:
        >>> config = TerrainConfig(plane_width=4, plane_height=2,
        ...                        width_segments=4, height_segments=2)
        >>> config.cols, config.rows
        (5, 3)
        >>> config.perimeter_length
        12
    """

    FIELDS = (
        "plane_width",
        "plane_height",
        "width_segments",
        "height_segments",
        "max_height",
    )

    def __init__(
        self,
        plane_width: float = DEFAULT_PLANE_WIDTH,
        plane_height: float = DEFAULT_PLANE_HEIGHT,
        width_segments: int = DEFAULT_WIDTH_SEGMENTS,
        height_segments: int = DEFAULT_HEIGHT_SEGMENTS,
        max_height: float = DEFAULT_MAX_HEIGHT,
    ):
        self._plane_width = _check_dimension("plane_width", plane_width)
        self._plane_height = _check_dimension("plane_height", plane_height)
        self._width_segments = _check_segments("width_segments", width_segments)
        self._height_segments = _check_segments(
            "height_segments", height_segments
        )

        self._max_height = _check_number("max_height", max_height)
        if self._max_height < 0:
            raise ConfigurationError(
                f"max_height must be non-negative, got {max_height}"
            )

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> TerrainConfig:
        """Create configuration from a mapping of field names to values.

        Args:
            values: Mapping with any subset of the five configuration fields.
                Missing fields take their defaults.

        Returns:
            New TerrainConfig instance.

        Raises:
            ConfigurationError: If the mapping contains unknown keys.
        """
        unknown = set(values) - set(cls.FIELDS)
        if unknown:
            raise ConfigurationError(
                f"Unknown configuration fields: {sorted(unknown)}. "
                f"Supported: {list(cls.FIELDS)}"
            )
        return cls(**dict(values))

    def as_dict(self) -> dict[str, float | int]:
        """Return the five configuration fields as a dictionary."""
        return {name: getattr(self, name) for name in self.FIELDS}

    @property
    def plane_width(self) -> float:
        """Extent of the plane along x."""
        return self._plane_width

    @property
    def plane_height(self) -> float:
        """Extent of the plane along y."""
        return self._plane_height

    @property
    def width_segments(self) -> int:
        """Number of cells along x."""
        return self._width_segments

    @property
    def height_segments(self) -> int:
        """Number of cells along y."""
        return self._height_segments

    @property
    def max_height(self) -> float:
        """Upper bound for random elevations."""
        return self._max_height

    @property
    def cols(self) -> int:
        """Number of vertex columns."""
        return self._width_segments + 1

    @property
    def rows(self) -> int:
        """Number of vertex rows."""
        return self._height_segments + 1

    @property
    def n_vertices(self) -> int:
        return self.cols * self.rows

    @property
    def n_triangles(self) -> int:
        return 2 * self._width_segments * self._height_segments

    @property
    def perimeter_length(self) -> int:
        """Number of boundary vertices on the grid."""
        return 2 * self.cols + 2 * self.rows - 4

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TerrainConfig):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __hash__(self) -> int:
        return hash(tuple(self.as_dict().values()))

    def __repr__(self) -> str:
        return (
            f"TerrainConfig(plane_width={self._plane_width}, "
            f"plane_height={self._plane_height}, "
            f"width_segments={self._width_segments}, "
            f"height_segments={self._height_segments}, "
            f"max_height={self._max_height})"
        )
