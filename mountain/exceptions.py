"""Custom exceptions for the mountain package."""


class MountainError(Exception):
    """Base exception for mountain package."""

    pass


class ConfigurationError(MountainError, ValueError):
    """Invalid terrain configuration."""

    pass


class MeshGenerationError(MountainError):
    """Mesh generation failed."""

    pass


class PolygonError(MountainError):
    """Invalid footprint polygon geometry."""

    pass
