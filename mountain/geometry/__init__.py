"""Geometric primitives."""

from mountain.geometry.point import Point3
from mountain.geometry.polygon import Footprint

__all__ = ["Point3", "Footprint"]
