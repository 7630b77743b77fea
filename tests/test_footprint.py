"""Tests for the perimeter footprint polygon."""

import pytest

from mountain import Footprint, PolygonError


def test_clockwise_square():
    footprint = Footprint([(0, 1), (1, 1), (1, 0), (0, 0)])

    assert footprint.is_clockwise
    assert footprint.is_simple
    assert footprint.area == pytest.approx(1.0)
    assert footprint.bounds == (0.0, 0.0, 1.0, 1.0)
    assert footprint.n_vertices == 4


def test_counter_clockwise_order_kept():
    coords = [(0, 0), (1, 0), (1, 1), (0, 1)]
    footprint = Footprint(coords)

    assert not footprint.is_clockwise
    assert footprint.coords == [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]


def test_z_component_discarded():
    footprint = Footprint([(0, 0, 5), (2, 0, 1), (2, 2, 3), (0, 2, 0)])
    assert footprint.coords_array.shape == (4, 2)
    assert footprint.area == pytest.approx(4.0)


def test_collinear_runs_allowed():
    footprint = Footprint([(0, 1), (1, 1), (2, 1), (2, 0), (1, 0), (0, 0)])
    assert footprint.area == pytest.approx(2.0)


def test_self_intersection_rejected():
    with pytest.raises(PolygonError):
        Footprint([(0, 0), (1, 1), (1, 0), (0, 1)])


def test_too_few_points_rejected():
    with pytest.raises(PolygonError):
        Footprint([(0, 0), (1, 1)])
