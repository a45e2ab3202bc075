import logging
import math
import warnings

import numpy as np
import pytest

from geopred import (
    GeometryInputError,
    PredicateConfig,
    is_point_in_ellipse,
    is_point_in_radius,
    is_point_in_rect_orientation,
    is_point_in_triangle,
    orientation,
    triangle_area,
)
from geopred.core import vectorized


def _query_points(seed=0, n=300):
    rng = np.random.default_rng(seed)
    pts = rng.uniform(-2.0, 2.0, size=(n, 2))
    # exact boundary hits for the shapes used below
    extra = np.array([[0.0, 0.0], [1.0, 1.0], [1.0, 0.0], [0.5, 0.5], [2.0, 0.0], [0.0, 1.0], [-1.0, -1.0]])
    return np.vstack([pts, extra])


def test_orientation_matches_scalar():
    pts = _query_points()
    p1, p2 = (-1.0, -1.0), (1.0, 1.0)
    got = vectorized.orientation_vectorized(p1, p2, pts)
    assert got.dtype == np.int8
    assert got.tolist() == [orientation(p1, p2, p) for p in pts]


@pytest.mark.parametrize('center,radius', [((0.0, 0.0), 2.0), ((0.5, -0.5), 1.0)])
def test_points_in_radius_matches_scalar(center, radius):
    pts = _query_points(1)
    got = vectorized.points_in_radius(center, radius, pts)
    assert got.tolist() == [is_point_in_radius(center, radius, p) for p in pts]
    assert 0 in got.tolist() or center != (0.0, 0.0)


def test_points_in_radius_3d():
    pts = np.array([[0.0, 0.0, 1.0], [0.0, 0.5, 0.5], [1.0, 1.0, 1.0]])
    assert vectorized.points_in_radius((0.0, 0.0, 0.0), 1.0, pts).tolist() == [0, 1, -1]
    with pytest.raises(GeometryInputError):
        vectorized.points_in_radius((0.0, 0.0), 1.0, pts)


@pytest.mark.parametrize('rotation', [0.0, 0.4, math.pi / 2])
def test_points_in_ellipse_matches_scalar(rotation):
    pts = _query_points(2)
    center, radii = (0.1, -0.2), (1.5, 0.7)
    got = vectorized.points_in_ellipse(center, radii, rotation, pts)
    assert got.tolist() == [is_point_in_ellipse(center, radii, rotation, p) for p in pts]


def test_points_in_triangle_matches_scalar():
    pts = _query_points(3)
    tri = ((0.0, 0.0), (1.0, 0.0), (0.0, 1.0))
    cfg = PredicateConfig(use_numba=False)
    got = vectorized.points_in_triangle(*tri, pts, config=cfg)
    assert got.tolist() == [is_point_in_triangle(*tri, p) for p in pts]
    assert set(got.tolist()) == {-1, 0, 1}


def test_points_in_triangle_empty():
    out = vectorized.points_in_triangle((0, 0), (1, 0), (0, 1), np.empty((0, 2)))
    assert out.shape == (0,)


def test_points_in_triangle_numba_matches_numpy():
    pytest.importorskip('numba')
    assert vectorized.HAS_NUMBA
    pts = _query_points(4, n=2000)
    tri = ((-1.0, -0.5), (1.5, 0.0), (0.0, 1.75))
    jit = vectorized.points_in_triangle(*tri, pts, config=PredicateConfig(numba_min_batch=0))
    ref = vectorized.points_in_triangle(*tri, pts, config=PredicateConfig(use_numba=False))
    np.testing.assert_array_equal(jit, ref)


@pytest.mark.parametrize('rotation', [0.0, 0.3, math.pi / 4])
def test_points_in_rect_matches_scalar(rotation):
    pts = _query_points(5)
    center, size = (0.0, 0.0), (2.0, 2.0)
    got = vectorized.points_in_rect_orientation(center, size, rotation, pts)
    assert got.tolist() == [is_point_in_rect_orientation(center, size, rotation, p) for p in pts]


def test_points_in_rect_axis_aligned_labels():
    pts = [(0.0, 0.0), (1.0, 1.0), (2.0, 2.0)]
    assert vectorized.points_in_rect_orientation((0.0, 0.0), (2.0, 2.0), 0.0, pts).tolist() == [1, 0, -1]


def test_triangles_areas():
    points = np.array([[0, 0], [1, 0], [1, 1], [0, 1], [2, 2]], dtype=float)
    tris = np.array([[0, 1, 2], [0, 2, 3], [0, 2, 4], [3, 2, 1]])
    got = vectorized.triangles_areas(points, tris)
    assert got.tolist() == [triangle_area(*points[t]) for t in tris]
    assert got.tolist() == [0.5, 0.5, 0.0, 0.5]
    assert vectorized.triangles_areas(points, np.empty((0, 3), dtype=int)).shape == (0,)
    with pytest.raises(GeometryInputError):
        vectorized.triangles_areas(points, np.array([[0, 1]]))


def test_points_in_ellipse_zero_radius():
    pts = np.array([[0.5, 0.0], [0.0, 0.0], [0.0, 0.5]])
    with warnings.catch_warnings(), np.errstate(all='raise'):
        warnings.simplefilter('error')
        got = vectorized.points_in_ellipse((0.0, 0.0), (0.0, 1.0), 0.0, pts)
    assert got.tolist() == [-1, -1, -1]
    assert got.tolist() == [is_point_in_ellipse((0.0, 0.0), (0.0, 1.0), 0.0, p) for p in pts]


@pytest.mark.parametrize('use_numba', [False, True])
def test_points_in_triangle_logs_zero_area_on_every_route(caplog, use_numba):
    if use_numba:
        pytest.importorskip('numba')
    caplog.set_level(logging.DEBUG, logger='geopred')
    cfg = PredicateConfig(use_numba=use_numba, numba_min_batch=0)
    vectorized.points_in_triangle((0.0, 0.0), (1.0, 1.0), (2.0, 2.0), [(5.0, 0.0), (1.0, 1.0)], config=cfg)
    assert any('zero-area triangle' in r.getMessage() for r in caplog.records)
