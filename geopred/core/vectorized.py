"""Batch versions of the hot predicates over arrays of query points.

Each function evaluates the same arithmetic expression as its scalar sibling
in ``predicates``/``containment``/``measures``, element-wise, so the labels
match the scalar results exactly (including the 0 boundary). Labels are
returned as ``int8`` arrays in {-1, 0, +1}.
"""
from __future__ import annotations

import math

import numpy as np

from .config import DEFAULT_CONFIG
from .containment import rect_corners
from .exceptions import GeometryInputError
from .helpers import as_point, as_points
from .logging_utils import get_logger

logger = get_logger('geopred.vectorized')

# numba is optional (``pip install geopred[jit]``); the numpy path below is complete on its own
try:
	import numba
	HAS_NUMBA = True
except (ImportError, AttributeError):
	# AttributeError can occur with incompatible numpy/numba versions
	HAS_NUMBA = False

__all__ = [
	'HAS_NUMBA', 'orientation_vectorized', 'points_in_radius', 'points_in_ellipse',
	'points_in_triangle', 'points_in_rect_orientation', 'triangles_areas',
]

# ============================================================================
# NUMBA KERNELS
# ============================================================================
# No fastmath: reassociation or FMA contraction would break bit-for-bit
# agreement with the scalar predicates. error_model="numpy" keeps IEEE
# division by zero (inf/nan) instead of raising ZeroDivisionError.

if HAS_NUMBA:
	@numba.njit(cache=True, error_model="numpy")
	def _points_in_triangle_numba(p1, p2, p3, pts):
		"""Numba barycentric classification of an (N,2) array."""
		n = pts.shape[0]
		out = np.empty(n, dtype=np.int8)
		den = (p2[1] - p3[1]) * (p1[0] - p3[0]) + (p3[0] - p2[0]) * (p1[1] - p3[1])
		for i in range(n):
			x = pts[i, 0]
			y = pts[i, 1]
			a = ((p2[1] - p3[1]) * (x - p3[0]) + (p3[0] - p2[0]) * (y - p3[1])) / den
			b = ((p3[1] - p1[1]) * (x - p3[0]) + (p1[0] - p3[0]) * (y - p3[1])) / den
			if a < 0 or b < 0:
				out[i] = -1
			elif a + b > 1:
				out[i] = -1
			elif a * b == 0:
				out[i] = 0
			else:
				out[i] = 1
		return out

# ============================================================================
# PUBLIC API FUNCTIONS (Auto-dispatch to Numba if available)
# ============================================================================


def _sign3(val):
	# exact zero stays 0, NaN goes to -1 like helpers.sign_of
	return np.where(val > 0, 1, np.where(val == 0, 0, -1)).astype(np.int8)


def orientation_vectorized(p1, p2, points):
	"""Orientation of each row of ``points`` against the directed line p1->p2.

	p1, p2 : point-like (2,)
	points : (N,2) array-like
	Returns (N,) int8 array of -1/0/+1.
	"""
	a = as_point(p1, name='p1'); b = as_point(p2, name='p2'); c = as_points(points)
	val = (b[0] - a[0]) * (c[:, 1] - a[1]) - (b[1] - a[1]) * (c[:, 0] - a[0])
	return _sign3(val)


def points_in_radius(center, radius, points):
	"""Circle/sphere containment for an (N,2) or (N,3) batch."""
	center = as_point(center, (2, 3), 'center')
	pts = as_points(points, (2, 3))
	if pts.shape[1] != center.shape[0]:
		raise GeometryInputError(f"center and points dimensions differ: {center.shape[0]} vs {pts.shape[1]}")
	distance = np.zeros(pts.shape[0], dtype=np.float64)
	for k in range(center.shape[0]):
		comp = pts[:, k] - center[k]
		distance += comp * comp
	return _sign3(radius * radius - distance)


def points_in_ellipse(center, radii, rotation, points):
	"""Rotated-ellipse containment for an (N,2) batch."""
	center = as_point(center, name='center'); radii = as_point(radii, name='radii')
	pts = as_points(points)
	xdiff = pts[:, 0] - center[0]
	ydiff = pts[:, 1] - center[1]
	cos = math.cos(rotation)
	sin = math.sin(rotation)
	u = cos * xdiff + sin * ydiff
	v = sin * xdiff - cos * ydiff
	# zero radii divide to inf or nan; nan fails every comparison and reports -1
	with np.errstate(divide='ignore', invalid='ignore'):
		val = (u * u) / (radii[0] * radii[0]) + (v * v) / (radii[1] * radii[1])
		return _sign3(1.0 - val)


def points_in_triangle(p1, p2, p3, points, config=None):
	"""Barycentric point-in-triangle for an (N,2) batch.

	Uses the numba kernel when numba is available, ``config.use_numba`` is set
	and the batch has more than ``config.numba_min_batch`` rows.
	"""
	cfg = config or DEFAULT_CONFIG
	a = as_point(p1, name='p1'); b = as_point(p2, name='p2'); c = as_point(p3, name='p3')
	pts = as_points(points)
	if pts.shape[0] == 0:
		return np.zeros((0,), dtype=np.int8)

	den = (b[1] - c[1]) * (a[0] - c[0]) + (c[0] - b[0]) * (a[1] - c[1])
	if den == 0:
		logger.debug("points_in_triangle: zero-area triangle %s %s %s", a.tolist(), b.tolist(), c.tolist())

	if HAS_NUMBA and cfg.use_numba and pts.shape[0] > cfg.numba_min_batch:
		try:
			return _points_in_triangle_numba(a, b, c, np.ascontiguousarray(pts))
		except Exception as exc:
			logger.debug("numba points_in_triangle failed (%s); using numpy path", exc)

	with np.errstate(divide='ignore', invalid='ignore'):
		wa = ((b[1] - c[1]) * (pts[:, 0] - c[0]) + (c[0] - b[0]) * (pts[:, 1] - c[1])) / den
		wb = ((c[1] - a[1]) * (pts[:, 0] - c[0]) + (a[0] - c[0]) * (pts[:, 1] - c[1])) / den
		outside = (wa < 0) | (wb < 0) | (wa + wb > 1)
		on_edge = (wa * wb == 0) & ~outside
	out = np.ones(pts.shape[0], dtype=np.int8)
	out[outside] = -1
	out[on_edge] = 0
	return out


def points_in_rect_orientation(center, size, rotation, points):
	"""Rotated-rectangle containment for an (N,2) batch (four orientation tests)."""
	tl, bl, br, tr = rect_corners(center, size, rotation)
	pts = as_points(points)
	v = np.stack([
		orientation_vectorized(tl, bl, pts),
		orientation_vectorized(bl, br, pts),
		orientation_vectorized(br, tr, pts),
		orientation_vectorized(tr, tl, pts),
	])
	out = np.prod(v, axis=0).astype(np.int8)
	out[np.any(v == -1, axis=0)] = -1
	return out


def triangles_areas(points, tris):
	"""Vectorized unsigned area for a batch of triangles.

	points: (N,2) float array
	tris:   (M,3) int array
	Returns: (M,) float64 array, the same shoelace expression as ``triangle_area``.
	"""
	pts = as_points(points)
	T = np.asarray(tris, dtype=np.int64)
	if T.size == 0:
		return np.empty((0,), dtype=float)
	if T.ndim != 2 or T.shape[1] != 3:
		raise GeometryInputError(f"tris must be an (M,3) index array, got shape {T.shape}")
	p1 = pts[T[:, 0]]; p2 = pts[T[:, 1]]; p3 = pts[T[:, 2]]
	s = p1[:, 0] * (p2[:, 1] - p3[:, 1]) + p2[:, 0] * (p3[:, 1] - p1[:, 1]) + p3[:, 0] * (p1[:, 1] - p2[:, 1])
	return np.abs(s) / 2.0
