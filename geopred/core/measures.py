"""Scalar measures: unnormalized line distance, triangle area, tetrahedron volume."""
from __future__ import annotations

import numpy as np

from .helpers import as_point
from .logging_utils import get_logger

logger = get_logger('geopred.measures')

__all__ = ['max_distance', 'triangle_area', 'triangle_signed_area', 'signed_volume']


def max_distance(p, p1, p2):
	"""Unnormalized distance of p from the infinite line through p1 and p2.

	This is |cross(p2 - p1, p - p1)|, the numerator of the point-to-line
	distance; divide by |p2 - p1| for the true distance. Points tested against
	the same line can be ranked without that division.
	"""
	p = as_point(p); p1 = as_point(p1, name='p1'); p2 = as_point(p2, name='p2')
	return float(abs((p[1] - p1[1]) * (p2[0] - p1[0]) - (p2[1] - p1[1]) * (p[0] - p1[0])))


def triangle_area(p1, p2, p3):
	"""Unsigned triangle area from the shoelace formula; 0 for collinear vertices."""
	p1 = as_point(p1, name='p1'); p2 = as_point(p2, name='p2'); p3 = as_point(p3, name='p3')
	return float(abs(p1[0] * (p2[1] - p3[1]) + p2[0] * (p3[1] - p1[1]) + p3[0] * (p1[1] - p2[1])) / 2.0)


def triangle_signed_area(p1, p2, p3):
	"""Signed area 0.5 * cross(p2 - p1, p3 - p1); positive for counter-clockwise winding."""
	p1 = as_point(p1, name='p1'); p2 = as_point(p2, name='p2'); p3 = as_point(p3, name='p3')
	return float(0.5 * ((p2[0] - p1[0]) * (p3[1] - p1[1]) - (p2[1] - p1[1]) * (p3[0] - p1[0])))


def signed_volume(a, b, c, d):
	"""Signed volume of tetrahedron (a, b, c, d): dot(a - d, cross(b - d, c - d)) / 6.

	For a triangle (a, b, c) wound counter-clockwise when seen from +z, the
	volume is positive when d lies below its plane and negative above it.

	If two of a, b, c coincide exactly the triangle is degenerate and 0.0 is
	returned without evaluating the triple product, which would otherwise
	produce cancellation noise. ``d`` is not part of that check.

	Notes
	-----
	Plain float64 arithmetic; nearly coplanar inputs can produce a volume of
	the wrong sign.
	"""
	a = as_point(a, 3, 'a'); b = as_point(b, 3, 'b'); c = as_point(c, 3, 'c'); d = as_point(d, 3, 'd')
	if np.array_equal(a, b) or np.array_equal(b, c) or np.array_equal(a, c):
		logger.debug("signed_volume: degenerate triangle %s %s %s", a.tolist(), b.tolist(), c.tolist())
		return 0.0
	return float(np.dot(a - d, np.cross(b - d, c - d)) / 6.0)
