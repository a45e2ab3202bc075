"""Point-in-shape containment predicates.

Every predicate returns +1 when the point is strictly inside, -1 when it is
strictly outside and 0 when it lies exactly on the boundary. The boundary is
detected with exact float comparisons; ``is_point_in_triangle_area`` is the
one exception and never reports 0.

Three triangle tests are kept side by side. They agree on inside/outside for
non-degenerate triangles but not on the boundary:

- ``is_point_in_triangle`` (barycentric) reports 0 only where the weight of
  p1 or p2 is exactly zero; a point on edge p1-p2 reports +1.
- ``is_point_in_triangle_orientation`` reports 0 on all three edges.
- ``is_point_in_triangle_area`` folds the boundary into +1.
"""
from __future__ import annotations

import math

import numpy as np

from .config import DEFAULT_CONFIG
from .exceptions import GeometryInputError, PredicateNotImplementedError
from .helpers import as_point, sign_of
from .logging_utils import get_logger
from .measures import triangle_area
from .predicates import orientation, approximately

logger = get_logger('geopred.containment')

__all__ = [
	'is_point_in_radius', 'is_point_in_ellipse',
	'is_point_in_triangle', 'is_point_in_triangle_orientation', 'is_point_in_triangle_area',
	'is_point_in_rect', 'is_point_in_rect_orientation', 'rect_corners',
]


def is_point_in_radius(center, radius, point):
	"""Circle (2D) or sphere (3D) containment from squared distances.

	Compares r**2 with |point - center|**2, so no square root is taken and
	the boundary case is an exact equality of the squared values.
	"""
	center = as_point(center, (2, 3), 'center')
	point = as_point(point, (2, 3))
	if center.shape != point.shape:
		raise GeometryInputError(f"center and point dimensions differ: {center.shape} vs {point.shape}")
	distance = 0.0
	for comp in point - center:
		distance += comp * comp
	return sign_of(radius * radius - distance)


def is_point_in_ellipse(center, radii, rotation, point):
	"""Containment in an ellipse rotated by ``rotation`` radians (counter-clockwise).

	The offset from the center is expressed in the ellipse frame as
	u = cos*dx + sin*dy, v = sin*dx - cos*dy and tested against
	(u/rx)**2 + (v/ry)**2 == 1. The sign of v does not affect the square,
	so rotations agree with ``is_point_in_rect_orientation``.
	"""
	center = as_point(center, name='center'); radii = as_point(radii, name='radii'); point = as_point(point)
	xdiff = point[0] - center[0]
	ydiff = point[1] - center[1]
	cos = math.cos(rotation)
	sin = math.sin(rotation)
	u = cos * xdiff + sin * ydiff
	v = sin * xdiff - cos * ydiff
	# zero radii divide to inf or nan; nan fails every comparison and reports -1
	with np.errstate(divide='ignore', invalid='ignore'):
		val = (u * u) / (radii[0] * radii[0]) + (v * v) / (radii[1] * radii[1])
		return sign_of(1.0 - val)


def is_point_in_triangle(p1, p2, p3, point):
	"""Barycentric point-in-triangle test.

	a and b are the barycentric weights of p1 and p2, solved by dividing by
	twice the signed triangle area. Outside if a < 0, b < 0 or a + b > 1;
	on the boundary if a * b == 0; inside otherwise.

	Notes
	-----
	The denominator is not guarded: near-degenerate triangles divide by a
	tiny number and the weights lose all precision. A point on edge p1-p2
	(a + b == 1) is reported as +1, not 0.
	"""
	p1 = as_point(p1, name='p1'); p2 = as_point(p2, name='p2'); p3 = as_point(p3, name='p3')
	point = as_point(point)
	denominator = (p2[1] - p3[1]) * (p1[0] - p3[0]) + (p3[0] - p2[0]) * (p1[1] - p3[1])
	if denominator == 0:
		logger.debug("is_point_in_triangle: zero-area triangle %s %s %s", p1.tolist(), p2.tolist(), p3.tolist())
	with np.errstate(divide='ignore', invalid='ignore'):
		a = ((p2[1] - p3[1]) * (point[0] - p3[0]) + (p3[0] - p2[0]) * (point[1] - p3[1])) / denominator
		b = ((p3[1] - p1[1]) * (point[0] - p3[0]) + (p1[0] - p3[0]) * (point[1] - p3[1])) / denominator
		if a < 0 or b < 0:
			return -1
		if a + b > 1:
			return -1
		if a * b == 0:
			return 0
	return 1


def _edge_distance_check(start, end, point):
	# the point is on the edge's line; accept it if no farther from start than end is
	start = as_point(start); end = as_point(end); point = as_point(point)
	return 0 if np.linalg.norm(point - start) <= np.linalg.norm(end - start) else -1


def is_point_in_triangle_orientation(p1, p2, p3, point):
	"""Same-side test: point must be on the same side of each edge as the opposite vertex.

	For each directed edge the orientation of ``point`` is multiplied by the
	orientation of the remaining vertex. A zero product means the point is on
	the edge's line; it is then on the edge if its distance from the edge
	start does not exceed the edge length, else outside.

	Notes
	-----
	Only the distance from the edge start is measured, so a point on the
	line behind the start vertex (within one edge length) is reported as 0.
	"""
	o1 = orientation(p1, p2, point) * orientation(p1, p2, p3)
	if o1 == 0:
		return _edge_distance_check(p1, p2, point)

	o2 = orientation(p2, p3, point) * orientation(p2, p3, p1)
	if o2 == 0:
		return _edge_distance_check(p2, p3, point)

	o3 = orientation(p3, p1, point) * orientation(p3, p1, p2)
	if o3 == 0:
		return _edge_distance_check(p3, p1, point)

	if o1 == 1 and o2 == 1 and o3 == 1:
		return 1
	return -1


def is_point_in_triangle_area(p1, p2, p3, point, config=None):
	"""Area-sum test: the three sub-triangles around ``point`` must add up to the triangle.

	The comparison uses ``approximately`` with the tolerances of ``config``
	(``DEFAULT_CONFIG`` when omitted). Boundary points are indistinguishable
	from interior ones, so the result is +1 or -1, never 0.
	"""
	cfg = config or DEFAULT_CONFIG
	main_area = triangle_area(p1, p2, p3)
	t1 = triangle_area(point, p2, p3)
	t2 = triangle_area(p1, point, p3)
	t3 = triangle_area(p1, p2, point)
	if approximately(main_area, t1 + t2 + t3, cfg.approx_rel_tol, cfg.approx_abs_tol):
		return 1
	return -1


def rect_corners(center, size, rotation):
	"""Corners of a rotated rectangle, counter-clockwise from top-left.

	Returns a (4, 2) array [tl, bl, br, tr], each rotated about ``center`` by
	``rotation`` radians with the standard rotation matrix.
	"""
	center = as_point(center, name='center'); size = as_point(size, name='size')
	w, h = size
	corners = center + np.array([[-w, h], [-w, -h], [w, -h], [w, h]]) / 2
	cos = math.cos(rotation)
	sin = math.sin(rotation)
	rel = corners - center
	rotated = np.column_stack((rel[:, 0] * cos - rel[:, 1] * sin, rel[:, 0] * sin + rel[:, 1] * cos))
	return rotated + center


def is_point_in_rect(center, size, rotation, point):
	"""Not implemented; use ``is_point_in_rect_orientation``.

	Raises
	------
	PredicateNotImplementedError
		Always. A placeholder result would read as "on the boundary".
	"""
	raise PredicateNotImplementedError(
		"is_point_in_rect has no implementation; use is_point_in_rect_orientation")


def is_point_in_rect_orientation(center, size, rotation, point):
	"""Rotated rectangle containment from four orientation tests.

	The corners are counter-clockwise, so an interior point is left of every
	edge. Any edge reporting -1 puts the point outside; otherwise the product
	of the four orientations is 1 inside and 0 on an edge.
	"""
	tl, bl, br, tr = rect_corners(center, size, rotation)
	v1 = orientation(tl, bl, point)
	v2 = orientation(bl, br, point)
	v3 = orientation(br, tr, point)
	v4 = orientation(tr, tl, point)
	if v1 == -1 or v2 == -1 or v3 == -1 or v4 == -1:
		return -1
	return v1 * v2 * v3 * v4
