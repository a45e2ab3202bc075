"""Orientation (side-of-line) predicates and the approximate float comparison.

Two formulations of the same side test are provided. ``orientation`` is the
plain 2D cross product of (p2 - p1) and (p - p1); ``orientation2`` projects
(p - p1) onto the right-hand normal of the line and negates it. Both return
+1 when ``p`` is left of the directed line p1->p2, -1 when right and 0 when
the raw value is exactly 0.0.
"""
from __future__ import annotations

from .config import DEFAULT_CONFIG
from .helpers import as_point, sign_of

__all__ = ['orientation', 'orientation2', 'approximately']


def orientation(p1, p2, p):
	"""Turn direction of p relative to the directed line p1->p2.

	The raw value is the determinant of (p2 - p1, p - p1), i.e. twice the
	signed area of triangle (p1, p2, p).

	Returns
	-------
	int
		+1 left of the line (counter-clockwise turn), -1 right of it,
		0 exactly collinear (including p == p1 or p == p2).
	"""
	p1 = as_point(p1, name='p1'); p2 = as_point(p2, name='p2'); p = as_point(p)
	val = (p2[0] - p1[0]) * (p[1] - p1[1]) - (p2[1] - p1[1]) * (p[0] - p1[0])
	return sign_of(val)


def orientation2(p1, p2, p):
	"""Side test via the dot product of (p - p1) with the line normal.

	normal = (p2.y - p1.y, p1.x - p2.x) points to the right of p1->p2, so the
	dot product is positive on the right; its sign is flipped to match
	``orientation``. The two products are the same multiplications in
	swapped order, so the signs agree bit for bit.
	"""
	p1 = as_point(p1, name='p1'); p2 = as_point(p2, name='p2'); p = as_point(p)
	val = (p[0] - p1[0]) * (p2[1] - p1[1]) - (p[1] - p1[1]) * (p2[0] - p1[0])
	return sign_of(-val)


def approximately(a, b, rel_tol=None, abs_tol=None):
	"""True if a and b are equal within a relative tolerance with an absolute floor.

	|b - a| < max(rel_tol * max(|a|, |b|), abs_tol); defaults come from
	``DEFAULT_CONFIG``. This is the only tolerance comparison in geopred.
	"""
	if rel_tol is None:
		rel_tol = DEFAULT_CONFIG.approx_rel_tol
	if abs_tol is None:
		abs_tol = DEFAULT_CONFIG.approx_abs_tol
	a = float(a); b = float(b)
	return abs(b - a) < max(rel_tol * max(abs(a), abs(b)), abs_tol)
