"""Small coercion helpers shared by the predicate modules."""
from __future__ import annotations

import numpy as np

from .exceptions import GeometryInputError


def as_point(p, dim=2, name='point'):
	"""Return ``p`` as a float64 vector of length ``dim``.

	``dim`` may be a tuple of accepted lengths. The caller's object is never
	modified; ``np.asarray`` only copies when a dtype conversion is needed.
	"""
	arr = np.asarray(p, dtype=np.float64)
	dims = dim if isinstance(dim, tuple) else (dim,)
	if arr.ndim != 1 or arr.shape[0] not in dims:
		raise GeometryInputError(f"{name} must be a flat coordinate of length {dims}, got shape {arr.shape}")
	return arr


def as_points(points, dim=2, name='points'):
	"""Return ``points`` as an (N, dim) float64 array; a single point becomes (1, dim)."""
	arr = np.asarray(points, dtype=np.float64)
	if arr.ndim == 1:
		arr = arr.reshape(1, -1)
	dims = dim if isinstance(dim, tuple) else (dim,)
	if arr.ndim != 2 or arr.shape[1] not in dims:
		raise GeometryInputError(f"{name} must be an (N, {dims}) array, got shape {arr.shape}")
	return arr


def sign_of(val):
	"""Three-way sign with an exact zero; NaN maps to -1."""
	if val == 0:
		return 0
	return 1 if val > 0 else -1


__all__ = ['as_point', 'as_points', 'sign_of']
