"""Geopred exceptions."""


class GeometryError(Exception):
    """Base exception for geopred."""

    pass


class GeometryInputError(GeometryError, ValueError):
    """Input point has the wrong shape (not a flat 2D/3D coordinate)."""

    pass


class PredicateNotImplementedError(GeometryError, NotImplementedError):
    """The requested predicate has no implementation."""

    pass


__all__ = ['GeometryError', 'GeometryInputError', 'PredicateNotImplementedError']
