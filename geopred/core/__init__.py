"""Implementation package for geopred; import public symbols from ``geopred``."""
