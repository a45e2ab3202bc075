"""Public package API for geopred, stateless 2D/3D geometric predicates.

This facade provides a flat import surface on top of the internal
implementation package ``geopred.core`` while deferring the matplotlib-based
visualization module until first use to keep ``import geopred`` fast.

Example
-------
    from geopred import orientation, is_point_in_triangle, signed_volume

The deeper modules (``geopred.core.*``) are considered internal and may
change; rely on this layer for public symbols.
"""
from importlib import import_module as _imp
import logging as _logging

try:
    from importlib.metadata import version as _pkg_version, PackageNotFoundError as _NotFound
    __version__ = _pkg_version("geopred")  # populated when installed
except _NotFound:  # pragma: no cover - source checkout without install
    __version__ = "0.0.0+dev"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

# Eager light-weight submodules
_pred = _imp('geopred.core.predicates')
_meas = _imp('geopred.core.measures')
_cont = _imp('geopred.core.containment')
_vec = _imp('geopred.core.vectorized')
_const = _imp('geopred.core.constants')
_conf = _imp('geopred.core.config')
_exc = _imp('geopred.core.exceptions')
_log = _imp('geopred.core.logging_utils')


def _lazy_module(mod_name):
    loaded = {}

    class _ModuleProxy:
        __slots__ = ()

        def _load(self):
            if 'm' not in loaded:
                loaded['m'] = _imp(mod_name)
            return loaded['m']

        def __getattr__(self, item):
            return getattr(self._load(), item)

        def __dir__(self):
            return dir(self._load())
    return _ModuleProxy()


# Lazily loaded matplotlib-dependent module
visualization = _lazy_module('geopred.core.visualization')

# Orientation
orientation = _pred.orientation
orientation2 = _pred.orientation2
approximately = _pred.approximately

# Measures
max_distance = _meas.max_distance
triangle_area = _meas.triangle_area
triangle_signed_area = _meas.triangle_signed_area
signed_volume = _meas.signed_volume

# Containment
is_point_in_radius = _cont.is_point_in_radius
is_point_in_ellipse = _cont.is_point_in_ellipse
is_point_in_triangle = _cont.is_point_in_triangle
is_point_in_triangle_orientation = _cont.is_point_in_triangle_orientation
is_point_in_triangle_area = _cont.is_point_in_triangle_area
is_point_in_rect = _cont.is_point_in_rect
is_point_in_rect_orientation = _cont.is_point_in_rect_orientation
rect_corners = _cont.rect_corners

# Tolerances and configuration
EPS_APPROX_REL = _const.EPS_APPROX_REL
EPS_APPROX_ABS = _const.EPS_APPROX_ABS
PredicateConfig = _conf.PredicateConfig
DEFAULT_CONFIG = _conf.DEFAULT_CONFIG

# Errors
GeometryError = _exc.GeometryError
GeometryInputError = _exc.GeometryInputError
PredicateNotImplementedError = _exc.PredicateNotImplementedError

# Logging
get_logger = _log.get_logger
configure_logging = _log.configure_logging

# Namespace submodules for exploratory users
predicates = _pred
measures = _meas
containment = _cont
vectorized = _vec
constants = _const

__all__ = [
    '__version__',
    # orientation
    'orientation', 'orientation2', 'approximately',
    # measures
    'max_distance', 'triangle_area', 'triangle_signed_area', 'signed_volume',
    # containment
    'is_point_in_radius', 'is_point_in_ellipse',
    'is_point_in_triangle', 'is_point_in_triangle_orientation', 'is_point_in_triangle_area',
    'is_point_in_rect', 'is_point_in_rect_orientation', 'rect_corners',
    # configuration / errors / logging
    'EPS_APPROX_REL', 'EPS_APPROX_ABS', 'PredicateConfig', 'DEFAULT_CONFIG',
    'GeometryError', 'GeometryInputError', 'PredicateNotImplementedError',
    'get_logger', 'configure_logging',
    # submodules / namespaces
    'predicates', 'measures', 'containment', 'vectorized', 'constants', 'visualization',
]
