"""Logging utilities for geopred.

Provides a consistent logger hierarchy and formatting without modifying the
process root logger. All geopred code should obtain loggers via get_logger().
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, Union

_FORMAT = logging.Formatter('%(levelname)s %(name)s: %(message)s')


def _ensure_geopred_root() -> logging.Logger:
    """Ensure the 'geopred' logger has a single stream handler and is isolated
    from the process root logger. Returns the 'geopred' logger.
    """
    root = logging.getLogger('geopred')
    # NullHandlers added by the package __init__ would swallow output
    for h in list(root.handlers):
        if isinstance(h, logging.NullHandler):
            root.removeHandler(h)
    if not root.handlers:
        handler = logging.StreamHandler(stream=sys.stdout)
        handler.setFormatter(_FORMAT)
        root.addHandler(handler)
    root.propagate = False
    return root


def _to_level(level: Union[str, int, None], default: int = logging.INFO) -> int:
    if level is None:
        return default
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else default


def configure_logging(level: Union[str, int] = 'INFO', mute_external: bool = True) -> None:
    """Configure the 'geopred' logger family level and optional external noise suppression.

    This does NOT modify the process root logger.
    """
    root = _ensure_geopred_root()
    lvl = _to_level(level)
    root.setLevel(lvl)
    # matplotlib's font manager is very chatty at DEBUG
    if mute_external and lvl <= logging.DEBUG:
        for noisy in ('matplotlib', 'matplotlib.font_manager', 'numba'):
            logging.getLogger(noisy).setLevel(logging.INFO)


def get_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """Return a logger under the 'geopred' namespace.

    Library modules call this at import time, so it only names the logger and
    never attaches handlers; output is enabled by configure_logging(). If a
    level is provided it is set on the logger, otherwise the logger is NOTSET
    and inherits from the 'geopred' parent.
    """
    if name != 'geopred' and not name.startswith('geopred.'):
        name = 'geopred.' + name
    log = logging.getLogger(name)
    log.setLevel(_to_level(level) if level is not None else logging.NOTSET)
    return log


__all__ = ['get_logger', 'configure_logging']
