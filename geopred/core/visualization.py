"""Visualization helpers: classification maps of a point predicate.

Useful for eyeballing boundary conventions and rotation signs. Not imported
by ``import geopred``; the facade loads it on first attribute access.
"""
from __future__ import annotations

import os as _os
import matplotlib as _mpl
# Ensure a non-interactive backend in headless environments before importing pyplot
if not _os.environ.get('MPLBACKEND'):
    _mpl.use('Agg')
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.colors import ListedColormap

from .logging_utils import get_logger

logger = get_logger('geopred.viz')

# -1 outside, 0 boundary, +1 inside
_LABEL_CMAP = ListedColormap([(0.85, 0.85, 0.85), (0.85, 0.2, 0.2), (0.2, 0.45, 0.8)])


def classify_grid(predicate, bounds, resolution=200, batch=False):
    """Evaluate ``predicate`` on a regular grid.

    Args:
        predicate: callable taking a 2D point and returning -1/0/+1, or with
            ``batch=True`` an (N,2) array and returning N labels (e.g. the
            functions in ``geopred.vectorized``)
        bounds: (xmin, xmax, ymin, ymax)
        resolution: samples per axis (int) or (nx, ny)

    Returns:
        (xs, ys, labels) with labels of shape (ny, nx), int8
    """
    xmin, xmax, ymin, ymax = bounds
    if xmax <= xmin or ymax <= ymin:
        raise ValueError(f"bounds must satisfy xmin < xmax and ymin < ymax, got {bounds}")
    nx, ny = (resolution, resolution) if np.isscalar(resolution) else resolution
    xs = np.linspace(xmin, xmax, int(nx))
    ys = np.linspace(ymin, ymax, int(ny))
    if batch:
        gx, gy = np.meshgrid(xs, ys)
        flat = predicate(np.column_stack((gx.ravel(), gy.ravel())))
        labels = np.asarray(flat, dtype=np.int8).reshape(len(ys), len(xs))
    else:
        labels = np.empty((len(ys), len(xs)), dtype=np.int8)
        for j, y in enumerate(ys):
            for i, x in enumerate(xs):
                labels[j, i] = predicate((x, y))
    n_on = int(np.count_nonzero(labels == 0))
    logger.debug("classify_grid: %d x %d samples, %d inside, %d on boundary",
                 len(xs), len(ys), int(np.count_nonzero(labels == 1)), n_on)
    return xs, ys, labels


def plot_classification(predicate, bounds, resolution=200, ax=None, title=None, outname=None, batch=False):
    """Draw the -1/0/+1 labels of ``predicate`` over ``bounds``.

    Boundary samples (0) are rare on a float grid; they are drawn in red so
    the exact-equality hits stand out. If ``outname`` is given the figure is
    saved there and closed. Returns the axes.
    """
    xs, ys, labels = classify_grid(predicate, bounds, resolution, batch=batch)
    own_fig = ax is None
    if own_fig:
        fig, ax = plt.subplots(figsize=(6, 6))
    else:
        fig = ax.figure
    ax.imshow(labels + 1, origin='lower', extent=(xs[0], xs[-1], ys[0], ys[-1]),
              cmap=_LABEL_CMAP, vmin=0, vmax=2, interpolation='nearest')
    on_j, on_i = np.nonzero(labels == 0)
    if on_j.size:
        ax.scatter(xs[on_i], ys[on_j], s=4, color=(0.85, 0.2, 0.2))
    ax.set_aspect('equal')
    if title:
        ax.set_title(title)
    if outname:
        fig.savefig(outname, dpi=150)
        logger.info("wrote %s", outname)
        if own_fig:
            plt.close(fig)
    return ax


__all__ = ['classify_grid', 'plot_classification']
