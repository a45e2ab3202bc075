#!/usr/bin/env python3
"""
Small demo: render -1/0/+1 classification maps for the containment predicates.
Writes one PNG per shape so rotation and boundary conventions can be compared.
"""
from __future__ import annotations

import argparse
import math
from functools import partial

import matplotlib.pyplot as plt

from geopred import (
    configure_logging,
    get_logger,
    is_point_in_triangle,
    is_point_in_triangle_area,
    is_point_in_triangle_orientation,
)
from geopred import vectorized
from geopred.core.visualization import plot_classification

logger = get_logger('geopred.demos.classification')

TRIANGLE = ((0.0, 0.0), (1.0, 0.0), (0.0, 1.0))


def triangle_panels(out):
    fig, axes = plt.subplots(1, 3, figsize=(15, 5))
    tests = [
        ('barycentric', is_point_in_triangle),
        ('orientation', is_point_in_triangle_orientation),
        ('area sum', is_point_in_triangle_area),
    ]
    for ax, (name, fn) in zip(axes, tests):
        plot_classification(lambda p, fn=fn: fn(*TRIANGLE, p), (-0.5, 1.5, -0.5, 1.5),
                            resolution=161, ax=ax, title=name)
    fig.savefig(out, dpi=150)
    plt.close(fig)
    logger.info("wrote %s", out)


def main():
    ap = argparse.ArgumentParser(description='Classification maps for geopred containment predicates')
    ap.add_argument('--rotation-deg', type=float, default=30.0, help='Rotation for ellipse and rectangle (degrees)')
    ap.add_argument('--resolution', type=int, default=200)
    ap.add_argument('--out-prefix', type=str, default='geopred_demo')
    ap.add_argument('--log-level', type=str, default='INFO')
    args = ap.parse_args()

    configure_logging(args.log_level)
    theta = math.radians(args.rotation_deg)
    bounds = (-2.5, 2.5, -2.5, 2.5)

    plot_classification(partial(vectorized.points_in_radius, (0.0, 0.0), 2.0), bounds, args.resolution,
                        title='circle r=2', outname=f'{args.out_prefix}_circle.png', batch=True)
    plot_classification(partial(vectorized.points_in_ellipse, (0.0, 0.0), (2.0, 1.0), theta), bounds,
                        args.resolution, title=f'ellipse 2x1 @ {args.rotation_deg:g} deg',
                        outname=f'{args.out_prefix}_ellipse.png', batch=True)
    plot_classification(partial(vectorized.points_in_rect_orientation, (0.0, 0.0), (3.0, 1.5), theta), bounds,
                        args.resolution, title=f'rect 3x1.5 @ {args.rotation_deg:g} deg',
                        outname=f'{args.out_prefix}_rect.png', batch=True)
    triangle_panels(f'{args.out_prefix}_triangle.png')


if __name__ == '__main__':  # pragma: no cover
    main()
