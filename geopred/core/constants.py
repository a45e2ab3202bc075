"""Central numerical tolerances and dispatch thresholds.

This module centralizes the few numeric thresholds used across the package so
they can be tuned consistently and referenced without scattering literals.
Only the approximate-equality comparison consumes the tolerances; every other
predicate compares against exact zero.
"""
from __future__ import annotations

# Approximate equality (area-sum triangle test)
EPS_APPROX_REL: float = 1e-6                      # relative to max(|a|, |b|)
EPS_APPROX_ABS: float = 8 * 1.401298464324817e-45  # 8x smallest float32 subnormal

# Batch dispatch
NUMBA_MIN_BATCH: int = 256    # below this the numpy path is faster than a JIT call

__all__ = [
    'EPS_APPROX_REL',
    'EPS_APPROX_ABS',
    'NUMBA_MIN_BATCH',
]
