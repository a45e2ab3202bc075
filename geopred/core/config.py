"""Configuration object for the tolerance-sensitive and batch predicates."""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from .constants import EPS_APPROX_REL, EPS_APPROX_ABS, NUMBA_MIN_BATCH


@dataclass(frozen=True)
class PredicateConfig:
    """Tunables shared by the predicates.

    Attributes
    ----------
    approx_rel_tol : float
        Relative tolerance of ``approximately`` (area-sum triangle test).
    approx_abs_tol : float
        Absolute floor of ``approximately``.
    use_numba : bool
        Allow the batch predicates to dispatch to numba kernels when numba
        is installed.
    numba_min_batch : int
        Minimum number of query points before the numba kernel is used.
    """
    approx_rel_tol: float = EPS_APPROX_REL
    approx_abs_tol: float = EPS_APPROX_ABS
    use_numba: bool = True
    numba_min_batch: int = NUMBA_MIN_BATCH

    def __post_init__(self):
        if self.approx_rel_tol < 0 or self.approx_abs_tol < 0:
            raise ValueError(
                f"tolerances must be non-negative, got rel={self.approx_rel_tol} abs={self.approx_abs_tol}")
        if self.numba_min_batch < 0:
            raise ValueError(f"numba_min_batch must be non-negative, got {self.numba_min_batch}")

    def replace(self, **overrides) -> 'PredicateConfig':
        return dataclasses.replace(self, **overrides)


DEFAULT_CONFIG = PredicateConfig()

__all__ = ['PredicateConfig', 'DEFAULT_CONFIG']
