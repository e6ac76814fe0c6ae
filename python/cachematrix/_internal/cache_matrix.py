from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

from .coercion import coerce_matrix


@dataclass
class CacheStats:
    hits: int = 0
    misses: int = 0
    invalidations: int = 0


class CacheMatrix:
    """Matrix paired with a slot for its cached inverse.

    The slot is filled by :func:`cachematrix.cache_solve` and cleared by every
    :meth:`set`. The two never go out of sync as long as callers replace the
    matrix through :meth:`set` instead of mutating it in place.

    Note that a cached inverse takes as much memory as the matrix itself.
    """

    __slots__ = ("_matrix", "_cached_inverse", "stats")

    def __init__(self, x: Any = None):
        self.stats = CacheStats()
        self._cached_inverse: Any = None
        self._matrix = _empty_matrix() if x is None else coerce_matrix(x)

    def set(self, y: Any) -> None:
        """Replace the matrix with a copy of `y` and clear the cached inverse."""
        self._matrix = coerce_matrix(y)
        if self._cached_inverse is not None:
            self.stats.invalidations += 1
        self._cached_inverse = None

    def get(self) -> np.ndarray:
        """Return a read-only view of the stored matrix."""
        view = self._matrix.view()
        view.flags.writeable = False
        return view

    # Trusted cache primitives: no check that `inverse` matches the matrix.
    def set_inverse(self, inverse: Any) -> None:
        self._cached_inverse = inverse

    def get_inverse(self) -> Any:
        return self._cached_inverse

    @property
    def shape(self) -> tuple[int, ...]:
        return tuple(self._matrix.shape)

    @property
    def has_inverse(self) -> bool:
        return self._cached_inverse is not None

    def __repr__(self) -> str:
        return f"CacheMatrix(shape={self.shape}, cached={self.has_inverse})"


def _empty_matrix() -> np.ndarray:
    # 1x1 missing value, the same "empty" default a bare matrix() gives.
    return np.full((1, 1), np.nan)


def make_cache_matrix(x: Any = None) -> CacheMatrix:
    """Create a :class:`CacheMatrix` from `x` with an empty inverse cache.

    Args:
        x: Matrix data (NumPy array, nested sequence, or matrix-like object).
           Defaults to a 1x1 matrix holding NaN.

    Returns:
        A new CacheMatrix; the first :func:`cache_solve` on it computes the inverse.
    """
    return CacheMatrix(x)
