"""Matrices that cache their own inverse.

A :class:`CacheMatrix` holds a matrix and a slot for its inverse.
:func:`cache_solve` computes the inverse on the first call and returns the
cached array on every later call, until :meth:`CacheMatrix.set` replaces the
matrix and clears the slot.

Example::

    >>> import numpy as np
    >>> import cachematrix
    >>> cm = cachematrix.make_cache_matrix(np.random.rand(1000, 1000))
    >>> inv = cachematrix.cache_solve(cm)   # computed
    >>> inv = cachematrix.cache_solve(cm)   # cached, no work done
"""
from __future__ import annotations

try:
    from ._version import version as __version__
except ImportError:
    __version__ = "unknown"

from typing import Any, Callable

from ._internal import runtime as _runtime_mod
from ._internal import solve as _solve
from ._internal.cache_matrix import CacheMatrix, CacheStats, make_cache_matrix
from ._internal.errors import InversionFailure
from ._internal.warnings import (
    CacheMatrixWarning,
    CacheMatrixMemoryWarning,
)

_runtime = _runtime_mod.Runtime()


def cache_solve(x: CacheMatrix, *args: Any, solver: Callable[..., Any] | None = None, **kwargs: Any) -> Any:
    """
    Return the inverse of a CacheMatrix, computing it only on a cache miss.

    Args:
        x: The CacheMatrix to invert.
        *args, **kwargs: Forwarded verbatim to the inversion routine.
        solver: Inversion routine for this call. Defaults to the configured
            default solver (``numpy.linalg.inv`` unless changed).

    Returns:
        The cached inverse when present (the same read-only array on every
        hit), otherwise the freshly computed and cached one.

    Raises:
        InversionFailure: If the matrix is not square or is singular. The
            cache is left empty.

    Warning:
        `x` is assumed to be invertible; nothing here checks it.
    """
    return _solve.cache_solve(x, args, kwargs, solver=solver, runtime=_runtime)


def get_default_solver() -> Callable[..., Any]:
    return _runtime.solver()


def set_default_solver(solver: Callable[..., Any] | None) -> None:
    """Set the routine used by cache_solve when no `solver` is passed (None restores numpy.linalg.inv)."""
    _runtime.set_solver(solver)


def get_memory_warning_threshold() -> int | None:
    return _runtime.memory_warning_bytes()


def set_memory_warning_threshold(limit_bytes: int | None) -> None:
    """Warn with CacheMatrixMemoryWarning when a cached inverse exceeds `limit_bytes` (None disables)."""
    _runtime.set_memory_warning_bytes(limit_bytes)


__all__ = [
    "CacheMatrix",
    "CacheStats",
    "make_cache_matrix",
    "cache_solve",
    "InversionFailure",
    "CacheMatrixWarning",
    "CacheMatrixMemoryWarning",
    "get_default_solver",
    "set_default_solver",
    "get_memory_warning_threshold",
    "set_memory_warning_threshold",
]
