from __future__ import annotations

import warnings
from typing import Any, Callable

import numpy as np

from .cache_matrix import CacheMatrix
from .runtime import Runtime
from .warnings import CacheMatrixMemoryWarning


def _warn_if_large(inverse: Any, *, runtime: Runtime) -> None:
    nbytes = getattr(inverse, "nbytes", None)
    if runtime.exceeds_memory_warning(nbytes):
        warnings.warn(
            f"Caching a {int(nbytes)}-byte inverse doubles the memory held for this matrix "
            f"(threshold {runtime.memory_warning_bytes()} bytes).",
            CacheMatrixMemoryWarning,
            stacklevel=4,
        )


def cache_solve(
    x: CacheMatrix,
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
    *,
    solver: Callable[..., Any] | None,
    runtime: Runtime,
) -> Any:
    inv = x.get_inverse()
    if inv is not None:
        x.stats.hits += 1
        return inv

    routine = solver if solver is not None else runtime.solver()
    # Errors from the routine propagate as-is; nothing below runs on failure.
    inv = routine(x.get(), *args, **kwargs)

    if isinstance(inv, np.ndarray):
        # numpy.linalg.inv always returns a fresh array; any other routine may
        # hand back a buffer it keeps using, so freeze a private copy instead.
        if routine is not np.linalg.inv:
            inv = np.array(inv, copy=True)
        inv.flags.writeable = False

    x.set_inverse(inv)
    x.stats.misses += 1
    # After the store: an "error" filter on the warning must not drop the cache.
    _warn_if_large(inv, runtime=runtime)
    return inv
