from __future__ import annotations

from typing import Any, Callable

import numpy as np

DEFAULT_MEMORY_WARNING_BYTES = 1 << 30


class Runtime:
    def __init__(
        self,
        *,
        solver: Callable[..., Any] | None = None,
        memory_warning_bytes: int | None = DEFAULT_MEMORY_WARNING_BYTES,
    ) -> None:
        self._solver: Callable[..., Any] = np.linalg.inv
        self._memory_warning_bytes: int | None = None
        self.set_solver(solver)
        self.set_memory_warning_bytes(memory_warning_bytes)

    def solver(self) -> Callable[..., Any]:
        return self._solver

    def set_solver(self, solver: Callable[..., Any] | None) -> None:
        if solver is None:
            solver = np.linalg.inv
        if not callable(solver):
            raise TypeError("solver must be callable (or None to restore numpy.linalg.inv)")
        self._solver = solver

    def memory_warning_bytes(self) -> int | None:
        return self._memory_warning_bytes

    def set_memory_warning_bytes(self, limit_bytes: int | None) -> None:
        if limit_bytes is None:
            self._memory_warning_bytes = None
            return
        limit = int(limit_bytes)
        if limit < 0:
            raise ValueError("memory warning threshold must be non-negative (or None to disable)")
        self._memory_warning_bytes = limit

    def exceeds_memory_warning(self, nbytes: int | None) -> bool:
        limit = self._memory_warning_bytes
        if limit is None or nbytes is None:
            return False
        return int(nbytes) > limit
