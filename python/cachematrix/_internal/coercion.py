from __future__ import annotations

from collections.abc import Sequence as _SequenceABC
from typing import Any

import numpy as np


def is_sequence_like(value: Any) -> bool:
    return isinstance(value, _SequenceABC) and not isinstance(value, (str, bytes, bytearray))


def _matrix_like_rows(candidate: Any) -> list[list[Any]] | None:
    rows_attr: Any = getattr(candidate, "rows", None)
    cols_attr: Any = getattr(candidate, "cols", None)
    get_attr: Any = getattr(candidate, "get", None)
    if not (callable(rows_attr) and callable(cols_attr) and callable(get_attr)):
        return None
    rows = int(rows_attr())
    cols = int(cols_attr())
    return [[get_attr(i, j) for j in range(cols)] for i in range(rows)]


def coerce_matrix(candidate: Any) -> np.ndarray:
    """Copy `candidate` into a freshly owned NumPy array.

    Accepts NumPy arrays, nested sequences and matrix-like objects exposing
    ``rows()``, ``cols()`` and ``get(i, j)``. Shape is deliberately not
    validated here; the inversion routine reports non-square input.
    """

    if isinstance(candidate, np.ndarray):
        array = np.array(candidate, copy=True)
    else:
        rows = _matrix_like_rows(candidate)
        if rows is not None:
            array = np.array(rows)
        elif is_sequence_like(candidate) or hasattr(candidate, "__array__"):
            try:
                array = np.array(candidate)
            except ValueError as exc:
                raise TypeError("Matrix data must be a rectangular nested sequence.") from exc
        else:
            raise TypeError(
                "Matrix data must be provided as a nested sequence, a NumPy array, "
                "or a matrix-like object with rows()/cols()/get(i, j)."
            )

    if array.ndim == 0:
        raise TypeError("Matrix data must not be a scalar.")
    if array.dtype == object:
        raise TypeError("Matrix data must be numeric.")
    return array
