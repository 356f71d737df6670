"""Low-level dense matrix kernels.

The compiled kernel handles native numeric tables; :func:`_matmul_object`
runs the same triple loop in Python for coefficient types numba cannot
compile (fractions, polynomials, mpmath numbers, ...).
"""

from __future__ import annotations

import numpy as np
from numba import njit

from polymat.algorithms.utils.config import FASTMATH, NUMERIC_KINDS


@njit(fastmath=FASTMATH, cache=False)
def _matmul_numeric(a: np.ndarray, b: np.ndarray, out: np.ndarray) -> None:
    """Write ``a @ b`` into the zero-filled array ``out``.

    Parameters
    ----------
    a, b : numpy.ndarray
        Square arrays of equal order with a native numeric dtype.
    out : numpy.ndarray
        Zero-filled result array of the promoted dtype.
    """
    n = a.shape[0]
    for i in range(n):
        for j in range(n):
            acc = out[i, j]
            for k in range(n):
                acc += a[i, k] * b[k, j]
            out[i, j] = acc


def _matmul_object(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Multiply two ``object`` tables without assuming a zero element.

    Each accumulator starts at the first product ``a[i, 0] * b[0, j]``.
    """
    n = a.shape[0]
    out = np.empty((n, n), dtype=object)
    for i in range(n):
        for j in range(n):
            acc = a[i, 0] * b[0, j]
            for k in range(1, n):
                acc = acc + a[i, k] * b[k, j]
            out[i, j] = acc
    return out


def _matmul(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    # the compiled kernel does not bounds-check
    if a.shape != b.shape:
        raise ValueError(f"Matrix orders differ: {a.shape} vs {b.shape}")
    if a.shape[0] == 0:
        return np.empty((0, 0), dtype=np.result_type(a, b))
    if a.dtype.kind in NUMERIC_KINDS and b.dtype.kind in NUMERIC_KINDS:
        out = np.zeros(a.shape, dtype=np.result_type(a, b))
        _matmul_numeric(a, b, out)
        return out
    return _matmul_object(a.astype(object), b.astype(object))
