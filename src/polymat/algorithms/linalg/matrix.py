"""Dense square matrices over an arbitrary coefficient ring.

Numpy arrays with a native numeric dtype (int, float, complex) and tables of
Python or numpy floats keep a native dtype and are multiplied by the compiled
kernel in :mod:`polymat.algorithms.linalg.kernels`. Any other coefficient
type is stored in an ``object`` array and combined with its own Python
operators. Python ints are always stored as objects, so they never wrap
around.

Operands of matrix-matrix operations must share the same order; mismatches
surface as the ``ValueError`` raised by numpy or by the product kernel.
"""

from __future__ import annotations

from typing import Any, Callable

import numpy as np

from polymat.algorithms.linalg.kernels import _matmul
from polymat.algorithms.utils.config import NUMERIC_KINDS
from polymat.algorithms.utils.power import (_check_exponent, _power,
                                            _square_and_multiply)


def _dtype_of(value: Any) -> np.dtype:
    if isinstance(value, (np.ndarray, np.generic)):
        dtype = value.dtype
    elif isinstance(value, (float, complex)):
        dtype = np.asarray(value).dtype
    else:
        return np.dtype(object)
    return dtype if dtype.kind in NUMERIC_KINDS else np.dtype(object)


def _map_cells(cells: np.ndarray, func: Callable[[Any], Any]) -> np.ndarray:
    src = cells.astype(object)
    out = np.empty(src.shape, dtype=object)
    for i in range(src.shape[0]):
        for j in range(src.shape[1]):
            out[i, j] = func(src[i, j])
    return out


class SquareMatrix:
    """Dense ``N x N`` matrix supporting ring arithmetic.

    Parameters
    ----------
    table : array_like
        Square, row-major table of coefficients. The table is copied.

    Raises
    ------
    ValueError
        If ``table`` is not square.

    Notes
    -----
    Scalar ``+`` and ``-`` add ``scalar * I``, so only the diagonal changes.
    """

    # defer mixed operations with numpy operands to the reflected operators
    __array_ufunc__ = None

    def __init__(self, table):
        if isinstance(table, np.ndarray):
            cells = np.array(table)
        else:
            cells = np.array(table, dtype=object)
            if cells.size and all(_dtype_of(c).kind != "O" for c in cells.flat):
                cells = np.array(cells.tolist())
        if cells.size == 0:
            cells = cells.reshape(0, 0)
        if cells.ndim != 2 or cells.shape[0] != cells.shape[1]:
            raise ValueError(f"Expected a square table, got shape {cells.shape}")
        if cells.dtype.kind not in NUMERIC_KINDS:
            cells = cells.astype(object)
        self._cells = cells

    @classmethod
    def _from_cells(cls, cells: np.ndarray) -> "SquareMatrix":
        obj = cls.__new__(cls)
        obj._cells = cells
        return obj

    @classmethod
    def zeros(cls, order: int, dtype=object) -> "SquareMatrix":
        """All-zero matrix of the given order; ``object`` cells hold Python ints."""
        dtype = np.dtype(dtype)
        if dtype.kind not in NUMERIC_KINDS:
            dtype = np.dtype(object)
        cells = np.zeros((order, order), dtype=dtype)
        return cls._from_cells(cells)

    @classmethod
    def scalar(cls, order: int, value) -> "SquareMatrix":
        """Return ``value * I`` of the given order."""
        dtype = _dtype_of(value)
        if dtype.kind == "O":
            cells = np.full((order, order), value - value, dtype=object)
        else:
            cells = np.zeros((order, order), dtype=dtype)
        for i in range(order):
            cells[i, i] = value
        return cls._from_cells(cells)

    @classmethod
    def identity(cls, order: int, dtype=object) -> "SquareMatrix":
        result = cls.zeros(order, dtype)
        for i in range(order):
            result._cells[i, i] = 1
        return result

    @property
    def order(self) -> int:
        return self._cells.shape[0]

    @property
    def dtype(self) -> np.dtype:
        return self._cells.dtype

    def table(self) -> list[list]:
        """Snapshot of the cells as a list of rows."""
        return self._cells.tolist()

    def copy(self) -> "SquareMatrix":
        return self._from_cells(self._cells.copy())

    # <--- OPERATIONS WITH MATRICES AND SCALARS --->

    def __add__(self, other) -> "SquareMatrix":
        if not isinstance(other, SquareMatrix):
            other = SquareMatrix.scalar(self.order, other)
        return self._from_cells(self._cells + other._cells)

    def __radd__(self, other) -> "SquareMatrix":
        return SquareMatrix.scalar(self.order, other) + self

    def __sub__(self, other) -> "SquareMatrix":
        if not isinstance(other, SquareMatrix):
            other = SquareMatrix.scalar(self.order, other)
        return self._from_cells(self._cells - other._cells)

    def __rsub__(self, other) -> "SquareMatrix":
        return SquareMatrix.scalar(self.order, other) - self

    def __neg__(self) -> "SquareMatrix":
        return self._from_cells(-self._cells)

    def __mul__(self, other) -> "SquareMatrix":
        if isinstance(other, SquareMatrix):
            return self._from_cells(_matmul(self._cells, other._cells))
        if _dtype_of(self._cells).kind == "O" or _dtype_of(other).kind == "O":
            return self._from_cells(_map_cells(self._cells, lambda c: c * other))
        return self._from_cells(self._cells * other)

    def __rmul__(self, other) -> "SquareMatrix":
        if _dtype_of(self._cells).kind == "O" or _dtype_of(other).kind == "O":
            return self._from_cells(_map_cells(self._cells, lambda c: other * c))
        return self._from_cells(other * self._cells)

    def __matmul__(self, other: "SquareMatrix") -> "SquareMatrix":
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        return self * other

    def __pow__(self, n: int) -> "SquareMatrix":
        return _power(self, n)

    def __iadd__(self, other) -> "SquareMatrix":
        self._cells = (self + other)._cells
        return self

    def __isub__(self, other) -> "SquareMatrix":
        self._cells = (self - other)._cells
        return self

    def __imul__(self, other) -> "SquareMatrix":
        self._cells = (self * other)._cells
        return self

    # <--- INTERFACE FUNCTIONS --->

    def __eq__(self, other) -> bool:
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        if self.order != other.order:
            return False
        return bool(np.all(self._cells == other._cells))

    __hash__ = None

    def __str__(self) -> str:
        return "\n".join(" ".join(str(v) for v in row) for row in self.table())

    def __repr__(self) -> str:
        return f"SquareMatrix({self.table()!r})"


@_power.register(SquareMatrix)
def _matrix_power(value: SquareMatrix, n: int) -> SquareMatrix:
    """Matrix overload of :func:`_power`; the identity matches the order and dtype of ``value``."""
    n = _check_exponent(n)
    return _square_and_multiply(SquareMatrix.identity(value.order, value.dtype), value, n)
