"""Helpers for exponent tuples (multi-indices).

A multi-index is a tuple of non-negative ints, one exponent per variable
slot. Tuples of different lengths are zero-padded on the right before they
are merged, so ``(1,)`` and ``(1, 0, 0)`` name the same monomial.
"""

from __future__ import annotations

from typing import Sequence, Tuple

from polymat.algorithms.utils.config import VARIABLE_NAMES
from polymat.algorithms.utils.exceptions import RenderError

MultiIndex = Tuple[int, ...]


def zero_multiindex(dimension: int) -> MultiIndex:
    """Key of the constant term in ``dimension`` variables."""
    return (0,) * dimension


def unit_multiindex(index: int, dimension: int) -> MultiIndex:
    """Key with exponent 1 at slot ``index`` (0-based) and 0 elsewhere."""
    k = [0] * dimension
    k[index] = 1
    return tuple(k)


def pad_multiindex(k: Sequence[int], dimension: int) -> MultiIndex:
    """Zero-pad ``k`` on the right to length ``dimension``."""
    return tuple(k) + (0,) * (dimension - len(k))


def add_multiindex(k1: Sequence[int], k2: Sequence[int], dimension: int) -> MultiIndex:
    """Position-wise sum of two multi-indices, padded to ``dimension``."""
    k = [0] * dimension
    for i, e in enumerate(k1):
        k[i] += e
    for i, e in enumerate(k2):
        k[i] += e
    return tuple(k)


def replace_exponent(k: Sequence[int], index: int, exponent: int) -> MultiIndex:
    k = list(k)
    k[index] = exponent
    return tuple(k)


def multiindex_degree(k: Sequence[int]) -> int:
    return sum(k)


def format_monomial(k: Sequence[int], names: Sequence[str] = VARIABLE_NAMES) -> str:
    """Render the variable part of a monomial, e.g. ``(2, 0, 1) -> "x^2z"``.

    Parameters
    ----------
    k : Sequence[int]
        Exponents per variable slot.
    names : Sequence[str], optional
        Name of each slot, defaults to :data:`VARIABLE_NAMES`.

    Returns
    -------
    str
        Empty for the constant monomial.

    Raises
    ------
    RenderError
        If a slot with a nonzero exponent has no name.
    """
    parts = []
    for i, e in enumerate(k):
        if e == 0:
            continue
        if i >= len(names):
            raise RenderError(
                f"Cannot name variable slot {i + 1}: only {len(names)} names available {tuple(names)}"
            )
        parts.append(names[i])
        if e > 1:
            parts.append(f"^{e}")
    return "".join(parts)
