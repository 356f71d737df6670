"""Ring-generic exponentiation by squaring.

Provide :func:`_power`, a single-dispatch generic that raises any value
supporting ``*`` to a non-negative integer power. The default overload builds
its identity as ``type(value)(1)``; types whose identity depends on the value
(square matrices need an identity of matching order) register their own
overload with :func:`_power.register`. sympy expressions use ``sp.Integer(1)``.
"""

from __future__ import annotations

from functools import singledispatch

import sympy as sp


def _check_exponent(n: int) -> int:
    n = int(n)
    if n < 0:
        raise ValueError(f"Exponent must be non-negative, got {n}")
    return n


def _square_and_multiply(result, base, n: int):
    """Binary exponentiation loop shared by every overload."""
    while n > 0:
        if n % 2 == 1:
            result = result * base
        base = base * base
        n //= 2
    return result


@singledispatch
def _power(value, n: int):
    """Return ``value ** n`` in O(log n) ring multiplications.

    Parameters
    ----------
    value : Any
        Element of a ring; ``type(value)(1)`` must build its multiplicative
        identity.
    n : int
        Non-negative exponent. ``n == 0`` gives the identity, also for the
        zero element.

    Returns
    -------
    Any
        ``value`` multiplied by itself ``n`` times.

    Raises
    ------
    ValueError
        If ``n`` is negative.
    """
    n = _check_exponent(n)
    return _square_and_multiply(type(value)(1), value, n)


@_power.register(sp.Basic)
def _symbolic_power(value: sp.Basic, n: int) -> sp.Basic:
    """sympy overload of :func:`_power`.

    Singleton numbers (``Zero``, ``One``, ``Half``, ...) cannot be built from
    their own type, so the identity is always ``sp.Integer(1)``.
    """
    n = _check_exponent(n)
    return _square_and_multiply(sp.Integer(1), value, n)
