import typing
from fractions import Fraction

import sympy as sp

from polymat.algorithms.polynomial.polynomial import MultivariatePolynomial
from polymat.algorithms.utils.config import VARIABLE_NAMES
from polymat.algorithms.utils.exceptions import ConversionError


def _default_symbols(dimension: int) -> typing.Tuple[sp.Symbol, ...]:
    if dimension > len(VARIABLE_NAMES):
        raise ConversionError(
            f"No default symbols for {dimension} variables, pass {dimension} symbols explicitly."
        )
    return tuple(sp.symbols(VARIABLE_NAMES[:dimension]))


def _coefficient_from_sympy(value: sp.Expr):
    """Map sympy numbers to plain Python numbers, keep anything symbolic."""
    if value.is_Integer:
        return int(value)
    if value.is_Rational:
        return Fraction(int(value.p), int(value.q))
    if value.is_Float:
        return float(value)
    if value.is_number:
        return complex(value)
    return value


def polynomial_to_sympy(poly: MultivariatePolynomial, symbols: typing.Optional[typing.Sequence[sp.Symbol]] = None) -> sp.Expr:
    """
    Convert a polynomial to a sympy expression.
    symbols[i] stands for variable slot i; by default the rendering names
    (x, y, z, w, t, k) are used, so the dimension must not exceed six.
    """
    if symbols is None:
        symbols = _default_symbols(poly.dimension)
    if len(symbols) < poly.dimension:
        raise ConversionError(f"Expected {poly.dimension} symbols, but got {len(symbols)}.")

    expr = sp.Integer(0)
    for k, c in poly.coefficients.items():
        term = sp.sympify(c)
        for sym, exp in zip(symbols, k):
            term *= sym**exp
        expr += term
    return expr


def sympy_to_polynomial(expr: sp.Expr, symbols: typing.Sequence[sp.Symbol]) -> MultivariatePolynomial:
    """
    Convert a sympy expression into a polynomial with one slot per symbol.
    The expression must be a polynomial in symbols; any other free symbol ends
    up inside the coefficients. Zero coefficients are not stored.
    """
    if len(symbols) == 0:
        raise ConversionError("At least one symbol is required.")

    try:
        sp_poly = sp.Poly(expr, *symbols)
    except sp.PolynomialError as e:
        raise ConversionError(f"Could not convert {expr} to a polynomial in {tuple(symbols)}: {e}") from e

    terms = {}
    for monom, coeff in sp_poly.terms():
        if coeff == 0:
            continue
        terms[tuple(int(e) for e in monom)] = _coefficient_from_sympy(coeff)

    return MultivariatePolynomial.from_terms(terms, dimension=len(symbols))
