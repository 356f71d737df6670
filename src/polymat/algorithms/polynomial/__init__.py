"""Sparse multivariate polynomials and their sympy conversion."""

from .conversion import polynomial_to_sympy, sympy_to_polynomial
from .polynomial import MultivariatePolynomial, variable

__all__ = [
    "MultivariatePolynomial",
    "variable",
    "polynomial_to_sympy",
    "sympy_to_polynomial",
]
