""" Public API for the :mod:`~polymat.algorithms` package.
"""

from .linalg.matrix import SquareMatrix
from .polynomial.conversion import polynomial_to_sympy, sympy_to_polynomial
from .polynomial.polynomial import MultivariatePolynomial, variable
from .utils.power import _power as power

__all__ = [
    "MultivariatePolynomial",
    "SquareMatrix",
    "variable",
    "power",
    "polynomial_to_sympy",
    "sympy_to_polynomial",
]
