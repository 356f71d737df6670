"""Multivariate polynomials over arbitrary coefficient rings, with
evaluation at scalars, polynomials and square matrices.
"""

from .algorithms import (MultivariatePolynomial, SquareMatrix,
                         polynomial_to_sympy, power, sympy_to_polynomial,
                         variable)
from .algorithms.utils.exceptions import (ArityError, ConversionError,
                                          PolymatError, RenderError,
                                          VariableIndexError)

Polynomial = MultivariatePolynomial
Pow = power

__all__ = [
    "MultivariatePolynomial",
    "Polynomial",
    "SquareMatrix",
    "variable",
    "power",
    "Pow",
    "polynomial_to_sympy",
    "sympy_to_polynomial",
    "PolymatError",
    "VariableIndexError",
    "ArityError",
    "RenderError",
    "ConversionError",
]
