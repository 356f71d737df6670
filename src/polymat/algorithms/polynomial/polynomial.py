"""Sparse multivariate polynomials over an arbitrary coefficient ring.

Terms are stored in a dict mapping multi-indices (exponent tuples, see
:mod:`polymat.algorithms.polynomial.base`) to coefficients. Every key has
exactly ``dimension`` entries; whenever two polynomials of different
dimension meet, the smaller one is zero-padded on the right.

Coefficients only need ``+``, ``-``, ``*`` and comparison with ``0``.
Rendering additionally needs ``<`` against ``0`` and ``abs``.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Sequence

from polymat.algorithms.linalg.matrix import SquareMatrix
from polymat.algorithms.polynomial.base import (MultiIndex, add_multiindex,
                                                format_monomial,
                                                multiindex_degree,
                                                pad_multiindex,
                                                replace_exponent,
                                                unit_multiindex,
                                                zero_multiindex)
from polymat.algorithms.utils.exceptions import (ArityError,
                                                 VariableIndexError)
from polymat.algorithms.utils.power import _power
from polymat.utils.log_config import logger


def _add_term(terms: Dict[MultiIndex, Any], key: MultiIndex, value) -> None:
    if key in terms:
        terms[key] = terms[key] + value
    else:
        terms[key] = value


def _sub_term(terms: Dict[MultiIndex, Any], key: MultiIndex, value) -> None:
    if key in terms:
        terms[key] = terms[key] - value
    else:
        terms[key] = -value


class MultivariatePolynomial:
    """Polynomial in ``dimension`` variables with sparse storage.

    Parameters
    ----------
    value : Any, optional
        Constant term. When omitted the polynomial is zero and stores no
        terms.

    Notes
    -----
    Objects behave as values: operators return new polynomials and only the
    in-place operators (``+=``, ``-=``, ``*=``) and :meth:`clean` mutate the
    receiver. Anything that is not a polynomial is treated as a scalar.
    """

    # keep numpy scalars from broadcasting over polynomials
    __array_ufunc__ = None

    def __init__(self, value=None):
        self._dimension = 1
        self._coefficients: Dict[MultiIndex, Any] = {}
        if value is not None:
            self._coefficients[zero_multiindex(1)] = value

    @classmethod
    def _from_terms(cls, terms: Dict[MultiIndex, Any], dimension: int) -> "MultivariatePolynomial":
        obj = cls.__new__(cls)
        obj._dimension = dimension
        obj._coefficients = terms
        return obj

    @classmethod
    def from_terms(cls, terms: Mapping[Sequence[int], Any], dimension: Optional[int] = None) -> "MultivariatePolynomial":
        """Build a polynomial from a mapping of exponent tuples to coefficients.

        Keys may have different lengths; they are padded to the longest one
        (or to ``dimension`` when that is larger) and coefficients of
        colliding keys are summed.
        """
        dimension = max([dimension or 1] + [len(k) for k in terms])
        coefficients: Dict[MultiIndex, Any] = {}
        for k, c in terms.items():
            if any(e < 0 for e in k):
                raise ValueError(f"Exponents must be non-negative, got {tuple(k)}")
            _add_term(coefficients, pad_multiindex(k, dimension), c)
        return cls._from_terms(coefficients, dimension)

    @classmethod
    def variable(cls, index: int = 1) -> "MultivariatePolynomial":
        """Return the ``index``-th variable (1-based) with coefficient ``1``."""
        if index < 1:
            raise ValueError(f"Variable index must be at least 1, got {index}")
        return cls._from_terms({unit_multiindex(index - 1, index): 1}, index)

    def copy(self) -> "MultivariatePolynomial":
        return self._from_terms(dict(self._coefficients), self._dimension)

    # <--- INTERFACE FUNCTIONS --->

    @property
    def dimension(self) -> int:
        return self._dimension

    @property
    def coefficients(self) -> Dict[MultiIndex, Any]:
        """Snapshot of the stored terms in ascending multi-index order."""
        return {k: self._coefficients[k] for k in sorted(self._coefficients)}

    @property
    def degree(self) -> int:
        """Largest total degree among nonzero terms, ``-1`` for zero."""
        degrees = [multiindex_degree(k) for k, c in self._coefficients.items() if not c == 0]
        return max(degrees, default=-1)

    def get_const(self):
        """Coefficient of the constant monomial, zero when it is not stored."""
        key = zero_multiindex(self._dimension)
        if key in self._coefficients:
            return self._coefficients[key]
        if self._coefficients:
            c = next(iter(self._coefficients.values()))
            return c - c
        return 0

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._dimension:
            raise VariableIndexError(
                f"This polynomial has {self._dimension} dimensions, got variable index {index}"
            )

    def _pad_to(self, dimension: int) -> None:
        if dimension > self._dimension:
            self._coefficients = {
                pad_multiindex(k, dimension): c for k, c in self._coefficients.items()
            }
            self._dimension = dimension

    def _absorb(self, other: "MultivariatePolynomial", subtract: bool = False) -> None:
        """In-place ``self += other`` (or ``-=``) growing the dimension as needed."""
        dimension = max(self._dimension, other._dimension)
        self._pad_to(dimension)
        accumulate = _sub_term if subtract else _add_term
        for k, c in list(other._coefficients.items()):
            accumulate(self._coefficients, pad_multiindex(k, dimension), c)

    def _convolve(self, other: "MultivariatePolynomial") -> "MultivariatePolynomial":
        dimension = max(self._dimension, other._dimension)
        terms: Dict[MultiIndex, Any] = {}
        for k1, c1 in self._coefficients.items():
            for k2, c2 in other._coefficients.items():
                _add_term(terms, add_multiindex(k1, k2, dimension), c1 * c2)
        return self._from_terms(terms, dimension)

    # <--- OPERATIONS WITH CONSTANTS AND POLYNOMIALS --->

    def __iadd__(self, other) -> "MultivariatePolynomial":
        if isinstance(other, MultivariatePolynomial):
            self._absorb(other)
        else:
            _add_term(self._coefficients, zero_multiindex(self._dimension), other)
        return self

    def __isub__(self, other) -> "MultivariatePolynomial":
        if isinstance(other, MultivariatePolynomial):
            self._absorb(other, subtract=True)
        else:
            _sub_term(self._coefficients, zero_multiindex(self._dimension), other)
        return self

    def __imul__(self, other) -> "MultivariatePolynomial":
        if isinstance(other, MultivariatePolynomial):
            product = self._convolve(other)
            self._dimension = product._dimension
            self._coefficients = product._coefficients
        else:
            for k in self._coefficients:
                self._coefficients[k] = self._coefficients[k] * other
        return self

    def __add__(self, other) -> "MultivariatePolynomial":
        result = self.copy()
        result += other
        return result

    def __radd__(self, other) -> "MultivariatePolynomial":
        return self + other

    def __sub__(self, other) -> "MultivariatePolynomial":
        result = self.copy()
        result -= other
        return result

    def __rsub__(self, other) -> "MultivariatePolynomial":
        return -self + other

    def __mul__(self, other) -> "MultivariatePolynomial":
        if isinstance(other, MultivariatePolynomial):
            return self._convolve(other)
        result = self.copy()
        result *= other
        return result

    def __rmul__(self, other) -> "MultivariatePolynomial":
        terms = {k: other * c for k, c in self._coefficients.items()}
        return self._from_terms(terms, self._dimension)

    def __neg__(self) -> "MultivariatePolynomial":
        terms = {k: -c for k, c in self._coefficients.items()}
        return self._from_terms(terms, self._dimension)

    def __pow__(self, n: int) -> "MultivariatePolynomial":
        return _power(self, n)

    # <--- SUBSTITUTION --->

    def evaluate(self, value, index: int = 0):
        """Substitute ``value`` for the variable at slot ``index`` (0-based).

        Parameters
        ----------
        value : Any
            A scalar, another :class:`MultivariatePolynomial`, or a
            :class:`SquareMatrix`. Polynomials are fully re-expanded.
        index : int, default 0
            Slot to bind. Ignored for matrix arguments.

        Returns
        -------
        MultivariatePolynomial or SquareMatrix
            For scalars and polynomials, a polynomial of the same dimension
            whose slot ``index`` only carries exponent 0. For a matrix, the
            matrix ``sum(c * value ** e)``.

        Raises
        ------
        VariableIndexError
            If ``index`` is outside ``[0, dimension)``.
        ArityError
            If ``value`` is a matrix and the polynomial has more than one
            variable.
        """
        if isinstance(value, SquareMatrix):
            return self._evaluate_matrix(value)

        self._check_index(index)
        logger.debug(f"Substituting slot {index} in {len(self._coefficients)} terms")

        result = self._from_terms({}, self._dimension)
        for k, c in self._coefficients.items():
            term = self._from_terms({replace_exponent(k, index, 0): c}, self._dimension)
            term *= _power(value, k[index])
            result += term
        return result

    def _evaluate_matrix(self, matrix: SquareMatrix) -> SquareMatrix:
        if self._dimension > 1:
            raise ArityError(
                f"Matrix evaluation works only for 1-dimension polynomials, this one has {self._dimension}"
            )
        logger.debug(f"Evaluating {len(self._coefficients)} terms at a matrix of order {matrix.order}")

        result = SquareMatrix.zeros(matrix.order, matrix.dtype)
        for k, c in self._coefficients.items():
            result += _power(matrix, k[0]) * c
        return result

    def __call__(self, value, index: int = 0):
        return self.evaluate(value, index)

    def differentiate(self, index: int) -> "MultivariatePolynomial":
        """Partial derivative with respect to slot ``index`` (0-based)."""
        self._check_index(index)
        terms: Dict[MultiIndex, Any] = {}
        for k, c in self._coefficients.items():
            exp = k[index]
            if exp == 0:
                continue
            _add_term(terms, replace_exponent(k, index, exp - 1), c * exp)
        return self._from_terms(terms, self._dimension)

    def clean(self, tol: Optional[float] = None) -> None:
        """Remove zero terms in place.

        Parameters
        ----------
        tol : float, optional
            When given, drop terms with ``abs(c) <= tol`` instead of exact
            zeros.
        """
        before = len(self._coefficients)
        if tol is None:
            self._coefficients = {k: c for k, c in self._coefficients.items() if not c == 0}
        else:
            self._coefficients = {k: c for k, c in self._coefficients.items() if abs(c) > tol}
        logger.debug(f"Removed {before - len(self._coefficients)} of {before} terms")

    # <--- COMPARISON AND RENDERING --->

    def _normalized(self, dimension: int) -> Dict[MultiIndex, Any]:
        return {
            pad_multiindex(k, dimension): c
            for k, c in self._coefficients.items() if not c == 0
        }

    def __eq__(self, other) -> bool:
        if not isinstance(other, MultivariatePolynomial):
            other = self._from_terms({zero_multiindex(1): other}, 1)
        dimension = max(self._dimension, other._dimension)
        return self._normalized(dimension) == other._normalized(dimension)

    __hash__ = None

    def to_string(self) -> str:
        """Render terms in ascending multi-index order, e.g. ``"1 + 6x + 9x^2"``.

        The first term shows its signed coefficient; later terms are joined
        with ``" + "``/``" - "`` and omit a coefficient of magnitude 1. Zero
        terms are printed until :meth:`clean` removes them.

        Raises
        ------
        RenderError
            If a variable beyond the rendering alphabet appears.
        """
        if not self._coefficients:
            return "0"

        parts = []
        for pos, k in enumerate(sorted(self._coefficients)):
            c = self._coefficients[k]
            monomial = format_monomial(k)
            if pos == 0:
                parts.append(f"{c}{monomial}")
                continue
            sign = " - " if c < 0 else " + "
            magnitude = abs(c)
            if magnitude == 1:
                parts.append(f"{sign}{monomial}")
            else:
                parts.append(f"{sign}{magnitude}{monomial}")
        return "".join(parts)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"MultivariatePolynomial(dimension={self._dimension}, coefficients={self.coefficients!r})"


def variable(index: int = 1) -> MultivariatePolynomial:
    """Shorthand for :meth:`MultivariatePolynomial.variable`."""
    return MultivariatePolynomial.variable(index)
