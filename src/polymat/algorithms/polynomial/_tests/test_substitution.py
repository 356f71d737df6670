from fractions import Fraction

import numpy as np
import pytest
import sympy as sp

from polymat.algorithms.linalg.matrix import SquareMatrix
from polymat.algorithms.polynomial.polynomial import (MultivariatePolynomial,
                                                      variable)
from polymat.algorithms.utils.exceptions import ArityError, VariableIndexError
from polymat.algorithms.utils.power import _power

x = variable
A_POLY = 1 + x() * x(2) + x(2) * x(3) + x(3)


def test_substitute_scalar():
    p = x()
    for i in range(10, 101, 10):
        assert p(i).get_const() == i

    q = 1 + 2 * x() + _power(x(), 2)
    for i in range(-10, 11):
        assert q(i).get_const() == 1 + 2 * i + i * i


def test_substitute_self():
    q = 1 + 2 * x() + _power(x(), 2)
    q = q(q)
    assert q.to_string() == "4 + 8x + 8x^2 + 4x^3 + x^4"


def test_substitute_multivariate_step_by_step():
    a = A_POLY
    assert a.to_string() == "1 + z + yz + xy"

    assert a(1)(1, 1)(1, 2).get_const() == 4
    assert a(1)(13, 1)(53, 2).get_const() == 756


def test_substitute_polynomial_at_each_index():
    a = A_POLY
    assert a(1 + x(), 0).to_string() == "1 + z + y + yz + xy"
    assert a(1 + x(), 1).to_string() == "1 + 2z + x + xz + x^2"
    assert a(1 + x(), 2).to_string() == "2 + y + x + 2xy"


def test_substitute_out_of_range_index():
    with pytest.raises(VariableIndexError):
        A_POLY(1 + x(), 3)
    with pytest.raises(IndexError):
        A_POLY(5, 3)
    with pytest.raises(IndexError):
        x()(5, 1)
    with pytest.raises(IndexError):
        x()(5, -1)


def test_substitution_keeps_dimension_and_indices():
    a = A_POLY
    b = a(2, 0)
    assert b.dimension == 3
    assert all(k[0] == 0 for k in b.coefficients)
    # y and z keep their slots after x is bound
    assert b.coefficients == {(0, 0, 0): 1, (0, 0, 1): 1, (0, 1, 1): 1, (0, 1, 0): 2}
    # substituting into an inert slot changes nothing
    assert b(99, 0) == b


def test_substitute_higher_dimension_polynomial():
    p = _power(x(), 2) + 1
    r = p(x(3), 0)
    assert r.dimension == 3
    assert r.to_string() == "1 + z^2"


def test_substitute_does_not_mutate():
    a = A_POLY.copy()
    before = a.coefficients
    a(7, 1)
    a(1 + x(), 2)
    assert a.coefficients == before


def test_substitute_zero_polynomial():
    z = MultivariatePolynomial.from_terms({}, dimension=2)
    r = z(5, 1)
    assert r.dimension == 2
    assert r.coefficients == {}


def test_substitute_fraction():
    p = 3 * x() + 1
    r = p(Fraction(1, 3))
    assert r.get_const() == 2


def test_substitution_zero_to_zero_power():
    """x^0 terms stay untouched when x is bound to 0."""
    p = 5 + x()
    assert p(0).get_const() == 5


@pytest.mark.parametrize("value", [3, -2, 1 + x(2), x() * x(3) - 4])
@pytest.mark.parametrize("index", [0, 1, 2])
def test_substitution_is_linear(value, index):
    p = A_POLY
    q = _power(x(2) - 3, 2) + x(3) * x()
    assert (p + q)(value, index) == p(value, index) + q(value, index)


def test_clean_does_not_change_evaluation():
    p = 0 * x() + 1 + 0 * x(2) + 3 * x(2) * x(2)
    before = [p(v)(w, 1).get_const() for v in range(-3, 4) for w in range(-3, 4)]
    p.clean()
    after = [p(v)(w, 1).get_const() for v in range(-3, 4) for w in range(-3, 4)]
    assert before == after
    assert len(p.coefficients) == 2


def test_matrix_evaluation():
    p = 1 + x() + _power(x(), 2)
    a = SquareMatrix([[1, 1], [1, 1]])
    res_a = SquareMatrix([[4, 3], [3, 4]])
    assert p(a).table() == res_a.table()

    q = 5 + 10 * x() + _power(x(), 3)
    b = SquareMatrix([[1, 1, 1], [1, 1, 1], [2, 2, 2]])
    res_b = SquareMatrix([[31, 26, 26], [26, 31, 26], [52, 52, 57]])
    assert q(b).table() == res_b.table()
    assert q.evaluate(b) == res_b


def test_matrix_evaluation_matches_numpy():
    m = np.array([[2, -1, 0], [1, 3, 1], [0, 1, -2]])
    p = 7 - 2 * x() + 3 * _power(x(), 2) + _power(x(), 4)
    expected = (
        7 * np.eye(3, dtype=np.int64)
        - 2 * m
        + 3 * np.linalg.matrix_power(m, 2)
        + np.linalg.matrix_power(m, 4)
    )
    res = p(SquareMatrix(m))
    np.testing.assert_array_equal(np.array(res.table()), expected)


def test_matrix_evaluation_of_constant_and_zero():
    m = SquareMatrix([[1, 2], [3, 4]])
    assert MultivariatePolynomial(3)(m).table() == [[3, 0], [0, 3]]
    assert MultivariatePolynomial()(m).table() == [[0, 0], [0, 0]]
    assert x()(m) == m


def test_matrix_evaluation_with_fractions():
    p = Fraction(1, 2) * x() + Fraction(1, 4)
    m = SquareMatrix([[2, 0], [0, 4]])
    assert p(m).table() == [[Fraction(5, 4), 0], [0, Fraction(9, 4)]]


def test_matrix_evaluation_requires_one_variable():
    m = SquareMatrix([[1, 0], [0, 1]])
    with pytest.raises(ArityError):
        A_POLY(m)
    with pytest.raises(ValueError):
        (x() + x(2))(m)
    # a constant padded to two slots is still rejected
    with pytest.raises(ArityError):
        MultivariatePolynomial.from_terms({(0, 0): 1})(m)


def test_matrix_evaluation_keeps_integer_precision():
    p = _power(x(), 40)
    assert p(3).get_const() == 3 ** 40
    assert p(SquareMatrix([[3]])).table() == [[3 ** 40]]

    q = 1 + _power(x(), 70)
    assert q(SquareMatrix([[2, 0], [0, 1]])).table() == [[2 ** 70 + 1, 0], [0, 2]]


def test_substitute_sympy_numbers():
    p = 5 + x()
    assert p(sp.Integer(0)).get_const() == 5
    assert p(sp.Integer(1)).get_const() == 6
    assert (3 * _power(x(), 2))(sp.Rational(1, 2)).get_const() == sp.Rational(3, 4)
