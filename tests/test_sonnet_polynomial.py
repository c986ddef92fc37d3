import math

import pytest

from polypair.sonnet_polynomial import Polynomial

P1 = [-7, -5, -13, 1, 5, 12, 2, -3, -14, -4, -9]
P2 = [-10, -1, 7, -3, -12, -4, 12, 12, -8, 9]


@pytest.fixture
def p1():
    return Polynomial(P1)


@pytest.fixture
def p2():
    return Polynomial(P2)


def test_sum(p1, p2):
    assert p1 + p2 == Polynomial([-17, -6, -6, -2, -7, 8, 14, 9, -22, 5, -9])


def test_subtraction(p1, p2):
    assert p1 - p2 == Polynomial([3, -4, -20, 4, 17, 16, -10, -15, -6, -13, -9])


def test_product(p1, p2):
    expected = Polynomial(
        [70, 57, 86, -11, -43, 9, 92, -7, -103, -304, 64, 130, 266, 68, 12,
         -138, -71, -202, 36, -81]
    )
    assert p1 * p2 == expected


def test_degree(p1):
    assert p1.degree() == 10


def test_evaluate(p1):
    assert p1.evaluate(2) == -14701


def test_derivative(p1):
    assert p1.derivative() == Polynomial([-5, -26, 3, 20, 60, 12, -21, -112, -36, -90])


def test_definite_integral(p1):
    assert p1.definite_integral(0, 1) == pytest.approx(-372733.0 / 27720.0, abs=1e-9)


def test_trailing_zeros_are_trimmed():
    assert Polynomial([1, 2, 0, 0]) == Polynomial([1, 2])
    assert Polynomial([0]) == Polynomial()


def test_zero_polynomial_degree():
    assert Polynomial().degree() == -1
    assert (Polynomial([3, 1]) - Polynomial([3, 1])).degree() == -1


def test_coefficient_lookup(p2):
    assert [p2.coefficient(i) for i in range(len(P2))] == P2
    assert p2.coefficient(-1) == 0
    assert p2.coefficient(len(P2)) == 0


def test_derivative_of_constant_is_zero():
    assert Polynomial([5]).derivative() == Polynomial()


def test_integral_of_zero_is_zero():
    assert Polynomial().integral() == Polynomial()


def test_integral_then_derivative_recovers(p2):
    back = p2.integral().derivative()
    assert back.degree() == p2.degree()
    for i in range(len(P2)):
        assert back.coefficient(i) == pytest.approx(P2[i])


def test_multiply_by_zero_polynomial():
    assert Polynomial([1, 2, 3]) * Polynomial() == Polynomial()


def test_compose_matches_nested_evaluation():
    p = Polynomial([1, -2, 3])
    q = Polynomial([2, 1, -1])
    composed = p.compose(q)
    for x in (-2.0, -0.5, 0.0, 1.5, 3.0):
        assert composed.evaluate(x) == pytest.approx(p.evaluate(q.evaluate(x)))


def test_deflate_times_factor_gives_original():
    cubic = Polynomial([-6, 11, -6, 1])
    quotient = cubic.deflate(1.0)
    assert quotient.degree() == 2
    assert quotient * Polynomial([-1, 1]) == cubic


def test_deflate_zero_polynomial():
    assert Polynomial().deflate(2.0) == Polynomial()


def test_deflate_constant_raises():
    with pytest.raises(ValueError):
        Polynomial([4]).deflate(1.0)


def test_get_root_newton():
    p = Polynomial([-2, 0, 1])
    assert p.get_root(1.0, 1e-12, 100) == pytest.approx(math.sqrt(2))


def test_get_root_returns_guess_without_convergence():
    assert Polynomial([1, 0, 1]).get_root(0.5, 1e-9, 50) == 0.5
    assert Polynomial([7]).get_root(3.0, 1e-9, 50) == 3.0


def test_get_roots_linear_reports_root_for_each_other_start():
    roots = Polynomial([-2, 1]).get_roots(1e-6, 50)
    assert len(roots) == 20
    assert all(r == 2.0 for r in roots)


def test_get_roots_quadratic_roots_are_zeros():
    p = Polynomial([2, -3, 1])
    roots = p.get_roots(1e-6, 50)
    assert roots
    assert all(abs(p.evaluate(r)) < 1e-6 for r in roots)
    assert {round(r, 6) for r in roots} <= {1.0, 2.0}


def test_to_string():
    assert Polynomial([1, -2, 3]).to_string() == "3x^2 + -2x + 1"


def test_to_string_without_constant_term():
    assert str(Polynomial([0, 1])) == "1x + "


def test_str_matches_to_string(p1):
    assert str(p1) == p1.to_string()
    assert str(Polynomial()) == ""