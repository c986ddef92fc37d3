import dataclasses

import pytest

from polypair.cases import CaseInput, iter_cases
from polypair.gpt_polynomial import Polynomial as GptPolynomial
from polypair.sonnet_polynomial import Polynomial as SonnetPolynomial


@pytest.fixture
def cases():
    return list(iter_cases())


def test_there_are_one_hundred_cases(cases):
    assert len(cases) == 100


def test_first_case_matches_source(cases):
    first = cases[0]
    assert first.degree1 == 10
    assert first.coeffs1 == (-7.0, -5.0, -13.0, 1.0, 5.0, 12.0, 2.0, -3.0, -14.0, -4.0, -9.0)
    assert first.degree2 == 9
    assert first.coeffs2 == (-10.0, -1.0, 7.0, -3.0, -12.0, -4.0, 12.0, 12.0, -8.0, 9.0)


def test_last_case_matches_source(cases):
    last = cases[-1]
    assert last.degree1 == 4
    assert last.coeffs1 == (12.0, 6.0, -4.0, -8.0, -8.0)
    assert last.degree2 == 5
    assert last.coeffs2 == (3.0, 10.0, 0.0, 4.0, -2.0, -2.0)


def test_constant_case_kept_as_single_coefficient(cases):
    assert cases[5].coeffs1 == (-11.0,)
    assert cases[45].coeffs1 == (11.0,)
    assert cases[45].coeffs2 == (9.0,)


def test_recorded_degree_is_kept_verbatim(cases):
    # The recorded degree for case 24 differs from its coefficient count.
    assert cases[23].degree1 == 6
    assert len(cases[23].coeffs1) == 9


def test_coefficients_are_floats(cases):
    for case in cases:
        for value in case.coeffs1 + case.coeffs2:
            assert isinstance(value, float)
            assert value == int(value)
            assert -15 <= value <= 15


def test_iteration_is_repeatable():
    first_pass = list(iter_cases())
    second_pass = list(iter_cases())
    assert len(second_pass) == 100
    assert second_pass[0].coeffs1 == (
        -7.0, -5.0, -13.0, 1.0, 5.0, 12.0, 2.0, -3.0, -14.0, -4.0, -9.0
    )
    assert second_pass[-1].coeffs2 == (3.0, 10.0, 0.0, 4.0, -2.0, -2.0)
    assert first_pass == second_pass


def test_case_is_immutable(cases):
    with pytest.raises(dataclasses.FrozenInstanceError):
        cases[0].degree1 = 3
    assert cases[0].degree1 == 10


def test_case_input_converts_to_float_tuple():
    case = CaseInput(1, [2, 3], 0, [4])
    assert case.coeffs1 == (2.0, 3.0)
    assert case.coeffs2 == (4.0,)


def test_first_case_sum_and_difference():
    first = next(iter_cases())
    p1 = GptPolynomial(first.coeffs1)
    p2 = GptPolynomial(first.coeffs2)
    assert p1 + p2 == GptPolynomial([-17, -6, -6, -2, -7, 8, 14, 9, -22, 5, -9])
    assert p1 - p2 == GptPolynomial([3, -4, -20, 4, 17, 16, -10, -15, -6, -13, -9])


def test_first_case_product():
    first = next(iter_cases())
    product = GptPolynomial(first.coeffs1) * GptPolynomial(first.coeffs2)
    assert product == GptPolynomial(
        [70, 57, 86, -11, -43, 9, 92, -7, -103, -304, 64, 130, 266, 68, 12,
         -138, -71, -202, 36, -81]
    )


def test_first_case_degree_evaluation_derivative_integral():
    first = next(iter_cases())
    p1 = GptPolynomial(first.coeffs1)
    assert p1.degree() == 10
    assert p1.evaluate(2) == pytest.approx(-14701)
    assert p1.derivative() == GptPolynomial([-5, -26, 3, 20, 60, 12, -21, -112, -36, -90])
    assert p1.definite_integral(0, 1) == pytest.approx(-372733.0 / 27720.0, abs=1e-9)


def test_first_case_with_trimming_polynomial():
    first = next(iter_cases())
    p1 = SonnetPolynomial(first.coeffs1)
    p2 = SonnetPolynomial(first.coeffs2)
    assert p1 + p2 == SonnetPolynomial([-17, -6, -6, -2, -7, 8, 14, 9, -22, 5, -9])
    assert p1.degree() == first.degree1
    assert p2.degree() == first.degree2