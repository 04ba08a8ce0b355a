import math

import numpy as np
import pandas as pd
import pytest

from core import (
    EvaluationError, MalformedExpressionError, RPNEvaluator, TOKEN_DEFINITIONS,
    evaluate, make_number, to_postfix, tokenize
)


def postfix_of(expression):
    return to_postfix(tokenize(expression))


def test_precedence_multiply_before_add():
    assert evaluate(postfix_of("2+3*4"), 0.0) == 14.0


def test_power_is_right_associative():
    assert evaluate(postfix_of("2^3^2"), 0.0) == 512.0


def test_subtract_and_divide_are_left_associative():
    assert evaluate(postfix_of("10-4-3"), 0.0) == 3.0
    assert evaluate(postfix_of("8/4/2"), 0.0) == 1.0


def test_operand_order_for_subtraction():
    # "a b -" -> a - b
    postfix = (make_number(7), make_number(2), TOKEN_DEFINITIONS['-'])
    assert evaluate(postfix, 0.0) == 5.0


@pytest.mark.parametrize("expression, x, expected", [
    ("4x", 2.5, 10.0),
    ("(x+1)(x+2)", 3.0, 20.0),
    ("x^2", -3.0, 9.0),
    ("2x^2+3x+1", 2.0, 15.0),
    ("4sin(x)^2", 0.0, 0.0),
])
def test_polynomials(expression, x, expected):
    assert evaluate(postfix_of(expression), x) == pytest.approx(expected)


@pytest.mark.parametrize("expression, x, expected", [
    ("sin(x)", math.pi / 2, 1.0),
    ("cos(x)", 0.0, 1.0),
    ("tan(x)", math.pi / 4, 1.0),
    ("ln(x)", math.e, 1.0),
    ("exp(x)", 1.0, math.e),
    ("log(x)", 1000.0, 3.0),
    ("ln(exp(x))", 2.0, 2.0),
    ("sin(x)^2+cos(x)^2", 0.7, 1.0),
])
def test_functions(expression, x, expected):
    assert evaluate(postfix_of(expression), x) == pytest.approx(expected)


def test_result_is_a_python_float():
    assert type(evaluate(postfix_of("x+1"), 1)) is float


@pytest.mark.parametrize("x", [-3.0, 0.0, 1.5, 1e6])
def test_constant_expression_ignores_x(x):
    postfix = postfix_of("3*4+sin(2)")
    assert evaluate(postfix, x) == evaluate(postfix, 0.0)


def test_evaluation_is_idempotent():
    postfix = postfix_of("sin(x)^2+ln(x)/3")
    first = evaluate(postfix, 0.7)
    second = evaluate(postfix, 0.7)
    assert first == second
    assert np.float64(first).tobytes() == np.float64(second).tobytes()


def test_division_by_zero_gives_infinity():
    assert evaluate(postfix_of("1/x"), 0.0) == math.inf
    assert evaluate(postfix_of("0-1/x"), 0.0) == -math.inf
    assert math.isnan(evaluate(postfix_of("0/x"), 0.0))


def test_log_of_non_positive_values():
    assert evaluate(postfix_of("ln(x)"), 0.0) == -math.inf
    assert math.isnan(evaluate(postfix_of("ln(x)"), -1.0))
    assert evaluate(postfix_of("log(x)"), 0.0) == -math.inf


def test_negative_base_fractional_power_is_nan():
    assert math.isnan(evaluate(postfix_of("(0-8)^0.5"), 0.0))
    assert evaluate(postfix_of("x^(0-1)"), 0.0) == math.inf


def test_overflow_gives_infinity():
    assert evaluate(postfix_of("exp(x)"), 1000.0) == math.inf


@pytest.mark.parametrize("expression", ["+", "-x", "sin()", "x(2)", "", "2 3"])
def test_malformed_expressions(expression):
    with pytest.raises(MalformedExpressionError):
        evaluate(postfix_of(expression), 1.0)


def test_malformed_is_an_evaluation_error():
    with pytest.raises(EvaluationError):
        evaluate(postfix_of("*"), 1.0)


def test_brackets_in_postfix_are_rejected():
    with pytest.raises(MalformedExpressionError):
        evaluate((TOKEN_DEFINITIONS['('],), 0.0)


def test_evaluate_many_matches_pointwise():
    postfix = postfix_of("x^2 - 3x + sin(x)")
    xs = np.linspace(-2.0, 2.0, 9)
    series = RPNEvaluator.evaluate_many(postfix, xs)

    assert isinstance(series, pd.Series)
    assert series.index.name == 'x'
    assert list(series.index) == list(xs)
    expected = [evaluate(postfix, x) for x in xs]
    np.testing.assert_allclose(series.values, expected)


def test_evaluate_many_broadcasts_constants():
    series = RPNEvaluator.evaluate_many(postfix_of("2^3"), [0.0, 1.0, 2.0])
    assert list(series.values) == [8.0, 8.0, 8.0]


def test_evaluate_many_keeps_ieee_values():
    series = RPNEvaluator.evaluate_many(postfix_of("1/x"), [0.0, 2.0])
    assert series.iloc[0] == math.inf
    assert series.iloc[1] == 0.5
