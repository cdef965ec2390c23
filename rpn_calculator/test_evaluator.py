import pytest

from rpn_calculator.errors import DivisionByZeroError, InvalidExpressionError
from rpn_calculator.evaluator import evaluate_rpn
from rpn_calculator.tokens import Bracket, Number, Operator


def test_evaluate_addition():
    assert evaluate_rpn([Number(12), Number(3), Operator.ADD]) == 15


def test_evaluate_operand_order_for_sub_and_div():
    assert evaluate_rpn([Number(10), Number(4), Operator.SUB]) == 6
    assert evaluate_rpn([Number(20), Number(5), Operator.DIV]) == 4


def test_evaluate_single_number():
    assert evaluate_rpn([Number(7)]) == 7


def test_evaluate_integer_division_truncates():
    assert evaluate_rpn([Number(7), Number(2), Operator.DIV]) == 3


def test_evaluate_negative_division_truncates_toward_zero():
    tokens = [Number(1), Number(8), Operator.SUB, Number(2), Operator.DIV]
    assert evaluate_rpn(tokens) == -3


def test_evaluate_large_values_do_not_overflow():
    big = 2 ** 40
    assert evaluate_rpn([Number(big), Number(big), Operator.MUL]) == 2 ** 80


def test_evaluate_values_beyond_str_conversion_limit():
    big = 10 ** 3000
    assert evaluate_rpn([Number(big), Number(big), Operator.MUL]) == 10 ** 6000
    assert evaluate_rpn([Number(big), Number(1), Operator.SUB]) == big - 1


def test_evaluate_division_by_zero():
    with pytest.raises(DivisionByZeroError) as e:
        evaluate_rpn([Number(10), Number(0), Operator.DIV])
    assert "Division by zero" in str(e.value)


@pytest.mark.parametrize("tokens", [
    [],
    [Operator.ADD],
    [Number(1), Operator.ADD],
    [Number(1), Number(2)],
    [Bracket.OPEN],
    [Number(1), Bracket.OPEN],
])
def test_evaluate_invalid_expression(tokens):
    with pytest.raises(InvalidExpressionError):
        evaluate_rpn(tokens)


def test_evaluate_invalid_expression_message():
    with pytest.raises(InvalidExpressionError) as e:
        evaluate_rpn([Number(1), Operator.MUL])
    assert "not enough operands for '*'" in str(e.value)
