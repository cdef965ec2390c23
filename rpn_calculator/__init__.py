"""Integer arithmetic calculator built on a tokenize / shunting-yard / RPN pipeline."""

from .calculator import SAMPLE_EXPRESSION, calculate, format_tokens
from .converter import to_rpn
from .errors import (
    BadTokenError,
    CalculatorError,
    DivisionByZeroError,
    InvalidExpressionError,
    MismatchedParensError,
)
from .evaluator import evaluate_rpn
from .tokenizer import parse
from .tokens import Bracket, Number, Operator, Token

__all__ = [
    'SAMPLE_EXPRESSION',
    'BadTokenError',
    'Bracket',
    'CalculatorError',
    'DivisionByZeroError',
    'InvalidExpressionError',
    'MismatchedParensError',
    'Number',
    'Operator',
    'Token',
    'calculate',
    'evaluate_rpn',
    'format_tokens',
    'parse',
    'to_rpn',
]
