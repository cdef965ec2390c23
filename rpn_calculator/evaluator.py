"""Postfix evaluator: reduces an RPN token list to a single integer."""

import logging
from typing import Callable, Dict, Iterable, List

from .errors import DivisionByZeroError, InvalidExpressionError
from .tokens import Number, Operator, Token

logger = logging.getLogger(__name__)


def _truncating_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    if b == 0:
        raise DivisionByZeroError()
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


_APPLY: Dict[Operator, Callable[[int, int], int]] = {
    Operator.ADD: lambda a, b: a + b,
    Operator.SUB: lambda a, b: a - b,
    Operator.MUL: lambda a, b: a * b,
    Operator.DIV: _truncating_div,
}


def evaluate_rpn(tokens: Iterable[Token]) -> int:
    """Evaluate a postfix token sequence.

    Values are Python ints, so sums and products do not overflow and a
    subtraction may go negative. Division truncates toward zero.

    Raises:
        DivisionByZeroError: if a division has a zero right operand.
        InvalidExpressionError: if an operator lacks operands, a bracket
            reaches the evaluator, or the sequence does not leave exactly one
            value.
    """
    stack: List[int] = []

    for token in tokens:
        if isinstance(token, Number):
            stack.append(token.value)
        elif isinstance(token, Operator):
            if len(stack) < 2:
                raise InvalidExpressionError(f"not enough operands for '{token}'")
            b = stack.pop()
            a = stack.pop()
            stack.append(_APPLY[token](a, b))
        else:
            raise InvalidExpressionError(f"unexpected token '{token}'")

    if len(stack) != 1:
        raise InvalidExpressionError(f"expected one value, found {len(stack)}")

    logger.debug("Evaluation finished")
    return stack[0]
