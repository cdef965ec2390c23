"""Pipeline entry: tokenize, convert to postfix, evaluate."""

import logging
from typing import Iterable

from .converter import to_rpn
from .evaluator import evaluate_rpn
from .tokenizer import parse
from .tokens import Token

logger = logging.getLogger(__name__)

SAMPLE_EXPRESSION = "3 + 5 * (10 - 4) / 2"


def calculate(expression: str) -> int:
    """Evaluate an infix arithmetic expression.

    The first ``CalculatorError`` raised by any stage propagates unchanged.
    """
    logger.debug(f"Calculating {expression!r}")
    tokens = parse(expression)
    postfix = to_rpn(tokens)
    return evaluate_rpn(postfix)


def format_tokens(tokens: Iterable[Token]) -> str:
    """Render tokens as space separated source text, e.g. ``12 3 +``."""
    return ' '.join(str(token) for token in tokens)
