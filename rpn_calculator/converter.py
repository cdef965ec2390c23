"""Infix to postfix conversion using the shunting-yard algorithm."""

import logging
from typing import Iterable, List

from .errors import MismatchedParensError
from .tokens import Bracket, Number, Operator, Token

logger = logging.getLogger(__name__)


def to_rpn(tokens: Iterable[Token], strict: bool = False) -> List[Token]:
    """Reorder infix ``tokens`` into postfix (Reverse Polish) order.

    Both operator groups are left-associative: an incoming operator pops every
    stacked operator of greater or equal precedence before being pushed.

    By default unmatched brackets are tolerated. A ``)`` that finds no ``(``
    on the stack stops popping silently, and a leftover ``(`` is flushed to
    the output where the evaluator will reject it. With ``strict=True`` both
    cases raise ``MismatchedParensError`` instead.
    """
    output: List[Token] = []
    stack: List[Token] = []

    for token in tokens:
        if isinstance(token, Number):
            output.append(token)
        elif isinstance(token, Operator):
            while stack and isinstance(stack[-1], Operator) \
                    and token.precedence <= stack[-1].precedence:
                output.append(stack.pop())
            stack.append(token)
        elif token is Bracket.OPEN:
            stack.append(token)
        elif token is Bracket.CLOSE:
            while stack:
                top = stack.pop()
                if top is Bracket.OPEN:
                    break
                output.append(top)
            else:
                if strict:
                    raise MismatchedParensError("Unmatched ')' in token sequence")
        # other token kinds are ignored

    while stack:
        top = stack.pop()
        if strict and top is Bracket.OPEN:
            raise MismatchedParensError("Unmatched '(' in token sequence")
        output.append(top)

    logger.debug(f"Postfix form has {len(output)} tokens")
    return output
