"""Tokenizer: turns raw expression text into a list of tokens.

Recognized characters are the digits ``0``-``9``, the operators ``+ - * /``,
the brackets ``(`` and ``)``, space and newline. Bracket balance is checked
while scanning, so every token list returned here is balanced.
"""

import logging
from typing import Dict, List

from .errors import BadTokenError, MismatchedParensError
from .tokens import Bracket, Number, Operator, Token

logger = logging.getLogger(__name__)

_OPERATORS: Dict[str, Operator] = {op.value: op for op in Operator}
_WHITESPACE = {' ', '\n'}


def parse(expression: str) -> List[Token]:
    """Tokenize ``expression``.

    A digit directly following a ``Number`` token is folded into it, so digit
    runs become a single ``Number``. Whitespace emits nothing, which means
    ``"1 2"`` yields ``Number(12)``.

    Raises:
        BadTokenError: on any unrecognized character.
        MismatchedParensError: on a ``)`` without a matching ``(`` or an
            unclosed ``(`` at the end of input.
    """
    tokens: List[Token] = []
    parens: List[Bracket] = []

    for ch in expression:
        if '0' <= ch <= '9':
            digit = ord(ch) - ord('0')
            if tokens and isinstance(tokens[-1], Number):
                tokens[-1] = Number(tokens[-1].value * 10 + digit)
            else:
                tokens.append(Number(digit))
        elif ch == '(':
            tokens.append(Bracket.OPEN)
            parens.append(Bracket.OPEN)
        elif ch == ')':
            tokens.append(Bracket.CLOSE)
            if not parens:
                raise MismatchedParensError()
            parens.pop()
        elif ch in _OPERATORS:
            tokens.append(_OPERATORS[ch])
        elif ch in _WHITESPACE:
            continue
        else:
            raise BadTokenError(ch)

    if parens:
        raise MismatchedParensError()

    logger.debug(f"Tokenized {expression!r} into {len(tokens)} tokens")
    return tokens
