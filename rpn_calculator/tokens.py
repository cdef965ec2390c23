"""Token types produced by the tokenizer and consumed by the converter and evaluator.

A token is exactly one of:

- ``Number``: an unsigned integer literal
- ``Operator``: one of ``+ - * /``
- ``Bracket``: ``(`` or ``)``

Enum members are tokens themselves, so ``Operator.ADD`` can be placed directly
in a token list.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union


@dataclass(frozen=True)
class Number:
    """An integer literal accumulated from a run of digits."""
    value: int

    def __str__(self) -> str:
        return str(self.value)


class Operator(Enum):
    ADD = '+'
    SUB = '-'
    MUL = '*'
    DIV = '/'

    @property
    def precedence(self) -> int:
        """Binding strength: multiplicative operators bind tighter than additive ones."""
        return _PRECEDENCE[self]

    def __str__(self) -> str:
        return self.value


class Bracket(Enum):
    OPEN = '('
    CLOSE = ')'

    def __str__(self) -> str:
        return self.value


_PRECEDENCE = {
    Operator.ADD: 1,
    Operator.SUB: 1,
    Operator.MUL: 2,
    Operator.DIV: 2,
}

Token = Union[Number, Operator, Bracket]
