"""Exceptions raised by the calculator pipeline."""


class CalculatorError(Exception):
    """Base class for calculator errors."""
    pass


class BadTokenError(CalculatorError):
    """Raised when the tokenizer meets a character it does not recognize."""

    def __init__(self, character: str):
        self.character = character
        super().__init__(f"Bad token: {character!r}")


class MismatchedParensError(CalculatorError):
    """Raised when brackets are unbalanced or improperly nested."""

    def __init__(self, message: str = "Mismatched parentheses"):
        super().__init__(message)


class DivisionByZeroError(CalculatorError):
    """Raised when the right operand of a division is zero."""

    def __init__(self, message: str = "Division by zero"):
        super().__init__(message)


class InvalidExpressionError(CalculatorError):
    """Raised when a postfix sequence does not reduce to exactly one value."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid expression: {reason}")
