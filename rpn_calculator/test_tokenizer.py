import pytest

from rpn_calculator.errors import BadTokenError, MismatchedParensError
from rpn_calculator.tokenizer import parse
from rpn_calculator.tokens import Bracket, Number, Operator


def test_parse_simple_expression():
    assert parse("1 + 2") == [Number(1), Operator.ADD, Number(2)]


def test_parse_multi_digit_number_is_single_token():
    tokens = parse("123")
    assert tokens == [Number(123)]


def test_parse_all_operators_and_brackets():
    assert parse("(1-2)*3/4") == [
        Bracket.OPEN, Number(1), Operator.SUB, Number(2), Bracket.CLOSE,
        Operator.MUL, Number(3), Operator.DIV, Number(4),
    ]


def test_parse_skips_spaces_and_newlines():
    assert parse(" 12 +\n3 ") == [Number(12), Operator.ADD, Number(3)]


def test_parse_digits_separated_by_space_fold_together():
    # whitespace emits no token, so the second digit extends the number
    assert parse("1 2") == [Number(12)]


def test_parse_empty_string():
    assert parse("") == []


def test_parse_nested_brackets():
    tokens = parse("((7))")
    assert tokens == [Bracket.OPEN, Bracket.OPEN, Number(7), Bracket.CLOSE, Bracket.CLOSE]


@pytest.mark.parametrize("text,bad", [
    ("3 & 4", '&'),
    ("1.5", '.'),
    ("x + 1", 'x'),
    ("1\t+ 2", '\t'),
])
def test_parse_bad_token(text, bad):
    with pytest.raises(BadTokenError) as e:
        parse(text)
    assert e.value.character == bad
    assert "Bad token" in str(e.value)


@pytest.mark.parametrize("text", ["(1 + 2", "1 + 2)", ")(", "((1)", "(()"])
def test_parse_mismatched_parens(text):
    with pytest.raises(MismatchedParensError):
        parse(text)


def test_parse_reports_first_error():
    # the stray ')' is seen before the bad character
    with pytest.raises(MismatchedParensError):
        parse(") &")
