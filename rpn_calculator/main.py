"""Command-line entry point.

Evaluates the expressions given as arguments (or a sample expression when none
are given) and prints ``Result: <value>`` or ``Error: <description>`` for each.
``--interactive`` starts the REPL instead.
"""

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from .calculator import SAMPLE_EXPRESSION, calculate, format_tokens
from .config import Settings, load_settings
from .converter import to_rpn
from .errors import CalculatorError
from .repl import REPL
from .tokenizer import parse

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_EVAL_ERROR = 1
EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rpn-calc",
        description="Evaluate integer arithmetic expressions with + - * / and parentheses.",
    )
    parser.add_argument(
        "expression",
        nargs="*",
        help=f"Expression(s) to evaluate. Defaults to {SAMPLE_EXPRESSION!r}.",
    )
    parser.add_argument(
        "--rpn",
        action="store_true",
        help="Also print the postfix (Reverse Polish) form of each expression.",
    )
    parser.add_argument(
        "-i", "--interactive",
        action="store_true",
        help="Start the interactive REPL.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        help="Logging level (overrides CALC_LOG_LEVEL).",
    )
    return parser


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,
    )


def run_expression(expression: str, show_rpn: bool = False) -> bool:
    """Evaluate one expression and print the outcome. Returns True on success."""
    try:
        if show_rpn:
            print(f"RPN: {format_tokens(to_rpn(parse(expression)))}")
        result = calculate(expression)
    except CalculatorError as e:
        logger.info(f"Failed to evaluate {expression!r}: {e}")
        print(f"Error: {e}")
        return False
    print(f"Result: {result}")
    return True


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.interactive and args.expression:
        parser.error("expressions cannot be combined with --interactive")

    try:
        settings = load_settings()
        if args.log_level:
            settings = Settings(**{**settings.model_dump(), 'log_level': args.log_level})
    except ValidationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    configure_logging(settings.log_level)
    # results are unbounded ints and are printed in full
    sys.set_int_max_str_digits(0)

    if args.interactive:
        REPL(settings).repl_loop()
        return EXIT_OK

    expressions = args.expression or [SAMPLE_EXPRESSION]
    show_rpn = args.rpn or settings.show_rpn
    ok = True
    for expression in expressions:
        ok = run_expression(expression, show_rpn) and ok
    return EXIT_OK if ok else EXIT_EVAL_ERROR


if __name__ == '__main__':
    sys.exit(main())
