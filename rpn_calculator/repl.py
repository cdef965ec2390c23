"""Interactive REPL for the calculator, with history and a few colon commands."""

import logging
from typing import List, Optional, Tuple

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import FileHistory

from .calculator import calculate, format_tokens
from .config import Settings
from .converter import to_rpn
from .errors import CalculatorError
from .tokenizer import parse

logger = logging.getLogger(__name__)

HISTORY_LIMIT = 50

_COMMANDS = [':help', ':rpn', ':tokens', ':history', ':exit', ':quit']

HELP_TEXT = (
    "Integer calculator REPL.\n"
    "Supports non-negative integer literals, + - * / and parentheses.\n"
    "Precedence: * and / bind tighter than + and -; all operators are left-associative.\n"
    "Division truncates toward zero.\n"
    "Examples:\n"
    "  3 + 5 * (10 - 4) / 2 -> 18\n"
    "  10 - 4 - 3 -> 3\n"
    "  7 / 2 -> 3\n"
    "Commands:\n"
    "  :help, help         show this help\n"
    "  :rpn <expr>         show the postfix form of an expression\n"
    "  :tokens <expr>      show the tokens of an expression\n"
    "  :history            show recent history\n"
    "  :exit, :quit        exit (Ctrl-D also works)\n"
)


class REPL:
    """Read-Eval-Print Loop for the calculator."""

    PROMPT = '> '

    def __init__(self, settings: Optional[Settings] = None, session: Optional[PromptSession] = None):
        self.settings = settings or Settings()
        self.history_file = self.settings.history_file
        # created on first use so evaluate_line works without a terminal
        self.session = session

    def _get_session(self) -> PromptSession:
        if self.session is None:
            self.session = PromptSession(
                history=FileHistory(self.history_file),
                completer=WordCompleter(_COMMANDS, sentence=True),
            )
        return self.session

    def _process_command(self, line: str) -> Optional[str]:
        """Handle ``:command`` lines and bare ``help``. Returns None for expressions.

        Raises EOFError for exit commands so the loop can shut down.
        """
        s = line.strip()
        if s.lower() in {'exit', 'quit'}:
            raise EOFError()
        if s.lower() == 'help':
            return HELP_TEXT
        if not s.startswith(':'):
            return None
        body = s[1:].lstrip()
        if body == '':
            return "No command specified. Use :help for available commands."
        parts = body.split(None, 1)
        cmd = parts[0].lower()
        arg = parts[1] if len(parts) > 1 else ''
        return self._run_command(cmd, arg)

    def _run_command(self, cmd: str, arg: str) -> str:
        if cmd in {'exit', 'quit'}:
            raise EOFError()
        if cmd == 'help':
            return HELP_TEXT
        if cmd in {'rpn', 'tokens'}:
            if not arg:
                return f"Usage: :{cmd} <expression>"
            try:
                tokens = parse(arg)
                if cmd == 'rpn':
                    tokens = to_rpn(tokens)
            except CalculatorError as e:
                return f"Error: {e}"
            if cmd == 'tokens':
                return ', '.join(f"{type(t).__name__}({t})" for t in tokens)
            return format_tokens(tokens)
        if cmd == 'history':
            return "\n".join(self.recent_history()) or "(no history)"
        return f"Unknown command: :{cmd}"

    def recent_history(self) -> List[str]:
        """Return up to ``HISTORY_LIMIT`` history entries, oldest first."""
        try:
            entries = list(FileHistory(self.history_file).load_history_strings())
        except OSError as e:
            logger.warning(f"Could not read history file {self.history_file}: {e}")
            return []
        # load_history_strings yields newest first
        entries.reverse()
        return entries[-HISTORY_LIMIT:]

    def evaluate_line(self, line: str) -> Tuple[bool, str]:
        """Evaluate a single line (command or expression). Returns (ok, output)."""
        cmd_out = self._process_command(line)
        if cmd_out is not None:
            return True, cmd_out
        try:
            return True, str(calculate(line))
        except CalculatorError as e:
            logger.info(f"Expression {line!r} failed: {e}")
            return False, f"Error: {e}"
        except Exception as e:
            logger.exception(f"Unexpected failure evaluating {line!r}")
            return False, f"Unhandled error: {e}"

    def repl_loop(self) -> None:
        """Interactive loop; Ctrl-C discards the current line, Ctrl-D or :exit quits."""
        print("Integer calculator REPL. Type :help for help. Ctrl-D or :exit to quit.")
        session = self._get_session()
        while True:
            try:
                line = session.prompt(self.PROMPT)
            except KeyboardInterrupt:
                print("^C")
                continue
            except EOFError:
                print("Exiting.")
                break
            if not line.strip():
                continue
            try:
                _, out = self.evaluate_line(line)
            except EOFError:
                print("Exiting.")
                break
            print(out)
