"""Runtime settings read from the environment (and a ``.env`` file, if present).

Variables:
    CALC_LOG_LEVEL     logging level name, default WARNING
    CALC_HISTORY_FILE  REPL history file, default ~/.rpn_calc_history
    CALC_SHOW_RPN      print the postfix form in one-shot mode, default false
"""

import logging
import os
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, field_validator

DEFAULT_HISTORY_FILE = "~/.rpn_calc_history"

_ENV_FIELDS = {
    'log_level': 'CALC_LOG_LEVEL',
    'history_file': 'CALC_HISTORY_FILE',
    'show_rpn': 'CALC_SHOW_RPN',
}


class Settings(BaseModel):
    """Validated calculator settings."""
    log_level: str = Field(default="WARNING", description="Root logging level")
    history_file: str = Field(default=DEFAULT_HISTORY_FILE, validate_default=True, description="REPL history file")
    show_rpn: bool = Field(default=False, description="Print postfix form with each result")

    @field_validator('log_level')
    @classmethod
    def log_level_must_be_known(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator('history_file')
    @classmethod
    def expand_history_path(cls, v: str) -> str:
        if not v.strip():
            raise ValueError('History file cannot be empty')
        return os.path.expanduser(v.strip())


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build ``Settings`` from ``environ`` (defaults to ``os.environ`` after loading ``.env`` from the working directory).

    Raises:
        pydantic.ValidationError: if a variable holds an invalid value.
    """
    if environ is None:
        load_dotenv(find_dotenv(usecwd=True))
        environ = os.environ
    values = {
        field: environ[var]
        for field, var in _ENV_FIELDS.items()
        if environ.get(var)
    }
    return Settings(**values)
