# minigrep/infrastructure/environment.py
# Read once at the process boundary; everything downstream takes plain values.

import logging
import os
from typing import Mapping, Optional


IGNORE_CASE_VARIABLE = "IGNORE_CASE"
LOG_LEVEL_VARIABLE = "MINIGREP_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def get_ignore_case_default(environ: Optional[Mapping[str, str]] = None) -> bool:
    """True when IGNORE_CASE is set at all. Its value is never inspected."""
    if environ is None:
        environ = os.environ
    return IGNORE_CASE_VARIABLE in environ


def get_log_level(environ: Optional[Mapping[str, str]] = None) -> str:
    """Get log level name from env, falling back to WARNING for unknown names"""
    if environ is None:
        environ = os.environ
    level = environ.get(LOG_LEVEL_VARIABLE, DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        return DEFAULT_LOG_LEVEL
    return level
