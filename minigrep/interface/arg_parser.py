# minigrep/interface/arg_parser.py

from typing import List, Sequence, Tuple

from minigrep.domain.errors import InsufficientArgumentsError, InvalidFlagError
from minigrep.domain.models import Config


USAGE = "{program} [-i] <query> <file_path>"

# Positional slots in the token stream. Slot 0 is the program name as
# supplied in sys.argv; callers passing their own tokens must include it.
PROGRAM_SLOT = 0
QUERY_SLOT = 1
FILE_PATH_SLOT = 2
MIN_TOKENS = FILE_PATH_SLOT + 1


def parse_arguments(tokens: Sequence[str], ignore_case_default: bool = False) -> Config:
    """
    Build a Config from a raw token stream such as sys.argv.

    Any token starting with '-' is an option token: each of its characters
    other than '-' is one flag, so "-i", "--i" and "-ii" all mean ignore case.
    Only 'i' is recognized. Remaining tokens are positional and read as
    program name, query, file path; extra positionals are ignored.

    ignore_case_default comes from the IGNORE_CASE environment variable and
    can only be switched on here, never off.
    """
    if len(tokens) < MIN_TOKENS:
        raise InsufficientArgumentsError()

    flags, positionals = _partition(tokens)

    ignore_case = ignore_case_default
    for flag in flags:
        if flag == "i":
            ignore_case = True
        else:
            raise InvalidFlagError(flag)

    # Option tokens may have eaten the query or the file path
    if len(positionals) < MIN_TOKENS:
        raise InsufficientArgumentsError()

    return Config(
        query=positionals[QUERY_SLOT],
        file_path=positionals[FILE_PATH_SLOT],
        ignore_case=ignore_case,
    )


def usage(tokens: Sequence[str]) -> str:
    program = tokens[PROGRAM_SLOT] if tokens else "minigrep"
    return USAGE.format(program=program)


def _partition(tokens: Sequence[str]) -> Tuple[List[str], List[str]]:
    flags: List[str] = []
    positionals: List[str] = []

    for token in tokens:
        if token.startswith("-"):
            flags.extend(char for char in token if char != "-")
        else:
            positionals.append(token)

    return flags, positionals
