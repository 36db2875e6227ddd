# main.py

import logging
import sys
from typing import Optional, Sequence

from minigrep.application.search_service import LineSearchService
from minigrep.domain.errors import ArgumentError, MinigrepError
from minigrep.infrastructure.environment import get_ignore_case_default, get_log_level
from minigrep.infrastructure.file_reader import FileContentSource
from minigrep.infrastructure.logging_setup import configure_logging
from minigrep.interface.arg_parser import parse_arguments, usage
from minigrep.interface.cli import display_error, display_matches, display_usage


EXIT_SUCCESS = 0
EXIT_FAILURE = 1

logger = logging.getLogger("minigrep.main")


def main(argv: Optional[Sequence[str]] = None) -> int:
    tokens = list(sys.argv if argv is None else argv)
    configure_logging(get_log_level())

    # ── 1. Parse the command line ────────────────────────────────────────────
    try:
        config = parse_arguments(tokens, ignore_case_default=get_ignore_case_default())
    except ArgumentError as error:
        display_error(f"Problem parsing arguments: {error}")
        display_usage(usage(tokens))
        return EXIT_FAILURE

    logger.debug("[Main] %r", config)

    # ── 2. Read and search ───────────────────────────────────────────────────
    search_service = LineSearchService(content_source=FileContentSource())

    try:
        matches = search_service.run(config)
    except MinigrepError as error:
        display_error(f"Application error: {error}")
        return EXIT_FAILURE

    # ── 3. Print every match, only once the whole file has been searched ────
    display_matches(matches)
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
