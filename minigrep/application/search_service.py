# minigrep/application/search_service.py

import logging
from typing import List

from minigrep.application.line_search import find_matches
from minigrep.domain.interfaces import ContentSourcePort
from minigrep.domain.models import Config, LineMatch


logger = logging.getLogger(__name__)


class LineSearchService:
    """
    Core use case: find every line of one file that contains the query.

    The whole file is read before searching and the complete match list is
    returned, so callers either print every result or, on error, none.
    Printing and exit codes belong to main.py (composition root).
    """

    def __init__(self, content_source: ContentSourcePort):
        self._content_source = content_source

    def run(self, config: Config) -> List[LineMatch]:
        contents = self._content_source.read_text(config.file_path)
        logger.debug(
            "[SearchService] Read %d characters from %s",
            len(contents),
            config.file_path,
        )

        matches = find_matches(config.query, contents, ignore_case=config.ignore_case)
        logger.debug(
            "[SearchService] %d line(s) matched %r (ignore_case=%s)",
            len(matches),
            config.query,
            config.ignore_case,
        )
        return matches
