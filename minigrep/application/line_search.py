# minigrep/application/line_search.py

from typing import Iterator, List, Tuple

from minigrep.domain.models import LineMatch


def search(query: str, contents: str) -> List[str]:
    """Every line of contents that contains query, in file order."""
    return [match.text for match in find_matches(query, contents)]


def search_case_insensitive(query: str, contents: str) -> List[str]:
    """
    Like search(), but query and lines are compared lowercased.
    The returned lines keep their original casing.
    """
    return [match.text for match in find_matches(query, contents, ignore_case=True)]


def find_matches(
    query: str,
    contents: str,
    ignore_case: bool = False,
) -> List[LineMatch]:
    """
    Locate the lines of contents containing query.

    Lines end at a newline (a carriage return right before it is dropped); other control
    characters such as form feeds stay inside the line. A trailing line
    break never yields an extra empty line. An empty query matches every
    line; empty contents match nothing.
    """
    needle = query.lower() if ignore_case else query
    matches: List[LineMatch] = []

    for line_number, start, end, line in _iter_lines(contents):
        haystack = line.lower() if ignore_case else line
        if needle in haystack:
            matches.append(LineMatch(
                line_number=line_number,
                start=start,
                end=end,
                text=line,
            ))

    return matches


def _iter_lines(contents: str) -> Iterator[Tuple[int, int, int, str]]:
    """Yield (line_number, start, end, line) with the line break stripped."""
    raw_lines = contents.split("\n")
    if raw_lines[-1] == "":
        raw_lines.pop()

    offset = 0
    for line_number, raw_line in enumerate(raw_lines, start=1):
        line = raw_line[:-1] if raw_line.endswith("\r") else raw_line
        yield line_number, offset, offset + len(line), line
        offset += len(raw_line) + 1
