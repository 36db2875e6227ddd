# minigrep/domain/models.py

from dataclasses import dataclass


@dataclass(frozen=True)
class Config:
    """
    Settings for a single search run, built once from the command line.
    """
    query: str
    file_path: str
    ignore_case: bool = False


@dataclass(frozen=True)
class LineMatch:
    """
    One matching line of the searched contents.

    start/end are character offsets of the line (without its line break)
    inside the contents that were searched, so contents[start:end] == text.
    """
    line_number: int
    start: int
    end: int
    text: str

    def __repr__(self) -> str:
        preview = self.text[:80]
        return (
            f"LineMatch(line={self.line_number}, "
            f"span=({self.start}, {self.end}), "
            f"text='{preview}')"
        )
