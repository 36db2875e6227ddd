# minigrep/domain/interfaces.py

from abc import ABC, abstractmethod


class ContentSourcePort(ABC):
    """
    Port for whatever supplies the text to search.
    Kept to a single call so the search service can be tested without disk I/O.
    """

    @abstractmethod
    def read_text(self, file_path: str) -> str:
        """
        Return the whole contents of file_path as text.
        Raises FileReadError when the contents cannot be produced.
        """
        ...
