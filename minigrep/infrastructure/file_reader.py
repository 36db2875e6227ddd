# minigrep/infrastructure/file_reader.py

import logging
from pathlib import Path

from minigrep.domain.errors import FileReadError
from minigrep.domain.interfaces import ContentSourcePort


logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"


class FileContentSource(ContentSourcePort):
    """Reads the file to search from the local filesystem, all at once."""

    def __init__(self, encoding: str = DEFAULT_ENCODING):
        self._encoding = encoding

    def read_text(self, file_path: str) -> str:
        path = Path(file_path)
        try:
            text = path.read_text(encoding=self._encoding)
        except FileNotFoundError as error:
            raise FileReadError(file_path, "no such file") from error
        except IsADirectoryError as error:
            raise FileReadError(file_path, "is a directory") from error
        except PermissionError as error:
            raise FileReadError(file_path, "permission denied") from error
        except UnicodeDecodeError as error:
            raise FileReadError(file_path, f"not valid {self._encoding} text") from error
        except OSError as error:
            raise FileReadError(file_path, error.strerror or str(error)) from error

        logger.debug("[FileContentSource] Loaded %s (%d characters)", path.name, len(text))
        return text
