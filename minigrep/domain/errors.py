# minigrep/domain/errors.py


class MinigrepError(Exception):
    """Base class for every failure a search run can report."""


class ArgumentError(MinigrepError):
    """The command line could not be turned into a Config."""


class InsufficientArgumentsError(ArgumentError):

    def __init__(self, message: str = "not enough arguments"):
        super().__init__(message)


class InvalidFlagError(ArgumentError):

    def __init__(self, flag: str):
        super().__init__(f"invalid argument flag: '{flag}'")
        self.flag = flag


class FileReadError(MinigrepError):
    """
    The file named in the Config could not be read as text.
    Raised by the content source; the driver reports it unchanged.
    """

    def __init__(self, file_path: str, reason: str):
        super().__init__(f"could not read '{file_path}': {reason}")
        self.file_path = file_path
        self.reason = reason
