"""Exceptions raised by goodfiles itself.

Errors coming from the file system (``FileNotFoundError``, ``FileExistsError``,
``PermissionError`` and other ``OSError`` subclasses) are never wrapped, they reach the caller
exactly as the platform raised them. The classes below only cover misuse of the library's own
API.
"""


class GoodFilesError(Exception):
    """Base class for all exceptions in goodfiles"""

    def __init__(self, message: str):
        super().__init__(message)


class InvalidModeError(GoodFilesError, ValueError):
    """Exception raised when a mode string cannot be turned into a :class:`FileOpener`.

    Inherits from ValueError, like the builtin ``open()`` does for bad modes.

    Args:
        mode: the rejected mode string
        reason: short description of what is wrong with it
    """

    def __init__(self, mode: str, reason: str):
        super().__init__(f'Invalid mode {mode!r}: {reason}')
        self.mode = mode
