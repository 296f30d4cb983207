"""File opening utilities."""

import logging
import os
from typing import BinaryIO, Optional, Union

from ..core.types import DEFAULT_PERMISSIONS, CreateMode, WriteOption
from ..exceptions import InvalidModeError

logger = logging.getLogger(__name__)

# Windows opens descriptors in text mode unless told otherwise
_O_BINARY = getattr(os, 'O_BINARY', 0)

# Letter combinations accepted by FileOpener.from_mode, '+' and 'b' are handled separately
_MODE_LETTERS = {
    frozenset('r'): (CreateMode.NEVER, None),
    frozenset('w'): (CreateMode.IF_NOT_EXISTS, WriteOption.TRUNCATE),
    frozenset('x'): (CreateMode.CREATE_NEW, WriteOption.OVERWRITE),
    frozenset('a'): (CreateMode.IF_NOT_EXISTS, WriteOption.APPEND),
    frozenset('ax'): (CreateMode.CREATE_NEW, WriteOption.APPEND),
}


class FileOpener:
    """Describes how a file is opened: creation, read access and write positioning.

    The value is immutable and translates deterministically into the flags of ``os.open``.
    Five canonical openers are available as factories (:meth:`appending`, :meth:`truncate`,
    :meth:`overwrite`, :meth:`append_or_create` and :meth:`readonly`), but any combination can be
    constructed directly. No combination is rejected here, the operating system decides whether
    it makes sense when the file is actually opened.

    Args:
        create_mode: whether the file may or must be created on open
        readable: whether reading from the opened file is allowed
        write_option: how writes are positioned, or None to open without write access
    """

    __slots__ = ('_create_mode', '_readable', '_write_option')

    def __init__(
        self,
        create_mode: CreateMode,
        readable: bool,
        write_option: Optional[WriteOption] = None,
    ):
        self._create_mode = create_mode
        self._readable = bool(readable)
        self._write_option = write_option

    @classmethod
    def appending(cls) -> 'FileOpener':
        """Open for appending, fail if the file does not exist."""
        return cls(CreateMode.NEVER, False, WriteOption.APPEND)

    @classmethod
    def truncate(cls) -> 'FileOpener':
        """Open for writing, creating the file if needed. The content is truncated."""
        return cls(CreateMode.IF_NOT_EXISTS, False, WriteOption.TRUNCATE)

    @classmethod
    def overwrite(cls) -> 'FileOpener':
        """Open for writing, creating the file if needed. The content is overwritten in place."""
        return cls(CreateMode.IF_NOT_EXISTS, False, WriteOption.OVERWRITE)

    @classmethod
    def append_or_create(cls) -> 'FileOpener':
        """Open for appending, creating the file if needed. The content is preserved."""
        return cls(CreateMode.IF_NOT_EXISTS, False, WriteOption.APPEND)

    @classmethod
    def readonly(cls) -> 'FileOpener':
        """Open for reading, fail if the file does not exist."""
        return cls(CreateMode.NEVER, True, None)

    @classmethod
    def from_mode(cls, mode: str) -> 'FileOpener':
        """Build an opener from a mode string as accepted by the builtin ``open()``.

        Supported modes are 'r', 'w', 'x', 'a' and 'ax', each optionally followed by '+' for
        read/write access and 'b' (which is implied, all handles are binary).
        The 'ax' variants combine exclusive creation with kernel-enforced appending, which the
        builtin ``open()`` cannot express.

        Args:
            mode: the mode string, e.g. 'rb', 'a+', 'ax+b'

        Returns:
            The equivalent FileOpener.

        Raises:
            InvalidModeError: if the string contains unknown, repeated or conflicting characters.
        """
        if 't' in mode:
            raise InvalidModeError(mode, 'text mode is not supported, files are opened as binary')
        unknown = set(mode) - set('rwxab+')
        if unknown:
            raise InvalidModeError(mode, f'unknown characters {"".join(sorted(unknown))!r}')
        if len(set(mode)) != len(mode):
            raise InvalidModeError(mode, 'repeated characters')

        letters = frozenset(mode) - {'+', 'b'}
        try:
            create_mode, write_option = _MODE_LETTERS[letters]
        except KeyError:
            raise InvalidModeError(mode, "must contain one of 'r', 'w', 'x', 'a' or 'ax'") from None

        updating = '+' in mode
        if letters == {'r'}:
            # 'r+' reads and writes in place, plain 'r' only reads
            return cls(create_mode, True, WriteOption.OVERWRITE if updating else None)
        return cls(create_mode, updating, write_option)

    @property
    def create_mode(self) -> CreateMode:
        return self._create_mode

    @property
    def readable(self) -> bool:
        return self._readable

    @property
    def write_option(self) -> Optional[WriteOption]:
        return self._write_option

    @property
    def flags(self) -> int:
        """The flags to pass to ``os.open``."""
        flags = self._create_mode.as_flags() | _O_BINARY
        if self._write_option is None:
            return flags | os.O_RDONLY
        flags |= self._write_option.as_flags()
        return flags | (os.O_RDWR if self._readable else os.O_WRONLY)

    @property
    def fdopen_mode(self) -> str:
        """The binary mode string to wrap the raw descriptor with, via ``os.fdopen``."""
        if self._write_option is None:
            return 'rb'
        if self._write_option is WriteOption.APPEND:
            return 'a+b' if self._readable else 'ab'
        return 'r+b' if self._readable else 'wb'

    def open(self, path: Union[str, os.PathLike], buffering: int = -1) -> BinaryIO:
        """Open the file at `path` as a binary file object.

        Args:
            path: path to the file
            buffering: buffer size as for the builtin ``open()``, -1 selects the default

        Returns:
            A buffered binary file object owning the new descriptor. The caller closes it.

        Raises:
            OSError: whatever ``os.open`` raises, e.g. FileNotFoundError or FileExistsError.
        """
        logger.debug('Opening %s with %r', path, self)
        fd = os.open(path, self.flags, DEFAULT_PERMISSIONS)
        try:
            return os.fdopen(fd, self.fdopen_mode, buffering)
        except BaseException:
            os.close(fd)
            raise

    def __eq__(self, other):
        if not isinstance(other, FileOpener):
            return NotImplemented
        return self._as_tuple() == other._as_tuple()

    def __hash__(self):
        return hash(self._as_tuple())

    def __repr__(self):
        write_option = self._write_option.name if self._write_option else None
        return (
            f'FileOpener({self._create_mode.name}, readable={self._readable}, '
            f'write_option={write_option})'
        )

    def _as_tuple(self):
        return self._create_mode, self._readable, self._write_option
