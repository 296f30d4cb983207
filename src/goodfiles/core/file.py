import functools
import io
import logging
import os
import pathlib
from typing import Any, BinaryIO, Union

from ..core.types import DEFAULT_BUFSIZE
from ..io.open import FileOpener

logger = logging.getLogger(__name__)

# Path API reachable through File by delegation. Only queries and pure path arithmetic,
# anything writing to the file system goes through File's own methods.
_DELEGATED_PATH_ATTRIBUTES = frozenset(
    [
        'anchor',
        'drive',
        'name',
        'parent',
        'parents',
        'parts',
        'root',
        'stem',
        'suffix',
        'suffixes',
        'absolute',
        'as_posix',
        'as_uri',
        'exists',
        'expanduser',
        'is_absolute',
        'is_dir',
        'is_file',
        'is_relative_to',
        'is_symlink',
        'joinpath',
        'lstat',
        'match',
        'relative_to',
        'resolve',
        'samefile',
        'stat',
        'with_name',
        'with_stem',
        'with_suffix',
    ]
)


@functools.total_ordering
class File:
    """A path to a file, with convenient whole-file I/O operations.

    Despite its name, a ``File`` is closer to :class:`pathlib.Path` than to an open file object.
    It holds no descriptor: every operation opens the file, does its work and closes it again
    before returning, on success as well as on error. Errors from the file system propagate
    unchanged.

    Equality, ordering and hashing are those of the wrapped path, and the read-only part of the
    :class:`pathlib.Path` API (``name``, ``suffix``, ``parent``, ``exists()``, ``stat()``, ...) is
    available directly on the ``File``. ``File`` is :class:`os.PathLike`, so it can be passed
    anywhere a path is accepted.

    Every write (:meth:`append`, :meth:`overwrite`, :meth:`truncate`, :meth:`write_all_with`) is
    flushed and synced to the storage device with ``os.fsync`` before the method returns.

    Args:
        path: the path of the file, anything accepted by ``os.fspath``. Defaults to the empty
            path.
    """

    __slots__ = ('_path',)

    def __init__(self, path: Union[str, os.PathLike] = ''):
        self._path = pathlib.Path(path)

    @property
    def path(self) -> pathlib.Path:
        """The wrapped path."""
        return self._path

    # Opening
    def open_with(self, opener: Union[FileOpener, str, Any]) -> BinaryIO:
        """Open the file and hand the file object to the caller.

        Args:
            opener: a :class:`FileOpener`, a mode string understood by
                :meth:`FileOpener.from_mode`, or any object with an ``open(path)`` method.

        Returns:
            The opened binary file object. The caller is responsible for closing it.

        Raises:
            FileNotFoundError: if the file is missing and the opener never creates.
            FileExistsError: if the file exists and the opener requires creating it.
            InvalidModeError: if `opener` is a malformed mode string.
        """
        return _as_opener(opener).open(self._path)

    def create_if_absent(self) -> None:
        """Create the file as empty if it does not exist yet, leave it untouched otherwise."""
        with self.open_with(FileOpener.append_or_create()):
            pass

    def buf_reader(self, bufsize: int = DEFAULT_BUFSIZE) -> io.BufferedReader:
        """Open the file read-only and return a buffered reader. The caller closes it.

        Raises:
            ValueError: if `bufsize` is not positive. Unbuffered access goes through
                :meth:`open_with` with an opener of your own.
        """
        _check_bufsize(bufsize)
        return FileOpener.readonly().open(self._path, bufsize)

    def buf_writer(
        self, opener: Union[FileOpener, str, Any], bufsize: int = DEFAULT_BUFSIZE
    ) -> BinaryIO:
        """Open the file with `opener` and return a buffered writer. The caller closes it.

        `opener` is anything :meth:`open_with` accepts. `bufsize` applies to FileOpener and mode
        strings, a custom opener decides on buffering itself. Unlike :meth:`write_all_with`,
        nothing is synced to disk when the writer is closed.

        Raises:
            ValueError: if `bufsize` is not positive.
        """
        _check_bufsize(bufsize)
        opener = _as_opener(opener)
        if isinstance(opener, FileOpener):
            return opener.open(self._path, bufsize)
        return opener.open(self._path)

    # Reading
    def read_all(self) -> bytes:
        """Read the whole file.

        Raises:
            FileNotFoundError: if the file does not exist.
            OSError: on any other read error. Bytes read before the error are discarded.
        """
        with self.buf_reader() as f:
            return f.read()

    def read_string(self, encoding: str = 'utf-8', errors: str = 'strict') -> str:
        """Read the whole file and decode it as text.

        Args:
            encoding: the text encoding of the file
            errors: error handling scheme, as in :meth:`bytes.decode`

        Raises:
            UnicodeDecodeError: if the content is not valid in the given encoding.
            OSError: if reading fails.
        """
        return self.read_all().decode(encoding, errors)

    # Writing
    def append(self, buf: bytes) -> None:
        """Append `buf` to the end of the file. The file must exist, it is never created."""
        self.write_all_with(buf, FileOpener.appending())

    def overwrite(self, buf: bytes) -> None:
        """Write `buf` at the start of the file, creating it if needed.

        Existing bytes past ``len(buf)`` are left in place.
        """
        self.write_all_with(buf, FileOpener.overwrite())

    def truncate(self, buf: bytes) -> None:
        """Replace the content of the file with `buf`, creating it if needed."""
        self.write_all_with(buf, FileOpener.truncate())

    def write_all_with(self, buf: bytes, opener: Union[FileOpener, str, Any]) -> None:
        """Open the file with `opener`, write all of `buf` and sync it to the storage device.

        `opener` is anything :meth:`open_with` accepts. There are no retries. The first error,
        from opening, writing or syncing, propagates.
        """
        with self.buf_writer(opener) as f:
            view = memoryview(buf).cast('B')
            # unbuffered handles from custom openers may write less than asked
            while view:
                view = view[f.write(view) :]
            f.flush()
            os.fsync(f.fileno())
        logger.debug('Wrote and synced %d bytes to %s', len(buf), self._path)

    # Path-like behavior
    def __fspath__(self) -> str:
        return os.fspath(self._path)

    def __truediv__(self, other: Union[str, os.PathLike]) -> 'File':
        return File(self._path / other)

    def __getattr__(self, name):
        if name in _DELEGATED_PATH_ATTRIBUTES:
            return getattr(self._path, name)
        raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")

    def __eq__(self, other):
        if not isinstance(other, File):
            return NotImplemented
        return self._path == other._path

    def __lt__(self, other):
        if not isinstance(other, File):
            return NotImplemented
        return self._path < other._path

    def __hash__(self):
        return hash(self._path)

    def __reduce__(self):
        return File, (self._path,)

    def __repr__(self):
        return f'File({str(self._path)!r})'

    def __str__(self):
        return str(self._path)


def _as_opener(opener):
    """Turn a mode string into a FileOpener, pass openers and custom opener objects through."""
    if isinstance(opener, str):
        return FileOpener.from_mode(opener)
    return opener


def _check_bufsize(bufsize):
    if bufsize < 1:
        raise ValueError(f'bufsize must be positive, got {bufsize}')
