"""High-level convenience functions."""

import os
from typing import BinaryIO, Union

from .core.file import File
from .io.open import FileOpener


def open(path: Union[str, os.PathLike], mode: Union[str, FileOpener] = 'rb') -> BinaryIO:
    """Open a file as a binary file object.

    Args:
        path: Path to the file.
        mode: A :class:`FileOpener`, or a mode string: 'r' (read), 'r+' (read-write in place),
            'w'/'w+' (truncate or create), 'x'/'x+' (exclusive create), 'a'/'a+' (append or
            create), 'ax'/'ax+' (exclusive create, kernel-enforced append). 'b' is optional.

    Returns:
        The open file object. The caller closes it.
    """
    return File(path).open_with(mode)
