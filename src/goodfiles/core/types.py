import os
from enum import Enum, auto

DEFAULT_PERMISSIONS = 0o666  #: Permission bits for newly created files, before the umask applies
DEFAULT_BUFSIZE = 64 * 1024  #: Buffer size of the readers and writers handed out by File


class CreateMode(Enum):
    """Whether a file gets created when it is opened."""

    CREATE_NEW = auto()
    """Create the file, fail with FileExistsError if it already exists"""

    IF_NOT_EXISTS = auto()
    """Create the file if it is missing, open it as is otherwise"""

    NEVER = auto()
    """Never create, fail with FileNotFoundError if the file is missing"""

    def as_flags(self) -> int:
        """Returns the ``os.open`` creation flags for this mode."""

        if self is CreateMode.CREATE_NEW:
            return os.O_CREAT | os.O_EXCL
        elif self is CreateMode.IF_NOT_EXISTS:
            return os.O_CREAT
        return 0


class WriteOption(Enum):
    """How writes to an opened file are positioned."""

    APPEND = auto()
    """Every write goes to the end of the file, enforced by the kernel"""

    OVERWRITE = auto()
    """Writes start at the beginning, bytes past the written range are kept"""

    TRUNCATE = auto()
    """The file is emptied on open, before anything is written"""

    def as_flags(self) -> int:
        """Returns the ``os.open`` flags for this option, not including the access mode."""

        if self is WriteOption.APPEND:
            return os.O_APPEND
        elif self is WriteOption.TRUNCATE:
            return os.O_TRUNC
        return 0
