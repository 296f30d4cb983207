"""Whole-file reads and durable writes behind a small, typed path wrapper."""

try:
    from ._version import version as __version__
except ImportError:
    __version__ = "0.0.0.dev0"

# Core classes
from .core.file import File
from .io.open import FileOpener

# Data types
from .core.types import (
    CreateMode,
    WriteOption,
    DEFAULT_BUFSIZE,
    DEFAULT_PERMISSIONS,
)

# Exceptions
from .exceptions import (
    GoodFilesError,
    InvalidModeError,
)

# Convenience API
from ._api import open

__all__ = [
    # Version
    "__version__",
    # Core classes
    "File",
    "FileOpener",
    # Data types
    "CreateMode",
    "WriteOption",
    "DEFAULT_BUFSIZE",
    "DEFAULT_PERMISSIONS",
    # Exceptions
    "GoodFilesError",
    "InvalidModeError",
    # Convenience API
    "open",
]
