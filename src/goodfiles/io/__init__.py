"""I/O utilities for goodfiles."""

from .open import FileOpener

__all__ = ['FileOpener']
