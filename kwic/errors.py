"""Exceptions raised by the loader; the engine itself never fails."""

from __future__ import annotations


class KwicError(Exception):
    """Base class for every error this package raises."""


class EmptyInputError(KwicError):
    def __init__(self, path: str | None = None):
        self.path = path
        where = f": {path}" if path else ""
        super().__init__(f"Input text is empty{where}")


class KwicIOError(KwicError):
    """A file could not be read or written.  The original error is in `cause`."""

    def __init__(self, path: str, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"IO error on {path}: {cause}")
