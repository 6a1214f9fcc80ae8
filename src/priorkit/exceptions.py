"""Exception types raised by priorkit.

Only problems with *input data* get their own types here. Programming errors
(out-of-range indices, mismatched shapes, invalid parameter values) raise the
built-in ``IndexError``, ``ValueError`` or ``NotImplementedError`` and are
not meant to be caught.
"""

from __future__ import annotations

__all__ = ["PriorkitError", "FileFormatError"]


class PriorkitError(Exception):
    """Base class for recoverable priorkit errors."""


class FileFormatError(PriorkitError):
    """Raised when a prior or distribution stream cannot be parsed.

    Attributes:
        line: The offending line (without trailing newline), or ``None`` if
            the stream ended early.
    """

    def __init__(self, message: str, line: str | None = None):
        super().__init__(message)
        self.line = line
