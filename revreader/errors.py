"""Exception hierarchy for the reverse reader."""


class RevReaderError(Exception):
    """Base class for all revreader exceptions.

    Subclasses also inherit from a standard exception type, so callers can
    catch either the library-specific class or the builtin one.
    """


class InvalidArgumentError(RevReaderError, ValueError):
    """Raised when a reader is constructed or called with an invalid argument.

    Covers a missing path or encoding, a non-positive buffer size, an unknown
    codec or error policy, and an empty delimiter.
    """


class ReaderClosedError(RevReaderError, RuntimeError):
    """Raised when an operation is attempted on a closed reader."""


class UnexpectedEndOfStreamError(RevReaderError, EOFError):
    """Raised when a backward block read cannot be satisfied in full.

    This happens when the file shrank beneath the reader, for example because
    another process truncated it. Call ``reset()`` to resume from the new end.
    """


class ReadOnlyReaderError(RevReaderError, PermissionError):
    """Raised when ``truncate()`` is called on a reader opened with ``writable=False``."""
