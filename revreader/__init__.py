"""Read text files backward, record by record, with optional truncate-after-read."""

from .errors import (
    InvalidArgumentError,
    ReaderClosedError,
    ReadOnlyReaderError,
    RevReaderError,
    UnexpectedEndOfStreamError,
)
from .reader import DEFAULT_BUFFER_SIZE, ReverseTextReader
from .utils.logger import install_null_handler

install_null_handler()

__version__ = "1.0.0"

__all__ = [
    "DEFAULT_BUFFER_SIZE",
    "InvalidArgumentError",
    "ReaderClosedError",
    "ReadOnlyReaderError",
    "RevReaderError",
    "ReverseTextReader",
    "UnexpectedEndOfStreamError",
]
