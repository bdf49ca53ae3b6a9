"""Reverse text reader - reads delimiter-separated records from the end of a file."""

import logging
import os
from pathlib import Path
from typing import Iterator, Optional, Union

from ..errors import InvalidArgumentError, ReadOnlyReaderError, ReaderClosedError
from ..models.session import ReaderSession
from .encoding import (
    comparison_unit,
    encode_without_bom,
    normalize_encoding,
    validate_errors,
)
from .block_source import BlockSource
from .scanner import DelimiterScanner

logger = logging.getLogger(__name__)


DEFAULT_BUFFER_SIZE = 4096


class ReverseTextReader:
    """
    Reads records from the end of a file toward its beginning.

    Only one block of ``buffer_size`` bytes is read at a time, plus whatever
    part of a record is still unresolved. After each record the file can be
    truncated to :attr:`position`, which drops everything already returned
    and turns the file into a queue consumed from the back::

        with ReverseTextReader("queue.txt") as reader:
            while (record := reader.reverse_read("\\n")) is not None:
                handle(record)
                reader.truncate()

    Not thread-safe; one reader per file.
    """

    def __init__(
        self,
        path: Union[str, Path],
        buffer_size: int = DEFAULT_BUFFER_SIZE,
        encoding: str = "utf-8",
        errors: str = "strict",
        writable: bool = True
    ):
        """
        Open ``path`` for reverse reading.

        Args:
            path: File to read; must exist
            buffer_size: Bytes read per backward block
            encoding: Text encoding of the file
            errors: Decode error handler, as for ``bytes.decode``
            writable: Open the file for update so :meth:`truncate` works;
                pass False to read files that cannot be written

        Raises:
            InvalidArgumentError: If an argument is missing or invalid
            OSError: If the file cannot be opened
        """
        if path is None or path == "":
            raise InvalidArgumentError("path is required")
        if isinstance(buffer_size, bool) or not isinstance(buffer_size, int):
            raise InvalidArgumentError(f"buffer_size must be an integer, got {buffer_size!r}")
        if buffer_size <= 0:
            raise InvalidArgumentError(f"buffer_size must be positive, got {buffer_size}")

        encoding = normalize_encoding(encoding)
        errors = validate_errors(errors)

        self.name = os.fspath(path)
        fileobj = open(self.name, "r+b" if writable else "rb", buffering=0)
        try:
            self._source = BlockSource(fileobj)
            self._session = ReaderSession(
                fileobj=fileobj,
                cursor=self._source.length(),
                buffer_size=buffer_size,
                encoding=encoding,
                comparison_unit=comparison_unit(encoding),
                errors=errors,
                writable=writable
            )
        except BaseException:
            fileobj.close()
            raise

        self._scanner: Optional[DelimiterScanner] = None
        self._scanner_delimiter: Optional[str] = None

        logger.debug(
            f"[ReverseTextReader] opened {self.name} "
            f"(length={self._session.cursor}, buffer_size={buffer_size}, encoding={encoding})"
        )

    # === Properties ===

    @property
    def position(self) -> int:
        """File offset up to which unread content still exists."""
        return self._open_session().position

    @property
    def is_eof(self) -> bool:
        """True when the file start was reached and nothing is left in the buffer."""
        return self._open_session().is_eof

    @property
    def closed(self) -> bool:
        return self._session.closed

    @property
    def buffer_size(self) -> int:
        return self._session.buffer_size

    @property
    def encoding(self) -> str:
        return self._session.encoding

    @property
    def comparison_unit(self) -> int:
        return self._session.comparison_unit

    @property
    def writable(self) -> bool:
        """True when the file was opened for update and can be truncated."""
        return self._session.writable

    # === Reading ===

    def reverse_read(self, delimiter: Optional[str] = None) -> Optional[str]:
        """
        Return the record that ends where the previous one started.

        Args:
            delimiter: Record separator; defaults to ``os.linesep``.
                Never included in the result.

        Returns:
            The next record moving backward, or None once the file start was reached

        Raises:
            InvalidArgumentError: If ``delimiter`` is empty
            ReaderClosedError: If the reader was closed
            UnexpectedEndOfStreamError: If the file shrank beneath the reader
        """
        session = self._open_session()
        scanner = self._scanner_for(delimiter)

        if session.is_eof:
            return None

        buffer, end = session.remainder.pending()
        cursor = session.cursor
        result = scanner.scan(buffer, end - 1)

        # Records longer than a block: prepend further blocks and scan only the new bytes
        while not result.found and cursor > 0:
            block, cursor = self._source.read_block(cursor, session.buffer_size)
            buffer = block + buffer[:end]
            end = len(buffer)
            result = scanner.scan(buffer, result.position + len(block))

        if result.found:
            record_start = result.boundary
            leftover = result.leftover
            delimiter_length = result.pattern_length
        else:
            record_start = 0
            leftover = 0
            delimiter_length = 0

        record = buffer[record_start:end].decode(session.encoding, session.errors)

        session.remainder.retain(buffer, leftover, session.buffer_size, delimiter_length)
        session.cursor = cursor
        return record

    def records(self, delimiter: Optional[str] = None) -> Iterator[str]:
        """
        Restart from the current end of file and iterate over records backward.

        The reader is reset immediately; records are read lazily. Calling this
        again starts over.
        """
        self.reset()
        self._scanner_for(delimiter)
        return self._iter_records(delimiter)

    def _iter_records(self, delimiter: Optional[str]) -> Iterator[str]:
        while True:
            record = self.reverse_read(delimiter)
            if record is None:
                return
            yield record

    def __iter__(self) -> Iterator[str]:
        return self.records()

    # === Mutation ===

    def truncate(self) -> int:
        """
        Cut the file down to :attr:`position`, discarding every record already returned.

        Irreversible.

        Returns:
            The new file length

        Raises:
            ReadOnlyReaderError: If the reader was opened with ``writable=False``
        """
        session = self._open_session()
        if not session.writable:
            raise ReadOnlyReaderError(f"Reader for {self.name} was opened read-only")
        size = self._source.truncate(session.position)
        logger.info(f"[ReverseTextReader] truncated {self.name} to {size} bytes")
        return size

    def reset(self) -> None:
        """Restart reading from the file's current end and drop buffered bytes."""
        session = self._open_session()
        session.cursor = self._source.length()
        session.remainder.clear()
        logger.debug(f"[ReverseTextReader] reset {self.name} at {session.cursor}")

    def close(self) -> None:
        """Release the file handle. Safe to call more than once."""
        session = self._session
        if session.closed:
            return

        session.closed = True
        session.remainder.clear()
        fileobj, session.fileobj = session.fileobj, None
        fileobj.close()
        logger.debug(f"[ReverseTextReader] closed {self.name}")

    def __enter__(self) -> "ReverseTextReader":
        self._open_session()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self._session.closed else f"position={self._session.position}"
        return f"<ReverseTextReader name={self.name!r} {state}>"

    # === Helpers ===

    def _open_session(self) -> ReaderSession:
        if self._session.closed:
            raise ReaderClosedError(f"Reader for {self.name} is closed")
        return self._session

    def _scanner_for(self, delimiter: Optional[str]) -> DelimiterScanner:
        if delimiter is None:
            delimiter = os.linesep
        if not delimiter:
            raise InvalidArgumentError("delimiter must not be empty")

        if self._scanner is None or self._scanner_delimiter != delimiter:
            try:
                pattern = encode_without_bom(delimiter, self._session.encoding)
            except UnicodeEncodeError as e:
                raise InvalidArgumentError(
                    f"Delimiter {delimiter!r} cannot be encoded as {self._session.encoding}"
                ) from e
            self._scanner = DelimiterScanner(pattern, self._session.comparison_unit)
            self._scanner_delimiter = delimiter
        return self._scanner
