"""Carry of unresolved bytes between reverse reads."""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass
class RemainderCache:
    """
    Bytes retained from the previous read that belong to records not yet returned.

    ``right_cut`` counts trailing bytes of ``buffer`` that were already
    consumed, so a short buffer can be reused without copying.
    ``delimiter_length`` is the size of the delimiter matched by the previous
    read; those bytes sit right after the unconsumed region and still count
    as unread file content, but are never scanned again.
    """

    buffer: Optional[bytes] = None
    right_cut: int = 0
    delimiter_length: int = 0

    def __bool__(self) -> bool:
        return self.buffer is not None

    @property
    def size(self) -> int:
        """Number of retained bytes not yet consumed, delimiter excluded."""
        if self.buffer is None:
            return 0
        return len(self.buffer) - self.right_cut

    @property
    def extent(self) -> int:
        """Bytes of unread file content represented by this cache."""
        if self.buffer is None:
            return 0
        return self.size + self.delimiter_length

    def pending(self) -> Tuple[bytes, int]:
        """Return the retained buffer and the index one past its last unconsumed byte."""
        if self.buffer is None:
            return b"", 0
        return self.buffer, self.size

    def retain(
        self,
        buffer: bytes,
        leftover: int,
        buffer_size: int,
        delimiter_length: int = 0
    ) -> None:
        """
        Keep ``buffer[:leftover]`` for the next read.

        Args:
            buffer: The buffer that was just scanned
            leftover: Number of leading bytes that still belong to later records
            buffer_size: Configured block size of the reader
            delimiter_length: Length of the delimiter matched right after ``leftover``,
                zero when the scan reached the start of the file
        """
        if leftover <= 0 and delimiter_length == 0:
            self.clear()
            return

        if leftover <= 0:
            # Delimiter at buffer start: an empty record is still owed
            self.buffer = b""
            self.right_cut = 0
        elif len(buffer) >= buffer_size:
            # Freshly read or accumulated: copy out only what is still needed
            self.buffer = bytes(buffer[:leftover])
            self.right_cut = 0
        else:
            self.buffer = buffer
            self.right_cut = len(buffer) - leftover

        self.delimiter_length = delimiter_length

    def clear(self) -> None:
        """Drop all retained bytes."""
        self.buffer = None
        self.right_cut = 0
        self.delimiter_length = 0
