"""Backward block reads from an open binary file."""

import logging
import os
from typing import BinaryIO, Tuple

from ..errors import UnexpectedEndOfStreamError

logger = logging.getLogger(__name__)


class BlockSource:
    """Reads fixed-size blocks that end at a cursor, walking toward file start."""

    def __init__(self, fileobj: BinaryIO):
        self.fileobj = fileobj

    def length(self) -> int:
        """Current on-disk length of the file."""
        return os.fstat(self.fileobj.fileno()).st_size

    def read_block(self, cursor: int, size: int) -> Tuple[bytes, int]:
        """
        Read the block immediately preceding ``cursor``.

        Args:
            cursor: File offset the block ends at
            size: Block size; the block is shorter when it would cross offset 0

        Returns:
            Tuple of (block bytes, new cursor)
        """
        start = max(cursor - size, 0)
        block = self.read_exact(start, cursor - start)
        logger.debug(f"[BlockSource] read {len(block)} bytes at offset {start}")
        return block, start

    def read_exact(self, offset: int, count: int) -> bytes:
        """
        Read exactly ``count`` bytes starting at ``offset``.

        Short reads are retried; a read that returns nothing before ``count``
        bytes arrived means the file shrank.

        Raises:
            UnexpectedEndOfStreamError: If the file ended before ``count`` bytes
        """
        self.fileobj.seek(offset)
        chunks = []
        remaining = count
        while remaining > 0:
            chunk = self.fileobj.read(remaining)
            if not chunk:
                raise UnexpectedEndOfStreamError(
                    f"Expected {count} bytes at offset {offset}, "
                    f"got {count - remaining}"
                )
            chunks.append(chunk)
            remaining -= len(chunk)
        return b"".join(chunks)

    def truncate(self, size: int) -> int:
        """Shrink the file to ``size`` bytes and return the new length."""
        self.fileobj.truncate(size)
        self.fileobj.flush()
        return size
