"""File reading utilities built on ReverseTextReader."""

import logging
import time
from pathlib import Path
from typing import Callable, Iterator, Optional, Union

from ..reader.reverse_reader import ReverseTextReader

logger = logging.getLogger(__name__)


def reverse_readline(
    file_path: Union[str, Path],
    buf_size: int = 8192,
    encoding: str = "utf-8",
    delimiter: str = "\n",
    skip_empty: bool = True
) -> Iterator[str]:
    """
    Read a file line by line in reverse order (from end to beginning).

    Memory efficient - only loads buf_size bytes at a time, plus the
    unfinished line. The file is opened read-only.

    Args:
        file_path: Path to the file
        buf_size: Size of buffer for reading chunks (default 8KB)
        encoding: Text encoding of the file
        delimiter: Line separator
        skip_empty: Skip empty lines, including the one after a trailing newline

    Yields:
        Lines from the file in reverse order (newest first)
    """
    file_path = Path(file_path)

    if not file_path.exists():
        return

    with ReverseTextReader(file_path, buf_size, encoding, writable=False) as reader:
        while True:
            line = reader.reverse_read(delimiter)
            if line is None:
                break
            if skip_empty and not line:
                continue
            yield line


def read_last_n_lines(
    file_path: Union[str, Path],
    n: int,
    buf_size: int = 8192,
    reverse: bool = True,
    encoding: str = "utf-8",
    delimiter: str = "\n"
) -> list[str]:
    """
    Read the last N lines from a file efficiently.

    Args:
        file_path: Path to the file
        n: Number of lines to read
        buf_size: Size of buffer for reading chunks
        reverse: If True, return newest first; if False, return oldest first
        encoding: Text encoding of the file
        delimiter: Line separator

    Returns:
        List of last N lines
    """
    lines = []
    if n <= 0:
        return lines

    for line in reverse_readline(file_path, buf_size, encoding, delimiter):
        lines.append(line)
        if len(lines) >= n:
            break

    # reverse=True: newest first (as read from file end)
    # reverse=False: oldest first (chronological order)
    if not reverse:
        lines.reverse()

    return lines


def drain_records(
    file_path: Union[str, Path],
    handler: Callable[[str], None],
    buf_size: int = 4096,
    encoding: str = "utf-8",
    delimiter: Optional[str] = None,
    limit: Optional[int] = None,
    delay: float = 0.0,
    skip_empty: bool = True
) -> int:
    """
    Consume records from the end of a file, shrinking it after each one.

    The file is truncated only after ``handler`` returns, so a crash
    mid-handler leaves the record in place to be picked up on the next run.

    Args:
        file_path: Path to the queue file
        handler: Called with each record, newest first
        buf_size: Size of buffer for reading chunks
        encoding: Text encoding of the file
        delimiter: Record separator (defaults to os.linesep)
        limit: Stop after this many records
        delay: Seconds to sleep after each record
        skip_empty: Consume empty records without calling the handler

    Returns:
        Number of records passed to the handler
    """
    consumed = 0

    with ReverseTextReader(file_path, buf_size, encoding) as reader:
        while limit is None or consumed < limit:
            record = reader.reverse_read(delimiter)
            if record is None:
                break

            if skip_empty and not record:
                reader.truncate()
                continue

            handler(record)
            reader.truncate()
            consumed += 1

            if delay > 0:
                time.sleep(delay)

    logger.debug(f"Drained {consumed} records from {file_path}")
    return consumed
