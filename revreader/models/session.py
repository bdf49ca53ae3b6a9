"""Reader session state."""

from dataclasses import dataclass, field
from typing import BinaryIO, Optional

from ..reader.remainder import RemainderCache


@dataclass
class ReaderSession:
    """Mutable state of one reverse reading session - owned by a single reader."""

    fileobj: Optional[BinaryIO]
    cursor: int
    buffer_size: int
    encoding: str
    comparison_unit: int
    errors: str = "strict"
    writable: bool = True
    closed: bool = False
    remainder: RemainderCache = field(default_factory=RemainderCache)

    @property
    def position(self) -> int:
        """Offset up to which unread content still exists."""
        return self.cursor + self.remainder.extent

    @property
    def is_eof(self) -> bool:
        return self.cursor == 0 and not self.remainder
