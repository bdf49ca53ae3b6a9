"""Backward delimiter scan over a byte buffer."""

from typing import NamedTuple

from ..errors import InvalidArgumentError


class ScanResult(NamedTuple):
    """
    Outcome of a backward scan.

    When ``found`` is true, ``position`` is the index of the last delimiter
    byte. Otherwise it is the next candidate index that was not tested
    (below the scan floor, possibly negative).
    """

    found: bool
    position: int
    pattern_length: int

    @property
    def boundary(self) -> int:
        """Index right after the match, where the record starts."""
        return self.position + 1

    @property
    def leftover(self) -> int:
        """Index of the first delimiter byte, i.e. the length of content before the match."""
        return self.position - self.pattern_length + 1


class DelimiterScanner:
    """
    Finds the last occurrence of a delimiter in a buffer, stepping backward.

    Candidate positions are tested in strides of ``unit`` bytes so a two-byte
    encoding such as UTF-16 never matches across character boundaries. Every
    candidate gets a full byte-for-byte comparison.
    """

    def __init__(self, pattern: bytes, unit: int = 1):
        if not pattern:
            raise InvalidArgumentError("delimiter must not be empty")
        if unit < 1:
            raise InvalidArgumentError(f"comparison unit must be positive, got {unit}")
        self.pattern = pattern
        self.unit = unit

    @property
    def floor(self) -> int:
        """Lowest index a delimiter can end at."""
        return len(self.pattern) - 1

    def scan(self, buffer: bytes, position: int) -> ScanResult:
        """
        Scan ``buffer`` backward for the delimiter.

        Args:
            buffer: Bytes to search
            position: Highest candidate index for the delimiter's last byte

        Returns:
            ScanResult describing the match or where scanning stopped
        """
        pattern = self.pattern
        last = len(pattern) - 1
        floor = self.floor

        while position >= floor:
            start = position - last
            if buffer[start:position + 1] == pattern:
                return ScanResult(True, position, len(pattern))
            position -= self.unit

        return ScanResult(False, position, len(pattern))
