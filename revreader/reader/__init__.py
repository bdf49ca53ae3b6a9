"""Reverse reading components."""

from .remainder import RemainderCache
from .scanner import DelimiterScanner, ScanResult
from .block_source import BlockSource
from .reverse_reader import DEFAULT_BUFFER_SIZE, ReverseTextReader

__all__ = [
    "RemainderCache",
    "DelimiterScanner",
    "ScanResult",
    "BlockSource",
    "DEFAULT_BUFFER_SIZE",
    "ReverseTextReader",
]
