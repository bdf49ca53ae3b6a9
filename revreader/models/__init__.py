"""Data models."""

from .session import ReaderSession

__all__ = ["ReaderSession"]
