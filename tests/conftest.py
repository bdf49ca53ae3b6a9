"""Shared pytest fixtures."""

import builtins
from pathlib import Path

import pytest

from revreader import ReverseTextReader


@pytest.fixture
def make_file(tmp_path):
    """Factory writing raw bytes (or utf-8 text) to a file under tmp_path."""

    def _make(content, name="data.txt"):
        file_path = Path(tmp_path) / name
        if isinstance(content, str):
            content = content.encode("utf-8")
        file_path.write_bytes(content)
        return file_path

    return _make


@pytest.fixture
def open_reader():
    """Factory opening readers that are closed after the test."""
    readers = []

    def _open(path, buffer_size=4096, encoding="utf-8", **kwargs):
        reader = ReverseTextReader(path, buffer_size, encoding, **kwargs)
        readers.append(reader)
        return reader

    yield _open

    for reader in readers:
        reader.close()


@pytest.fixture
def read_all():
    """Drain a reader into a list."""

    def _read_all(reader, delimiter):
        records = []
        while True:
            record = reader.reverse_read(delimiter)
            if record is None:
                return records
            records.append(record)

    return _read_all


@pytest.fixture
def open_modes(monkeypatch):
    """Record the mode of every file a ReverseTextReader opens."""
    modes = []

    def _open(file, mode="r", *args, **kwargs):
        modes.append(mode)
        return builtins.open(file, mode, *args, **kwargs)

    monkeypatch.setattr("revreader.reader.reverse_reader.open", _open, raising=False)
    return modes
