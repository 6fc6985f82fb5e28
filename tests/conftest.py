"""Shared fixtures for the hex editor tests."""

from pathlib import Path

import pytest

from zestien.core.buffer import Buffer
from zestien.core.view import HexView


@pytest.fixture
def ab_buffer() -> Buffer:
    """Two bytes "AB" padded to a single row."""
    return Buffer.load(b"AB")


@pytest.fixture
def ab_view(ab_buffer: Buffer) -> HexView:
    return HexView(ab_buffer)


@pytest.fixture
def tall_view() -> HexView:
    """Forty rows of data viewed through a three-row window."""
    return HexView(Buffer.load(bytes(range(256)) * 2 + bytes(127)), visible_rows=3)


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    path = tmp_path / "sample.bin"
    path.write_bytes(b"Hello, hex!\x00\x01\x02")
    return path
