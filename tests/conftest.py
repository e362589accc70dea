"""Pytest configuration and fixtures."""

import shutil
import tempfile
from pathlib import Path

import pytest

from findrr.config.settings import FindrrConfig


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def test_config():
    """Create a test configuration."""
    return FindrrConfig()


@pytest.fixture
def sample_tree(temp_dir):
    """Create root/a.txt (50 bytes) and root/sub/b.txt (150 bytes)."""
    root = temp_dir / "root"
    sub = root / "sub"
    sub.mkdir(parents=True)
    (root / "a.txt").write_bytes(b"a" * 50)
    (sub / "b.txt").write_bytes(b"b" * 150)
    return root


@pytest.fixture
def sized_files(temp_dir):
    """Create files of 99, 100 and 101 bytes spread over two levels."""
    root = temp_dir / "sized"
    nested = root / "nested"
    nested.mkdir(parents=True)
    (root / "small.bin").write_bytes(b"x" * 99)
    (nested / "exact.bin").write_bytes(b"x" * 100)
    (nested / "large.bin").write_bytes(b"x" * 101)
    return root
