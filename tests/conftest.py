"""Shared pytest fixtures for all tests."""

import os
from pathlib import Path

import pytest

# 2023-01-01T00:00:00Z
FIXED_MTIME = 1672531200


@pytest.fixture
def sample_file(tmp_path):
    """
    Create a 1024-byte file with a fixed modification time.

    Args:
        tmp_path: pytest tmp_path fixture

    Returns:
        Path to the file
    """
    file_path = tmp_path / 'readme.txt'
    file_path.write_bytes(b'x' * 1024)
    os.utime(file_path, (FIXED_MTIME, FIXED_MTIME))
    return file_path


@pytest.fixture
def sample_dir(tmp_path):
    """
    Create a directory with a fixed modification time.

    Args:
        tmp_path: pytest tmp_path fixture

    Returns:
        Path to the directory
    """
    dir_path = tmp_path / 'docs'
    dir_path.mkdir()
    os.utime(dir_path, (FIXED_MTIME, FIXED_MTIME))
    return dir_path


@pytest.fixture
def deny_stat(monkeypatch):
    """
    Make os.stat raise PermissionError for chosen paths.

    Returns:
        Function registering a path to deny
    """
    denied = set()
    real_stat = os.stat

    def fake_stat(path, *args, **kwargs):
        if str(path) in denied:
            raise PermissionError(13, 'Permission denied', str(path))
        return real_stat(path, *args, **kwargs)

    monkeypatch.setattr(os, 'stat', fake_stat)
    return lambda path: denied.add(str(Path(path)))


@pytest.fixture
def deny_open(monkeypatch):
    """
    Make os.open raise PermissionError for chosen paths.

    Returns:
        Function registering a path to deny
    """
    denied = set()
    real_open = os.open

    def fake_open(path, *args, **kwargs):
        if str(path) in denied:
            raise PermissionError(13, 'Permission denied', str(path))
        return real_open(path, *args, **kwargs)

    monkeypatch.setattr(os, 'open', fake_open)
    return lambda path: denied.add(str(Path(path)))
