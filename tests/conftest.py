"""
conftest.py

Shared pytest fixtures for the editrename test suite.
"""

import os
import sys
from pathlib import Path

# Add project root to sys.path so 'core', 'cli' and 'gui' can be imported
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from core import RenameOptions


@pytest.fixture
def workdir(tmp_path):
    """
    Directory factory: workdir({"a.txt": "A"}) creates the files and
    returns the directory
    """
    def _make(files):
        for name, content in files.items():
            (tmp_path / name).write_text(content, encoding="utf-8")
        return tmp_path
    return _make


@pytest.fixture
def make_options(tmp_path):
    """RenameOptions rooted at tmp_path"""
    def _make(**kwargs):
        kwargs.setdefault("directory", tmp_path)
        return RenameOptions(**kwargs)
    return _make


@pytest.fixture
def scripted_editor():
    """
    Launcher factory: replaces the scratch file content with the given
    lines and returns the given exit status
    """
    def _make(lines, status=0, trailing_newline=True):
        seen = {}

        def _launch(path: Path) -> int:
            seen["before"] = path.read_text(encoding="utf-8")
            text = "\n".join(lines)
            if lines and trailing_newline:
                text += "\n"
            path.write_text(text, encoding="utf-8")
            return status

        _launch.seen = seen
        return _launch
    return _make


def read_tree(directory: Path) -> dict:
    """Map of name -> content for every regular file in directory"""
    return {
        p.name: p.read_text(encoding="utf-8")
        for p in sorted(Path(directory).iterdir())
        if p.is_file() and not p.is_symlink()
    }


@pytest.fixture
def tree():
    return read_tree
