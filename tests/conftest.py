"""Pytest configuration for tests.

No sys.path hacks - tests should import from installed staleplan package.
"""

import os
from pathlib import Path

import pytest


class FakeFiles:
    """In-memory timestamp source: filename -> mtime."""

    def __init__(self, times=None):
        self.times = dict(times or {})

    def __call__(self, path):
        try:
            return self.times[path]
        except KeyError:
            raise FileNotFoundError(path) from None

    def touch(self, *paths, at=None):
        now = at if at is not None else max(self.times.values(), default=0.0) + 1.0
        for path in paths:
            self.times[path] = now


@pytest.fixture
def fake_files():
    return FakeFiles()


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the test inside tmp_path so relative filenames land there."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _set_mtime(path, mtime: float) -> None:
    """Create ``path`` if needed and pin its mtime."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.touch()
    os.utime(path, (mtime, mtime))


@pytest.fixture
def set_mtime():
    return _set_mtime
