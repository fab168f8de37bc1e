"""Filesystem timestamp source."""

import os
from typing import Union


def last_modified(path: Union[str, os.PathLike]) -> float:
    """Last modification time of ``path`` in seconds since the epoch.

    FileNotFoundError propagates when the path does not exist.
    """
    return os.stat(path).st_mtime
