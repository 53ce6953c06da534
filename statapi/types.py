"""Descriptor types produced by the stat resolver."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Union


@dataclass(frozen=True)
class FileStat:
    """
    A regular file confirmed to exist and to be readable.
    """
    name: str
    path: str
    size: int
    mtime: datetime
    kind: str = field(default="file", init=False)


@dataclass(frozen=True)
class DirStat:
    """
    A directory confirmed to exist via stat.
    """
    name: str
    path: str
    mtime: datetime
    kind: str = field(default="directory", init=False)


StatResult = Union[FileStat, DirStat]
