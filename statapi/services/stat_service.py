"""Stat service resolving filesystem paths to descriptors."""

import asyncio
import os
import stat
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from common.logging_config import get_logger
from statapi.config import APIConfig
from statapi.exceptions import ForbiddenError, NotFoundError, StatTimeoutError
from statapi.types import DirStat, FileStat, StatResult
from statapi.utils import entry_name, mtime_from_timestamp

logger = get_logger(__name__)


def _classify(exc: OSError, path: str) -> Exception:
    if isinstance(exc, (FileNotFoundError, NotADirectoryError)):
        return NotFoundError(path)
    if isinstance(exc, PermissionError):
        return ForbiddenError(path)
    return exc


def _probe_read_access(path: str) -> None:
    """Open the file read-only and close it again without reading."""
    try:
        fd = os.open(path, os.O_RDONLY)
    except OSError as e:
        raise _classify(e, path) from None
    os.close(fd)


def resolve_stat(path: str) -> StatResult:
    """
    Stat a path and describe it.

    Symlinks are followed. Regular files must also open for reading;
    directories are accepted on stat alone. Entries of any other type
    (devices, sockets, FIFOs) are reported as not found.

    Args:
        path: Absolute filesystem path

    Returns:
        FileStat or DirStat

    Raises:
        NotFoundError: Path missing, or not a file or directory
        ForbiddenError: Stat or open denied
        OSError: Any other stat or open failure, unclassified
    """
    try:
        st = os.stat(path)
    except OSError as e:
        raise _classify(e, path) from None

    if stat.S_ISREG(st.st_mode):
        _probe_read_access(path)
        return FileStat(
            name=entry_name(path),
            path=path,
            size=st.st_size,
            mtime=mtime_from_timestamp(st.st_mtime),
        )

    if stat.S_ISDIR(st.st_mode):
        return DirStat(
            name=entry_name(path),
            path=path,
            mtime=mtime_from_timestamp(st.st_mtime),
        )

    logger.debug(f"Unsupported entry type mode={oct(st.st_mode)} path={path}")
    raise NotFoundError(path)


class StatService:
    """
    Runs blocking stat resolution off the event loop.

    Stats run on a dedicated pool. A healthy path still resolves while
    fewer than `max_stat_workers` stats are stuck on a stalled mount.
    """

    def __init__(self, config: APIConfig):
        self.stat_timeout: Optional[float] = config.stat_timeout
        self.executor = ThreadPoolExecutor(
            max_workers=config.max_stat_workers,
            thread_name_prefix="statapi-stat",
        )

    async def resolve(self, path: str) -> StatResult:
        """
        Resolve a path in a worker thread, bounded by the stat timeout.

        Raises:
            StatTimeoutError: The filesystem did not answer in time
        """
        loop = asyncio.get_running_loop()
        try:
            return await asyncio.wait_for(
                loop.run_in_executor(self.executor, resolve_stat, path),
                timeout=self.stat_timeout,
            )
        except asyncio.TimeoutError:
            logger.warning(f"Stat timed out after {self.stat_timeout}s path={path}")
            raise StatTimeoutError(path) from None
