"""Configuration settings for the stats API."""

import os
from dataclasses import dataclass
from typing import Optional

from common.constants import (
    DEFAULT_BASE_PATH,
    DEFAULT_MAX_STAT_WORKERS,
    DEFAULT_PORT,
    DEFAULT_STAT_TIMEOUT,
)


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


BASE_PATH = os.environ.get("STATAPI_BASE_PATH", DEFAULT_BASE_PATH)

SERVE_ROOT = os.environ.get("STATAPI_ROOT", ".")

STATAPI_HOST = os.environ.get("STATAPI_HOST", "0.0.0.0")

STATAPI_PORT = int(os.environ.get("STATAPI_PORT", str(DEFAULT_PORT)))

STAT_TIMEOUT = float(os.environ.get("STATAPI_STAT_TIMEOUT", str(DEFAULT_STAT_TIMEOUT)))

MAX_STAT_WORKERS = int(os.environ.get("STATAPI_MAX_STAT_WORKERS", str(DEFAULT_MAX_STAT_WORKERS)))

REDACT_INTERNAL_ERRORS = _env_bool("STATAPI_REDACT_INTERNAL_ERRORS")


@dataclass(frozen=True)
class APIConfig:
    """
    Immutable settings for one mounted stats API.

    `base_path` never ends with a slash; `prefix` is `base_path + "/"`.
    A `stat_timeout` of None (or 0 from the environment) disables the bound
    on stat calls. `root` is recorded for serving file content and is not
    consulted when resolving stats.
    """
    base_path: str
    prefix: str
    prefix_len: int
    root: Optional[str] = None
    stat_timeout: Optional[float] = DEFAULT_STAT_TIMEOUT
    redact_internal_errors: bool = False
    max_stat_workers: int = DEFAULT_MAX_STAT_WORKERS

    @classmethod
    def build(
        cls,
        base_path: str,
        root: Optional[str] = None,
        stat_timeout: Optional[float] = DEFAULT_STAT_TIMEOUT,
        redact_internal_errors: bool = False,
        max_stat_workers: int = DEFAULT_MAX_STAT_WORKERS,
    ) -> "APIConfig":
        """
        Normalize a base path and derive the routing prefix.

        Args:
            base_path: URL prefix the API is mounted under (e.g. "/api/")
            root: Directory whose content the host serves
            stat_timeout: Seconds allowed per stat request
            redact_internal_errors: Hide raw error text in 500 responses
            max_stat_workers: Threads reserved for stat calls

        Returns:
            APIConfig instance
        """
        base_path = base_path.rstrip("/")
        prefix = base_path + "/"
        if stat_timeout is not None and stat_timeout <= 0:
            stat_timeout = None
        return cls(
            base_path=base_path,
            prefix=prefix,
            prefix_len=len(prefix),
            root=root,
            stat_timeout=stat_timeout,
            redact_internal_errors=redact_internal_errors,
            max_stat_workers=max(1, max_stat_workers),
        )

    @classmethod
    def from_env(cls) -> "APIConfig":
        return cls.build(
            BASE_PATH,
            root=SERVE_ROOT,
            stat_timeout=STAT_TIMEOUT,
            redact_internal_errors=REDACT_INTERNAL_ERRORS,
            max_stat_workers=MAX_STAT_WORKERS,
        )
