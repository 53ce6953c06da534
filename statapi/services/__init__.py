"""Service layer for stat resolution."""

from statapi.services.stat_service import StatService, resolve_stat

__all__ = [
    "StatService",
    "resolve_stat",
]
