"""Pydantic schemas for API responses."""

from statapi.schemas.stats import DirectoryStatResponse, FileStatResponse
from statapi.schemas.common import ErrorResponse

__all__ = [
    "FileStatResponse",
    "DirectoryStatResponse",
    "ErrorResponse",
]
