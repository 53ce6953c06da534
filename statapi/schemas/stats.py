"""Pydantic schemas for the stats endpoint."""

from typing import Literal

from pydantic import BaseModel


class FileStatResponse(BaseModel):
    """Response model for a regular file."""
    type: Literal["file"] = "file"
    name: str
    path: str
    size: int
    mtime: str


class DirectoryStatResponse(BaseModel):
    """Response model for a directory."""
    type: Literal["directory"] = "directory"
    name: str
    path: str
    mtime: str
