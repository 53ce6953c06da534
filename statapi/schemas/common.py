"""Common schemas used across multiple endpoints."""

from typing import Literal, Optional

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Response model for errors. `path` is left out when unknown."""
    status: Literal["error"] = "error"
    code: int
    path: Optional[str] = None
    message: str
