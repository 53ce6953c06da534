"""Custom exception classes for the stats API."""

from enum import Enum
from http import HTTPStatus
from typing import Optional

from common.constants import ROUTE_NOT_FOUND_MESSAGE, UNKNOWN_ERROR_MESSAGE


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    FORBIDDEN = "forbidden"
    ROUTE_NOT_FOUND = "route_not_found"
    TIMEOUT = "timeout"
    CANCELED = "canceled"


def status_message(code: int) -> str:
    """
    Look up the reason phrase for an HTTP status code.

    Returns:
        Reason phrase, or "unknown error" for unregistered codes
    """
    try:
        return HTTPStatus(code).phrase
    except ValueError:
        return UNKNOWN_ERROR_MESSAGE


class StatAPIError(Exception):
    """
    Base exception class for all classified stats API errors.

    Subclasses fix `kind` and `code`; the message defaults to the reason
    phrase of `code`.
    """
    kind: ErrorKind
    code: int

    def __init__(self, path: Optional[str] = None, message: Optional[str] = None):
        self.path = path
        self.message = message if message is not None else status_message(self.code)
        super().__init__(f"error {self.code}: {self.message}")


class NotFoundError(StatAPIError):
    """
    Raised when the requested path does not exist or has no descriptor.
    """
    kind = ErrorKind.NOT_FOUND
    code = HTTPStatus.NOT_FOUND


class ForbiddenError(StatAPIError):
    """
    Raised when stat or open is denied by permissions.
    """
    kind = ErrorKind.FORBIDDEN
    code = HTTPStatus.FORBIDDEN


class RouteNotFoundError(StatAPIError):
    """
    Raised when a request under the base path names no known endpoint.
    """
    kind = ErrorKind.ROUTE_NOT_FOUND
    code = HTTPStatus.NOT_FOUND

    def __init__(self, path: Optional[str] = None):
        super().__init__(path=path, message=ROUTE_NOT_FOUND_MESSAGE)


class StatTimeoutError(StatAPIError):
    """
    Raised when the filesystem does not answer within the stat timeout.
    """
    kind = ErrorKind.TIMEOUT
    code = HTTPStatus.GATEWAY_TIMEOUT


class RequestCanceledError(StatAPIError):
    """
    Raised when the client disconnects before the stat completes.
    """
    kind = ErrorKind.CANCELED
    code = 499

    def __init__(self, path: Optional[str] = None):
        super().__init__(path=path, message="client closed request")
