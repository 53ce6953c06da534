"""Encoding of stat results and errors into JSON responses."""

from http import HTTPStatus
from typing import Any, Callable, Dict, Optional, Tuple

from starlette.responses import JSONResponse

from common.constants import JSON_CONTENT_TYPE
from common.logging_config import get_logger
from statapi.exceptions import StatAPIError
from statapi.schemas import DirectoryStatResponse, ErrorResponse, FileStatResponse
from statapi.types import DirStat, FileStat, StatResult
from statapi.utils import format_timestamp

logger = get_logger(__name__)


def _encode_file(result: FileStat) -> Dict[str, Any]:
    return FileStatResponse(
        name=result.name,
        path=result.path,
        size=result.size,
        mtime=format_timestamp(result.mtime),
    ).model_dump()


def _encode_directory(result: DirStat) -> Dict[str, Any]:
    return DirectoryStatResponse(
        name=result.name,
        path=result.path,
        mtime=format_timestamp(result.mtime),
    ).model_dump()


ENCODERS: Dict[str, Callable[[Any], Dict[str, Any]]] = {
    "file": _encode_file,
    "directory": _encode_directory,
}


def encode_result(result: StatResult) -> Dict[str, Any]:
    """
    Serialize a descriptor with its "type" discriminator.

    Raises:
        TypeError: The result carries no known kind tag
    """
    encoder = ENCODERS.get(getattr(result, "kind", None))
    if encoder is None:
        raise TypeError(f"cannot encode stat result of type {type(result).__name__}")
    return encoder(result)


def encode_error(exc: BaseException, redact: bool = False) -> Tuple[int, Dict[str, Any]]:
    """
    Build the error envelope for an exception.

    Classified errors keep their own status, path and message. Anything
    else becomes a 500 carrying the raw error text, or the generic reason
    phrase when `redact` is set.

    Returns:
        Tuple of (status code, envelope)
    """
    if isinstance(exc, StatAPIError):
        envelope = ErrorResponse(code=int(exc.code), path=exc.path, message=exc.message)
        return int(exc.code), envelope.model_dump(exclude_none=True)

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR
    message = status_code.phrase if redact else str(exc)
    envelope = ErrorResponse(code=int(status_code), message=message)
    return int(status_code), envelope.model_dump(exclude_none=True)


def stat_response(result: StatResult) -> JSONResponse:
    """
    Write a 200 response for a descriptor.
    """
    content = encode_result(result)
    logger.info(f"resp: {content!r}")
    return JSONResponse(status_code=HTTPStatus.OK, content=content, media_type=JSON_CONTENT_TYPE)


def error_response(exc: BaseException, redact: bool = False, path: Optional[str] = None) -> JSONResponse:
    """
    Write the error envelope for an exception with its status code.

    Args:
        exc: Classified or unclassified error
        redact: Hide the raw text of unclassified errors
        path: Request path, for the log line only
    """
    status_code, content = encode_error(exc, redact=redact)
    if isinstance(exc, StatAPIError):
        logger.warning(f"resp: {content!r} path={path}")
    else:
        logger.error(f"resp: {content!r} path={path}", exc_info=exc)
    return JSONResponse(status_code=status_code, content=content, media_type=JSON_CONTENT_TYPE)
