"""Stats API middleware mounted in front of a file-serving app."""

import asyncio
from typing import Callable, Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import RedirectResponse, Response
from starlette.types import ASGIApp

from common.constants import DEFAULT_MAX_STAT_WORKERS, DEFAULT_STAT_TIMEOUT, STATS_ENDPOINT
from common.logging_config import get_logger
from statapi.config import APIConfig
from statapi.encoder import error_response, stat_response
from statapi.exceptions import RequestCanceledError, RouteNotFoundError, StatAPIError
from statapi.services.stat_service import StatService

logger = get_logger(__name__)


class StatsAPIMiddleware(BaseHTTPMiddleware):
    """
    Routes requests under the configured base path to the stats API.

    - `B` redirects (301) to `B/`
    - `B/stats/<path>` describes the filesystem entry at `/<path>`
    - any other `B/...` is a 404 route error
    - everything else goes to the wrapped app untouched
    """

    def __init__(self, app: ASGIApp, config: APIConfig):
        super().__init__(app)
        self.config = config
        self.stat_service = StatService(config)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        path = request.url.path

        if path == self.config.base_path:
            return RedirectResponse(url=self.config.prefix, status_code=301)

        if path.startswith(self.config.prefix):
            endpoint = path[self.config.prefix_len:].rstrip("/")

            if endpoint.startswith(STATS_ENDPOINT):
                target = "/" + endpoint[len(STATS_ENDPOINT):].lstrip("/")
                return await self.handle_stats(request, target)

            return error_response(RouteNotFoundError(), path=path)

        # TODO: answer "Content-Type: application/goserve+json" requests on
        # non-API paths with the stats of the addressed file.
        return await call_next(request)

    async def handle_stats(self, request: Request, target: str) -> Response:
        """
        Resolve `target` and encode the outcome as exactly one response.

        The stat races a watcher on the client connection; a disconnect
        before the stat completes cancels it and yields the canceled outcome.
        """
        resolve_task = asyncio.ensure_future(self.stat_service.resolve(target))
        disconnect_task = asyncio.ensure_future(wait_for_disconnect(request))
        try:
            await asyncio.wait(
                {resolve_task, disconnect_task},
                return_when=asyncio.FIRST_COMPLETED,
            )
            if not resolve_task.done():
                logger.info(f"Client disconnected during stat path={target}")
                raise RequestCanceledError(target)
            return stat_response(resolve_task.result())
        except StatAPIError as e:
            return error_response(e, path=target)
        except Exception as e:
            return error_response(e, redact=self.config.redact_internal_errors, path=target)
        finally:
            for task in (resolve_task, disconnect_task):
                task.cancel()
            await asyncio.gather(resolve_task, disconnect_task, return_exceptions=True)


async def wait_for_disconnect(request: Request) -> None:
    """
    Return once the client sends `http.disconnect`.
    """
    while True:
        message = await request.receive()
        if message["type"] == "http.disconnect":
            return


def serve_api(
    path: str,
    root: Optional[str] = None,
    stat_timeout: Optional[float] = DEFAULT_STAT_TIMEOUT,
    redact_internal_errors: bool = False,
    max_stat_workers: int = DEFAULT_MAX_STAT_WORKERS,
) -> Callable[[ASGIApp], ASGIApp]:
    """
    Build a middleware serving the stats API under `path`.

    Args:
        path: Base path to mount the API at
        root: Directory the wrapped app serves file content from
        stat_timeout: Seconds allowed per stat request (None disables)
        redact_internal_errors: Hide raw error text in 500 responses
        max_stat_workers: Threads reserved for stat calls

    Returns:
        Function wrapping an inner ASGI app with the stats API
    """
    config = APIConfig.build(
        path,
        root=root,
        stat_timeout=stat_timeout,
        redact_internal_errors=redact_internal_errors,
        max_stat_workers=max_stat_workers,
    )
    logger.info(f"Stats API mounted at {config.prefix}")

    def middleware(inner: ASGIApp) -> ASGIApp:
        return StatsAPIMiddleware(inner, config=config)

    return middleware
