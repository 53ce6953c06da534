"""Entry point for the stats API file server."""

import time
import uuid

import uvicorn
from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles

from common.logging_config import setup_logging
from statapi.config import APIConfig, STATAPI_HOST, STATAPI_PORT
from statapi.middleware import StatsAPIMiddleware

logger = setup_logging('statapi')

api_config = APIConfig.from_env()

app = FastAPI(
    title="Stats API File Server",
    description="Static file server exposing filesystem metadata as JSON",
    version="1.0.0"
)

app.add_middleware(StatsAPIMiddleware, config=api_config)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """
    Middleware to log all HTTP requests and responses.
    """
    request_id = str(uuid.uuid4())
    request.state.request_id = request_id
    
    start_time = time.time()
    
    logger.info(
        f"Request started: {request.method} {request.url.path} [request_id={request_id}]"
    )
    
    response = await call_next(request)
    
    duration = time.time() - start_time
    
    logger.info(
        f"Request completed: {request.method} {request.url.path} "
        f"status={response.status_code} duration={duration:.3f}s [request_id={request_id}]"
    )
    
    response.headers["X-Request-ID"] = request_id
    
    return response


@app.on_event("startup")
async def startup_event():
    logger.info(
        f"Stats API serving {api_config.root} with metadata under {api_config.prefix}"
    )


@app.get("/health")
async def health_check():
    """
    Health check endpoint.
    Returns 200 if service is alive.
    """
    return {"status": "healthy", "service": "statapi"}


app.mount("/", StaticFiles(directory=api_config.root, html=True), name="files")


def main() -> None:
    """
    Start the FastAPI server with uvicorn.
    """
    uvicorn.run(
        "statapi.main:app",
        host=STATAPI_HOST,
        port=STATAPI_PORT,
    )


if __name__ == "__main__":
    main()
