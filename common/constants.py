"""Project-wide constants (endpoint names, content types, default ports)."""

STATS_ENDPOINT: str = "stats/"
JSON_CONTENT_TYPE: str = "application/json"

DEFAULT_BASE_PATH: str = "/api"
DEFAULT_PORT: int = 8080
DEFAULT_STAT_TIMEOUT: float = 5.0
DEFAULT_MAX_STAT_WORKERS: int = 64

ROUTE_NOT_FOUND_MESSAGE: str = "not a valid API endpoint"
UNKNOWN_ERROR_MESSAGE: str = "unknown error"
