"""미들웨어 모듈"""

from revisit.core.middlewares.context import (
    REQUEST_ID_HEADER,
    RequestIdFilter,
    get_request_id,
    set_request_id,
)
from revisit.core.middlewares.logging import LoggingMiddleware

__all__ = [
    "LoggingMiddleware",
    "RequestIdFilter",
    "REQUEST_ID_HEADER",
    "get_request_id",
    "set_request_id",
]
