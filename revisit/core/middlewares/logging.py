"""요청/응답 로깅 미들웨어"""

import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from revisit.core.logging import get_logger
from revisit.core.middlewares.context import REQUEST_ID_HEADER, set_request_id
from revisit.core.utils.time import elapsed_ms

logger = get_logger(__name__)

EXCLUDE_PATHS = {"/health", "/docs", "/redoc", "/openapi.json", "/favicon.ico"}


class LoggingMiddleware(BaseHTTPMiddleware):
    """요청 ID 부여, 요청/응답 로깅, 처리 시간 헤더 추가

    요청 ID는 클라이언트가 보낸 X-Request-ID를 우선 사용합니다.
    """

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        if request.url.path in EXCLUDE_PATHS:
            return await call_next(request)

        request_id = set_request_id(request.headers.get(REQUEST_ID_HEADER))
        endpoint = f"{request.method} {request.url.path}"
        logger.info(f"→ {endpoint}")

        started_at = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                f"✗ {endpoint} | Error: {e} | "
                f"Time: {elapsed_ms(started_at):.2f}ms"
            )
            raise

        process_time = elapsed_ms(started_at)
        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers["X-Process-Time"] = f"{process_time:.2f}ms"

        log = logger.info if response.status_code < 400 else logger.warning
        log(
            f"← {endpoint} | Status: {response.status_code} | "
            f"Time: {process_time:.2f}ms"
        )
        return response
