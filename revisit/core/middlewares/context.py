"""요청 ID 컨텍스트

요청마다 ID를 contextvar에 보관해, 같은 요청에서 남긴 모든 로그에
동일한 ID가 붙도록 합니다.
"""

import contextvars
import logging
import uuid
from typing import Optional

REQUEST_ID_HEADER = "X-Request-ID"
NO_REQUEST_ID = "-"

request_id_ctx: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "request_id", default=None
)


def generate_request_id() -> str:
    return str(uuid.uuid4())


def get_request_id() -> Optional[str]:
    """현재 요청 ID (요청 밖이면 None)"""
    return request_id_ctx.get()


def set_request_id(request_id: Optional[str] = None) -> str:
    """요청 ID를 저장하고 반환 (빈 값이면 새로 생성)"""
    request_id = request_id or generate_request_id()
    request_id_ctx.set(request_id)
    return request_id


class RequestIdFilter(logging.Filter):
    """로그 레코드에 request_id 속성을 채우는 필터

    요청 밖(시작/종료, 테스트)에서 남긴 로그는 "-"로 표시됩니다.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = get_request_id() or NO_REQUEST_ID
        return True
