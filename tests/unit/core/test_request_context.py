"""요청 ID 컨텍스트 및 로그 필터 테스트"""

import logging

from revisit.core.middlewares.context import (
    RequestIdFilter,
    generate_request_id,
    get_request_id,
    request_id_ctx,
    set_request_id,
)


def _record() -> logging.LogRecord:
    return logging.LogRecord(
        name="test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="message",
        args=None,
        exc_info=None,
    )


def test_generate_request_id_is_uuid():
    assert len(generate_request_id()) == 36


def test_set_request_id_generates_when_missing():
    token = request_id_ctx.set(None)
    try:
        request_id = set_request_id()
        assert get_request_id() == request_id
    finally:
        request_id_ctx.reset(token)


def test_filter_injects_request_id():
    token = request_id_ctx.set("req-123")
    try:
        record = _record()
        assert RequestIdFilter().filter(record) is True
        assert record.request_id == "req-123"
    finally:
        request_id_ctx.reset(token)


def test_filter_outside_request():
    """요청 밖에서는 "-" 표시"""
    token = request_id_ctx.set(None)
    try:
        record = _record()
        RequestIdFilter().filter(record)
        assert record.request_id == "-"
    finally:
        request_id_ctx.reset(token)
