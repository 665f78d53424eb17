"""처리 시간 측정 유틸리티"""

import time
from contextlib import contextmanager
from typing import Iterator


def elapsed_ms(started_at: float) -> float:
    """time.perf_counter() 기준 시작 시각부터 경과한 밀리초"""
    return (time.perf_counter() - started_at) * 1000


@contextmanager
def measure_time() -> Iterator[dict[str, float]]:
    """with 블록의 실행 시간(ms) 측정

    블록이 끝나면(예외 포함) timer["elapsed_ms"]가 채워집니다.

    Usage::

        with measure_time() as timer:
            recommendations = build_recommendations(...)
        logger.info(f"elapsed={timer['elapsed_ms']:.2f}ms")
    """
    timer = {"elapsed_ms": 0.0}
    started_at = time.perf_counter()
    try:
        yield timer
    finally:
        timer["elapsed_ms"] = elapsed_ms(started_at)
