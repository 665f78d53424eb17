"""날짜/시간 유틸리티

방문/피드백 기록은 epoch 밀리초(int)로 시각을 표현합니다.
"""

import time

SECOND_MS = 1000
MINUTE_MS = 60 * SECOND_MS
DAY_MS = 24 * 60 * MINUTE_MS


def now_ms() -> int:
    """현재 시각을 epoch 밀리초로 반환"""
    return time.time_ns() // 1_000_000


def days_between(earlier_ms: int, later_ms: int) -> float:
    """두 epoch 밀리초 사이의 경과 일수 (소수점 포함)

    earlier_ms가 later_ms보다 미래이면 음수를 반환합니다.
    """
    return (later_ms - earlier_ms) / DAY_MS


def days_ago_ms(days: float, now: int | None = None) -> int:
    """n일 전 시각을 epoch 밀리초로 반환"""
    base = now_ms() if now is None else now
    return int(base - days * DAY_MS)
