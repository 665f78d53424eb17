"""유틸리티 모듈"""

from revisit.core.utils.datetime import (
    DAY_MS,
    MINUTE_MS,
    SECOND_MS,
    days_ago_ms,
    days_between,
    now_ms,
)
from revisit.core.utils.time import elapsed_ms, measure_time

__all__ = [
    # datetime
    "SECOND_MS",
    "MINUTE_MS",
    "DAY_MS",
    "now_ms",
    "days_between",
    "days_ago_ms",
    # time measurement
    "elapsed_ms",
    "measure_time",
]
