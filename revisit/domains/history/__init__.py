"""History 도메인 모듈

추천 엔진이 읽는 방문 기록을 제공합니다.

구조:
    - schemas.py: Pydantic 스키마 (VisitRecord, VisitCreate)
    - repository.py: 방문 기록 제공자 인터페이스와 인메모리 구현
    - router.py: API 엔드포인트
"""

from revisit.domains.history.repository import (
    DEFAULT_HISTORY_LIMIT,
    HistoryRepository,
    HistorySource,
)
from revisit.domains.history.schemas import VisitCreate, VisitRecord

__all__ = [
    "DEFAULT_HISTORY_LIMIT",
    "HistorySource",
    "HistoryRepository",
    "VisitRecord",
    "VisitCreate",
]
