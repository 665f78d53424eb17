"""Feedback 도메인 모듈

추천에 대한 like/dislike 기록을 제공합니다.

구조:
    - schemas.py: Pydantic 스키마 (FeedbackRecord, FeedbackCreate, FeedbackValue)
    - repository.py: 피드백 제공자 인터페이스와 인메모리 구현
    - router.py: API 엔드포인트
"""

from revisit.domains.feedback.repository import (
    FeedbackRepository,
    FeedbackSource,
)
from revisit.domains.feedback.schemas import (
    FeedbackCreate,
    FeedbackRecord,
    FeedbackValue,
)

__all__ = [
    "FeedbackSource",
    "FeedbackRepository",
    "FeedbackRecord",
    "FeedbackCreate",
    "FeedbackValue",
]
