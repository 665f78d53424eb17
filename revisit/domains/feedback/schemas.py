"""Feedback 도메인 스키마 정의"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class FeedbackValue(str, Enum):
    """추천에 대한 사용자 반응"""

    LIKE = "like"
    DISLIKE = "dislike"


class FeedbackRecord(BaseModel):
    """피드백 기록 (추천 엔진 입력, 읽기 전용)"""

    model_config = ConfigDict(frozen=True)

    url: str
    value: FeedbackValue
    created_at: int = Field(..., description="기록 시각 (epoch ms)")


class FeedbackCreate(BaseModel):
    """피드백 등록 요청 스키마"""

    url: str = Field(..., min_length=1, description="추천된 URL")
    value: FeedbackValue
