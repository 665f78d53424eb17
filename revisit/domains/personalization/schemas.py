"""Personalization 도메인 스키마 정의

추천 점수 계산에 쓰이는 사용자 개인화 가중치를 정의합니다.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from revisit.core.config import MAX_RECOMMENDATION_LIMIT

DEFAULT_RECENCY_WEIGHT = 0.5
DEFAULT_FREQUENCY_WEIGHT = 0.3
DEFAULT_FEEDBACK_WEIGHT = 0.2
DEFAULT_MIN_SCORE = 0.1
DEFAULT_MAX_RECOMMENDATIONS = 5
MAX_RECOMMENDATIONS_UPPER_BOUND = MAX_RECOMMENDATION_LIMIT


class PersonalizationSettings(BaseModel):
    """개인화 설정 스냅샷 (불변)

    세 가중치의 합이 1일 필요는 없습니다. 점수 결합 시 정규화됩니다.

    Attributes:
        recency_weight: 최근성 점수 가중치 (0.0~1.0, 기본 0.5)
        frequency_weight: 방문 빈도 점수 가중치 (0.0~1.0, 기본 0.3)
        feedback_weight: 피드백 점수 가중치 (0.0~1.0, 기본 0.2)
        min_score: 결합 점수 최소 기준 (0.0~1.0, 기본 0.1)
        max_recommendations: 최대 추천 수 (1~20, 기본 5)
    """

    model_config = ConfigDict(frozen=True)

    recency_weight: float = Field(
        default=DEFAULT_RECENCY_WEIGHT, ge=0.0, le=1.0, description="최근성 가중치"
    )
    frequency_weight: float = Field(
        default=DEFAULT_FREQUENCY_WEIGHT, ge=0.0, le=1.0, description="빈도 가중치"
    )
    feedback_weight: float = Field(
        default=DEFAULT_FEEDBACK_WEIGHT, ge=0.0, le=1.0, description="피드백 가중치"
    )
    min_score: float = Field(
        default=DEFAULT_MIN_SCORE, ge=0.0, le=1.0, description="최소 결합 점수"
    )
    max_recommendations: int = Field(
        default=DEFAULT_MAX_RECOMMENDATIONS,
        ge=1,
        le=MAX_RECOMMENDATIONS_UPPER_BOUND,
        description="최대 추천 수",
    )


class PersonalizationUpdate(BaseModel):
    """개인화 설정 부분 업데이트 요청 스키마

    범위 검증은 서비스 계층에서 수행하며, 위반 시 400 응답을 반환합니다.
    """

    recency_weight: Optional[float] = None
    frequency_weight: Optional[float] = None
    feedback_weight: Optional[float] = None
    min_score: Optional[float] = None
    max_recommendations: Optional[int] = None
