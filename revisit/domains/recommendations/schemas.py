"""Recommendations 도메인 스키마 정의"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class RecommendationKind(str, Enum):
    """추천 종류

    Attributes:
        FAVORITE: 자주, 최근에도 방문하는 도메인
        OLD_BUT_GOLD: 자주 방문했지만 최근 7일간 방문하지 않은 도메인
        EXPLORE: 방문은 적지만 즐겨찾는 도메인과 키워드가 겹치는 도메인
    """

    FAVORITE = "favorite"
    OLD_BUT_GOLD = "old_but_gold"
    EXPLORE = "explore"


class ComponentScores(BaseModel):
    """개인화 구성 점수 (UI 표시용)"""

    model_config = ConfigDict(frozen=True)

    frequency: float = Field(..., ge=0.0, le=1.0, description="방문 빈도 점수")
    recency: float = Field(..., ge=0.0, le=1.0, description="최근성 점수")
    feedback: float = Field(..., ge=0.0, le=1.0, description="피드백 점수")
    combined: float = Field(..., ge=0.0, le=1.0, description="가중 결합 점수")


class Recommendation(BaseModel):
    """추천 항목

    Attributes:
        url: 추천 링크 (도메인의 대표 URL)
        title: 표시 제목 (도메인)
        reason: 사람이 읽을 수 있는 추천 사유
        score: 최종 점수 (0.0~1.0)
        kind: 추천 종류
        component_scores: 개인화 구성 점수
    """

    model_config = ConfigDict(frozen=True)

    url: str
    title: str
    reason: str
    score: float = Field(..., ge=0.0, le=1.0)
    kind: RecommendationKind
    component_scores: ComponentScores


class CacheEntry(BaseModel):
    """추천 결과 캐시 엔트리"""

    recommendations: list[Recommendation]
    timestamp: int = Field(..., description="저장 시각 (epoch ms)")
    settings_hash: str
