"""Recommendations 도메인 모듈

방문 기록과 피드백을 도메인별로 집계해 점수를 매기고,
favorite / old_but_gold / explore 추천 목록을 만들어 캐시합니다.

구조:
    - schemas.py: Pydantic 스키마 (Recommendation, ComponentScores, CacheEntry)
    - types.py: 파이프라인 내부 데이터클래스
    - aggregation.py: 도메인 집계, 피드백 인덱스
    - scoring.py: 시간 감쇠, 피드백 조정, 개인화 가중 결합
    - classifier.py: 추천 종류 분류와 제외 규칙
    - cache.py: 설정 해시 기반 TTL 캐시
    - service.py: 추천 파이프라인과 서비스
    - router.py: API 엔드포인트
"""

from revisit.domains.recommendations.cache import (
    RecommendationCache,
    hash_personalization_settings,
)
from revisit.domains.recommendations.schemas import (
    CacheEntry,
    ComponentScores,
    Recommendation,
    RecommendationKind,
)
from revisit.domains.recommendations.service import (
    RecommendationService,
    build_recommendations,
)

__all__ = [
    "RecommendationCache",
    "hash_personalization_settings",
    "CacheEntry",
    "ComponentScores",
    "Recommendation",
    "RecommendationKind",
    "RecommendationService",
    "build_recommendations",
]
