"""추천 결과 캐시

개인화 설정 해시를 키로 최근 추천 결과 하나를 보관합니다.
서비스 인스턴스 하나가 캐시 하나를 소유합니다.
"""

import hashlib
import json
from typing import Optional

from revisit.core.logging import get_logger
from revisit.core.utils.datetime import MINUTE_MS
from revisit.domains.personalization.schemas import PersonalizationSettings
from revisit.domains.recommendations.schemas import CacheEntry, Recommendation

logger = get_logger(__name__)

DEFAULT_CACHE_TTL_MS = 5 * MINUTE_MS


def hash_personalization_settings(settings: PersonalizationSettings) -> str:
    """점수 계산에 영향을 주는 개인화 필드만으로 SHA-256 해시 생성"""
    payload = json.dumps(
        {
            "recency_weight": settings.recency_weight,
            "frequency_weight": settings.frequency_weight,
            "feedback_weight": settings.feedback_weight,
            "min_score": settings.min_score,
            "max_recommendations": settings.max_recommendations,
        },
        sort_keys=True,
    )
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


class RecommendationCache:
    """단일 슬롯 추천 캐시

    엔트리는 설정 해시가 일치하고 저장 후 TTL이 지나지 않았을 때만 반환됩니다.
    """

    def __init__(self, ttl_ms: int = DEFAULT_CACHE_TTL_MS):
        self.ttl_ms = ttl_ms
        self._entry: Optional[CacheEntry] = None

    @property
    def entry(self) -> Optional[CacheEntry]:
        return self._entry

    def get(
        self, settings_hash: str, now: int
    ) -> Optional[list[Recommendation]]:
        """유효한 캐시 엔트리의 추천 목록 조회

        Args:
            settings_hash: 현재 개인화 설정 해시
            now: 현재 시각 (epoch ms)

        Returns:
            캐시된 추천 목록, 없거나 만료/불일치면 None
        """
        entry = self._entry
        if entry is None:
            return None
        if entry.settings_hash != settings_hash:
            logger.debug("Recommendation cache miss: settings changed")
            return None
        if now - entry.timestamp >= self.ttl_ms:
            logger.debug("Recommendation cache miss: entry expired")
            return None
        return list(entry.recommendations)

    def put(
        self,
        recommendations: list[Recommendation],
        settings_hash: str,
        now: int,
    ) -> CacheEntry:
        """새 엔트리 저장 (기존 엔트리 대체)"""
        self._entry = CacheEntry(
            recommendations=list(recommendations),
            timestamp=now,
            settings_hash=settings_hash,
        )
        return self._entry

    def clear(self) -> None:
        """캐시 엔트리 삭제"""
        self._entry = None
        logger.info("Recommendation cache cleared")
