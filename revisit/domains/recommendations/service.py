"""Recommendations 도메인 서비스

방문 기록과 피드백으로 "다시 방문할 만한" 추천 목록을 계산하고,
개인화 설정 해시를 키로 결과를 캐시합니다.
"""

import asyncio
from typing import Callable, Iterable, Optional

from revisit.core.logging import get_logger
from revisit.core.utils.datetime import days_between, now_ms
from revisit.core.utils.time import measure_time
from revisit.domains.feedback.repository import FeedbackSource
from revisit.domains.feedback.schemas import FeedbackRecord
from revisit.domains.history.repository import (
    DEFAULT_HISTORY_LIMIT,
    HistorySource,
)
from revisit.domains.history.schemas import VisitRecord
from revisit.domains.personalization.schemas import PersonalizationSettings
from revisit.domains.personalization.service import SettingsSource
from revisit.domains.recommendations.aggregation import (
    aggregate_domains,
    build_feedback_index,
)
from revisit.domains.recommendations.cache import (
    RecommendationCache,
    hash_personalization_settings,
)
from revisit.domains.recommendations.classifier import (
    classify_candidate,
    collect_favorite_keywords,
    should_exclude,
    temporal_indicator,
)
from revisit.domains.recommendations.schemas import Recommendation
from revisit.domains.recommendations.scoring import (
    apply_feedback_to_score,
    calculate_component_scores,
    meets_minimum_score,
)

logger = get_logger(__name__)


def resolve_limit(
    limit: Optional[int], settings: PersonalizationSettings
) -> int:
    """요청 limit과 max_recommendations 중 작은 값 (limit이 없으면 설정값)"""
    if limit is None:
        return settings.max_recommendations
    return max(0, min(limit, settings.max_recommendations))


def build_recommendations(
    history: Iterable[VisitRecord],
    feedback: Iterable[FeedbackRecord],
    settings: PersonalizationSettings,
    now: int,
    limit: int,
) -> list[Recommendation]:
    """추천 목록 계산 (순수 함수)

    1. 방문 기록을 도메인별로 집계
    2. 도메인마다 구성 점수 계산 후 min_score 미만 제외
    3. 종류 분류 및 비선호 explore 후보 제외
    4. 기본 점수 × 시간 가중치에 피드백 조정 적용
    5. 점수 내림차순 정렬 (동점이면 먼저 등장한 도메인 우선) 후 limit개 반환

    Args:
        history: 방문 기록 (최신순)
        feedback: 피드백 기록
        settings: 개인화 설정
        now: 기준 시각 (epoch ms)
        limit: 반환할 최대 개수

    Returns:
        추천 목록
    """
    all_stats = aggregate_domains(history)
    if not all_stats or limit <= 0:
        return []

    feedback_index = build_feedback_index(feedback)
    max_visits = max(stats.visit_count for stats in all_stats)
    favorite_keywords = collect_favorite_keywords(all_stats)

    candidates: list[Recommendation] = []
    for stats in all_stats:
        days_since_visit = days_between(stats.last_visited_at, now)
        url_feedback = feedback_index.get(stats.representative_url)

        component_scores = calculate_component_scores(
            stats, max_visits, days_since_visit, url_feedback, settings
        )
        if not meets_minimum_score(component_scores.combined, settings):
            continue

        classification = classify_candidate(
            stats, max_visits, days_since_visit, favorite_keywords
        )
        if classification is None:
            continue
        if should_exclude(classification, url_feedback, len(all_stats)):
            logger.debug(f"Excluded disliked explore candidate: {stats.domain}")
            continue

        adjustment = apply_feedback_to_score(
            classification.base_score * component_scores.recency,
            url_feedback,
            classification.kind,
        )

        candidates.append(
            Recommendation(
                url=stats.representative_url,
                title=stats.domain,
                reason=(
                    classification.base_reason
                    + adjustment.reason
                    + temporal_indicator(days_since_visit)
                ),
                score=adjustment.score,
                kind=classification.kind,
                component_scores=component_scores,
            )
        )

    # sorted()는 안정 정렬이므로 동점이면 집계 순서가 유지됨
    candidates = sorted(
        candidates, key=lambda candidate: candidate.score, reverse=True
    )
    return candidates[:limit]


class RecommendationService:
    """추천 서비스

    캐시 객체는 생성 시 주입되며 서비스 인스턴스가 소유합니다.
    """

    def __init__(
        self,
        history_source: HistorySource,
        feedback_source: FeedbackSource,
        settings_source: SettingsSource,
        cache: Optional[RecommendationCache] = None,
        history_window: int = DEFAULT_HISTORY_LIMIT,
        clock: Callable[[], int] = now_ms,
    ):
        self.history_source = history_source
        self.feedback_source = feedback_source
        self.settings_source = settings_source
        self.cache = cache or RecommendationCache()
        self.history_window = history_window
        self._clock = clock

    async def get_recommendations(
        self, limit: Optional[int] = None
    ) -> list[Recommendation]:
        """추천 목록 조회

        설정 해시가 같고 TTL 이내인 캐시가 있으면 재계산 없이 잘라서 반환합니다.
        캐시된 목록보다 큰 limit을 요청해도 캐시 내용만 반환합니다.

        Args:
            limit: 요청 개수 (None이면 max_recommendations)

        Returns:
            점수 내림차순 추천 목록
        """
        settings = self.settings_source.get_personalization_settings()
        effective_limit = resolve_limit(limit, settings)
        if effective_limit <= 0:
            return []

        settings_hash = hash_personalization_settings(settings)
        cached = self.cache.get(settings_hash, self._clock())
        if cached is not None:
            logger.debug("Recommendation cache hit")
            return cached[:effective_limit]

        with measure_time() as timer:
            history, feedback = await asyncio.gather(
                self.history_source.get_recent_history(self.history_window),
                self.feedback_source.get_all_feedback(),
            )
            if not history:
                return []

            now = self._clock()
            recommendations = build_recommendations(
                history, feedback, settings, now, effective_limit
            )
            self.cache.put(recommendations, settings_hash, now)

        logger.info(
            f"Recommendations computed: count={len(recommendations)}, "
            f"history={len(history)}, feedback={len(feedback)}, "
            f"elapsed={timer['elapsed_ms']:.2f}ms"
        )
        return recommendations

    def clear_cache(self) -> None:
        """추천 캐시 무효화"""
        self.cache.clear()
