"""추천 후보 분류

도메인 통계를 favorite / old_but_gold / explore 중 하나로 분류하거나
추천 대상에서 제외합니다.
"""

from typing import Iterable, Optional

from revisit.domains.recommendations.schemas import RecommendationKind
from revisit.domains.recommendations.scoring import (
    MONTH_WINDOW_DAYS,
    QUARTER_WINDOW_DAYS,
    RECENT_WINDOW_DAYS,
    STRONG_DISLIKE_THRESHOLD,
)
from revisit.domains.recommendations.types import (
    Classification,
    DomainStats,
    FeedbackStats,
)

# 즐겨찾기 키워드를 모을 상위 도메인 수 (방문 수 기준)
FAVORITE_KEYWORD_DOMAINS = 5
# 전체 최대 방문 수 대비 이 비율을 넘으면 자주 방문하는 도메인
HIGH_VISIT_SHARE = 0.5
# explore로 분류되려면 즐겨찾기 키워드와 이 개수보다 많이 겹쳐야 함
MIN_KEYWORD_OVERLAP = 1
# 도메인 수가 이 값을 넘을 때만 강하게 비선호된 explore 후보를 제외
EXPLORE_FILTER_MIN_DOMAINS = 10

OLD_BUT_GOLD_FACTOR = 0.8
EXPLORE_BASE_SCORE = 0.3
EXPLORE_OVERLAP_STEP = 0.1
EXPLORE_MAX_COUNTED_OVERLAP = 5

BASE_REASONS = {
    RecommendationKind.FAVORITE: (
        "You visit this domain often, one of your favorites."
    ),
    RecommendationKind.OLD_BUT_GOLD: (
        "You used to come here a lot but haven't visited recently."
    ),
    RecommendationKind.EXPLORE: (
        "Similar to content you like, but you rarely visit it."
    ),
}


def collect_favorite_keywords(all_stats: Iterable[DomainStats]) -> set[str]:
    """방문 수 상위 도메인들의 키워드 합집합

    방문 수가 같으면 먼저 등장한 도메인이 우선합니다.
    """
    top_stats = sorted(
        all_stats, key=lambda stats: stats.visit_count, reverse=True
    )[:FAVORITE_KEYWORD_DOMAINS]

    keywords: set[str] = set()
    for stats in top_stats:
        keywords |= stats.keywords
    return keywords


def classify_candidate(
    stats: DomainStats,
    max_visits: int,
    days_since_visit: float,
    favorite_keywords: set[str],
) -> Optional[Classification]:
    """도메인 하나를 추천 종류로 분류

    Args:
        stats: 도메인 통계
        max_visits: 전체 도메인 중 최대 방문 수
        days_since_visit: 마지막 방문 후 경과 일수
        favorite_keywords: 상위 도메인 키워드 합집합

    Returns:
        Classification, 어느 종류에도 해당하지 않으면 None
    """
    if max_visits <= 0:
        return None

    normalized_visits = stats.visit_count / max_visits

    if normalized_visits > HIGH_VISIT_SHARE:
        if days_since_visit > RECENT_WINDOW_DAYS:
            kind = RecommendationKind.OLD_BUT_GOLD
            base_score = normalized_visits * OLD_BUT_GOLD_FACTOR
        else:
            kind = RecommendationKind.FAVORITE
            base_score = normalized_visits
        return Classification(
            kind=kind, base_score=base_score, base_reason=BASE_REASONS[kind]
        )

    overlap = len(stats.keywords & favorite_keywords)
    if overlap > MIN_KEYWORD_OVERLAP:
        kind = RecommendationKind.EXPLORE
        return Classification(
            kind=kind,
            base_score=EXPLORE_BASE_SCORE
            + min(overlap, EXPLORE_MAX_COUNTED_OVERLAP) * EXPLORE_OVERLAP_STEP,
            base_reason=BASE_REASONS[kind],
        )

    return None


def is_strongly_disliked(feedback: Optional[FeedbackStats]) -> bool:
    """like 없이 dislike가 2회 이상인지"""
    return (
        feedback is not None
        and feedback.dislikes >= STRONG_DISLIKE_THRESHOLD
        and feedback.likes == 0
    )


def should_exclude(
    classification: Classification,
    feedback: Optional[FeedbackStats],
    domain_count: int,
) -> bool:
    """분류된 후보를 결과에서 제외할지 판단

    강하게 비선호된 explore 후보만 제외하며, 도메인이 적은 기록에서는
    지나친 필터링을 피하기 위해 유지합니다.
    """
    return (
        classification.kind == RecommendationKind.EXPLORE
        and is_strongly_disliked(feedback)
        and domain_count > EXPLORE_FILTER_MIN_DOMAINS
    )


def temporal_indicator(days_since_visit: float) -> str:
    """경과 일수에 따른 추천 사유 접미사"""
    if days_since_visit > QUARTER_WINDOW_DAYS:
        return " (Old favorite)"
    if days_since_visit > MONTH_WINDOW_DAYS:
        return " (Haven't visited in a while)"
    if days_since_visit > RECENT_WINDOW_DAYS:
        return " (Not visited recently)"
    return ""
