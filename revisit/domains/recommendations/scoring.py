"""추천 점수 계산

- 시간 감쇠 가중치 (calculate_temporal_weight)
- 피드백 기반 점수 조정 (apply_feedback_to_score)
- 개인화 가중 결합 (apply_personalization)

모든 함수는 순수 함수이며 예외를 던지지 않고, 결과는 항상 0.0~1.0 범위의
NaN이 아닌 값입니다.
"""

import math
from typing import Optional

from revisit.domains.personalization.schemas import PersonalizationSettings
from revisit.domains.personalization.service import normalize_weights
from revisit.domains.recommendations.schemas import (
    ComponentScores,
    RecommendationKind,
)
from revisit.domains.recommendations.types import (
    DomainStats,
    FeedbackAdjustment,
    FeedbackStats,
)

# 피드백 조정 상수
LIKE_BONUS = 0.15
DISLIKE_PENALTY = 0.2
MAX_COUNTED_FEEDBACK = 3
MAX_COUNTED_NET_FEEDBACK = 2
MIXED_FEEDBACK_FACTOR = 0.5
STRONG_DISLIKE_THRESHOLD = 2
STRONG_DISLIKE_MULTIPLIER = 0.1

# 피드백 구성 점수 상수
NEUTRAL_FEEDBACK_SCORE = 0.5
LIKED_FEEDBACK_BASE = 0.7
LIKED_FEEDBACK_STEP = 0.1
DISLIKED_FEEDBACK_BASE = 0.3
DISLIKED_FEEDBACK_STEP = 0.15
MIXED_FEEDBACK_STEP = 0.1

# 시간 감쇠 구간 경계 (일)
RECENT_WINDOW_DAYS = 7
MONTH_WINDOW_DAYS = 30
QUARTER_WINDOW_DAYS = 90
STALE_DECAY_DAYS = 180
MIN_TEMPORAL_WEIGHT = 0.05


def _clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


def safe_score(value: float, fallback: float = 0.0) -> float:
    """점수를 0.0~1.0으로 제한하고, NaN이면 fallback을 사용"""
    if math.isnan(value):
        value = fallback
    if math.isnan(value):
        return 0.0
    return _clamp(value)


def _interpolate(
    days: float,
    start_day: float,
    end_day: float,
    start_weight: float,
    end_weight: float,
) -> float:
    """구간 내 선형 보간 (결과는 구간 끝값 사이로 제한)"""
    fraction = (days - start_day) / (end_day - start_day)
    weight = start_weight + (end_weight - start_weight) * fraction
    return _clamp(weight, end_weight, start_weight)


def calculate_temporal_weight(days_since_visit: float) -> float:
    """마지막 방문 후 경과 일수에 따른 가중치

    - 0일 미만 (미래 시각): 1.0
    - 0~7일: 1.0 → 0.9 선형 감소
    - 7~30일: 0.9 → 0.6 선형 감소
    - 30~90일: 0.6 → 0.2 선형 감소
    - 90일 초과: max(0.05, 0.2 × e^(-days/180))

    Args:
        days_since_visit: 경과 일수 (소수점 포함)

    Returns:
        0.0~1.0 가중치 (경과 일수에 대해 단조 감소)
    """
    days = days_since_visit
    if math.isnan(days) or days < 0:
        return 1.0

    if days <= RECENT_WINDOW_DAYS:
        return _interpolate(days, 0, RECENT_WINDOW_DAYS, 1.0, 0.9)
    if days <= MONTH_WINDOW_DAYS:
        return _interpolate(
            days, RECENT_WINDOW_DAYS, MONTH_WINDOW_DAYS, 0.9, 0.6
        )
    if days <= QUARTER_WINDOW_DAYS:
        return _interpolate(
            days, MONTH_WINDOW_DAYS, QUARTER_WINDOW_DAYS, 0.6, 0.2
        )
    return max(MIN_TEMPORAL_WEIGHT, 0.2 * math.exp(-days / STALE_DECAY_DAYS))


def feedback_reason(feedback: Optional[FeedbackStats]) -> str:
    """피드백 집계에 대한 추천 사유 문구"""
    if feedback is None:
        return ""

    likes, dislikes = feedback.likes, feedback.dislikes
    if likes > 0 and dislikes == 0:
        if likes == 1:
            return " (You liked this previously)"
        return f" (You liked this {likes} times)"
    if dislikes > 0 and likes == 0:
        if dislikes >= STRONG_DISLIKE_THRESHOLD:
            return " (Muting similar sites)"
        if dislikes == 1:
            return " (You disliked this previously)"
        return f" (You disliked this {dislikes} times)"
    if likes > 0 and dislikes > 0:
        net = likes - dislikes
        if net > 0:
            return " (Mixed feedback, mostly positive)"
        if net < 0:
            return " (Mixed feedback, mostly negative)"
        return " (Mixed feedback)"
    return ""


def apply_feedback_to_score(
    base_score: float,
    feedback: Optional[FeedbackStats],
    kind: RecommendationKind,
) -> FeedbackAdjustment:
    """피드백을 반영해 점수를 조정

    - like만 있음: +0.15 × min(likes, 3)
    - dislike만 있음: -0.2 × min(dislikes, 3), dislike 2회 이상이면 추가로 × 0.1
    - 혼합: 순 like 수 기준으로 절반 강도의 가감 (최대 2회분)

    kind는 종류별 차등 조정을 위한 자리이며 현재 조정량에는 영향이 없습니다.

    Args:
        base_score: 조정 전 점수
        feedback: 대표 URL의 피드백 집계 (없으면 None)
        kind: 추천 종류

    Returns:
        FeedbackAdjustment (0.0~1.0 점수, 사유 문구)
    """
    if feedback is None:
        return FeedbackAdjustment(score=safe_score(base_score), reason="")

    likes, dislikes = feedback.likes, feedback.dislikes
    adjusted = base_score

    if likes > 0 and dislikes == 0:
        adjusted += LIKE_BONUS * min(likes, MAX_COUNTED_FEEDBACK)
    elif dislikes > 0 and likes == 0:
        adjusted -= DISLIKE_PENALTY * min(dislikes, MAX_COUNTED_FEEDBACK)
        if dislikes >= STRONG_DISLIKE_THRESHOLD:
            adjusted *= STRONG_DISLIKE_MULTIPLIER
    elif likes > 0 and dislikes > 0:
        net = likes - dislikes
        if net > 0:
            adjusted += (
                LIKE_BONUS
                * min(net, MAX_COUNTED_NET_FEEDBACK)
                * MIXED_FEEDBACK_FACTOR
            )
        elif net < 0:
            adjusted -= (
                DISLIKE_PENALTY
                * min(abs(net), MAX_COUNTED_NET_FEEDBACK)
                * MIXED_FEEDBACK_FACTOR
            )

    return FeedbackAdjustment(
        score=safe_score(adjusted, fallback=base_score),
        reason=feedback_reason(feedback),
    )


def calculate_feedback_score(feedback: Optional[FeedbackStats]) -> float:
    """피드백 구성 점수 (중립 0.5 기준의 절대 점수)

    - 피드백 없음: 0.5
    - like만 있음: min(1.0, 0.7 + 0.1 × likes)
    - dislike만 있음: max(0.0, 0.3 - 0.15 × dislikes)
    - 혼합: 0.5 + 0.1 × (likes - dislikes)
    """
    if feedback is None:
        return NEUTRAL_FEEDBACK_SCORE

    likes, dislikes = feedback.likes, feedback.dislikes
    if likes > 0 and dislikes == 0:
        score = LIKED_FEEDBACK_BASE + likes * LIKED_FEEDBACK_STEP
    elif dislikes > 0 and likes == 0:
        score = DISLIKED_FEEDBACK_BASE - dislikes * DISLIKED_FEEDBACK_STEP
    elif likes > 0 and dislikes > 0:
        score = NEUTRAL_FEEDBACK_SCORE + (likes - dislikes) * MIXED_FEEDBACK_STEP
    else:
        score = NEUTRAL_FEEDBACK_SCORE

    return safe_score(score, fallback=NEUTRAL_FEEDBACK_SCORE)


def apply_personalization(
    frequency_score: float,
    recency_score: float,
    feedback_score: float,
    settings: PersonalizationSettings,
) -> float:
    """구성 점수를 개인화 가중치로 결합

    가중치 합이 1이 아니면 정규화한 뒤 결합합니다.

    Returns:
        결합 점수 (0.0~1.0, NaN이면 0.0)
    """
    recency_weight, frequency_weight, feedback_weight = normalize_weights(
        settings.recency_weight,
        settings.frequency_weight,
        settings.feedback_weight,
    )

    combined = (
        safe_score(frequency_score) * frequency_weight
        + safe_score(recency_score) * recency_weight
        + safe_score(feedback_score) * feedback_weight
    )
    return safe_score(combined)


def meets_minimum_score(
    score: float, settings: PersonalizationSettings
) -> bool:
    """결합 점수가 최소 기준 이상인지 확인"""
    return score >= settings.min_score


def calculate_component_scores(
    stats: DomainStats,
    max_visits: int,
    days_since_visit: float,
    feedback: Optional[FeedbackStats],
    settings: PersonalizationSettings,
) -> ComponentScores:
    """도메인 하나의 빈도/최근성/피드백 구성 점수와 결합 점수 계산

    Args:
        stats: 도메인 통계
        max_visits: 전체 도메인 중 최대 방문 수
        days_since_visit: 마지막 방문 후 경과 일수
        feedback: 대표 URL의 피드백 집계
        settings: 개인화 설정

    Returns:
        ComponentScores
    """
    frequency = (
        safe_score(stats.visit_count / max_visits) if max_visits > 0 else 0.0
    )
    recency = calculate_temporal_weight(days_since_visit)
    feedback_score = calculate_feedback_score(feedback)
    combined = apply_personalization(frequency, recency, feedback_score, settings)

    return ComponentScores(
        frequency=frequency,
        recency=recency,
        feedback=feedback_score,
        combined=combined,
    )
