"""방문/피드백 기록 집계

- 방문 기록 → 도메인별 통계 (DomainStats)
- 피드백 기록 → URL별 like/dislike 수 (FeedbackStats)
"""

import re
from typing import Iterable
from urllib.parse import urlsplit

from revisit.domains.feedback.schemas import FeedbackRecord, FeedbackValue
from revisit.domains.history.schemas import VisitRecord
from revisit.domains.recommendations.types import DomainStats, FeedbackStats

# 이 길이보다 긴 토큰만 키워드로 사용
KEYWORD_MIN_LENGTH = 3

_TOKEN_SPLIT_PATTERN = re.compile(r"[^a-z0-9]+")


def extract_domain(url: str) -> str:
    """URL에서 호스트를 추출

    파싱할 수 없는 URL은 원본 문자열을 그대로 도메인으로 사용합니다.
    """
    try:
        hostname = urlsplit(url).hostname
    except ValueError:
        return url
    return hostname or url


def extract_keywords(text: str) -> set[str]:
    """소문자 영숫자 토큰 중 KEYWORD_MIN_LENGTH보다 긴 것만 추출"""
    return {
        token
        for token in _TOKEN_SPLIT_PATTERN.split(text.lower())
        if len(token) > KEYWORD_MIN_LENGTH
    }


def aggregate_domains(history: Iterable[VisitRecord]) -> list[DomainStats]:
    """방문 기록을 도메인별로 집계

    입력 순서가 도메인의 등장 순서(동점 정렬 기준)와
    대표 URL 선택을 결정합니다.

    Args:
        history: 방문 기록 (보통 최신순)

    Returns:
        처음 등장한 순서대로 정렬된 도메인 통계 리스트
    """
    domain_map: dict[str, DomainStats] = {}

    for record in history:
        domain = extract_domain(record.url)
        stats = domain_map.get(domain)
        if stats is None:
            stats = DomainStats(
                domain=domain,
                representative_url=record.url,
                last_visited_at=record.visited_at,
            )
            domain_map[domain] = stats

        stats.visit_count += record.visit_count
        stats.last_visited_at = max(stats.last_visited_at, record.visited_at)
        stats.keywords |= extract_keywords(domain)
        if record.title:
            stats.keywords |= extract_keywords(record.title)

    return list(domain_map.values())


def build_feedback_index(
    feedback: Iterable[FeedbackRecord],
) -> dict[str, FeedbackStats]:
    """피드백 기록을 URL별 like/dislike 수로 집계"""
    index: dict[str, FeedbackStats] = {}

    for record in feedback:
        stats = index.setdefault(record.url, FeedbackStats())
        if record.value == FeedbackValue.LIKE:
            stats.likes += 1
        elif record.value == FeedbackValue.DISLIKE:
            stats.dislikes += 1

    return index
