"""방문/피드백 집계 단위 테스트"""

import pytest

from revisit.domains.feedback.schemas import FeedbackRecord, FeedbackValue
from revisit.domains.recommendations.aggregation import (
    aggregate_domains,
    build_feedback_index,
    extract_domain,
    extract_keywords,
)


class TestExtractDomain:
    """도메인 추출 테스트"""

    @pytest.mark.parametrize(
        "url, expected",
        [
            ("https://www.example.com/path?q=1", "www.example.com"),
            ("http://Docs.Python.org:8080/3/", "docs.python.org"),
            ("https://a.com", "a.com"),
        ],
    )
    def test_hostname(self, url, expected):
        assert extract_domain(url) == expected

    def test_unparseable_url_falls_back_to_raw_string(self):
        """파싱 불가능한 URL은 원본 문자열 사용"""
        assert extract_domain("not a url") == "not a url"
        assert extract_domain("http://[::1") == "http://[::1"


class TestExtractKeywords:
    """키워드 추출 테스트"""

    def test_lowercase_tokens_longer_than_three(self):
        """세 글자 초과 토큰만 소문자로 추출"""
        keywords = extract_keywords("Python Tutorials - Learn the API Fast")

        assert keywords == {"python", "tutorials", "learn", "fast"}

    def test_domain_keywords(self):
        assert extract_keywords("docs.python.org") == {"docs", "python"}

    def test_empty_text(self):
        assert extract_keywords("") == set()


class TestAggregateDomains:
    """도메인 집계 테스트"""

    def test_visit_counts_are_summed_per_domain(self, make_visit):
        """같은 도메인의 visit_count 합산"""
        history = [
            make_visit("https://a.com/x", days_ago=1, visit_count=3),
            make_visit("https://b.com/", days_ago=2, visit_count=4),
            make_visit("https://a.com/y", days_ago=5, visit_count=2),
        ]

        stats = aggregate_domains(history)

        assert [s.domain for s in stats] == ["a.com", "b.com"]
        assert stats[0].visit_count == 5
        assert stats[1].visit_count == 4

    def test_last_visit_and_representative_url(self, make_visit):
        """최근 방문 시각은 최댓값, 대표 URL은 처음 등장한 URL"""
        older = make_visit("https://a.com/old", days_ago=10)
        newer = make_visit("https://a.com/new", days_ago=1)

        stats = aggregate_domains([older, newer])[0]

        assert stats.last_visited_at == newer.visited_at
        assert stats.representative_url == "https://a.com/old"

    def test_keywords_from_domain_and_titles(self, make_visit):
        """도메인과 제목에서 키워드 수집"""
        history = [
            make_visit("https://docs.python.org/3/", title="Asyncio Guide"),
            make_visit("https://docs.python.org/3/t", title=None),
        ]

        stats = aggregate_domains(history)[0]

        assert stats.keywords == {"docs", "python", "asyncio", "guide"}

    def test_empty_history(self):
        assert aggregate_domains([]) == []


class TestFeedbackIndex:
    """피드백 인덱스 테스트"""

    def test_counts_per_url(self):
        feedback = [
            FeedbackRecord(
                url="https://a.com", value=FeedbackValue.LIKE, created_at=1
            ),
            FeedbackRecord(
                url="https://a.com", value=FeedbackValue.DISLIKE, created_at=2
            ),
            FeedbackRecord(
                url="https://a.com", value=FeedbackValue.LIKE, created_at=3
            ),
            FeedbackRecord(
                url="https://b.com", value=FeedbackValue.DISLIKE, created_at=4
            ),
        ]

        index = build_feedback_index(feedback)

        assert index["https://a.com"].likes == 2
        assert index["https://a.com"].dislikes == 1
        assert index["https://b.com"].likes == 0
        assert index["https://b.com"].dislikes == 1
        assert "https://c.com" not in index
