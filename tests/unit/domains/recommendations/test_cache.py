"""추천 캐시 단위 테스트"""

import pytest
from pydantic import ValidationError

from revisit.core.utils.datetime import MINUTE_MS
from revisit.domains.personalization.schemas import PersonalizationSettings
from revisit.domains.recommendations.cache import (
    DEFAULT_CACHE_TTL_MS,
    RecommendationCache,
    hash_personalization_settings,
)
from revisit.domains.recommendations.schemas import (
    ComponentScores,
    Recommendation,
    RecommendationKind,
)

NOW = 1_700_000_000_000


@pytest.fixture
def recommendations():
    scores = ComponentScores(
        frequency=1.0, recency=1.0, feedback=0.5, combined=0.9
    )
    return [
        Recommendation(
            url="https://a.com",
            title="a.com",
            reason="reason",
            score=0.9,
            kind=RecommendationKind.FAVORITE,
            component_scores=scores,
        )
    ]


class TestSettingsHash:
    """설정 해시 테스트"""

    def test_deterministic(self):
        first = hash_personalization_settings(PersonalizationSettings())
        second = hash_personalization_settings(PersonalizationSettings())

        assert first == second
        assert len(first) == 64

    @pytest.mark.parametrize(
        "field, value",
        [
            ("recency_weight", 0.6),
            ("frequency_weight", 0.2),
            ("feedback_weight", 0.3),
            ("min_score", 0.2),
            ("max_recommendations", 10),
        ],
    )
    def test_every_field_changes_hash(self, field, value):
        base = PersonalizationSettings()
        changed = base.model_copy(update={field: value})

        assert hash_personalization_settings(
            base
        ) != hash_personalization_settings(changed)


class TestRecommendationCache:
    """TTL 캐시 테스트"""

    def test_default_ttl_is_five_minutes(self):
        assert DEFAULT_CACHE_TTL_MS == 5 * MINUTE_MS
        assert RecommendationCache().ttl_ms == 5 * MINUTE_MS

    def test_empty_cache_misses(self):
        assert RecommendationCache().get("hash", NOW) is None

    def test_hit_within_ttl(self, recommendations):
        cache = RecommendationCache()
        cache.put(recommendations, "hash", NOW)

        assert cache.get("hash", NOW + 5 * MINUTE_MS - 1) == recommendations

    def test_expired_entry_is_never_served(self, recommendations):
        """TTL이 지난 엔트리는 반환하지 않음"""
        cache = RecommendationCache()
        cache.put(recommendations, "hash", NOW)

        assert cache.get("hash", NOW + 5 * MINUTE_MS) is None

    def test_hash_mismatch_misses(self, recommendations):
        cache = RecommendationCache()
        cache.put(recommendations, "hash", NOW)

        assert cache.get("other-hash", NOW) is None

    def test_put_replaces_entry(self, recommendations):
        cache = RecommendationCache()
        cache.put(recommendations, "old", NOW)

        entry = cache.put([], "new", NOW + 1)

        assert cache.entry == entry
        assert cache.get("old", NOW + 1) is None
        assert cache.get("new", NOW + 1) == []

    def test_clear(self, recommendations):
        cache = RecommendationCache(ttl_ms=MINUTE_MS)
        cache.put(recommendations, "hash", NOW)

        cache.clear()

        assert cache.entry is None
        assert cache.get("hash", NOW) is None

    def test_served_recommendations_do_not_alter_entry(self, recommendations):
        """조회 결과를 변경해도 캐시 엔트리는 그대로 유지"""
        cache = RecommendationCache()
        cache.put(recommendations, "hash", NOW)

        served = cache.get("hash", NOW)
        served.clear()

        with pytest.raises(ValidationError):
            cache.get("hash", NOW)[0].score = 0.1

        cached = cache.get("hash", NOW)
        assert len(cached) == 1
        assert cached[0].score == 0.9
