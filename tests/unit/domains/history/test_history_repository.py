"""History Repository 단위 테스트"""

import pytest

from revisit.core.utils.datetime import MINUTE_MS
from revisit.domains.history.repository import HistoryRepository


@pytest.fixture
def repository(clock):
    """고정 시계를 사용하는 HistoryRepository"""
    return HistoryRepository(clock=clock)


class TestRecordVisit:
    """방문 기록 테스트"""

    @pytest.mark.asyncio
    async def test_new_visit(self, repository, clock):
        record = await repository.record_visit("https://a.com", "A site")

        assert record.url == "https://a.com"
        assert record.title == "A site"
        assert record.visit_count == 1
        assert record.visited_at == clock.now

    @pytest.mark.asyncio
    async def test_revisit_increments_count(self, repository, clock):
        """재방문 시 visit_count 증가, 방문 시각 갱신"""
        await repository.record_visit("https://a.com", "A site")
        clock.advance(MINUTE_MS)

        record = await repository.record_visit("https://a.com")

        assert record.visit_count == 2
        assert record.visited_at == clock.now
        assert record.title == "A site"

    @pytest.mark.asyncio
    async def test_url_is_trimmed(self, repository):
        record = await repository.record_visit("  https://a.com  ")

        assert record.url == "https://a.com"

    @pytest.mark.asyncio
    async def test_empty_url_is_skipped(self, repository):
        """빈 URL은 기록하지 않음"""
        assert await repository.record_visit("   ") is None
        assert await repository.get_recent_history() == []


class TestGetRecentHistory:
    """최근 방문 기록 조회 테스트"""

    @pytest.mark.asyncio
    async def test_most_recent_first(self, repository, make_visit):
        await repository.add_records(
            [
                make_visit("https://old.com", days_ago=5),
                make_visit("https://new.com", days_ago=0),
                make_visit("https://mid.com", days_ago=2),
            ]
        )

        records = await repository.get_recent_history()

        assert [r.url for r in records] == [
            "https://new.com",
            "https://mid.com",
            "https://old.com",
        ]

    @pytest.mark.asyncio
    async def test_limit(self, repository, make_visit):
        await repository.add_records(
            [make_visit(f"https://site{i}.com", days_ago=i) for i in range(5)]
        )

        assert len(await repository.get_recent_history(3)) == 3
        assert await repository.get_recent_history(0) == []

    @pytest.mark.asyncio
    async def test_clear(self, repository):
        await repository.record_visit("https://a.com")

        await repository.clear()

        assert await repository.get_recent_history() == []
