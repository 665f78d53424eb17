"""Feedback Repository 단위 테스트"""

import pytest

from revisit.domains.feedback.repository import FeedbackRepository
from revisit.domains.feedback.schemas import FeedbackValue


@pytest.fixture
def repository(clock):
    return FeedbackRepository(clock=clock)


class TestFeedbackRepository:
    """피드백 저장/조회 테스트"""

    @pytest.mark.asyncio
    async def test_add_feedback(self, repository, clock):
        record = await repository.add_feedback(
            "https://a.com", FeedbackValue.LIKE
        )

        assert record.url == "https://a.com"
        assert record.value == FeedbackValue.LIKE
        assert record.created_at == clock.now

    @pytest.mark.asyncio
    async def test_feedback_is_append_only(self, repository):
        """같은 URL의 피드백도 모두 누적"""
        await repository.add_feedback("https://a.com", FeedbackValue.LIKE)
        await repository.add_feedback("https://a.com", FeedbackValue.DISLIKE)
        await repository.add_feedback("https://b.com", FeedbackValue.LIKE)

        assert len(await repository.get_all_feedback()) == 3
        values = [
            r.value for r in await repository.get_feedback_for_url("https://a.com")
        ]
        assert values == [FeedbackValue.LIKE, FeedbackValue.DISLIKE]

    @pytest.mark.asyncio
    async def test_returned_list_is_a_snapshot(self, repository):
        await repository.add_feedback("https://a.com", FeedbackValue.LIKE)

        snapshot = await repository.get_all_feedback()
        snapshot.clear()

        assert len(await repository.get_all_feedback()) == 1

    @pytest.mark.asyncio
    async def test_clear(self, repository):
        await repository.add_feedback("https://a.com", FeedbackValue.LIKE)

        await repository.clear()

        assert await repository.get_all_feedback() == []
