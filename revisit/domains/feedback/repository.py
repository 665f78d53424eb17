"""Feedback 도메인 리포지토리 (인메모리)"""

from abc import ABC, abstractmethod
from typing import Callable

from revisit.core.logging import get_logger
from revisit.core.utils.datetime import now_ms
from revisit.domains.feedback.schemas import FeedbackRecord, FeedbackValue

logger = get_logger(__name__)


class FeedbackSource(ABC):
    """피드백 기록 제공자 인터페이스"""

    @abstractmethod
    async def get_all_feedback(self) -> list[FeedbackRecord]:
        """전체 피드백 기록 조회"""
        raise NotImplementedError


class FeedbackRepository(FeedbackSource):
    """피드백 리포지토리 (인메모리, 추가 전용)"""

    def __init__(self, clock: Callable[[], int] = now_ms):
        self._clock = clock
        self._records: list[FeedbackRecord] = []

    async def add_feedback(
        self, url: str, value: FeedbackValue
    ) -> FeedbackRecord:
        """피드백 추가

        Args:
            url: 추천된 URL
            value: like 또는 dislike

        Returns:
            저장된 피드백 기록
        """
        record = FeedbackRecord(
            url=url, value=value, created_at=self._clock()
        )
        self._records.append(record)
        logger.info(f"Feedback recorded: url={url}, value={record.value.value}")
        return record

    async def get_all_feedback(self) -> list[FeedbackRecord]:
        return list(self._records)

    async def get_feedback_for_url(self, url: str) -> list[FeedbackRecord]:
        """특정 URL의 피드백 조회"""
        return [record for record in self._records if record.url == url]

    async def clear(self) -> None:
        """피드백 전체 삭제"""
        self._records.clear()
