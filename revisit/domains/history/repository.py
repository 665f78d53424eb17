"""History 도메인 리포지토리

방문 기록의 인메모리 저장소입니다. 영속 저장소는 이 인터페이스를
구현해 교체할 수 있습니다.
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional

from revisit.core.logging import get_logger
from revisit.core.utils.datetime import now_ms
from revisit.domains.history.schemas import VisitRecord

logger = get_logger(__name__)

DEFAULT_HISTORY_LIMIT = 200


class HistorySource(ABC):
    """방문 기록 제공자 인터페이스"""

    @abstractmethod
    async def get_recent_history(
        self, limit: int = DEFAULT_HISTORY_LIMIT
    ) -> list[VisitRecord]:
        """최근 방문 기록 조회 (최신순)"""
        raise NotImplementedError


class HistoryRepository(HistorySource):
    """방문 기록 리포지토리 (인메모리)

    URL당 하나의 레코드를 유지하며, 재방문 시 visit_count를 증가시킵니다.
    """

    def __init__(self, clock: Callable[[], int] = now_ms):
        self._clock = clock
        self._entries: dict[str, VisitRecord] = {}

    async def record_visit(
        self, url: str, title: Optional[str] = None
    ) -> Optional[VisitRecord]:
        """페이지 방문 기록

        Args:
            url: 방문한 URL (앞뒤 공백 제거)
            title: 페이지 제목 (비어 있으면 기존 제목 유지)

        Returns:
            저장된 방문 기록, URL이 비어 있으면 None
        """
        normalized_url = url.strip() if url else ""
        if not normalized_url:
            logger.warning("record_visit: empty URL, skipping")
            return None

        visited_at = self._clock()
        existing = self._entries.get(normalized_url)

        if existing is not None:
            record = existing.model_copy(
                update={
                    "title": title or existing.title,
                    "visited_at": visited_at,
                    "visit_count": existing.visit_count + 1,
                }
            )
        else:
            record = VisitRecord(
                url=normalized_url,
                title=title or None,
                visited_at=visited_at,
                visit_count=1,
            )

        self._entries[normalized_url] = record
        logger.debug(
            f"Recorded visit: url={normalized_url}, "
            f"visit_count={record.visit_count}"
        )
        return record

    async def add_records(self, records: list[VisitRecord]) -> None:
        """방문 기록 일괄 적재 (기존 URL은 덮어씀)"""
        for record in records:
            self._entries[record.url] = record

    async def get_recent_history(
        self, limit: int = DEFAULT_HISTORY_LIMIT
    ) -> list[VisitRecord]:
        if limit <= 0:
            return []
        entries = sorted(
            self._entries.values(),
            key=lambda record: record.visited_at,
            reverse=True,
        )
        return entries[:limit]

    async def clear(self) -> None:
        """방문 기록 전체 삭제"""
        self._entries.clear()
