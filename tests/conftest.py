"""테스트 설정"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from revisit.container import ServiceContainer, create_container
from revisit.core.config import Settings
from revisit.core.utils.datetime import days_ago_ms
from revisit.domains.history.schemas import VisitRecord
from revisit.main import create_app

# 2023-11-14T22:13:20Z
FIXED_NOW_MS = 1_700_000_000_000


class FakeClock:
    """고정 시각을 반환하는 테스트용 시계 (epoch ms)"""

    def __init__(self, now: int = FIXED_NOW_MS):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


def _make_visit(
    url: str,
    days_ago: float = 0,
    visit_count: int = 1,
    title: str | None = None,
    now: int = FIXED_NOW_MS,
) -> VisitRecord:
    """n일 전 방문 기록 생성"""
    return VisitRecord(
        url=url,
        title=title,
        visited_at=days_ago_ms(days_ago, now),
        visit_count=visit_count,
    )


@pytest.fixture
def make_visit():
    """방문 기록 팩토리 (기준 시각 FIXED_NOW_MS)"""
    return _make_visit


@pytest.fixture
def clock() -> FakeClock:
    """고정 시계"""
    return FakeClock()


@pytest.fixture
def container(clock: FakeClock) -> ServiceContainer:
    """고정 시계를 사용하는 서비스 컨테이너"""
    return create_container(Settings(), clock=clock)


@pytest_asyncio.fixture
async def client(container: ServiceContainer):
    """비동기 테스트 클라이언트 (인메모리 컨테이너 사용)"""
    app = create_app(container)

    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport, base_url="http://test"
    ) as client:
        yield client
