"""애플리케이션 서비스 컨테이너

리포지토리와 서비스를 한 번 생성해 app.state에 보관합니다.
추천 캐시는 RecommendationService 하나가 소유하며,
개인화 설정이 바뀌면 리스너를 통해 무효화됩니다.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from revisit.core.config import Settings, get_settings
from revisit.core.utils.datetime import now_ms
from revisit.domains.feedback.repository import FeedbackRepository
from revisit.domains.history.repository import HistoryRepository
from revisit.domains.personalization.schemas import PersonalizationSettings
from revisit.domains.personalization.service import PersonalizationService
from revisit.domains.recommendations.cache import RecommendationCache
from revisit.domains.recommendations.service import RecommendationService


@dataclass
class ServiceContainer:
    history_repository: HistoryRepository
    feedback_repository: FeedbackRepository
    personalization_service: PersonalizationService
    recommendation_service: RecommendationService


def create_container(
    settings: Optional[Settings] = None,
    clock: Callable[[], int] = now_ms,
) -> ServiceContainer:
    """서비스 컨테이너 생성

    Args:
        settings: 애플리케이션 설정 (없으면 get_settings())
        clock: 현재 시각 함수 (epoch ms, 테스트에서 고정 시각 주입용)

    Returns:
        ServiceContainer
    """
    settings = settings or get_settings()

    history_repository = HistoryRepository(clock=clock)
    feedback_repository = FeedbackRepository(clock=clock)
    personalization_service = PersonalizationService(
        PersonalizationSettings(
            max_recommendations=settings.default_recommendation_limit
        )
    )
    recommendation_service = RecommendationService(
        history_source=history_repository,
        feedback_source=feedback_repository,
        settings_source=personalization_service,
        cache=RecommendationCache(ttl_ms=settings.recommendation_cache_ttl_ms),
        history_window=settings.history_window,
        clock=clock,
    )
    personalization_service.subscribe(recommendation_service.clear_cache)

    return ServiceContainer(
        history_repository=history_repository,
        feedback_repository=feedback_repository,
        personalization_service=personalization_service,
        recommendation_service=recommendation_service,
    )
