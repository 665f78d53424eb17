"""FastAPI 애플리케이션 진입점"""

from contextlib import asynccontextmanager
from typing import Any, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from revisit.api.v1 import api_router as api_v1_router
from revisit.container import ServiceContainer, create_container
from revisit.core.config import settings
from revisit.core.exceptions import register_exception_handlers
from revisit.core.logging import get_logger, setup_logging
from revisit.core.middlewares import LoggingMiddleware
from revisit.core.schemas import APIResponse, create_response

setup_logging(settings)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기 관리"""
    container: ServiceContainer = app.state.container
    logger.info(
        f"🚀 Starting {settings.app_name} "
        f"(history_window={container.recommendation_service.history_window}, "
        f"cache_ttl={container.recommendation_service.cache.ttl_ms}ms)"
    )
    yield
    container.recommendation_service.clear_cache()
    logger.info(f"👋 Shutting down {settings.app_name}...")


def create_app(container: Optional[ServiceContainer] = None) -> FastAPI:
    """FastAPI 애플리케이션 팩토리

    Args:
        container: 서비스 컨테이너 (테스트에서 주입, 없으면 설정으로 생성)
    """
    app = FastAPI(
        title=settings.app_name,
        description="방문 기록 기반 재방문 추천 API",
        version="0.1.0",
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        openapi_url="/openapi.json" if settings.is_development else None,
        lifespan=lifespan,
    )
    app.state.container = container or create_container(settings)

    # 미들웨어 설정 (순서 중요: 아래에서 위로 실행됨)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware)

    register_exception_handlers(app)

    # API 라우터 등록 (버저닝)
    app.include_router(api_v1_router, prefix="/api/v1")

    @app.get(
        "/health", tags=["Health"], response_model=APIResponse[dict[str, Any]]
    )
    async def health_check():
        """헬스 체크 (추천 캐시 상태 포함)"""
        cache = app.state.container.recommendation_service.cache
        cache_state = "warm" if cache.entry is not None else "empty"
        return create_response(
            data={
                "status": "healthy",
                "app_name": settings.app_name,
                "environment": settings.app_env,
                "recommendation_cache": cache_state,
            },
            message="OK",
        )

    return app


app = create_app()
