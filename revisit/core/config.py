import json
from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# 개인화 설정 max_recommendations의 상한
MAX_RECOMMENDATION_LIMIT = 20


class Settings(BaseSettings):
    """애플리케이션 설정

    환경 변수 또는 .env 파일에서 읽습니다 (대소문자 구분 없음).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Revisit"
    app_env: str = "development"
    debug: bool = True
    log_level: Optional[str] = Field(
        default=None, description="로그 레벨 (없으면 debug 여부로 결정)"
    )

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # CORS
    cors_origins: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]

    # Recommendations
    history_window: int = Field(
        default=200, description="추천 계산에 사용할 최근 방문 기록 수"
    )
    default_recommendation_limit: int = Field(
        default=5, description="초기 max_recommendations 값"
    )
    recommendation_cache_ttl_seconds: int = Field(
        default=300, description="추천 캐시 유효 시간 (초)"
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """JSON 배열 또는 쉼표 구분 문자열 허용"""
        if not isinstance(v, str):
            return v
        try:
            return json.loads(v)
        except json.JSONDecodeError:
            return [origin.strip() for origin in v.split(",") if origin.strip()]

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: Optional[str]) -> Optional[str]:
        if not v:
            return None
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}.")
        return level

    @model_validator(mode="after")
    def validate_recommendation_settings(self) -> "Settings":
        """추천 엔진 설정 및 운영 환경 검증"""
        positive_fields = {
            "HISTORY_WINDOW": self.history_window,
            "DEFAULT_RECOMMENDATION_LIMIT": self.default_recommendation_limit,
            "RECOMMENDATION_CACHE_TTL_SECONDS": (
                self.recommendation_cache_ttl_seconds
            ),
        }
        for env_name, value in positive_fields.items():
            if value <= 0:
                raise ValueError(f"{env_name} must be a positive integer.")

        if self.default_recommendation_limit > MAX_RECOMMENDATION_LIMIT:
            raise ValueError(
                "DEFAULT_RECOMMENDATION_LIMIT must be at most "
                f"{MAX_RECOMMENDATION_LIMIT}."
            )

        if self.is_production and self.debug:
            raise ValueError(
                "Production must not run with DEBUG enabled. "
                "Set DEBUG=false via environment variable."
            )

        return self

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"

    @property
    def recommendation_cache_ttl_ms(self) -> int:
        return self.recommendation_cache_ttl_seconds * 1000


@lru_cache
def get_settings() -> Settings:
    """설정 인스턴스를 반환 (캐싱됨)"""
    return Settings()


settings = get_settings()
