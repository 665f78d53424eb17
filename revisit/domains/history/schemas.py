"""History 도메인 스키마 정의"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class VisitRecord(BaseModel):
    """방문 기록 (추천 엔진 입력, 읽기 전용)

    Attributes:
        url: 방문한 URL
        title: 페이지 제목 (없을 수 있음)
        visited_at: 마지막 방문 시각 (epoch ms)
        visit_count: 누적 방문 횟수 (1 이상)
    """

    model_config = ConfigDict(frozen=True)

    url: str
    title: Optional[str] = None
    visited_at: int = Field(..., description="마지막 방문 시각 (epoch ms)")
    visit_count: int = Field(default=1, ge=1, description="누적 방문 횟수")


class VisitCreate(BaseModel):
    """방문 기록 요청 스키마"""

    url: str = Field(..., min_length=1, description="방문한 URL")
    title: Optional[str] = Field(default=None, description="페이지 제목")
