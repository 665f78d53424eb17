"""Recommendations 도메인 라우터"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from revisit.core.schemas import APIResponse, create_response
from revisit.domains.recommendations.schemas import Recommendation
from revisit.domains.recommendations.service import RecommendationService

router = APIRouter()


def get_recommendation_service(request: Request) -> RecommendationService:
    """RecommendationService 의존성"""
    return request.app.state.container.recommendation_service


@router.get("", response_model=APIResponse[list[Recommendation]])
async def get_recommendations(
    limit: Optional[int] = Query(
        None, ge=1, description="최대 추천 수 (없으면 개인화 설정값)"
    ),
    service: RecommendationService = Depends(get_recommendation_service),
):
    """다시 방문할 만한 추천 목록 조회"""
    recommendations = await service.get_recommendations(limit)
    return create_response(
        data=recommendations, message="추천 목록을 조회했습니다."
    )


@router.delete("/cache", response_model=APIResponse[None])
async def clear_recommendation_cache(
    service: RecommendationService = Depends(get_recommendation_service),
):
    """추천 캐시 무효화"""
    service.clear_cache()
    return create_response(message="추천 캐시를 삭제했습니다.")
