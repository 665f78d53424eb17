"""Personalization 도메인 라우터"""

from fastapi import APIRouter, Depends, Request

from revisit.core.schemas import APIResponse, ErrorResponse, create_response
from revisit.domains.personalization.schemas import (
    PersonalizationSettings,
    PersonalizationUpdate,
)
from revisit.domains.personalization.service import PersonalizationService

router = APIRouter()


def get_personalization_service(request: Request) -> PersonalizationService:
    """PersonalizationService 의존성"""
    return request.app.state.container.personalization_service


@router.get("", response_model=APIResponse[PersonalizationSettings])
async def get_personalization(
    service: PersonalizationService = Depends(get_personalization_service),
):
    """개인화 설정 조회"""
    return create_response(
        data=service.get_personalization_settings(),
        message="개인화 설정을 조회했습니다.",
    )


@router.put(
    "",
    response_model=APIResponse[PersonalizationSettings],
    responses={400: {"model": ErrorResponse}},
)
async def update_personalization(
    updates: PersonalizationUpdate,
    service: PersonalizationService = Depends(get_personalization_service),
):
    """개인화 설정 부분 업데이트 (추천 캐시 무효화)"""
    return create_response(
        data=service.update_settings(updates),
        message="개인화 설정이 변경되었습니다.",
    )


@router.post("/reset", response_model=APIResponse[PersonalizationSettings])
async def reset_personalization(
    service: PersonalizationService = Depends(get_personalization_service),
):
    """개인화 설정 초기화"""
    return create_response(
        data=service.reset_settings(),
        message="개인화 설정을 기본값으로 초기화했습니다.",
    )
