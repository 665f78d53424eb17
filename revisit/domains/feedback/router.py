"""Feedback 도메인 라우터"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from revisit.core.schemas import APIResponse, create_response
from revisit.domains.feedback.repository import FeedbackRepository
from revisit.domains.feedback.schemas import FeedbackCreate, FeedbackRecord

router = APIRouter()


def get_feedback_repository(request: Request) -> FeedbackRepository:
    """FeedbackRepository 의존성"""
    return request.app.state.container.feedback_repository


@router.post("", response_model=APIResponse[FeedbackRecord], status_code=201)
async def send_feedback(
    feedback: FeedbackCreate,
    repository: FeedbackRepository = Depends(get_feedback_repository),
):
    """추천 피드백 등록"""
    record = await repository.add_feedback(feedback.url, feedback.value)
    return create_response(data=record, message="피드백이 저장되었습니다.")


@router.get("", response_model=APIResponse[list[FeedbackRecord]])
async def get_feedback(
    url: Optional[str] = Query(None, description="특정 URL만 조회"),
    repository: FeedbackRepository = Depends(get_feedback_repository),
):
    """피드백 목록 조회"""
    if url:
        records = await repository.get_feedback_for_url(url)
    else:
        records = await repository.get_all_feedback()
    return create_response(data=records, message="피드백을 조회했습니다.")


@router.delete("", response_model=APIResponse[None])
async def clear_feedback(
    repository: FeedbackRepository = Depends(get_feedback_repository),
):
    """피드백 전체 삭제"""
    await repository.clear()
    return create_response(message="피드백을 모두 삭제했습니다.")
