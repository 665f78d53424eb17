"""History 도메인 라우터"""

from fastapi import APIRouter, Depends, Query, Request

from revisit.core.exceptions import BadRequestException
from revisit.core.schemas import APIResponse, ErrorResponse, create_response
from revisit.domains.history.repository import HistoryRepository
from revisit.domains.history.schemas import VisitCreate, VisitRecord

router = APIRouter()


def get_history_repository(request: Request) -> HistoryRepository:
    """HistoryRepository 의존성"""
    return request.app.state.container.history_repository


@router.post(
    "",
    response_model=APIResponse[VisitRecord],
    status_code=201,
    responses={400: {"model": ErrorResponse}},
)
async def record_visit(
    visit: VisitCreate,
    repository: HistoryRepository = Depends(get_history_repository),
):
    """페이지 방문 기록"""
    record = await repository.record_visit(visit.url, visit.title)
    if record is None:
        raise BadRequestException(
            message="빈 URL은 기록할 수 없습니다.",
            error_code="EMPTY_URL",
        )
    return create_response(data=record, message="방문 기록이 저장되었습니다.")


@router.get("", response_model=APIResponse[list[VisitRecord]])
async def get_recent_history(
    limit: int = Query(50, ge=1, le=500, description="조회할 최대 기록 수"),
    repository: HistoryRepository = Depends(get_history_repository),
):
    """최근 방문 기록 조회 (최신순)"""
    records = await repository.get_recent_history(limit)
    return create_response(data=records, message="방문 기록을 조회했습니다.")


@router.delete("", response_model=APIResponse[None])
async def clear_history(
    repository: HistoryRepository = Depends(get_history_repository),
):
    """방문 기록 전체 삭제"""
    await repository.clear()
    return create_response(message="방문 기록을 모두 삭제했습니다.")
