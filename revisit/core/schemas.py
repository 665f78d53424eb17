"""API 응답 봉투(envelope) 스키마

성공 응답은 APIResponse[T], 에러 응답은 ErrorResponse 구조를 따릅니다.

Usage::

    from revisit.core.schemas import APIResponse, create_response

    @router.get("", response_model=APIResponse[list[Recommendation]])
    async def get_recommendations(...):
        items = await service.get_recommendations(limit)
        return create_response(data=items, message="추천 목록을 조회했습니다.")
"""

from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, Field

DataT = TypeVar("DataT")

DEFAULT_SUCCESS_MESSAGE = "요청이 성공적으로 처리되었습니다."


class APIResponse(BaseModel, Generic[DataT]):
    """성공 응답"""

    success: bool = True
    message: str = DEFAULT_SUCCESS_MESSAGE
    data: Optional[DataT] = None


def create_response(
    data: Optional[DataT] = None,
    message: str = DEFAULT_SUCCESS_MESSAGE,
) -> APIResponse[DataT]:
    """성공 응답 생성

    Generic 모델은 classmethod 팩토리를 쓰기 어려워 함수로 제공합니다.

    Args:
        data: 응답 데이터 (없으면 None)
        message: 사용자에게 보여줄 메시지

    Returns:
        APIResponse 인스턴스
    """
    return APIResponse(success=True, message=message, data=data)


class ErrorDetail(BaseModel):
    code: str = Field(..., description="에러 코드")
    message: str = Field(..., description="에러 메시지")
    detail: Optional[dict[str, Any]] = Field(
        default=None, description="추가 정보 (검증 에러 목록 등)"
    )


class ErrorResponse(BaseModel):
    """에러 응답

    Example::

        {
            "success": false,
            "message": "개인화 설정 값이 올바르지 않습니다.",
            "error": {
                "code": "INVALID_PERSONALIZATION_SETTINGS",
                "message": "개인화 설정 값이 올바르지 않습니다.",
                "detail": {"errors": ["min_score must be between 0 and 1"]}
            }
        }
    """

    success: bool = False
    message: str
    error: ErrorDetail
