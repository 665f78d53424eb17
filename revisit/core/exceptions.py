"""전역 예외 및 예외 핸들러

모든 에러 응답은 ErrorResponse 형태의 JSON으로 반환됩니다.
"""

from enum import Enum
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from revisit.core.logging import get_logger
from revisit.core.schemas import ErrorDetail, ErrorResponse

logger = get_logger(__name__)

INTERNAL_ERROR_MESSAGE = "서버 내부 오류가 발생했습니다."


class ErrorCode(str, Enum):
    """전역 에러 코드"""

    INTERNAL_ERROR = "INTERNAL_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    BAD_REQUEST = "BAD_REQUEST"
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"


_STATUS_ERROR_CODES = {
    status.HTTP_400_BAD_REQUEST: ErrorCode.BAD_REQUEST,
    status.HTTP_404_NOT_FOUND: ErrorCode.NOT_FOUND,
    status.HTTP_405_METHOD_NOT_ALLOWED: ErrorCode.METHOD_NOT_ALLOWED,
}


class BaseAPIException(StarletteHTTPException):
    """기본 API 예외 클래스

    도메인 예외는 이 클래스를 상속해 error_code와 detail을 지정합니다.
    """

    def __init__(
        self,
        status_code: int,
        error_code: str,
        message: str,
        detail: Optional[Dict[str, Any]] = None,
    ):
        self.error_code = error_code
        self.message = message
        self.detail_info = detail or {}
        super().__init__(status_code=status_code, detail=message)


class BadRequestException(BaseAPIException):
    """400 Bad Request"""

    def __init__(
        self,
        message: str = "잘못된 요청입니다.",
        error_code: str = ErrorCode.BAD_REQUEST,
        detail: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            error_code=error_code,
            message=message,
            detail=detail,
        )


def error_response(
    status_code: int,
    code: str,
    message: str,
    detail: Optional[Dict[str, Any]] = None,
) -> JSONResponse:
    """ErrorResponse 본문을 담은 JSONResponse 생성"""
    body = ErrorResponse(
        message=message,
        error=ErrorDetail(code=code, message=message, detail=detail),
    )
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def base_exception_handler(
    request: Request, exc: BaseAPIException
) -> JSONResponse:
    """BaseAPIException 핸들러"""
    return error_response(
        exc.status_code, exc.error_code, exc.message, exc.detail_info
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """HTTPException 핸들러 (없는 경로, 허용되지 않는 메서드 등)"""
    code = _STATUS_ERROR_CODES.get(exc.status_code, ErrorCode.INTERNAL_ERROR)
    return error_response(exc.status_code, code, str(exc.detail))


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """요청 검증 실패 핸들러 (422)"""
    errors = [
        {
            "loc": list(error.get("loc", ())),
            "msg": error.get("msg", ""),
            "type": error.get("type", ""),
        }
        for error in exc.errors()
    ]
    return error_response(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        ErrorCode.VALIDATION_ERROR,
        "요청 값이 올바르지 않습니다.",
        {"errors": errors},
    )


async def generic_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """처리되지 않은 예외 핸들러"""
    logger.exception(
        f"Unhandled error on {request.method} {request.url.path}: {exc}"
    )
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorCode.INTERNAL_ERROR,
        INTERNAL_ERROR_MESSAGE,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """애플리케이션에 예외 핸들러 등록"""
    app.add_exception_handler(BaseAPIException, base_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(
        RequestValidationError, validation_exception_handler
    )
    app.add_exception_handler(Exception, generic_exception_handler)
