"""Personalization 도메인 예외 정의"""

from enum import Enum

from revisit.core.exceptions import BadRequestException


class PersonalizationErrorCode(str, Enum):
    """개인화 도메인 에러 코드"""

    INVALID_PERSONALIZATION_SETTINGS = "INVALID_PERSONALIZATION_SETTINGS"


class InvalidPersonalizationSettingsException(BadRequestException):
    """개인화 설정 값이 허용 범위를 벗어난 경우"""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(
            message="개인화 설정 값이 올바르지 않습니다.",
            error_code=PersonalizationErrorCode.INVALID_PERSONALIZATION_SETTINGS,
            detail={"errors": errors},
        )
