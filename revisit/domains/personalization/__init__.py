"""Personalization 도메인 모듈

추천 점수에 적용되는 사용자 개인화 가중치를 관리합니다.

구조:
    - schemas.py: 개인화 설정 스키마 (PersonalizationSettings, PersonalizationUpdate)
    - service.py: 설정 조회/갱신/초기화, 가중치 정규화, 변경 리스너
    - router.py: API 엔드포인트
    - exceptions.py: 도메인 예외
"""

from revisit.domains.personalization.exceptions import (
    InvalidPersonalizationSettingsException,
    PersonalizationErrorCode,
)
from revisit.domains.personalization.schemas import (
    PersonalizationSettings,
    PersonalizationUpdate,
)
from revisit.domains.personalization.service import (
    PersonalizationService,
    SettingsSource,
    normalize_weights,
    validate_personalization_settings,
)

__all__ = [
    "PersonalizationSettings",
    "PersonalizationUpdate",
    "PersonalizationService",
    "SettingsSource",
    "normalize_weights",
    "validate_personalization_settings",
    "PersonalizationErrorCode",
    "InvalidPersonalizationSettingsException",
]
