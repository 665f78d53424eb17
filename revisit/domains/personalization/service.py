"""Personalization 도메인 서비스

개인화 가중치의 조회/갱신/초기화를 담당합니다.
설정이 바뀌면 등록된 리스너(추천 캐시 무효화 등)를 호출합니다.
"""

from abc import ABC, abstractmethod
from typing import Callable

from revisit.core.logging import get_logger
from revisit.domains.personalization.exceptions import (
    InvalidPersonalizationSettingsException,
)
from revisit.domains.personalization.schemas import (
    DEFAULT_FEEDBACK_WEIGHT,
    DEFAULT_FREQUENCY_WEIGHT,
    DEFAULT_RECENCY_WEIGHT,
    MAX_RECOMMENDATIONS_UPPER_BOUND,
    PersonalizationSettings,
    PersonalizationUpdate,
)

logger = get_logger(__name__)

WEIGHT_SUM_TOLERANCE = 0.001

_UNIT_RANGE_FIELDS = (
    "recency_weight",
    "frequency_weight",
    "feedback_weight",
    "min_score",
)


def normalize_weights(
    recency: float, frequency: float, feedback: float
) -> tuple[float, float, float]:
    """세 가중치를 합이 1이 되도록 정규화

    합이 0 이하(또는 NaN)이면 기본 가중치를 반환합니다.

    Returns:
        (recency, frequency, feedback)
    """
    total = recency + frequency + feedback
    if not total > 0:
        return (
            DEFAULT_RECENCY_WEIGHT,
            DEFAULT_FREQUENCY_WEIGHT,
            DEFAULT_FEEDBACK_WEIGHT,
        )
    return recency / total, frequency / total, feedback / total


def _range_errors(values: dict[str, float | int | None]) -> list[str]:
    errors: list[str] = []
    for name in _UNIT_RANGE_FIELDS:
        value = values.get(name)
        if value is not None and not 0 <= value <= 1:
            errors.append(f"{name} must be between 0 and 1")

    max_recommendations = values.get("max_recommendations")
    if max_recommendations is not None and not (
        1 <= max_recommendations <= MAX_RECOMMENDATIONS_UPPER_BOUND
    ):
        errors.append(
            "max_recommendations must be between 1 and "
            f"{MAX_RECOMMENDATIONS_UPPER_BOUND}"
        )
    return errors


def validate_personalization_settings(
    settings: PersonalizationSettings,
) -> list[str]:
    """개인화 설정 검증

    범위 위반 외에도 가중치 합이 1(허용 오차 0.001)이 아닌 경우를 보고합니다.

    Args:
        settings: 검증할 설정

    Returns:
        에러 메시지 리스트 (비어 있으면 유효)
    """
    errors = _range_errors(settings.model_dump())

    weight_sum = (
        settings.recency_weight
        + settings.frequency_weight
        + settings.feedback_weight
    )
    if abs(weight_sum - 1.0) > WEIGHT_SUM_TOLERANCE:
        errors.append("weights must sum to 1.0")

    return errors


class SettingsSource(ABC):
    """개인화 설정 제공자 인터페이스 (동기 조회)"""

    @abstractmethod
    def get_personalization_settings(self) -> PersonalizationSettings:
        """현재 개인화 설정 스냅샷"""
        raise NotImplementedError


class PersonalizationService(SettingsSource):
    """개인화 설정 서비스 (인메모리)"""

    def __init__(self, initial: PersonalizationSettings | None = None):
        self._settings = initial or PersonalizationSettings()
        self._listeners: list[Callable[[], None]] = []

    def subscribe(self, listener: Callable[[], None]) -> None:
        """설정 변경 리스너 등록"""
        self._listeners.append(listener)

    def get_personalization_settings(self) -> PersonalizationSettings:
        return self._settings

    def update_settings(
        self, updates: PersonalizationUpdate
    ) -> PersonalizationSettings:
        """개인화 설정 부분 업데이트

        1. 전달된 값의 범위 검증
        2. 가중치 중 하나라도 바뀌면 세 가중치를 합 1로 정규화
        3. 저장 후 리스너 호출

        Args:
            updates: 변경할 필드만 담긴 업데이트 요청

        Returns:
            갱신된 설정

        Raises:
            InvalidPersonalizationSettingsException: 범위를 벗어난 값이 있는 경우
        """
        changes = updates.model_dump(exclude_none=True)
        errors = _range_errors(changes)
        if errors:
            raise InvalidPersonalizationSettingsException(errors)

        if {"recency_weight", "frequency_weight", "feedback_weight"} & set(
            changes
        ):
            merged = {**self._settings.model_dump(), **changes}
            recency, frequency, feedback = normalize_weights(
                merged["recency_weight"],
                merged["frequency_weight"],
                merged["feedback_weight"],
            )
            changes.update(
                recency_weight=recency,
                frequency_weight=frequency,
                feedback_weight=feedback,
            )

        self._settings = self._settings.model_copy(update=changes)
        logger.info(f"Personalization settings updated: {changes}")
        self._notify()
        return self._settings

    def reset_settings(self) -> PersonalizationSettings:
        """개인화 설정을 기본값으로 초기화"""
        self._settings = PersonalizationSettings()
        logger.info("Personalization settings reset to defaults")
        self._notify()
        return self._settings

    def _notify(self) -> None:
        for listener in self._listeners:
            listener()
