"""Core 모듈 (설정, 로깅, 예외, 공통 스키마)"""

from revisit.core.config import Settings, get_settings, settings
from revisit.core.exceptions import (
    BadRequestException,
    BaseAPIException,
    ErrorCode,
    register_exception_handlers,
)
from revisit.core.logging import get_logger, setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "settings",
    "ErrorCode",
    "BaseAPIException",
    "BadRequestException",
    "register_exception_handlers",
    "get_logger",
    "setup_logging",
]
