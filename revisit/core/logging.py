"""전역 로깅 설정

- 개발 환경: 컬러 + 사람이 읽기 쉬운 한 줄 형식
- 그 외 환경: 한 줄 JSON (로그 수집기용)

모든 레코드에는 RequestIdFilter가 request_id를 채웁니다.
"""

import json
import logging
import sys
from typing import Optional

from revisit.core.config import Settings, get_settings

# 외부 라이브러리 로그 레벨
_LIBRARY_LOG_LEVELS = {
    "uvicorn": logging.INFO,
    "uvicorn.access": logging.WARNING,
    "httpx": logging.WARNING,
    "httpcore": logging.WARNING,
}


class ColoredFormatter(logging.Formatter):
    """컬러 로그 포맷터 (개발 환경용)"""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        # 다른 핸들러에 색상 코드가 새지 않도록 원래 값 복원
        levelname = record.levelname
        color = self.COLORS.get(levelname, self.RESET)
        record.levelname = f"{color}{levelname}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


class JsonFormatter(logging.Formatter):
    """한 줄 JSON 로그 포맷터"""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S%z"),
            "level": record.levelname,
            "logger": record.name,
            "request_id": getattr(record, "request_id", "-"),
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def _resolve_level(config: Settings) -> int:
    if config.log_level:
        return logging.getLevelName(config.log_level)
    return logging.DEBUG if config.debug else logging.INFO


def setup_logging(config: Optional[Settings] = None) -> None:
    """애플리케이션 로깅 설정

    Args:
        config: 애플리케이션 설정 (없으면 get_settings())
    """
    from revisit.core.middlewares.context import RequestIdFilter

    config = config or get_settings()
    log_level = _resolve_level(config)

    formatter: logging.Formatter
    if config.is_development:
        formatter = ColoredFormatter(
            fmt=(
                "%(asctime)s | %(levelname)-8s | "
                "%(name)s:%(lineno)d | [%(request_id)s] %(message)s"
            ),
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        formatter = JsonFormatter()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    handler.setLevel(log_level)
    handler.addFilter(RequestIdFilter())

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    for name, level in _LIBRARY_LOG_LEVELS.items():
        logging.getLogger(name).setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """로거 인스턴스 반환

    Args:
        name: 로거 이름 (보통 __name__ 사용)

    Example::

        from revisit.core.logging import get_logger
        logger = get_logger(__name__)
        logger.info("Recommendation cache cleared")
    """
    return logging.getLogger(name)
