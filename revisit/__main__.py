"""`python -m revisit`로 개발 서버 실행"""

import uvicorn

from revisit.core.config import settings


def main() -> None:
    uvicorn.run(
        "revisit.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_config=None,  # setup_logging()의 핸들러 사용
    )


if __name__ == "__main__":
    main()
