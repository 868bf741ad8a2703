"""Logging configuration."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# 요청마다 쿼리/풀 이벤트를 남기는 라이브러리 로거
_NOISY_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool")


def setup_logging(level: str = "INFO") -> None:
    """애플리케이션 로깅을 설정합니다.

    저장소 오류는 logger.exception 으로 traceback 과 함께 stdout 에 남습니다.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
