"""
목적: 로깅 모듈 공개 API를 제공한다.
설명: 로그 모델, 로거 인터페이스, 인메모리 구현체를 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/query_wrapper/shared/logging/logger.py, src/query_wrapper/shared/logging/models.py
"""

from query_wrapper.shared.logging.logger import (
    InMemoryLogger,
    InMemoryLogRepository,
    Logger,
    LogRepository,
    create_default_logger,
)
from query_wrapper.shared.logging.models import LogContext, LogLevel, LogRecord

__all__ = [
    "LogContext",
    "LogLevel",
    "LogRecord",
    "Logger",
    "LogRepository",
    "InMemoryLogger",
    "InMemoryLogRepository",
    "create_default_logger",
]
