"""
목적: shared 패키지의 공개 API를 제공한다.
설명: 예외, 로깅, 설정 공통 모듈에 대한 접근 포인트를 제공한다.
디자인 패턴: 퍼사드
참조: src/query_wrapper/shared/exceptions, src/query_wrapper/shared/logging, src/query_wrapper/shared/config
"""

from __future__ import annotations

from query_wrapper.shared.exceptions import (
    BaseAppException,
    DatabaseConfigError,
    ExceptionDetail,
    InvalidPageRequestError,
    RowDecodeError,
)
from query_wrapper.shared.logging import (
    InMemoryLogger,
    InMemoryLogRepository,
    LogContext,
    LogLevel,
    LogRecord,
    Logger,
    LogRepository,
    create_default_logger,
)
from query_wrapper.shared.config import (
    ConfigLoader,
    DatabaseSettings,
    EngineKind,
    load_database_settings,
)

__all__ = [
    "BaseAppException",
    "ExceptionDetail",
    "RowDecodeError",
    "InvalidPageRequestError",
    "DatabaseConfigError",
    "LogContext",
    "LogLevel",
    "LogRecord",
    "Logger",
    "LogRepository",
    "InMemoryLogger",
    "InMemoryLogRepository",
    "create_default_logger",
    "ConfigLoader",
    "DatabaseSettings",
    "EngineKind",
    "load_database_settings",
]
