"""
목적: 공통 상수를 제공한다.
설명: 설정 로더, DB 설정, 로그 저장소에서 공유하는 기본값을 한곳에 모은다.
디자인 패턴: 상수 객체
참조: src/query_wrapper/shared/config/loader.py, src/query_wrapper/shared/config/database.py
"""

from __future__ import annotations


class SharedConst:
    """공통 상수 모음."""

    DEFAULT_ENCODING = "utf-8"
    ENV_NESTED_DELIMITER = "__"
    DB_ENV_PREFIX = "QUERY_WRAPPER_DB__"
    DEFAULT_SQLITE_PATH = "data/db/query_wrapper.sqlite"
    DEFAULT_SQLITE_BUSY_TIMEOUT_MS = 5000
    DEFAULT_LOG_MAX_RECORDS = 1000


__all__ = ["SharedConst"]
