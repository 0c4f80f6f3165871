"""
목적: query_wrapper 패키지의 공개 API를 제공한다.
설명: 쿼리 빌더, 페이지 모델, DB 클라이언트를 최상위에서 바로 가져올 수 있게 한다.
디자인 패턴: 퍼사드
참조: src/query_wrapper/integrations/db, src/query_wrapper/shared
"""

from query_wrapper.integrations.db import (
    DBClient,
    Page,
    PostgresEngine,
    QueryWrapper,
    SQLiteEngine,
    create_client,
    create_engine,
)

__version__ = "0.1.0"

__all__ = [
    "DBClient",
    "Page",
    "PostgresEngine",
    "QueryWrapper",
    "SQLiteEngine",
    "create_client",
    "create_engine",
]
