"""
목적: DB 통합 모듈 공개 API를 제공한다.
설명: 엔진 구현체, 공통 클라이언트, 쿼리 빌더, 페이지 모델을 노출한다.
디자인 패턴: 퍼사드
참조: src/query_wrapper/integrations/db/engines, src/query_wrapper/integrations/db/query_builder
"""

from query_wrapper.integrations.db.base import BaseDBEngine, Page, QueryExecutorPort, RowDecoder
from query_wrapper.integrations.db.client import DBClient
from query_wrapper.integrations.db.engines import PostgresEngine, SQLiteEngine
from query_wrapper.integrations.db.factory import create_client, create_engine
from query_wrapper.integrations.db.query_builder import QueryState, QueryWrapper, SqlRenderer

__all__ = [
    "BaseDBEngine",
    "DBClient",
    "Page",
    "QueryExecutorPort",
    "QueryState",
    "QueryWrapper",
    "RowDecoder",
    "SqlRenderer",
    "SQLiteEngine",
    "PostgresEngine",
    "create_client",
    "create_engine",
]
