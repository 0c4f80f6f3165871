"""
목적: DB 설정으로부터 엔진과 클라이언트를 생성한다.
설명: DatabaseSettings의 engine 값에 따라 SQLite 또는 PostgreSQL 엔진을 고른다.
디자인 패턴: 팩토리 메서드
참조: src/query_wrapper/shared/config/database.py, src/query_wrapper/integrations/db/engines
"""

from __future__ import annotations

from typing import Optional

from query_wrapper.integrations.db.base.engine import BaseDBEngine
from query_wrapper.integrations.db.client import DBClient
from query_wrapper.integrations.db.engines import PostgresEngine, SQLiteEngine
from query_wrapper.shared.config import DatabaseSettings, EngineKind
from query_wrapper.shared.logging import Logger


def create_engine(settings: DatabaseSettings, logger: Optional[Logger] = None) -> BaseDBEngine:
    """설정에 맞는 엔진을 생성한다. 연결은 열지 않는다."""

    if settings.engine == EngineKind.POSTGRES:
        return PostgresEngine(
            dsn=settings.dsn,
            host=settings.host,
            port=settings.port,
            user=settings.user,
            password=settings.password,
            database=settings.database,
            logger=logger,
        )
    return SQLiteEngine(database_path=settings.sqlite_path, logger=logger)


def create_client(settings: DatabaseSettings, logger: Optional[Logger] = None) -> DBClient:
    """설정에 맞는 엔진으로 클라이언트를 생성한다."""

    return DBClient(create_engine(settings, logger), logger=logger)
