"""
목적: PostgreSQL 기반 DB 엔진을 제공한다.
설명: 렌더링된 SQL 문자열을 psycopg2 커서로 실행한다. 바인딩 인자는 넘기지 않는다.
디자인 패턴: 어댑터 패턴
참조: src/query_wrapper/integrations/db/base/engine.py
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

from query_wrapper.integrations.db.base.engine import BaseDBEngine
from query_wrapper.integrations.db.engines.postgres.connection import (
    PostgresConnectionManager,
)
from query_wrapper.shared.logging import Logger, create_default_logger

try:
    import psycopg2
except ImportError:  # pragma: no cover - 환경 의존 로딩
    psycopg2 = None


class PostgresEngine(BaseDBEngine):
    """PostgreSQL 기반 엔진 구현체."""

    def __init__(
        self,
        dsn: Optional[str] = None,
        host: str = "127.0.0.1",
        port: int = 5432,
        user: str = "postgres",
        password: Optional[str] = None,
        database: str = "postgres",
        scheme: str = "postgresql",
        logger: Optional[Logger] = None,
    ) -> None:
        if not dsn:
            auth = quote(user, safe="")
            if password:
                auth = f"{auth}:{quote(password, safe='')}"
            dsn = f"{scheme}://{auth}@{host}:{port}/{database}"
        self._logger = logger or create_default_logger("PostgresEngine")
        self._dsn = dsn
        self._connection = PostgresConnectionManager(
            dsn=self._dsn,
            logger=self._logger,
            psycopg2_module=psycopg2,
        )

    @property
    def name(self) -> str:
        return "postgres"

    @property
    def dsn(self) -> str:
        """접속 DSN을 반환한다."""

        return self._dsn

    def connect(self) -> None:
        self._connection.connect()

    def close(self) -> None:
        self._connection.close()

    def fetch_rows(self, sql: str) -> List[Dict[str, Any]]:
        connection = self._connection.ensure_connection()
        try:
            with connection.cursor() as cursor:
                cursor.execute(sql)
                rows = cursor.fetchall() if cursor.description else []
                row_dicts = [self._row_to_dict(cursor, row) for row in rows]
        finally:
            # 조회용 트랜잭션은 열어 두지 않는다.
            connection.rollback()
        return row_dicts

    def execute(self, sql: str) -> int:
        connection = self._connection.ensure_connection()
        try:
            with connection.cursor() as cursor:
                cursor.execute(sql)
                affected = cursor.rowcount
        except Exception:
            connection.rollback()
            raise
        connection.commit()
        return affected

    def _row_to_dict(self, cursor, row: Tuple[Any, ...]) -> Dict[str, Any]:
        columns = [description[0] for description in cursor.description]
        return dict(zip(columns, row))
