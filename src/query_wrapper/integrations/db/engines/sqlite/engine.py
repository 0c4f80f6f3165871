"""
목적: SQLite 기반 DB 엔진을 제공한다.
설명: 렌더링된 SQL 문자열을 그대로 실행하고 행을 사전으로 돌려준다.
디자인 패턴: 어댑터 패턴
참조: src/query_wrapper/integrations/db/base/engine.py
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from query_wrapper.integrations.db.base.engine import BaseDBEngine
from query_wrapper.integrations.db.engines.sqlite.connection import SqliteConnectionManager
from query_wrapper.shared.const import SharedConst
from query_wrapper.shared.logging import Logger, create_default_logger


class SQLiteEngine(BaseDBEngine):
    """SQLite 엔진 구현체."""

    def __init__(
        self,
        database_path: str = SharedConst.DEFAULT_SQLITE_PATH,
        logger: Optional[Logger] = None,
    ) -> None:
        self._logger = logger or create_default_logger("SQLiteEngine")
        self._connection = SqliteConnectionManager(database_path, self._logger)

    @property
    def name(self) -> str:
        return "sqlite"

    def connect(self) -> None:
        self._connection.connect()

    def close(self) -> None:
        self._connection.close()

    def fetch_rows(self, sql: str) -> List[Dict[str, Any]]:
        cursor = self._connection.ensure_connection().execute(sql)
        try:
            return [dict(row) for row in cursor.fetchall()]
        finally:
            cursor.close()

    def execute(self, sql: str) -> int:
        connection = self._connection.ensure_connection()
        try:
            cursor = connection.execute(sql)
        except Exception:
            connection.rollback()
            raise
        affected = cursor.rowcount
        cursor.close()
        connection.commit()
        return affected
