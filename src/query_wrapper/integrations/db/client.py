"""
목적: 공통 DB 클라이언트를 제공한다.
설명: 엔진을 주입받아 SQL 문자열 실행과 결과 행 디코딩을 담당한다.
디자인 패턴: 파사드
참조: src/query_wrapper/integrations/db/base/engine.py, src/query_wrapper/integrations/db/base/row_decoder.py
"""

from __future__ import annotations

import threading
from typing import Any, Dict, List, Optional, Type, TypeVar

from query_wrapper.integrations.db.base.engine import BaseDBEngine
from query_wrapper.integrations.db.base.row_decoder import RowDecoder
from query_wrapper.shared.exceptions import ExceptionDetail, RowDecodeError
from query_wrapper.shared.logging import LogContext, Logger, create_default_logger

T = TypeVar("T")


class DBClient:
    """공통 DB 클라이언트.

    엔진 오류는 가공하지 않고 그대로 전파한다.
    """

    def __init__(
        self,
        engine: BaseDBEngine,
        logger: Optional[Logger] = None,
        decoder: Optional[RowDecoder] = None,
    ) -> None:
        self._engine = engine
        self._logger = (logger or create_default_logger("DBClient")).with_context(
            LogContext(engine=engine.name)
        )
        self._decoder = decoder or RowDecoder()
        self._engine_lock = threading.RLock()

    @property
    def engine(self) -> BaseDBEngine:
        """내부 엔진을 반환한다."""

        return self._engine

    def connect(self) -> None:
        """엔진 연결을 초기화한다."""

        with self._engine_lock:
            self._engine.connect()

    def close(self) -> None:
        """엔진 연결을 종료한다."""

        with self._engine_lock:
            self._engine.close()

    def fetch_all(self, sql: str, record_type: Optional[Type[T]] = None) -> List[Any]:
        """모든 결과 행을 record_type 형태로 변환해 반환한다."""

        rows = self._fetch_rows(sql)
        return [self._decoder.decode(row, record_type) for row in rows]

    def fetch_one(self, sql: str, record_type: Optional[Type[T]] = None) -> Optional[Any]:
        """결과가 없으면 None, 한 행이면 변환 결과를 반환한다."""

        rows = self._fetch_rows(sql)
        if not rows:
            return None
        if len(rows) > 1:
            detail = ExceptionDetail(
                code="DB_TOO_MANY_ROWS",
                cause=f"{len(rows)}개 행이 조회되었습니다.",
                hint="조건을 추가하거나 limit(1)을 지정하세요.",
                metadata={"sql": sql, "row_count": len(rows)},
            )
            raise RowDecodeError("단일 행 조회 결과가 여러 건입니다.", detail)
        return self._decoder.decode(rows[0], record_type)

    def fetch_scalar(self, sql: str) -> Any:
        """단일 행의 첫 번째 컬럼 값을 반환한다. 결과가 없으면 None이다."""

        row = self.fetch_one(sql, dict)
        if row is None:
            return None
        return self._decoder.decode_scalar(row)

    def execute(self, sql: str) -> int:
        """변경 SQL을 실행하고 영향받은 행 수를 반환한다."""

        self._logger.debug("SQL 실행", metadata={"sql": sql})
        with self._engine_lock:
            affected = self._engine.execute(sql)
        self._logger.debug("SQL 실행 완료", metadata={"sql": sql, "rows_affected": affected})
        return affected

    def _fetch_rows(self, sql: str) -> List[Dict[str, Any]]:
        self._logger.debug("SQL 조회", metadata={"sql": sql})
        with self._engine_lock:
            rows = self._engine.fetch_rows(sql)
        self._logger.debug("SQL 조회 완료", metadata={"sql": sql, "row_count": len(rows)})
        return rows
