"""
목적: 쿼리 빌더가 의존하는 실행기 포트를 정의한다.
설명: 렌더링된 SQL 문자열을 받아 실행하는 클라이언트의 최소 계약을 Protocol로 제공한다.
디자인 패턴: 포트-어댑터(Port/Protocol)
참조: src/query_wrapper/integrations/db/client.py, src/query_wrapper/integrations/db/query_builder/query_wrapper.py
"""

from __future__ import annotations

from typing import Any, List, Optional, Protocol, Type, TypeVar

T = TypeVar("T")


class QueryExecutorPort(Protocol):
    """SQL 실행 포트. 파라미터 바인딩 없이 완성된 SQL 문자열만 받는다."""

    def fetch_all(self, sql: str, record_type: Optional[Type[T]] = None) -> List[Any]:
        """0개 이상의 행을 record_type 형태로 변환해 반환한다."""

    def fetch_one(self, sql: str, record_type: Optional[Type[T]] = None) -> Optional[Any]:
        """0개 또는 1개의 행을 record_type 형태로 변환해 반환한다."""

    def fetch_scalar(self, sql: str) -> Any:
        """단일 행의 첫 번째 컬럼 값을 반환한다."""

    def execute(self, sql: str) -> int:
        """변경 SQL을 실행하고 영향받은 행 수를 반환한다."""
