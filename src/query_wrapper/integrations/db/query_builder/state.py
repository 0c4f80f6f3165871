"""
목적: 쿼리 빌더가 누적하는 상태를 정의한다.
설명: WHERE 조건, 정렬, 조회 컬럼, JOIN, LIMIT/OFFSET, 사용자 정의 SQL을 보관한다.
디자인 패턴: 데이터 전송 객체(DTO)
참조: src/query_wrapper/integrations/db/query_builder/renderer.py
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import List, Optional


@dataclass
class QueryState:
    """쿼리 빌더 누적 상태."""

    where_conditions: List[str] = field(default_factory=list)
    order_by: List[str] = field(default_factory=list)
    select_columns: List[str] = field(default_factory=list)
    limit: Optional[int] = None
    offset: Optional[int] = None
    custom_sql: Optional[str] = None
    join_conditions: List[str] = field(default_factory=list)

    def copy(self) -> "QueryState":
        """목록 필드까지 분리된 사본을 반환한다."""

        return replace(
            self,
            where_conditions=list(self.where_conditions),
            order_by=list(self.order_by),
            select_columns=list(self.select_columns),
            join_conditions=list(self.join_conditions),
        )
