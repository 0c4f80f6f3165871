"""
목적: 쿼리 빌더 상태를 SQL 문자열로 렌더링한다.
설명: 조회 SQL과 전체 건수 SQL을 만든다. 사용자 정의 SQL이 있으면 조회 컬럼과 JOIN은 무시된다.
디자인 패턴: 빌더 패턴
참조: src/query_wrapper/integrations/db/query_builder/state.py
"""

from __future__ import annotations

from query_wrapper.integrations.db.query_builder.state import QueryState


class SqlRenderer:
    """SQL 렌더러.

    렌더링은 상태를 읽기만 하며 실패하지 않는다. 값과 식별자는 검증하지 않는다.
    """

    def build_sql(self, state: QueryState, table_name: str) -> str:
        """조회 SQL을 만든다. 절 순서는 WHERE, ORDER BY, LIMIT, OFFSET으로 고정이다."""

        if state.custom_sql is not None:
            sql = self.merge_where(state.custom_sql, state)
        else:
            sql = self._select_prefix(state, table_name)
            sql += self._join_clause(state)
            sql += self._where_clause(state)
        return sql + self._tail_clause(state)

    def build_count_sql(self, state: QueryState, table_name: str) -> str:
        """전체 건수 SQL을 만든다. ORDER BY, LIMIT, OFFSET은 붙이지 않는다."""

        if state.custom_sql is not None:
            inner_sql = self.merge_where(state.custom_sql, state)
            return f"SELECT COUNT(*) FROM ({inner_sql}) as t"
        sql = f"SELECT COUNT(*) FROM {table_name}"
        sql += self._join_clause(state)
        sql += self._where_clause(state)
        return sql

    def merge_where(self, custom_sql: str, state: QueryState) -> str:
        """사용자 정의 SQL 뒤에 누적 조건을 붙인다.

        대문자로 바꾼 SQL에 "WHERE" 문자열이 있으면 어디에 있든 AND로 잇는다.
        SQL을 파싱하지 않는 문자열 규칙이다.
        """

        if not state.where_conditions:
            return custom_sql
        joiner = " AND " if "WHERE" in custom_sql.upper() else " WHERE "
        return custom_sql + joiner + " AND ".join(state.where_conditions)

    def _select_prefix(self, state: QueryState, table_name: str) -> str:
        columns = ", ".join(state.select_columns) if state.select_columns else "*"
        return f"SELECT {columns} FROM {table_name}"

    def _join_clause(self, state: QueryState) -> str:
        if not state.join_conditions:
            return ""
        return " " + " ".join(state.join_conditions)

    def _where_clause(self, state: QueryState) -> str:
        if not state.where_conditions:
            return ""
        return " WHERE " + " AND ".join(state.where_conditions)

    def _tail_clause(self, state: QueryState) -> str:
        sql = ""
        if state.order_by:
            sql += " ORDER BY " + ", ".join(state.order_by)
        if state.limit is not None:
            sql += f" LIMIT {state.limit}"
        if state.offset is not None:
            sql += f" OFFSET {state.offset}"
        return sql
