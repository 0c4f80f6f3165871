"""
목적: 체이닝 방식의 SQL 쿼리 빌더를 제공한다.
설명: 조건/정렬/조회 컬럼/JOIN을 누적해 SQL을 만들고, 실행과 페이지 조회를 클라이언트에 위임한다.
디자인 패턴: 빌더 패턴, 플루언트 인터페이스
참조: src/query_wrapper/integrations/db/query_builder/renderer.py, src/query_wrapper/integrations/db/base/models.py

주의: 값은 str()로 변환해 작은따옴표 안에 그대로 붙인다. 이스케이프나 바인딩을 하지 않으므로
외부 입력을 그대로 넘기면 SQL 인젝션이 가능하다.

사용 예:
    count = QueryWrapper().custom_sql("select count(*) from member").fetch_one(client, "", int)

    member = QueryWrapper().eq("id", 7386).fetch_one(client, "member", Member)

    page = (
        QueryWrapper()
        .like("email", "example.com")
        .order_by("id", asc=False)
        .page(client, "member", page_no=2, page_size=20, record_type=Member)
    )
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Type, TypeVar

from query_wrapper.integrations.db.base.models import Page
from query_wrapper.integrations.db.base.ports import QueryExecutorPort
from query_wrapper.integrations.db.query_builder.renderer import SqlRenderer
from query_wrapper.integrations.db.query_builder.state import QueryState
from query_wrapper.shared.exceptions import ExceptionDetail, InvalidPageRequestError
from query_wrapper.shared.logging import LogContext, Logger, create_default_logger

T = TypeVar("T")


class QueryWrapper:
    """SQL 쿼리 빌더.

    모든 설정 메서드는 자기 자신을 변경한 뒤 반환한다. 상태를 보존하려면 clone()으로 사본을 만든다.

    Args:
        logger: 주입 가능한 로거.
        renderer: 주입 가능한 SQL 렌더러.
    """

    def __init__(
        self,
        logger: Optional[Logger] = None,
        renderer: Optional[SqlRenderer] = None,
    ) -> None:
        self._state = QueryState()
        self._logger = logger or create_default_logger("QueryWrapper")
        self._renderer = renderer or SqlRenderer()

    @property
    def where_conditions(self) -> List[str]:
        """누적된 WHERE 조건 사본을 반환한다."""

        return list(self._state.where_conditions)

    @property
    def order_by_items(self) -> List[str]:
        """누적된 정렬 항목 사본을 반환한다."""

        return list(self._state.order_by)

    @property
    def join_conditions(self) -> List[str]:
        """누적된 JOIN 절 사본을 반환한다."""

        return list(self._state.join_conditions)

    @property
    def current_limit(self) -> Optional[int]:
        return self._state.limit

    @property
    def current_offset(self) -> Optional[int]:
        return self._state.offset

    def clone(self) -> "QueryWrapper":
        """상태가 분리된 사본을 반환한다. 로거와 렌더러는 공유한다."""

        wrapper = QueryWrapper(logger=self._logger, renderer=self._renderer)
        wrapper._state = self._state.copy()
        return wrapper

    def eq(self, column: str, value: Any) -> "QueryWrapper":
        """같음 조건을 추가한다."""

        return self._compare(column, "=", value)

    def ne(self, column: str, value: Any) -> "QueryWrapper":
        """같지 않음 조건을 추가한다."""

        return self._compare(column, "!=", value)

    def gt(self, column: str, value: Any) -> "QueryWrapper":
        """초과 조건을 추가한다."""

        return self._compare(column, ">", value)

    def lt(self, column: str, value: Any) -> "QueryWrapper":
        """미만 조건을 추가한다."""

        return self._compare(column, "<", value)

    def like(self, column: str, value: str) -> "QueryWrapper":
        """부분 일치 조건을 추가한다."""

        self._state.where_conditions.append(f"{column} LIKE '%{value}%'")
        return self

    def select(self, columns: Iterable[str]) -> "QueryWrapper":
        """조회 컬럼을 교체한다. 빈 목록이면 전체 컬럼을 조회한다."""

        self._state.select_columns = [str(column) for column in columns]
        return self

    def order_by(self, column: str, asc: bool = True) -> "QueryWrapper":
        """정렬 항목을 추가한다. 호출 순서대로 렌더링된다."""

        direction = "ASC" if asc else "DESC"
        self._state.order_by.append(f"{column} {direction}")
        return self

    def limit(self, limit: int) -> "QueryWrapper":
        self._state.limit = limit
        return self

    def offset(self, offset: int) -> "QueryWrapper":
        self._state.offset = offset
        return self

    def custom_sql(self, sql: str) -> "QueryWrapper":
        """생성되는 SELECT 본문 대신 사용할 SQL을 지정한다."""

        self._state.custom_sql = sql
        return self

    def inner_join(self, table: str, on_condition: str) -> "QueryWrapper":
        return self._join("INNER", table, on_condition)

    def left_join(self, table: str, on_condition: str) -> "QueryWrapper":
        return self._join("LEFT", table, on_condition)

    def right_join(self, table: str, on_condition: str) -> "QueryWrapper":
        return self._join("RIGHT", table, on_condition)

    def build_sql(self, table_name: str) -> str:
        """조회 SQL을 렌더링한다."""

        return self._renderer.build_sql(self._state, table_name)

    def build_count_sql(self, table_name: str) -> str:
        """전체 건수 SQL을 렌더링한다."""

        return self._renderer.build_count_sql(self._state, table_name)

    def fetch_all(
        self,
        client: QueryExecutorPort,
        table_name: str,
        record_type: Optional[Type[T]] = None,
    ) -> List[T]:
        """조회 SQL을 실행해 모든 레코드를 반환한다."""

        return client.fetch_all(self.build_sql(table_name), record_type)

    def fetch_one(
        self,
        client: QueryExecutorPort,
        table_name: str,
        record_type: Optional[Type[T]] = None,
    ) -> Optional[T]:
        """조회 SQL을 실행해 0개 또는 1개의 레코드를 반환한다."""

        return client.fetch_one(self.build_sql(table_name), record_type)

    def delete(self, client: QueryExecutorPort, table_name: str) -> int:
        """누적 조건으로 삭제 SQL을 실행하고 삭제된 행 수를 반환한다.

        사본에 `delete from <table>` 을 사용자 정의 SQL로 지정해 렌더링하므로
        ORDER BY, LIMIT, OFFSET이 설정돼 있으면 DELETE 문에도 그대로 붙는다.
        """

        sql = self.clone().custom_sql(f"delete from {table_name}").build_sql(table_name)
        return client.execute(sql)

    def page(
        self,
        client: QueryExecutorPort,
        table_name: str,
        page_no: int,
        page_size: int,
        record_type: Optional[Type[T]] = None,
    ) -> Page[T]:
        """전체 건수를 먼저 조회한 뒤 요청 페이지의 레코드를 조회한다.

        두 조회는 같은 트랜잭션으로 묶이지 않는다. 건수가 0이면 레코드 조회를 생략한다.
        기존 limit/offset은 사본에서 페이지 값으로 덮어쓰며 원본 빌더는 변경하지 않는다.
        """

        self._validate_page_request(page_no, page_size)
        logger = self._logger.with_context(LogContext(table_name=table_name))

        total = int(client.fetch_scalar(self.build_count_sql(table_name)) or 0)
        if total == 0:
            logger.debug("조회 결과가 없어 레코드 조회를 생략합니다.")
            return Page.new([], 0, page_no, page_size)

        offset = (page_no - 1) * page_size
        records = (
            self.clone()
            .limit(page_size)
            .offset(offset)
            .fetch_all(client, table_name, record_type)
        )
        logger.debug(
            "페이지 조회 완료",
            metadata={"total": total, "page_no": page_no, "offset": offset, "count": len(records)},
        )
        return Page.new(records, total, page_no, page_size)

    def _compare(self, column: str, operator: str, value: Any) -> "QueryWrapper":
        self._state.where_conditions.append(f"{column} {operator} '{str(value)}'")
        return self

    def _join(self, kind: str, table: str, on_condition: str) -> "QueryWrapper":
        self._state.join_conditions.append(f"{kind} JOIN {table} ON {on_condition}")
        return self

    def _validate_page_request(self, page_no: int, page_size: int) -> None:
        if page_no >= 1 and page_size >= 1:
            return
        detail = ExceptionDetail(
            code="DB_INVALID_PAGE_REQUEST",
            cause=f"page_no={page_no}, page_size={page_size}",
            hint="page_no와 page_size는 1 이상이어야 합니다.",
            metadata={"page_no": page_no, "page_size": page_size},
        )
        raise InvalidPageRequestError("페이지 요청 값이 올바르지 않습니다.", detail)
