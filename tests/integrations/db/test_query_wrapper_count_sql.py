"""
목적: QueryWrapper 전체 건수 SQL 렌더링을 검증한다.
설명: 정렬/페이지 절 제외와 사용자 정의 SQL 서브쿼리 래핑을 확인한다.
디자인 패턴: 테스트 케이스
참조: src/query_wrapper/integrations/db/query_builder/renderer.py
"""

from __future__ import annotations

from query_wrapper.integrations.db import QueryWrapper


def test_count_sql_without_conditions() -> None:
    """조건이 없으면 테이블 전체 건수 SQL이어야 한다."""

    assert QueryWrapper().build_count_sql("t") == "SELECT COUNT(*) FROM t"


def test_count_sql_keeps_joins_and_where_only() -> None:
    """건수 SQL은 JOIN과 WHERE만 유지하고 조회 컬럼/정렬/페이지 절은 버린다."""

    wrapper = (
        QueryWrapper()
        .select(["m.id"])
        .left_join("orders o", "o.member_id = m.id")
        .eq("m.grade", "gold")
        .order_by("m.id")
        .limit(10)
        .offset(20)
    )

    assert wrapper.build_count_sql("member m") == (
        "SELECT COUNT(*) FROM member m LEFT JOIN orders o ON o.member_id = m.id"
        " WHERE m.grade = 'gold'"
    )


def test_count_sql_wraps_custom_sql_with_merged_where() -> None:
    """사용자 정의 SQL은 조건을 합친 뒤 서브쿼리로 감싼다."""

    wrapper = QueryWrapper().custom_sql("SELECT * FROM t").eq("id", 1).order_by("id").limit(5)

    assert wrapper.build_count_sql("t") == "SELECT COUNT(*) FROM (SELECT * FROM t WHERE id = '1') as t"


def test_count_sql_custom_sql_with_existing_where_uses_and() -> None:
    """기존 WHERE가 있으면 서브쿼리 안에서도 AND로 잇는다."""

    wrapper = QueryWrapper().custom_sql("SELECT * FROM t WHERE x=1").eq("id", 1).offset(3)

    assert wrapper.build_count_sql("t") == (
        "SELECT COUNT(*) FROM (SELECT * FROM t WHERE x=1 AND id = '1') as t"
    )


def test_count_sql_never_contains_order_limit_offset() -> None:
    """어떤 상태에서도 건수 SQL에는 정렬/페이지 절이 없어야 한다."""

    wrappers = [
        QueryWrapper().order_by("a").order_by("b", False).limit(1).offset(2),
        QueryWrapper().custom_sql("SELECT a FROM t").order_by("a").limit(1).offset(2),
        QueryWrapper().eq("a", 1).limit(100),
    ]

    for wrapper in wrappers:
        sql = wrapper.build_count_sql("t")
        assert "ORDER BY" not in sql
        assert "LIMIT" not in sql
        assert "OFFSET" not in sql
