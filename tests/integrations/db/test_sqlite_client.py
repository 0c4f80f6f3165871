"""
목적: SQLite 엔진과 DBClient 위에서 QueryWrapper 전체 흐름을 검증한다.
설명: 실제 SQLite 파일에 데이터를 넣고 조회/단건 조회/삭제/페이지 조회와 행 디코딩을 확인한다.
디자인 패턴: 테스트 케이스
참조: src/query_wrapper/integrations/db/client.py, src/query_wrapper/integrations/db/engines/sqlite/engine.py
"""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from typing import Optional

import pytest
from pydantic import BaseModel

from query_wrapper.integrations.db import DBClient, QueryWrapper, SQLiteEngine
from query_wrapper.shared.exceptions import RowDecodeError
from query_wrapper.shared.logging import InMemoryLogger, InMemoryLogRepository


class Member(BaseModel):
    id: int
    email: Optional[str] = None
    grade: str


@dataclass
class MemberRow:
    id: int
    email: Optional[str]
    grade: str


@pytest.fixture
def client(tmp_path):
    engine = SQLiteEngine(str(tmp_path / "member.sqlite"))
    db_client = DBClient(engine)
    db_client.connect()
    db_client.execute(
        "CREATE TABLE member (id INTEGER PRIMARY KEY, email TEXT, grade TEXT NOT NULL)"
    )
    db_client.execute("CREATE TABLE orders (id INTEGER PRIMARY KEY, member_id INTEGER, total INTEGER)")
    for member_id in range(1, 26):
        grade = "gold" if member_id % 5 == 0 else "basic"
        db_client.execute(
            f"INSERT INTO member (id, email, grade) VALUES ({member_id}, 'm{member_id}@example.com', '{grade}')"
        )
    db_client.execute("INSERT INTO orders (id, member_id, total) VALUES (1, 5, 300), (2, 10, 100)")
    yield db_client
    db_client.close()


def test_fetch_all_decodes_pydantic_models(client: DBClient) -> None:
    members = QueryWrapper().eq("grade", "gold").order_by("id", False).fetch_all(client, "member", Member)

    assert [member.id for member in members] == [25, 20, 15, 10, 5]
    assert all(isinstance(member, Member) for member in members)


def test_fetch_all_without_record_type_returns_dicts(client: DBClient) -> None:
    rows = QueryWrapper().select(["id", "grade"]).lt("id", 3).order_by("id").fetch_all(client, "member")

    assert rows == [{"id": 1, "grade": "basic"}, {"id": 2, "grade": "basic"}]


def test_fetch_one_decodes_dataclass_and_missing_row(client: DBClient) -> None:
    member = QueryWrapper().eq("id", 7).fetch_one(client, "member", MemberRow)
    missing = QueryWrapper().eq("id", 999).fetch_one(client, "member", MemberRow)

    assert member == MemberRow(id=7, email="m7@example.com", grade="basic")
    assert missing is None


def test_fetch_one_with_custom_count_returns_scalar(client: DBClient) -> None:
    count = QueryWrapper().custom_sql("select count(*) from member").fetch_one(client, "", int)

    assert count == 25


def test_fetch_one_with_many_rows_raises(client: DBClient) -> None:
    with pytest.raises(RowDecodeError) as exc_info:
        QueryWrapper().eq("grade", "gold").fetch_one(client, "member", Member)

    assert exc_info.value.detail.code == "DB_TOO_MANY_ROWS"


def test_decode_mismatch_raises_row_decode_error(client: DBClient) -> None:
    class Wrong(BaseModel):
        missing_column: int

    with pytest.raises(RowDecodeError):
        QueryWrapper().eq("id", 1).fetch_all(client, "member", Wrong)


def test_page_on_sqlite(client: DBClient) -> None:
    page = QueryWrapper().like("email", "example").order_by("id").page(client, "member", 3, 10, Member)

    assert page.total == 25
    assert page.pages == 3
    assert page.has_next is False
    assert [member.id for member in page.records] == [21, 22, 23, 24, 25]


def test_page_with_join_counts_joined_rows(client: DBClient) -> None:
    page = (
        QueryWrapper()
        .select(["member.id AS id", "orders.total AS total"])
        .inner_join("orders", "orders.member_id = member.id")
        .order_by("orders.total", False)
        .page(client, "member", 1, 1)
    )

    assert page.total == 2
    assert page.has_next is True
    assert page.records == [{"id": 5, "total": 300}]


def test_page_with_no_match_returns_empty_page(client: DBClient) -> None:
    page = QueryWrapper().eq("grade", "platinum").page(client, "member", 1, 10, Member)

    assert page.records == []
    assert page.total == 0
    assert page.pages == 0


def test_delete_returns_affected_rows(client: DBClient) -> None:
    affected = QueryWrapper().eq("grade", "gold").delete(client, "member")
    remaining = client.fetch_scalar("SELECT COUNT(*) FROM member")

    assert affected == 5
    assert remaining == 20


def test_sql_errors_propagate_from_engine(client: DBClient) -> None:
    with pytest.raises(sqlite3.OperationalError):
        QueryWrapper().eq("no_such_column", 1).fetch_all(client, "member")


def test_engine_requires_connect(tmp_path) -> None:
    engine = SQLiteEngine(str(tmp_path / "idle.sqlite"))

    with pytest.raises(RuntimeError, match="초기화"):
        engine.fetch_rows("SELECT 1")


def test_client_logs_executed_sql(tmp_path) -> None:
    logger = InMemoryLogger("client", emit_stdout=False)
    db_client = DBClient(SQLiteEngine(str(tmp_path / "log.sqlite"), logger=logger), logger=logger)
    db_client.connect()

    db_client.fetch_scalar("SELECT 1")
    db_client.close()

    sql_records = [record for record in logger.repository.list() if record.metadata.get("sql")]
    assert sql_records[0].metadata["sql"] == "SELECT 1"
    assert sql_records[0].context.engine == "sqlite"


def test_client_log_store_stays_bounded(tmp_path) -> None:
    """오래 쓰는 클라이언트도 로그 저장소가 상한을 넘지 않아야 한다."""

    logger = InMemoryLogger("client", repository=InMemoryLogRepository(max_records=50), emit_stdout=False)
    db_client = DBClient(SQLiteEngine(str(tmp_path / "busy.sqlite"), logger=logger), logger=logger)
    db_client.connect()

    for _ in range(500):
        db_client.fetch_all("SELECT 1")
    db_client.close()

    assert len(logger.repository.list()) == 50
