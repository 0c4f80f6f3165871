"""
목적: 설정된 DB에서 테이블 한 페이지를 빠르게 확인하는 스크립트를 제공한다.
설명: .env와 QUERY_WRAPPER_DB__* 환경 변수로 접속한 뒤 QueryWrapper.page 결과를 JSON으로 출력한다.
디자인 패턴: 절차형 유틸 스크립트
참조: src/query_wrapper/integrations/db/query_builder/query_wrapper.py, src/query_wrapper/shared/config/database.py
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from query_wrapper import QueryWrapper, create_client
from query_wrapper.shared.config import load_database_settings

load_dotenv(dotenv_path=Path(__file__).resolve().parent / ".env")


def quick_view_page(
    table_name: str,
    page_no: int = 1,
    page_size: int = 10,
    config_path: str | None = None,
    order_by: str | None = None,
    descending: bool = False,
    filters: list[str] | None = None,
) -> dict[str, Any]:
    """테이블의 요청 페이지를 조회해 사전으로 반환한다."""

    settings = load_database_settings(json_path=config_path)
    client = create_client(settings)
    wrapper = QueryWrapper()
    for raw in filters or []:
        column, separator, value = raw.partition("=")
        if not column or not separator:
            raise ValueError(f"필터 형식은 column=value 입니다: {raw!r}")
        wrapper.eq(column.strip(), value.strip())
    if order_by:
        wrapper.order_by(order_by, asc=not descending)

    client.connect()
    try:
        return wrapper.page(client, table_name, page_no, page_size).to_dict()
    finally:
        client.close()


def main() -> None:
    parser = argparse.ArgumentParser(description="테이블 한 페이지를 JSON으로 출력합니다.")
    parser.add_argument("table", help="조회할 테이블 이름")
    parser.add_argument("--page", type=int, default=1, help="1부터 시작하는 페이지 번호")
    parser.add_argument("--size", type=int, default=10, help="페이지 크기")
    parser.add_argument("--config", default=None, help="JSON 설정 파일 경로")
    parser.add_argument("--order-by", default=None, help="정렬 컬럼")
    parser.add_argument("--desc", action="store_true", help="내림차순 정렬")
    parser.add_argument(
        "--eq",
        action="append",
        default=[],
        metavar="COLUMN=VALUE",
        help="같음 조건. 여러 번 지정할 수 있습니다.",
    )
    args = parser.parse_args()

    result = quick_view_page(
        table_name=args.table,
        page_no=args.page,
        page_size=args.size,
        config_path=args.config,
        order_by=args.order_by,
        descending=args.desc,
        filters=args.eq,
    )
    print(json.dumps(result, ensure_ascii=False, indent=2, default=str))


if __name__ == "__main__":
    main()
