"""
목적: Page 모델의 파생 값과 불변성을 검증한다.
설명: 총 페이지 수, 다음 페이지 여부, 직렬화 결과, 입력 검증을 확인한다.
디자인 패턴: 값 객체, DTO
참조: src/query_wrapper/integrations/db/base/models.py
"""

from __future__ import annotations

import pytest
from pydantic import BaseModel, ValidationError

from query_wrapper.integrations.db import Page


class _Member(BaseModel):
    id: int
    email: str | None = None


def test_page_middle_of_three_has_next() -> None:
    page = Page.new(["r1", "r2"], total=25, page_no=2, page_size=10)

    assert page.pages == 3
    assert page.has_next is True


def test_page_empty_result() -> None:
    page = Page.new([], total=0, page_no=1, page_size=10)

    assert page.pages == 0
    assert page.has_next is False


@pytest.mark.parametrize(
    "total, page_no, page_size, pages, has_next",
    [
        (10, 1, 10, 1, False),
        (11, 1, 10, 2, True),
        (11, 2, 10, 2, False),
        (1, 1, 1, 1, False),
        (5, 9, 2, 3, False),
    ],
)
def test_page_derived_values(total: int, page_no: int, page_size: int, pages: int, has_next: bool) -> None:
    """총 페이지 수는 올림 나눗셈이고 다음 페이지 여부는 page_no < pages이다."""

    page = Page.new([], total=total, page_no=page_no, page_size=page_size)

    assert page.pages == pages
    assert page.has_next is has_next


def test_page_is_immutable() -> None:
    page = Page.new([1], total=1, page_no=1, page_size=1)

    with pytest.raises(ValidationError):
        page.total = 2


def test_page_rejects_non_positive_page_size() -> None:
    with pytest.raises(ValidationError):
        Page.new([], total=0, page_no=1, page_size=0)


def test_page_to_dict_includes_derived_fields() -> None:
    """직렬화 결과에 파생 필드가 포함되어야 한다."""

    page = Page[_Member].new([_Member(id=1, email="a@example.com")], total=3, page_no=1, page_size=1)

    assert page.to_dict() == {
        "records": [{"id": 1, "email": "a@example.com"}],
        "total": 3,
        "page_no": 1,
        "page_size": 1,
        "pages": 3,
        "has_next": True,
    }


class _PlainRecord:
    def __init__(self, id: int, name: str) -> None:
        self.id = id
        self.name = name
        self._cache = object()


def test_page_to_dict_serializes_plain_records() -> None:
    """모델이 아닌 레코드는 공개 속성 사전으로 직렬화되어야 한다."""

    page = Page.new([_PlainRecord(1, "kim")], total=1, page_no=1, page_size=10)

    assert page.to_dict()["records"] == [{"id": 1, "name": "kim"}]
