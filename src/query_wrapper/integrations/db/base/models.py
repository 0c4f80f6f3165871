"""
목적: 페이지 조회 결과 모델을 정의한다.
설명: 레코드 목록과 전체 건수, 요청 페이지 정보를 보관하고 총 페이지 수와 다음 페이지 여부를 계산한다.
디자인 패턴: 값 객체
참조: src/query_wrapper/integrations/db/query_builder/query_wrapper.py
"""

from __future__ import annotations

from typing import Any, Generic, Iterable, List, TypeVar

from pydantic import BaseModel, ConfigDict, Field, computed_field

T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    """페이지 조회 결과 모델이다.

    생성 이후에는 변경할 수 없다. `pages` 와 `has_next` 는 입력값에서 파생된다.

    Args:
        records: 현재 페이지의 레코드 목록.
        total: 모든 페이지를 합친 전체 건수.
        page_no: 1부터 시작하는 요청 페이지 번호.
        page_size: 요청 페이지 크기.
    """

    model_config = ConfigDict(frozen=True)

    records: List[T] = Field(default_factory=list)
    total: int = Field(ge=0)
    page_no: int
    page_size: int = Field(gt=0)

    @computed_field
    @property
    def pages(self) -> int:
        """전체 페이지 수를 반환한다."""

        return (self.total + self.page_size - 1) // self.page_size

    @computed_field
    @property
    def has_next(self) -> bool:
        """다음 페이지가 있는지 반환한다."""

        return self.page_no < self.pages

    @classmethod
    def new(
        cls,
        records: Iterable[T],
        total: int,
        page_no: int,
        page_size: int,
    ) -> "Page[T]":
        """위치 인자로 페이지를 생성한다."""

        return cls(records=list(records), total=total, page_no=page_no, page_size=page_size)

    def to_dict(self) -> dict:
        """JSON 직렬화 가능한 사전으로 변환한다.

        Pydantic 모델이나 dataclass가 아닌 레코드는 공개 속성 사전으로,
        속성이 없으면 문자열로 바꾼다.
        """

        return self.model_dump(mode="json", fallback=_record_fallback)


def _record_fallback(value: Any) -> Any:
    attributes = getattr(value, "__dict__", None)
    if attributes is None:
        return str(value)
    return {key: item for key, item in attributes.items() if not key.startswith("_")}
