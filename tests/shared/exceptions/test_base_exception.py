"""
목적: 공통 예외 모델과 도메인 예외 동작을 검증한다.
설명: 예외 메시지/상세 모델/원본 예외 저장 및 직렬화 결과, 도메인 예외 상속 관계를 확인한다.
디자인 패턴: 도메인 예외 객체, DTO
참조: src/query_wrapper/shared/exceptions/base.py, src/query_wrapper/shared/exceptions/models.py
"""

from __future__ import annotations

from query_wrapper.shared.exceptions import (
    BaseAppException,
    ExceptionDetail,
    InvalidPageRequestError,
    RowDecodeError,
)


def test_base_app_exception_to_dict() -> None:
    """BaseAppException의 직렬화 결과를 검증한다."""

    detail = ExceptionDetail(
        code="DB_ROW_DECODE_FAILED",
        cause="컬럼 누락",
        hint="조회 컬럼을 확인하세요.",
        metadata={"record_type": "Member"},
    )
    original = KeyError("email")
    error = RowDecodeError(message="행을 Member 형태로 변환하지 못했습니다.", detail=detail, original=original)

    result = error.to_dict()

    assert isinstance(error, BaseAppException)
    assert error.message == "행을 Member 형태로 변환하지 못했습니다."
    assert error.detail.code == "DB_ROW_DECODE_FAILED"
    assert error.original is original
    assert result["detail"]["metadata"]["record_type"] == "Member"
    assert "KeyError" in result["original"]


def test_invalid_page_request_is_value_error() -> None:
    """페이지 요청 오류는 ValueError로도 잡혀야 한다."""

    error = InvalidPageRequestError("잘못된 페이지", ExceptionDetail(code="DB_INVALID_PAGE_REQUEST"))

    assert isinstance(error, ValueError)
    assert str(error) == "잘못된 페이지"
    assert error.to_dict()["original"] is None
