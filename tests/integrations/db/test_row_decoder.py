"""
목적: 행 디코더의 스칼라 변환을 검증한다.
설명: bool 변환이 문자열 "false"/"0"을 참으로 바꾸지 않는지, 해석 불가 값이 RowDecodeError가 되는지 확인한다.
디자인 패턴: 매퍼 패턴 테스트
참조: src/query_wrapper/integrations/db/base/row_decoder.py
"""

from __future__ import annotations

import pytest

from query_wrapper.integrations.db import RowDecoder
from query_wrapper.shared.exceptions import RowDecodeError


@pytest.mark.parametrize(
    "value, expected",
    [("false", False), ("0", False), ("OFF", False), ("true", True), ("1", True), (0, False), (2, True)],
)
def test_decode_bool_reads_text_and_numbers(value, expected: bool) -> None:
    assert RowDecoder().decode({"flag": value}, bool) is expected


def test_decode_bool_rejects_unknown_text() -> None:
    with pytest.raises(RowDecodeError) as exc_info:
        RowDecoder().decode({"flag": "maybe"}, bool)

    assert exc_info.value.detail.code == "DB_ROW_DECODE_FAILED"


def test_decode_int_still_converts_text() -> None:
    assert RowDecoder().decode({"count": "42"}, int) == 42
