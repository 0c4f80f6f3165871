"""
목적: 조회 결과 행을 호출자가 요청한 레코드 형태로 변환한다.
설명: 사전, Pydantic 모델, 스칼라 타입, 키워드 인자 생성자를 지원한다.
디자인 패턴: 매퍼 패턴
참조: src/query_wrapper/integrations/db/client.py
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Type

from pydantic import BaseModel, ValidationError

from query_wrapper.shared.exceptions import ExceptionDetail, RowDecodeError

_SCALAR_TYPES = (int, float, str, bool)
_TRUE_TEXTS = {"1", "true", "t", "yes", "y", "on"}
_FALSE_TEXTS = {"0", "false", "f", "no", "n", "off"}


class RowDecoder:
    """행 디코더."""

    def decode(self, row: Mapping[str, Any], record_type: Optional[Type[Any]] = None) -> Any:
        """행 하나를 record_type 형태로 변환한다."""

        if record_type is None or record_type is dict:
            return dict(row)
        try:
            if isinstance(record_type, type) and issubclass(record_type, BaseModel):
                return record_type.model_validate(dict(row))
            if record_type in _SCALAR_TYPES:
                return self.decode_scalar(row, record_type)
            return record_type(**row)
        except (ValidationError, TypeError, ValueError) as error:
            raise self._error(record_type, row, error) from error

    def decode_scalar(self, row: Mapping[str, Any], scalar_type: Optional[Type[Any]] = None) -> Any:
        """행의 첫 번째 컬럼 값을 반환한다."""

        if not row:
            raise self._error(scalar_type, row, None)
        value = next(iter(row.values()))
        if scalar_type is None or value is None:
            return value
        if scalar_type is bool:
            return self._to_bool(value)
        return scalar_type(value)

    def _to_bool(self, value: Any) -> bool:
        if isinstance(value, (bool, int, float)):
            return bool(value)
        text = str(value).strip().lower()
        if text in _TRUE_TEXTS:
            return True
        if text in _FALSE_TEXTS:
            return False
        raise ValueError(f"bool로 해석할 수 없는 값입니다: {value!r}")

    def _error(
        self,
        record_type: Optional[Type[Any]],
        row: Mapping[str, Any],
        original: Optional[Exception],
    ) -> RowDecodeError:
        type_name = getattr(record_type, "__name__", repr(record_type))
        columns: Dict[str, Any] = {"columns": list(row.keys())}
        detail = ExceptionDetail(
            code="DB_ROW_DECODE_FAILED",
            cause=str(original) if original else "빈 행",
            hint="조회 컬럼과 레코드 필드가 일치하는지 확인하세요.",
            metadata={"record_type": type_name, **columns},
        )
        return RowDecodeError(f"행을 {type_name} 형태로 변환하지 못했습니다.", detail, original)
