"""
목적: 예외 상세 모델을 정의한다.
설명: 오류 코드, 원인, 조치 힌트, 메타데이터를 Pydantic 모델로 보관한다.
디자인 패턴: 데이터 전송 객체(DTO)
참조: src/query_wrapper/shared/exceptions/base.py
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class ExceptionDetail(BaseModel):
    """예외 상세 모델이다.

    Args:
        code: 오류 코드.
        cause: 오류 원인 요약.
        hint: 호출자에게 전달할 조치 힌트.
        metadata: 추가 정보.
    """

    code: str
    cause: Optional[str] = None
    hint: Optional[str] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)
