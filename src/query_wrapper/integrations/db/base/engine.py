"""
목적: DB 엔진 추상 인터페이스를 정의한다.
설명: 연결 관리와 SQL 문자열 실행을 위한 표준 메서드를 제공한다.
디자인 패턴: 전략 패턴
참조: src/query_wrapper/integrations/db/client.py
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List


class BaseDBEngine(ABC):
    """DB 엔진 인터페이스."""

    @property
    @abstractmethod
    def name(self) -> str:
        """엔진 이름을 반환한다."""

    @abstractmethod
    def connect(self) -> None:
        """DB 연결을 초기화한다."""

    @abstractmethod
    def close(self) -> None:
        """DB 연결을 종료한다."""

    @abstractmethod
    def fetch_rows(self, sql: str) -> List[Dict[str, Any]]:
        """조회 SQL을 실행하고 컬럼 순서를 유지한 행 사전 목록을 반환한다."""

    @abstractmethod
    def execute(self, sql: str) -> int:
        """변경 SQL을 실행하고 커밋한 뒤 영향받은 행 수를 반환한다."""
