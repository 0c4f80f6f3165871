"""
목적: DB 베이스 모듈 공개 API를 제공한다.
설명: 페이지 모델, 엔진 인터페이스, 실행기 포트, 행 디코더를 노출한다.
디자인 패턴: 퍼사드
참조: src/query_wrapper/integrations/db/base/models.py, src/query_wrapper/integrations/db/base/engine.py
"""

from query_wrapper.integrations.db.base.engine import BaseDBEngine
from query_wrapper.integrations.db.base.models import Page
from query_wrapper.integrations.db.base.ports import QueryExecutorPort
from query_wrapper.integrations.db.base.row_decoder import RowDecoder

__all__ = ["BaseDBEngine", "Page", "QueryExecutorPort", "RowDecoder"]
