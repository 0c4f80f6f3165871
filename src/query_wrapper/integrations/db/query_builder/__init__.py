"""
목적: DB 쿼리 빌더 모듈 공개 API를 제공한다.
설명: 체이닝 쿼리 빌더와 SQL 렌더러, 누적 상태 모델을 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/query_wrapper/integrations/db/query_builder/query_wrapper.py
"""

from query_wrapper.integrations.db.query_builder.query_wrapper import QueryWrapper
from query_wrapper.integrations.db.query_builder.renderer import SqlRenderer
from query_wrapper.integrations.db.query_builder.state import QueryState

__all__ = ["QueryWrapper", "SqlRenderer", "QueryState"]
