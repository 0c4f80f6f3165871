"""
목적: PostgreSQL 엔진 모듈을 제공한다.
설명: PostgreSQL 엔진 구현체를 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/query_wrapper/integrations/db/engines/postgres/engine.py
"""

from query_wrapper.integrations.db.engines.postgres.engine import PostgresEngine

__all__ = ["PostgresEngine"]
