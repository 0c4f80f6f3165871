"""
목적: SQLite 엔진 모듈을 제공한다.
설명: SQLite 엔진 구현체와 연결 관리자를 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/query_wrapper/integrations/db/engines/sqlite/engine.py
"""

from query_wrapper.integrations.db.engines.sqlite.connection import SqliteConnectionManager
from query_wrapper.integrations.db.engines.sqlite.engine import SQLiteEngine

__all__ = ["SQLiteEngine", "SqliteConnectionManager"]
