"""
목적: 설정 모듈 공개 API를 제공한다.
설명: 설정 병합 로더와 DB 설정 모델을 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/query_wrapper/shared/config/loader.py, src/query_wrapper/shared/config/database.py
"""

from query_wrapper.shared.config.database import (
    DatabaseSettings,
    EngineKind,
    load_database_settings,
)
from query_wrapper.shared.config.loader import ConfigLoader

__all__ = ["ConfigLoader", "DatabaseSettings", "EngineKind", "load_database_settings"]
