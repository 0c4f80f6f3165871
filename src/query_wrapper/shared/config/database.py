"""
목적: DB 접속 설정 모델과 로딩 함수를 제공한다.
설명: ConfigLoader로 병합한 사전을 DatabaseSettings 모델로 검증한다.
디자인 패턴: 설정 객체
참조: src/query_wrapper/shared/config/loader.py, src/query_wrapper/integrations/db/factory.py
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from query_wrapper.shared.config.loader import ConfigLoader
from query_wrapper.shared.const import SharedConst
from query_wrapper.shared.exceptions import DatabaseConfigError, ExceptionDetail


class EngineKind(str, Enum):
    """지원하는 엔진 종류."""

    SQLITE = "sqlite"
    POSTGRES = "postgres"


class DatabaseSettings(BaseModel):
    """DB 접속 설정 모델이다.

    Args:
        engine: 사용할 엔진 종류.
        sqlite_path: SQLite 파일 경로.
        dsn: PostgreSQL DSN. 지정하면 host/port 등은 무시된다.
        host: PostgreSQL 호스트.
        port: PostgreSQL 포트.
        user: PostgreSQL 사용자.
        password: PostgreSQL 비밀번호.
        database: PostgreSQL 데이터베이스 이름.
    """

    model_config = ConfigDict(extra="ignore")

    engine: EngineKind = EngineKind.SQLITE
    sqlite_path: str = SharedConst.DEFAULT_SQLITE_PATH
    dsn: Optional[str] = None
    host: str = "127.0.0.1"
    port: int = Field(default=5432, gt=0)
    user: str = "postgres"
    password: Optional[str] = None
    database: str = "postgres"

    @field_validator("sqlite_path", "dsn", "host", "user", "password", "database", mode="before")
    @classmethod
    def _stringify(cls, value: Any) -> Any:
        if value is None:
            return None
        return str(value)


def load_database_settings(
    json_path: Optional[str] = None,
    overrides: Optional[Mapping[str, Any]] = None,
    env_prefix: str = SharedConst.DB_ENV_PREFIX,
    loader: Optional[ConfigLoader] = None,
) -> DatabaseSettings:
    """JSON 파일, 환경 변수, overrides 순으로 병합해 DB 설정을 만든다.

    환경 변수는 문자열 그대로 넘기므로 `0123` 같은 비밀번호가 바뀌지 않는다.
    """

    loader = loader or ConfigLoader()
    if json_path:
        loader.add_json_file(json_path)
    loader.add_env(prefix=env_prefix, parse_values=False)
    merged = loader.build(overrides)
    try:
        return DatabaseSettings.model_validate(merged)
    except ValidationError as error:
        detail = ExceptionDetail(
            code="DB_CONFIG_INVALID",
            cause=str(error),
            hint=f"{env_prefix}* 환경 변수나 설정 파일 값을 확인하세요.",
            metadata={"keys": sorted(merged.keys())},
        )
        raise DatabaseConfigError("DB 설정이 올바르지 않습니다.", detail, error) from error
