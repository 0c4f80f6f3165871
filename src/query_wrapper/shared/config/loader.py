"""
목적: 설정 로더를 제공한다.
설명: dict/JSON 파일/환경 변수를 순서대로 쌓아 하나의 설정 사전으로 병합한다.
디자인 패턴: 빌더 패턴
참조: src/query_wrapper/shared/config/database.py, src/query_wrapper/shared/const/__init__.py
"""

from __future__ import annotations

import json
import os
from typing import Any, Dict, List, Mapping, Optional

from query_wrapper.shared.const import SharedConst
from query_wrapper.shared.logging import Logger, create_default_logger


class ConfigLoader:
    """설정 로더 구현체이다.

    뒤에 추가한 소스가 앞선 소스를 덮어쓰며, 중첩 사전은 키 단위로 병합된다.

    Args:
        logger: 주입 가능한 로거.
    """

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self._logger = logger or create_default_logger("ConfigLoader")
        self._sources: List[Dict[str, Any]] = []

    def add_dict(self, data: Optional[Mapping[str, Any]]) -> "ConfigLoader":
        """딕셔너리 설정을 추가한다."""

        if data:
            self._sources.append(dict(data))
        return self

    def add_json_file(
        self,
        path: str,
        required: bool = False,
        encoding: str = SharedConst.DEFAULT_ENCODING,
    ) -> "ConfigLoader":
        """JSON 파일 설정을 추가한다."""

        if not path:
            raise ValueError("path는 비어 있을 수 없습니다.")
        if not os.path.exists(path):
            if required:
                raise FileNotFoundError(path)
            self._logger.warning(f"설정 파일이 없어 건너뜁니다: {path}")
            return self
        with open(path, "r", encoding=encoding) as handle:
            try:
                payload = json.load(handle)
            except json.JSONDecodeError as exc:
                raise ValueError("JSON 설정 파일 파싱에 실패했습니다.") from exc
        if not isinstance(payload, dict):
            raise ValueError("JSON 설정 파일은 최상위가 객체여야 합니다.")
        self._sources.append(payload)
        return self

    def add_env(
        self,
        prefix: str = SharedConst.DB_ENV_PREFIX,
        delimiter: str = SharedConst.ENV_NESTED_DELIMITER,
        parse_values: bool = True,
    ) -> "ConfigLoader":
        """접두사가 붙은 환경 변수를 소문자 키로 추가한다.

        `QUERY_WRAPPER_DB__SQLITE_PATH` 는 `{"sqlite_path": ...}` 가 되고,
        구분자가 더 있으면 중첩 사전으로 펼쳐진다. `parse_values=False` 이면
        값을 문자열 그대로 두고 타입 변환을 모델 검증에 맡긴다.
        """

        env_data: Dict[str, Any] = {}
        for key, value in os.environ.items():
            if prefix and not key.startswith(prefix):
                continue
            parts = [part.lower() for part in key[len(prefix) :].split(delimiter) if part]
            if not parts:
                continue
            parsed = self._parse_value(value) if parse_values else value
            self._assign_nested(env_data, parts, parsed)
        if env_data:
            self._sources.append(env_data)
        return self

    def build(self, overrides: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """수집된 설정을 병합해 반환한다."""

        merged: Dict[str, Any] = {}
        for source in self._sources:
            merged = self._merge(merged, source)
        if overrides:
            merged = self._merge(merged, dict(overrides))
        return merged

    def _assign_nested(self, root: Dict[str, Any], keys: List[str], value: Any) -> None:
        current = root
        for part in keys[:-1]:
            if not isinstance(current.get(part), dict):
                current[part] = {}
            current = current[part]
        current[keys[-1]] = value

    def _merge(self, base: Dict[str, Any], incoming: Dict[str, Any]) -> Dict[str, Any]:
        merged = dict(base)
        for key, value in incoming.items():
            if isinstance(merged.get(key), dict) and isinstance(value, dict):
                merged[key] = self._merge(merged[key], value)
            else:
                merged[key] = value
        return merged

    def _parse_value(self, raw: str) -> Any:
        lowered = raw.strip().lower()
        if lowered in {"true", "false"}:
            return lowered == "true"
        if lowered in {"null", "none"}:
            return None
        try:
            if "." in raw:
                return float(raw)
            return int(raw)
        except ValueError:
            pass
        if (raw.startswith("{") and raw.endswith("}")) or (raw.startswith("[") and raw.endswith("]")):
            try:
                return json.loads(raw)
            except json.JSONDecodeError:
                return raw
        return raw
