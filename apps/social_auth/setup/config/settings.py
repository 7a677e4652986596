"""Application Settings.

env_prefix="SOCIAL_AUTH_" 사용으로 SOCIAL_AUTH_FIREBASE_API_KEY 등의 환경변수 매핑.
빌드 설정에서 치환되지 않은 값($(KAKAO_APP_KEY) 등)은 시작 시점에 거부합니다.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Optional

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_PLACEHOLDER_PATTERN = re.compile(r"^\$[({].*[)}]$")


class ConfigurationError(RuntimeError):
    """필수 설정 누락 또는 치환되지 않은 값 (시작 실패)."""

    def __init__(self, fields: list[str], detail: str = "") -> None:
        self.fields = fields
        message = f"Invalid configuration: {', '.join(fields)}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class Settings(BaseSettings):
    """애플리케이션 설정.

    예시:
        SOCIAL_AUTH_FIREBASE_PROJECT_ID → firebase_project_id
        SOCIAL_AUTH_KAKAO_NATIVE_APP_KEY → kakao_native_app_key
    """

    # Firebase
    firebase_api_key: str
    firebase_project_id: str
    functions_region: str = "asia-northeast3"
    functions_emulator_host: Optional[str] = None
    auth_emulator_host: Optional[str] = None
    http_timeout_seconds: float = 10.0

    # Kakao
    kakao_native_app_key: str

    # Naver
    naver_app_name: str
    naver_client_id: str
    naver_client_secret: str
    naver_url_scheme: str

    # Google (SDK 자체 설정 파일을 쓰는 경우 생략 가능)
    google_client_id: Optional[str] = None

    # Logging
    log_level: str = "INFO"
    service_name: str = "social-auth"
    service_version: str = "1.0.0"
    environment: str = "local"

    model_config = SettingsConfigDict(
        env_prefix="SOCIAL_AUTH_",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator(
        "firebase_api_key",
        "firebase_project_id",
        "functions_region",
        "kakao_native_app_key",
        "naver_app_name",
        "naver_client_id",
        "naver_client_secret",
        "naver_url_scheme",
    )
    @classmethod
    def _require_resolved_value(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        if _PLACEHOLDER_PATTERN.match(value):
            raise ValueError(f"unresolved placeholder {value}")
        return value

    @field_validator(
        "functions_emulator_host", "auth_emulator_host", "google_client_id", mode="before"
    )
    @classmethod
    def _empty_string_to_none(cls, value: Optional[str]):
        """빈 문자열을 None으로 변환."""
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.upper()

    @property
    def masked_naver_client_secret(self) -> str:
        """로그용 마스킹 값."""
        return _mask(self.naver_client_secret)


def _mask(value: str) -> str:
    if len(value) <= 4:
        return "*" * len(value)
    return f"{value[:2]}{'*' * (len(value) - 4)}{value[-2:]}"


def load_settings(**overrides) -> Settings:
    """설정 로드 및 검증.

    Raises:
        ConfigurationError: 필수 값 누락 / 빈 값 / 치환되지 않은 placeholder
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        fields, reasons = [], []
        for error in e.errors():
            name = ".".join(str(loc) for loc in error["loc"])
            fields.append(name)
            reasons.append(f"{name}: {error['msg']}")
        raise ConfigurationError(fields, "; ".join(reasons)) from e


@lru_cache
def get_settings() -> Settings:
    """캐시된 Settings 인스턴스 반환."""
    return load_settings()
