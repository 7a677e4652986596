"""Logging Configuration.

ECS 호환 JSON 로깅 설정입니다.

Firebase REST 요청 URL에는 웹 API 키가 쿼리로 붙으므로(`?key=...`),
stdout 핸들러는 메시지와 extra 필드를 마스킹한 뒤 출력합니다.
"""

from __future__ import annotations

import logging
import re
import sys
from typing import TYPE_CHECKING, Any

import ecs_logging

if TYPE_CHECKING:
    from apps.social_auth.setup.config import Settings

MASK_PLACEHOLDER = "***REDACTED***"
MASK_PRESERVE_PREFIX = 4
MASK_PRESERVE_SUFFIX = 4
MASK_MIN_LENGTH = 10

SENSITIVE_FIELD_PATTERNS = ("secret", "password", "api_key", "token")

_API_KEY_PARAM = re.compile(r"([?&]key=)[^&\s'\"]+")

_base_record_factory = logging.getLogRecordFactory()


def redact_api_key(text: str) -> str:
    """URL 쿼리의 key 파라미터 값을 가립니다."""
    return _API_KEY_PARAM.sub(lambda m: m.group(1) + MASK_PLACEHOLDER, text)


def _is_sensitive_key(key: str) -> bool:
    key_lower = key.lower()
    return any(pattern in key_lower for pattern in SENSITIVE_FIELD_PATTERNS)


def _mask_value(value: str) -> str:
    if len(value) <= MASK_MIN_LENGTH:
        return MASK_PLACEHOLDER
    return f"{value[:MASK_PRESERVE_PREFIX]}...{value[-MASK_PRESERVE_SUFFIX:]}"


class SensitiveDataFilter(logging.Filter):
    """API 키와 토큰/시크릿 필드를 가리는 핸들러 필터.

    - 메시지: `key=` 쿼리 파라미터 값 치환
    - extra: 이름이 민감 패턴에 걸리는 문자열 필드는 부분 마스킹,
      그 외 문자열 필드는 `key=` 치환만 적용
    """

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = redact_api_key(message)
        if redacted != message:
            record.msg, record.args = redacted, None

        for key, value in list(record.__dict__.items()):
            if not isinstance(value, str) or key in ("msg", "message"):
                continue
            if _is_sensitive_key(key):
                setattr(record, key, _mask_value(value))
            elif "key=" in value:
                setattr(record, key, redact_api_key(value))
        return True


def setup_logging(settings: "Settings") -> None:
    """로깅 설정."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ecs_logging.StdlibFormatter())
    handler.addFilter(SensitiveDataFilter())

    root_logger = logging.getLogger()
    root_logger.setLevel(settings.log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    service = {
        "name": settings.service_name,
        "version": settings.service_version,
        "environment": settings.environment,
    }

    def record_factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
        record = _base_record_factory(*args, **kwargs)
        record.service = service
        return record

    logging.setLogRecordFactory(record_factory)

    # httpx는 INFO에서 요청 URL 전체를 남김
    for logger_name in ("httpx", "httpcore", "asyncio"):
        logging.getLogger(logger_name).setLevel(logging.WARNING)
