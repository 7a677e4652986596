"""Logging 설정 단위 테스트."""

from __future__ import annotations

import json
import logging
from typing import Iterator

import ecs_logging
import pytest

from apps.social_auth.setup.config import load_settings
from apps.social_auth.setup.logging import (
    MASK_PLACEHOLDER,
    SensitiveDataFilter,
    redact_api_key,
    setup_logging,
)
from apps.social_auth.tests.unit.fakes import SETTINGS_VALUES


@pytest.fixture
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    factory = logging.getLogRecordFactory()
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.setLogRecordFactory(factory)


class TestSetupLogging:
    """setup_logging 테스트."""

    def test_ecs_handler_and_service_metadata(self, restore_logging) -> None:
        # Arrange
        settings = load_settings(**SETTINGS_VALUES, log_level="warning", environment="test")

        # Act
        setup_logging(settings)

        # Assert
        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        formatter = root.handlers[0].formatter
        assert isinstance(formatter, ecs_logging.StdlibFormatter)
        assert any(isinstance(f, SensitiveDataFilter) for f in root.handlers[0].filters)

        record = logging.getLogRecordFactory()(
            "apps.social_auth", logging.WARNING, __file__, 1, "hello", None, None
        )
        assert record.service == {
            "name": "social-auth",
            "version": "1.0.0",
            "environment": "test",
        }
        document = json.loads(formatter.format(record))
        assert document["message"] == "hello"

    def test_http_libraries_quieted(self, restore_logging) -> None:
        setup_logging(load_settings(**SETTINGS_VALUES))

        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING

    def test_repeated_setup_does_not_stack_factories(self, restore_logging) -> None:
        setup_logging(load_settings(**SETTINGS_VALUES, service_name="first"))
        setup_logging(load_settings(**SETTINGS_VALUES, service_name="second"))

        record = logging.getLogRecordFactory()("x", logging.INFO, __file__, 1, "m", None, None)

        assert record.service["name"] == "second"


class TestSensitiveDataFilter:
    """SensitiveDataFilter 테스트."""

    @staticmethod
    def _record(msg: str, *args: object, **extra: object) -> logging.LogRecord:
        record = logging.LogRecord("httpx", logging.WARNING, __file__, 1, msg, args, None)
        record.__dict__.update(extra)
        return record

    def test_api_key_redacted_from_message(self) -> None:
        # Arrange
        record = self._record(
            "HTTP Request: %s %s",
            "POST",
            "https://identitytoolkit.googleapis.com/v1/accounts:delete?key=AIzaSecret123",
        )

        # Act
        kept = SensitiveDataFilter().filter(record)

        # Assert
        assert kept is True
        assert "AIzaSecret123" not in record.getMessage()
        assert f"?key={MASK_PLACEHOLDER}" in record.getMessage()

    def test_sensitive_extra_fields_masked(self) -> None:
        record = self._record(
            "Naver SDK initialized",
            naver_client_secret="short",
            custom_token="eyJhbGciOiJSUzI1NiJ9.payload",
            custom_token_length=28,
            provider="naver",
        )

        SensitiveDataFilter().filter(record)

        assert record.naver_client_secret == MASK_PLACEHOLDER
        assert record.custom_token == "eyJh...load"
        assert record.custom_token_length == 28
        assert record.provider == "naver"

    def test_error_extra_with_url_redacted(self) -> None:
        record = self._record(
            "Callable request failed",
            error="Server error '503' for url 'https://x.test/v1/token?key=AIzaSecret123'",
        )

        SensitiveDataFilter().filter(record)

        assert "AIzaSecret123" not in record.error

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("https://a.test/v1?key=abc", f"https://a.test/v1?key={MASK_PLACEHOLDER}"),
            ("https://a.test/v1?x=1&key=abc&y=2", f"https://a.test/v1?x=1&key={MASK_PLACEHOLDER}&y=2"),
            ("no secrets here", "no secrets here"),
        ],
    )
    def test_redact_api_key(self, text: str, expected: str) -> None:
        assert redact_api_key(text) == expected
