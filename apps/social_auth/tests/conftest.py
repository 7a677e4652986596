"""Test Configuration and Fixtures.

pytest 설정 및 공통 픽스처.
"""

from __future__ import annotations

import os

import pytest

from apps.social_auth.tests.unit.fakes import (
    FakeAppleSDK,
    FakeBackendAuthGateway,
    FakeGoogleSDK,
    FakeKakaoSDK,
    FakeNaverSDK,
    InlineDispatcher,
    Surface,
)


# ============================================================
# Environment
# ============================================================


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """외부 SOCIAL_AUTH_* 환경변수가 테스트에 섞이지 않도록 제거."""
    for key in list(os.environ):
        if key.upper().startswith("SOCIAL_AUTH_"):
            monkeypatch.delenv(key, raising=False)


# ============================================================
# Fakes
# ============================================================


@pytest.fixture
def dispatcher() -> InlineDispatcher:
    return InlineDispatcher()


@pytest.fixture
def apple_sdk() -> FakeAppleSDK:
    return FakeAppleSDK()


@pytest.fixture
def google_sdk() -> FakeGoogleSDK:
    return FakeGoogleSDK()


@pytest.fixture
def kakao_sdk() -> FakeKakaoSDK:
    return FakeKakaoSDK()


@pytest.fixture
def naver_sdk() -> FakeNaverSDK:
    return FakeNaverSDK()


@pytest.fixture
def surface() -> Surface:
    return Surface()


@pytest.fixture
def backend() -> FakeBackendAuthGateway:
    return FakeBackendAuthGateway()
