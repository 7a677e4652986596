"""Credential Acquirers.

각 프로바이더 SDK 로그인 플로우를 감싸는 구현체입니다.
"""

from apps.social_auth.application.acquisition.services.apple import AppleCredentialAcquirer
from apps.social_auth.application.acquisition.services.base import (
    AcquireCompletion,
    ProviderCredentialAcquirer,
)
from apps.social_auth.application.acquisition.services.google import GoogleCredentialAcquirer
from apps.social_auth.application.acquisition.services.kakao import KakaoCredentialAcquirer
from apps.social_auth.application.acquisition.services.naver import NaverCredentialAcquirer
from apps.social_auth.application.acquisition.services.registry import AcquirerRegistry

__all__ = [
    "AcquireCompletion",
    "AcquirerRegistry",
    "AppleCredentialAcquirer",
    "GoogleCredentialAcquirer",
    "KakaoCredentialAcquirer",
    "NaverCredentialAcquirer",
    "ProviderCredentialAcquirer",
]
