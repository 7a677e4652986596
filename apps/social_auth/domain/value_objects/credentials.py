"""Provider Credential Value Objects.

프로바이더 로그인 1회 시도 동안만 존재하는 인증 정보입니다.
코어는 이 값들을 저장하지 않습니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from apps.social_auth.domain.enums.social_provider import SocialProvider


@dataclass(frozen=True, slots=True)
class AppleCredential:
    """Apple 로그인 결과.

    raw_nonce는 해시 전 원본 값으로, 백엔드가 identity token의
    nonce 클레임을 다시 검증할 때 사용합니다.
    """

    identity_token: str
    raw_nonce: str
    full_name: str | None = None

    @property
    def provider(self) -> SocialProvider:
        return SocialProvider.APPLE


@dataclass(frozen=True, slots=True)
class GoogleCredential:
    """Google 로그인 결과."""

    id_token: str
    access_token: str

    @property
    def provider(self) -> SocialProvider:
        return SocialProvider.GOOGLE


@dataclass(frozen=True, slots=True)
class AccessTokenCredential:
    """Kakao / Naver 로그인 결과 (accessToken)."""

    provider: SocialProvider
    access_token: str
    raw_result: Any = field(default=None, compare=False, repr=False)


ProviderCredential = Union[AppleCredential, GoogleCredential, AccessTokenCredential]


@dataclass(frozen=True, slots=True)
class IdentityAssertion:
    """백엔드 인증 계층이 직접 인식하는 Credential (Direct path)."""

    provider: SocialProvider
    id_token: str
    access_token: str | None = None
    raw_nonce: str | None = None
    full_name: str | None = None

    @classmethod
    def from_credential(cls, credential: AppleCredential | GoogleCredential) -> "IdentityAssertion":
        if isinstance(credential, AppleCredential):
            return cls(
                provider=SocialProvider.APPLE,
                id_token=credential.identity_token,
                raw_nonce=credential.raw_nonce,
                full_name=credential.full_name,
            )
        return cls(
            provider=SocialProvider.GOOGLE,
            id_token=credential.id_token,
            access_token=credential.access_token,
        )

    @property
    def provider_id(self) -> str:
        provider_id = self.provider.firebase_provider_id
        if provider_id is None:
            raise ValueError(f"{self.provider.value} is not a direct provider")
        return provider_id


@dataclass(frozen=True, slots=True)
class ExchangeRequest:
    """토큰 교환 요청. Token Exchange Client가 정확히 한 번 소비합니다."""

    credential: str
    provider: SocialProvider

    def to_payload(self) -> dict[str, str]:
        """callable 함수 파라미터."""
        return {
            "accessToken": self.credential,
            "provider": self.provider.value,
        }


@dataclass(frozen=True, slots=True)
class BackendSessionToken:
    """백엔드가 발급한 단기 Custom Token."""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("Backend session token must not be empty")

    def __len__(self) -> int:
        return len(self.value)
