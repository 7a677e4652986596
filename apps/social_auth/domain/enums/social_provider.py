"""Social Provider Enum."""

from __future__ import annotations

from enum import Enum


class SocialProvider(str, Enum):
    """앱에서 지원하는 SNS 로그인 프로바이더.

    - Direct: 백엔드 인증 계층이 프로바이더 토큰을 직접 검증 (Apple, Google)
    - Indirect: 서버 측 토큰 교환을 거쳐야 하는 프로바이더 (Kakao, Naver)
    """

    APPLE = "apple"
    GOOGLE = "google"
    KAKAO = "kakao"
    NAVER = "naver"

    @classmethod
    def from_string(cls, value: str) -> "SocialProvider":
        """문자열에서 SocialProvider 생성.

        Raises:
            ValueError: 지원하지 않는 프로바이더
        """
        try:
            return cls(value.lower())
        except ValueError as e:
            supported = ", ".join(p.value for p in cls)
            raise ValueError(f"Unsupported provider: {value}. Supported: {supported}") from e

    @property
    def is_direct(self) -> bool:
        """토큰 교환 없이 백엔드에 바로 로그인 가능한지 여부."""
        return self in (SocialProvider.APPLE, SocialProvider.GOOGLE)

    @property
    def firebase_provider_id(self) -> str | None:
        """백엔드 인증 계층의 프로바이더 ID (Direct 프로바이더만)."""
        return _FIREBASE_PROVIDER_IDS.get(self)


_FIREBASE_PROVIDER_IDS = {
    SocialProvider.APPLE: "apple.com",
    SocialProvider.GOOGLE: "google.com",
}
