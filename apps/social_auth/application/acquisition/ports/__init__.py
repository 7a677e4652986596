"""Provider SDK ports.

네이티브 프로바이더 SDK는 외부 협력자이며, 아래 인터페이스로만 접근합니다.
"""

from apps.social_auth.application.acquisition.ports.provider_sdk import (
    AppleIDCredential,
    AppleIDRequest,
    AppleSignInSDK,
    GoogleSignInResult,
    GoogleSignInSDK,
    KakaoOAuthToken,
    KakaoSDK,
    NaverLoginBehavior,
    NaverLoginResult,
    NaverSDK,
    SDKCompletion,
)

__all__ = [
    "AppleIDCredential",
    "AppleIDRequest",
    "AppleSignInSDK",
    "GoogleSignInResult",
    "GoogleSignInSDK",
    "KakaoOAuthToken",
    "KakaoSDK",
    "NaverLoginBehavior",
    "NaverLoginResult",
    "NaverSDK",
    "SDKCompletion",
]
