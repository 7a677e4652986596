"""OpenURLRouter 단위 테스트."""

from __future__ import annotations

from unittest.mock import MagicMock

from apps.social_auth.infrastructure.deeplink import OpenURLRouter


class TestOpenURLRouter:
    """OpenURLRouter 테스트."""

    def test_handler_order(self, kakao_sdk, naver_sdk, google_sdk) -> None:
        router = OpenURLRouter.for_sdks(kakao=kakao_sdk, naver=naver_sdk, google=google_sdk)

        assert router.handler_names == ["kakao", "naver", "google"]

    def test_kakao_url_consumed_first(self, kakao_sdk, naver_sdk, google_sdk) -> None:
        """카카오 로그인 URL은 다른 SDK에 전달되지 않음."""
        # Arrange
        naver_sdk.claims_urls = True
        router = OpenURLRouter.for_sdks(kakao=kakao_sdk, naver=naver_sdk, google=google_sdk)

        # Act
        handled = router.route("kakao1234://oauth?code=secret")

        # Assert
        assert handled
        assert kakao_sdk.opened_urls == ["kakao1234://oauth?code=secret"]
        assert naver_sdk.handled_urls == []
        assert google_sdk.handled_urls == []

    def test_naver_url(self, kakao_sdk, naver_sdk, google_sdk) -> None:
        naver_sdk.claims_urls = True
        router = OpenURLRouter.for_sdks(kakao=kakao_sdk, naver=naver_sdk, google=google_sdk)

        assert router.route("pulseboardnaver://thirdPartyLoginResult?code=1")
        assert google_sdk.handled_urls == []

    def test_google_url(self, kakao_sdk, naver_sdk, google_sdk) -> None:
        google_sdk.claims_urls = True
        router = OpenURLRouter.for_sdks(kakao=kakao_sdk, naver=naver_sdk, google=google_sdk)

        assert router.route("com.googleusercontent.apps.123:/oauth2redirect")
        assert naver_sdk.handled_urls == ["com.googleusercontent.apps.123:/oauth2redirect"]

    def test_unknown_url(self, kakao_sdk, naver_sdk, google_sdk, caplog) -> None:
        """처리할 핸들러가 없으면 False 및 경고 로그 (쿼리 제외)."""
        router = OpenURLRouter.for_sdks(kakao=kakao_sdk, naver=naver_sdk, google=google_sdk)

        with caplog.at_level("WARNING"):
            handled = router.route("https://example.com/path?token=secret")

        assert not handled
        assert "Unknown incoming URL" in caplog.text
        for record in caplog.records:
            assert "secret" not in str(record.__dict__)

    def test_custom_handlers(self) -> None:
        first = MagicMock()
        first.name = "first"
        first.handle.return_value = False
        second = MagicMock()
        second.name = "second"
        second.handle.return_value = True

        assert OpenURLRouter([first, second]).route("app://x")
        second.handle.assert_called_once_with("app://x")
