"""Container 단위 테스트."""

from __future__ import annotations

from unittest.mock import MagicMock

import httpx
import pytest

from apps.social_auth.setup.config import load_settings
from apps.social_auth.setup.dependencies import Container, ProviderSDKs
from apps.social_auth.tests.unit.fakes import SETTINGS_VALUES, Anchor


class TestContainer:
    """Container 테스트."""

    @pytest.fixture
    def sdks(self, apple_sdk, google_sdk, kakao_sdk, naver_sdk) -> ProviderSDKs:
        return ProviderSDKs(apple=apple_sdk, google=google_sdk, kakao=kakao_sdk, naver=naver_sdk)

    @pytest.fixture
    def http_requests(self) -> list[httpx.Request]:
        return []

    @pytest.fixture
    def container(self, sdks, http_requests) -> Container:
        def handler(request: httpx.Request) -> httpx.Response:
            http_requests.append(request)
            return httpx.Response(200, json={"result": {"customToken": "ctk_123"}})

        return Container(
            sdks,
            settings=load_settings(**SETTINGS_VALUES),
            http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
            configure_logging=False,
        )

    def test_not_initialized(self, container) -> None:
        with pytest.raises(RuntimeError):
            _ = container.auth_service

    @pytest.mark.asyncio
    async def test_init_configures_provider_sdks(self, container, kakao_sdk, naver_sdk, caplog) -> None:
        """Kakao / Naver SDK는 설정 값으로 초기화, 시크릿은 마스킹."""
        with caplog.at_level("INFO"):
            await container.init()

        assert kakao_sdk.app_key == "kakao-key"
        assert naver_sdk.config == {
            "app_name": "PulseBoard",
            "client_id": "naver-id",
            "client_secret": "naver-secret",
            "url_scheme": "pulseboardnaver",
        }
        for record in caplog.records:
            assert "naver-secret" not in str(record.__dict__)
        await container.close()

    @pytest.mark.asyncio
    async def test_init_wires_services(self, container) -> None:
        await container.init()

        assert container.auth_service.current_user_uid is None
        assert container.url_router.handler_names == ["kakao", "naver", "google"]
        assert container.auth_client.listener_count == 1
        await container.close()

    @pytest.mark.asyncio
    async def test_close_stops_publisher(self, container) -> None:
        await container.init()

        await container.close()

        assert container.auth_client.listener_count == 0

    @pytest.mark.asyncio
    async def test_kakao_login_reaches_functions_endpoint(
        self, container, kakao_sdk, http_requests
    ) -> None:
        """조립된 파이프라인이 설정된 리전의 socialLogin을 호출."""
        # Arrange
        await container.init()
        completion = MagicMock()

        # Act
        container.auth_service.login("kakao", Anchor(), completion)
        kakao_sdk.complete("tok_abc")
        await container.dispatcher.wait_idle()

        # Assert
        assert str(http_requests[0].url) == (
            "https://asia-northeast3-pulseboard.cloudfunctions.net/socialLogin"
        )
        completion.assert_called_once()
        await container.close()
