"""Dependency Injection.

Clean Architecture의 Composition Root입니다.
프로바이더 SDK는 플랫폼이 제공하므로 외부에서 주입받고,
나머지 의존성은 여기서 조립합니다.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from apps.social_auth.application.acquisition.ports import (
    AppleSignInSDK,
    GoogleSignInSDK,
    KakaoSDK,
    NaverSDK,
)
from apps.social_auth.application.acquisition.services import (
    AcquirerRegistry,
    AppleCredentialAcquirer,
    GoogleCredentialAcquirer,
    KakaoCredentialAcquirer,
    NaverCredentialAcquirer,
)
from apps.social_auth.application.commands import (
    AuthenticateInteractor,
    DeleteAccountInteractor,
    LogoutInteractor,
)
from apps.social_auth.application.exchange.services import TokenExchangeService
from apps.social_auth.application.services import AuthService
from apps.social_auth.application.session.services import (
    SessionAuthenticator,
    SessionStatePublisher,
)
from apps.social_auth.infrastructure.deeplink import OpenURLRouter
from apps.social_auth.infrastructure.dispatch import EventLoopDispatcher
from apps.social_auth.infrastructure.firebase import FirebaseAuthClient, FirebaseFunctionsClient
from apps.social_auth.setup.config import Settings, get_settings
from apps.social_auth.setup.logging import setup_logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProviderSDKs:
    """플랫폼이 제공하는 프로바이더 SDK 묶음."""

    apple: AppleSignInSDK
    google: GoogleSignInSDK
    kakao: KakaoSDK
    naver: NaverSDK


class Container:
    """의존성 컨테이너.

    UI 스레드(이벤트 루프)에서 init()을 호출해야 합니다.
    """

    def __init__(
        self,
        sdks: ProviderSDKs,
        *,
        settings: Optional[Settings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        configure_logging: bool = True,
    ) -> None:
        self._sdks = sdks
        self._settings = settings
        self._http_client = http_client
        self._owns_http_client = http_client is None
        self._configure_logging = configure_logging

        self._dispatcher: EventLoopDispatcher | None = None
        self._auth_client: FirebaseAuthClient | None = None
        self._publisher: SessionStatePublisher | None = None
        self._auth_service: AuthService | None = None
        self._url_router: OpenURLRouter | None = None

    async def init(self) -> None:
        """의존성 초기화.

        Raises:
            ConfigurationError: 필수 설정 누락 (SDK 초기화 전에 실패)
        """
        if self._settings is None:
            self._settings = get_settings()
        settings = self._settings
        if self._configure_logging:
            setup_logging(settings)

        self._init_provider_sdks(settings)

        dispatcher = EventLoopDispatcher.from_running_loop()
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=settings.http_timeout_seconds)

        # Infrastructure 생성
        auth_client = FirebaseAuthClient(
            client=self._http_client,
            api_key=settings.firebase_api_key,
            dispatcher=dispatcher,
            emulator_host=settings.auth_emulator_host,
        )
        functions_client = FirebaseFunctionsClient(
            client=self._http_client,
            project_id=settings.firebase_project_id,
            region=settings.functions_region,
            emulator_host=settings.functions_emulator_host,
            id_token_provider=lambda: auth_client.id_token,
        )

        # Application 생성 (DI)
        registry = AcquirerRegistry(
            [
                AppleCredentialAcquirer(sdk=self._sdks.apple, dispatcher=dispatcher),
                GoogleCredentialAcquirer(sdk=self._sdks.google, dispatcher=dispatcher),
                KakaoCredentialAcquirer(sdk=self._sdks.kakao, dispatcher=dispatcher),
                NaverCredentialAcquirer(sdk=self._sdks.naver, dispatcher=dispatcher),
            ]
        )
        publisher = SessionStatePublisher(auth_client, dispatcher)
        publisher.start()

        authenticate = AuthenticateInteractor(
            registry=registry,
            exchange_service=TokenExchangeService(functions_client),
            authenticator=SessionAuthenticator(auth_client),
            dispatcher=dispatcher,
        )

        self._dispatcher = dispatcher
        self._auth_client = auth_client
        self._publisher = publisher
        self._auth_service = AuthService(
            publisher=publisher,
            authenticate=authenticate,
            logout=LogoutInteractor(auth_client),
            delete_account=DeleteAccountInteractor(auth_client),
        )
        self._url_router = OpenURLRouter.for_sdks(
            kakao=self._sdks.kakao,
            naver=self._sdks.naver,
            google=self._sdks.google,
        )
        logger.info(
            "Social auth container initialized",
            extra={
                "providers": [p.value for p in registry.available_providers],
                "functions_region": settings.functions_region,
                "env": settings.environment,
            },
        )

    def _init_provider_sdks(self, settings: Settings) -> None:
        self._sdks.kakao.init_sdk(settings.kakao_native_app_key)
        self._sdks.naver.initialize(
            app_name=settings.naver_app_name,
            client_id=settings.naver_client_id,
            client_secret=settings.naver_client_secret,
            url_scheme=settings.naver_url_scheme,
        )
        logger.info(
            "Provider SDKs initialized",
            extra={
                "naver_app_name": settings.naver_app_name,
                "naver_client_id": settings.naver_client_id,
                "naver_client_secret": settings.masked_naver_client_secret,
                "naver_url_scheme": settings.naver_url_scheme,
            },
        )

    async def close(self) -> None:
        """리소스 정리."""
        if self._publisher:
            self._publisher.stop()
        if self._dispatcher:
            await self._dispatcher.wait_idle()
        if self._http_client and self._owns_http_client:
            await self._http_client.aclose()

    @property
    def auth_service(self) -> AuthService:
        """Auth Facade."""
        if self._auth_service is None:
            raise RuntimeError("Container not initialized")
        return self._auth_service

    @property
    def url_router(self) -> OpenURLRouter:
        """Open URL 라우터."""
        if self._url_router is None:
            raise RuntimeError("Container not initialized")
        return self._url_router

    @property
    def auth_client(self) -> FirebaseAuthClient:
        """백엔드 세션 클라이언트."""
        if self._auth_client is None:
            raise RuntimeError("Container not initialized")
        return self._auth_client

    @property
    def dispatcher(self) -> EventLoopDispatcher:
        if self._dispatcher is None:
            raise RuntimeError("Container not initialized")
        return self._dispatcher
