"""Credential Acquirer Registry."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from apps.social_auth.application.common.exceptions import UnsupportedProviderError
from apps.social_auth.domain.enums import SocialProvider

if TYPE_CHECKING:
    from apps.social_auth.application.acquisition.services.base import (
        ProviderCredentialAcquirer,
    )


class AcquirerRegistry:
    """프로바이더별 Acquirer 레지스트리.

    프로바이더 집합은 고정되어 있으므로 조립 시점에 한 번 구성합니다.
    """

    def __init__(self, acquirers: Iterable["ProviderCredentialAcquirer"]) -> None:
        self._acquirers: dict[SocialProvider, ProviderCredentialAcquirer] = {
            acquirer.provider: acquirer for acquirer in acquirers
        }

    def get(self, provider: SocialProvider | str) -> "ProviderCredentialAcquirer":
        """Acquirer 조회.

        Raises:
            UnsupportedProviderError: 연결된 Acquirer가 없는 프로바이더
        """
        try:
            key = (
                provider
                if isinstance(provider, SocialProvider)
                else SocialProvider.from_string(provider)
            )
        except ValueError as e:
            raise UnsupportedProviderError(str(e)) from e

        if key not in self._acquirers:
            available = ", ".join(p.value for p in self._acquirers)
            raise UnsupportedProviderError(
                f"Unsupported provider: {key.value}. Available: {available}"
            )
        return self._acquirers[key]

    @property
    def available_providers(self) -> list[SocialProvider]:
        """사용 가능한 프로바이더 목록."""
        return list(self._acquirers.keys())
