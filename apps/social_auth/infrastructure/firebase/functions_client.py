"""Firebase Callable Functions Client.

CallableFunctionsGateway 포트의 구현체입니다.

Callable 프로토콜:
    요청: POST {"data": {...}}
    성공: 200 {"result": ...}
    실패: 4xx/5xx {"error": {"status": "...", "message": "..."}}
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

import httpx

from apps.social_auth.application.common.exceptions import InvalidResponseError, NetworkError

logger = logging.getLogger(__name__)

FUNCTIONS_URL_TEMPLATE = "https://{region}-{project_id}.cloudfunctions.net/{name}"
EMULATOR_URL_TEMPLATE = "http://{host}/{project_id}/{region}/{name}"


class FirebaseFunctionsClient:
    """Callable 함수 클라이언트.

    리전은 서버 배포 리전과 같아야 합니다. 다르면 호출이 불투명한
    전송 실패로 나타납니다.
    """

    def __init__(
        self,
        *,
        client: httpx.AsyncClient,
        project_id: str,
        region: str,
        emulator_host: str | None = None,
        id_token_provider: Optional[Callable[[], Optional[str]]] = None,
    ) -> None:
        """
        Args:
            client: 공유 HTTP 클라이언트 (타임아웃은 설정에서 주입)
            project_id: Firebase 프로젝트 ID
            region: 함수 배포 리전 (예: asia-northeast3)
            emulator_host: 로컬 에뮬레이터 host:port (선택)
            id_token_provider: 로그인 상태면 ID 토큰을 돌려주는 함수 (선택)
        """
        self._client = client
        self._project_id = project_id
        self._region = region
        self._emulator_host = emulator_host
        self._id_token_provider = id_token_provider

    def url_for(self, name: str) -> str:
        """함수 URL."""
        if self._emulator_host:
            return EMULATOR_URL_TEMPLATE.format(
                host=self._emulator_host,
                project_id=self._project_id,
                region=self._region,
                name=name,
            )
        return FUNCTIONS_URL_TEMPLATE.format(
            region=self._region,
            project_id=self._project_id,
            name=name,
        )

    async def call(self, name: str, data: dict[str, Any]) -> Any:
        """callable 함수 호출."""
        url = self.url_for(name)
        headers = {}
        id_token = self._id_token_provider() if self._id_token_provider else None
        if id_token:
            headers["Authorization"] = f"Bearer {id_token}"

        try:
            response = await self._client.post(url, json={"data": data}, headers=headers)
        except httpx.HTTPError as e:
            logger.warning(
                "Callable request failed",
                extra={"function": name, "region": self._region, "error": repr(e)},
            )
            raise NetworkError(f"{name} request failed: {e!r}") from e

        body = _json_or_none(response)

        if response.is_error:
            status, message = _callable_error(body)
            logger.warning(
                "Callable function returned error",
                extra={
                    "function": name,
                    "status_code": response.status_code,
                    "status": status,
                    "error": message,
                },
            )
            raise NetworkError(
                f"{name} failed with HTTP {response.status_code} ({status}): {message}",
                status=status,
            )

        if not isinstance(body, dict):
            raise InvalidResponseError(f"{name} response body is not a JSON object")
        # 구버전 SDK 호환: result 대신 data
        for key in ("result", "data"):
            if key in body:
                return body[key]
        raise InvalidResponseError(f"{name} response has no result field")


def _json_or_none(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


def _callable_error(body: Any) -> tuple[str, str]:
    error = body.get("error") if isinstance(body, dict) else None
    if not isinstance(error, dict):
        return "UNKNOWN", "no error details"
    return str(error.get("status", "UNKNOWN")), str(error.get("message", ""))
