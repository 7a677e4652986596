"""CallableFunctionsGateway Port.

백엔드 callable 엔드포인트(Cloud Functions) 호출 인터페이스입니다.
"""

from typing import Any, Protocol


class CallableFunctionsGateway(Protocol):
    """Callable 함수 Gateway 인터페이스.

    구현체:
        - FirebaseFunctionsClient (infrastructure/firebase/)
    """

    async def call(self, name: str, data: dict[str, Any]) -> Any:
        """callable 함수를 호출하고 응답 envelope의 result를 반환합니다.

        Args:
            name: 함수 이름 (예: socialLogin)
            data: 요청 파라미터

        Returns:
            구조 검증 전의 result 값

        Raises:
            NetworkError: 전송 실패 또는 함수 에러 응답
            InvalidResponseError: 응답 본문이 callable envelope이 아님
        """
        ...
