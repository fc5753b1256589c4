"""
Binance REST API 클라이언트

요청 구성(인코딩, HMAC-SHA256 서명), httpx 전송, 응답 분류를 담당.
엔드포인트 파사드는 get / get_signed / post_signed 등 동사 메서드만 사용.

재시도, 백오프, Rate Limit 조절은 하지 않는다 (호출자 책임).
"""

import asyncio
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import httpx

from adapters.binance.encoder import Params, build_query_string
from adapters.binance.errors import (
    ConfigurationError,
    TransportError,
    TransportTimeoutError,
)
from adapters.binance.response import classify_response
from adapters.binance.signer import RequestSigner
from core.config.loader import Credentials, EndpointConfig
from core.constants import ApiHeaders
from core.types import HttpMethod, SecurityType

logger = logging.getLogger(__name__)


def current_timestamp_ms() -> int:
    """현재 시각 (밀리초)"""
    return int(time.time() * 1000)


@dataclass(frozen=True)
class PreparedRequest:
    """전송 직전 요청

    query는 URL 쿼리스트링(GET/DELETE) 또는 form body(POST/PUT)로
    그대로 전송되는 정규 문자열.
    """

    method: HttpMethod
    url: str
    query: str
    headers: dict[str, str] = field(default_factory=dict, repr=False)

    @property
    def full_url(self) -> str:
        if self.method.uses_body or not self.query:
            return self.url
        return f"{self.url}?{self.query}"

    @property
    def body(self) -> str | None:
        if self.method.uses_body and self.query:
            return self.query
        return None


class BinanceHttpClient:
    """Binance REST API 공통 클라이언트

    API 계열(spot / USD-M / COIN-M) 하나의 호스트에 대응.
    설정과 자격 증명은 불변이며, 동시 호출 간 공유 상태는
    지연 생성되는 httpx.AsyncClient 뿐이다.

    Args:
        endpoint: 베이스 URL, 타임아웃, recvWindow
        credentials: API 키/시크릿 (None이면 공개 엔드포인트만 사용 가능)
        clock: 밀리초 타임스탬프 함수 (테스트에서 고정값 주입용)
    """

    def __init__(
        self,
        endpoint: EndpointConfig,
        credentials: Credentials | None = None,
        clock: Callable[[], int] | None = None,
    ):
        self.endpoint = endpoint
        self.base_url = endpoint.base_url.rstrip("/")
        self.timeout = endpoint.timeout
        self.recv_window = endpoint.recv_window
        self._credentials = credentials or Credentials()
        self._clock = clock or current_timestamp_ms
        self._client: httpx.AsyncClient | None = None

    def __repr__(self) -> str:
        return f"BinanceHttpClient(base_url={self.base_url!r})"

    async def _get_client(self) -> httpx.AsyncClient:
        """HTTP 클라이언트 가져오기 (lazy initialization)"""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    async def close(self) -> None:
        """HTTP 클라이언트 종료"""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    async def __aenter__(self) -> "BinanceHttpClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    # -------------------------------------------------------------------------
    # 요청 구성
    # -------------------------------------------------------------------------

    def _check_credentials(self, security: SecurityType, path: str) -> None:
        if security.requires_api_key and not self._credentials.has_api_key:
            raise ConfigurationError(f"API key required for {path}")
        if security == SecurityType.SIGNED and not self._credentials.has_secret:
            raise ConfigurationError(f"Secret key required for signed endpoint {path}")

    def prepare_request(
        self,
        method: HttpMethod | str,
        path: str,
        params: Params | None = None,
        security: SecurityType | str = SecurityType.NONE,
    ) -> PreparedRequest:
        """요청 구성 (네트워크 I/O 없음)

        서명 요청은 timestamp/recvWindow를 추가한 파라미터 집합으로
        정규 문자열을 한 번 만들고, 그 문자열에 서명한 결과를 그대로 전송.

        Raises:
            ConfigurationError: 필요한 API 키/시크릿이 없는 경우
        """
        method = HttpMethod(method)
        security = SecurityType(security)
        self._check_credentials(security, path)

        if security == SecurityType.SIGNED:
            signer = RequestSigner(self._credentials.api_secret, self.recv_window)
            query = signer.sign(params, timestamp=self._clock()).query
        else:
            query = build_query_string(params)

        headers: dict[str, str] = {}
        if security.requires_api_key:
            headers[ApiHeaders.API_KEY] = self._credentials.api_key
        if method.uses_body and query:
            headers["Content-Type"] = ApiHeaders.FORM_CONTENT_TYPE

        return PreparedRequest(
            method=method,
            url=f"{self.base_url}{path}",
            query=query,
            headers=headers,
        )

    # -------------------------------------------------------------------------
    # 전송
    # -------------------------------------------------------------------------

    async def _send(self, prepared: PreparedRequest) -> httpx.Response:
        """요청 전송

        연결 + 응답 전체를 timeout으로 제한.

        Raises:
            TransportTimeoutError: 타임아웃
            TransportError: 연결/DNS 등 네트워크 에러
        """
        client = await self._get_client()
        body = prepared.body

        try:
            return await asyncio.wait_for(
                client.request(
                    prepared.method.value,
                    prepared.full_url,
                    content=body.encode("utf-8") if body is not None else None,
                    headers=prepared.headers,
                ),
                timeout=self.timeout,
            )
        except (httpx.TimeoutException, asyncio.TimeoutError) as e:
            raise TransportTimeoutError(
                f"Request timed out after {self.timeout}s: {prepared.method.value} {prepared.url}",
                cause=e,
            ) from e
        except httpx.RequestError as e:
            raise TransportError(
                f"Request failed: {prepared.method.value} {prepared.url}: {e}",
                cause=e,
            ) from e

    async def request(
        self,
        method: HttpMethod | str,
        path: str,
        params: Params | None = None,
        security: SecurityType | str = SecurityType.NONE,
        response_model: Any = None,
        raw: bool = False,
    ) -> Any:
        """API 요청 실행

        Args:
            method: HTTP 메서드 (GET, POST, PUT, DELETE)
            path: API 경로 (예: /api/v3/order)
            params: 요청 파라미터 (순서 유지)
            security: 인증 수준
            response_model: 성공 응답 타입 (None이면 JSON 그대로)
            raw: True면 (역직렬화 값, 응답 본문 원문) 튜플 반환

        Returns:
            역직렬화된 응답

        Raises:
            ConfigurationError: 자격 증명 누락 (전송 전)
            TransportError: 네트워크/타임아웃
            BinanceApiError: {code, msg} 에러 응답
            UnparseableResponseError: 실패 상태 + 해석 불가 본문
            SchemaMismatchError: 성공 상태 + 스키마 불일치
        """
        security = SecurityType(security)
        prepared = self.prepare_request(method, path, params, security)

        logger.debug(
            "Binance request",
            extra={
                "method": prepared.method.value,
                "path": path,
                "security": security.value,
            },
        )

        response = await self._send(prepared)

        data = classify_response(
            response.status_code,
            response.text,
            response_model=response_model,
            headers=response.headers,
        )
        if raw:
            return data, response.text
        return data

    # -------------------------------------------------------------------------
    # 동사 메서드 (파사드용)
    # -------------------------------------------------------------------------

    async def get(self, path: str, params: Params | None = None, response_model: Any = None) -> Any:
        """공개 GET"""
        return await self.request(HttpMethod.GET, path, params, SecurityType.NONE, response_model)

    async def get_with_key(self, path: str, params: Params | None = None, response_model: Any = None) -> Any:
        """API 키 헤더 GET (서명 없음)"""
        return await self.request(HttpMethod.GET, path, params, SecurityType.API_KEY, response_model)

    async def get_signed(self, path: str, params: Params | None = None, response_model: Any = None) -> Any:
        """서명 GET"""
        return await self.request(HttpMethod.GET, path, params, SecurityType.SIGNED, response_model)

    async def post(self, path: str, params: Params | None = None, response_model: Any = None) -> Any:
        """공개 POST"""
        return await self.request(HttpMethod.POST, path, params, SecurityType.NONE, response_model)

    async def post_with_key(self, path: str, params: Params | None = None, response_model: Any = None) -> Any:
        """API 키 헤더 POST (예: listenKey 생성)"""
        return await self.request(HttpMethod.POST, path, params, SecurityType.API_KEY, response_model)

    async def post_signed(self, path: str, params: Params | None = None, response_model: Any = None) -> Any:
        """서명 POST"""
        return await self.request(HttpMethod.POST, path, params, SecurityType.SIGNED, response_model)

    async def put_with_key(self, path: str, params: Params | None = None, response_model: Any = None) -> Any:
        """API 키 헤더 PUT (예: listenKey 연장)"""
        return await self.request(HttpMethod.PUT, path, params, SecurityType.API_KEY, response_model)

    async def put_signed(self, path: str, params: Params | None = None, response_model: Any = None) -> Any:
        """서명 PUT"""
        return await self.request(HttpMethod.PUT, path, params, SecurityType.SIGNED, response_model)

    async def delete_with_key(self, path: str, params: Params | None = None, response_model: Any = None) -> Any:
        """API 키 헤더 DELETE (예: listenKey 삭제)"""
        return await self.request(HttpMethod.DELETE, path, params, SecurityType.API_KEY, response_model)

    async def delete_signed(self, path: str, params: Params | None = None, response_model: Any = None) -> Any:
        """서명 DELETE"""
        return await self.request(HttpMethod.DELETE, path, params, SecurityType.SIGNED, response_model)
