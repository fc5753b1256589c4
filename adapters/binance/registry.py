"""
클라이언트 팩토리 및 서비스 레지스트리

API 계열마다 호스트가 다르므로 계열별 BinanceHttpClient를 하나씩 만들고,
서비스 이름 + 계열로 파사드를 생성한다.
어떤 계열을 쓸 수 있는지는 ClientConfig.capabilities로 결정.

사용 예시:
```python
factory = BinanceClientFactory.from_env(ClientConfig.testnet())
general = factory.create("general", ApiFamily.USD_M_FUTURES)
await general.ping()
await factory.close()
```
"""

import logging
from dataclasses import dataclass
from typing import Any

from adapters.binance.errors import ConfigurationError
from adapters.binance.rest_client import BinanceHttpClient
from adapters.binance.services import (
    AccountService,
    GeneralService,
    MarketService,
    UserStreamService,
)
from core.config.loader import ClientConfig, Credentials, Settings
from core.types import ApiFamily

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ServiceSpec:
    """서비스 등록 정보

    Attributes:
        service_cls: 파사드 클래스 (client, family) 생성자
        families: 지원 API 계열
    """

    service_cls: type
    families: frozenset[ApiFamily]


SERVICE_REGISTRY: dict[str, ServiceSpec] = {
    "general": ServiceSpec(GeneralService, frozenset(ApiFamily)),
    "market": ServiceSpec(
        MarketService,
        frozenset({ApiFamily.SPOT, ApiFamily.USD_M_FUTURES}),
    ),
    "account": ServiceSpec(AccountService, frozenset({ApiFamily.SPOT})),
    "user_stream": ServiceSpec(UserStreamService, frozenset(ApiFamily)),
}


class BinanceClientFactory:
    """계열별 클라이언트 및 파사드 생성

    Args:
        config: 클라이언트 설정
        credentials: API 자격 증명 (None이면 공개 엔드포인트만)
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        credentials: Credentials | None = None,
    ):
        self.config = config or ClientConfig()
        self._credentials = credentials or Credentials()
        self._clients: dict[ApiFamily, BinanceHttpClient] = {}

    @classmethod
    def from_env(cls, config: ClientConfig | None = None) -> "BinanceClientFactory":
        """환경 변수(BINANCE_API_KEY, BINANCE_API_SECRET_KEY) 자격 증명 사용"""
        return cls(config, Credentials.from_env())

    @classmethod
    def from_settings(cls, settings: Settings) -> "BinanceClientFactory":
        return cls(settings.config, settings.credentials)

    def http_client(self, family: ApiFamily) -> BinanceHttpClient:
        """계열별 BinanceHttpClient (계열당 하나, 재사용)

        Raises:
            ConfigurationError: capabilities에 없는 계열
        """
        family = ApiFamily(family)
        if not self.config.is_enabled(family):
            raise ConfigurationError(f"API family '{family.value}' is not enabled")

        client = self._clients.get(family)
        if client is None:
            client = BinanceHttpClient(self.config.endpoint_for(family), self._credentials)
            self._clients[family] = client
            logger.debug(
                "Binance client created",
                extra={"family": family.value, "base_url": client.base_url},
            )
        return client

    def create(self, service: str, family: ApiFamily = ApiFamily.SPOT) -> Any:
        """파사드 생성

        Args:
            service: SERVICE_REGISTRY 키 (general, market, account, user_stream)
            family: API 계열

        Raises:
            KeyError: 등록되지 않은 서비스 이름
            ConfigurationError: 계열 비활성화 또는 해당 계열 미지원 서비스
        """
        spec = SERVICE_REGISTRY[service]
        family = ApiFamily(family)

        if family not in spec.families:
            raise ConfigurationError(
                f"Service '{service}' is not available for API family '{family.value}'"
            )

        return spec.service_cls(self.http_client(family), family)

    async def close(self) -> None:
        """생성한 모든 HTTP 클라이언트 종료"""
        for client in self._clients.values():
            await client.close()
        self._clients.clear()

    async def __aenter__(self) -> "BinanceClientFactory":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()
