"""
General 엔드포인트 파사드

연결 확인, 서버 시간, 거래소 정보, 심볼 조회.
spot / USD-M / COIN-M 공통 (경로 prefix만 다름).
"""

from typing import Any

from adapters.binance.errors import SchemaMismatchError, UnknownSymbolError
from adapters.binance.models import (
    CoinFutureExchangeInformation,
    ExchangeInformation,
    FuturesExchangeInformation,
    ServerTime,
)
from adapters.binance.rest_client import BinanceHttpClient
from core.types import ApiFamily, HttpMethod


API_PREFIX: dict[ApiFamily, str] = {
    ApiFamily.SPOT: "/api/v3",
    ApiFamily.USD_M_FUTURES: "/fapi/v1",
    ApiFamily.COIN_M_FUTURES: "/dapi/v1",
}

EXCHANGE_INFO_MODEL: dict[ApiFamily, type] = {
    ApiFamily.SPOT: ExchangeInformation,
    ApiFamily.USD_M_FUTURES: FuturesExchangeInformation,
    ApiFamily.COIN_M_FUTURES: CoinFutureExchangeInformation,
}

PONG = "pong"


class GeneralService:
    """General 엔드포인트

    Args:
        client: 해당 계열 호스트의 BinanceHttpClient
        family: API 계열
    """

    def __init__(self, client: BinanceHttpClient, family: ApiFamily = ApiFamily.SPOT):
        self.client = client
        self.family = family
        self.prefix = API_PREFIX[family]

    async def ping(self) -> str:
        """연결 확인

        정상 응답은 빈 객체 {}. 그 외 본문은 SchemaMismatchError (원본 포함).
        """
        data, text = await self.client.request(HttpMethod.GET, f"{self.prefix}/ping", raw=True)
        if isinstance(data, dict) and not data:
            return PONG
        raise SchemaMismatchError(body=text, detail="ping expects an empty object")

    async def get_server_time(self) -> ServerTime:
        """서버 시간 조회"""
        return await self.client.get(f"{self.prefix}/time", response_model=ServerTime)

    async def exchange_info(self) -> Any:
        """거래소 정보 조회 (거래 규칙 및 심볼 정보)

        Returns:
            계열별 ExchangeInformation 모델
        """
        return await self.client.get(
            f"{self.prefix}/exchangeInfo",
            response_model=EXCHANGE_INFO_MODEL[self.family],
        )

    async def get_symbol_info(self, symbol: str) -> Any:
        """심볼 정보 조회

        대소문자 무관 (대문자로 변환하여 비교).

        Raises:
            UnknownSymbolError: 목록에 없는 심볼 (원래 입력 문자열 포함)
        """
        upper_symbol = symbol.upper()
        info = await self.exchange_info()

        for item in info.symbols:
            if item.symbol == upper_symbol:
                return item

        raise UnknownSymbolError(symbol)
