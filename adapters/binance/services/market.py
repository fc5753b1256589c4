"""
시장 데이터 엔드포인트 파사드 (spot / USD-M)
"""

from adapters.binance.models import OrderBook, SymbolPrice
from adapters.binance.rest_client import BinanceHttpClient
from adapters.binance.services.general import API_PREFIX
from core.types import ApiFamily


# Binance 허용 depth limit 값
DEPTH_LIMITS = (5, 10, 20, 50, 100, 500, 1000, 5000)


class MarketService:
    """시장 데이터 조회

    Args:
        client: 해당 계열 호스트의 BinanceHttpClient
        family: API 계열 (SPOT 또는 USD_M_FUTURES)
    """

    def __init__(self, client: BinanceHttpClient, family: ApiFamily = ApiFamily.SPOT):
        self.client = client
        self.family = family
        self.prefix = API_PREFIX[family]

    async def get_price(self, symbol: str) -> SymbolPrice:
        """현재가 조회

        Args:
            symbol: 거래 심볼 (예: BTCUSDT)
        """
        return await self.client.get(
            f"{self.prefix}/ticker/price",
            params={"symbol": symbol.upper()},
            response_model=SymbolPrice,
        )

    async def get_all_prices(self) -> list[SymbolPrice]:
        """전체 심볼 현재가 조회"""
        return await self.client.get(
            f"{self.prefix}/ticker/price",
            response_model=list[SymbolPrice],
        )

    async def get_depth(self, symbol: str, limit: int = 100) -> OrderBook:
        """호가창 조회

        Args:
            symbol: 거래 심볼
            limit: 호가 개수 (DEPTH_LIMITS 중 하나)
        """
        if limit not in DEPTH_LIMITS:
            raise ValueError(f"limit must be one of {DEPTH_LIMITS}")

        return await self.client.get(
            f"{self.prefix}/depth",
            params={"symbol": symbol.upper(), "limit": limit},
            response_model=OrderBook,
        )
