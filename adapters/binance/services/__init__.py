"""
Binance 엔드포인트 파사드

요청/응답 형태만 정의하고 BinanceHttpClient 동사 메서드를 호출.
"""

from adapters.binance.services.account import AccountService
from adapters.binance.services.general import GeneralService
from adapters.binance.services.market import MarketService
from adapters.binance.services.user_stream import UserStreamService

__all__ = [
    "AccountService",
    "GeneralService",
    "MarketService",
    "UserStreamService",
]
