"""
Binance 어댑터

Binance REST API (spot / USD-M 선물 / COIN-M 선물) 연동.
요청 인코딩, HMAC-SHA256 서명, 전송, 응답 분류를 담당.
"""

from adapters.binance.errors import (
    BinanceApiError,
    BinanceError,
    ConfigurationError,
    OrderError,
    SchemaMismatchError,
    TransportError,
    TransportTimeoutError,
    UnknownSymbolError,
    UnparseableResponseError,
)
from adapters.binance.registry import BinanceClientFactory, SERVICE_REGISTRY
from adapters.binance.rest_client import BinanceHttpClient, PreparedRequest

__all__ = [
    "BinanceHttpClient",
    "BinanceClientFactory",
    "PreparedRequest",
    "SERVICE_REGISTRY",
    # Errors
    "BinanceError",
    "ConfigurationError",
    "TransportError",
    "TransportTimeoutError",
    "BinanceApiError",
    "OrderError",
    "UnparseableResponseError",
    "SchemaMismatchError",
    "UnknownSymbolError",
]
