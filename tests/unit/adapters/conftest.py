"""
어댑터 테스트 픽스처

공통 테스트 설정 및 픽스처 제공.
"""

import json
from typing import Any, Callable
from unittest.mock import AsyncMock, MagicMock

import pytest

from adapters.binance.rest_client import BinanceHttpClient
from core.config.loader import Credentials, EndpointConfig


FIXED_TIMESTAMP = 1499827319559


# -------------------------------------------------------------------------
# 클라이언트 픽스처
# -------------------------------------------------------------------------

@pytest.fixture
def credentials() -> Credentials:
    """API 키 + 시크릿"""
    return Credentials(api_key="test_api_key", api_secret="test_secret_key")


@pytest.fixture
def endpoint() -> EndpointConfig:
    """spot 엔드포인트 설정"""
    return EndpointConfig(base_url="https://api.binance.com", timeout=5.0, recv_window=5000)


@pytest.fixture
def client(endpoint: EndpointConfig, credentials: Credentials) -> BinanceHttpClient:
    """타임스탬프가 고정된 클라이언트"""
    return BinanceHttpClient(endpoint, credentials, clock=lambda: FIXED_TIMESTAMP)


@pytest.fixture
def public_client(endpoint: EndpointConfig) -> BinanceHttpClient:
    """자격 증명 없는 클라이언트"""
    return BinanceHttpClient(endpoint, clock=lambda: FIXED_TIMESTAMP)


@pytest.fixture
def make_response() -> Callable[..., MagicMock]:
    """httpx.Response 모킹 팩토리

    body가 str이면 그대로, 아니면 JSON 직렬화하여 text로 설정.
    """

    def _make(status_code: int = 200, body: Any = None, headers: dict | None = None) -> MagicMock:
        response = MagicMock()
        response.status_code = status_code
        response.text = body if isinstance(body, str) else json.dumps(body)
        response.headers = headers or {}
        return response

    return _make


@pytest.fixture
def mock_http() -> Callable[[BinanceHttpClient, Any], AsyncMock]:
    """client._get_client()를 AsyncMock httpx 클라이언트로 대체

    반환된 AsyncMock의 request.call_args로 전송 내용 검증.
    """

    def _install(target: BinanceHttpClient, response: Any) -> AsyncMock:
        http_client = AsyncMock()
        if isinstance(response, BaseException):
            http_client.request.side_effect = response
        else:
            http_client.request.return_value = response
        target._get_client = AsyncMock(return_value=http_client)
        return http_client

    return _install


# -------------------------------------------------------------------------
# Binance 응답 픽스처
# -------------------------------------------------------------------------

@pytest.fixture
def spot_exchange_info_response() -> dict:
    """GET /api/v3/exchangeInfo 응답 (축약)"""
    return {
        "timezone": "UTC",
        "serverTime": 1565246363776,
        "rateLimits": [
            {
                "rateLimitType": "REQUEST_WEIGHT",
                "interval": "MINUTE",
                "intervalNum": 1,
                "limit": 6000,
            }
        ],
        "exchangeFilters": [],
        "symbols": [
            {
                "symbol": "ETHBTC",
                "status": "TRADING",
                "baseAsset": "ETH",
                "baseAssetPrecision": 8,
                "quoteAsset": "BTC",
                "quotePrecision": 8,
                "orderTypes": ["LIMIT", "MARKET"],
                "icebergAllowed": True,
                "isSpotTradingAllowed": True,
                "isMarginTradingAllowed": True,
                "filters": [
                    {"filterType": "PRICE_FILTER", "minPrice": "0.00000100", "maxPrice": "100000.00000000", "tickSize": "0.00000100"}
                ],
            },
            {
                "symbol": "BTCUSDT",
                "status": "TRADING",
                "baseAsset": "BTC",
                "baseAssetPrecision": 8,
                "quoteAsset": "USDT",
                "quotePrecision": 8,
                "orderTypes": ["LIMIT", "MARKET"],
                "icebergAllowed": True,
                "isSpotTradingAllowed": True,
                "isMarginTradingAllowed": True,
                "filters": [],
            },
        ],
    }


@pytest.fixture
def coin_futures_exchange_info_response() -> dict:
    """GET /dapi/v1/exchangeInfo 응답 (축약)"""
    return {
        "timezone": "UTC",
        "serverTime": 1597824000000,
        "rateLimits": [],
        "exchangeFilters": [],
        "symbols": [
            {
                "symbol": "BTCUSD_PERP",
                "pair": "BTCUSD",
                "contractType": "PERPETUAL",
                "deliveryDate": 4133404800000,
                "onboardDate": 1597042800000,
                "contractStatus": "TRADING",
                "contractSize": 100,
                "marginAsset": "BTC",
                "baseAsset": "BTC",
                "quoteAsset": "USD",
                "pricePrecision": 1,
                "quantityPrecision": 0,
                "orderTypes": ["LIMIT", "MARKET"],
                "timeInForce": ["GTC", "IOC"],
                "filters": [],
            }
        ],
    }


@pytest.fixture
def spot_order_response() -> dict:
    """POST /api/v3/order 응답 (RESULT)"""
    return {
        "symbol": "BTCUSDT",
        "orderId": 28,
        "orderListId": -1,
        "clientOrderId": "ae-test-order-001",
        "transactTime": 1507725176595,
        "price": "0.00000000",
        "origQty": "10.00000000",
        "executedQty": "10.00000000",
        "cummulativeQuoteQty": "10.00000000",
        "status": "FILLED",
        "timeInForce": "GTC",
        "type": "MARKET",
        "side": "SELL",
    }
