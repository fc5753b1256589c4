"""
Binance 모델 테스트
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from adapters.binance.models import (
    Balance,
    ListenKey,
    Order,
    OrderRequest,
    RateLimit,
    ServerTime,
)
from core.types import OrderSide, OrderStatus, OrderType, TimeInForce


class TestResponseModels:
    def test_alias_and_field_name(self) -> None:
        """camelCase alias와 snake_case 이름 모두 허용"""
        assert ServerTime.model_validate({"serverTime": 1}).server_time == 1
        assert ServerTime(server_time=2).server_time == 2

    def test_dump_by_alias(self) -> None:
        limit = RateLimit.model_validate(
            {"rateLimitType": "ORDERS", "interval": "SECOND", "intervalNum": 10, "limit": 50}
        )

        assert limit.model_dump(by_alias=True) == {
            "rateLimitType": "ORDERS",
            "interval": "SECOND",
            "intervalNum": 10,
            "limit": 50,
        }

    def test_frozen(self) -> None:
        key = ListenKey(listen_key="abc")

        with pytest.raises(ValidationError):
            key.listen_key = "def"  # type: ignore

    def test_decimal_fields(self) -> None:
        balance = Balance.model_validate({"asset": "BTC", "free": "0.1", "locked": "0.2"})

        assert balance.total == Decimal("0.3")

    def test_order_ack_response(self) -> None:
        """ACK 응답은 필드가 적음"""
        order = Order.model_validate(
            {"symbol": "BTCUSDT", "orderId": 28, "orderListId": -1, "clientOrderId": "x", "transactTime": 1}
        )

        assert order.order_id == 28
        assert order.status is None

    def test_order_status_enum(self) -> None:
        order = Order.model_validate({"symbol": "BTCUSDT", "orderId": 28, "status": "PARTIALLY_FILLED"})

        assert order.status is OrderStatus.PARTIALLY_FILLED

    def test_order_status_unknown_value(self) -> None:
        with pytest.raises(ValidationError):
            Order.model_validate({"symbol": "BTCUSDT", "orderId": 28, "status": "SOMETHING"})


class TestOrderRequest:
    """OrderRequest 테스트"""

    def test_market(self) -> None:
        request = OrderRequest.market(symbol="BTCUSDT", side="BUY", quantity=Decimal("0.5"))

        assert request.side == OrderSide.BUY
        assert request.order_type == OrderType.MARKET
        assert request.time_in_force is None

    def test_limit_defaults_gtc(self) -> None:
        request = OrderRequest.limit(
            symbol="BTCUSDT", side=OrderSide.SELL, quantity=Decimal("1"), price=Decimal("70000")
        )

        assert request.time_in_force == TimeInForce.GTC

    def test_to_params_order(self) -> None:
        request = OrderRequest.limit(
            symbol="BTCUSDT",
            side="SELL",
            quantity=Decimal("1"),
            price=Decimal("70000"),
            client_order_id="cid-1",
        )

        keys = [key for key, value in request.to_params() if value is not None]

        assert keys == ["symbol", "side", "type", "timeInForce", "quantity", "price", "newClientOrderId"]

    def test_invalid_side(self) -> None:
        with pytest.raises(ValueError):
            OrderRequest.market(symbol="BTCUSDT", side="HOLD", quantity=Decimal("1"))
