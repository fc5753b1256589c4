"""
Binance API 응답/요청 모델

응답 모델은 Pydantic, 필드명은 snake_case + camelCase alias.
model_dump(by_alias=True)로 원래 응답 필드명 복원 가능.
모든 금액/수량은 문자열에서 Decimal로 변환.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from core.types import OrderSide, OrderStatus, OrderType, TimeInForce


class BinanceModel(BaseModel):
    """응답 모델 공통 설정"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


# -------------------------------------------------------------------------
# General
# -------------------------------------------------------------------------

class ServerTime(BinanceModel):
    """GET /api/v3/time 응답"""

    server_time: int


class RateLimit(BinanceModel):
    rate_limit_type: str
    interval: str
    interval_num: int
    limit: int


class Symbol(BinanceModel):
    """Spot 심볼 정보 (exchangeInfo.symbols[])"""

    symbol: str
    status: str
    base_asset: str
    base_asset_precision: int
    quote_asset: str
    quote_precision: int | None = None
    order_types: list[str] = Field(default_factory=list)
    iceberg_allowed: bool = False
    is_spot_trading_allowed: bool = False
    is_margin_trading_allowed: bool = False
    filters: list[dict[str, Any]] = Field(default_factory=list)


class ExchangeInformation(BinanceModel):
    """GET /api/v3/exchangeInfo 응답"""

    timezone: str
    server_time: int
    rate_limits: list[RateLimit] = Field(default_factory=list)
    symbols: list[Symbol]


class FuturesSymbol(BinanceModel):
    """USD-M 선물 심볼 정보"""

    symbol: str
    pair: str
    contract_type: str
    status: str
    base_asset: str
    quote_asset: str
    margin_asset: str
    price_precision: int
    quantity_precision: int
    order_types: list[str] = Field(default_factory=list)
    time_in_force: list[str] = Field(default_factory=list)
    filters: list[dict[str, Any]] = Field(default_factory=list)


class FuturesExchangeInformation(BinanceModel):
    """GET /fapi/v1/exchangeInfo 응답"""

    timezone: str
    server_time: int
    rate_limits: list[RateLimit] = Field(default_factory=list)
    symbols: list[FuturesSymbol]


class CoinFutureSymbol(BinanceModel):
    """COIN-M 선물 심볼 정보

    COIN-M은 status 대신 contractStatus 사용.
    """

    symbol: str
    pair: str
    contract_type: str
    contract_status: str
    contract_size: int
    base_asset: str
    quote_asset: str
    margin_asset: str
    price_precision: int
    quantity_precision: int
    order_types: list[str] = Field(default_factory=list)
    time_in_force: list[str] = Field(default_factory=list)
    filters: list[dict[str, Any]] = Field(default_factory=list)


class CoinFutureExchangeInformation(BinanceModel):
    """GET /dapi/v1/exchangeInfo 응답"""

    timezone: str
    server_time: int
    rate_limits: list[RateLimit] = Field(default_factory=list)
    symbols: list[CoinFutureSymbol]


# -------------------------------------------------------------------------
# Market
# -------------------------------------------------------------------------

class SymbolPrice(BinanceModel):
    """GET /api/v3/ticker/price 응답 항목"""

    symbol: str
    price: Decimal


class OrderBook(BinanceModel):
    """GET /api/v3/depth 응답

    bids/asks: [가격, 수량] 목록
    """

    last_update_id: int
    bids: list[tuple[Decimal, Decimal]]
    asks: list[tuple[Decimal, Decimal]]


# -------------------------------------------------------------------------
# Account
# -------------------------------------------------------------------------

class Balance(BinanceModel):
    """Spot 자산 잔고"""

    asset: str
    free: Decimal
    locked: Decimal

    @property
    def total(self) -> Decimal:
        return self.free + self.locked


class AccountInformation(BinanceModel):
    """GET /api/v3/account 응답"""

    maker_commission: int
    taker_commission: int
    can_trade: bool
    can_withdraw: bool
    can_deposit: bool
    update_time: int | None = None
    account_type: str | None = None
    balances: list[Balance]


class Order(BinanceModel):
    """주문 응답 (POST/GET/DELETE /api/v3/order, openOrders)

    POST 응답은 ACK/RESULT/FULL 유형에 따라 필드가 달라 대부분 선택값.
    """

    symbol: str
    order_id: int
    client_order_id: str | None = None
    orig_client_order_id: str | None = None
    price: Decimal | None = None
    orig_qty: Decimal | None = None
    executed_qty: Decimal | None = None
    status: OrderStatus | None = None
    time_in_force: str | None = None
    type: str | None = None
    side: str | None = None
    stop_price: Decimal | None = None
    time: int | None = None
    transact_time: int | None = None
    update_time: int | None = None


class ListenKey(BinanceModel):
    """POST /api/v3/userDataStream 응답"""

    listen_key: str


# -------------------------------------------------------------------------
# 요청 모델
# -------------------------------------------------------------------------

@dataclass(frozen=True)
class OrderRequest:
    """주문 요청

    Attributes:
        symbol: 거래 심볼
        side: BUY / SELL
        order_type: MARKET / LIMIT 등
        quantity: 주문 수량
        price: 지정가 (LIMIT)
        time_in_force: LIMIT 주문 유효 기간
        quote_order_qty: 시장가 주문 금액 (quantity 대신)
        stop_price: 트리거 가격
        client_order_id: 클라이언트 주문 ID (newClientOrderId)
    """

    symbol: str
    side: OrderSide
    order_type: OrderType
    quantity: Decimal | None = None
    price: Decimal | None = None
    time_in_force: TimeInForce | None = None
    quote_order_qty: Decimal | None = None
    stop_price: Decimal | None = None
    client_order_id: str | None = None

    @classmethod
    def market(
        cls,
        symbol: str,
        side: OrderSide | str,
        quantity: Decimal,
        client_order_id: str | None = None,
    ) -> "OrderRequest":
        """시장가 주문"""
        return cls(
            symbol=symbol,
            side=OrderSide(side),
            order_type=OrderType.MARKET,
            quantity=quantity,
            client_order_id=client_order_id,
        )

    @classmethod
    def limit(
        cls,
        symbol: str,
        side: OrderSide | str,
        quantity: Decimal,
        price: Decimal,
        time_in_force: TimeInForce = TimeInForce.GTC,
        client_order_id: str | None = None,
    ) -> "OrderRequest":
        """지정가 주문"""
        return cls(
            symbol=symbol,
            side=OrderSide(side),
            order_type=OrderType.LIMIT,
            quantity=quantity,
            price=price,
            time_in_force=time_in_force,
            client_order_id=client_order_id,
        )

    def to_params(self) -> list[tuple[str, Any]]:
        """API 파라미터 목록 (순서 고정, None은 인코더에서 생략)"""
        return [
            ("symbol", self.symbol),
            ("side", self.side),
            ("type", self.order_type),
            ("timeInForce", self.time_in_force),
            ("quantity", self.quantity),
            ("quoteOrderQty", self.quote_order_qty),
            ("price", self.price),
            ("stopPrice", self.stop_price),
            ("newClientOrderId", self.client_order_id),
        ]
