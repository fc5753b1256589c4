"""
Spot 계좌/주문 엔드포인트 파사드

모든 호출은 서명 요청 (API 키 + 시크릿 필요).
"""

import logging
from decimal import Decimal

from adapters.binance.errors import BinanceApiError, OrderError
from adapters.binance.models import AccountInformation, Balance, Order, OrderRequest
from adapters.binance.rest_client import BinanceHttpClient
from core.types import ApiFamily

logger = logging.getLogger(__name__)


class AccountService:
    """Spot 계좌 조회 및 주문

    Args:
        client: spot 호스트의 BinanceHttpClient
        family: API 계열 (SPOT만 지원)
    """

    def __init__(self, client: BinanceHttpClient, family: ApiFamily = ApiFamily.SPOT):
        if family != ApiFamily.SPOT:
            raise ValueError("AccountService supports the spot API only")
        self.client = client
        self.family = family

    # -------------------------------------------------------------------------
    # 계좌 조회
    # -------------------------------------------------------------------------

    async def get_account(self) -> AccountInformation:
        """계좌 정보 조회"""
        return await self.client.get_signed("/api/v3/account", response_model=AccountInformation)

    async def get_balance(self, asset: str) -> Balance:
        """특정 자산 잔고 조회

        계좌에 없는 자산은 0 잔고로 반환.
        """
        asset = asset.upper()
        account = await self.get_account()

        for balance in account.balances:
            if balance.asset == asset:
                return balance

        return Balance(asset=asset, free=Decimal("0"), locked=Decimal("0"))

    async def get_open_orders(self, symbol: str | None = None) -> list[Order]:
        """오픈 주문 목록 조회"""
        params = {"symbol": symbol.upper()} if symbol else None
        return await self.client.get_signed(
            "/api/v3/openOrders",
            params=params,
            response_model=list[Order],
        )

    # -------------------------------------------------------------------------
    # 주문 실행
    # -------------------------------------------------------------------------

    async def place_order(self, request: OrderRequest) -> Order:
        """주문 생성"""
        params = request.to_params()

        try:
            order = await self.client.post_signed("/api/v3/order", params=params, response_model=Order)
        except BinanceApiError as e:
            logger.error(
                "주문 생성 실패",
                extra={
                    "error_code": e.code,
                    "error_message": e.message,
                    "symbol": request.symbol,
                    "client_order_id": request.client_order_id,
                },
            )
            raise OrderError.from_api_error(e) from e

        logger.info(
            "주문 생성 완료",
            extra={
                "order_id": order.order_id,
                "client_order_id": order.client_order_id,
                "symbol": order.symbol,
                "side": request.side.value,
                "type": request.order_type.value,
            },
        )
        return order

    async def test_order(self, request: OrderRequest) -> None:
        """주문 검증 (실제 주문 없음, 정상 응답은 {})"""
        try:
            await self.client.post_signed("/api/v3/order/test", params=request.to_params())
        except BinanceApiError as e:
            raise OrderError.from_api_error(e) from e

    async def cancel_order(
        self,
        symbol: str,
        order_id: int | None = None,
        client_order_id: str | None = None,
    ) -> Order:
        """주문 취소"""
        params: list[tuple[str, object]] = [("symbol", symbol.upper())]

        if order_id is not None:
            params.append(("orderId", order_id))
        elif client_order_id:
            params.append(("origClientOrderId", client_order_id))
        else:
            raise ValueError("order_id or client_order_id required")

        try:
            order = await self.client.delete_signed("/api/v3/order", params=params, response_model=Order)
        except BinanceApiError as e:
            logger.error(
                "주문 취소 실패",
                extra={
                    "error_code": e.code,
                    "error_message": e.message,
                    "symbol": symbol,
                    "order_id": order_id,
                    "client_order_id": client_order_id,
                },
            )
            raise OrderError.from_api_error(e) from e

        logger.info(
            "주문 취소 완료",
            extra={"order_id": order.order_id, "symbol": order.symbol},
        )
        return order
