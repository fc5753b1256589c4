"""
타입 정의 모듈

Enum 등 핵심 타입 정의
모든 Enum은 str을 상속하여 문자열 직렬화 가능
"""

from enum import Enum


class TradingMode(str, Enum):
    """거래 모드 (실거래 / 테스트넷)"""

    PRODUCTION = "production"
    TESTNET = "testnet"


class ApiFamily(str, Enum):
    """API 계열

    계열마다 REST 호스트가 다르다.
    margin / wallet / savings / user stream(spot)은 SPOT 호스트 사용.
    """

    SPOT = "spot"
    USD_M_FUTURES = "usd_m_futures"
    COIN_M_FUTURES = "coin_m_futures"


class HttpMethod(str, Enum):
    """HTTP 메서드"""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    @property
    def uses_body(self) -> bool:
        """파라미터를 form body로 전송하는지 여부"""
        return self in (HttpMethod.POST, HttpMethod.PUT)


class SecurityType(str, Enum):
    """엔드포인트 인증 수준"""

    NONE = "NONE"        # 공개 엔드포인트
    API_KEY = "API_KEY"  # API 키 헤더만 (listenKey 등)
    SIGNED = "SIGNED"    # API 키 헤더 + HMAC 서명

    @property
    def requires_api_key(self) -> bool:
        return self is not SecurityType.NONE


class OrderSide(str, Enum):
    """주문 방향"""

    BUY = "BUY"
    SELL = "SELL"


class OrderType(str, Enum):
    """주문 유형"""

    MARKET = "MARKET"
    LIMIT = "LIMIT"
    STOP_LOSS = "STOP_LOSS"
    STOP_LOSS_LIMIT = "STOP_LOSS_LIMIT"
    TAKE_PROFIT = "TAKE_PROFIT"
    TAKE_PROFIT_LIMIT = "TAKE_PROFIT_LIMIT"
    LIMIT_MAKER = "LIMIT_MAKER"


class OrderStatus(str, Enum):
    """주문 상태"""

    NEW = "NEW"
    PARTIALLY_FILLED = "PARTIALLY_FILLED"
    FILLED = "FILLED"
    CANCELED = "CANCELED"  # Binance API 사용 (미국식 철자)
    PENDING_CANCEL = "PENDING_CANCEL"
    REJECTED = "REJECTED"
    EXPIRED = "EXPIRED"
    EXPIRED_IN_MATCH = "EXPIRED_IN_MATCH"  # STP(자기 체결 방지)로 만료


class TimeInForce(str, Enum):
    """주문 유효 기간"""

    GTC = "GTC"  # Good Till Cancel
    IOC = "IOC"  # Immediate Or Cancel
    FOK = "FOK"  # Fill Or Kill
