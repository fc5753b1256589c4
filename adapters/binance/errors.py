"""
Binance 클라이언트 에러 계층

호출자가 에러 종류별로 재시도 정책을 다르게 적용할 수 있도록
카테고리마다 별도 예외 클래스를 둔다.

- ConfigurationError: 필요한 자격 증명 없음 (네트워크 I/O 전에 발생)
- TransportError: 연결/타임아웃/DNS 실패 (재시도 가능)
- BinanceApiError: 거래소 {code, msg} 에러 (자동 재시도 대상 아님)
- UnparseableResponseError: 실패 상태 + 에러 포맷이 아닌 본문
- SchemaMismatchError: 성공 상태 + 기대 스키마와 다른 본문
- UnknownSymbolError: exchangeInfo에 없는 심볼 (클라이언트 측 판정)
"""


class BinanceError(Exception):
    """모든 클라이언트 에러의 기반 클래스"""

    retryable: bool = False


class ConfigurationError(BinanceError):
    """설정 에러

    서명/API 키가 필요한 호출에 자격 증명이 없거나,
    비활성화된 API 계열을 요청한 경우.
    """

    pass


class TransportError(BinanceError):
    """전송 계층 에러

    연결 실패, DNS 실패 등. 호출자 입장에서 항상 재시도 가능.
    """

    retryable = True

    def __init__(self, message: str, cause: Exception | None = None):
        self.message = message
        self.cause = cause
        super().__init__(message)


class TransportTimeoutError(TransportError):
    """설정된 타임아웃 내에 응답을 받지 못함"""

    pass


class BinanceApiError(BinanceError):
    """Binance API 에러

    응답 본문이 {"code": int, "msg": str} 형식일 때 발생.
    HTTP 상태와 무관 (200 응답에 에러 본문이 오는 경우 있음).
    code는 거래소 정의값 그대로 전달.
    """

    def __init__(
        self,
        code: int,
        message: str,
        status_code: int | None = None,
        retry_after: int | None = None,
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.retry_after = retry_after
        super().__init__(f"Binance API Error [{code}]: {message}")


class OrderError(BinanceApiError):
    """주문 관련 에러

    주문 생성/취소 실패 시 발생. 원래 code/message/status_code/retry_after 유지.
    """

    @classmethod
    def from_api_error(cls, error: BinanceApiError) -> "OrderError":
        return cls(
            code=error.code,
            message=error.message,
            status_code=error.status_code,
            retry_after=error.retry_after,
        )


class UnparseableResponseError(BinanceError):
    """실패 상태 코드 + 해석 불가 본문

    진단을 위해 원본 본문을 그대로 보관.
    """

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"HTTP {status_code}: {body}")


class SchemaMismatchError(BinanceError):
    """성공 응답이 기대 스키마와 일치하지 않음

    런타임 장애가 아니라 클라이언트/거래소 계약 불일치를 의미.
    """

    def __init__(self, body: str, detail: str = ""):
        self.body = body
        self.detail = detail
        message = f"Unexpected response body: {body}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class UnknownSymbolError(BinanceError):
    """거래소 심볼 목록에 없는 심볼

    symbol은 호출자가 전달한 원래 문자열 (대문자 변환 전).
    """

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"Unknown symbol: {symbol}")
