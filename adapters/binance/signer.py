"""
HMAC-SHA256 요청 서명

recvWindow, timestamp를 파라미터에 추가한 뒤 한 번만 정규화하고,
그 문자열에 서명하여 같은 문자열 + signature를 전송용으로 반환.
"""

import hashlib
import hmac
from dataclasses import dataclass

from adapters.binance.encoder import Params, build_query_string, iter_params


def generate_signature(secret: str, payload: str) -> str:
    """HMAC-SHA256 서명 생성

    Args:
        secret: API 시크릿
        payload: URL 인코딩된 파라미터 문자열

    Returns:
        16진수(소문자) 서명 문자열
    """
    return hmac.new(
        secret.encode("utf-8"),
        payload.encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()


@dataclass(frozen=True)
class SignedQuery:
    """서명된 쿼리

    Attributes:
        payload: 서명 대상 문자열 (recvWindow, timestamp 포함)
        signature: payload의 HMAC-SHA256 hex
    """

    payload: str
    signature: str

    @property
    def query(self) -> str:
        """전송용 문자열 (payload + signature)"""
        if self.payload:
            return f"{self.payload}&signature={self.signature}"
        return f"signature={self.signature}"


class RequestSigner:
    """요청 서명기

    Args:
        secret: API 시크릿
        recv_window: 서버 허용 시간 오차 (밀리초)
    """

    def __init__(self, secret: str, recv_window: int):
        self._secret = secret
        self.recv_window = recv_window

    def __repr__(self) -> str:
        return f"RequestSigner(recv_window={self.recv_window})"

    def sign(self, params: Params | None, timestamp: int) -> SignedQuery:
        """파라미터 서명

        Args:
            params: 호출자 파라미터 (순서 유지)
            timestamp: 요청 시각 (밀리초)

        Returns:
            SignedQuery
        """
        augmented = iter_params(params)
        augmented.append(("recvWindow", str(self.recv_window)))
        augmented.append(("timestamp", str(timestamp)))

        payload = build_query_string(augmented)
        return SignedQuery(
            payload=payload,
            signature=generate_signature(self._secret, payload),
        )
