"""
응답 분류기

HTTP 상태 코드와 본문 형태로 성공/에러 종류를 판정하고
성공 본문은 호출자가 기대하는 타입으로 변환.
"""

import json
from collections.abc import Mapping
from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter, ValidationError

from adapters.binance.errors import (
    BinanceApiError,
    SchemaMismatchError,
    UnparseableResponseError,
)


# 2xx 상태 + {"code": 200, "msg": ...} 성공 응답
SUCCESS_ENVELOPE_CODE = 200

_NOT_JSON = object()


def is_success_status(status_code: int) -> bool:
    return 200 <= status_code < 300


def is_error_envelope(data: Any) -> bool:
    """{"code": int, "msg": str} 에러 본문 여부"""
    if not isinstance(data, dict):
        return False
    code = data.get("code")
    msg = data.get("msg")
    # bool은 int의 하위 타입이므로 제외
    return isinstance(code, int) and not isinstance(code, bool) and isinstance(msg, str)


@lru_cache(maxsize=128)
def _adapter_for(response_model: Any) -> TypeAdapter:
    return TypeAdapter(response_model)


def _parse_retry_after(headers: Mapping[str, str] | None) -> int | None:
    if not headers:
        return None
    for key, value in headers.items():
        if key.lower() == "retry-after":
            try:
                return int(value)
            except (TypeError, ValueError):
                return None
    return None


def _decode_json(text: str) -> Any:
    try:
        return json.loads(text)
    except ValueError:
        return _NOT_JSON


def classify_response(
    status_code: int,
    text: str,
    response_model: Any = None,
    headers: Mapping[str, str] | None = None,
) -> Any:
    """응답 분류 및 역직렬화

    Args:
        status_code: HTTP 상태 코드
        text: 응답 본문 원문
        response_model: 기대 타입 (pydantic 모델, list[...] 등). None이면 JSON 그대로
        headers: 응답 헤더 (Retry-After 추출용)

    Returns:
        역직렬화된 값

    Raises:
        BinanceApiError: {code, msg} 에러 본문 (상태 무관)
        UnparseableResponseError: 실패 상태 + 에러 포맷이 아닌 본문
        SchemaMismatchError: 성공 상태 + JSON 아님 또는 스키마 불일치
    """
    data = _decode_json(text)
    success = is_success_status(status_code)

    # USD-M/COIN-M 선물의 DELETE allOpenOrders, POST marginType, POST positionSide/dual은
    # 성공 시 {"code": 200, "msg": "success"} 형태로 응답하므로 에러로 보지 않음
    if is_error_envelope(data) and not (success and data["code"] == SUCCESS_ENVELOPE_CODE):
        raise BinanceApiError(
            code=data["code"],
            message=data["msg"],
            status_code=status_code,
            retry_after=_parse_retry_after(headers),
        )

    if not success:
        raise UnparseableResponseError(status_code=status_code, body=text)

    if data is _NOT_JSON:
        raise SchemaMismatchError(body=text, detail="response is not valid JSON")

    if response_model is None:
        return data

    try:
        return _adapter_for(response_model).validate_python(data)
    except ValidationError as e:
        raise SchemaMismatchError(
            body=text,
            detail=f"{e.error_count()} validation error(s) for {e.title}",
        ) from e
