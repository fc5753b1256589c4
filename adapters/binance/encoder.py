"""
요청 파라미터 인코더

파라미터를 정규 쿼리스트링(canonical query string)으로 직렬화.
서명 대상 문자열과 전송 문자열이 바이트 단위로 같아야 하므로
호출자가 준 순서를 그대로 유지하고 정렬/중복 제거를 하지 않는다.
"""

from collections.abc import Iterable, Mapping
from decimal import Decimal
from enum import Enum
from typing import Any
from urllib.parse import urlencode


Params = Mapping[str, Any] | Iterable[tuple[str, Any]]


def encode_value(value: Any) -> str:
    """파라미터 값 문자열 변환

    - bool: "true" / "false" (Binance 표기)
    - Enum: .value
    - Decimal: 지수 표기 없는 고정 소수점
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return encode_value(value.value)
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)


def iter_params(params: Params | None) -> list[tuple[str, str]]:
    """(이름, 문자열 값) 쌍 목록으로 변환

    None 값은 생략. 빈 문자열 값은 ValueError.
    """
    if params is None:
        return []

    items = params.items() if isinstance(params, Mapping) else params

    pairs: list[tuple[str, str]] = []
    for key, value in items:
        if value is None:
            continue
        encoded = encode_value(value)
        if encoded == "":
            raise ValueError(f"parameter '{key}' has an empty value")
        pairs.append((key, encoded))
    return pairs


def build_query_string(params: Params | None) -> str:
    """정규 쿼리스트링 생성

    Args:
        params: 매핑 또는 (이름, 값) 시퀀스. 삽입 순서 유지.

    Returns:
        URL 인코딩된 "k1=v1&k2=v2" 문자열 (파라미터가 없으면 "")
    """
    return urlencode(iter_params(params))
