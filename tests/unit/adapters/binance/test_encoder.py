"""
파라미터 인코더 테스트
"""

from decimal import Decimal

import pytest

from adapters.binance.encoder import build_query_string, encode_value, iter_params
from core.types import OrderSide, TimeInForce


class TestEncodeValue:
    """값 문자열 변환"""

    def test_bool(self) -> None:
        assert encode_value(True) == "true"
        assert encode_value(False) == "false"

    def test_enum_uses_value(self) -> None:
        assert encode_value(OrderSide.BUY) == "BUY"
        assert encode_value(TimeInForce.GTC) == "GTC"

    def test_decimal_plain_notation(self) -> None:
        """지수 표기 없이 변환"""
        assert encode_value(Decimal("1E-7")) == "0.0000001"
        assert encode_value(Decimal("0.00100000")) == "0.00100000"

    def test_int_and_str(self) -> None:
        assert encode_value(500) == "500"
        assert encode_value("BTCUSDT") == "BTCUSDT"


class TestBuildQueryString:
    """정규 쿼리스트링 생성"""

    def test_preserves_insertion_order(self) -> None:
        """정렬하지 않음 - 순서는 호출자 책임"""
        assert build_query_string({"a": 1, "b": 2}) == "a=1&b=2"
        assert build_query_string({"b": 2, "a": 1}) == "b=2&a=1"

    def test_different_order_different_output(self) -> None:
        assert build_query_string({"a": 1, "b": 2}) != build_query_string({"b": 2, "a": 1})

    def test_accepts_pair_sequence(self) -> None:
        pairs = [("symbol", "BTCUSDT"), ("side", OrderSide.SELL), ("quantity", Decimal("1.5"))]

        assert build_query_string(pairs) == "symbol=BTCUSDT&side=SELL&quantity=1.5"

    def test_does_not_deduplicate(self) -> None:
        assert build_query_string([("a", 1), ("a", 2)]) == "a=1&a=2"

    def test_none_values_omitted(self) -> None:
        assert build_query_string({"symbol": "BTCUSDT", "limit": None}) == "symbol=BTCUSDT"

    def test_empty_value_rejected(self) -> None:
        with pytest.raises(ValueError, match="symbol"):
            build_query_string({"symbol": ""})

    def test_percent_encoding(self) -> None:
        """URL 쿼리 규칙에 따른 인코딩"""
        query = build_query_string({"symbols": '["BTCUSDT","ETHUSDT"]', "note": "a b&c"})

        assert query == "symbols=%5B%22BTCUSDT%22%2C%22ETHUSDT%22%5D&note=a+b%26c"

    def test_empty_params(self) -> None:
        assert build_query_string(None) == ""
        assert build_query_string({}) == ""

    def test_pure_function(self) -> None:
        """반복 호출해도 같은 결과, 입력 변경 없음"""
        params = {"symbol": "BTCUSDT", "limit": 10}

        first = build_query_string(params)
        second = build_query_string(params)

        assert first == second
        assert params == {"symbol": "BTCUSDT", "limit": 10}


class TestIterParams:
    def test_returns_string_pairs(self) -> None:
        assert iter_params({"a": 1, "b": True}) == [("a", "1"), ("b", "true")]
