"""
core/types.py 테스트
"""

import pytest

from core.types import ApiFamily, HttpMethod, OrderSide, SecurityType, TradingMode


class TestEnums:
    def test_str_serializable(self) -> None:
        assert ApiFamily.SPOT == "spot"
        assert TradingMode("testnet") is TradingMode.TESTNET
        assert OrderSide.BUY.value == "BUY"

    def test_invalid_value(self) -> None:
        with pytest.raises(ValueError):
            ApiFamily("options")


class TestHttpMethod:
    @pytest.mark.parametrize(
        "method,uses_body",
        [
            (HttpMethod.GET, False),
            (HttpMethod.DELETE, False),
            (HttpMethod.POST, True),
            (HttpMethod.PUT, True),
        ],
    )
    def test_uses_body(self, method: HttpMethod, uses_body: bool) -> None:
        assert method.uses_body is uses_body


class TestSecurityType:
    def test_requires_api_key(self) -> None:
        assert not SecurityType.NONE.requires_api_key
        assert SecurityType.API_KEY.requires_api_key
        assert SecurityType.SIGNED.requires_api_key
