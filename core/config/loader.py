"""
설정 로더

binance.yaml 로드, 환경 변수 자격 증명, API 계열별 엔드포인트 설정 생성
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from core.constants import BinanceEndpoints, Defaults, EnvVars, Paths
from core.types import ApiFamily, TradingMode


ALL_FAMILIES: frozenset[ApiFamily] = frozenset(ApiFamily)


@dataclass(frozen=True)
class Credentials:
    """API 자격 증명

    불변 데이터 구조. repr에 키가 노출되지 않도록 repr=False.
    둘 다 선택값이며, 없는 경우 해당 키가 필요한 호출은 전송 전에 실패한다.
    """

    api_key: str | None = field(default=None, repr=False)
    api_secret: str | None = field(default=None, repr=False)

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)

    @property
    def has_secret(self) -> bool:
        return bool(self.api_secret)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Credentials":
        """환경 변수에서 자격 증명 로드

        BINANCE_API_KEY=$YOUR_API_KEY
        BINANCE_API_SECRET_KEY=$YOUR_SECRET_KEY
        """
        if environ is None:
            environ = os.environ
        return cls(
            api_key=environ.get(EnvVars.API_KEY) or None,
            api_secret=environ.get(EnvVars.API_SECRET) or None,
        )


@dataclass(frozen=True)
class EndpointConfig:
    """단일 API 계열의 연결 설정

    Attributes:
        base_url: REST 베이스 URL
        timeout: 요청 타임아웃 (초, 연결 + 응답 전체)
        recv_window: 서명 요청의 recvWindow (밀리초)
    """

    base_url: str
    timeout: float = Defaults.TIMEOUT_SEC
    recv_window: int = Defaults.RECV_WINDOW_MS


@dataclass(frozen=True)
class ClientConfig:
    """클라이언트 전체 설정

    계열마다 REST 호스트가 다르므로 계열별 URL을 따로 보관한다.
    capabilities는 활성화된 API 계열 집합.
    """

    rest_api_endpoint: str = BinanceEndpoints.PROD_SPOT_REST_URL
    futures_rest_api_endpoint: str = BinanceEndpoints.PROD_FUTURES_REST_URL
    coin_futures_rest_api_endpoint: str = BinanceEndpoints.PROD_COIN_FUTURES_REST_URL
    timeout: float = Defaults.TIMEOUT_SEC
    recv_window: int = Defaults.RECV_WINDOW_MS
    capabilities: frozenset[ApiFamily] = ALL_FAMILIES

    @classmethod
    def production(cls, **overrides) -> "ClientConfig":
        """실거래 호스트 설정"""
        return cls(**overrides)

    @classmethod
    def testnet(cls, **overrides) -> "ClientConfig":
        """테스트넷 호스트 설정"""
        values = {
            "rest_api_endpoint": BinanceEndpoints.TEST_SPOT_REST_URL,
            "futures_rest_api_endpoint": BinanceEndpoints.TEST_FUTURES_REST_URL,
            "coin_futures_rest_api_endpoint": BinanceEndpoints.TEST_COIN_FUTURES_REST_URL,
        }
        values.update(overrides)
        return cls(**values)

    @classmethod
    def binance_us(cls, **overrides) -> "ClientConfig":
        """Binance.US 설정 (spot만 지원)"""
        values = {
            "rest_api_endpoint": BinanceEndpoints.US_SPOT_REST_URL,
            "capabilities": frozenset({ApiFamily.SPOT}),
        }
        values.update(overrides)
        return cls(**values)

    @classmethod
    def for_mode(cls, mode: TradingMode, **overrides) -> "ClientConfig":
        if mode == TradingMode.PRODUCTION:
            return cls.production(**overrides)
        return cls.testnet(**overrides)

    def is_enabled(self, family: ApiFamily) -> bool:
        return family in self.capabilities

    def base_url_for(self, family: ApiFamily) -> str:
        if family == ApiFamily.USD_M_FUTURES:
            return self.futures_rest_api_endpoint
        if family == ApiFamily.COIN_M_FUTURES:
            return self.coin_futures_rest_api_endpoint
        return self.rest_api_endpoint

    def endpoint_for(self, family: ApiFamily) -> EndpointConfig:
        """API 계열별 엔드포인트 설정 반환"""
        return EndpointConfig(
            base_url=self.base_url_for(family),
            timeout=self.timeout,
            recv_window=self.recv_window,
        )


@dataclass(frozen=True)
class Settings:
    """파일에서 로드한 설정 묶음"""

    mode: TradingMode
    config: ClientConfig
    credentials: Credentials


class ConfigLoadError(Exception):
    """설정 로드 실패 예외"""

    pass


# YAML 키 → ClientConfig 필드 (URL 재정의용)
_URL_OVERRIDE_KEYS = {
    "spot": "rest_api_endpoint",
    "usd_m_futures": "futures_rest_api_endpoint",
    "coin_m_futures": "coin_futures_rest_api_endpoint",
}


def _parse_capabilities(raw: object) -> frozenset[ApiFamily]:
    if raw is None:
        return ALL_FAMILIES
    if not isinstance(raw, list):
        raise ConfigLoadError("'capabilities'는 리스트여야 합니다")

    families = set()
    for name in raw:
        try:
            families.add(ApiFamily(name))
        except ValueError as e:
            valid = [f.value for f in ApiFamily]
            raise ValueError(
                f"유효하지 않은 capability입니다: '{name}'. 유효한 값: {valid}"
            ) from e
    return frozenset(families)


def _get_section(data: dict, key: str) -> dict:
    """선택 섹션 반환 (없으면 빈 dict, 매핑이 아니면 ConfigLoadError)"""
    section = data.get(key)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigLoadError(f"'{key}' 섹션은 매핑이어야 합니다")
    return section


def load_settings(
    path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """binance.yaml 파일 로드

    예시:
        mode: testnet
        timeout: 10
        recv_window: 5000
        capabilities: [spot, usd_m_futures]
        endpoints:
          spot: https://testnet.binance.vision
        credentials:
          api_key: "..."
          api_secret: "..."

    credentials 섹션이 없거나 비어 있으면 환경 변수에서 로드.

    Args:
        path: 설정 파일 경로 (None이면 기본 경로 사용)
        environ: 환경 변수 매핑 (None이면 os.environ)

    Returns:
        Settings 인스턴스

    Raises:
        ConfigLoadError: 파일이 없거나 형식이 잘못된 경우
        ValueError: 유효하지 않은 mode 또는 capability인 경우
    """
    if path is None:
        path = Paths.SETTINGS_FILE

    if not path.exists():
        raise ConfigLoadError(f"설정 파일을 찾을 수 없습니다: {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"설정 파일 파싱 실패: {e}") from e

    if data is None:
        raise ConfigLoadError("설정 파일이 비어 있습니다")
    if not isinstance(data, dict):
        raise ConfigLoadError("설정 파일 최상위는 매핑이어야 합니다")

    mode_str = data.get("mode", TradingMode.PRODUCTION.value)
    try:
        mode = TradingMode(mode_str)
    except ValueError as e:
        valid_modes = [m.value for m in TradingMode]
        raise ValueError(
            f"유효하지 않은 mode입니다: '{mode_str}'. "
            f"유효한 값: {valid_modes}"
        ) from e

    overrides: dict[str, object] = {}
    if "timeout" in data:
        overrides["timeout"] = float(data["timeout"])
    if "recv_window" in data:
        overrides["recv_window"] = int(data["recv_window"])
    if "capabilities" in data:
        overrides["capabilities"] = _parse_capabilities(data["capabilities"])

    endpoints = _get_section(data, "endpoints")
    for key, field_name in _URL_OVERRIDE_KEYS.items():
        if endpoints.get(key):
            overrides[field_name] = endpoints[key]

    config = ClientConfig.for_mode(mode, **overrides)

    cred_section = _get_section(data, "credentials")
    env_credentials = Credentials.from_env(environ)
    credentials = Credentials(
        api_key=cred_section.get("api_key") or env_credentials.api_key,
        api_secret=cred_section.get("api_secret") or env_credentials.api_secret,
    )

    return Settings(mode=mode, config=config, credentials=credentials)
